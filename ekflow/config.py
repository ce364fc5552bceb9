"""Configuration classes for ekflow components."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class CliConfig:
    """Defaults for the interactive benchmark loop."""

    # Directory that bare benchmark names are resolved against
    benchmarks_dir: str = "benchmarks"

    # Suffix appended to names that do not already carry it
    default_suffix: str = ".txt"

    # Input that terminates the loop
    exit_token: str = "0"

    prompt: str = "\nEnter the benchmark file name (eg-: bridge_3,ladder_4): "

    def resolve_benchmark(self, name: str) -> Path:
        """Map a benchmark name such as ``bridge_3`` to its file path."""
        filename = name if name.endswith(self.default_suffix) else name + self.default_suffix
        return Path(self.benchmarks_dir) / filename


# Global configuration instance
CLI_CONFIG = CliConfig()

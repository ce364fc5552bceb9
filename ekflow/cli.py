"""Command-line interface for ekflow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Callable, Dict, List, Optional

from ekflow.algorithms.max_flow import MaxFlowEngine
from ekflow.algorithms.min_cut import min_cut
from ekflow.config import CLI_CONFIG, CliConfig
from ekflow.io import NetworkSpec, load_network
from ekflow.logging import get_logger, set_global_log_level
from ekflow.report import (
    format_augmenting_paths,
    format_edge_table,
    format_min_cut,
    format_number,
)
from ekflow.types.dto import MaxFlowResult

logger = get_logger(__name__)

BANNER_RULE = "*" * 39


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _solve_spec(
    spec: NetworkSpec, source: Optional[int] = None, sink: Optional[int] = None
) -> tuple[int, int, MaxFlowResult]:
    """Resolve terminals, run the engine and return ``(source, sink, result)``."""
    src, dst = spec.resolve_terminals(source, sink)
    network = spec.network
    logger.info(
        f"Solving max flow {src}->{dst} on {network.num_nodes} nodes, "
        f"{len(network)} edges (total capacity {format_number(network.total_capacity)})"
    )
    start = perf_counter()
    result = MaxFlowEngine(network, src, dst).solve()
    logger.info(
        f"Found max flow {format_number(result.total_flow)} with "
        f"{len(result.paths)} augmenting paths in {_format_duration(perf_counter() - start)}"
    )
    return src, dst, result


def _print_result(result: MaxFlowResult) -> None:
    print("\nFinal Augmenting Paths and Flow Calculations:")
    for line in format_augmenting_paths(result):
        print(line)
    print(f"\nMaximum Flow: {format_number(result.total_flow)}")


def _run_solve(
    path: Path,
    source: Optional[int] = None,
    sink: Optional[int] = None,
    show_edges: bool = False,
    show_min_cut: bool = False,
    as_json: bool = False,
) -> None:
    """Solve a single network file and print the result.

    Args:
        path: Network description (text edge list or YAML).
        source: Source node; defaults to the file's value or 0.
        sink: Sink node; defaults to the file's value or the last node.
        show_edges: Also print the per-edge flow table.
        show_min_cut: Also print the minimum cut.
        as_json: Print a JSON document instead of text.
    """
    logger.info(f"Loading network from: {path}")
    try:
        spec = load_network(path)
        src, dst, result = _solve_spec(spec, source, sink)
        network = spec.network

        if as_json:
            payload: Dict[str, Any] = {"source": src, "sink": dst}
            payload.update(result.to_dict())
            if show_edges:
                payload["edges"] = [e.to_dict() for e in network.edge_flows()]
            if show_min_cut:
                payload["min_cut"] = min_cut(network, src).to_dict()
            print(json.dumps(payload, indent=2))
            return

        _print_result(result)
        if show_edges:
            print("\nEdge Flows:")
            print(format_edge_table(network))
        if show_min_cut:
            print("\nMinimum Cut:")
            for line in format_min_cut(min_cut(network, src)):
                print(line)

    except FileNotFoundError:
        logger.error(f"Network file not found: {path}")
        print(f"ERROR: Network file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve network: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to solve network: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_interactive(
    config: CliConfig = CLI_CONFIG,
    input_func: Callable[[str], str] = input,
) -> None:
    """Prompt for benchmark names until the exit token or end of input.

    Each name is resolved against ``config.benchmarks_dir`` and solved from
    node 0 to the last node. Errors are reported and the loop continues.
    """
    print(BANNER_RULE)
    print("         Network Flow Algorithm        ")
    print(BANNER_RULE)
    print(f"     Enter '{config.exit_token}' to exit the program     ")
    print(BANNER_RULE)

    while True:
        try:
            name = input_func(config.prompt).strip()
        except EOFError:
            break
        if name == config.exit_token:
            break
        if not name:
            continue

        path = config.resolve_benchmark(name)
        try:
            spec = load_network(path)
            _, _, result = _solve_spec(spec)
            _print_result(result)
        except OSError as e:
            logger.error(f"Error reading the file {path}: {e}")
            print(f"Error reading the file: {e}")
        except Exception as e:
            logger.error(f"Failed to solve {path}: {type(e).__name__}: {e}")
            print(f"An error occurred: {type(e).__name__}: {e}")

    print("\n" + BANNER_RULE)
    print("    Program terminated successfully!   ")
    print(BANNER_RULE)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ekflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="ekflow",
        description="Compute maximum flow with the Edmonds-Karp algorithm.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress info logging (warnings only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,interactive}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Solve a network file")
    solve_parser.add_argument(
        "network", type=Path, help="Path to network description (.txt or .yaml)"
    )
    solve_parser.add_argument(
        "--source", "-s", type=int, default=None, help="Source node (default: 0)"
    )
    solve_parser.add_argument(
        "--sink", "-t", type=int, default=None, help="Sink node (default: last node)"
    )
    solve_parser.add_argument(
        "--edges", action="store_true", help="Print the flow on every edge"
    )
    solve_parser.add_argument(
        "--min-cut", action="store_true", help="Print the minimum cut"
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    interactive_parser = subparsers.add_parser(
        "interactive", help="Repeatedly prompt for benchmark files to solve"
    )
    interactive_parser.add_argument(
        "--benchmarks",
        "-b",
        type=Path,
        default=None,
        help=f"Directory holding benchmark files (default: {CLI_CONFIG.benchmarks_dir})",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "solve":
        _run_solve(
            path=args.network,
            source=args.source,
            sink=args.sink,
            show_edges=args.edges,
            show_min_cut=args.min_cut,
            as_json=args.json,
        )
    elif args.command == "interactive":
        config = CLI_CONFIG
        if args.benchmarks is not None:
            config = CliConfig(benchmarks_dir=str(args.benchmarks))
        _run_interactive(config)


if __name__ == "__main__":
    main()

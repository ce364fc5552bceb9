"""Text rendering of max-flow results for console output."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ekflow.model.network import Network
from ekflow.types.base import Capacity, NodeID
from ekflow.types.dto import MaxFlowResult, MinCut


def format_number(value: Capacity) -> str:
    """Return a flow or capacity value without spurious decimals.

    Integers are printed as-is; floats keep up to six decimals with trailing
    zeros trimmed.

    Examples:
        10 -> "10"; 2.5 -> "2.5"; 3.0 -> "3"; 0.1 + 0.2 -> "0.3".
    """
    if isinstance(value, int):
        return str(value)
    s = f"{float(value):.6f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_path(path: Sequence[NodeID]) -> str:
    return " -> ".join(str(node) for node in path)


def format_augmenting_paths(result: MaxFlowResult) -> List[str]:
    """Return one ``Path i: a -> b with flow = x`` line per augmentation."""
    return [
        f"Path {i}: {format_path(p.path)} with flow = {format_number(p.amount)}"
        for i, p in enumerate(result.paths, start=1)
    ]


def format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 6,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows.
        min_width: Minimum column width.
        max_col_width: Clip cells longer than this with an ASCII ellipsis.

    Returns:
        Formatted table string, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = [
        max(max(len(row[col]) for row in all_data), min_width)
        for col in range(len(clipped_headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in clipped_rows)
    return "\n".join(lines)


def format_edge_table(network: Network) -> str:
    """Tabulate every edge's flow against its capacity, in insertion order."""
    rows = [
        [
            str(edge.index),
            f"{edge.source}->{edge.destination}",
            format_number(edge.flow),
            format_number(edge.capacity),
            "yes" if edge.capacity > 0 and edge.residual_capacity <= 0 else "",
        ]
        for edge in network.edges
    ]
    return format_table(["#", "Edge", "Flow", "Capacity", "Saturated"], rows)


def format_min_cut(cut: MinCut) -> List[str]:
    """Describe a min cut: the source side, the crossing edges and the total."""
    lines = [
        "Source side: {" + ", ".join(str(n) for n in sorted(cut.source_side)) + "}",
    ]
    for e in cut.edges:
        lines.append(
            f"  {e.source}->{e.destination} "
            f"({format_number(e.flow)}/{format_number(e.capacity)})"
        )
    lines.append(f"Cut capacity: {format_number(cut.capacity)}")
    return lines

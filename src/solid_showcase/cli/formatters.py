"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text with the demo output exactly as written
- JSON and YAML dumps
- Rich tables for demo listings and runs
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

OUTPUT_FORMATS = ["text", "json", "yaml", "table"]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "text":
        return format_text_output(data)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "runs" in data:
        return format_runs_text(data["runs"])
    elif isinstance(data, dict) and "demos" in data:
        return format_demos_text(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demo_detail(data["demo"])
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "runs" in data:
        return format_runs_table(data["runs"])
    elif isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_table([data["demo"]])
    else:
        return json.dumps(data, indent=2, default=str)


def format_runs_text(runs: List[Dict]) -> str:
    """
    Format demo runs as plain text.

    A single run prints its lines exactly. Several runs are each preceded by a
    header naming the principle, the variant and the demo title.
    """
    if len(runs) == 1:
        return "\n".join(runs[0].get("lines", []))

    lines = []
    for i, run in enumerate(runs):
        if i > 0:
            lines.append("")  # Blank line between runs
        lines.append(
            f"== {str(run.get('principle', 'N/A')).upper()} "
            f"({run.get('variant', 'N/A')}): {run.get('title', 'N/A')} =="
        )
        lines.extend(run.get("lines", []))
    return "\n".join(lines)


def format_demos_text(demos: List[Dict]) -> str:
    if not demos:
        return "No demos registered."

    width = max(len(demo.get("name", "")) for demo in demos)
    return "\n".join(
        f"{demo.get('principle', 'N/A'):<4} {demo.get('name', 'N/A'):<{width}}  {demo.get('title', 'N/A')}"
        for demo in demos
    )


def format_demo_detail(demo: Dict) -> str:
    lines = [
        f"Principle: {demo.get('principle', 'N/A')}",
        f"  Name: {demo.get('name', 'N/A')}",
        f"  Title: {demo.get('title', 'N/A')}",
        f"  Summary: {demo.get('summary', 'N/A')}",
    ]
    return "\n".join(lines)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")


def format_demos_table(demos: List[Dict]) -> str:
    """Format demos as a table using Rich."""
    if not demos:
        return "No demos registered."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Key", style="cyan", width=5)
    table.add_column("Principle", style="green", width=32)
    table.add_column("Demo", style="blue", width=30)
    table.add_column("Summary", style="yellow")

    for demo in demos:
        table.add_row(
            str(demo.get("principle", "N/A")),
            str(demo.get("name", "N/A")),
            str(demo.get("title", "N/A")),
            str(demo.get("summary", "N/A")),
        )
    return _render(table)


def format_runs_table(runs: List[Dict]) -> str:
    """Format demo runs as a table using Rich."""
    if not runs:
        return "No demos run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Key", style="cyan", width=5)
    table.add_column("Variant", style="green", width=8)
    table.add_column("Output", style="yellow")

    for run in runs:
        table.add_row(
            str(run.get("principle", "N/A")),
            str(run.get("variant", "N/A")),
            "\n".join(run.get("lines", [])),
        )
    return _render(table)

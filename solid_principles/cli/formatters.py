"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for example listings and comparisons
- Plain text reports
"""

import json
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table
import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "text":
        return format_text_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"])
    elif isinstance(data, dict) and "comparison" in data:
        return format_comparison_table(data["comparison"])
    else:
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_list(data["examples"])
    elif isinstance(data, dict) and "comparison" in data:
        return format_comparison_text(data["comparison"])
    else:
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _render_table(table: Table) -> str:
    """Capture Rich output as string."""
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_examples_table(examples: List[Dict[str, Any]]) -> str:
    """Format registered examples as a table using Rich."""
    if not examples:
        return "No examples found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Principle", style="cyan")
    table.add_column("Variant", style="green")
    table.add_column("Title", style="blue")
    table.add_column("Description")

    for e in examples:
        table.add_row(
            str(e.get("principle", "")),
            str(e.get("variant", "")),
            str(e.get("title", "")),
            str(e.get("description", "")),
        )

    return _render_table(table)


def format_examples_list(examples: List[Dict[str, Any]]) -> str:
    """Format registered examples one per line."""
    if not examples:
        return "No examples found."
    lines = []
    for e in examples:
        key = f"{e.get('principle', '')}/{e.get('variant', '')}"
        lines.append(f"{key:<16} {e.get('title', '')} - {e.get('description', '')}")
    return "\n".join(lines)


def format_comparison_table(comparison: Dict[str, Any]) -> str:
    """Format a comparison as a two-column Rich table."""
    original = comparison.get("original_output", [])
    refactored = comparison.get("refactored_output", [])
    status = "identical" if comparison.get("identical") else "different"

    table = Table(
        title=f"{comparison.get('principle', '').upper()}: output {status}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("original", style="yellow")
    table.add_column("refactored", style="green")

    for i in range(max(len(original), len(refactored))):
        table.add_row(
            original[i] if i < len(original) else "",
            refactored[i] if i < len(refactored) else "",
        )

    return _render_table(table)


def format_comparison_text(comparison: Dict[str, Any]) -> str:
    """Format a comparison as a plain text report."""
    lines = [f"{comparison.get('principle', '').upper()}"]
    lines.append("original:")
    lines.extend(f"  {line}" for line in comparison.get("original_output", []))
    lines.append("refactored:")
    lines.extend(f"  {line}" for line in comparison.get("refactored_output", []))
    if comparison.get("identical"):
        lines.append("output identical")
    else:
        for line in comparison.get("added_lines", []):
            lines.append(f"+ {line}")
        for line in comparison.get("removed_lines", []):
            lines.append(f"- {line}")
    return "\n".join(lines)

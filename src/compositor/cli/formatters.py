"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML serialization of command results
- an indented outline of component trees
"""

import json
from typing import Any, Dict, List

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False)
    if format_type == "tree":
        return format_tree_output(data)
    # Default to JSON
    return json.dumps(data, indent=2, default=str)


def format_tree_output(data: Any) -> str:
    """Indented outline of a ``tree`` entry, falling back to JSON."""
    if not isinstance(data, dict) or "tree" not in data:
        return json.dumps(data, indent=2, default=str)
    lines: List[str] = []
    _outline(data["tree"], 0, lines)
    report = data.get("dispatch")
    if report:
        lines.append("")
        lines.append(f"{report['operation']}:")
        for entry in report["entries"]:
            lines.append(f"  {entry['path']}: {entry['result']}")
    return "\n".join(lines)


def _outline(node: Dict[str, Any], level: int, lines: List[str]) -> None:
    indent = "  " * level
    if node["kind"] == "composite":
        lines.append(f"{indent}+ {node['name']}")
        for child in node["children"]:
            _outline(child, level + 1, lines)
    else:
        payload = node.get("payload")
        family = payload.get("family") if isinstance(payload, dict) else None
        suffix = f" ({family})" if family else ""
        lines.append(f"{indent}- {node['name']}{suffix}")


def _plain(data: Any) -> Any:
    """Round-trip through JSON so YAML only sees plain types."""
    return json.loads(json.dumps(data, default=str))

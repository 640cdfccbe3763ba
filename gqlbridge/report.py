"""Render the tool catalog summary and write the JSON catalog.

Takes the tools from extractor and produces the console report
(templates/report.txt.j2) or tools.json for a tool-serving layer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jinja2

from .models import ToolDefinition
from .naming import OperationKind

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _summary_line(description: str) -> str:
    lines = description.strip().splitlines()
    return lines[0].strip() if lines else ""


def build_report_context(tools: list[ToolDefinition]) -> dict[str, Any]:
    """Build the template context for the catalog report."""
    rows = [
        {
            "name": tool.name,
            "summary": _summary_line(tool.description),
            "params": tool.param_count,
            "required": tool.required_count,
        }
        for tool in tools
    ]
    query_prefix = OperationKind.QUERY.prefix + "_"
    mutation_prefix = OperationKind.MUTATION.prefix + "_"
    return {
        "tools": rows,
        "tool_count": len(tools),
        "query_count": sum(1 for t in tools if t.name.startswith(query_prefix)),
        "mutation_count": sum(1 for t in tools if t.name.startswith(mutation_prefix)),
        "name_width": max([len(t.name) for t in tools] + [4]),
    }


def render_report(tools: list[ToolDefinition]) -> str:
    """Render the catalog summary report."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("report.txt.j2")
    return template.render(**build_report_context(tools))


def write_catalog(tools: list[ToolDefinition], path: Path) -> Path:
    """Write the catalog as a JSON array of MCP tool definitions."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [tool.to_dict() for tool in tools]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path

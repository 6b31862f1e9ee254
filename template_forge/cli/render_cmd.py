"""Render command implementation"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from template_forge.models.result import Rejected
from template_forge.models.template import FieldKind, TemplateSchema
from template_forge.services.renderer import RendererService
from template_forge.utils.config import get_settings

console = Console()


def render_command(
    template: TemplateSchema,
    data: Optional[str] = None,
    data_file: Optional[str] = None,
    assignments: Optional[List[str]] = None,
    output: Optional[str] = None,
    json_output: bool = False,
) -> bool:
    """Collect field values, render the template and report the outcome.

    Returns True when a document was rendered.
    """
    try:
        values = collect_values(template, data, data_file, assignments or [])
    except ValueError as e:
        _report_error(str(e), json_output)
        return False

    renderer = RendererService.from_settings(get_settings())
    result = renderer.render(template, values)

    if isinstance(result, Rejected):
        if json_output:
            typer.echo(result.model_dump_json(indent=2))
        else:
            _print_violations(template, result)
        return False

    if output:
        try:
            Path(output).write_text(result.document, encoding="utf-8")
        except OSError as e:
            _report_error(f"Cannot write {output}: {e.strerror or e}", json_output)
            return False

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
    elif output:
        console.print(f"[green]OK: Document written to {escape(output)}[/green]")
    else:
        typer.echo(result.document)

    return True


def collect_values(
    template: TemplateSchema,
    data: Optional[str],
    data_file: Optional[str],
    assignments: List[str],
) -> Dict[str, Any]:
    """
    Merge field values from a data file, inline JSON and key=value pairs.

    Later sources win: file, then --data, then --set.

    Raises:
        ValueError: If any source cannot be parsed
    """
    values: Dict[str, Any] = {}

    if data_file:
        path = Path(data_file)
        if not path.exists():
            raise ValueError(f"File not found: {data_file}")
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid data file {data_file}: {e}")
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(f"Data file {data_file} must contain a mapping")
        values.update(loaded or {})

    if data:
        try:
            loaded = json.loads(data)
        except json.JSONDecodeError:
            raise ValueError("Invalid JSON data")
        if not isinstance(loaded, dict):
            raise ValueError("JSON data must be an object")
        values.update(loaded)

    values.update(parse_assignments(template, assignments))
    return values


def parse_assignments(template: TemplateSchema, assignments: List[str]) -> Dict[str, Any]:
    """Turn repeated key=value options into field values.

    Values stay strings; list-of-string fields collect every occurrence.
    """
    values: Dict[str, Any] = {}
    for item in assignments:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {item!r}")

        spec = template.field(key)
        if spec is not None and spec.kind == FieldKind.LIST_OF_STRING:
            values.setdefault(key, []).append(value)
        else:
            values[key] = value
    return values


def _print_violations(template: TemplateSchema, result: Rejected):
    console.print(f"[red]Cannot render '{escape(template.name)}': {len(result.violations)} problem(s)[/red]")

    table = Table()
    table.add_column("Field", style="cyan")
    table.add_column("Reason", style="yellow")
    table.add_column("Message")

    for violation in result.violations:
        table.add_row(violation.field_name, violation.reason.value, escape(violation.message))

    console.print(table)


def _report_error(message: str, json_output: bool):
    if json_output:
        typer.echo(json.dumps({"error": message}, ensure_ascii=False))
    else:
        console.print(f"[red]Error: {escape(message)}[/red]")

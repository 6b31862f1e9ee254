"""Main CLI application"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from template_forge.cli.render_cmd import render_command
from template_forge.models.template import TemplateError
from template_forge.services.loader import TemplateLoader
from template_forge.services.registry import TemplateRegistry
from template_forge.utils.config import get_settings

app = typer.Typer(
    name="template-forge",
    help="Fill documentation templates from validated field values",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    templates_dir: Optional[str] = typer.Option(
        None, "--templates-dir", "-T", help="Directory of Markdown templates"
    ),
):
    """Configure logging and the template directory"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    ctx.obj = {"templates_dir": templates_dir or settings.templates_dir}


def _registry(ctx: typer.Context) -> TemplateRegistry:
    return TemplateRegistry((ctx.obj or {}).get("templates_dir"))


@app.command("templates")
def templates(ctx: typer.Context):
    """List available templates"""
    registry = _registry(ctx)
    template_list = registry.list_templates()

    for error in registry.errors:
        console.print(f"[yellow]Skipped {escape(error)}[/yellow]")

    if not template_list:
        console.print("[yellow]No templates available[/yellow]")
        return

    table = Table(title="Available Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Fields", justify="right")
    table.add_column("Required", justify="right")

    for template in template_list:
        table.add_row(
            template.name,
            escape(template.title or ""),
            str(len(template.fields)),
            str(sum(1 for f in template.fields if f.required)),
        )

    console.print(table)
    console.print("\nUse [cyan]template-forge template <name> --fields[/cyan] to see the fields")


@app.command("template")
def template_detail(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Template name"),
    fields: bool = typer.Option(False, "--fields", "-f", help="Show declared fields"),
):
    """Show template details"""
    registry = _registry(ctx)
    template = registry.get_template(name)

    if not template:
        console.print(f"[red]Template '{escape(name)}' not found[/red]")
        available = ", ".join(t.name for t in registry.list_templates())
        console.print(f"Available templates: {available or 'none'}")
        raise typer.Exit(code=1)

    console.print(Panel(
        f"[bold]{escape(template.title or template.name)}[/bold]\n\n{escape(template.description or '')}",
        title=f"Template: {template.name}",
        border_style="blue",
    ))

    if fields:
        table = Table(title="Fields")
        table.add_column("Field", style="cyan")
        table.add_column("Kind")
        table.add_column("Required")
        table.add_column("Allowed / default")
        table.add_column("Label", style="green")

        for spec in template.fields:
            if spec.allowed_values:
                detail = " | ".join(spec.allowed_values)
            elif spec.has_default:
                detail = f"default: {spec.default_value}"
            else:
                detail = ""
            table.add_row(
                spec.name,
                spec.kind.value,
                "Yes" if spec.required else "No",
                escape(detail),
                escape(spec.label or ""),
            )

        console.print(table)


@app.command("render")
def render(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Template name"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON object of field values"),
    data_file: Optional[str] = typer.Option(None, "--data-file", "-D", help="JSON or YAML file of field values"),
    assignments: Optional[List[str]] = typer.Option(
        None, "--set", "-s", help="Field value as key=value; repeat for list fields"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the document to this file"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output the result as JSON"),
):
    """Render a template with field values"""
    registry = _registry(ctx)
    template = registry.get_template(name)

    if not template:
        console.print(f"[red]Template '{escape(name)}' not found[/red]")
        raise typer.Exit(code=1)

    ok = render_command(
        template,
        data=data,
        data_file=data_file,
        assignments=assignments or [],
        output=output,
        json_output=json_output,
    )
    if not ok:
        raise typer.Exit(code=1)


@app.command("check")
def check(
    path: str = typer.Argument(..., help="Path to a template file"),
):
    """Check that a template file declares a consistent schema"""
    try:
        template = TemplateLoader().load_file(path)
    except TemplateError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"[green]OK: {escape(template.name)}: {len(template.fields)} field(s), "
        f"{len(template.placeholders)} placeholder(s)[/green]"
    )

    unused = [n for n in template.field_names if n not in template.placeholders]
    if unused:
        console.print(f"[yellow]Declared but not used in body: {escape(', '.join(unused))}[/yellow]")

"""Unit Typer app factory."""

from pathlib import Path

import typer

from unitgen.api.unit.cmd_default import cmd_default
from unitgen.api.unit.cmd_render import cmd_render
from unitgen.cli._handle_stage_result import _handle_stage_result
from unitgen.cli.display.CLIDisplay import CLIDisplay


def _print_unit_text(output: dict) -> None:
    CLIDisplay().raw_output(output["text"])


def unit() -> typer.Typer:
    """Create and configure the unit Typer app."""
    app = typer.Typer(
        name="unit",
        help="Render .service unit files",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Unit operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="render")
    def render_cmd(
        ctx: typer.Context,
        definition: Path = typer.Argument(..., help="JSON or YAML service definition"),  # noqa: B008
        raw: bool = typer.Option(False, "--raw", help="Print only the unit file text"),
    ) -> None:
        """Render a service definition as unit-file text."""
        _handle_stage_result(cmd_render, ctx, result_printer=_print_unit_text if raw else None)(definition)

    @app.command(name="default")
    def default_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Unit name without the .service suffix"),
        description: str = typer.Argument(..., help="Unit description"),
        exec_start: str = typer.Argument(..., help="Command that starts the service"),
        raw: bool = typer.Option(False, "--raw", help="Print only the unit file text"),
    ) -> None:
        """Render a simple service with the canonical defaults."""
        _handle_stage_result(cmd_default, ctx, result_printer=_print_unit_text if raw else None)(
            name, description, exec_start
        )

    return app

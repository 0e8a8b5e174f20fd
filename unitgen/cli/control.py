"""Control Typer app factory."""

from pathlib import Path

import typer

from unitgen.api.control.cmd_enable import cmd_enable
from unitgen.api.control.cmd_install import cmd_install
from unitgen.api.control.cmd_start import cmd_start
from unitgen.api.control.cmd_stop import cmd_stop
from unitgen.cli._handle_stage_result import _handle_stage_result


def control() -> typer.Typer:
    """Create and configure the control Typer app."""
    app = typer.Typer(
        name="control",
        help="Install and drive units through the service manager",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Control operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        ctx: typer.Context,
        definition: Path = typer.Argument(..., help="JSON or YAML service definition"),  # noqa: B008
    ) -> None:
        """Write the unit file and reload the service manager."""
        _handle_stage_result(cmd_install, ctx)(definition)

    @app.command(name="start")
    def start_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Unit name"),
    ) -> None:
        """Start a unit."""
        _handle_stage_result(cmd_start, ctx)(name)

    @app.command(name="stop")
    def stop_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Unit name"),
    ) -> None:
        """Stop a unit."""
        _handle_stage_result(cmd_stop, ctx)(name)

    @app.command(name="enable")
    def enable_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Unit name"),
    ) -> None:
        """Enable a unit."""
        _handle_stage_result(cmd_enable, ctx)(name)

    return app

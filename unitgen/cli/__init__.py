"""CLI - main entry point."""

import sys


def _usage_error_type() -> type[Exception]:
    """UsageError class of the click copy that typer runs on."""
    import typer

    return next(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from unitgen.cli._create_app import _create_app
    from unitgen.cli._setup_cli_logging import _setup_cli_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from unitgen.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"unitgen {result.output.get('full_version', result.output.get('version', 'unknown'))}")
        return 0 if result.success else 1

    _setup_cli_logging()
    app = _create_app()
    usage_error = _usage_error_type()
    try:
        rc = app(argv, standalone_mode=False)
        return rc if isinstance(rc, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except usage_error as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1

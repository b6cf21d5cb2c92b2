"""Config Typer app factory."""

import typer

from svctrl.api.config.cmd_show import cmd_show
from svctrl.api.config.cmd_version import cmd_version
from svctrl.cli._handle_stage_result import _context_value, _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Config operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(ctx: typer.Context) -> None:
        """Show configuration file location and values."""
        _handle_stage_result(cmd_show, ctx)(config_path=_context_value(ctx, "config_path"))

    @app.command(name="version")
    def version_cmd(ctx: typer.Context) -> None:
        """Show svctrl version."""
        _handle_stage_result(cmd_version, ctx)()

    return app

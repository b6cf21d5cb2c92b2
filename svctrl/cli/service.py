"""Service Typer app factory."""

import typer

from svctrl.api.service.cmd_disable import cmd_disable
from svctrl.api.service.cmd_enable import cmd_enable
from svctrl.api.service.cmd_show import cmd_show
from svctrl.api.service.cmd_signal import cmd_signal
from svctrl.api.service.cmd_status import cmd_status
from svctrl.api.service.cmd_stop import cmd_stop
from svctrl.cli._handle_stage_result import _context_value, _handle_stage_result

_NAMES = typer.Argument(..., help="Service names (directory names in svdir)")


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="Enable, disable, signal and inspect runit services",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="enable")
    def enable_cmd(ctx: typer.Context, names: list[str] = _NAMES) -> None:
        """Link services into the active directory."""
        _handle_stage_result(cmd_enable, ctx)(names, config_path=_context_value(ctx, "config_path"))

    @app.command(name="disable")
    def disable_cmd(ctx: typer.Context, names: list[str] = _NAMES) -> None:
        """Stop services and remove their links."""
        _handle_stage_result(cmd_disable, ctx)(names, config_path=_context_value(ctx, "config_path"))

    @app.command(name="stop")
    def stop_cmd(ctx: typer.Context, names: list[str] = _NAMES) -> None:
        """Bring services down and wait for the supervisor to confirm."""
        _handle_stage_result(cmd_stop, ctx)(names, config_path=_context_value(ctx, "config_path"))

    @app.command(name="signal")
    def signal_cmd(
        ctx: typer.Context,
        command: str = typer.Argument(..., help="Command name (up, down, term, ...) or a single control character"),
        names: list[str] = _NAMES,
    ) -> None:
        """Send a control command to services."""
        _handle_stage_result(cmd_signal, ctx)(command, names, config_path=_context_value(ctx, "config_path"))

    @app.command(name="status")
    def status_cmd(ctx: typer.Context, names: list[str] = _NAMES) -> None:
        """Show run status of services (and their log services)."""
        _handle_stage_result(cmd_status, ctx)(names, config_path=_context_value(ctx, "config_path"))

    @app.command(name="show")
    def show_cmd(ctx: typer.Context) -> None:
        """List available and active services."""
        _handle_stage_result(cmd_show, ctx)(config_path=_context_value(ctx, "config_path"))

    return app

"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All settings access goes through the Container (bootstrap.py). Every
command hydrates the store first, exactly as the GUI does at startup.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Optional

import typer

from settings_sync.presentation.cli.formatters import (
    console,
    error_message,
    hydration_warnings,
    preview_table,
    state_table,
    success_panel,
    write_outcome,
)

if TYPE_CHECKING:
    from settings_sync.bootstrap import Container

app = typer.Typer(
    name="settings-sync",
    help="⚙️  Inspect and change persisted application preferences",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@dataclass
class _Options:
    config: Optional[Path] = None
    storage_dir: Optional[Path] = None
    ephemeral: bool = False
    log_level: Optional[str] = None


def _container(ctx: typer.Context) -> Container:
    """Build the Container from the global options."""
    from pydantic import ValidationError

    from settings_sync.bootstrap import Container
    from settings_sync.config.loader import load_config
    from settings_sync.config.models import AppConfig
    from settings_sync.domain.errors import ConfigurationError
    from settings_sync.logging_config import setup_logging

    opts: _Options = ctx.obj or _Options()
    try:
        config = load_config(opts.config)
    except ConfigurationError as exc:
        error_message(str(exc))
        raise typer.Exit(code=2)

    updates: dict[str, object] = {}
    if opts.storage_dir is not None:
        updates["storage_dir"] = opts.storage_dir
    if opts.log_level is not None:
        updates["log_level"] = opts.log_level.upper()
    if updates:
        try:
            config = AppConfig.model_validate({**config.model_dump(), **updates})
        except ValidationError as exc:
            error_message(f"Invalid option: {exc.errors()[0]['msg']}")
            raise typer.Exit(code=2)

    setup_logging(config.log_level)
    return Container(config, ephemeral=opts.ephemeral)


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
    storage_dir: Annotated[
        Optional[Path],
        typer.Option("--storage-dir", help="Directory holding preferences.json"),
    ] = None,
    ephemeral: Annotated[
        bool,
        typer.Option("--ephemeral", help="Keep preferences in memory only"),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Global options shared by every command."""
    ctx.obj = _Options(
        config=config,
        storage_dir=storage_dir,
        ephemeral=ephemeral,
        log_level=log_level,
    )


# ---------------------------------------------------------------------------
# settings-sync show
# ---------------------------------------------------------------------------


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the current preferences and the available font scales."""
    from settings_sync.domain.rules.scale_factors import resolve_scale_factor

    container = _container(ctx)

    report = asyncio.run(container.hydrate_settings().execute())
    hydration_warnings(report)

    state = container.store.get_state()
    state_table(state, resolve_scale_factor(state.font_scale))


# ---------------------------------------------------------------------------
# settings-sync set-font-scale / reset
# ---------------------------------------------------------------------------


def _apply_font_scale(ctx: typer.Context, value: str) -> None:
    from settings_sync.domain.errors import InvalidPreferenceValueError
    from settings_sync.domain.rules.scale_factors import resolve_scale_factor

    container = _container(ctx)

    async def _run():
        report = await container.hydrate_settings().execute()
        hydration_warnings(report)
        future = container.change_font_scale().execute(value)
        return await future

    try:
        outcome = asyncio.run(_run())
    except InvalidPreferenceValueError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)

    write_outcome(outcome)
    state = container.store.get_state()
    success_panel(
        f"✅ Font scale: [bold green]{state.font_scale.value}[/] "
        f"(×{resolve_scale_factor(state.font_scale):.2f})"
    )


@app.command("set-font-scale")
def set_font_scale(
    ctx: typer.Context,
    value: Annotated[str, typer.Argument(help="small, default, large or extra-large")],
) -> None:
    """Change the global font scale and persist it."""
    _apply_font_scale(ctx, value)


@app.command()
def reset(ctx: typer.Context) -> None:
    """Restore the default font scale."""
    from settings_sync.domain.models.enums import FontScale

    _apply_font_scale(ctx, FontScale.DEFAULT.value)


# ---------------------------------------------------------------------------
# settings-sync preview
# ---------------------------------------------------------------------------


@app.command()
def preview(
    ctx: typer.Context,
    scale: Annotated[
        Optional[float],
        typer.Option("--scale", "-s", help="Explicit factor overriding the preference"),
    ] = None,
) -> None:
    """Preview scaled text metrics for every text type."""
    from settings_sync.domain.errors import InvalidPreferenceValueError
    from settings_sync.domain.rules.typography import TextType

    container = _container(ctx)
    report = asyncio.run(container.hydrate_settings().execute())
    hydration_warnings(report)

    try:
        texts = {t: container.scaled_text(t, font_scale=scale) for t in TextType}
    except InvalidPreferenceValueError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)

    sample = texts[TextType.DEFAULT]
    preview_table(
        {t: text.style() for t, text in texts.items()},
        sample.scale_factor,
        sample.source.value,
    )
    for text in texts.values():
        text.close()


# ---------------------------------------------------------------------------
# settings-sync path
# ---------------------------------------------------------------------------


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the location of the preferences file."""
    container = _container(ctx)
    if ctx.obj and ctx.obj.ephemeral:
        console.print("(in memory)")
        return
    console.print(str(container.config.storage_path), soft_wrap=True)

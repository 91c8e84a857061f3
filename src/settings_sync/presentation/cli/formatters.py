"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels) in a dedicated module that
knows nothing about persistence or the event loop.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from settings_sync.domain.models.enums import FontScale
from settings_sync.domain.models.hydration import HydrationReport, WriteOutcome
from settings_sync.domain.models.settings import SettingsState
from settings_sync.domain.rules.scale_factors import SCALE_FACTOR_TABLE
from settings_sync.domain.rules.typography import TextStyle, TextType

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Settings") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


def warning_message(message: str) -> None:
    """Print a yellow warning line."""
    console.print(f"[yellow]⚠️  {message}[/]")


# ---------------------------------------------------------------------------
# State rendering
# ---------------------------------------------------------------------------


def state_table(state: SettingsState, factor: float) -> None:
    """Print the current settings and every available font scale."""
    table = Table(title="⚙️  Preferences", show_header=True, border_style="blue")
    table.add_column("Font scale", style="cyan")
    table.add_column("Factor", justify="right")
    table.add_column("", width=3)

    for scale in FontScale:
        active = scale is state.font_scale
        table.add_row(
            f"[bold green]{scale.value}[/]" if active else scale.value,
            f"{SCALE_FACTOR_TABLE[scale]:.2f}",
            "●" if active else "",
        )

    console.print(table)
    console.print(
        f"Active: [bold]{state.font_scale.value}[/] (×{factor:.2f})  "
        f"Hydrated: {'yes' if state.is_hydrated else 'no'}"
    )


def hydration_warnings(report: HydrationReport) -> None:
    """Print one warning per hydration failure (nothing when clean)."""
    for message in report.errors:
        warning_message(message)


def write_outcome(outcome: WriteOutcome) -> None:
    if outcome.ok:
        console.print(f"[dim]Saved {outcome.key.value}={outcome.value}[/]")
    else:
        warning_message(f"Not saved ({outcome.error}); change applies to this session only")


def preview_table(styles: dict[TextType, TextStyle], factor: float, source: str) -> None:
    """Print scaled font metrics for each text role."""
    table = Table(
        title=f"🔠 Text preview ×{factor:.2f} ({source})",
        show_header=True,
        border_style="blue",
    )
    table.add_column("Type", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Line height", justify="right")
    table.add_column("Weight")

    for text_type, style in styles.items():
        line_height = "—" if style.line_height is None else f"{style.line_height:g}"
        table.add_row(text_type.value, f"{style.font_size:g}", line_height, style.weight.value)

    console.print(table)

"""Terminal rendering of readings, hexagrams and trigrams with rich."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .hexagram import Hexagram
from .reading import Reading
from .repository import HexagramInfo
from .trigram import TrigramName

YANG_BAR = "━━━━━━━"
YIN_BAR = "━━   ━━"
CHANGING_MARK = " ✦"


class ColorPreference(str, Enum):
    AUTO = "auto"      # colorful when a terminal is detected
    ALWAYS = "always"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


def make_console(color: ColorPreference = ColorPreference.AUTO) -> Console:
    if color is ColorPreference.ALWAYS:
        return Console(force_terminal=True)
    if color is ColorPreference.NEVER:
        return Console(color_system=None, highlight=False)
    return Console()


def format_hexagram_lines(hexagram: Hexagram, mark_changing: bool = True) -> List[str]:
    """Format hexagram lines for display (top to bottom)."""
    lines = []
    for line in reversed(hexagram.lines):
        bar = YIN_BAR if line.is_broken() else YANG_BAR
        if mark_changing and line.is_changing():
            bar += CHANGING_MARK
        lines.append(bar)
    return lines


def hexagram_panel(
    info: HexagramInfo,
    title: str,
    hexagram: Optional[Hexagram] = None,
    border_style: str = "cyan",
) -> Panel:
    content = [
        f"[bold]Hexagram No. {info.number}[/bold]  {info.symbol}",
        f"{escape(info.english_name)}",
        f"{info.chinese_name} ({escape(info.pinyin)})",
        f"[dim]{info.above.symbol} {info.above} over {info.below.symbol} {info.below}[/dim]",
        "",
        "[bold]Lines:[/bold]",
        *format_hexagram_lines(hexagram if hexagram is not None else info.hexagram),
        "",
        "[bold]Judgement:[/bold]",
        escape(info.judgement),
        "",
        "[bold]Images:[/bold]",
        escape(info.images),
    ]
    return Panel("\n".join(content), title=f"[bold]{title}[/bold]", border_style=border_style)


def display_hexagram_info(console: Console, info: HexagramInfo) -> None:
    console.print(hexagram_panel(info, title=f"{info.symbol} {escape(info.pinyin)}"))


def display_trigram(console: Console, name: TrigramName) -> None:
    console.print(Panel(
        escape(name.describe()),
        title=f"[bold]{name.chinese} {name}[/bold]",
        border_style="green",
    ))


def display_reading(console: Console, reading: Reading) -> None:
    """Display the complete reading."""
    console.rule("[bold cyan]☯ I-CHING DIVINATION ☯[/bold cyan]")
    if reading.question:
        console.print(f"[dim]Q:[/dim] {escape(reading.question)}")
    console.print(f"[dim]Time:[/dim] {reading.timestamp}")
    if reading.method is not None:
        console.print(f"[dim]Method:[/dim] {reading.method}")
    if reading.seed_hash:
        console.print(f"[dim]Seed:[/dim] {reading.seed_hash}…")
    console.print()

    console.print(hexagram_panel(reading.primary_info, "Primary Hexagram", reading.hexagram))

    if reading.changing_positions:
        console.print()
        positions = ", ".join(str(p) for p in reading.changing_positions)
        content = [f"[yellow]Lines are changing! Consider positions {positions}:[/yellow]"]
        for line_meaning in reading.changing_line_meanings:
            content.extend([
                "",
                f"[bold]Line {line_meaning.position} changes:[/bold]",
                escape(line_meaning.meaning),
            ])
        console.print(Panel("\n".join(content), title="[bold]Changing Lines[/bold]", border_style="yellow"))
    else:
        console.print("[dim]No changing lines.[/dim]")

    if reading.relating_info is not None:
        console.print()
        console.print("Changes into:")
        console.print(hexagram_panel(
            reading.relating_info, "Relating Hexagram", reading.relating_hexagram, border_style="magenta"
        ))

    if reading.nuclear_info is not None:
        console.print()
        console.print(hexagram_panel(reading.nuclear_info, "Nuclear Hexagram", border_style="blue"))

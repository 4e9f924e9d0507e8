"""
Menu screens shown around a session: start, pause and game over.
"""
from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from ..game.snapshot import GameSnapshot


def _icon(use_emoji: bool, emoji: str, ascii_text: str) -> str:
    return emoji if use_emoji else ascii_text


def start_screen(record: int, use_emoji: bool = True) -> RenderableType:
    """Title screen with the current record and the controls."""
    snake = _icon(use_emoji, "🐍", "@@")
    lines = Text(justify="center")
    lines.append(f"{snake} SNAKE GAME {snake}\n\n", style="bold green")
    lines.append(f"{_icon(use_emoji, '🏆', '[TOP]')} Record: {record}\n\n", style="yellow")
    lines.append(f"{_icon(use_emoji, '🎮', '[KEY]')} Use arrows or WASD to move\n", style="cyan")
    lines.append(f"{_icon(use_emoji, '🍎', '()')} Eat apples to grow\n", style="red")
    lines.append(
        f"{_icon(use_emoji, '🌵', 'XX')} Avoid cactus and {_icon(use_emoji, '🧱', '##')} walls\n\n",
        style="green",
    )
    lines.append("Press any key to start", style="magenta")
    return Panel(Align.center(lines), expand=False, border_style="green")


def pause_screen(snapshot: GameSnapshot) -> RenderableType:
    lines = Text(justify="center")
    lines.append("PAUSED\n\n", style="bold yellow")
    lines.append(f"Score: {snapshot.score}  Level: {snapshot.level}\n\n")
    lines.append("P resume  Q quit", style="dim")
    return Panel(Align.center(lines), expand=False, border_style="yellow")


def game_over_screen(snapshot: GameSnapshot, use_emoji: bool = True) -> RenderableType:
    """
    Final score, record and the restart/exit menu.

    Args:
        snapshot: Snapshot taken after the session was finalized
        use_emoji: Decorate lines with emoji icons
    """
    skull = _icon(use_emoji, "💀", "[X_X]")
    lines = Text(justify="center")
    lines.append(f"{skull} GAME OVER {skull}\n\n", style="bold red")
    lines.append(f"Final Score: {snapshot.score}\n")
    lines.append(f"{_icon(use_emoji, '🥇', '[!]')} Record: {snapshot.record}\n", style="yellow")
    if snapshot.is_new_record:
        lines.append(f"{_icon(use_emoji, '🎉', '***')} NEW RECORD {_icon(use_emoji, '🎉', '***')}\n", style="bold magenta")
    lines.append("\n")
    lines.append(f"{_icon(use_emoji, '🔄 ', '')}[R] Restart\n", style="green")
    lines.append(f"{_icon(use_emoji, '🚪 ', '')}[E] Exit", style="red")
    return Panel(Align.center(lines), expand=False, border_style="red")

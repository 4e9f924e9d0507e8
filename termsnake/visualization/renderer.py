"""
Terminal Renderer - Draws a game snapshot as a rich Panel.

Every grid cell is two terminal columns wide so the emoji and ASCII tile
sets line up the same way. The board is framed by a wall row above and
below and a wall tile on each side.
"""
from dataclasses import dataclass
from typing import List

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from ..game.geometry import Position
from ..game.snapshot import GameSnapshot
from ..game.state import GameState


@dataclass(frozen=True)
class TileSet:
    """Glyphs for each kind of cell, each two columns wide."""
    wall: str
    head: str
    body: str
    food: str
    obstacle: str
    empty: str = "  "


EMOJI_TILES = TileSet(wall="🧱", head="🐍", body="🟢", food="🍎", obstacle="🌵")
ASCII_TILES = TileSet(wall="##", head="@@", body="[]", food="()", obstacle="XX")


class TerminalRenderer(RendererInterface):
    """
    Renders Snake snapshots for a rich Console.

    The output is a Panel holding the framed board and a status line with
    score, record and level.
    """

    def __init__(self, use_emoji: bool = True, show_help: bool = True):
        """
        Initialize the renderer.

        Args:
            use_emoji: Draw with emoji tiles; ASCII tiles otherwise
            show_help: Show the key legend under the board
        """
        self.tiles = EMOJI_TILES if use_emoji else ASCII_TILES
        self.show_help = show_help

    def render(self, snapshot: GameSnapshot) -> RenderableType:
        parts: List[RenderableType] = [self.render_board(snapshot), self.render_status(snapshot)]
        if self.show_help:
            parts.append(Text("Arrows/WASD move  P pause  Q quit", style="dim"))

        title = "[bold green]Snake[/bold green]"
        if snapshot.state is GameState.PAUSED:
            title += " [yellow](paused)[/yellow]"
        elif snapshot.state is GameState.GAME_OVER:
            title += " [red](game over)[/red]"

        return Panel(Group(*parts), title=title, expand=False, border_style="green")

    def render_board(self, snapshot: GameSnapshot) -> Text:
        """Build the framed board as styled text, one line per row."""
        tiles = self.tiles
        head = snapshot.head
        body = set(snapshot.segments[1:])

        board = Text()
        wall_row = tiles.wall * (snapshot.width + 2)
        board.append(wall_row + "\n", style="red")

        for y in range(snapshot.height):
            board.append(tiles.wall, style="red")
            for x in range(snapshot.width):
                pos = Position(x, y)
                if pos == head:
                    board.append(tiles.head, style="bold bright_green")
                elif pos in body:
                    board.append(tiles.body, style="green")
                elif pos == snapshot.food:
                    board.append(tiles.food, style="bold red")
                elif pos in snapshot.obstacles:
                    board.append(tiles.obstacle, style="yellow")
                else:
                    board.append(tiles.empty)
            board.append(tiles.wall + "\n", style="red")

        board.append(wall_row, style="red")
        return board

    def render_status(self, snapshot: GameSnapshot) -> Text:
        status = Text()
        status.append("Score: ", style="bold")
        status.append(str(snapshot.score), style="cyan")
        status.append("  Record: ", style="bold")
        status.append(str(snapshot.record), style="magenta")
        status.append("  Level: ", style="bold")
        status.append(str(snapshot.level), style="yellow")
        status.append(f"  (next in {snapshot.points_to_next_level})", style="dim")
        return status

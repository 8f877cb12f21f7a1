"""Plain-text board rendering with coloured side labels."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

from chessvision.core.board import Board
from chessvision.core.enums import Side
from chessvision.core.types import File, Rank, Square

_SEPARATOR = "  +" + "---+" * 8


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """How :func:`render_board` lays out and colours a board."""

    perspective: Side = Side.WHITE
    white_style: str = "bold white"
    black_style: str = "bold red"

    def style_for(self, side: Side) -> str:
        return self.white_style if side is Side.WHITE else self.black_style


def render_board(board: Board, options: RenderOptions | None = None) -> Text:
    """8x8 grid seen from ``options.perspective``, opponent's label on top."""
    opts = options or RenderOptions()
    perspective = opts.perspective
    ranks = list(reversed(Rank)) if perspective is Side.WHITE else list(Rank)
    files = list(File) if perspective is Side.WHITE else list(reversed(File))

    text = Text()
    text.append(str(perspective.opponent), style=opts.style_for(perspective.opponent))
    text.append("\n" + _SEPARATOR + "\n")
    for rank in ranks:
        cells = []
        for file in files:
            piece = board.get(Square(file, rank))
            cells.append(str(piece) if piece else " ")
        text.append(f"{rank.char} | {' | '.join(cells)} |\n")
        text.append(_SEPARATOR + "\n")
    text.append("    " + "   ".join(f.char for f in files) + "\n")
    text.append(str(perspective), style=opts.style_for(perspective))
    return text


def pretty_print(
    board: Board, perspective: Side = Side.WHITE, *, color: bool = True
) -> str:
    """Render *board* to a string, with ANSI colour codes when *color* is set."""
    console = Console(
        color_system="standard" if color else None,
        force_terminal=color,
        highlight=False,
        width=80,
    )
    with console.capture() as capture:
        console.print(render_board(board, RenderOptions(perspective)), end="")
    return capture.get()

"""Rich terminal front end — frame diagrams, solution tables, and a prompt loop.

Uses the ``rich`` library for styled output on top of the same solver the
rest of the package exposes.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from castduet.engine.gamesolver import FREE_HALF_RING, INITIAL_HALF_RING_RIGHT, Solver
from castduet.engine.graphbuilder import Graph
from castduet.models.errors import DuetError
from castduet.models.ring import FREE, Cell, Ring, decode
from castduet.models.topology import CAST_DUET_SKETCH, CELL_HEIGHT, CELL_WIDTH, dents_around

console = Console()

# The diagram shows one cell of margin around the frame.
_PAD_LINES = CELL_HEIGHT
_PAD_COLS = CELL_WIDTH

_DENT_STYLES = {
    "D": "bold green",
    "H": "bold magenta",
    "B": "bold white",
}


# -- helpers ------------------------------------------------------------------


def _cell_center(cell: Cell) -> tuple[int, int]:
    col, row = cell
    top = (len(CAST_DUET_SKETCH) - 1) - row * CELL_HEIGHT
    left = (col - 1) * CELL_WIDTH
    return top + CELL_HEIGHT // 2 + _PAD_LINES, left + CELL_WIDTH // 2 + _PAD_COLS


def describe_move(before: str, after: str) -> str:
    """Short label for the move between two consecutive positions."""
    if before == FREE:
        return "attach"
    if after == FREE:
        return "detach"
    a = decode(before)
    b = decode(after)
    if a.flipped().name == b.name:
        return "flip"
    if a.peg == b.peg:
        return "swing"
    if a.ring != b.ring:
        return "slide"
    return "turn"


# -- rendering ----------------------------------------------------------------


def render_position(position: str) -> Panel:
    """Return a Rich Panel showing the frame with the half-ring marked.

    The peg cell shows the peg orientation letter, the ring cell an ``O``.
    """
    ring: Ring | None = decode(position)

    height = len(CAST_DUET_SKETCH) + 2 * _PAD_LINES
    width = max(len(line) for line in CAST_DUET_SKETCH) + 2 * _PAD_COLS
    canvas = [[" "] * width for _ in range(height)]
    for i, line in enumerate(CAST_DUET_SKETCH):
        for j, ch in enumerate(line):
            canvas[i + _PAD_LINES][j + _PAD_COLS] = ch

    marks: dict[tuple[int, int], tuple[str, str]] = {}
    if ring is not None and not ring.is_free:
        marks[_cell_center(ring.peg)] = (ring.peg_pos.value, "bold yellow")
        marks[_cell_center(ring.ring)] = ("O", "bold cyan")

    text = Text()
    for i, row in enumerate(canvas):
        for j, ch in enumerate(row):
            if (i, j) in marks:
                mark, style = marks[(i, j)]
                text.append(mark, style=style)
            else:
                text.append(ch, style=_DENT_STYLES.get(ch, "dim"))
        text.append("\n")
    text.rstrip()

    return Panel(
        Align.center(text),
        title=f"[bold cyan]{position}[/bold cyan]",
        border_style="bright_blue",
        padding=(0, 2),
    )


def render_path(path: list[str]) -> Table:
    """Return a Rich Table listing each position of a solution."""
    table = Table(
        title=f"{path[0]} → {path[-1]}  ({len(path) - 1} moves)",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Position", style="bold yellow")
    table.add_column("Move", style="cyan")

    table.add_row("0", path[0], "")
    for i, (before, after) in enumerate(zip(path, path[1:]), 1):
        table.add_row(str(i), after, describe_move(before, after))
    return table


def render_details(position: str) -> Table:
    """Return a Rich Table describing a parsed position."""
    ring = decode(position)
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(style="bold")

    if ring is None or ring.is_free:
        table.add_row("Node", FREE)
        return table

    table.add_row("Peg", f"{ring.peg_pos.name.title()} at {ring.peg}")
    table.add_row("Ring", str(ring.ring))
    table.add_row("Rotation", str(ring.rotation))
    table.add_row("Node", ring.node_name)
    dents = dents_around(ring.peg)
    table.add_row(
        "Dents",
        " ".join(f"{slot}={dent}" for slot, dent in dents.items()) or "none",
    )
    return table


def render_graph(graph: Graph) -> Table:
    table = Table(
        title="Move graph",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
        show_header=False,
    )
    table.add_column(style="dim")
    table.add_column(justify="right", style="yellow")
    table.add_row("Nodes", str(len(graph)))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row("FREE degree", str(len(graph.neighbours(FREE))))
    return table


def print_solution(path: list[str], diagrams: bool = False) -> None:
    console.print(render_path(path))
    if diagrams:
        for position in path:
            console.print(render_position(position))


# -- prompt loop --------------------------------------------------------------


def _ask(prompt: str, default: str) -> str:
    raw = console.input(f"  [bold]{prompt}[/bold] [dim]({default})[/dim]: ").strip()
    return raw or default


def run(solver: Solver) -> None:
    """Ask for pairs of positions and print the solution until the user quits."""
    console.print(
        Panel(
            Group(
                Text("Positions look like U(3,1)-(4,1) or FREE.", style="dim"),
                Text("Enter q to quit.", style="dim"),
            ),
            title="[bold]C A S T   D U E T[/bold]",
            border_style="bright_blue",
            padding=(1, 4),
        )
    )

    while True:
        source = _ask("From", INITIAL_HALF_RING_RIGHT)
        if source.lower() == "q":
            break
        target = _ask("To", FREE_HALF_RING)
        if target.lower() == "q":
            break

        try:
            path = solver.solve(source, target)
        except DuetError as exc:
            console.print(f"  [red]{escape(str(exc))}[/red]")
            continue
        print_solution(path)

    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))

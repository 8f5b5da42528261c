"""
Rendering: projects the catalog into table rows and draws them.

Provides:
- header_row(): column titles
- day_to_row(day) / table_rows(days): read-only projection of each day
- render_table(app): rich Table (used by headless mode)
- CatalogView: textual terminal UI driving an App controller

Rendering only reads cached solutions (Problem.solution()); solving is the
controller's job.
"""

import logging
from typing import Iterable, List, Tuple

from rich.table import Table
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.events import Key
from textual.widgets import DataTable, Footer, Header

from aoc_core.day import Day

from .controller import App

logger = logging.getLogger(__name__)

Row = Tuple[str, str, str, str]

COLUMN_WIDTHS = (50, 20, 20, 10)  # percent of the table width


def header_row() -> Row:
    return ("Day", "Part 1", "Part 2", "Stars")


def day_to_row(day: Day) -> Row:
    return (
        day.label(),
        day.part_1.solution() or "",
        day.part_2.solution() or "",
        day.stars(),
    )


def table_rows(days: Iterable[Day]) -> List[Row]:
    return [day_to_row(day) for day in days]


def render_table(app: App) -> Table:
    """Static rich table of the current state, with the selected row marked."""
    table = Table(title=app.title, expand=True, show_lines=app.enhanced_graphics)
    for title, width in zip(header_row(), COLUMN_WIDTHS):
        table.add_column(title, ratio=width)

    for i, row in enumerate(table_rows(app.day_table.items)):
        style = "green" if i == app.day_table.selected else None
        table.add_row(*row, style=style)

    return table


class CatalogView(TextualApp):
    """
    Terminal UI around the controller.

    Arrow keys move the selection; every other printable key is handed to
    App.on_key(). The table is rebuilt after each key and on every tick.
    """

    CSS = """
    #days {
        border: round white;
        height: 1fr;
    }
    """

    def __init__(self, app: App, tick_rate: float) -> None:
        super().__init__()
        self.controller = app
        self.tick_rate = tick_rate

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(
            id="days",
            cursor_type="row",
            zebra_stripes=self.controller.enhanced_graphics,
        )
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.controller.title
        table = self.query_one("#days", DataTable)
        # Keys go to the controller, not to the table's own cursor
        table.can_focus = False
        table.border_title = self.controller.title
        table.add_columns(*header_row())
        self.refresh_table()
        self.set_interval(self.tick_rate, self.on_tick)

    def on_tick(self) -> None:
        self.controller.on_tick()
        self.refresh_table()

    def on_key(self, event: Key) -> None:
        if event.key == "up":
            self.controller.on_up()
        elif event.key == "down":
            self.controller.on_down()
        elif event.character:
            self.controller.on_key(event.character)
        else:
            return

        event.stop()
        if self.controller.should_quit:
            self.exit()
            return
        self.refresh_table()

    def refresh_table(self) -> None:
        table = self.query_one("#days", DataTable)
        table.clear()
        table.add_rows(table_rows(self.controller.day_table.items))

        selected = self.controller.day_table.selected
        table.show_cursor = selected is not None
        if selected is not None:
            table.move_cursor(row=selected)

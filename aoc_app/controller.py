"""
Controller: translates key presses into cursor moves and solve requests.

The dispatch table is flat. The only persistent mode is `should_quit`,
which is set once and never cleared. Rendering reads `day_table` and never
calls back into the controller.

Keys:
- q: quit
- o: open the selected day's puzzle page
- s: solve both parts of the selected day
- S: solve both parts of every day, in catalog order
- up/down arrows: on_up() / on_down()
"""

import logging
from typing import Callable, Dict, Optional

from aoc_core.catalog import Catalog
from aoc_core.cursor import StatefulTable
from aoc_core.day import Day

from .opener import SystemOpener, UrlOpener

logger = logging.getLogger(__name__)

KEY_QUIT = "q"
KEY_OPEN = "o"
KEY_SOLVE = "s"
KEY_SOLVE_ALL = "S"


class App:
    """
    Controller state: title, quit flag, cursor over the catalog.

    Args:
        title: Shown by the renderer
        catalog: Days to browse (built once at startup)
        enhanced_graphics: Forwarded to the renderer, no effect here
        opener: URL opener capability (SystemOpener if None)
    """

    def __init__(
        self,
        title: str,
        catalog: Catalog,
        enhanced_graphics: bool = False,
        opener: Optional[UrlOpener] = None,
    ) -> None:
        self.title = title
        self.should_quit = False
        self.day_table: StatefulTable[Day] = StatefulTable.with_rows(catalog)
        self.enhanced_graphics = enhanced_graphics
        self.opener: UrlOpener = opener if opener is not None else SystemOpener()

        self._actions: Dict[str, Callable[[], None]] = {
            KEY_QUIT: self.quit,
            KEY_OPEN: self.open_current,
            KEY_SOLVE: self.solve_current,
            KEY_SOLVE_ALL: self.solve_all,
        }

    def on_up(self) -> None:
        self.day_table.previous()

    def on_down(self) -> None:
        self.day_table.next()

    def on_key(self, c: str) -> None:
        action = self._actions.get(c)
        if action is not None:
            action()

    def on_tick(self) -> None:
        pass

    def quit(self) -> None:
        self.should_quit = True

    def open_current(self) -> None:
        day = self.day_table.current_item()
        if day is None:
            return
        url = day.url()
        logger.info(f"Opening {url}")
        # UrlOpenError propagates: a missing opener aborts the app
        self.opener.open(url)

    def solve_current(self) -> None:
        day = self.day_table.current_item()
        if day is None:
            return
        day.part_1.solve()
        day.part_2.solve()

    def solve_all(self) -> None:
        # No early exit: every part is attempted even if earlier ones had no input
        for day in self.day_table.items:
            day.part_1.solve()
            day.part_2.solve()
        logger.info(f"Solve all finished for {len(self.day_table)} days")

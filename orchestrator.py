import curses
import logging

from capability_pane import CapabilityPane
from key_bindings import command_for_key
from screen_layout import ScreenLayout
from status_bar import render_status
from viewport import Command, render_rows

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TERMINATED = 1


class Orchestrator:
    def __init__(self, stdscr, app_state, events):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        # poll so signal-driven events are noticed while idle
        self.stdscr.timeout(100)

        self.state = app_state
        self.events = events
        self.layout = ScreenLayout(stdscr)
        self.pane = CapabilityPane()
        self.state.viewport.resize(self.layout.page_size)

    # ---------------- UI ----------------

    def _status_context(self):
        vp = self.state.viewport.state
        return {
            "file_path": self.state.file_path,
            "description": self.state.record.description,
            "selection": vp.selection,
            "topline": vp.topline,
            "page_size": vp.page_size,
            "total_lines": vp.total_lines,
        }

    def redraw(self):
        vp = self.state.viewport.state
        rows = render_rows(self.state.record, self.state.catalog, vp)
        self.pane.draw(self.layout.list_win, rows, vp.total_lines)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(self._status_context(), w)
        try:
            sw.addnstr(0, 0, text, max(0, w - 1), curses.A_REVERSE)
        except curses.error:
            pass
        sw.noutrefresh()
        curses.doupdate()

    def _relayout(self):
        try:
            curses.update_lines_cols()
        except AttributeError:
            pass
        self.stdscr.erase()
        self.stdscr.noutrefresh()
        self.layout = ScreenLayout(self.stdscr)
        self.state.viewport.resize(self.layout.page_size)
        logger.debug("resized to %dx%d", self.layout.W, self.layout.H)

    # ---------------- main loop ----------------

    def run(self) -> int:
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            if self.events.terminate_requested:
                logger.info("terminate requested (signal %s)", self.events.terminate_signal)
                return EXIT_TERMINATED

            ch = self.stdscr.getch()

            if ch == -1:
                if self.events.take_redraw():
                    self.redraw()
                continue

            if ch == curses.KEY_RESIZE:
                self._relayout()
                self.redraw()
                continue

            command = command_for_key(ch)
            if command is None:
                continue
            if command is Command.QUIT:
                return EXIT_OK

            self.state.viewport.apply(command, self.layout.page_size)
            self.redraw()

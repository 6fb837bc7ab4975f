import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: capability list (main), status bar (1 line)
        self.status_h = 1
        self.list_h = max(1, self.H - self.status_h)

        self.list_win = curses.newwin(self.list_h, self.W, 0, 0)
        # list pane must never own cursor
        self.list_win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, self.list_h, 0)
        self.status_win.leaveok(True)

    @property
    def page_size(self) -> int:
        return self.list_h

import curses


class CapabilityPane:
    PAIR_ROW_TEXT = 1
    PAIR_ROW_SELECTED = 2
    MAX_LABEL_WIDTH = 12

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_ROW_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(
                self.PAIR_ROW_SELECTED, curses.COLOR_BLACK, curses.COLOR_WHITE
            )
        except curses.error:
            pass

    @staticmethod
    def _attr(pair):
        try:
            return curses.color_pair(pair)
        except curses.error:
            return 0

    @staticmethod
    def format_row(row, number_w, label_w, width) -> str:
        text = f"{row.line_index:>{number_w}} {row.label:<{label_w}} {row.value}"
        return text[:width].ljust(width)

    def draw(self, win, rows, total_lines):
        win.erase()
        h, w = win.getmaxyx()
        if not rows:
            try:
                win.addnstr(0, 0, "(no capabilities)", max(0, w - 1))
            except curses.error:
                pass
            win.noutrefresh()
            return

        number_w = len(str(max(0, total_lines - 1)))
        label_w = min(self.MAX_LABEL_WIDTH, max(len(r.label) for r in rows))

        for y, row in enumerate(rows[:h]):
            text = self.format_row(row, number_w, label_w, w)
            if row.is_selected:
                attr = self._attr(self.PAIR_ROW_SELECTED) | curses.A_REVERSE
            else:
                attr = self._attr(self.PAIR_ROW_TEXT)
            try:
                # writing the bottom-right cell raises; it is still drawn
                win.addnstr(y, 0, text, w, attr)
            except curses.error:
                pass
        win.noutrefresh()

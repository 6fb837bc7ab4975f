import curses

from viewport import Command


ESC = 27

KEY_COMMANDS = {
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
    ESC: Command.QUIT,
    curses.KEY_HOME: Command.HOME,
    ord("0"): Command.HOME,
    curses.KEY_END: Command.END,
    ord("G"): Command.END,
    ord("H"): Command.TOP_OF_PAGE,
    ord("M"): Command.MIDDLE_OF_PAGE,
    ord("L"): Command.BOTTOM_OF_PAGE,
    curses.KEY_UP: Command.UP,
    ord("k"): Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    ord("j"): Command.DOWN,
    curses.KEY_PPAGE: Command.PAGE_UP,
    ord("b"): Command.PAGE_UP,
    curses.KEY_NPAGE: Command.PAGE_DOWN,
    ord(" "): Command.PAGE_DOWN,
}


def command_for_key(ch):
    """Map a getch() result to a viewport command, or None for unbound keys."""
    return KEY_COMMANDS.get(ch)

import logging
import os

from errors import TerminfoIOError

logger = logging.getLogger(__name__)

SYSTEM_DIRS = ["/etc/terminfo", "/lib/terminfo", "/usr/share/terminfo"]


def search_dirs(extra_dirs=None, environ=None) -> list[str]:
    """Directories to search, in the order ncurses consults them."""
    env = os.environ if environ is None else environ
    dirs: list[str] = []
    if env.get("TERMINFO"):
        dirs.append(env["TERMINFO"])
    home = env.get("HOME")
    if home:
        dirs.append(os.path.join(home, ".terminfo"))
    for entry in (env.get("TERMINFO_DIRS") or "").split(":"):
        # an empty element stands for the system default
        dirs.extend(SYSTEM_DIRS if entry == "" else [entry])
    dirs.extend(extra_dirs or [])
    dirs.extend(SYSTEM_DIRS)

    seen = set()
    ordered = []
    for d in dirs:
        if d not in seen:
            seen.add(d)
            ordered.append(d)
    return ordered


def candidate_paths(term: str, directory: str) -> list[str]:
    # x/xterm on Linux, 78/xterm on case-insensitive filesystems
    first = term[0]
    return [
        os.path.join(directory, first, term),
        os.path.join(directory, format(ord(first), "02x"), term),
    ]


def find_terminfo(term: str, extra_dirs=None, environ=None) -> str:
    if not term:
        raise TerminfoIOError("(no terminal type)", ValueError("TERM is not set"))
    for directory in search_dirs(extra_dirs, environ):
        for path in candidate_paths(term, directory):
            if os.path.isfile(path):
                logger.debug("resolved %s to %s", term, path)
                return path
    raise TerminfoIOError(term, FileNotFoundError("no compiled terminfo entry found"))


def resolve_target(arg, config, environ=None) -> str:
    """Turn a command-line argument (terminal name or file path) into a path."""
    env = os.environ if environ is None else environ
    if arg and (os.sep in arg or os.path.isfile(arg)):
        return arg
    term = arg or config.get("TERM") or env.get("TERM")
    return find_terminfo(term, config.get("TERMINFO_DIRS"), env)

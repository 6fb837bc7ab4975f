import curses
import logging
import os
import sys

import config_paths
from _version import __version__
from app_state import AppState
from capability_table import dump_csv
from errors import FormatError, ResourceError, TerminfoIOError
from log_setup import setup_logging
from orchestrator import Orchestrator
from session_events import SessionEvents
from terminfo_locator import resolve_target

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

logger = logging.getLogger(__name__)

USAGE = (
    "tiview - compiled terminfo viewer\n\nUsage:\n"
    "  tiview [TERM|path]\n  tiview -d [TERM|path]\n  tiview -v\n\n"
    "Keys: j/k up/down, b/space page, 0/G first/last, H/M/L page top/middle/bottom, q quit\n"
)


def _parse_args(args):
    opts = {"version": False, "help": False, "dump": False, "target": None}
    for arg in args:
        if arg in ("-v", "-V", "--version"):
            opts["version"] = True
        elif arg in ("-h", "--help"):
            opts["help"] = True
        elif arg in ("-d", "--dump"):
            opts["dump"] = True
        elif arg.startswith("-") and arg != "-":
            raise ValueError(f"unknown option: {arg}")
        elif opts["target"] is None:
            opts["target"] = arg
        else:
            raise ValueError("only one terminal or file may be given")
    return opts


def load_state(target, config) -> AppState:
    path = resolve_target(target, config)
    return AppState.from_file(path)


def run_interactive(state: AppState) -> int:
    events = SessionEvents()

    def curses_main(stdscr):
        return Orchestrator(stdscr, state, events).run()

    # callbacks run last-in first-out: handlers are restored before the log closes
    events.teardown.register(logging.shutdown)
    events.install()
    try:
        return curses.wrapper(curses_main)
    finally:
        # curses.wrapper has restored the terminal by now
        events.teardown.run()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        opts = _parse_args(args)
    except ValueError as e:
        print(f"tiview: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    if opts["version"]:
        print(__version__)
        return 0

    if opts["help"]:
        print(USAGE)
        return 0

    config = config_paths.load_config()
    setup_logging(config["LOG_LEVEL"])

    try:
        state = load_state(opts["target"], config)
    except TerminfoIOError as e:
        logger.error("%s", e)
        print(f"tiview: {e}", file=sys.stderr)
        return 1
    except FormatError as e:
        logger.error("malformed terminfo: %s", e)
        print(f"tiview: malformed terminfo file {e}", file=sys.stderr)
        return 1
    except ResourceError as e:
        logger.error("%s", e)
        print("tiview: out of memory", file=sys.stderr)
        return 1

    if opts["dump"]:
        dump_csv(state.record, state.catalog, sys.stdout)
        return 0

    return run_interactive(state)


if __name__ == "__main__":
    sys.exit(main())

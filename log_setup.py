import logging

import config_paths

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler = None


def setup_logging(level="WARNING", path=None):
    """Route all records to the log file; curses owns the terminal."""
    global _handler
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    if _handler is not None:
        return _handler

    try:
        if path is None:
            config_paths.ensure_config_dirs()
            path = config_paths.LOG_PATH
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # unwritable log location: drop records rather than corrupt the screen
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _handler = handler
    return handler

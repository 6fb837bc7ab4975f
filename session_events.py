import logging
import os
import signal

logger = logging.getLogger(__name__)

REDRAW_SIGNALS = ("SIGHUP", "SIGUSR1", "SIGUSR2")
TERMINATE_SIGNALS = ("SIGINT", "SIGTERM", "SIGQUIT")


class Teardown:
    """Runs registered cleanup callbacks at most once."""

    def __init__(self):
        self._callbacks = []
        self.started = False
        self.finished = False

    def register(self, callback):
        self._callbacks.append(callback)

    def run(self):
        if self.started:
            return False
        self.started = True
        try:
            while self._callbacks:
                callback = self._callbacks.pop()
                try:
                    callback()
                except Exception:
                    logger.exception("cleanup step failed")
        finally:
            self.finished = True
        return True


class SessionEvents:
    """Flags set from signal handlers and drained by the input loop."""

    def __init__(self, teardown=None, hard_exit=os._exit):
        self.teardown = teardown if teardown is not None else Teardown()
        self._hard_exit = hard_exit
        self.redraw_pending = False
        self.terminate_signal = None
        self._previous = {}

    @property
    def terminate_requested(self) -> bool:
        return self.terminate_signal is not None

    def request_redraw(self, signum=None, frame=None):
        self.redraw_pending = True

    def request_terminate(self, signum=None, frame=None):
        if self.teardown.started:
            # request while shutting down: leave without cleanup
            self._hard_exit(1)
            return
        if self.terminate_requested:
            return
        self.terminate_signal = signum if signum is not None else 0

    def take_redraw(self) -> bool:
        pending = self.redraw_pending
        self.redraw_pending = False
        return pending

    def install(self):
        for name in REDRAW_SIGNALS:
            self._set_handler(name, self.request_redraw)
        for name in TERMINATE_SIGNALS:
            self._set_handler(name, self.request_terminate)
        self.teardown.register(self.uninstall)

    def _set_handler(self, name, handler):
        sig = getattr(signal, name, None)
        if sig is None:
            return
        previous = signal.signal(sig, handler)
        # None means the old handler was not installed from Python
        self._previous[sig] = signal.SIG_DFL if previous is None else previous

    def uninstall(self):
        while self._previous:
            sig, handler = self._previous.popitem()
            signal.signal(sig, handler)

"""Shared test helpers for Pomodoro."""

import httpx

from pomodoro.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_down(engine: TimerEngine, ticks: int) -> None:
    """Deliver *ticks* timer timeouts without waiting for real seconds."""
    for _ in range(ticks):
        engine._on_tick()


def mock_client_factory(routes: dict):
    """Build an httpx.Client factory answering from *routes*.

    *routes* maps a URL path to either a zero-argument callable returning
    an ``httpx.Response`` or an exception instance to raise.  Unknown
    paths get a 404.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        answer = routes.get(request.url.path)
        if answer is None:
            return httpx.Response(404)
        if isinstance(answer, Exception):
            raise answer
        return answer()

    def factory() -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return factory

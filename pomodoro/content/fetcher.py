"""Best-effort loading of the quote and date shown above the timer.

Requests run on a :class:`QThreadPool` so the event loop never blocks.
Results come back through a queued signal and are applied on the UI
thread.  Every :meth:`ContentFetcher.fetch_all` call starts a new
generation; :meth:`ContentFetcher.shutdown` starts one too, so results
that arrive for an older generation are dropped.
"""

from __future__ import annotations

import logging
from typing import Callable

import httpx
from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal, pyqtSlot

from .client import ContentError, fetch_date, fetch_quote

logger = logging.getLogger(__name__)

QUOTE = "quote"
DATE = "date"

ClientFactory = Callable[[], httpx.Client]


class _Relay(QObject):
    """Carries a job result from a pool thread back to the UI thread."""

    finished = pyqtSignal(str, int, str)  # kind, generation, text


class _FetchJob(QRunnable):
    def __init__(
        self,
        kind: str,
        url: str,
        generation: int,
        relay: _Relay,
        client_factory: ClientFactory,
    ) -> None:
        super().__init__()
        self._kind = kind
        self._url = url
        self._generation = generation
        self._relay = relay
        self._client_factory = client_factory

    def run(self) -> None:
        try:
            with self._client_factory() as client:
                if self._kind == QUOTE:
                    text = fetch_quote(client, self._url).quote
                else:
                    text = fetch_date(client, self._url).date
        except ContentError as e:
            logger.warning("Failed to get %s: %s", self._kind, e)
            return
        except Exception:
            # Nothing may escape run() on a pool thread
            logger.exception("Unexpected error while fetching %s", self._kind)
            return
        self._relay.finished.emit(self._kind, self._generation, text)


class ContentFetcher(QObject):
    """Owns the display text for the quote and the date.

    Signals
    -------
    quote_ready(text: str)
    date_ready(text: str)
        Emitted on the UI thread after a successful fetch.  Failures emit
        nothing and leave the previous text in place.
    """

    quote_ready = pyqtSignal(str)
    date_ready = pyqtSignal(str)

    def __init__(
        self,
        quote_url: str,
        date_url: str,
        parent: QObject | None = None,
        *,
        pool: QThreadPool | None = None,
        client_factory: ClientFactory = httpx.Client,
    ) -> None:
        super().__init__(parent)
        self._quote_url = quote_url
        self._date_url = date_url
        self._pool = pool if pool is not None else QThreadPool.globalInstance()
        self._client_factory = client_factory

        self._generation: int = 0
        self._quote_text: str = ""
        self._date_text: str = ""

        # No parent: jobs keep a reference, so the relay outlives us if needed.
        self._relay = _Relay()
        self._relay.finished.connect(self._on_job_finished)

    @property
    def quote_text(self) -> str:
        return self._quote_text

    @property
    def date_text(self) -> str:
        return self._date_text

    @property
    def generation(self) -> int:
        return self._generation

    def fetch_all(self) -> None:
        """Kick off one quote request and one date request."""
        self._generation += 1
        for kind, url in ((QUOTE, self._quote_url), (DATE, self._date_url)):
            job = _FetchJob(
                kind, url, self._generation, self._relay, self._client_factory,
            )
            self._pool.start(job)

    def shutdown(self) -> None:
        """Drop any result still in flight."""
        self._generation += 1

    @pyqtSlot(str, int, str)
    def _on_job_finished(self, kind: str, generation: int, text: str) -> None:
        if generation != self._generation:
            logger.debug("Discarding stale %s result", kind)
            return
        if kind == QUOTE:
            self._quote_text = text
            self.quote_ready.emit(text)
        else:
            self._date_text = text
            self.date_ready.emit(text)

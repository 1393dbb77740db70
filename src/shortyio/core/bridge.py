# -*- coding: utf-8 -*-
"""
src/shortyio/core/bridge.py

Bridges the UI thread and the background network call.

A submission is validated synchronously on the caller's thread. If it is
valid, the `OutcomeSlot` is switched to loading and a daemon thread performs
the blocking HTTP call. When it finishes, the worker writes the outcome into
the slot and calls `notify()` so the UI can drain the slot promptly.

Each submission gets a generation number. The slot only accepts an outcome
tagged with the current generation, so a late answer from an earlier
submission can never overwrite a newer one.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import Settings
from .client import ShortIoClient
from .errors import ShortyError, ValidationError
from .models import LinkRequest, LinkResult

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "API key is required. Click settings (⚙) to configure."
MISSING_URL_MESSAGE = "Original URL is required"


@dataclass(frozen=True)
class Outcome:
    """The result of one submission: exactly one of `result` or `error` is set."""

    generation: int
    result: Optional[LinkResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


class OutcomeSlot:
    """
    A lock-guarded mailbox holding at most one pending outcome.

    Written by the background worker, drained by the UI thread.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0
        self._loading = False
        self._pending: Optional[Outcome] = None

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._loading

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def begin(self) -> int:
        """Starts a new submission and returns its generation."""
        with self._lock:
            self._generation += 1
            self._loading = True
            self._pending = None
            return self._generation

    def deliver(self, outcome: Outcome) -> bool:
        """
        Stores an outcome if it belongs to the current submission.

        Returns:
            bool: False if the outcome was stale and discarded.
        """
        with self._lock:
            if outcome.generation != self._generation:
                logger.warning(
                    f"Discarding stale outcome for submission {outcome.generation} "
                    f"(current is {self._generation})"
                )
                return False
            self._pending = outcome
            self._loading = False
            return True

    def take(self) -> Optional[Outcome]:
        """Removes and returns the pending outcome, if any."""
        with self._lock:
            outcome, self._pending = self._pending, None
            return outcome


class RequestBridge:
    """
    Dispatches link requests on a background thread and reports back
    through an `OutcomeSlot`.
    """

    def __init__(self, client: ShortIoClient, notify: Optional[Callable[[], None]] = None,
                 slot: Optional[OutcomeSlot] = None):
        """
        Args:
            client (ShortIoClient): Performs the actual HTTP call.
            notify (Callable[[], None], optional): Called from the worker thread
                after an outcome was written. Used to request a UI redraw.
            slot (OutcomeSlot, optional): Mailbox to deliver into.
        """
        self.client = client
        self.notify = notify
        self.slot = slot if slot is not None else OutcomeSlot()

    @property
    def loading(self) -> bool:
        return self.slot.loading

    def submit(self, request: LinkRequest, settings: Settings) -> Optional[int]:
        """
        Validates a request and, if valid, starts it in the background.

        Args:
            request (LinkRequest): The request built from the form.
            settings (Settings): Snapshot of the API key and default domain.

        Returns:
            Optional[int]: The submission's generation, or None if a previous
            submission is still loading and this one was not started.

        Raises:
            ValidationError: If the API key or the original URL is empty. No
                state is changed in that case.
        """
        if not settings.api_key:
            raise ValidationError(MISSING_API_KEY_MESSAGE)
        if not request.original_url:
            raise ValidationError(MISSING_URL_MESSAGE)

        if self.slot.loading:
            logger.warning("A short link is already being created; ignoring submission.")
            return None

        request = request.with_domain(settings.domain)
        generation = self.slot.begin()
        worker = threading.Thread(
            target=self._run,
            args=(generation, request, settings.api_key),
            name=f"shortyio-request-{generation}",
            daemon=True,
        )
        worker.start()
        logger.debug(f"Submission {generation} dispatched on {worker.name}")
        return generation

    def _run(self, generation: int, request: LinkRequest, api_key: str):
        """Worker body. Always delivers exactly one outcome."""
        try:
            result = self.client.create_link(request, api_key)
            outcome = Outcome(generation, result=result)
        except ShortyError as e:
            outcome = Outcome(generation, error=str(e))
        except Exception as e:
            logger.exception("Unexpected error while creating a short link")
            outcome = Outcome(generation, error=f"Unexpected error: {e}")

        self.slot.deliver(outcome)
        if self.notify:
            self.notify()

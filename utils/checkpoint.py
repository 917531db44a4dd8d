"""
Cooperative checkpoints for long-running team generation.

The shuffler calls a Checkpoint after each skill tier is distributed and every
few optimizer rounds. Batch callers can ignore it; interactive callers can pass
a hook (e.g. to pump an event loop or report progress) and a threading.Event
to request cancellation. Cancellation is only observed at checkpoints, so the
in-progress partition is never abandoned mid-swap.
"""

import threading
from collections.abc import Callable


class GenerationCancelled(Exception):
    """Raised at a checkpoint once cancellation has been requested."""


class Checkpoint:
    """
    Callable suspension point.

    Args:
        hook: Optional callable invoked at every checkpoint
        cancel_event: Optional event; when set, the next checkpoint raises
            GenerationCancelled
    """

    def __init__(
        self,
        hook: Callable[[], None] | None = None,
        cancel_event: threading.Event | None = None,
    ):
        self.hook = hook
        self.cancel_event = cancel_event
        self.count = 0

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def __call__(self) -> None:
        self.count += 1
        if self.hook is not None:
            self.hook()
        if self.cancelled:
            raise GenerationCancelled(f"Generation cancelled at checkpoint {self.count}")

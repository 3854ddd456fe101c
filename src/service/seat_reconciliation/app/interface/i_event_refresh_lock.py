"""
Event Refresh Lock Interface

At most one reconciliation pass may run per event: the pass reads, modifies and
writes the event's history and snapshot records.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class IEventRefreshLock(ABC):
    @abstractmethod
    def hold(self, *, event_id: str) -> AbstractAsyncContextManager[None]:
        """
        Guard one refresh of an event.

        Usage:
            async with lock.hold(event_id='abc'):
                ...

        Raises:
            RefreshInProgressError: When the implementation fails fast instead of waiting
        """
        pass

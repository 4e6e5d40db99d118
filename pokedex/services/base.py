import asyncio
import logging
from typing import Coroutine, Generic, TypeVar

from pokedex.states import ObservableState

logger = logging.getLogger(__name__)

S = TypeVar("S")


class StateHolder(Generic[S]):
    """Owns one ObservableState and runs the async work that mutates it."""

    def __init__(self, initial_state: S):
        self.state: ObservableState[S] = ObservableState(initial_state)
        # Strong references to in-flight work; the event loop only keeps weak ones
        self._tasks: set[asyncio.Task] = set()

    def _launch(self, coro: Coroutine) -> asyncio.Task:
        """Schedules `coro` on the running loop without waiting for it."""
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _publish(self, **changes) -> S:
        logger.debug(f"{type(self).__name__} -> {changes.get('status')}")
        return self.state.update(lambda current: current.model_copy(update=changes))

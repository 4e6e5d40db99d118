import logging
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from pokedex.models import Creature, CreatureDetails, User

logger = logging.getLogger(__name__)

S = TypeVar("S")


class Status(str, Enum):
    """Progress of an asynchronous operation, as seen by the presentation layer."""
    INIT = "INIT"  # nothing triggered yet
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class PokemonListUiState(BaseModel):
    model_config = ConfigDict(frozen=True)

    pokemon_list: tuple[Creature, ...] = ()
    status: Status = Status.INIT
    error: Optional[str] = None


class PokemonDetailsUiState(BaseModel):
    model_config = ConfigDict(frozen=True)

    details: Optional[CreatureDetails] = None
    status: Status = Status.INIT
    error: Optional[str] = None


class AuthUiState(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: Optional[User] = None
    status: Status = Status.INIT
    error: Optional[str] = None


class ObservableState(Generic[S]):
    """
    Holds the current snapshot of one piece of UI state and notifies listeners on change.

    Only the latest snapshot is kept: listeners are called synchronously on every
    update, and an update equal to the current snapshot is dropped without
    notifying anyone.
    """

    def __init__(self, initial: S):
        self._value = initial
        self._listeners: list[Callable[[S], None]] = []

    @property
    def value(self) -> S:
        return self._value

    def subscribe(self, listener: Callable[[S], None]) -> Callable[[], None]:
        """Registers a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, transform: Callable[[S], S]) -> S:
        new_value = transform(self._value)
        if new_value == self._value:
            return self._value

        self._value = new_value
        # Copy so a listener may unsubscribe while being notified
        for listener in list(self._listeners):
            try:
                listener(new_value)
            except Exception:
                # Remaining listeners still get the snapshot; the publisher never sees the error
                logger.exception(f"State listener {listener!r} failed")
        return new_value

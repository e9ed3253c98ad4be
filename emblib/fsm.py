"""Finite state machines whose states are long-lived objects with enter/exit hooks."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from emblib.chrono import Duration, SteadyClock


class AbstractState(ABC):
    """One state of an :class:`AbstractObject`.

    Subclasses implement :meth:`initiate`, called on entering the state, and
    :meth:`finalize`, called on leaving it.
    """

    def __init__(self, state_id: Hashable) -> None:
        self._id = state_id
        self._enter_timepoint = SteadyClock.now()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"

    def id(self) -> Hashable:
        """Identifier of this state."""
        return self._id

    def time_since_enter(self) -> Duration:
        """Time elapsed on the steady clock since this state was last entered."""
        return SteadyClock.now() - self._enter_timepoint

    def _mark_entered(self) -> None:
        self._enter_timepoint = SteadyClock.now()

    @abstractmethod
    def initiate(self, obj: AbstractObject, prev_state: Hashable) -> None:
        """Called after ``obj`` has switched into this state from ``prev_state``."""

    @abstractmethod
    def finalize(self, obj: AbstractObject, next_state: Hashable) -> None:
        """Called before ``obj`` leaves this state for ``next_state``."""


class AbstractObject:
    """Owner of a fixed set of states, one of which is current.

    ``state_factory`` is called once per identifier in ``states`` and must
    return the state object for it. The initial state is entered without
    calling its :meth:`AbstractState.initiate`.
    """

    def __init__(
        self,
        state_factory: Callable[[Any], AbstractState],
        states: Iterable[Hashable],
        init_state: Hashable,
    ) -> None:
        self._states: dict[Hashable, AbstractState] = {}
        for state_id in states:
            state = state_factory(state_id)
            if state.id() != state_id:
                raise ValueError(
                    f"factory returned state {state.id()!r} for {state_id!r}"
                )
            self._states[state_id] = state
        if not self._states:
            raise ValueError("at least one state is required")
        self._lock = threading.RLock()
        self._current = self._lookup(init_state)

    def _lookup(self, state: Hashable) -> AbstractState:
        try:
            return self._states[state]
        except KeyError:
            raise ValueError(f"unknown state {state!r}") from None

    def state(self) -> Hashable:
        """Identifier of the current state."""
        return self._current.id()

    def current(self) -> AbstractState:
        """The current state object."""
        return self._current

    def change_state(self, state: Hashable) -> None:
        """Leave the current state and enter ``state``, calling both hooks."""
        with self._lock:
            target = self._lookup(state)
            prev_state = self.state()
            self._current.finalize(self, state)
            self._current = target
            target._mark_entered()
            target.initiate(self, prev_state)
"""Reactive in-memory settings store.

Single source of truth for the current preference values. All updates
are synchronous: subscribers have been notified by the time an update
method returns. The store never touches persistent storage; callers
(use cases, UI handlers) own persistence.

Usage::

    store = SettingsStore()
    unsubscribe = store.subscribe(
        lambda state: state.font_scale,
        lambda new, old: print(f"{old} -> {new}"),
    )
    store.update_font_scale("large")
    unsubscribe()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from settings_sync.domain.models.enums import FontScale, PreferenceKey
from settings_sync.domain.models.settings import SettingsState, parse_preference

logger = logging.getLogger(__name__)

Selector = Callable[[SettingsState], Any]
Listener = Callable[[Any, Any], None]
Unsubscribe = Callable[[], None]


@dataclass(eq=False)
class _Subscription:
    selector: Selector
    listener: Listener
    last: Any
    active: bool = True


class SettingsStore:
    """Holds a ``SettingsState`` snapshot and notifies slice subscribers.

    Parameters
    ----------
    initial : SettingsState | None
        Starting snapshot. Defaults to the compiled-in preference defaults
        with ``is_hydrated=False``.
    """

    def __init__(self, initial: SettingsState | None = None) -> None:
        self._state = initial or SettingsState()
        self._subscriptions: list[_Subscription] = []

    # -- Read ----------------------------------------------------------------

    def get_state(self) -> SettingsState:
        """Return the current snapshot."""
        return self._state

    # -- Subscriptions -------------------------------------------------------

    def subscribe(
        self,
        selector: Selector,
        listener: Listener,
        *,
        fire_immediately: bool = False,
    ) -> Unsubscribe:
        """Call ``listener(new_slice, old_slice)`` whenever ``selector(state)`` changes.

        Args:
            selector: Picks the slice of state the listener cares about.
            listener: Invoked synchronously with the new and previous slice.
            fire_immediately: Also invoke the listener once now, with the
                current slice as both arguments.

        Returns:
            A callable that removes the subscription. Calling it twice is harmless.
        """
        sub = _Subscription(selector=selector, listener=listener, last=selector(self._state))
        self._subscriptions.append(sub)

        if fire_immediately:
            listener(sub.last, sub.last)

        def unsubscribe() -> None:
            if not sub.active:
                return
            sub.active = False
            self._subscriptions.remove(sub)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    # -- Updates -------------------------------------------------------------

    def update_font_scale(self, new_value: FontScale | str) -> None:
        """Replace the font scale preference.

        Raises:
            InvalidPreferenceValueError: If *new_value* is not a ``FontScale``
                value. State is left untouched.
        """
        self.update_preference(PreferenceKey.FONT_SCALE, new_value)

    def update_preference(self, key: PreferenceKey, new_value: Any) -> None:
        """Validate and apply *new_value* to the preference stored under *key*."""
        value = parse_preference(key, new_value)
        self._set_state(self._state.with_preference(key, value))

    def set_hydrated(self, flag: bool) -> None:
        """Set the hydration flag (used by startup reconciliation)."""
        self._set_state(self._state.model_copy(update={"is_hydrated": bool(flag)}))

    # -- Internal ------------------------------------------------------------

    def _set_state(self, new_state: SettingsState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        self._notify(new_state)

    def _notify(self, state: SettingsState) -> None:
        # Snapshot: listeners may subscribe/unsubscribe while we iterate
        for sub in list(self._subscriptions):
            if not sub.active:
                continue
            try:
                selected = sub.selector(state)
            except Exception:
                logger.exception("Settings selector raised; subscriber skipped")
                continue
            if selected == sub.last:
                continue
            previous, sub.last = sub.last, selected
            try:
                sub.listener(selected, previous)
            except Exception:
                logger.exception("Settings subscriber raised while handling a change")

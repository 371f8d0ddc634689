"""Per-user navigation history used by the "back" buttons."""

from __future__ import annotations

import logging
from collections import defaultdict, deque

logger = logging.getLogger(__name__)

MAX_HISTORY_SIZE = 20
MENU_BACK = "menu_back"


class NavigationHistory:
    """Remembers the screens each user has visited, newest last."""

    def __init__(self, max_size: int = MAX_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be positive")
        self._max_size = max_size
        self._histories: defaultdict[int, deque[str]] = defaultdict(deque)

    def add(self, user_id: int, state: str) -> None:
        """Record a visit to ``state``; a repeat of the latest state is ignored."""
        history = self._histories[user_id]
        if history and history[-1] == state:
            return
        history.append(state)
        if len(history) > self._max_size:
            history.popleft()
        logger.debug("history for %s: %s", user_id, " -> ".join(history))

    def go_back(self, user_id: int) -> str:
        """Drop the current state and return the one before it."""
        history = self._histories[user_id]
        logger.debug("going back for %s: %s", user_id, " -> ".join(history))
        if len(history) > 1:
            history.pop()
            return history[-1]
        return MENU_BACK

    def previous_state(self, user_id: int) -> str:
        """Return the state before the current one without changing history."""
        history = self._histories[user_id]
        if len(history) > 1:
            return history[-2]
        return MENU_BACK

    def states(self, user_id: int) -> list[str]:
        """Return a copy of the user's history, oldest first."""
        return list(self._histories.get(user_id, ()))
"""Calculator sessions, each owning its own entry list."""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from nutrition_calculator.services.entries import FoodEntryList

_logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Keeps one food entry list per calculator session.

    At most `max_sessions` lists are held; opening one more evicts the
    session that was used least recently.
    """

    max_sessions: int = 1000
    _sessions: "OrderedDict[UUID, FoodEntryList]" = field(
        default_factory=OrderedDict, init=False, repr=False
    )

    def create_session(self) -> tuple[UUID, FoodEntryList]:
        """Start a session with an empty entry list."""
        session_id = uuid4()
        entry_list = FoodEntryList()
        self._sessions[session_id] = entry_list
        _logger.info("Calculator session started: session_id=%s", session_id)
        while len(self._sessions) > max(self.max_sessions, 1):
            evicted_id, _ = self._sessions.popitem(last=False)
            _logger.info("Calculator session evicted: session_id=%s", evicted_id)
        return session_id, entry_list

    def get_session(self, session_id: UUID) -> FoodEntryList | None:
        """Return the entry list of a session, if present."""
        entry_list = self._sessions.get(session_id)
        if entry_list is not None:
            self._sessions.move_to_end(session_id)
        return entry_list

    def delete_session(self, session_id: UUID) -> bool:
        """Drop a session; return False when it does not exist."""
        if self._sessions.pop(session_id, None) is None:
            return False
        _logger.info("Calculator session closed: session_id=%s", session_id)
        return True

    def __len__(self) -> int:
        return len(self._sessions)

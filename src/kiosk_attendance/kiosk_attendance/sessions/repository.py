from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SessionDefinition


class SessionStore(Protocol):
    """Read interface for class sessions.

    Note (DIP): services depend on this protocol, never on a concrete database.
    """

    def list_sessions(self, teacher_id: Optional[int] = None) -> Sequence[SessionDefinition]:
        """Sessions ordered by start time, optionally limited to one teacher."""

        raise NotImplementedError

    def get_by_id(self, schedule_id: int) -> Optional[SessionDefinition]:
        raise NotImplementedError

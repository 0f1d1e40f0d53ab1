from __future__ import annotations

from typing import Protocol, Sequence

from .model import RosterMember


class RosterStore(Protocol):
    def list_students(self) -> Sequence[RosterMember]:
        """All students, ordered by full name."""

        raise NotImplementedError

from __future__ import annotations

from typing import Protocol, Sequence

from .model import ScanEvent


class ScanLogStore(Protocol):
    def get_logs(self, kiosk_id: int, limit: int) -> Sequence[ScanEvent]:
        """Most recent raw scan events for one kiosk (newest first)."""

        raise NotImplementedError

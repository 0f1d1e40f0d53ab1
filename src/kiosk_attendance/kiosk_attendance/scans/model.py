from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class ScanEvent:
    """Domain entity: one raw RFID tap at a kiosk.

    `timestamp` is kept as delivered by the log store (string or datetime) and
    parsed by the classifier, so a corrupt row only affects itself.
    """

    student_id: str
    timestamp: Union[str, datetime]
    kiosk_id: int
    log_id: Optional[int] = None

import itertools
import time
from collections import deque
from dataclasses import asdict, dataclass
from typing import Deque, Dict, List, Optional

from analyzers.facial_asymmetry import AsymmetryMetrics
from analyzers.posture import PostureMetrics
from risk_classifier import RiskLevel


@dataclass(frozen=True)
class AssessmentRecord:
    id: int
    asymmetry_metrics: AsymmetryMetrics
    posture_metrics: PostureMetrics
    risk_level: RiskLevel
    timestamp: float

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["risk_level"] = self.risk_level.value
        return data


class AssessmentHistory:
    """In-memory assessment log; oldest records fall off once maxlen is reached."""

    def __init__(self, maxlen: int = 500):
        self._buffer: Deque[AssessmentRecord] = deque(maxlen=maxlen)
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._buffer)

    def add(
        self,
        asymmetry: AsymmetryMetrics,
        posture: PostureMetrics,
        risk_level: RiskLevel,
        timestamp: Optional[float] = None,
    ) -> int:
        record = AssessmentRecord(
            id=next(self._ids),
            asymmetry_metrics=asymmetry,
            posture_metrics=posture,
            risk_level=RiskLevel(risk_level),
            timestamp=time.time() if timestamp is None else timestamp,
        )
        self._buffer.append(record)
        return record.id

    def latest(self) -> Optional[AssessmentRecord]:
        return self._buffer[-1] if self._buffer else None

    def recent(self, limit: int = 10) -> List[AssessmentRecord]:
        if limit <= 0:
            return []
        # Timestamps may be supplied by the caller, so insertion order is not enough.
        ordered = sorted(self._buffer, key=lambda r: (r.timestamp, r.id), reverse=True)
        return ordered[:limit]

    def stats(self) -> Dict[str, int]:
        counts = {level.value: 0 for level in RiskLevel}
        for record in self._buffer:
            counts[record.risk_level.value] += 1
        return {
            "total": len(self._buffer),
            "high": counts[RiskLevel.HIGH.value],
            "medium": counts[RiskLevel.MEDIUM.value],
            "low": counts[RiskLevel.LOW.value],
        }

    def clear(self) -> None:
        self._buffer.clear()

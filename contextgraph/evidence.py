import logging
from typing import Iterable, Iterator, List, Optional

from .graph.clock import SessionClock
from .graph.ids import IdGenerator
from .models.evidence import Evidence, EvidenceSource

logger = logging.getLogger(__name__)


class EvidenceLog:
    """
    Append-only, timestamped record of automated suggestions.

    There is no removal or mutation API: records are frozen and the
    backing list is only ever appended to. Consumers read it in
    insertion order (iteration) or newest first (`reversed`).
    """

    def __init__(
        self,
        ids: Optional[IdGenerator] = None,
        clock: Optional[SessionClock] = None,
    ) -> None:
        self._clock = clock or SessionClock()
        self._ids = ids or IdGenerator(self._clock)
        self._records: List[Evidence] = []

    @classmethod
    def from_records(
        cls,
        records: Iterable[Evidence],
        ids: Optional[IdGenerator] = None,
        clock: Optional[SessionClock] = None,
    ) -> "EvidenceLog":
        """Rebuild a log from previously exported records, order kept."""
        log = cls(ids=ids, clock=clock)
        for ev in records:
            log._ids.reserve([ev.id])
            log._records.append(ev)
        return log

    # ------------------------------------------------------------------
    # Append
    # ------------------------------------------------------------------

    def record(
        self,
        source: EvidenceSource,
        signal: str,
        confidence: float,
        action: str,
        fields: Iterable[str] = (),
    ) -> Evidence:
        now = self._clock.now()

        ev = Evidence(
            id=self._ids.make_id("ev", signal, now),
            when=now,
            source=source,
            signal=signal,
            confidence=confidence,
            action=action,
            fields=tuple(fields),
        )
        self._records.append(ev)

        logger.info(
            "[EVIDENCE] %s | %s -> %s | confidence=%.2f",
            ev.source,
            ev.signal,
            ev.action,
            ev.confidence,
        )
        return ev

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def touching(self, path: str) -> List[Evidence]:
        """Records explaining `path`, newest first."""
        return [ev for ev in reversed(self._records) if ev.touches(path)]

    def latest(self) -> Optional[Evidence]:
        return self._records[-1] if self._records else None

    def __iter__(self) -> Iterator[Evidence]:
        return iter(list(self._records))

    def __reversed__(self) -> Iterator[Evidence]:
        return reversed(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> Evidence:
        return self._records[index]

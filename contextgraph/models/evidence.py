from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Tuple

EvidenceSource = Literal["oauth", "web", "internal", "heuristic"]

EVIDENCE_SOURCES = ("oauth", "web", "internal", "heuristic")


@dataclass(frozen=True)
class Evidence:
    """
    Immutable provenance record for one automated suggestion or update.

    Every autofill, preselection, roster seed and enrichment pass
    leaves exactly one Evidence behind, so the UI can answer "why is
    this field filled in?" by reading the log.

    Attributes
    ----------
    source : {"oauth", "web", "internal", "heuristic"}
        Kind of origin of the signal.

    signal : str
        What was observed, e.g. ``predictTeamName(Label)``.

    confidence : float
        Confidence in [0.0, 1.0]. Out-of-range values are clamped.

    action : str
        Effect taken, e.g. ``autofill:team.name=Label Digital``.

    fields : tuple of str
        Dotted field paths affected. ``*`` stands for any one segment.
    """

    id: str
    when: int
    source: EvidenceSource
    signal: str
    confidence: float
    action: str
    fields: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.source not in EVIDENCE_SOURCES:
            raise ValueError(f"Unsupported evidence source: {self.source}")

        # Normalize confidence
        object.__setattr__(self, "confidence", max(0.0, min(1.0, float(self.confidence))))
        object.__setattr__(self, "fields", tuple(self.fields))

    # ------------------------------------------------------------------
    # Field Matching
    # ------------------------------------------------------------------

    def touches(self, path: str) -> bool:
        """
        True when any recorded field covers `path`.

        A field covers a path when they are equal segment by segment
        (``*`` matching any single segment), or when one is a dotted
        prefix of the other.
        """
        wanted = path.split(".")

        for recorded in self.fields:
            parts = recorded.split(".")
            common = min(len(parts), len(wanted))

            if all(a == b or "*" in (a, b) for a, b in zip(parts[:common], wanted[:common])):
                return True

        return False

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "when": self.when,
            "source": self.source,
            "signal": self.signal,
            "confidence": self.confidence,
            "action": self.action,
            "fields": list(self.fields),
        }

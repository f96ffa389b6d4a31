from dataclasses import dataclass
from typing import Dict

HAS_TEAM = "HAS_TEAM"
HAS_USER = "HAS_USER"
WORKS_ON = "WORKS_ON"


@dataclass(frozen=True)
class Edge:
    """
    Directed, labeled relationship between two nodes.

    `rel` is caller vocabulary; the graph only checks that both
    endpoints exist. Duplicate edges are allowed.
    """

    source: str
    target: str
    rel: str

    def to_dict(self) -> Dict[str, str]:
        return {"from": self.source, "to": self.target, "rel": self.rel}

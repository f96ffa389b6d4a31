import logging

from ..evidence import EvidenceLog
from ..models.evidence import Evidence
from .store import ContextGraph

logger = logging.getLogger(__name__)


class EnrichmentTick:
    """
    Simulated connector enrichment pass over the current graph.

    Responsibilities
    ----------------
    • Raise completeness and trust of every node while connectors are live
    • Pin recency to the enrichment level and register the activity
    • Leave one Evidence record per pass

    The pass mutates ranking fields in place. It never adds or removes
    nodes or edges, and running it repeatedly (or skipping it) is safe.
    """

    def __init__(self, graph: ContextGraph, evidence: EvidenceLog) -> None:
        self._graph = graph
        self._evidence = evidence

    def rescore_all(self, live_connector_count: int) -> Evidence:
        if live_connector_count < 0:
            raise ValueError("live_connector_count cannot be negative")

        config = self._graph.config
        has_data = live_connector_count > 0

        for node in list(self._graph.nodes()):
            ranking = node.ranking
            step_c = config.enrich_completeness_step if has_data else 0
            step_t = config.enrich_trust_step if has_data else 0

            self._graph.touch(
                node,
                completeness=min(100, ranking.completeness + step_c),
                trust=min(100, ranking.trust + step_t),
                recency=config.enrich_recency,
            )

        logger.info(
            "[ENRICH] Rescored %d nodes | live_connectors=%d",
            len(self._graph),
            live_connector_count,
        )

        return self._evidence.record(
            source="internal",
            signal=f"connector.health={live_connector_count}",
            confidence=config.enrich_confidence,
            action="rank.update:trust+completeness",
            fields=["graph.nodes.*.ranking"],
        )

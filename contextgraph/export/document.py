from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..config import EngineConfig
from ..errors import ContextGraphError, ExportFormatError
from ..evidence import EvidenceLog
from ..graph.clock import SessionClock
from ..graph.edges import Edge
from ..graph.ids import IdGenerator
from ..graph.nodes import Node, NodeType
from ..graph.ranking import DEFAULT_WEIGHTS, Ranking, RankingWeights
from ..graph.store import ContextGraph
from ..models.evidence import Evidence

logger = logging.getLogger(__name__)

DOCUMENT_FORMAT = "contextgraph.seed"
DOCUMENT_VERSION = 1

Number = Union[int, float]


# ============================================================
# Document Models
# ============================================================

class RankingModel(BaseModel):
    recency: Number
    frequency: Number
    completeness: Number
    trust: Number
    score: int


class WeightsModel(BaseModel):
    recency: float = DEFAULT_WEIGHTS.recency
    frequency: float = DEFAULT_WEIGHTS.frequency
    completeness: float = DEFAULT_WEIGHTS.completeness
    trust: float = DEFAULT_WEIGHTS.trust

    def to_weights(self) -> RankingWeights:
        try:
            return RankingWeights(**self.model_dump())
        except ValueError as e:
            raise ExportFormatError(f"Ranking weights are invalid: {e}") from e


class NodeModel(BaseModel):
    id: str
    name: str
    type: NodeType
    attrs: Dict[str, Any] = Field(default_factory=dict)
    created_at: int
    updated_at: int
    ranking: RankingModel

    def to_node(self, weights: RankingWeights) -> Node:
        ranking = Ranking(
            recency=self.ranking.recency,
            frequency=self.ranking.frequency,
            completeness=self.ranking.completeness,
            trust=self.ranking.trust,
            weights=weights,
        )

        if ranking.score != self.ranking.score:
            raise ExportFormatError(
                f"Node '{self.id}' stores score {self.ranking.score}, "
                f"but its inputs rank to {ranking.score}."
            )

        try:
            return Node(
                id=self.id,
                type=self.type,
                name=self.name,
                attrs=self.attrs,
                created_at=self.created_at,
                updated_at=self.updated_at,
                ranking=ranking,
            )
        except ValueError as e:
            raise ExportFormatError(f"Node '{self.id}' is malformed: {e}") from e


class EdgeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    rel: str


class EvidenceModel(BaseModel):
    id: str
    when: int
    source: Literal["oauth", "web", "internal", "heuristic"]
    signal: str
    confidence: float = Field(ge=0.0, le=1.0)
    action: str
    fields: List[str] = Field(default_factory=list)


class GraphModel(BaseModel):
    nodes: Dict[str, NodeModel] = Field(default_factory=dict)
    edges: List[EdgeModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _keys_match_ids(self) -> "GraphModel":
        for key, node in self.nodes.items():
            if key != node.id:
                raise ValueError(f"Node key '{key}' does not match node id '{node.id}'")
        return self


class ExportDocument(BaseModel):
    """
    Portable seed document: the whole graph plus the evidence log.

    The document is self-describing (`format`, `version`) and carries
    every node field (ids, attrs, ranking inputs and score, timestamps),
    every edge, every evidence record and the ranking weights the scores
    were computed with, so `restore` rebuilds structures equal to the
    exported ones.
    """

    format: Literal["contextgraph.seed"] = DOCUMENT_FORMAT
    version: Literal[1] = DOCUMENT_VERSION
    exported_at: int
    weights: WeightsModel = Field(default_factory=WeightsModel)
    graph: GraphModel
    evidence: List[EvidenceModel] = Field(default_factory=list)
    memory: Optional[Dict[str, Any]] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        graph: ContextGraph,
        log: EvidenceLog,
        memory: Optional[Dict[str, Any]] = None,
        exported_at: Optional[int] = None,
    ) -> "ExportDocument":
        state = graph.to_dict()

        return cls(
            exported_at=graph.clock.now() if exported_at is None else exported_at,
            weights=WeightsModel.model_validate(asdict(graph.config.weights)),
            graph=GraphModel.model_validate(state),
            evidence=[EvidenceModel.model_validate(ev.to_dict()) for ev in log],
            memory=memory,
        )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(indent=indent, by_alias=True)

    def restore(self, config: Optional[EngineConfig] = None) -> Tuple[ContextGraph, EvidenceLog]:
        """
        Rebuild the graph and evidence log this document was exported from.

        Without an explicit `config`, scores are checked against the
        weights recorded in the document. The restored session clock
        starts at the latest timestamp in the document, and all restored
        ids are reserved.
        """
        config = config or EngineConfig(weights=self.weights.to_weights())

        stamps = [self.exported_at]
        stamps.extend(n.updated_at for n in self.graph.nodes.values())
        stamps.extend(ev.when for ev in self.evidence)

        clock = SessionClock(start=max(stamps))
        ids = IdGenerator(clock)
        graph = ContextGraph(ids=ids, clock=clock, config=config)

        nodes = [n.to_node(config.weights) for n in self.graph.nodes.values()]
        edges = [Edge(e.source, e.target, e.rel) for e in self.graph.edges]

        try:
            graph.replace_graph(nodes, edges)
        except ContextGraphError as e:
            raise ExportFormatError(f"Graph section is inconsistent: {e}") from e

        log = EvidenceLog.from_records(
            (Evidence(**ev.model_dump()) for ev in self.evidence),
            ids=ids,
            clock=clock,
        )

        logger.info(
            "[EXPORT] Restored document | nodes=%d | edges=%d | evidence=%d",
            len(graph),
            len(edges),
            len(log),
        )
        return graph, log


# ============================================================
# Module API
# ============================================================

def export_document(
    graph: ContextGraph,
    log: EvidenceLog,
    memory: Optional[Dict[str, Any]] = None,
) -> ExportDocument:
    doc = ExportDocument.build(graph, log, memory=memory)

    logger.info(
        "[EXPORT] Exported document | nodes=%d | evidence=%d",
        len(doc.graph.nodes),
        len(doc.evidence),
    )
    return doc


def load_document(text: Union[str, bytes]) -> ExportDocument:
    try:
        return ExportDocument.model_validate_json(text)
    except ValidationError as e:
        raise ExportFormatError(f"Invalid export document: {e}") from e

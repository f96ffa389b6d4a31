import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..config import EngineConfig
from ..errors import DanglingEdgeError, DuplicateNodeError, UnknownNodeError
from .clock import SessionClock
from .edges import Edge
from .ids import IdGenerator
from .nodes import Node, NodeAttrs, NodeType, attrs_for
from .ranking import Number, Ranking

logger = logging.getLogger(__name__)


class ContextGraph:
    """
    Session-scoped entity graph of the onboarding wizard.

    This class is a *data structure only*: it creates, stores and
    touches nodes and edges. Re-scoring policy lives in
    `EnrichmentTick`, and the transition from form data into graph
    data lives in `GraphFinalizer`.

    Invariants
    ----------
    • Node ids are unique (issued by one IdGenerator, checked on insert)
    • Every edge endpoint references a node in the graph
    • A node's score always equals the ranking function of its inputs
    """

    def __init__(
        self,
        ids: Optional[IdGenerator] = None,
        clock: Optional[SessionClock] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self._clock = clock or SessionClock()
        self._ids = ids or IdGenerator(self._clock)
        self._config = config or EngineConfig()

        self._nodes: Dict[str, Node] = {}
        self._edges: List[Edge] = []

    @property
    def ids(self) -> IdGenerator:
        return self._ids

    @property
    def clock(self) -> SessionClock:
        return self._clock

    @property
    def config(self) -> EngineConfig:
        return self._config

    # ------------------------------------------------------------------
    # Node Construction
    # ------------------------------------------------------------------

    def create_node(
        self,
        type_: Union[NodeType, str],
        name: str,
        attrs: Union[None, Mapping[str, Any], NodeAttrs] = None,
    ) -> Node:
        """
        Build a new node with a fresh id and the seed ranking.

        The node is NOT inserted; use `add_node` or `replace_graph`.

        Returns
        -------
        Node
            Node with `created_at == updated_at == now`.
        """
        type_ = NodeType(type_)
        label = name or type_.value.upper()
        now = self._clock.now()

        node = Node(
            id=self._ids.make_id(type_.value, label, now),
            type=type_,
            name=label,
            attrs=attrs_for(type_, attrs),
            created_at=now,
            updated_at=now,
            ranking=Ranking(weights=self._config.weights, **self._config.seed_ranking),
        )

        logger.debug("[GRAPH] Created node %s | score=%d", node.id, node.ranking.score)
        return node

    def touch(self, node: Node, **overrides: Number) -> None:
        """
        Register new activity on a node.

        Recency jumps to 100, frequency grows by the configured step
        (capped at 100), explicit overrides are applied last, and the
        score is recomputed.
        """
        if "score" in overrides:
            raise ValueError("score is derived and cannot be overridden")

        node.updated_at = max(node.created_at, self._clock.now())

        changes: Dict[str, Number] = {
            "recency": 100,
            "frequency": min(100, node.ranking.frequency + self._config.touch_frequency_step),
        }
        changes.update(overrides)
        node.ranking.update(**changes)

    # ------------------------------------------------------------------
    # Node Operations
    # ------------------------------------------------------------------

    def add_node(self, node: Node) -> Node:
        if node.id in self._nodes:
            raise DuplicateNodeError(f"Node '{node.id}' already exists.")

        self._ids.reserve([node.id])
        self._nodes[node.id] = node
        return node

    def get_node(self, node_id: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(f"Node '{node_id}' is not in the graph.") from None

    def get_nodes_by_type(self, type_: Union[NodeType, str]) -> List[Node]:
        type_ = NodeType(type_)
        return [n for n in self._nodes.values() if n.type == type_]

    def nodes(self) -> Iterable[Node]:
        return self._nodes.values()

    def ranked(self, limit: Optional[int] = None) -> List[Node]:
        """Nodes by descending score; ties broken by name."""
        ordered = sorted(self._nodes.values(), key=lambda n: (-n.ranking.score, n.name))
        return ordered if limit is None else ordered[:limit]

    # ------------------------------------------------------------------
    # Edge Operations
    # ------------------------------------------------------------------

    def add_edge(self, source: str, target: str, rel: str) -> Edge:
        """Add a directed relationship between two existing nodes."""
        edge = Edge(source, target, rel)
        self._check_edges([edge], self._nodes)
        self._edges.append(edge)
        return edge

    def edges(self) -> Iterable[Edge]:
        return self._edges

    def neighbors(self, node_id: str, rel: Optional[str] = None) -> List[Node]:
        """Targets of outgoing edges from `node_id`, optionally by relation."""
        self.get_node(node_id)
        return [
            self._nodes[e.target]
            for e in self._edges
            if e.source == node_id and (rel is None or e.rel == rel)
        ]

    # ------------------------------------------------------------------
    # Wholesale Replacement
    # ------------------------------------------------------------------

    def replace_graph(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        """
        Swap the entire graph contents in one step.

        The new contents are validated first; if validation fails the
        current graph is left untouched. Old node identities are
        discarded, never merged.
        """
        staged: Dict[str, Node] = {}
        for node in nodes:
            if node.id in staged:
                raise DuplicateNodeError(f"Node '{node.id}' appears twice.")
            staged[node.id] = node

        staged_edges = list(edges)
        self._check_edges(staged_edges, staged)

        self._ids.reserve(staged)
        self._nodes = staged
        self._edges = staged_edges

        logger.info(
            "[GRAPH] Replaced graph | nodes=%d | edges=%d",
            len(staged),
            len(staged_edges),
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _check_edges(edges: Iterable[Edge], nodes: Mapping[str, Node]) -> None:
        for edge in edges:
            missing = [end for end in (edge.source, edge.target) if end not in nodes]
            if missing:
                raise DanglingEdgeError(
                    f"Edge {edge.source} -[{edge.rel}]-> {edge.target} "
                    f"references unknown nodes: {missing}"
                )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": {nid: n.to_dict() for nid, n in self._nodes.items()},
            "edges": [e.to_dict() for e in self._edges],
        }

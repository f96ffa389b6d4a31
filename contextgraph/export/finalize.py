import logging
from typing import Iterable, Optional

from ..graph.edges import HAS_TEAM, HAS_USER, WORKS_ON, Edge
from ..graph.nodes import NodeType
from ..graph.store import ContextGraph
from ..models.forms import ArtistSeed, NamingConventions, OrgForm, TeamForm, UserForm

logger = logging.getLogger(__name__)


class GraphFinalizer:
    """
    Single transition point from wizard form data to graph data.

    Each call builds a complete, fresh set of nodes (new ids every
    time) and installs it with one `replace_graph`. Earlier node
    identities are discarded, not merged.
    """

    DEFAULT_ORG_NAME = "Your Organization"
    DEFAULT_TEAM_NAME = "Team"
    DEFAULT_USER_NAME = "User"

    def __init__(self, graph: ContextGraph) -> None:
        self._graph = graph

    def finalize(
        self,
        org: OrgForm,
        team: TeamForm,
        user: UserForm,
        artists: Iterable[ArtistSeed],
        naming: Optional[NamingConventions] = None,
    ) -> ContextGraph:
        naming = naming or NamingConventions()
        graph = self._graph

        org_node = graph.create_node(
            NodeType.ORG,
            naming.org or org.name or self.DEFAULT_ORG_NAME,
            org.to_attrs(),
        )
        team_node = graph.create_node(
            NodeType.TEAM,
            naming.team or team.name or self.DEFAULT_TEAM_NAME,
            team.to_attrs(),
        )
        user_node = graph.create_node(
            NodeType.USER,
            naming.user or user.name or self.DEFAULT_USER_NAME,
            user.to_attrs(),
        )

        artist_nodes = [
            graph.create_node(
                NodeType.ARTIST,
                f"{naming.artist}:{seed.name}" if naming.artist else seed.name,
                dict(seed.attrs),
            )
            for seed in artists
        ]

        edges = [
            Edge(org_node.id, team_node.id, HAS_TEAM),
            Edge(team_node.id, user_node.id, HAS_USER),
        ]
        edges.extend(Edge(team_node.id, a.id, WORKS_ON) for a in artist_nodes)

        graph.replace_graph([org_node, team_node, user_node, *artist_nodes], edges)

        logger.info(
            "[FINALIZE] Seeded graph | org=%s | team=%s | user=%s | artists=%d",
            org_node.name,
            team_node.name,
            user_node.name,
            len(artist_nodes),
        )
        return graph


def finalize(
    graph: ContextGraph,
    org: OrgForm,
    team: TeamForm,
    user: UserForm,
    artists: Iterable[ArtistSeed],
    naming: Optional[NamingConventions] = None,
) -> ContextGraph:
    return GraphFinalizer(graph).finalize(org, team, user, artists, naming)

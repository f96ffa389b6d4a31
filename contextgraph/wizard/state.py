from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..catalog import DEFAULT_GLOSSARY, GlossaryItem
from ..models.forms import ArtistSeed, NamingConventions, OrgForm, TeamForm, UserForm


@dataclass
class WizardState:
    """
    Mutable form state of one onboarding session.

    This is NOT the graph. It holds what the user has typed or
    accepted so far; only finalize turns it into graph nodes.
    """

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    org: OrgForm = field(default_factory=OrgForm)
    team: TeamForm = field(default_factory=TeamForm)
    user: UserForm = field(default_factory=UserForm)
    naming: NamingConventions = field(default_factory=NamingConventions)

    # ------------------------------------------------------------------
    # Data Sources
    # ------------------------------------------------------------------

    connectors: Dict[str, bool] = field(default_factory=dict)
    """Connector key -> toggled on. Keys absent were never touched."""

    deferred_connect: bool = True

    # ------------------------------------------------------------------
    # Semantic Layer & Roster
    # ------------------------------------------------------------------

    glossary: List[GlossaryItem] = field(default_factory=lambda: list(DEFAULT_GLOSSARY))
    artists: List[ArtistSeed] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    step: str = "org"
    memory: Dict[str, Any] = field(default_factory=dict)
    """Snapshot taken when the workspace is seeded."""

    def live_connectors(self) -> List[str]:
        return [k for k, on in self.connectors.items() if on]

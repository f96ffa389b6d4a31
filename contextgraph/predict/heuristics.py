"""
Predictive autofill heuristics.

All functions here are pure: they observe partial form state and
return a suggestion. Turning a suggestion into state, and recording the
Evidence that explains it, is the caller's job (see OnboardingSession).
"""

from typing import Dict, List, Optional

from ..graph.ids import IdGenerator
from ..models.forms import ArtistSeed
from .roster import RosterStrategy, label_fragment_strategy

TEAM_NAME_BY_DOMAIN: Dict[str, str] = {
    "Label": "Label Digital",
    "Distributor": "Partner Marketing",
    "Management": "Artist Management",
}

DEFAULT_TEAM_NAME = "Digital Marketing"   # domain not chosen yet
FALLBACK_TEAM_NAME = "Growth"             # any other domain

STREAMING_SOCIAL_CONNECTORS = ("spotify", "apple_music", "youtube", "tiktok", "meta")
SOCIAL_CONNECTORS = ("tiktok", "instagram", "youtube")
BASELINE_CONNECTORS = ("gsuite", "crm_salesforce")

CONNECTORS_BY_DOMAIN: Dict[str, tuple] = {
    "Label": STREAMING_SOCIAL_CONNECTORS,
    "Distributor": STREAMING_SOCIAL_CONNECTORS,
    "Management": SOCIAL_CONNECTORS,
}


def predict_team_name(domain: Optional[str]) -> str:
    if not domain:
        return DEFAULT_TEAM_NAME
    return TEAM_NAME_BY_DOMAIN.get(domain, FALLBACK_TEAM_NAME)


def predict_connectors(domain: Optional[str]) -> List[str]:
    """
    Connector keys to preselect for a business domain.

    Domain-specific keys come first, then the office/CRM baseline every
    domain gets. Duplicates are dropped, first occurrence wins.
    """
    keys = list(CONNECTORS_BY_DOMAIN.get(domain or "", ())) + list(BASELINE_CONNECTORS)
    return list(dict.fromkeys(keys))


def predict_artist_roster(
    org_name: str,
    team_name: str,
    ids: IdGenerator,
    strategy: Optional[RosterStrategy] = None,
) -> List[ArtistSeed]:
    """
    Seed a plausible artist roster.

    Parameters
    ----------
    org_name, team_name : str
        Free text from the org and team steps.

    ids : IdGenerator
        Source of fresh artist ids (one per seed).

    strategy : RosterStrategy, optional
        Name lookup to use. Defaults to label-fragment matching; swap
        in a real data-source lookup without touching anything else.
    """
    lookup = strategy or label_fragment_strategy
    names = lookup(org_name, team_name)

    return [
        ArtistSeed(id=ids.make_id("artist", name), name=name, attrs={"priority": "TBD"})
        for name in names
    ]

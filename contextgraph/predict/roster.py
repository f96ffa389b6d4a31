import re
from typing import Callable, List, Sequence, Tuple

RosterStrategy = Callable[[str, str], List[str]]
"""Maps (org name, team name) to seed artist names."""

# Known label fragments and the artists they imply.
LABEL_FRAGMENTS: Sequence[Tuple[re.Pattern, Tuple[str, ...]]] = (
    (re.compile(r"atlantic|warner|atl", re.IGNORECASE), ("Ed Sheeran", "Dua Lipa")),
    (re.compile(r"rhino|catalog", re.IGNORECASE), ("Fleetwood Mac", "Prince")),
)

PLACEHOLDER_ROSTER: Tuple[str, ...] = ("Your Top Artist", "Emerging Priority")


def label_fragment_strategy(org_name: str, team_name: str) -> List[str]:
    """
    Seed artist names from label name fragments in the org/team text.

    Every matching fragment contributes its artists, in table order.
    Falls back to two placeholders when nothing matches.
    """
    text = f"{org_name or ''}{team_name or ''}"

    seeds: List[str] = []
    for pattern, artists in LABEL_FRAGMENTS:
        if pattern.search(text):
            seeds.extend(artists)

    return seeds or list(PLACEHOLDER_ROSTER)

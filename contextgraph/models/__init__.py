"""
Records that move between the wizard, the graph and the export
document: provenance evidence and the onboarding form inputs.
"""

from .evidence import EVIDENCE_SOURCES, Evidence
from .forms import ArtistSeed, NamingConventions, OrgForm, TeamForm, UserForm

__all__ = [
    "EVIDENCE_SOURCES",
    "ArtistSeed",
    "Evidence",
    "NamingConventions",
    "OrgForm",
    "TeamForm",
    "UserForm",
]

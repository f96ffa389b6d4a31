from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from ..catalog import DEPARTMENTS, DOMAINS, LICENSES


def _check_choice(label: str, value: Optional[str], allowed) -> None:
    if value is not None and value not in allowed:
        raise ValueError(f"Unsupported {label}: {value!r} (expected one of {list(allowed)})")


@dataclass
class OrgForm:
    """Step 1: organization anchor."""

    name: str = ""
    license: Optional[str] = None
    country: Optional[str] = None
    domain: Optional[str] = None

    def __post_init__(self):
        _check_choice("license", self.license, LICENSES)
        _check_choice("domain", self.domain, DOMAINS)

    def to_attrs(self) -> Dict[str, Any]:
        return {"license": self.license, "country": self.country, "domain": self.domain}


@dataclass
class TeamForm:
    """Step 2: team nested under the organization."""

    name: str = ""
    dept: Optional[str] = None
    kpis: Optional[str] = None

    def __post_init__(self):
        _check_choice("department", self.dept, DEPARTMENTS)

    def to_attrs(self) -> Dict[str, Any]:
        return {"dept": self.dept, "kpis": self.kpis}


@dataclass
class UserForm:
    """Step 3: the person onboarding."""

    name: str = ""
    email: Optional[str] = None
    title: Optional[str] = None
    personal_license: Optional[str] = None
    projects: Optional[str] = None

    def __post_init__(self):
        _check_choice("personal license", self.personal_license, LICENSES)

    def to_attrs(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "title": self.title,
            "personal_license": self.personal_license,
        }


@dataclass
class NamingConventions:
    """
    Step 5: optional display-name overrides per entity type.

    When set, the convention replaces the form name of the matching
    node at finalize time (artists get ``{convention}:{artist}``).
    """

    org: Optional[str] = None
    team: Optional[str] = None
    user: Optional[str] = None
    artist: Optional[str] = None
    ip: Optional[str] = None
    project: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.org and self.team and self.user)


@dataclass
class ArtistSeed:
    """Roster entry before it becomes an artist node."""

    id: str
    name: str
    attrs: Dict[str, Any] = field(default_factory=dict)


def form_to_dict(form) -> Dict[str, Any]:
    return {k: v for k, v in asdict(form).items() if v is not None}

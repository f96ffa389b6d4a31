"""
Static catalogs the wizard offers as choices: licenses, business
domains, departments, data connectors and the starter glossary.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

LICENSES: Tuple[str, ...] = ("Enterprise", "Pro", "Label Services", "Indie")

DOMAINS: Tuple[str, ...] = (
    "Label",
    "Management",
    "Distributor",
    "Publisher",
    "Agency",
    "Other",
)

DEPARTMENTS: Tuple[str, ...] = (
    "Marketing",
    "A&R",
    "Finance",
    "Ops",
    "Legal",
    "Data/BI",
    "Product",
    "Other",
)


@dataclass(frozen=True)
class Connector:
    key: str
    name: str
    category: str


CONNECTORS: Tuple[Connector, ...] = (
    Connector("meta", "Meta Ads", "Ads"),
    Connector("google_ads", "Google Ads", "Ads"),
    Connector("tiktok", "TikTok", "Social"),
    Connector("instagram", "Instagram", "Social"),
    Connector("youtube", "YouTube", "Streaming"),
    Connector("spotify", "Spotify for Artists", "Streaming"),
    Connector("apple_music", "Apple Music for Artists", "Streaming"),
    Connector("soundcloud", "SoundCloud", "Streaming"),
    Connector("m365", "Microsoft 365", "Office"),
    Connector("gsuite", "Google Workspace", "Office"),
    Connector("linkedin", "LinkedIn", "Social"),
    Connector("crm_salesforce", "Salesforce", "CRM"),
    Connector("erp_netsuite", "NetSuite", "ERP"),
    Connector("bi_tableau", "Tableau Cloud", "BI"),
    Connector("bi_lookerstudio", "Looker Studio", "BI"),
    Connector("daw_ableton", "Ableton Live", "DAW"),
    Connector("websites", "Websites (GA4)", "Web"),
    Connector("storage_s3", "AWS S3", "Storage"),
)

CONNECTORS_BY_KEY: Dict[str, Connector] = {c.key: c for c in CONNECTORS}


@dataclass(frozen=True)
class GlossaryItem:
    key: str
    description: str
    entity: Optional[str] = None
    calc: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        out = {"key": self.key, "description": self.description}
        if self.entity:
            out["entity"] = self.entity
        if self.calc:
            out["calc"] = self.calc
        return out


DEFAULT_GLOSSARY: Tuple[GlossaryItem, ...] = (
    GlossaryItem("Reach", "Unique users reached by content or ads over a period", entity="artist"),
    GlossaryItem("Frequency", "Avg. impressions per user", entity="artist"),
    GlossaryItem("Streams", "Total streams across DSPs; counted per platform rules", entity="artist"),
    GlossaryItem("Saves", "User saved track to library or playlist", entity="ip"),
    GlossaryItem("CPS", "Cost per incremental stream (modeled)", calc="AdSpend / IncrementalStreams"),
)

"""
Context Graph Engine.

Session-scoped entity graph with provenance-driven ranking and
predictive autofill for the onboarding wizard.
"""

from .app import ContextGraphApp, configure_logging
from .config import EngineConfig
from .evidence import EvidenceLog
from .export.document import ExportDocument, export_document, load_document
from .export.finalize import GraphFinalizer, finalize
from .graph.enrichment import EnrichmentTick
from .graph.ranking import Ranking, RankingWeights, rank_score
from .graph.store import ContextGraph
from .wizard.session import OnboardingSession

__version__ = "0.1.0"

__all__ = [
    "ContextGraph",
    "ContextGraphApp",
    "EngineConfig",
    "EnrichmentTick",
    "EvidenceLog",
    "ExportDocument",
    "GraphFinalizer",
    "OnboardingSession",
    "Ranking",
    "RankingWeights",
    "configure_logging",
    "export_document",
    "finalize",
    "load_document",
    "rank_score",
]

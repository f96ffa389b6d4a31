import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from ..catalog import CONNECTORS_BY_KEY, GlossaryItem
from ..config import EngineConfig
from ..evidence import EvidenceLog
from ..export.document import ExportDocument, export_document
from ..export.finalize import GraphFinalizer
from ..graph.clock import SessionClock
from ..graph.enrichment import EnrichmentTick
from ..graph.ids import IdGenerator, slug
from ..graph.store import ContextGraph
from ..models.evidence import Evidence
from ..models.forms import ArtistSeed, form_to_dict
from ..predict.heuristics import predict_artist_roster, predict_connectors, predict_team_name
from ..predict.roster import RosterStrategy
from .guidance import DEEP_RESEARCH_NOTE, SEEDED_NOTE, SKIP_NOTE, WELCOME, guidance
from .state import WizardState
from .steps import StepKey, completion, next_step, prev_step, step_done

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopilotMessage:
    role: str   # "copilot" | "user"
    text: str
    pill: Optional[str] = None


class OnboardingSession:
    """
    Single-writer owner of one onboarding session.

    The session holds the form state, the context graph and the
    evidence log, and is the only place where heuristic suggestions are
    applied to state. Every application records the Evidence that
    explains it.

    Flow
    ----
    form edits → heuristics → autofill + evidence → finalize → graph
    → enrichment ticks → export
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        roster_strategy: Optional[RosterStrategy] = None,
        clock: Optional[SessionClock] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.clock = clock or SessionClock()
        self.ids = IdGenerator(self.clock)

        self.graph = ContextGraph(ids=self.ids, clock=self.clock, config=self.config)
        self.evidence = EvidenceLog(ids=self.ids, clock=self.clock)
        self.state = WizardState()
        self.messages: List[CopilotMessage] = []

        self._roster_strategy = roster_strategy
        self._finalizer = GraphFinalizer(self.graph)
        self._enricher = EnrichmentTick(self.graph, self.evidence)

    # ============================================================
    # CO-PILOT TRANSCRIPT
    # ============================================================

    def say(self, text: str, pill: Optional[str] = None) -> CopilotMessage:
        msg = CopilotMessage("copilot", text, pill)
        self.messages.append(msg)
        return msg

    def hear(self, text: str) -> CopilotMessage:
        msg = CopilotMessage("user", text)
        self.messages.append(msg)
        return msg

    def nudge(self) -> str:
        text = guidance(self.state)
        self.say(text)
        return text

    # ============================================================
    # SESSION START
    # ============================================================

    def bootstrap(self) -> None:
        """Greet and log the provenance signals known before any input."""
        self.say(WELCOME, "Skip-friendly")

        self.evidence.record(
            "oauth", "google.verified_email", 0.98, "prefill:user.email", ["user.email"]
        )
        self.evidence.record(
            "web",
            "linkedin.title=Director, Digital Marketing",
            0.74,
            "suggest:user.title",
            ["user.title"],
        )
        self.evidence.record(
            "internal",
            "customer_domain=warner.com",
            0.85,
            "suggest:org.domain=Label",
            ["org.domain"],
        )
        logger.info("[WIZARD] Session bootstrapped")

    # ============================================================
    # FORM EDITS
    # ============================================================

    def update_org(self, **changes: Any) -> None:
        before = self.state.org.domain
        self.state.org = replace(self.state.org, **changes)

        if self.state.org.domain and self.state.org.domain != before:
            self._autofill_from_domain()

    def update_team(self, **changes: Any) -> None:
        self.state.team = replace(self.state.team, **changes)

    def update_user(self, **changes: Any) -> None:
        self.state.user = replace(self.state.user, **changes)

    def set_naming(self, **changes: Any) -> None:
        self.state.naming = replace(self.state.naming, **changes)

    def add_glossary(self, key: str, description: str = "") -> GlossaryItem:
        if not key:
            raise ValueError("Glossary key must be a non-empty string.")

        item = GlossaryItem(key, description)
        self.state.glossary.append(item)
        return item

    # ============================================================
    # CONNECTORS
    # ============================================================

    def toggle_connector(self, key: str) -> bool:
        if key not in CONNECTORS_BY_KEY:
            raise ValueError(f"Unknown connector: {key}")

        enabled = not self.state.connectors.get(key, False)
        self.state.connectors[key] = enabled
        logger.info("[WIZARD] Connector %s -> %s", key, "on" if enabled else "off")
        return enabled

    def set_deferred(self, deferred: bool) -> None:
        self.state.deferred_connect = bool(deferred)

    def live_connectors(self) -> List[str]:
        return self.state.live_connectors()

    # ============================================================
    # ARTISTS
    # ============================================================

    def add_artist(self, name: str) -> ArtistSeed:
        if not name or not name.strip():
            raise ValueError("Artist name must be a non-empty string.")

        seed = ArtistSeed(id=self.ids.make_id("artist", name), name=name)
        self.state.artists.append(seed)
        return seed

    def remove_artist(self, artist_id: str) -> ArtistSeed:
        for i, seed in enumerate(self.state.artists):
            if seed.id == artist_id:
                return self.state.artists.pop(i)

        raise KeyError(f"Artist '{artist_id}' is not on the roster.")

    # ============================================================
    # NAVIGATION
    # ============================================================

    def go_to(self, step: Union[StepKey, str]) -> StepKey:
        step = StepKey(step)
        previous = self.state.step
        self.state.step = step.value
        logger.debug("[WIZARD] Step -> %s", step.value)

        if step is StepKey.ARTISTS and previous != step.value:
            self._seed_roster()

        return step

    def advance(self) -> StepKey:
        return self.go_to(next_step(self.state.step))

    def back(self) -> StepKey:
        return self.go_to(prev_step(self.state.step))

    def skip(self) -> StepKey:
        self.say(SKIP_NOTE)
        return self.advance()

    def completion(self) -> int:
        return completion(self.state)

    def step_done(self, step: Union[StepKey, str]) -> bool:
        return step_done(self.state, step)

    # ============================================================
    # HEURISTIC APPLICATION
    # ============================================================

    def _autofill_from_domain(self) -> None:
        domain = self.state.org.domain

        if not self.state.team.name:
            guess = predict_team_name(domain)
            self.state.team = replace(self.state.team, name=guess)
            self.evidence.record(
                "heuristic",
                f"predictTeamName({domain})",
                self.config.team_name_confidence,
                f"autofill:team.name={guess}",
                ["team.name"],
            )

        if not self.state.connectors:
            picks = predict_connectors(domain)
            self.state.connectors = {k: True for k in picks}
            self.evidence.record(
                "heuristic",
                f"predictConnectors({domain})",
                self.config.connectors_confidence,
                f"preselect:{','.join(picks)}",
                [f"connect.{k}" for k in picks],
            )

    def _seed_roster(self) -> None:
        org_name = self.state.org.name
        if self.state.artists or not org_name:
            return

        seeds = predict_artist_roster(
            org_name,
            self.state.team.name,
            self.ids,
            strategy=self._roster_strategy,
        )
        self.state.artists = seeds
        self.evidence.record(
            "web",
            f"public_music_graph:{slug(org_name)}",
            self.config.roster_confidence,
            f"seed:artists={','.join(s.name for s in seeds)}",
            [f"artist.{s.name}" for s in seeds],
        )

    def simulate_deep_research(self) -> Evidence:
        ev = self.evidence.record(
            "web",
            "press.release:Artist Priority Campaign",
            0.62,
            "suggest:artists+projects",
            ["artists.*", "user.projects"],
        )
        self.say(DEEP_RESEARCH_NOTE, "Why: web evidence")
        return ev

    def why(self, field_path: str) -> List[Evidence]:
        """Evidence touching a form field, newest first."""
        return self.evidence.touching(field_path)

    # ============================================================
    # SEED / ENRICH / EXPORT
    # ============================================================

    def finalize(self) -> ContextGraph:
        s = self.state
        self._finalizer.finalize(s.org, s.team, s.user, s.artists, s.naming)

        self.seed_memory()
        self.state.step = StepKey.REVIEW.value
        self.say(SEEDED_NOTE, "Personalized")
        return self.graph

    def seed_memory(self) -> Dict[str, Any]:
        s = self.state
        snapshot = {
            "org": form_to_dict(s.org),
            "team": form_to_dict(s.team),
            "user": form_to_dict(s.user),
            "connectors": s.live_connectors(),
            "deferred_connect": s.deferred_connect,
            "naming": form_to_dict(s.naming),
            "artists": [{"id": a.id, "name": a.name, "attrs": dict(a.attrs)} for a in s.artists],
            "glossary": [g.to_dict() for g in s.glossary],
            "seeded_at": datetime.fromtimestamp(
                self.clock.now() / 1000, tz=timezone.utc
            ).isoformat(),
            "evidence_ids": [ev.id for ev in self.evidence],
        }
        s.memory = snapshot
        return snapshot

    def enrich_tick(self) -> Evidence:
        return self._enricher.rescore_all(len(self.live_connectors()))

    def export(self) -> ExportDocument:
        return export_document(self.graph, self.evidence, memory=self.state.memory or None)

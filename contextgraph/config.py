from typing import Dict, Optional

from .graph.ranking import RankingWeights


class EngineConfig:
    """
    Central configuration object for engine behavior.
    Controls ranking weights, node seeding, touch and enrichment
    increments, and the confidence attached to automated suggestions.
    """

    SEED_RANKING: Dict[str, int] = {
        "recency": 100,
        "frequency": 1,
        "completeness": 10,
        "trust": 50,
    }

    def __init__(
        self,
        weights: Optional[RankingWeights] = None,
        seed_ranking: Optional[Dict[str, int]] = None,
        touch_frequency_step: int = 3,
        enrich_completeness_step: int = 2,
        enrich_trust_step: int = 1,
        enrich_recency: int = 80,
        enrich_confidence: float = 0.9,
        team_name_confidence: float = 0.6,   # heuristic autofill
        connectors_confidence: float = 0.65,  # heuristic preselect
        roster_confidence: float = 0.55,      # web roster seed
    ):
        self.weights = weights or RankingWeights()
        self.seed_ranking = dict(self.SEED_RANKING)
        if seed_ranking:
            self.seed_ranking.update(seed_ranking)

        self.touch_frequency_step = touch_frequency_step
        self.enrich_completeness_step = enrich_completeness_step
        self.enrich_trust_step = enrich_trust_step
        self.enrich_recency = enrich_recency

        self.enrich_confidence = enrich_confidence
        self.team_name_confidence = team_name_confidence
        self.connectors_confidence = connectors_confidence
        self.roster_confidence = roster_confidence

        self._validate()

    def _validate(self):
        unknown = set(self.seed_ranking) - set(self.SEED_RANKING)
        if unknown:
            raise ValueError(f"Unknown seed ranking fields: {sorted(unknown)}")

        for name, value in self.seed_ranking.items():
            if not 0 <= value <= 100:
                raise ValueError(f"Seed ranking '{name}' must be within [0, 100]")

        for name in (
            "touch_frequency_step",
            "enrich_completeness_step",
            "enrich_trust_step",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")

        if not 0 <= self.enrich_recency <= 100:
            raise ValueError("enrich_recency must be within [0, 100]")

        for name in (
            "enrich_confidence",
            "team_name_confidence",
            "connectors_confidence",
            "roster_confidence",
        ):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be within [0.0, 1.0]")

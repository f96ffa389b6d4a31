import math
from dataclasses import dataclass
from typing import Dict, Union

Number = Union[int, float]

RANKING_INPUTS = ("recency", "frequency", "completeness", "trust")


@dataclass(frozen=True)
class RankingWeights:
    """
    Fixed weights of the ranking function.

    The four weights must sum to 1.0 so a node with every input at
    100 scores exactly 100. Retuning is allowed only if that holds.
    """

    recency: float = 0.20
    frequency: float = 0.20
    completeness: float = 0.35
    trust: float = 0.25

    def __post_init__(self):
        for name in RANKING_INPUTS:
            if getattr(self, name) < 0:
                raise ValueError(f"Ranking weight '{name}' cannot be negative.")

        total = self.recency + self.frequency + self.completeness + self.trust
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Ranking weights must sum to 1.0 (got {total}).")


DEFAULT_WEIGHTS = RankingWeights()


def rank_score(
    recency: Number,
    frequency: Number,
    completeness: Number,
    trust: Number,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> int:
    """
    Combine the four 0-100 signals into a single 0-100 score.

    Inputs are expected to be pre-clamped; this function does not
    clamp. The weighted sum is rounded half up.
    """
    raw = (
        recency * weights.recency
        + frequency * weights.frequency
        + completeness * weights.completeness
        + trust * weights.trust
    )
    return int(math.floor(raw + 0.5))


def clamp(value: Number, low: Number = 0, high: Number = 100) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Ranking input must be a number, got {type(value).__name__}")

    if math.isnan(value):
        raise ValueError("Ranking input cannot be NaN")

    return max(low, min(high, value))


class Ranking:
    """
    Relevance signals of a node plus their derived score.

    Every write goes through `update`, which clamps each input to
    [0, 100] and recomputes `score` before returning. `score` has no
    setter, so it can never drift from the four inputs.
    """

    __slots__ = ("_weights", "_values", "_score")

    def __init__(
        self,
        recency: Number = 100,
        frequency: Number = 1,
        completeness: Number = 10,
        trust: Number = 50,
        weights: RankingWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self._weights = weights
        self._values: Dict[str, Number] = {}
        self._score = 0
        self.update(
            recency=recency,
            frequency=frequency,
            completeness=completeness,
            trust=trust,
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, **changes: Number) -> None:
        unknown = [k for k in changes if k not in RANKING_INPUTS]
        if unknown:
            raise ValueError(f"Unknown ranking inputs: {unknown}")

        clamped = {name: clamp(value) for name, value in changes.items()}
        self._values.update(clamped)
        self._score = rank_score(
            self._values["recency"],
            self._values["frequency"],
            self._values["completeness"],
            self._values["trust"],
            self._weights,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def recency(self) -> Number:
        return self._values["recency"]

    @property
    def frequency(self) -> Number:
        return self._values["frequency"]

    @property
    def completeness(self) -> Number:
        return self._values["completeness"]

    @property
    def trust(self) -> Number:
        return self._values["trust"]

    @property
    def score(self) -> int:
        return self._score

    @property
    def weights(self) -> RankingWeights:
        return self._weights

    def to_dict(self) -> Dict[str, Number]:
        data = dict(self._values)
        data["score"] = self._score
        return data

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"Ranking(score={self._score}, recency={self.recency}, "
            f"frequency={self.frequency}, completeness={self.completeness}, "
            f"trust={self.trust})"
        )

import itertools

import pytest

from contextgraph.graph.ranking import Ranking, RankingWeights, clamp, rank_score


def test_default_weights_sum_to_one():
    w = RankingWeights()
    assert w.recency + w.frequency + w.completeness + w.trust == pytest.approx(1.0)


def test_weights_must_sum_to_one():
    with pytest.raises(ValueError):
        RankingWeights(recency=0.5, frequency=0.5, completeness=0.5, trust=0.5)


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        RankingWeights(recency=-0.1, frequency=0.3, completeness=0.55, trust=0.25)


@pytest.mark.parametrize(
    "inputs, expected",
    [
        ((100, 1, 10, 50), 36),
        ((100, 100, 100, 100), 100),
        ((0, 0, 0, 0), 0),
        ((50, 50, 50, 50), 50),
        ((0, 0, 0, 2), 1),  # 0.5 rounds half up
    ],
)
def test_rank_score(inputs, expected):
    assert rank_score(*inputs) == expected


def test_rank_score_bounded_and_monotone():
    grid = (0, 1, 25, 50, 99, 100)

    for point in itertools.product(grid, repeat=4):
        score = rank_score(*point)
        assert 0 <= score <= 100

        for i in range(4):
            bumped = list(point)
            bumped[i] = min(100, bumped[i] + 10)
            assert rank_score(*bumped) >= score


def test_clamp():
    assert clamp(150) == 100
    assert clamp(-3) == 0
    assert clamp(42.5) == 42.5

    with pytest.raises(TypeError):
        clamp("10")
    with pytest.raises(TypeError):
        clamp(True)
    with pytest.raises(ValueError):
        clamp(float("nan"))


def test_ranking_seed_and_derived_score():
    r = Ranking()

    assert r.to_dict() == {
        "recency": 100,
        "frequency": 1,
        "completeness": 10,
        "trust": 50,
        "score": 36,
    }


def test_ranking_update_clamps_and_rescores():
    r = Ranking()

    r.update(completeness=500, trust=-20)

    assert r.completeness == 100
    assert r.trust == 0
    assert r.score == rank_score(r.recency, r.frequency, r.completeness, r.trust)


def test_ranking_rejects_unknown_inputs():
    r = Ranking()

    with pytest.raises(ValueError):
        r.update(score=99)

    with pytest.raises(AttributeError):
        r.score = 99

import pytest

from contextgraph.graph.clock import SessionClock
from contextgraph.graph.ids import IdGenerator, short_hash, slug, to_base36


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Atlantic Records", "atlantic-records"),
        ("  Rhino / Catalog  ", "rhino-catalog"),
        ("--Ed Sheeran!!", "ed-sheeran"),
        ("", ""),
    ],
)
def test_slug(text, expected):
    assert slug(text) == expected


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"


def test_short_hash_is_stable_and_short():
    assert short_hash("abc") == "22ci"
    assert short_hash("abc") == short_hash("abc")
    assert len(short_hash("a much longer piece of text" * 10)) <= 6


def test_make_id_format(clock):
    ids = IdGenerator(clock)

    node_id = ids.make_id("org", "Atlantic Records", 1234)

    assert node_id.startswith("org_atlantic-records_")
    assert node_id.endswith("-1")


def test_empty_name_falls_back_to_namespace(clock):
    ids = IdGenerator(clock)

    assert ids.make_id("team", "", 1).startswith("team_team_")


def test_same_name_same_instant_never_collides(clock):
    ids = IdGenerator(clock)

    issued = {ids.make_id("artist", "Prince", 42) for _ in range(500)}

    assert len(issued) == 500


def test_different_names_never_collide(clock):
    ids = IdGenerator(clock)

    assert ids.make_id("org", "Acme", 1) != ids.make_id("org", "Acne", 1)


def test_reserved_ids_are_skipped(fake_time):
    first = IdGenerator(SessionClock(fake_time))
    taken = first.make_id("org", "Acme", 5)

    second = IdGenerator(SessionClock(fake_time))
    second.reserve([taken])

    assert second.make_id("org", "Acme", 5) != taken
    assert taken in second


def test_clock_never_runs_backwards(fake_time):
    clock = SessionClock(fake_time)
    first = clock.now()

    fake_time.advance(-50)

    assert clock.now() == first

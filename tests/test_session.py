import json

import pytest

from contextgraph import ContextGraphApp
from contextgraph.graph.nodes import NodeType
from contextgraph.wizard.guidance import guidance
from contextgraph.wizard.steps import STEP_ORDER, StepKey, next_step, prev_step


def test_bootstrap_logs_initial_signals(fake_time):
    session = ContextGraphApp.create(time_source=fake_time)

    assert [ev.source for ev in session.evidence] == ["oauth", "web", "internal"]
    assert session.why("user.email")[0].signal == "google.verified_email"
    assert session.messages[0].pill == "Skip-friendly"


def test_domain_autofills_team_and_connectors_with_evidence(session):
    session.update_org(name="Atlantic Records", domain="Label")

    assert session.state.team.name == "Label Digital"
    assert set(session.live_connectors()) == {
        "spotify", "apple_music", "youtube", "tiktok", "meta", "gsuite", "crm_salesforce",
    }

    team_ev, conn_ev = list(session.evidence)
    assert team_ev.source == "heuristic"
    assert team_ev.signal == "predictTeamName(Label)"
    assert team_ev.action == "autofill:team.name=Label Digital"
    assert team_ev.fields == ("team.name",)
    assert conn_ev.confidence == 0.65
    assert "connect.spotify" in conn_ev.fields
    assert session.why("team.name") == [team_ev]


def test_autofill_never_overwrites_user_input(session):
    session.update_team(name="Rhino Catalog Marketing")
    session.toggle_connector("soundcloud")

    session.update_org(domain="Distributor")

    assert session.state.team.name == "Rhino Catalog Marketing"
    assert session.live_connectors() == ["soundcloud"]
    assert len(session.evidence) == 0


def test_autofill_runs_once_per_domain_change(session):
    session.update_org(domain="Management")
    session.update_org(name="Acme")  # domain unchanged

    assert len(session.evidence) == 2


def test_entering_artists_step_seeds_roster(session):
    session.update_org(name="Atlantic Records", domain="Label")

    session.go_to("artists")

    assert [a.name for a in session.state.artists] == ["Ed Sheeran", "Dua Lipa"]
    ev = session.evidence.latest()
    assert ev.source == "web"
    assert ev.signal == "public_music_graph:atlantic-records"
    assert ev.action == "seed:artists=Ed Sheeran,Dua Lipa"
    assert ev.fields == ("artist.Ed Sheeran", "artist.Dua Lipa")

    session.back()
    session.advance()
    assert len(session.state.artists) == 2  # not reseeded


def test_roster_needs_org_name(session):
    session.go_to(StepKey.ARTISTS)

    assert session.state.artists == []
    assert len(session.evidence) == 0


def test_custom_roster_strategy(fake_time):
    session = ContextGraphApp.create(
        time_source=fake_time,
        roster_strategy=lambda org, team: ["Nova", "Vega"],
        bootstrap=False,
    )
    session.update_org(name="Acme")
    session.go_to("artists")

    assert [a.name for a in session.state.artists] == ["Nova", "Vega"]


def test_artist_roster_edits(session):
    seed = session.add_artist("Prince")

    assert session.remove_artist(seed.id) == seed
    with pytest.raises(KeyError):
        session.remove_artist(seed.id)
    with pytest.raises(ValueError):
        session.add_artist("   ")


def test_navigation_clamps_at_both_ends():
    assert prev_step("org") is StepKey.ORG
    assert next_step("review") is StepKey.REVIEW
    assert [s.value for s in STEP_ORDER] == [
        "org", "team", "user", "connectors", "semantic", "artists", "review",
    ]


def test_skip_advances_and_says_so(session):
    assert session.skip() is StepKey.TEAM
    assert session.messages[-1].text.startswith("Skipping ahead")


def test_completion_and_step_done(session):
    assert session.completion() == 10  # default glossary only

    session.update_org(name="Acme", license="Pro", domain="Label")
    session.update_team(dept="Marketing")
    session.update_user(name="Ada", email="ada@acme.io", title="Director")
    session.add_artist("X")

    assert session.completion() == 100
    assert session.step_done("org") and session.step_done("team") and session.step_done("user")
    assert session.step_done("connectors")
    assert not session.step_done("semantic")

    session.set_naming(org="ORG:{Company}", team="TEAM:{Dept}", user="USER:{First}")
    assert session.step_done("semantic")


def test_invalid_form_values_rejected(session):
    with pytest.raises(ValueError):
        session.update_org(domain="Bakery")
    with pytest.raises(ValueError):
        session.update_team(dept="Catering")
    with pytest.raises(ValueError):
        session.toggle_connector("myspace")
    with pytest.raises(ValueError):
        session.go_to("payment")


def test_guidance_follows_step_and_gaps(session):
    assert session.nudge().startswith("Let's anchor your org")

    session.update_org(name="Acme", license="Pro", domain="Label")
    assert guidance(session.state) == "Looks good. Jump to Team when ready."

    session.go_to("connectors")
    assert "preselected" in guidance(session.state)


def test_finalize_enrich_and_export_flow(session, fake_time):
    session.bootstrap()
    session.update_org(name="Acme", license="Pro", domain="Label")
    session.update_user(name="Ada", email="ada@acme.io")
    session.go_to("artists")

    graph = session.finalize()

    assert session.state.step == "review"
    assert len(graph.get_nodes_by_type(NodeType.ARTIST)) == 2
    assert session.state.memory["connectors"] == session.live_connectors()
    assert session.state.memory["org"]["name"] == "Acme"

    fake_time.advance(5000)
    before = {n.id: n.ranking.completeness for n in graph.nodes()}
    ev = session.enrich_tick()

    assert ev.signal == "connector.health=7"
    assert all(n.ranking.completeness == before[n.id] + 2 for n in graph.nodes())

    data = json.loads(session.export().to_json())
    assert data["memory"]["org"]["name"] == "Acme"
    assert len(data["evidence"]) == len(session.evidence)


def test_enrich_without_connectors_is_noop_on_trust(session):
    session.update_org(name="Acme")
    session.finalize()

    trust = [n.ranking.trust for n in session.graph.nodes()]
    session.enrich_tick()

    assert [n.ranking.trust for n in session.graph.nodes()] == trust
    assert session.evidence.latest().signal == "connector.health=0"


def test_roster_seeds_only_when_entering_artists_step(session):
    session.update_org(name="Acme")
    session.go_to("artists")
    for seed in list(session.state.artists):
        session.remove_artist(seed.id)

    session.go_to("artists")

    assert session.state.artists == []
    assert len(session.evidence) == 1

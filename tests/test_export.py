import json

import pytest

from contextgraph.config import EngineConfig
from contextgraph.errors import ExportFormatError
from contextgraph.export.document import ExportDocument, export_document, load_document
from contextgraph.export.finalize import finalize
from contextgraph.graph.enrichment import EnrichmentTick
from contextgraph.graph.ranking import RankingWeights
from contextgraph.graph.store import ContextGraph
from contextgraph.models.forms import ArtistSeed, OrgForm, TeamForm, UserForm


@pytest.fixture
def seeded(graph, log, fake_time):
    log.record("oauth", "google.verified_email", 0.98, "prefill:user.email", ["user.email"])
    finalize(
        graph,
        OrgForm(name="Acme", license="Indie", country="USA", domain="Label"),
        TeamForm(name="Growth", dept="Marketing", kpis="Streams +15%"),
        UserForm(name="Ada", email="ada@acme.io"),
        [ArtistSeed("a1", "X", {"priority": "TBD", "genre": "pop"})],
    )
    fake_time.advance(1000)
    EnrichmentTick(graph, log).rescore_all(2)
    return graph, log


def test_document_is_self_describing_json(seeded):
    graph, log = seeded

    data = json.loads(export_document(graph, log).to_json())

    assert data["format"] == "contextgraph.seed"
    assert data["version"] == 1
    assert set(data["graph"]["nodes"]) == {n.id for n in graph.nodes()}
    assert set(data["graph"]["edges"][0]) == {"from", "to", "rel"}
    assert len(data["evidence"]) == 2


def test_round_trip_restores_equal_structures(seeded):
    graph, log = seeded

    text = export_document(graph, log, memory={"seeded": True}).to_json()
    doc = load_document(text)
    restored_graph, restored_log = doc.restore()

    assert list(restored_graph.nodes()) == list(graph.nodes())
    assert list(restored_graph.edges()) == list(graph.edges())
    assert list(restored_log) == list(log)
    assert doc.memory == {"seeded": True}


def test_restored_session_keeps_issuing_unique_ids(seeded):
    graph, log = seeded
    restored_graph, restored_log = load_document(export_document(graph, log).to_json()).restore()

    fresh = restored_graph.create_node("org", "Acme")
    ev = restored_log.record("web", "google.verified_email", 0.5, "noop")

    assert fresh.id not in restored_graph
    assert ev.id not in {e.id for e in log}
    assert fresh.created_at >= max(n.updated_at for n in graph.nodes())


def test_tampered_score_is_rejected(seeded):
    graph, log = seeded
    data = json.loads(export_document(graph, log).to_json())
    node_id = next(iter(data["graph"]["nodes"]))
    data["graph"]["nodes"][node_id]["ranking"]["score"] += 7

    with pytest.raises(ExportFormatError):
        load_document(json.dumps(data)).restore()


def test_dangling_edge_is_rejected(seeded):
    graph, log = seeded
    data = json.loads(export_document(graph, log).to_json())
    data["graph"]["edges"].append({"from": "ghost", "to": "ghost", "rel": "HAS_TEAM"})

    with pytest.raises(ExportFormatError):
        load_document(json.dumps(data)).restore()


def test_mismatched_node_key_is_rejected(seeded):
    graph, log = seeded
    data = json.loads(export_document(graph, log).to_json())
    key = next(iter(data["graph"]["nodes"]))
    data["graph"]["nodes"]["renamed"] = data["graph"]["nodes"].pop(key)

    with pytest.raises(ExportFormatError):
        load_document(json.dumps(data))


@pytest.mark.parametrize("text", ["not json", '{"format": "other", "version": 1}'])
def test_unrecognized_documents_are_rejected(text):
    with pytest.raises(ExportFormatError):
        load_document(text)


def test_empty_graph_exports(graph, log):
    doc = ExportDocument.build(graph, log, exported_at=5)

    assert doc.graph.nodes == {}
    assert doc.evidence == []
    assert doc.exported_at == 5


def test_retuned_weights_survive_round_trip(clock, log):
    weights = RankingWeights(recency=0.25, frequency=0.25, completeness=0.25, trust=0.25)
    graph = ContextGraph(clock=clock, config=EngineConfig(weights=weights))
    finalize(graph, OrgForm(name="Acme"), TeamForm(), UserForm(), [])

    doc = load_document(export_document(graph, log).to_json())
    restored, _ = doc.restore()

    assert doc.weights.to_weights() == weights
    assert restored.config.weights == weights
    assert {n.id: n for n in restored.nodes()} == {n.id: n for n in graph.nodes()}


def test_invalid_recorded_weights_are_rejected(seeded):
    graph, log = seeded
    data = json.loads(export_document(graph, log).to_json())
    data["weights"]["trust"] = 0.9

    with pytest.raises(ExportFormatError):
        load_document(json.dumps(data)).restore()

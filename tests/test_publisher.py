import json
import os
from datetime import datetime, timezone

from application.services.aggregator import CompositionAggregator
from application.services.publisher import Publisher, read_published
from domain.entities import DocumentMeta, OutputDocument

from tests.fakes import board, record


def _document(comps=True) -> OutputDocument:
    ranked = CompositionAggregator().aggregate([record("M1", board(1, "A", "B"))], 1, 30) if comps else []
    return OutputDocument(
        meta=DocumentMeta(
            platform="na1",
            region="americas",
            queue_filter=(1100,),
            sample_match_count=1,
            patch="14.3",
            generated_at=datetime(2024, 2, 2, 12, 0, tzinfo=timezone.utc),
        ),
        comps=ranked,
    )


def _leftovers(directory):
    return [p for p in os.listdir(directory) if p.endswith(".tmp")]


def test_publish_replaces_missing_artifact(tmp_path):
    target = tmp_path / "public" / "data" / "comps.json"
    assert read_published(target) is None

    assert Publisher(target).publish(_document()) is True

    data = read_published(target)
    assert data["schemaVersion"] == 1
    assert data["meta"] == {
        "generatedAt": "2024-02-02T12:00:00Z",
        "platform": "na1",
        "region": "americas",
        "queueFilter": [1100],
        "sampleMatchCount": 1,
        "patch": "14.3",
    }
    assert data["comps"][0]["key"] == "a|b"
    assert _leftovers(target.parent) == []


def test_empty_document_never_clobbers(tmp_path):
    target = tmp_path / "comps.json"
    Publisher(target).publish(_document())
    before = target.read_text(encoding="utf-8")

    assert Publisher(target).publish(_document(comps=False)) is False

    assert target.read_text(encoding="utf-8") == before
    assert _leftovers(tmp_path) == []


def test_empty_document_with_no_prior_artifact_writes_nothing(tmp_path):
    target = tmp_path / "comps.json"
    assert Publisher(target).publish(_document(comps=False)) is False
    assert not target.exists()


def test_non_empty_document_replaces_empty_artifact(tmp_path):
    target = tmp_path / "comps.json"
    target.write_text(json.dumps({"schemaVersion": 1, "meta": {}, "comps": []}), encoding="utf-8")

    assert Publisher(target).publish(_document()) is True
    assert len(read_published(target)["comps"]) == 1


def test_published_artifact_is_world_readable(tmp_path):
    target = tmp_path / "comps.json"
    Publisher(target).publish(_document())
    assert target.stat().st_mode & 0o777 == 0o644


def test_unreadable_artifact_means_no_data(tmp_path):
    target = tmp_path / "comps.json"
    target.write_text("{truncated", encoding="utf-8")
    assert read_published(target) is None
    target.write_text("[1, 2]", encoding="utf-8")
    assert read_published(target) is None

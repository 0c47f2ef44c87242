"""
Unit tests for ReviewStore: bundled corpus, explicit files and failure modes.
"""

import json

import pytest

from review_engine.errors import DecodeFailure, ResourceLoadFailure
from review_engine.models import ReviewRecord
from review_engine.review_store import ReviewStore


def write_json(path, payload):
	path.write_text(json.dumps(payload), encoding="utf-8")
	return path


def test_bundled_corpus_loads():
	records = ReviewStore().load()
	assert len(records) > 0
	assert [r.review_id for r in records] == list(range(len(records)))  # ids are positions
	assert all(isinstance(r, ReviewRecord) for r in records)
	assert all(r.text and r.movie for r in records)


def test_explicit_file_preserves_order_and_actors(corpus_file):
	records = ReviewStore(corpus_file).load()
	assert [r.movie for r in records] == ["Nope", "Roma", "Nope", "Arrival", "Roma", "Arrival"]
	assert records[0].actors == ()  # supplied but empty
	assert records[2].actors == ("Daniel Kaluuya",)
	assert records[3].actors is None  # not supplied at all


def test_missing_file_is_resource_failure(tmp_path):
	missing = tmp_path / "nope.json"
	with pytest.raises(ResourceLoadFailure) as excinfo:
		ReviewStore(missing).load()
	assert excinfo.value.source == str(missing)


def test_directory_is_resource_failure(tmp_path):
	with pytest.raises(ResourceLoadFailure):
		ReviewStore(tmp_path).load()


def test_invalid_json_is_decode_failure(tmp_path):
	path = tmp_path / "broken.json"
	path.write_text("{\"reviews\": [", encoding="utf-8")
	with pytest.raises(DecodeFailure):
		ReviewStore(path).load()


@pytest.mark.parametrize("payload", [
	{"items": []},  # wrong envelope
	{"reviews": [{"text": "no movie"}]},  # missing required field
	{"reviews": [{"text": "x", "movie": 42}]},  # wrong type
	{"reviews": [{"text": "x", "movie": "m", "actors": "not a list"}]},
	[{"text": "x", "movie": "m"}],  # bare list
])
def test_schema_mismatch_is_decode_failure(tmp_path, payload):
	path = write_json(tmp_path / "reviews.json", payload)
	with pytest.raises(DecodeFailure):
		ReviewStore(path).load()


def test_enrichment_fields_in_input_are_ignored(tmp_path):
	payload = {"reviews": [{"text": "x", "movie": "m", "language": "fr", "sentiment": 1}]}
	records = ReviewStore(write_json(tmp_path / "reviews.json", payload)).load()
	assert records == [ReviewRecord(review_id=0, text="x", movie="m", actors=None)]


def test_empty_corpus_is_valid(tmp_path):
	records = ReviewStore(write_json(tmp_path / "reviews.json", {"reviews": []})).load()
	assert records == []


def test_utf8_bom_corpus_loads(tmp_path):
	path = tmp_path / "bom.json"
	payload = {"reviews": [{"text": "Me gustó mucho", "movie": "Roma"}]}
	path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8-sig")  # leading BOM
	records = ReviewStore(path).load()
	assert [(r.text, r.movie) for r in records] == [("Me gustó mucho", "Roma")]


def test_from_records_validates():
	records = ReviewStore.from_records([{"text": "a", "movie": "b", "actors": ["c"]}])
	assert records[0].actors == ("c",)
	with pytest.raises(DecodeFailure):
		ReviewStore.from_records([{"text": "a"}])

# ===============================================
# tests/test_loader.py
# Profile JSON -> batch upsert
# ===============================================

from digital_twin.ingest import load_profile_data
from digital_twin.search.vector_store import VectorStoreError

from conftest import FakeStore

PROFILE = {
    "content_chunks": [
        {
            "id": "exp-1",
            "title": "Experience",
            "content": "Five years building data platforms.",
            "type": "experience",
            "metadata": {"category": "career", "tags": ["data", "platform"]},
        },
        {
            "id": "edu-1",
            "title": "Education",
            "content": "BSc Computer Science.",
            "type": "education",
        },
    ]
}


def test_load_maps_chunks_to_upsert_shape():
    store = FakeStore()
    out = load_profile_data(store, PROFILE)

    assert out.success is True
    assert out.count == 2
    assert out.message == "Successfully loaded 2 content chunks"
    assert len(store.upserts) == 1

    first, second = store.upserts[0]
    assert first == {
        "id": "exp-1",
        "data": "Experience: Five years building data platforms.",
        "metadata": {
            "title": "Experience",
            "type": "experience",
            "content": "Five years building data platforms.",
            "category": "career",
            "tags": ["data", "platform"],
        },
    }
    assert second["metadata"]["category"] == ""
    assert second["metadata"]["tags"] == []


def test_empty_chunks_do_not_upsert():
    store = FakeStore()
    out = load_profile_data(store, {"content_chunks": []})

    assert out.to_dict() == {"success": False, "message": "No content chunks found in profile data"}
    assert store.upserts == []


def test_missing_key_is_empty():
    assert load_profile_data(FakeStore(), {}).success is False


def test_store_failure():
    out = load_profile_data(FakeStore(error=VectorStoreError("quota exceeded")), PROFILE)
    assert out.success is False
    assert out.message == "Error: quota exceeded"
    assert out.count is None

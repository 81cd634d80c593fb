import json
import os
import threading

import pytest

from database import JSONStore, StoreError, utc_now


def test_load_bootstraps_missing_file(store):
    data = store.load("settings.json", lambda: {"siteName": "Test"})
    assert data == {"siteName": "Test"}
    with open(store.path("settings.json"), encoding="utf-8") as f:
        assert json.load(f) == {"siteName": "Test"}


def test_load_defaults_to_empty_collection(store):
    assert store.get_documents("properties.json") == []
    assert os.path.exists(store.path("properties.json"))


def test_save_leaves_no_temp_files(store):
    store.save("inquiries.json", [{"id": "a", "message": "हेलो"}])
    assert os.listdir(store.data_dir) == ["inquiries.json"]
    with open(store.path("inquiries.json"), encoding="utf-8") as f:
        assert "हेलो" in f.read()


def test_corrupt_file_raises_store_error(store):
    os.makedirs(store.data_dir, exist_ok=True)
    with open(store.path("properties.json"), "w", encoding="utf-8") as f:
        f.write("{not json")
    with pytest.raises(StoreError):
        store.load("properties.json")


def test_transaction_writes_back_on_success(store):
    with store.transaction("content.json") as pages:
        pages.append({"id": "1", "slug": "about"})
    assert store.find_document("content.json", "about", key="slug") == {"id": "1", "slug": "about"}


def test_transaction_discards_changes_on_error(store):
    store.save("content.json", [])
    with pytest.raises(RuntimeError):
        with store.transaction("content.json") as pages:
            pages.append({"id": "1"})
            raise RuntimeError("boom")
    assert store.get_documents("content.json") == []


def test_document_helpers(store):
    doc = store.create_document("inquiries.json", {"message": "hello"})
    assert doc["id"]
    assert store.find_document("inquiries.json", doc["id"])["message"] == "hello"

    assert store.replace_document("inquiries.json", doc["id"], {**doc, "message": "updated"})
    assert store.find_document("inquiries.json", doc["id"])["message"] == "updated"
    assert not store.replace_document("inquiries.json", "missing", {"id": "missing"})

    store.create_document("inquiries.json", {"id": "b"})
    assert store.delete_documents("inquiries.json", [doc["id"], "b", "missing"]) == 2
    assert store.get_documents("inquiries.json") == []


def test_concurrent_creates_are_not_lost(tmp_path):
    store = JSONStore(str(tmp_path))

    def worker(n):
        store.create_document("inquiries.json", {"n": n})

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(d["n"] for d in store.get_documents("inquiries.json")) == list(range(20))


def test_utc_now_format():
    stamp = utc_now()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2024-01-01T00:00:00.000Z")

"""
Unit tests using FastAPI TestClient (no separate server needed).

The decode tests run anywhere. The collection and notebook tests use the
`redis_db` fixture and are SKIPPED, not failed, when no Redis server is
reachable on localhost:6379, so without Redis only stateless decoding
and name validation are covered here.
"""

import pytest
import redis
from fastapi.testclient import TestClient

from lexnote.core.collection import ACTIVE_KEY, collection_prefix
from lexnote.server.main import app


THREE = "01cat&4petE01dog&4petE01cow&4farm animalE"
QS = "db=15&collection=test-api"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def redis_db():
    r = redis.Redis(host="localhost", port=6379, db=15)
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("Redis not available")
    yield r
    for key in r.scan_iter(f"{collection_prefix('test-api')}:*"):
        r.delete(key)
    r.delete(ACTIVE_KEY)


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "Lexnote API"


class TestDecodeUnit:
    def test_decode(self, client):
        r = client.post("/api/decode", json={"text": "01cat&4a small animal&9Unused codeE"})
        assert r.status_code == 200
        data = r.json()

        assert data["rows"] == [[0]]
        entry = data["entries"][0]
        assert entry["id"] == 0
        assert entry["headword"] == "cat"
        assert entry["senses"][0] == {
            "code": "4",
            "part_of_speech": "n.",
            "definitions": ["a small animal"],
        }
        assert entry["full"] == "cat\nn. a small animal;\nna. Unused code;\n"

    def test_decode_control_char_code(self, client):
        r = client.post("/api/decode", json={"text": "01cat&EpetE"})
        assert r.status_code == 200
        assert r.json()["entries"][0]["senses"][0]["part_of_speech"] == "more."

    def test_decode_rows_of_six(self, client):
        text = "".join(f"01w{c}&4petE" for c in "abcdefgh")
        r = client.post("/api/decode", json={"text": text})
        assert r.json()["rows"] == [[0, 1, 2, 3, 4, 5], [6, 7]]

    def test_decode_error(self, client):
        r = client.post("/api/decode", json={"text": "01cat&4a small animal"})
        assert r.status_code == 400
        detail = r.json()["detail"]
        assert detail["kind"] == "unterminated_field"
        assert detail["position"] == 7

    def test_truncated_error(self, client):
        text = "01big&6" + "$$".join(["word"] * 39)
        r = client.post("/api/decode", json={"text": text})
        assert r.status_code == 400
        assert r.json()["detail"]["kind"] == "truncated_stream"


class TestCollectionsUnit:
    def test_bad_collection_name(self, client):
        r = client.get("/api/notebooks?db=15&collection=a:b")
        assert r.status_code == 400

    def test_set_active(self, client, redis_db):
        r = client.put("/api/collections/active?db=15", json={"name": "Test-API"})
        assert r.json() == {"active": "test-api"}

        client.post("/api/notebooks?db=15", json={"name": "animals", "text": THREE})

        r = client.get("/api/collections?db=15")
        data = r.json()
        assert data["active"] == "test-api"
        assert "test-api" in data["collections"]

    def test_set_active_bad_name(self, client, redis_db):
        r = client.put("/api/collections/active?db=15", json={"name": "bad name"})
        assert r.status_code == 400


class TestNotebooksUnit:
    def test_session_flow(self, client, redis_db):
        r = client.post(f"/api/notebooks?{QS}", json={"name": "animals", "text": THREE})
        assert r.status_code == 200
        assert r.json()["collection"] == "test-api"
        notebook_id = r.json()["id"]

        r = client.get(f"/api/notebooks/{notebook_id}/entries?{QS}")
        assert r.json()["open"] is False
        assert r.json()["entries"] == []

        r = client.post(f"/api/notebooks/{notebook_id}/open?{QS}")
        assert [e["headword"] for e in r.json()["entries"]] == ["cat", "dog", "cow"]

        r = client.post(f"/api/notebooks/{notebook_id}/entries/1/hide?{QS}")
        assert r.json()["success"] is True

        r = client.get(f"/api/notebooks/{notebook_id}/entries?{QS}")
        data = r.json()
        assert [e["id"] for e in data["entries"]] == [0, 2]
        assert data["rows"] == [[0, 2]]

        r = client.get(f"/api/notebooks/{notebook_id}?{QS}")
        assert r.json()["hidden"] == [1]

        r = client.post(f"/api/notebooks/{notebook_id}/close?{QS}")
        assert r.status_code == 200

        r = client.get(f"/api/notebooks/{notebook_id}/entries?{QS}")
        assert r.json()["entries"] == []

    def test_get_entry(self, client, redis_db):
        r = client.post(f"/api/notebooks?{QS}", json={"name": "animals", "text": THREE})
        notebook_id = r.json()["id"]

        # closed session has no entries
        assert client.get(f"/api/notebooks/{notebook_id}/entries/0?{QS}").status_code == 404

        client.post(f"/api/notebooks/{notebook_id}/open?{QS}")
        client.post(f"/api/notebooks/{notebook_id}/entries/2/hide?{QS}")

        r = client.get(f"/api/notebooks/{notebook_id}/entries/2?{QS}")
        assert r.json()["headword"] == "cow"
        assert r.json()["visible"] is False
        assert client.get(f"/api/notebooks/{notebook_id}/entries/0?{QS}").json()["visible"] is True
        assert client.get(f"/api/notebooks/{notebook_id}/entries/9?{QS}").status_code == 404

    def test_create_rejects_bad_text(self, client, redis_db):
        r = client.post(f"/api/notebooks?{QS}", json={"name": "broken", "text": "01&4petE"})
        assert r.status_code == 400
        assert r.json()["detail"]["kind"] == "malformed_entry"

    def test_list_and_delete(self, client, redis_db):
        r = client.post(f"/api/notebooks?{QS}", json={"name": "animals", "text": THREE})
        notebook_id = r.json()["id"]

        r = client.get(f"/api/notebooks?{QS}&q=anim")
        assert [n["id"] for n in r.json()["notebooks"]] == [notebook_id]

        r = client.delete(f"/api/notebooks/{notebook_id}?{QS}")
        assert r.status_code == 200

        r = client.delete(f"/api/notebooks/{notebook_id}?{QS}")
        assert r.status_code == 404

    def test_not_found(self, client, redis_db):
        assert client.get(f"/api/notebooks/nonexistent?{QS}").status_code == 404
        assert client.post(f"/api/notebooks/nonexistent/open?{QS}").status_code == 404
        assert client.post(f"/api/notebooks/nonexistent/entries/0/hide?{QS}").status_code == 404

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from blog_api.model.database import Database
from blog_api.utils.errors import StoreConnectionError, StoreOperationError


def _raise(error):
    def _method(self, *args, **kwargs):
        raise error
    return _method


@pytest.mark.parametrize("path, method", [
    ("/api/articles/learn-node", "get"),
    ("/api/articles/learn-node/upvote", "post"),
])
def test_unreachable_store_is_503(client, seeded, monkeypatch, path, method):
    error = ServerSelectionTimeoutError("localhost:27017: connection refused")
    monkeypatch.setattr(type(seeded), "find_one", _raise(error))
    monkeypatch.setattr(type(seeded), "find_one_and_update", _raise(error))

    resp = getattr(client, method)(path)
    assert resp.status_code == 503
    assert resp.get_json() == {
        "message": "Error connecting to db",
        "error": "localhost:27017: connection refused",
    }


def test_failed_update_is_500(client, seeded, monkeypatch):
    monkeypatch.setattr(
        type(seeded), "find_one_and_update",
        _raise(OperationFailure("Cannot apply $push to a non-array field")),
    )

    resp = client.post(
        "/api/articles/learn-node/add-comment",
        json={"userName": "ada", "text": "nice"},
    )
    assert resp.status_code == 500
    body = resp.get_json()
    assert body["message"] == "Error querying db"
    assert "non-array" in body["error"]


def test_unexpected_error_is_recovered(client, seeded, monkeypatch):
    monkeypatch.setattr(type(seeded), "find_one", _raise(RuntimeError("boom")))

    resp = client.get("/api/articles/learn-node")
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Internal server error", "error": "boom"}


def test_scope_translates_driver_errors(mongo_client):
    database = Database()
    database.connect(database_name="scoped", client=mongo_client)

    with pytest.raises(StoreConnectionError):
        with database.scope():
            raise ServerSelectionTimeoutError("timed out")

    with pytest.raises(StoreOperationError):
        with database.scope():
            raise OperationFailure("bad update")

    # The handle stays usable after a failed block
    with database.scope() as db:
        db["articles"].insert_one({"name": "after-failure"})
    assert database.get_collection("articles").count_documents({}) == 1


def test_scope_requires_connection():
    database = Database()
    assert not database.is_connected
    with pytest.raises(StoreConnectionError):
        with database.scope():
            pass


def test_close_releases_client(mongo_client):
    database = Database()
    database.connect(database_name="closing", client=mongo_client)
    assert database.is_connected
    database.close()
    assert not database.is_connected
    with pytest.raises(StoreConnectionError):
        database.get_collection("articles")


def test_name_index_is_unique(mongo_client):
    database = Database()
    database.connect(database_name="indexed", client=mongo_client)
    indexes = database.get_collection("articles").index_information()
    assert indexes["idx_name_unique"]["unique"] is True

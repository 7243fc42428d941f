import mongomock
import pytest

from blog_api import create_app


@pytest.fixture()
def static_folder(tmp_path):
    build = tmp_path / "build"
    build.mkdir()
    (build / "index.html").write_text("<!doctype html><div id=\"root\"></div>", encoding="utf-8")
    (build / "static").mkdir()
    (build / "static" / "main.js").write_text("console.log('bundle');", encoding="utf-8")
    return build


@pytest.fixture()
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture()
def app(mongo_client, static_folder):
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_NAME": "my-blog-test",
            "STATIC_FOLDER": str(static_folder),
        },
        client=mongo_client,
    )
    yield app
    app.extensions["database"].close()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def articles(mongo_client):
    return mongo_client["my-blog-test"]["articles"]


@pytest.fixture()
def seeded(articles):
    articles.insert_one({"name": "learn-node", "upvotes": 0, "comments": []})
    articles.insert_one({
        "name": "learn-react",
        "upvotes": 7,
        "comments": [{"userName": "grace", "text": "first"}],
    })
    return articles

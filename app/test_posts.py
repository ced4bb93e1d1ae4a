from datetime import datetime
import unittest
from unittest.mock import patch
from bson.objectid import ObjectId
from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

author = {"firstName": "Ada", "lastName": "Lovelace"}


def fake_post(**fields):
    post = {
        "_id": ObjectId(),
        "title": "Notes on the analytical engine",
        "content": "It weaves algebraic patterns.",
        "author": author,
        "created": datetime(2020, 1, 5, 9, 30),
    }
    post.update(fields)
    return post


class TestPosts(unittest.TestCase):
    def setUp(self) -> None:
        self.dbm = patch("app.controller.post_controller.dbm").start()

    def tearDown(self) -> None:
        patch.stopall()

    def test_get_posts(self):
        posts = [fake_post(), fake_post(title="Second")]
        self.dbm.get.return_value = posts
        response = client.get("/posts")
        assert response.status_code == 200
        body = response.json()
        assert [p["title"] for p in body] == ["Notes on the analytical engine", "Second"]
        assert body[0]["created"] == "2020-01-05T09:30:00.000Z"
        assert body[0]["author"] == author

    def test_get_post(self):
        post = fake_post()
        self.dbm.get_single.return_value = post
        response = client.get(f"/posts/{post['_id']}")
        assert response.status_code == 200
        assert response.json()["_id"] == str(post["_id"])

    def test_get_missing_post(self):
        self.dbm.get_single.return_value = None
        response = client.get(f"/posts/{ObjectId()}")
        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_create_post(self):
        post = fake_post()
        self.dbm.create.return_value = post
        payload = {"title": post["title"], "content": post["content"], "author": author}
        response = client.post("/posts", json=payload)
        assert response.status_code == 201
        assert response.json()["_id"] == str(post["_id"])
        self.dbm.create.assert_called_once_with(payload)

    def test_create_post_missing_fields(self):
        response = client.post("/posts", json={"title": "only a title"})
        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Invalid request"
        assert {tuple(e["loc"]) for e in body["errors"]} == {("body", "content"), ("body", "author")}
        self.dbm.create.assert_not_called()

    def test_update_post(self):
        post = fake_post(title="Updated")
        self.dbm.update.return_value = post
        response = client.put(f"/posts/{post['_id']}", json={"id": str(post["_id"]), "title": "Updated"})
        assert response.status_code == 200
        assert response.json()["title"] == "Updated"
        self.dbm.update.assert_called_once_with(str(post["_id"]), {"title": "Updated"})

    def test_update_post_id_mismatch(self):
        response = client.put(f"/posts/{ObjectId()}", json={"id": str(ObjectId()), "title": "Updated"})
        assert response.status_code == 400
        assert "must match" in response.json()["message"]
        self.dbm.update.assert_not_called()

    def test_update_missing_post(self):
        self.dbm.update.return_value = None
        response = client.put(f"/posts/{ObjectId()}", json={"content": "new"})
        assert response.status_code == 404

    def test_delete_post(self):
        self.dbm.delete.return_value = 1
        post_id = ObjectId()
        response = client.delete(f"/posts/{post_id}")
        assert response.status_code == 204
        self.dbm.delete.assert_called_once_with(str(post_id))

    def test_delete_missing_post(self):
        self.dbm.delete.return_value = 0
        response = client.delete(f"/posts/{ObjectId()}")
        assert response.status_code == 404

"""End-to-end tests for posts, likes and comments."""

from uuid import uuid4


def create_post(client, headers, text: str = "Hello world") -> dict:
    response = client.post("/posts", json={"text": text}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestPosts:
    """Tests for creating, reading and deleting posts."""

    def test_create_post_snapshots_author(self, client, register):
        headers = register("Ada")

        post = create_post(client, headers)

        assert post["text"] == "Hello world"
        assert post["name"] == "Ada"
        assert post["avatar"].startswith("//www.gravatar.com/avatar/")
        assert post["likes"] == []
        assert post["comments"] == []

    def test_posts_require_token(self, client):
        response = client.get("/posts")

        assert response.status_code == 401
        assert response.json()["detail"] == "No token, authorization denied"

    def test_post_requires_text(self, client, register):
        headers = register("Ada")

        response = client.post("/posts", json={"text": ""}, headers=headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"msg": "Text is required", "param": "text", "location": "body"}
        ]

    def test_list_and_get(self, client, register):
        headers = register("Ada")
        post = create_post(client, headers)

        listing = client.get("/posts", headers=headers)
        assert [p["id"] for p in listing.json()] == [post["id"]]

        fetched = client.get(f"/posts/{post['id']}", headers=headers)
        assert fetched.status_code == 200
        assert fetched.json()["text"] == "Hello world"

    def test_get_unknown_or_malformed_post(self, client, register):
        headers = register("Ada")

        for post_id in (str(uuid4()), "bad"):
            response = client.get(f"/posts/{post_id}", headers=headers)

            assert response.status_code == 404
            assert response.json()["detail"] == "Post not found"

    def test_only_author_can_delete(self, client, register):
        ada = register("Ada")
        bob = register("Bob")
        post = create_post(client, ada)

        denied = client.delete(f"/posts/{post['id']}", headers=bob)
        assert denied.status_code == 401
        assert denied.json()["detail"] == "User is not authorized"

        deleted = client.delete(f"/posts/{post['id']}", headers=ada)
        assert deleted.status_code == 200
        assert deleted.json() == {"msg": "Post removed"}
        assert client.get(f"/posts/{post['id']}", headers=ada).status_code == 404


class TestLikes:
    """Tests for liking and unliking posts."""

    def test_like_once(self, client, register):
        headers = register("Ada")
        post = create_post(client, headers)

        first = client.put(f"/posts/like/{post['id']}", headers=headers)
        assert first.status_code == 200
        assert len(first.json()) == 1

        second = client.put(f"/posts/like/{post['id']}", headers=headers)
        assert second.status_code == 400
        assert second.json()["detail"] == "Post already liked"

    def test_unlike(self, client, register):
        ada = register("Ada")
        bob = register("Bob")
        post = create_post(client, ada)
        client.put(f"/posts/like/{post['id']}", headers=ada)
        client.put(f"/posts/like/{post['id']}", headers=bob)

        response = client.put(f"/posts/unlike/{post['id']}", headers=ada)

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_unlike_without_like(self, client, register):
        headers = register("Ada")
        post = create_post(client, headers)

        response = client.put(f"/posts/unlike/{post['id']}", headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Post has not yet been liked"

    def test_like_unknown_post(self, client, register):
        headers = register("Ada")

        response = client.put(f"/posts/like/{uuid4()}", headers=headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"


class TestComments:
    """Tests for commenting on posts."""

    def test_add_and_delete_comment(self, client, register):
        ada = register("Ada")
        bob = register("Bob")
        post = create_post(client, ada)

        client.post(f"/posts/comment/{post['id']}", json={"text": "first"}, headers=bob)
        response = client.post(
            f"/posts/comment/{post['id']}", json={"text": "second"}, headers=bob
        )
        assert response.status_code == 200
        comments = response.json()
        assert [c["text"] for c in comments] == ["second", "first"]
        assert comments[0]["name"] == "Bob"

        first_id = comments[1]["id"]
        denied = client.delete(f"/posts/comment/{post['id']}/{first_id}", headers=ada)
        assert denied.status_code == 401
        assert denied.json()["detail"] == "User is not authorized"

        deleted = client.delete(f"/posts/comment/{post['id']}/{first_id}", headers=bob)
        assert deleted.status_code == 200
        assert [c["text"] for c in deleted.json()] == ["second"]

    def test_delete_unknown_comment(self, client, register):
        headers = register("Ada")
        post = create_post(client, headers)

        response = client.delete(
            f"/posts/comment/{post['id']}/{uuid4()}", headers=headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Comment does not exist"

    def test_comment_requires_text(self, client, register):
        headers = register("Ada")
        post = create_post(client, headers)

        response = client.post(
            f"/posts/comment/{post['id']}", json={}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Text is required"

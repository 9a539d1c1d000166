import pytest

ARTICLE = {"title": "Local team wins the cup", "body": "A thrilling final.", "category": "sports"}


def test_create_article_requires_a_token(client):
    resp = client.post("/articles", json=ARTICLE)
    assert resp.status_code == 401
    assert resp.json() == {"error": "Authentication required"}


def test_create_article_checks_auth_before_the_body(client):
    resp = client.post("/articles", json={"title": ""})
    assert resp.status_code == 401


def test_create_article_with_invalid_token(client):
    resp = client.post("/articles", json=ARTICLE, headers={"Authorization": "Bearer abc.def.ghi"})
    assert resp.status_code == 401


def test_create_article_rejects_unknown_category(client, alice):
    _, headers = alice
    resp = client.post("/articles", json={**ARTICLE, "category": "gossip"}, headers=headers)
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Validation failed"
    assert body["details"] == ["Category must be one of: news, sports, culture, or technology"]


@pytest.mark.parametrize(
    "payload, message",
    [
        ({**ARTICLE, "title": ""}, "Title is required"),
        ({**ARTICLE, "title": "   "}, "Title is required"),
        ({**ARTICLE, "body": ""}, "Body is required"),
        ({"body": "x", "category": "news"}, "Title is required"),
    ],
)
def test_create_article_requires_title_and_body(client, alice, payload, message):
    _, headers = alice
    resp = client.post("/articles", json=payload, headers=headers)
    assert resp.status_code == 400
    assert message in resp.json()["details"]


def test_create_article_returns_joined_representation(client, alice):
    user, headers = alice
    resp = client.post("/articles", json=ARTICLE, headers=headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == ARTICLE["title"]
    assert body["body"] == ARTICLE["body"]
    assert body["category"] == "sports"
    assert body["user_id"] == user["id"]
    assert body["email"] == "alice@example.com"
    assert body["username"] == "alice"
    assert isinstance(body["id"], int)
    assert body["created_at"]


def test_list_articles_newest_first_with_author(client, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    client.post("/articles", json={**ARTICLE, "title": "Older"}, headers=alice_headers)
    client.post("/articles", json={**ARTICLE, "title": "Newer", "category": "technology"}, headers=bob_headers)

    resp = client.get("/articles")
    assert resp.status_code == 200
    articles = resp.json()
    assert [a["title"] for a in articles] == ["Newer", "Older"]
    assert [a["email"] for a in articles] == ["bob@example.com", "alice@example.com"]


def test_list_articles_empty(client):
    assert client.get("/articles").json() == []


def test_posts_alias_serves_the_same_resources(client, alice):
    _, headers = alice
    created = client.post("/posts", json=ARTICLE, headers=headers)
    assert created.status_code == 201
    assert client.get("/posts").json() == client.get("/articles").json()
    assert client.post("/posts", json=ARTICLE).status_code == 401

U2 = {"authtoken": "token-u2"}


def test_article_page_anonymous_shows_login_prompt(client):
    response = client.get("/articles/learn-react")

    assert response.status_code == 200
    assert "The Fastest Way to Learn React" in response.text
    assert "Upvote(s): 5" in response.text
    assert "Log in to upvote" in response.text
    assert "upvote-btn" not in response.text
    assert "add-comment-form" not in response.text


def test_article_page_signed_in_shows_upvote_and_comment_form(client):
    response = client.get("/articles/learn-react", headers=U2)

    assert response.status_code == 200
    assert "upvote-btn" in response.text
    assert "Log in to upvote" not in response.text
    assert 'value="u2@example.com"' in response.text


def test_article_page_lists_comments_in_order(client):
    response = client.get("/articles/learn-node")

    assert "first@example.com" in response.text
    assert "first!" in response.text


def test_article_page_without_persisted_state_uses_defaults(client):
    response = client.get("/articles/learn-firestore")

    assert response.status_code == 200
    assert "Upvote(s): 0" in response.text
    assert "No comments yet." in response.text


def test_unknown_article_renders_not_found(client, article_service):
    response = client.get("/articles/does-not-exist")

    assert response.status_code == 404
    assert "Page not found" in response.text
    assert "get_article" not in article_service.calls


def test_upvote_from_page_redirects_to_article(client, article_service):
    response = client.post(
        "/articles/learn-react/upvote", headers=U2, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/articles/learn-react"
    assert article_service.docs["learn-react"].upvoted_ids == ["u1", "u2"]


def test_upvote_from_page_shows_server_state(client):
    response = client.post("/articles/learn-react/upvote", headers=U2)

    assert response.status_code == 200
    assert "Upvote(s): 6" in response.text


def test_upvote_from_page_requires_login(client, article_service):
    response = client.post("/articles/learn-react/upvote", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/login?next=/articles/learn-react"
    assert "upvote_article" not in article_service.calls


def test_comment_from_page(client, article_service):
    response = client.post(
        "/articles/learn-react/comments",
        data={"email": "a@b.com", "comment": "nice"},
        headers=U2,
    )

    assert response.status_code == 200
    assert "a@b.com" in response.text
    assert article_service.docs["learn-react"].comments[-1].comment == "nice"


def test_comment_from_page_redirects_so_refresh_does_not_repost(client, article_service):
    response = client.post(
        "/articles/learn-react/comments",
        data={"email": "a@b.com", "comment": "nice"},
        headers=U2,
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/articles/learn-react"

    # Reloading the redirect target is a plain GET
    client.get(response.headers["location"], headers=U2)
    assert len(article_service.docs["learn-react"].comments) == 1


def test_comment_from_page_on_unpersisted_article(client):
    response = client.post(
        "/articles/learn-firestore/comments",
        data={"email": "a@b.com", "comment": "nice"},
        headers=U2,
    )

    assert response.status_code == 200
    assert "No comments yet." in response.text


def test_login_page_keeps_local_next(client):
    response = client.get("/login", params={"next": "/articles/learn-react"})

    assert response.status_code == 200
    assert '"/articles/learn-react"' in response.text


def test_login_page_ignores_external_next(client):
    response = client.get("/login", params={"next": "//evil.example.com"})

    assert "evil.example.com" not in response.text


def test_entry_document_served_for_client_routes(client):
    for path in ("/", "/about", "/articles-list/anything"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert '<main id="root">' in response.text


def test_unknown_api_path_is_not_the_entry_document(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert '<main id="root">' not in response.text


def test_stale_cookie_does_not_lock_out_pages(client):
    for path in ("/login", "/login?logout=1", "/articles/learn-react", "/"):
        client.cookies.set("authtoken", "expired")
        response = client.get(path)
        assert response.status_code == 200, path


def test_stale_cookie_is_cleared_and_page_is_anonymous(client):
    client.cookies.set("authtoken", "expired")

    response = client.get("/articles/learn-react")

    assert "Log in to upvote" in response.text
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("authtoken=")
    assert "Max-Age=0" in set_cookie


def test_stale_cookie_upvote_redirects_to_login(client, article_service):
    client.cookies.set("authtoken", "expired")

    response = client.post("/articles/learn-react/upvote", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"].startswith("/login")
    assert "upvote_article" not in article_service.calls

"""Health, metrics, reset and the static file hit counter."""


def test_healthz(client):
    response = client.get("/api/healthz")
    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"] == "text/plain; charset=utf-8"


def test_static_hits_are_counted(client):
    assert client.get("/app/").status_code == 200
    assert client.get("/app/logo.png").status_code == 200
    assert client.get("/app/missing.txt").status_code == 404
    client.get("/api/healthz")

    response = client.get("/admin/metrics")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<h1>Welcome, Chirpy Admin</h1>" in response.text
    assert "Chirpy has been visited 3 times!" in response.text


def test_metrics_is_read_only(client):
    client.get("/app/")
    client.get("/admin/metrics")
    assert "visited 1 times!" in client.get("/admin/metrics").text


def test_reset_in_dev(client, store):
    user = client.post("/api/users", json={"email": "a@example.com"}).json()
    client.post("/api/chirps", json={"body": "owned", "user_id": user["id"]})
    client.post("/api/chirps", json={"body": "anonymous"})
    client.get("/app/")
    client.get("/app/")

    response = client.post("/admin/reset")
    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert store.users == []
    assert [c.body for c in store.chirps] == ["anonymous"]
    assert "visited 0 times!" in client.get("/admin/metrics").text


def test_reset_outside_dev_is_forbidden(prod_client, store):
    prod_client.post("/api/users", json={"email": "a@example.com"})
    prod_client.get("/app/")
    before = prod_client.get("/admin/metrics").text

    response = prod_client.post("/admin/reset")
    assert response.status_code == 403
    assert "error" in response.json()
    assert prod_client.get("/admin/metrics").text == before
    assert len(store.users) == 1
    assert "delete_users" not in store.calls


def test_reset_storage_failure_keeps_counter(client, store):
    client.get("/app/")
    store.fail = True
    response = client.post("/admin/reset")
    assert response.status_code == 500
    assert "visited 1 times!" in client.get("/admin/metrics").text


def test_bare_prefix_redirect_counts_once(client):
    response = client.get("/app")
    assert response.status_code == 200
    assert [r.status_code for r in response.history] == [307]
    assert "visited 1 times!" in client.get("/admin/metrics").text

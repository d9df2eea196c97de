NEW_USER = {"username": "Escrevente", "email": "escrevente@example.com", "full_name": "Escrevente", "password": "senha-forte"}


def test_admin_manages_users(admin_client, anon_client):
    r = admin_client.post("/users", json=NEW_USER)
    assert r.status_code == 201, r.text
    user = r.json()["user"]
    assert user["username"] == "escrevente"
    assert "password" not in user and "hashed_password" not in user

    assert {u["username"] for u in admin_client.get("/users").json()["users"]} == {"admin", "escrevente"}

    r = admin_client.patch(f"/users/{user['id']}", json={"password": "outra-senha"})
    assert r.status_code == 200
    login = anon_client.post("/auth/login", json={"username": "escrevente", "password": "outra-senha"})
    assert login.status_code == 200

    assert admin_client.delete(f"/users/{user['id']}").status_code == 200
    assert admin_client.delete(f"/users/{user['id']}").status_code == 404


def test_duplicate_username_or_email_conflicts(admin_client):
    assert admin_client.post("/users", json=NEW_USER).status_code == 201
    r = admin_client.post("/users", json={**NEW_USER, "email": "other@example.com"})
    assert r.status_code == 409
    r = admin_client.post("/users", json={**NEW_USER, "username": "other"})
    assert r.status_code == 409


def test_admin_cannot_delete_self(admin_client):
    me = admin_client.get("/auth/me").json()["user"]
    r = admin_client.delete(f"/users/{me['id']}")
    assert r.status_code == 400


def test_non_admin_is_forbidden(admin_client, anon_client):
    admin_client.post("/users", json=NEW_USER)
    assert anon_client.get("/users").status_code == 401
    anon_client.post("/auth/login", json={"username": "escrevente", "password": NEW_USER["password"]})
    assert anon_client.get("/users").status_code == 403
    # ordinary staff can still edit content
    r = anon_client.post("/links", json={"name": "x", "url": "https://x.example.com"})
    assert r.status_code == 201


def test_username_longer_than_column_rejected(admin_client):
    r = admin_client.post("/users", json={**NEW_USER, "username": "u" * 256})
    assert r.status_code == 400
    assert "username" in r.json()["details"]["fields"]

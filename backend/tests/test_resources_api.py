from datetime import datetime

import pytest

LINK = {"name": "TJ-RJ", "url": "https://tjrj.jus.br", "order": 1, "active": True}


def create(client, path, payload):
    r = client.post(f"/{path}", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_link_scenario(admin_client, anon_client):
    body = create(admin_client, "links", LINK)
    link = body["link"]
    assert isinstance(link["id"], int)
    for key, value in LINK.items():
        assert link[key] == value

    public = anon_client.get("/links").json()["links"]
    assert [l["id"] for l in public] == [link["id"]]

    r = admin_client.patch(f"/links/{link['id']}/toggle")
    assert r.status_code == 200
    assert r.json()["link"]["active"] is False

    assert anon_client.get("/links").json()["links"] == []
    admin = admin_client.get("/admin/links").json()["links"]
    assert [l["id"] for l in admin] == [link["id"]]


def test_get_after_create_returns_same_record(admin_client):
    created = create(admin_client, "banners", {
        "title": "Escrituras",
        "image_url": "/uploads/banners/escrituras.jpg",
        "link": "https://example.com/escrituras",
        "order": 2,
    })["banner"]
    fetched = admin_client.get(f"/admin/banners/{created['id']}").json()["banner"]
    assert fetched == created
    assert created["created_at"] and created["updated_at"]


def test_update_merges_fields_and_refreshes_updated_at(admin_client):
    created = create(admin_client, "services", {"name": "Procuração", "description": "Pública"})["service"]
    r = admin_client.patch(f"/services/{created['id']}", json={"description": "Pública e particular"})
    assert r.status_code == 200, r.text
    updated = r.json()["service"]
    assert updated["name"] == "Procuração"
    assert updated["description"] == "Pública e particular"
    assert updated["created_at"] == created["created_at"]
    assert datetime.fromisoformat(updated["updated_at"]) >= datetime.fromisoformat(created["updated_at"])


def test_put_alias_updates(admin_client):
    created = create(admin_client, "announcements", {"text": "Fechado no feriado"})["announcement"]
    r = admin_client.put(f"/announcements/{created['id']}", json={"text": "Aberto no feriado"})
    assert r.status_code == 200
    assert r.json()["announcement"]["text"] == "Aberto no feriado"


def test_public_listing_sorted_by_order_then_id(admin_client, anon_client):
    ids = []
    for name, order in [("c", 2), ("a", 1), ("b", 1), ("d", 0), ("e", 2)]:
        ids.append(create(admin_client, "links", {"name": name, "url": f"https://{name}.example.com", "order": order})["link"]["id"])
    listed = anon_client.get("/links").json()["links"]
    keys = [(l["order"], l["id"]) for l in listed]
    assert keys == sorted(keys)
    assert [l["name"] for l in listed] == ["d", "a", "b", "c", "e"]


def test_public_listing_hides_inactive_rows(admin_client, anon_client):
    create(admin_client, "review-images", {"image_url": "/uploads/reviews/1.png", "active": True})
    hidden = create(admin_client, "review-images", {"image_url": "/uploads/reviews/2.png", "active": False})["review_image"]
    public = anon_client.get("/review-images").json()["review_images"]
    assert hidden["id"] not in [i["id"] for i in public]
    assert all(i["active"] for i in public)
    admin = admin_client.get("/admin/review-images").json()["review_images"]
    assert hidden["id"] in [i["id"] for i in admin]


def test_news_newest_first(admin_client, anon_client):
    first = create(admin_client, "news", {"title": "Antiga", "content": "<p>a</p>"})["news_item"]
    second = create(admin_client, "news", {"title": "Nova", "content": "<p>b</p>"})["news_item"]
    listed = anon_client.get("/news").json()["news"]
    assert [n["id"] for n in listed] == [second["id"], first["id"]]


def test_toggle_flips_each_call(admin_client):
    item = create(admin_client, "gallery", {"title": "Fachada", "type": "image", "media_url": "/uploads/g/1.jpg"})["gallery_item"]
    states = [admin_client.patch(f"/gallery/{item['id']}/toggle").json()["gallery_item"]["active"] for _ in range(3)]
    assert states == [False, True, False]


def test_delete_then_get_is_not_found(admin_client):
    item = create(admin_client, "information", {"name": "Horário", "content": "<p>9h-17h</p>"})["information"]
    r = admin_client.delete(f"/information/{item['id']}")
    assert r.status_code == 200
    assert r.json() == {"status": "deleted"}
    assert admin_client.get(f"/admin/information/{item['id']}").status_code == 404
    assert admin_client.delete(f"/information/{item['id']}").status_code == 404


def test_delete_missing_id_is_not_found(admin_client):
    r = admin_client.delete("/banners/9999")
    assert r.status_code == 404
    assert r.json()["error"] == "not_found"


def test_update_missing_id_is_not_found(admin_client):
    r = admin_client.patch("/links/9999", json={"name": "x"})
    assert r.status_code == 404


class TestValidation:
    def test_missing_required_field(self, admin_client):
        r = admin_client.post("/links", json={"url": "https://a.example.com"})
        assert r.status_code == 400
        body = r.json()
        assert body["error"] == "validation_error"
        assert "name" in body["details"]["fields"]

    def test_blank_required_field(self, admin_client):
        r = admin_client.post("/announcements", json={"text": "   "})
        assert r.status_code == 400
        assert "text" in r.json()["details"]["fields"]

    @pytest.mark.parametrize("url", ["tjrj.jus.br", "ftp://tjrj.jus.br", "https://", "/relative/path"])
    def test_link_url_must_be_absolute(self, admin_client, url):
        r = admin_client.post("/links", json={"name": "x", "url": url})
        assert r.status_code == 400
        assert "url" in r.json()["details"]["fields"]

    def test_numeric_field_must_parse(self, admin_client):
        r = admin_client.post("/links", json={"name": "x", "url": "https://x.example.com", "order": "first"})
        assert r.status_code == 400
        assert "order" in r.json()["details"]["fields"]

    def test_numeric_string_is_accepted(self, admin_client):
        body = create(admin_client, "links", {"name": "x", "url": "https://x.example.com", "order": "3"})
        assert body["link"]["order"] == 3

    def test_required_field_cannot_be_nulled(self, admin_client):
        item = create(admin_client, "links", LINK)["link"]
        r = admin_client.patch(f"/links/{item['id']}", json={"url": None})
        assert r.status_code == 400
        assert "url" in r.json()["details"]["fields"]

    def test_gallery_type_is_restricted(self, admin_client):
        r = admin_client.post("/gallery", json={"title": "x", "type": "audio", "media_url": "/x.mp3"})
        assert r.status_code == 400
        assert "type" in r.json()["details"]["fields"]

    @pytest.mark.parametrize("path,payload,field", [
        ("links", {"name": "x" * 256, "url": "https://a.example.com"}, "name"),
        ("links", {"name": "x", "url": "https://a.example.com/" + "p" * 500}, "url"),
        ("pages", {"name": "x", "slug": "s" * 256, "content": "x"}, "slug"),
        ("review-images", {"image_url": "/uploads/" + "i" * 500}, "image_url"),
    ])
    def test_values_longer_than_their_column_rejected(self, admin_client, path, payload, field):
        r = admin_client.post(f"/{path}", json=payload)
        assert r.status_code == 400
        assert field in r.json()["details"]["fields"]
        assert admin_client.get(f"/admin/{path}").json()[path.replace("-", "_")] == []

    def test_optional_url_blank_becomes_null(self, admin_client):
        body = create(admin_client, "banners", {"title": "t", "image_url": "/b.jpg", "link": ""})
        assert body["banner"]["link"] is None


class TestReorder:
    def _seed(self, client, n=3):
        return [create(client, "links", {"name": f"l{i}", "url": f"https://l{i}.example.com", "order": i})["link"]["id"] for i in range(n)]

    def test_reorder_assigns_index_positions(self, admin_client, anon_client):
        a, b, c = self._seed(admin_client)
        r = admin_client.post("/links/reorder", json={"ids": [c, a, b]})
        assert r.status_code == 200, r.text
        assert [(l["id"], l["order"]) for l in r.json()["links"]] == [(c, 0), (a, 1), (b, 2)]
        assert [l["id"] for l in anon_client.get("/links").json()["links"]] == [c, a, b]

    @pytest.mark.parametrize("mutate", [
        lambda ids: ids[:-1],
        lambda ids: ids + [9999],
        lambda ids: ids + [ids[0]],
        lambda ids: [],
    ])
    def test_mismatched_ids_rejected_without_changes(self, admin_client, mutate):
        ids = self._seed(admin_client)
        before = admin_client.get("/admin/links").json()["links"]
        r = admin_client.post("/links/reorder", json={"ids": mutate(list(reversed(ids)))})
        assert r.status_code == 400
        assert "ids" in r.json()["details"]["fields"]
        assert admin_client.get("/admin/links").json()["links"] == before

    def test_reorder_not_offered_for_unordered_resources(self, admin_client):
        item = create(admin_client, "services", {"name": "x"})["service"]
        r = admin_client.post("/services/reorder", json={"ids": [item["id"]]})
        assert r.status_code in (404, 405)


class TestPages:
    def test_public_lookup_by_slug(self, admin_client, anon_client):
        create(admin_client, "pages", {"name": "Sobre", "slug": "sobre-nos", "content": "<h1>Sobre</h1>"})
        r = anon_client.get("/pages/sobre-nos")
        assert r.status_code == 200
        assert r.json()["page"]["name"] == "Sobre"

    def test_inactive_page_is_not_found(self, admin_client, anon_client):
        create(admin_client, "pages", {"name": "Rascunho", "slug": "rascunho", "content": "x", "active": False})
        r = anon_client.get("/pages/rascunho")
        assert r.status_code == 404
        assert r.json()["error"] == "not_found"

    def test_lookup_is_case_insensitive(self, admin_client, anon_client):
        create(admin_client, "pages", {"name": "Sobre", "slug": "Sobre-Nos", "content": "x"})
        r = anon_client.get("/pages/Sobre-Nos")
        assert r.status_code == 200
        assert r.json()["page"]["slug"] == "sobre-nos"

    def test_unknown_slug_is_not_found(self, anon_client):
        assert anon_client.get("/pages/nao-existe").status_code == 404

    def test_duplicate_slug_conflicts(self, admin_client):
        create(admin_client, "pages", {"name": "A", "slug": "duplicada", "content": "x"})
        r = admin_client.post("/pages", json={"name": "B", "slug": "duplicada", "content": "y"})
        assert r.status_code == 409
        assert r.json()["error"] == "conflict"

    def test_renaming_slug_onto_existing_conflicts(self, admin_client):
        create(admin_client, "pages", {"name": "A", "slug": "a", "content": "x"})
        b = create(admin_client, "pages", {"name": "B", "slug": "b", "content": "y"})["page"]
        assert admin_client.patch(f"/pages/{b['id']}", json={"slug": "a"}).status_code == 409
        # keeping its own slug is not a conflict
        assert admin_client.patch(f"/pages/{b['id']}", json={"slug": "b", "name": "B2"}).status_code == 200

    def test_invalid_slug_rejected(self, admin_client):
        r = admin_client.post("/pages", json={"name": "A", "slug": "com espaço", "content": "x"})
        assert r.status_code == 400
        assert "slug" in r.json()["details"]["fields"]


class TestSessionGuard:
    @pytest.mark.parametrize("method,path,payload", [
        ("post", "/links", LINK),
        ("patch", "/links/1", {"name": "hack"}),
        ("put", "/links/1", {"name": "hack"}),
        ("delete", "/links/1", None),
        ("post", "/links/reorder", {"ids": [1]}),
        ("patch", "/links/1/toggle", None),
        ("get", "/admin/links", None),
    ])
    def test_anonymous_writes_rejected_and_store_untouched(self, admin_client, anon_client, method, path, payload):
        create(admin_client, "links", LINK)
        before = admin_client.get("/admin/links").json()["links"]
        kwargs = {"json": payload} if payload is not None else {}
        r = getattr(anon_client, method)(path, **kwargs)
        assert r.status_code == 401
        assert r.json()["error"] == "unauthorized"
        assert admin_client.get("/admin/links").json()["links"] == before

    def test_anonymous_invalid_body_still_unauthorized(self, anon_client):
        r = anon_client.post("/links", json={"url": "not a url"})
        assert r.status_code == 401

    @pytest.mark.parametrize("method,path", [
        ("post", "/links"),
        ("patch", "/links/1"),
        ("put", "/contacts"),
        ("post", "/users"),
    ])
    def test_anonymous_malformed_json_still_unauthorized(self, anon_client, method, path):
        r = getattr(anon_client, method)(path, content=b'{"name": "x",', headers={"Content-Type": "application/json"})
        assert r.status_code == 401
        assert r.json()["error"] == "unauthorized"

    def test_anonymous_bad_path_id_still_unauthorized(self, anon_client):
        assert anon_client.delete("/links/abc").status_code == 401

    def test_signed_in_malformed_json_is_validation_error(self, admin_client):
        r = admin_client.post("/links", content=b'{"name": "x",', headers={"Content-Type": "application/json"})
        assert r.status_code == 400
        assert list(r.json()["details"]["fields"]) == ["body"]

    def test_public_form_malformed_json_is_validation_error(self, anon_client):
        r = anon_client.post("/contact-messages", content=b"{", headers={"Content-Type": "application/json"})
        assert r.status_code == 400
        assert r.json()["details"]["fields"] == {"body": "JSON decode error"}

from helpers import module_payload


def _seed(client, headers):
    rows = [
        module_payload(1, name="Data Science Basics", studycredit=15, location="Breda", level="NLQF5"),
        module_payload(2, name="Advanced AI", description="Deep learning", studycredit=30, location="Tilburg", level="NLQF6"),
        module_payload(3, name="Web Development", shortdescription="Build sites", studycredit=15, location="Den Bosch", level="NLQF6"),
    ]
    for row in rows:
        resp = client.post("/modules", json=row, headers=headers)
        assert resp.status_code == 201, resp.text


def test_modules_require_authentication(client):
    assert client.get("/modules").status_code == 401
    assert client.post("/modules", json=module_payload(1)).status_code == 401


def test_create_and_get_module(client, auth_headers):
    resp = client.post("/modules", json=module_payload(10), headers=auth_headers)
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] == 10
    assert "_id" not in created
    assert created["created_at"] is not None

    got = client.get("/modules/10", headers=auth_headers)
    assert got.status_code == 200
    assert got.json()["name"] == "Module 10"


def test_create_duplicate_id_conflicts(client, auth_headers):
    client.post("/modules", json=module_payload(10), headers=auth_headers)
    resp = client.post("/modules", json=module_payload(10, name="Other"), headers=auth_headers)
    assert resp.status_code == 409


def test_create_rejects_invalid_payload(client, auth_headers):
    resp = client.post("/modules", json=module_payload(11, studycredit=0), headers=auth_headers)
    assert resp.status_code == 400
    resp = client.post("/modules", json=module_payload(12, name="   "), headers=auth_headers)
    assert resp.status_code == 400


def test_get_missing_module_404(client, auth_headers):
    resp = client.get("/modules/999", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Module with id 999 not found"


def test_list_is_ordered_by_id(client, auth_headers):
    for module_id in (5, 2, 9):
        client.post("/modules", json=module_payload(module_id), headers=auth_headers)
    ids = [m["id"] for m in client.get("/modules", headers=auth_headers).json()]
    assert ids == [2, 5, 9]


def test_list_filters_by_facets_and_term(client, auth_headers):
    _seed(client, auth_headers)

    resp = client.get("/modules", params={"studycredit": 15}, headers=auth_headers)
    assert {m["id"] for m in resp.json()} == {1, 3}

    resp = client.get("/modules", params={"level": "NLQF6", "location": ["Tilburg", "Breda"]}, headers=auth_headers)
    assert [m["id"] for m in resp.json()] == [2]

    resp = client.get("/modules", params={"q": "DEEP"}, headers=auth_headers)
    assert [m["id"] for m in resp.json()] == [2]


def test_search_matches_short_description_case_insensitive(client, auth_headers):
    _seed(client, auth_headers)
    resp = client.get("/modules/search", params={"q": "build"}, headers=auth_headers)
    assert [m["id"] for m in resp.json()] == [3]


def test_search_treats_term_literally(client, auth_headers):
    _seed(client, auth_headers)
    resp = client.get("/modules/search", params={"q": ".*"}, headers=auth_headers)
    assert resp.json() == []


def test_update_module_partial(client, auth_headers):
    client.post("/modules", json=module_payload(20), headers=auth_headers)
    resp = client.put("/modules/20", json={"name": "Renamed", "level": None}, headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Renamed"
    assert body["level"] == "NLQF5"
    assert body["studycredit"] == 15


def test_update_missing_module_404(client, auth_headers):
    resp = client.put("/modules/404", json={"name": "X"}, headers=auth_headers)
    assert resp.status_code == 404


def test_delete_module_cascades_favorites(client, auth_headers, fake_db):
    client.post("/modules", json=module_payload(30), headers=auth_headers)
    client.post("/favorites", json={"module_id": 30}, headers=auth_headers)
    assert len(fake_db["favorites"].docs) == 1

    resp = client.delete("/modules/30", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Module successfully deleted"}
    assert fake_db["favorites"].docs == []
    assert client.get("/modules/30", headers=auth_headers).status_code == 404
    assert client.delete("/modules/30", headers=auth_headers).status_code == 404


def test_update_cannot_change_module_id(client, auth_headers):
    client.post("/modules", json=module_payload(20), headers=auth_headers)
    resp = client.put("/modules/20", json={"id": 99, "name": "X"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == 20
    assert resp.json()["name"] == "X"
    assert client.get("/modules/20", headers=auth_headers).json()["name"] == "X"
    assert client.get("/modules/99", headers=auth_headers).status_code == 404

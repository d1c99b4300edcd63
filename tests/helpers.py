"""Request helpers shared by the API and client tests."""

from keuzekompas.db import mongo


def module_payload(module_id, **overrides):
    data = {
        "id": module_id,
        "name": f"Module {module_id}",
        "shortdescription": "Short",
        "description": "Long description",
        "content": "Content",
        "studycredit": 15,
        "location": "Breda",
        "contact_id": 1,
        "level": "NLQF5",
        "learningoutcomes": "Outcomes",
    }
    data.update(overrides)
    return data


def register(client, email="alice@example.com", password="secret123", name="Alice"):
    resp = client.post("/auth/register", json={"name": name, "email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def promote_to_admin(fake_db, email):
    for doc in fake_db[mongo.USERS].docs:
        if doc["email"] == email:
            doc["role"] = "admin"

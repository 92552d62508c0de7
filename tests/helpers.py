"""Request helpers shared by the API tests."""

SUNRISE = {
    "pgName": "Sunrise PG",
    "pgRent": 8000,
    "pgAddress": "MG Road",
    "pgCity": "Pune",
    "pgPincode": "411001",
    "pgDistance": 2,
    "facilities": ["wifi", "food"],
}


def signup(client, role, email=None, name=None, password="secret123"):
    """Sign up through the API and return the JSON body."""
    response = client.post(
        "/api/auth/signup",
        json={
            "name": name or f"{role.title()} User",
            "email": email or f"{role}@example.com",
            "password": password,
            "role": role,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def add_pg(client, token, **overrides):
    """Submit SUNRISE (with overrides) and return the new id."""
    body = dict(SUNRISE, **overrides)
    response = client.post("/api/pg/add", json=body, headers=bearer(token))
    assert response.status_code == 201, response.text
    return response.json()["pgId"]

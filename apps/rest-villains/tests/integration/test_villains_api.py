import pytest


def _create(client, payload) -> int:
    r = client.post("/api/villains", json=payload)
    assert r.status_code == 201, r.text
    return int(r.headers["location"].rsplit("/", 1)[-1])


def test_hello(client):
    r = client.get("/api/villains/hello")
    assert r.status_code == 200
    assert r.text == "Hello Villain Resource!"
    assert r.headers["content-type"].startswith("text/plain")


def test_list_empty_store_returns_no_content(client):
    r = client.get("/api/villains")
    assert r.status_code == 204
    assert r.content == b""


def test_create_then_get(client):
    r = client.post("/api/villains", json={"name": "Thanos", "level": 10})
    assert r.status_code == 201, r.text
    location = r.headers["location"]
    assert location.startswith("http://testserver/api/villains/")
    villain_id = int(location.rsplit("/", 1)[-1])

    r = client.get(f"/api/villains/{villain_id}")
    assert r.status_code == 200
    assert r.json() == {
        "id": villain_id,
        "name": "Thanos",
        "otherName": None,
        "level": 10,
        "picture": None,
        "powers": None,
    }


def test_create_round_trips_all_fields(client):
    payload = {
        "name": "Loki",
        "otherName": "God of Mischief",
        "level": 45,
        "picture": "https://example.com/loki.png",
        "powers": "Illusion, Shapeshifting",
    }
    villain_id = _create(client, payload)
    assert client.get(f"/api/villains/{villain_id}").json() == {"id": villain_id, **payload}


@pytest.mark.parametrize(
    "payload",
    [
        {"level": 10},
        {"name": "Thanos"},
        {"name": None, "level": 10},
        {"name": "Thanos", "level": "very high"},
    ],
)
def test_create_invalid_payload_is_rejected(client, payload):
    r = client.post("/api/villains", json=payload)
    assert r.status_code == 422
    assert client.get("/api/villains").status_code == 204


def test_list_returns_all(client):
    ids = {_create(client, {"name": n, "level": 5}) for n in ("Thanos", "Loki", "Joker")}
    r = client.get("/api/villains")
    assert r.status_code == 200
    assert {v["id"] for v in r.json()} == ids


def test_get_unknown_villain_returns_no_content(client):
    r = client.get("/api/villains/4242")
    assert r.status_code == 204
    assert r.content == b""


def test_get_non_integer_id_is_rejected(client):
    assert client.get("/api/villains/not-a-number").status_code == 422


def test_update_existing_villain(client):
    villain_id = _create(client, {"name": "Thanos", "level": 10, "powers": "Cosmic awareness"})

    r = client.put(
        "/api/villains",
        json={"id": villain_id, "name": "Thanos", "level": 99, "otherName": "Mad Titan"},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["id"] == villain_id
    assert body["level"] == 99
    assert body["otherName"] == "Mad Titan"
    # Full replacement: fields absent from the payload are cleared
    assert body["powers"] is None

    assert client.get(f"/api/villains/{villain_id}").json() == body


def test_update_unknown_villain_returns_not_found(client):
    r = client.put("/api/villains", json={"id": 999, "name": "Nobody", "level": 1})
    assert r.status_code == 404
    assert r.json()["detail"] == "Villain with id 999 not found"


def test_update_without_id_is_rejected(client):
    assert client.put("/api/villains", json={"name": "Thanos", "level": 1}).status_code == 422


def test_delete_then_get(client):
    villain_id = _create(client, {"name": "Thanos", "level": 10})

    r = client.delete(f"/api/villains/{villain_id}")
    assert r.status_code == 204

    assert client.get(f"/api/villains/{villain_id}").status_code == 204


def test_delete_unknown_villain_returns_not_found(client):
    assert client.delete("/api/villains/31337").status_code == 404


def test_random_on_empty_store_returns_not_found(client):
    r = client.get("/api/villains/random")
    assert r.status_code == 404
    assert r.json()["detail"] == "No villain found"


def test_random_returns_member_of_store(client):
    ids = {_create(client, {"name": f"V{i}", "level": i + 1}) for i in range(3)}
    seen = set()
    for _ in range(60):
        r = client.get("/api/villains/random")
        assert r.status_code == 200
        seen.add(r.json()["id"])
    assert seen <= ids
    assert seen == ids


@pytest.mark.parametrize("villain_id", [0, -1, 2**63, 99999999999999999999])
def test_out_of_range_path_id_is_rejected(client, villain_id):
    assert client.get(f"/api/villains/{villain_id}").status_code == 422
    assert client.delete(f"/api/villains/{villain_id}").status_code == 422


def test_largest_storable_id_is_simply_missing(client):
    assert client.get(f"/api/villains/{2**63 - 1}").status_code == 204
    assert client.delete(f"/api/villains/{2**63 - 1}").status_code == 404


@pytest.mark.parametrize("villain_id", [0, 2**63, 99999999999999999999])
def test_update_with_out_of_range_id_is_rejected(client, villain_id):
    r = client.put("/api/villains", json={"id": villain_id, "name": "Thanos", "level": 10})
    assert r.status_code == 422


@pytest.mark.parametrize("level", [2**31, -2**31 - 1, 99999999999999999999])
def test_out_of_range_level_is_rejected(client, level):
    assert client.post("/api/villains", json={"name": "Thanos", "level": level}).status_code == 422
    assert client.get("/api/villains").status_code == 204

    villain_id = _create(client, {"name": "Thanos", "level": 10})
    r = client.put("/api/villains", json={"id": villain_id, "name": "Thanos", "level": level})
    assert r.status_code == 422
    assert client.get(f"/api/villains/{villain_id}").json()["level"] == 10


def test_level_range_limits_are_accepted(client):
    for level in (2**31 - 1, -2**31):
        villain_id = _create(client, {"name": "Edge", "level": level})
        assert client.get(f"/api/villains/{villain_id}").json()["level"] == level


def test_snake_case_field_names_are_not_part_of_the_contract(client):
    villain_id = _create(client, {"name": "Thanos", "level": 10, "other_name": "Mad Titan"})
    assert client.get(f"/api/villains/{villain_id}").json()["otherName"] is None


def test_trailing_slash_is_not_redirected(client):
    _create(client, {"name": "Thanos", "level": 10})
    r = client.get("/api/villains/", follow_redirects=False)
    assert r.status_code == 404
    assert client.post("/api/villains/", json={"name": "Loki", "level": 5}, follow_redirects=False).status_code == 404

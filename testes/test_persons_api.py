import pytest

BASE = "/api/v1/persons"


@pytest.mark.asyncio
async def test_person_lifecycle(client):
    # create
    resp = await client.post(BASE, json={"name": "Al", "age": 30})
    assert resp.status_code == 201, resp.text
    person = resp.json()
    person_id = person["id"]
    assert person["name"] == "Al"
    assert person["age"] == 30
    assert person["favoriteFoods"] == []
    assert person["createdAt"] and person["updatedAt"]

    # get
    resp_get = await client.get(f"{BASE}/{person_id}")
    assert resp_get.status_code == 200
    assert resp_get.json() == person

    # favorite
    resp_fav = await client.put(f"{BASE}/{person_id}/favorite")
    assert resp_fav.status_code == 200, resp_fav.text
    assert resp_fav.json()["favoriteFoods"] == ["hamburger"]

    # delete
    resp_del = await client.delete(f"{BASE}/{person_id}")
    assert resp_del.status_code == 200
    assert resp_del.json()["id"] == person_id
    assert resp_del.json()["favoriteFoods"] == ["hamburger"]

    # get after delete
    resp_get2 = await client.get(f"{BASE}/{person_id}")
    assert resp_get2.status_code == 404
    assert resp_get2.json()["message"] == "Person not found"
    assert resp_get2.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_create_echoes_input_with_trimmed_name(client):
    payload = {"name": "  Beatriz  ", "age": 0, "favoriteFoods": ["pizza", "sushi", "pizza"]}
    resp = await client.post(BASE, json=payload)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["name"] == "Beatriz"
    assert body["age"] == 0
    assert body["favoriteFoods"] == ["pizza", "sushi", "pizza"]
    assert len(body["id"]) == 24


@pytest.mark.asyncio
async def test_create_ignores_client_timestamps_and_unknown_fields(client):
    payload = {
        "name": "Carla",
        "createdAt": "2000-01-01T00:00:00Z",
        "nickname": "cacá",
    }
    resp = await client.post(BASE, json=payload)
    assert resp.status_code == 201
    body = resp.json()
    assert not body["createdAt"].startswith("2000")
    assert "nickname" not in body


@pytest.mark.asyncio
async def test_bulk_create_and_list(client):
    people = [
        {"name": "Ana", "age": 20},
        {"name": "Bruno", "favoriteFoods": ["pizza"]},
        {"name": "Mary", "age": 40},
    ]
    resp = await client.post(f"{BASE}/bulk", json=people)
    assert resp.status_code == 201, resp.text
    created = resp.json()
    assert [p["name"] for p in created] == ["Ana", "Bruno", "Mary"]
    assert len({p["id"] for p in created}) == 3

    resp_list = await client.get(BASE)
    assert resp_list.status_code == 200
    assert [p["name"] for p in resp_list.json()] == ["Ana", "Bruno", "Mary"]


@pytest.mark.asyncio
async def test_bulk_create_empty_list(client):
    resp = await client.post(f"{BASE}/bulk", json=[])
    assert resp.status_code == 201
    assert resp.json() == []


@pytest.mark.asyncio
async def test_list_empty(client):
    resp = await client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_find_by_food_returns_first_match(client):
    await client.post(BASE, json={"name": "Ana", "favoriteFoods": ["sushi"]})
    first = (await client.post(BASE, json={"name": "Bruno", "favoriteFoods": ["pizza"]})).json()
    await client.post(BASE, json={"name": "Caio", "favoriteFoods": ["pizza", "taco"]})

    resp = await client.get(f"{BASE}/food/pizza")
    assert resp.status_code == 200
    assert resp.json()["id"] == first["id"]


@pytest.mark.asyncio
async def test_find_by_food_without_match_is_404(client):
    await client.post(BASE, json={"name": "Ana", "favoriteFoods": ["sushi"]})
    resp = await client.get(f"{BASE}/food/pizza")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Person not found"


@pytest.mark.asyncio
async def test_favorite_appends_every_call(client):
    person = (await client.post(BASE, json={"name": "Duda", "favoriteFoods": ["salad"]})).json()

    await client.put(f"{BASE}/{person['id']}/favorite")
    resp = await client.put(f"{BASE}/{person['id']}/favorite")
    assert resp.status_code == 200
    assert resp.json()["favoriteFoods"] == ["salad", "hamburger", "hamburger"]


@pytest.mark.asyncio
async def test_favorite_unknown_id_is_404(client):
    resp = await client.put(f"{BASE}/65f0c0ffee0000000000abcd/favorite")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/not-an-id"),
        ("PUT", "/not-an-id/favorite"),
        ("DELETE", "/not-an-id"),
    ],
)
async def test_malformed_id_is_400(client, method, path):
    resp = await client.request(method, f"{BASE}{path}")
    assert resp.status_code == 400
    assert resp.json()["error"] == "malformed_reference"
    assert "not-an-id" in resp.json()["message"]


@pytest.mark.asyncio
async def test_update_age_by_name_only_first_match(client):
    first = (await client.post(BASE, json={"name": "Eva", "age": 10})).json()
    second = (await client.post(BASE, json={"name": "Eva", "age": 11})).json()

    resp = await client.put(f"{BASE}/name/Eva/age", json={"age": 33})
    assert resp.status_code == 200, resp.text
    assert resp.json()["id"] == first["id"]
    assert resp.json()["age"] == 33

    resp_second = await client.get(f"{BASE}/{second['id']}")
    assert resp_second.json()["age"] == 11


@pytest.mark.asyncio
async def test_update_age_unknown_name_is_404(client):
    resp = await client.put(f"{BASE}/name/Nobody/age", json={"age": 33})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_id_is_404(client):
    resp = await client.delete(f"{BASE}/65f0c0ffee0000000000abcd")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_mary_removes_only_exact_matches(client):
    people = [
        {"name": "Mary"},
        {"name": "Mary", "age": 50},
        {"name": "Maryanne"},
        {"name": "mary"},
        {"name": "John"},
    ]
    await client.post(f"{BASE}/bulk", json=people)

    resp = await client.delete(f"{BASE}/name/mary")
    assert resp.status_code == 200
    assert resp.json() == {"acknowledged": True, "deletedCount": 2}

    remaining = [p["name"] for p in (await client.get(BASE)).json()]
    assert remaining == ["Maryanne", "mary", "John"]


@pytest.mark.asyncio
async def test_delete_mary_with_nobody_named_mary(client):
    resp = await client.delete(f"{BASE}/name/mary")
    assert resp.status_code == 200
    assert resp.json()["deletedCount"] == 0


@pytest.mark.asyncio
async def test_healthcheck(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}

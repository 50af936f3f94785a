"""Tests for catalog and calculator session endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from nutrition_calculator.api.app import create_app


def _start_session(client: TestClient) -> str:
    response = client.post("/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_foods_sorted_and_filtered(container) -> None:
    client = TestClient(create_app(container))

    listing = client.get("/foods").json()
    filtered = client.get("/foods", params={"query": "bee"}).json()

    assert [food["name"] for food in listing["foods"]] == ["apple", "Lean beef", "Oats"]
    assert [food["name"] for food in filtered["foods"]] == ["Lean beef"]
    assert filtered["foods"][0]["per_100g"]["calories"] == 120


def test_list_foods_rejects_non_positive_limit(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/foods", params={"limit": 0})

    assert response.status_code == 422


def test_get_food_by_name(container) -> None:
    client = TestClient(create_app(container))

    found = client.get("/foods/Lean beef")
    missing = client.get("/foods/Pizza")

    assert found.status_code == 200
    assert found.json()["per_100g"]["protein"] == 20
    assert missing.status_code == 404


def test_full_calculator_flow(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    added = client.post(f"/sessions/{session_id}/entries")
    assert added.status_code == 201
    entry_id = added.json()["entries"][0]["id"]

    client.put(
        f"/sessions/{session_id}/entries/{entry_id}/food",
        json={"food_name": "Lean beef"},
    )
    response = client.put(
        f"/sessions/{session_id}/entries/{entry_id}/quantity",
        json={"quantity": 250},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["entries"][0]["food_name"] == "Lean beef"
    assert data["entries"][0]["quantity"] == 250
    assert data["entries"][0]["nutrients"]["fat"] == 12.5
    assert data["totals"] == {
        "protein": 50.0,
        "carbohydrates": 0.0,
        "fat": 12.5,
        "saturated_fat": 2.5,
        "calories": 300.0,
        "fiber": 0.0,
        "sugar": 0.0,
        "salt": 0.25,
    }


def test_quantity_is_clamped(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)
    entry_id = client.post(f"/sessions/{session_id}/entries").json()["entries"][0]["id"]

    low = client.put(
        f"/sessions/{session_id}/entries/{entry_id}/quantity", json={"quantity": -10}
    )
    high = client.put(
        f"/sessions/{session_id}/entries/{entry_id}/quantity", json={"quantity": 6000}
    )

    assert low.json()["entries"][0]["quantity"] == 0
    assert high.json()["entries"][0]["quantity"] == 5000


def test_clearing_food_with_null(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)
    entry_id = client.post(f"/sessions/{session_id}/entries").json()["entries"][0]["id"]
    base = f"/sessions/{session_id}/entries/{entry_id}"
    client.put(f"{base}/food", json={"food_name": "Oats"})
    client.put(f"{base}/quantity", json={"quantity": 100})

    response = client.put(f"{base}/food", json={"food_name": None})

    data = response.json()
    assert data["entries"][0]["food_name"] is None
    assert data["entries"][0]["quantity"] == 100
    assert data["totals"]["calories"] == 0


def test_unknown_food_or_entry_returns_404(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)
    entry_id = client.post(f"/sessions/{session_id}/entries").json()["entries"][0]["id"]

    unknown_food = client.put(
        f"/sessions/{session_id}/entries/{entry_id}/food",
        json={"food_name": "Pizza"},
    )
    unknown_entry = client.put(
        f"/sessions/{session_id}/entries/999/quantity", json={"quantity": 10}
    )

    assert unknown_food.status_code == 404
    assert unknown_entry.status_code == 404


def test_remove_entry_and_unknown_remove_is_noop(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)
    client.post(f"/sessions/{session_id}/entries")
    state = client.post(f"/sessions/{session_id}/entries").json()
    first_id, second_id = (entry["id"] for entry in state["entries"])

    removed = client.delete(f"/sessions/{session_id}/entries/{first_id}")
    noop = client.delete(f"/sessions/{session_id}/entries/{first_id}")
    readded = client.post(f"/sessions/{session_id}/entries")

    assert [entry["id"] for entry in removed.json()["entries"]] == [second_id]
    assert noop.status_code == 200
    assert [entry["id"] for entry in noop.json()["entries"]] == [second_id]
    ids = [entry["id"] for entry in readded.json()["entries"]]
    assert ids[0] == second_id
    assert ids[1] not in {first_id, second_id}


def test_unknown_session_returns_404(container) -> None:
    client = TestClient(create_app(container))
    missing = uuid4()

    assert client.get(f"/sessions/{missing}").status_code == 404
    assert client.post(f"/sessions/{missing}/entries").status_code == 404
    assert client.delete(f"/sessions/{missing}").status_code == 404


def test_delete_session(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)

    response = client.delete(f"/sessions/{session_id}")

    assert response.status_code == 204
    assert client.get(f"/sessions/{session_id}").status_code == 404


def test_invalid_quantity_payload_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)
    entry_id = client.post(f"/sessions/{session_id}/entries").json()["entries"][0]["id"]

    response = client.put(
        f"/sessions/{session_id}/entries/{entry_id}/quantity",
        json={"quantity": "lots"},
    )

    assert response.status_code == 422


def test_overflowing_quantity_is_clamped_not_rejected(container) -> None:
    client = TestClient(create_app(container))
    session_id = _start_session(client)
    entry_id = client.post(f"/sessions/{session_id}/entries").json()["entries"][0]["id"]

    response = client.put(
        f"/sessions/{session_id}/entries/{entry_id}/quantity",
        content=b'{"quantity": 1e400}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json()["entries"][0]["quantity"] == 5000


def test_live_sessions_stay_bounded_across_page_views(container) -> None:
    client = TestClient(create_app(container))
    limit = container.settings.max_sessions

    for _ in range(limit * 3):
        client.get("/calculator")
        _start_session(client)

    assert len(container.session_service) == limit

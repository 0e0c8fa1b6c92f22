import pytest


@pytest.fixture
def alice(register):
    register("alice", "pw")
    return "alice"


def test_save_list_and_remove(client, alice):
    response = client.post("/api/save-car", json={"username": alice, "vehicleID": 2})
    assert response.status_code == 201
    assert response.json() == {"message": "Car saved successfully"}

    response = client.get("/api/saved-cars", params={"username": alice})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "success"
    assert [row["vehicleID"] for row in body["data"]] == [2]
    assert body["data"][0]["model"] == "Camry"

    response = client.post("/api/remove-saved-car", json={"username": alice, "vehicleID": 2})
    assert response.status_code == 200
    assert response.json() == {"message": "Car removed successfully"}

    assert client.get("/api/saved-cars", params={"username": alice}).json()["data"] == []


def test_saving_twice_is_rejected(client, alice):
    assert client.post("/api/save-car", json={"username": alice, "vehicleID": 1}).status_code == 201

    response = client.post("/api/save-car", json={"username": alice, "vehicleID": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "Car is already saved."}


def test_removing_twice_reports_not_found(client, alice):
    client.post("/api/save-car", json={"username": alice, "vehicleID": 3})

    assert client.post("/api/remove-saved-car", json={"username": alice, "vehicleID": 3}).status_code == 200

    response = client.post("/api/remove-saved-car", json={"username": alice, "vehicleID": 3})
    assert response.status_code == 404
    assert response.json() == {"error": "Car not found in saved list"}


def test_lists_are_per_user(client, register, alice):
    register("bob", "pw")
    client.post("/api/save-car", json={"username": alice, "vehicleID": 1})
    client.post("/api/save-car", json={"username": "bob", "vehicleID": 3})

    alice_ids = [row["vehicleID"] for row in client.get("/api/saved-cars", params={"username": alice}).json()["data"]]
    bob_ids = [row["vehicleID"] for row in client.get("/api/saved-cars", params={"username": "bob"}).json()["data"]]
    assert alice_ids == [1]
    assert bob_ids == [3]


def test_vehicle_id_as_numeric_string_is_accepted(client, alice):
    response = client.post("/api/save-car", json={"username": alice, "vehicleID": "2"})
    assert response.status_code == 201


def test_unknown_vehicle_is_a_storage_error(client, alice):
    response = client.post("/api/save-car", json={"username": alice, "vehicleID": 999})
    assert response.status_code == 500
    assert response.json()["error"] == "Database error"
    assert "999" in response.json()["details"]


@pytest.mark.parametrize("path", ["/api/save-car", "/api/remove-saved-car"])
@pytest.mark.parametrize("body", [{}, {"username": "alice"}, {"vehicleID": 1}])
def test_missing_fields(client, path, body):
    response = client.post(path, json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing username or vehicleID"}


def test_non_numeric_vehicle_id(client):
    response = client.post("/api/save-car", json={"username": "alice", "vehicleID": "civic"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


@pytest.mark.parametrize("params", [{}, {"username": ""}])
def test_list_requires_username(client, params):
    response = client.get("/api/saved-cars", params=params)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing username in request"}


def test_storage_failures(broken_client):
    response = broken_client.post("/api/save-car", json={"username": "alice", "vehicleID": 1})
    assert response.status_code == 500
    assert response.json() == {"error": "Database error", "details": "connection reset by peer"}

    response = broken_client.post("/api/remove-saved-car", json={"username": "alice", "vehicleID": 1})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to remove car", "details": "connection reset by peer"}

    response = broken_client.get("/api/saved-cars", params={"username": "alice"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to retrieve saved cars", "details": "connection reset by peer"}


@pytest.mark.parametrize("path", ["/api/save-car", "/api/remove-saved-car"])
@pytest.mark.parametrize("vehicle_id", [2**31, -(2**31) - 1, 10**30])
def test_vehicle_id_outside_column_range(client, path, vehicle_id):
    response = client.post(path, json={"username": "alice", "vehicleID": vehicle_id})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_vehicle_id_zero_is_a_real_id(client, store, alice):
    store.vehicles[0] = {"vehicleID": 0, "username": "dealer", "price": 1, "model": "Kart"}

    response = client.post("/api/remove-saved-car", json={"username": alice, "vehicleID": 0})
    assert response.status_code == 404

    assert client.post("/api/save-car", json={"username": alice, "vehicleID": 0}).status_code == 201
    rows = client.get("/api/saved-cars", params={"username": alice}).json()["data"]
    assert [row["vehicleID"] for row in rows] == [0]
    assert client.post("/api/remove-saved-car", json={"username": alice, "vehicleID": 0}).status_code == 200

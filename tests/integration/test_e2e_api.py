import time
import pytest
from fastapi.testclient import TestClient
from pokedex.main import app
from pokedex.dependencies import (
    get_auth_state_holder,
    get_details_state_holder,
    get_list_state_holder,
)
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.services import AuthStateHolder, PokemonDetailsStateHolder, PokemonListStateHolder

# Mock data for the external API
MOCK_LIST_SUCCESS = {
    "results": [
        {"name": "bulbasaur"},
        {"name": "charmander"},
        {"name": "squirtle"},
    ]
}

MOCK_BULBASAUR = {
    "id": 1,
    "name": "bulbasaur",
    "height": 7,
    "weight": 69,
    "types": [{"type": {"name": "grass"}}, {"type": {"name": "poison"}}],
    "abilities": [{"ability": {"name": "overgrow"}}, {"ability": {"name": "chlorophyll"}}],
    "sprites": {"other": {"home": {"front_default": "https://example.com/1.png"}}}
}


def wait_for_settled(client, path, attempts=50):
    """Polls `path` until the background fetch has published its outcome."""
    for _ in range(attempts):
        response = client.get(path)
        if response.json()["status"] != "LOADING":
            return response
        time.sleep(0.02)
    return response


@pytest.fixture(scope="function")
def test_client():
    """
    Provides a TestClient whose state holders are fresh for each test.
    The holders use a real PokeAPIClient, so outbound calls go through httpx_mock.
    """
    poke_client = PokeAPIClient()
    list_holder = PokemonListStateHolder(poke_client=poke_client)
    details_holder = PokemonDetailsStateHolder(poke_client=poke_client)
    auth_holder = AuthStateHolder()

    # Override the dependencies so no process-wide singletons leak between tests
    app.dependency_overrides[get_list_state_holder] = lambda: list_holder
    app.dependency_overrides[get_details_state_holder] = lambda: details_holder
    app.dependency_overrides[get_auth_state_holder] = lambda: auth_holder

    with TestClient(app) as client:
        yield client
        # Close the connection pool on the loop that used it
        client.portal.call(poke_client.close)

    # Cleanup: Clear dependency overrides after test
    app.dependency_overrides.clear()


def test_e2e_login_success(test_client):
    response = test_client.post("/auth/login", json={"username": "ash", "password": "pikachu"})

    assert response.status_code == 200
    assert response.json()["status"] == "SUCCESS"
    assert response.json()["user"] == {"username": "ash"}
    assert response.json()["error"] is None

    # The snapshot stays current until the next trigger
    assert test_client.get("/auth").json()["status"] == "SUCCESS"


def test_e2e_login_missing_password(test_client):
    response = test_client.post("/auth/login", json={"username": "ash", "password": ""})

    assert response.status_code == 200
    assert response.json()["status"] == "ERROR"
    assert response.json()["error"] == "Username and password required"


def test_e2e_initial_list_state(test_client):
    response = test_client.get("/pokemon")

    assert response.status_code == 200
    assert response.json() == {"pokemon_list": [], "status": "INIT", "error": None}


@pytest.mark.httpx_mock
def test_e2e_load_pokemon_list(httpx_mock, test_client):
    """
    E2E test for the home screen: trigger the load, then read the published state.
    """
    # Arrange Mocks
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?limit=20",
        json=MOCK_LIST_SUCCESS,
        status_code=200
    )

    # Act: the trigger answers immediately with the LOADING snapshot
    trigger = test_client.post("/pokemon/load")
    assert trigger.status_code == 202
    assert trigger.json()["status"] == "LOADING"

    response = wait_for_settled(test_client, "/pokemon")

    # Assert
    assert response.status_code == 200
    assert response.json()["status"] == "SUCCESS"
    assert [p["name"] for p in response.json()["pokemon_list"]] == ["Bulbasaur", "Charmander", "Squirtle"]


@pytest.mark.httpx_mock
def test_e2e_load_pokemon_list_upstream_failure(httpx_mock, test_client):
    """A PokeAPI 500 surfaces as an ERROR snapshot, never as a failed request."""
    httpx_mock.add_response(url="https://pokeapi.co/api/v2/pokemon?limit=20", status_code=500)

    assert test_client.post("/pokemon/load").status_code == 202
    response = wait_for_settled(test_client, "/pokemon")

    assert response.status_code == 200
    assert response.json()["status"] == "ERROR"
    assert "500" in response.json()["error"]


@pytest.mark.httpx_mock
def test_e2e_load_pokemon_details_with_about_section(httpx_mock, test_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/bulbasaur",
        json=MOCK_BULBASAUR,
        status_code=200
    )

    trigger = test_client.post("/pokemon/Bulbasaur/load")
    assert trigger.status_code == 202

    response = wait_for_settled(test_client, "/pokemon/details")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "SUCCESS"
    assert body["details"]["name"] == "bulbasaur"
    assert body["details"]["types"] == ["grass", "poison"]
    assert body["about"] == {
        "height": "2'3.6\" (0.70 m)",
        "weight": "15.2 lbs (6.9 kg)",
        "abilities": "Overgrow, Chlorophyll",
    }


def test_e2e_details_before_any_load(test_client):
    response = test_client.get("/pokemon/details")

    assert response.status_code == 200
    assert response.json()["status"] == "INIT"
    assert response.json()["details"] is None
    assert response.json()["about"]["height"] == "0'0.0\" (0.00 m)"

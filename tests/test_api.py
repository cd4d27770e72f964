import pytest

ARTIST = {"name": "Test Artist", "bio": "Test Bio", "genre": "Indie"}


def _create_artist(client, **overrides):
    body = {**ARTIST, **overrides}
    response = client.post("/artists", json=body)
    assert response.status_code == 201
    return response.json()


def _create_release(client, artist_id, genre="Rock", status="published"):
    response = client.post(
        "/releases",
        json={
            "title": "Test Release",
            "release_date": "2025-03-15",
            "status": status,
            "genre": genre,
            "artist_id": artist_id,
        },
    )
    assert response.status_code == 201
    return response.json()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_artist_requires_all_fields(client):
    response = client.post("/artists", json={"name": "Test"})
    assert response.status_code == 400
    assert response.json()["error"] == "All fields (name, bio, genre) are required"
    assert client.get("/artists").json() == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": "not json", "headers": {"Content-Type": "application/json"}},
        {"json": {"name": 5, "bio": "b", "genre": "g"}},
    ],
)
def test_malformed_artist_body_is_a_client_error(client, kwargs):
    response = client.post("/artists", **kwargs)
    assert response.status_code == 400


def test_create_artist(client):
    data = _create_artist(client)
    assert data["id"].startswith("artist_")
    assert data["id"] == "artist_1"
    assert data["name"] == ARTIST["name"]
    assert data["bio"] == ARTIST["bio"]
    assert data["genre"] == ARTIST["genre"]


def test_list_artists_case_insensitive(client):
    created = _create_artist(client)
    _create_artist(client, name="Someone Else", genre="Jazz")

    everyone = client.get("/artists").json()
    assert len(everyone) == 2
    assert created in everyone

    by_genre = client.get("/artists", params={"genre": "INDIE"}).json()
    assert [a["id"] for a in by_genre] == [created["id"]]

    by_name = client.get("/artists", params={"name": "TEST ARTIST"}).json()
    assert [a["id"] for a in by_name] == [created["id"]]


def test_artist_filters_combine_with_and(client):
    _create_artist(client)
    _create_artist(client, name="Someone Else")

    response = client.get("/artists", params={"genre": "indie", "name": "someone else"})
    assert [a["name"] for a in response.json()] == ["Someone Else"]

    response = client.get("/artists", params={"genre": "jazz", "name": "someone else"})
    assert response.json() == []


def test_create_release_requires_all_fields(client):
    response = client.post("/releases", json={"title": "Test"})
    assert response.status_code == 400


def test_create_release_for_unknown_artist(client):
    response = client.post(
        "/releases",
        json={
            "title": "Test Release",
            "release_date": "2025-03-15",
            "status": "published",
            "genre": "Rock",
            "artist_id": "non_existent_artist_id",
        },
    )
    assert response.status_code == 404
    assert "non_existent_artist_id" in response.json()["error"]
    assert client.get("/releases").json() == []


def test_create_release(client):
    artist = _create_artist(client)
    data = _create_release(client, artist["id"])
    assert data == {
        "id": "release_1",
        "title": "Test Release",
        "release_date": "2025-03-15",
        "status": "published",
        "genre": "Rock",
        "artist_id": artist["id"],
    }


def test_release_filters(client):
    a = _create_artist(client)["id"]
    b = _create_artist(client, name="Test Artist2", genre="Soundtrack")["id"]
    rock = _create_release(client, a, genre="Rock", status="published")
    jazz = _create_release(client, a, genre="Jazz", status="unreleased")
    _create_release(client, b, genre="Rock", status="published")

    def ids(**params):
        response = client.get("/releases", params=params)
        assert response.status_code == 200
        return sorted(r["id"] for r in response.json())

    assert len(ids()) == 3
    assert ids(artist_id=a) == sorted([rock["id"], jazz["id"]])
    assert len(ids(genre="Rock")) == 2
    assert ids(artist_id=a, genre="rock") == [rock["id"]]
    assert ids(artist_id=a, genre="jazz") == [jazz["id"]]
    assert ids(artist_id=a, status="published") == [rock["id"]]
    # artist_id is an exact match
    assert ids(artist_id=a.upper()) == []


def test_ten_follows_nine(client):
    created = [_create_artist(client)["id"] for _ in range(10)]
    assert created[-2:] == ["artist_9", "artist_10"]


def test_cleanup_then_setup(client):
    _create_artist(client)

    assert client.post("/test-cleanup").json() == {"success": True}

    response = client.get("/artists")
    assert response.status_code == 500
    assert response.json()["error"] == "Unexpected error"
    assert "info" in response.json()

    assert client.post("/test-setup").json() == {"success": True}
    assert client.get("/artists").json() == []
    assert _create_artist(client)["id"] == "artist_1"


def test_release_routes_report_store_errors(client):
    artist = _create_artist(client)
    client.post("/test-cleanup")

    response = client.get("/releases", params={"genre": "rock"})
    assert response.status_code == 500
    assert response.json()["error"] == "Unexpected error"
    assert response.json()["info"]

    response = client.post(
        "/releases",
        json={
            "title": "Test Release",
            "release_date": "2025-03-15",
            "status": "published",
            "genre": "Rock",
            "artist_id": artist["id"],
        },
    )
    assert response.status_code == 500
    assert response.json()["error"] == "Unexpected error"
    assert "info" in response.json()

import pytest

from shopcart.adapters.password_hasher import BcryptPasswordHasher
from shopcart.exceptions import Unauthorized
from shopcart.services.session_service import SessionStore, extract_token


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Bearer abc123", "abc123"),
        ("bearer abc123", "abc123"),
        ("abc123", "abc123"),
        ("  Bearer   abc123  ", "abc123"),
    ],
)
def test_extract_token(header, expected):
    assert extract_token(header) == expected


@pytest.mark.parametrize("header", [None, "", "   ", "Bearer ", "Bearer    "])
def test_extract_token_missing(header):
    with pytest.raises(Unauthorized):
        extract_token(header)


def test_issue_replaces_previous_token(db, make_user):
    user = make_user()
    store = SessionStore(db)
    first = store.issue(user.id)
    db.commit()
    second = store.issue(user.id)
    db.commit()

    assert first != second
    assert len(second) == 64
    assert store.authenticate(second) == user.id
    with pytest.raises(Unauthorized):
        store.authenticate(first)


def test_authenticate_rejects_empty_and_unknown(db, make_user):
    make_user()
    store = SessionStore(db)
    with pytest.raises(Unauthorized):
        store.authenticate("")
    with pytest.raises(Unauthorized):
        store.authenticate(None)
    with pytest.raises(Unauthorized):
        store.authenticate("f" * 64)


def test_token_length_follows_configured_bytes(db, make_user):
    user = make_user()
    token = SessionStore(db, token_bytes=16).issue(user.id)
    assert len(token) == 32


def test_authenticated_routes_require_header(client):
    res = client.get("/orders")
    assert res.status_code == 401
    assert res.json()["detail"] == "Authorization header required"


def test_bare_token_is_accepted(client, login):
    headers = login()
    bare = headers["Authorization"].split(" ", 1)[1]
    assert client.get("/orders", headers={"Authorization": bare}).status_code == 200


def test_password_hasher_verify():
    hasher = BcryptPasswordHasher(rounds=4)
    digest = hasher.hash("correct horse")
    assert digest != "correct horse"
    assert hasher.verify(digest, "correct horse")
    assert not hasher.verify(digest, "battery staple")
    assert not hasher.verify("not-a-bcrypt-hash", "correct horse")
    assert not hasher.verify("", "correct horse")

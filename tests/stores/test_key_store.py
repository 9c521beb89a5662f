from pytest import MonkeyPatch, raises

from claimmint.exceptions import InvalidTokenError, TokenConfigurationError
from claimmint.stores import KeyStore, generate_private_key


def test_sign_and_verify_raw_payload(key_store: KeyStore) -> None:
    payload = b'{"a":1,"a":2}'
    token = key_store.sign(payload)
    assert key_store.verify(token) == payload


def test_generate_key_store() -> None:
    key_store = KeyStore.generate("2025-08-rot-1")
    assert key_store.active_key_id == "2025-08-rot-1"
    public_keys = key_store.export_public_keys()
    assert list(public_keys) == ["2025-08-rot-1"]
    assert public_keys["2025-08-rot-1"].startswith("-----BEGIN PUBLIC KEY-----")
    assert key_store.verify(key_store.sign(b'{"sub":"s"}')) == b'{"sub":"s"}'


def test_generated_keys_differ() -> None:
    assert generate_private_key() != generate_private_key()


def test_key_rotation(private_key: str) -> None:
    """Tokens signed with a previous key still verify after rotation."""
    previous = generate_private_key()
    old_store = KeyStore({"2025-05-rot-0": previous}, active_key_id="2025-05-rot-0")
    token = old_store.sign(b'{"sub":"user@gmail.com"}')

    rotated = KeyStore(
        {"2025-05-rot-0": previous, "2025-08-rot-1": private_key},
        active_key_id="2025-08-rot-1",
    )
    assert rotated.verify(token) == b'{"sub":"user@gmail.com"}'
    assert set(rotated.export_public_keys()) == {"2025-05-rot-0", "2025-08-rot-1"}
    assert (
        rotated.export_public_keys()["2025-05-rot-0"]
        == old_store.export_public_keys()["2025-05-rot-0"]
    )


def test_unknown_key_id(key_store: KeyStore) -> None:
    token = KeyStore.generate("unknown").sign(b'{"sub":"user@gmail.com"}')
    with raises(InvalidTokenError):
        key_store.verify(token)


def test_malformed_token(key_store: KeyStore) -> None:
    with raises(InvalidTokenError):
        key_store.verify("not-a-token")


def test_load_from_environ(monkeypatch: MonkeyPatch, private_key: str) -> None:
    monkeypatch.setenv("TOKEN_ACTIVE_KEY_ID", "2025-08-rot-1")
    monkeypatch.setenv("TOKEN_PRIVATE_KEY_2025-08-rot-1", private_key)

    key_store = KeyStore.from_environ()

    assert key_store.active_key_id == "2025-08-rot-1"


def test_missing_active_key(monkeypatch: MonkeyPatch, private_key: str) -> None:
    monkeypatch.delenv("TOKEN_ACTIVE_KEY_ID", raising=False)
    with raises(TokenConfigurationError):
        KeyStore({"2025-08-rot-1": private_key})

    with raises(TokenConfigurationError):
        KeyStore({"2025-08-rot-1": private_key}, active_key_id="other")


def test_invalid_private_key() -> None:
    with raises(TokenConfigurationError):
        KeyStore({"broken": "not a pem"}, active_key_id="broken")

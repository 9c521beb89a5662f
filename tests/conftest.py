from datetime import datetime, timedelta, timezone

from dotenv import load_dotenv
from pytest import fixture

from claimmint.clock import FixedClock
from claimmint.services import TokenService
from claimmint.settings import TokenSettings
from claimmint.stores import KeyStore, generate_private_key

# Load all env variables.
load_dotenv()

NOW = datetime(2025, 8, 1, 12, 0, 0, tzinfo=timezone.utc)
ACTIVE_KEY_ID = "2025-08-rot-1"


@fixture
def clock() -> FixedClock:
    """Clock frozen at NOW."""
    return FixedClock(NOW)


@fixture(scope="session")
def private_key() -> str:
    """Generate one Ed25519 private key for the test session."""
    return generate_private_key()


@fixture
def key_store(private_key: str) -> KeyStore:
    """Key store holding the session key as the active key."""
    return KeyStore(
        {ACTIVE_KEY_ID: private_key},
        active_key_id=ACTIVE_KEY_ID,
    )


@fixture
def token_settings() -> TokenSettings:
    return TokenSettings(
        issuer="mytest.service",
        audience="user",
        max_age=timedelta(minutes=5),
    )


@fixture
def token_service(
    key_store: KeyStore,
    token_settings: TokenSettings,
    clock: FixedClock,
) -> TokenService:
    """Create token service instance and return it."""
    return TokenService(key_store, token_settings, clock=clock)

from __future__ import annotations

from os import environ

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519
from jwt import InvalidTokenError
from jwt.api_jws import PyJWS

from claimmint.exceptions import TokenConfigurationError

ALGORITHM = "EdDSA"
PRIVATE_KEY_PREFIX = "TOKEN_PRIVATE_KEY_"


def generate_private_key() -> str:
    """Return a new PEM-encoded (PKCS8) Ed25519 private key for a KeyStore entry."""
    return (
        ed25519.Ed25519PrivateKey.generate()
        .private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        .decode()
    )


class KeyStore:
    """
    Manages Ed25519 private keys and signs raw claim payloads with the
    active one. Verification looks the key up by the "kid" header, which
    allows keys to be rotated.

    In production, keys should be loaded from a secure source
    (e.g., KMS/HSM or sealed config), never hard-coded.
    """

    def __init__(
        self,
        private_key_map: dict[str, str],
        active_key_id: str | None = None,
    ) -> None:
        """
        private_key_map: { key_id: PEM-encoded Ed25519 private key (PKCS8) }
        active_key_id defaults to the TOKEN_ACTIVE_KEY_ID environment variable.
        """
        self._private_keys: dict[str, ed25519.Ed25519PrivateKey] = {}
        self._public_keys_pem: dict[str, bytes] = {}
        self._jws = PyJWS(algorithms=[ALGORITHM])

        for key_id, pem in private_key_map.items():
            try:
                private_key = serialization.load_pem_private_key(
                    pem.encode(),
                    password=None,
                )
            except ValueError as error:
                raise TokenConfigurationError(
                    f"Key ID {key_id} is not a valid PEM private key"
                ) from error
            if not isinstance(private_key, ed25519.Ed25519PrivateKey):
                raise TokenConfigurationError(
                    f"Key ID {key_id} is not an Ed25519 private key"
                )
            self._private_keys[key_id] = private_key
            self._public_keys_pem[key_id] = private_key.public_key().public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )

        active = active_key_id or environ.get("TOKEN_ACTIVE_KEY_ID")
        if not active:
            raise TokenConfigurationError(
                "The TOKEN_ACTIVE_KEY_ID environment variable is missing. "
                "You must set it to the identifier of your active private key, for example:\n\n"
                "    TOKEN_ACTIVE_KEY_ID = '2025-08-rot-1'"
            )

        if active not in self._private_keys:
            raise TokenConfigurationError(
                f"The active key ID is set to '{active}', but no matching "
                f"{PRIVATE_KEY_PREFIX}{active} private key was found. "
                "Make sure both are defined, for example:\n\n"
                "    TOKEN_ACTIVE_KEY_ID = '2025-08-rot-1'\n"
                "    TOKEN_PRIVATE_KEY_2025-08-rot-1 = '<your-private-key>'"
            )
        self._active_key_id = active

    @classmethod
    def from_environ(cls) -> KeyStore:
        """
        Load keys from the environment:
        - TOKEN_ACTIVE_KEY_ID = "2025-08-rot-1"
        - TOKEN_PRIVATE_KEY_2025-08-rot-1 = "PEM-encoded Ed25519 private key"
        - TOKEN_PRIVATE_KEY_2025-05-rot-0 = "previous key"
        """
        private_keys: dict[str, str] = {}
        for key, value in environ.items():
            if key.startswith(PRIVATE_KEY_PREFIX):
                private_keys[key[len(PRIVATE_KEY_PREFIX) :]] = value
        return cls(private_keys)

    @classmethod
    def generate(cls, key_id: str) -> KeyStore:
        """Create a store holding one freshly generated key, active under `key_id`."""
        return cls({key_id: generate_private_key()}, active_key_id=key_id)

    @property
    def active_key_id(self) -> str:
        return self._active_key_id

    def sign(self, payload: bytes) -> str:
        """Sign an encoded claim payload with the active private key."""
        key_id = self._active_key_id
        headers = {"kid": key_id, "typ": "JWT", "alg": ALGORITHM}
        return self._jws.encode(
            payload,
            self._private_keys[key_id],
            algorithm=ALGORITHM,
            headers=headers,
        )

    def verify(self, token: str) -> bytes:
        """Check the token signature and return its raw payload."""
        try:
            header = self._jws.get_unverified_header(token)
        except InvalidTokenError as error:
            raise InvalidTokenError(f"Invalid header: {error}") from error
        key_id = header.get("kid")
        if not key_id:
            raise InvalidTokenError("Missing 'kid'")
        return self._jws.decode(
            token,
            key=self.get_public_key(key_id),
            algorithms=[ALGORITHM],
        )

    def get_public_key(self, key_id: str) -> bytes:
        """Retrieve the PEM-encoded public key for a given key ID."""
        try:
            return self._public_keys_pem[key_id]
        except KeyError:
            raise InvalidTokenError("Unknown key id")

    def export_public_keys(self) -> dict[str, str]:
        """Expose public keys for verification by third-party services."""
        return {key_id: pem.decode() for key_id, pem in self._public_keys_pem.items()}

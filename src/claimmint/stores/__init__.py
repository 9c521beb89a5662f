from ._key_store import ALGORITHM, KeyStore, generate_private_key

__all__ = ["ALGORITHM", "KeyStore", "generate_private_key"]

"""Access to decrypted password store content."""

from .pass_store import PassStore, SecretStore

__all__ = ["PassStore", "SecretStore"]

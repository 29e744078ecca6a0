"""Pluggable credential hashing and verification.

``plaintext`` keeps the legacy byte-for-byte comparison for data that was
stored unhashed; ``salted_sha256`` stores ``<salt>$<hexdigest>``.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Protocol


class CredentialVerifier(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, stored: str) -> bool: ...


class PlaintextVerifier:
    def hash(self, password: str) -> str:
        return password

    def verify(self, password: str, stored: str) -> bool:
        return hmac.compare_digest(password.encode(), stored.encode())


class SaltedSha256Verifier:
    def hash(self, password: str, salt: str | None = None) -> str:
        salt = salt or secrets.token_hex(8)
        digest = hashlib.sha256((salt + password).encode()).hexdigest()
        return f"{salt}${digest}"

    def verify(self, password: str, stored: str) -> bool:
        salt, sep, _ = stored.partition("$")
        if not sep:
            return False
        return hmac.compare_digest(self.hash(password, salt), stored)


_VERIFIERS: dict[str, type] = {
    "plaintext": PlaintextVerifier,
    "salted_sha256": SaltedSha256Verifier,
}


def get_verifier(scheme: str) -> CredentialVerifier:
    try:
        return _VERIFIERS[scheme]()
    except KeyError:
        raise ValueError(f"Unknown credential scheme '{scheme}'") from None

from __future__ import annotations

import logging
from typing import Optional

from ports.storage import KeyValueStorePort


CREDENTIAL_KEY = "serpapi_key"


class CredentialManager:
    """Holds the SerpAPI key in memory, backed by a durable key-value slot."""

    def __init__(self, store: KeyValueStorePort, key_name: str = CREDENTIAL_KEY):
        self.store = store
        self.key_name = key_name
        self._cached: Optional[str] = None

    def set_credential(self, key: str) -> None:
        self._cached = key
        self.store.set(self.key_name, key)
        logging.info("API key saved", extra={"step": "credential", "status": "saved"})

    def get_credential(self) -> Optional[str]:
        if not self._cached:
            self._cached = self.store.get(self.key_name) or None
        return self._cached


def mask_credential(key: Optional[str]) -> str:
    if not key:
        return ""
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}{'*' * (len(key) - 8)}{key[-4:]}"

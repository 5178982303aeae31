from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorePort(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

from .source import SearchSourcePort
from .storage import KeyValueStorePort

__all__ = [
    "SearchSourcePort",
    "KeyValueStorePort",
]

"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
Currently implements local files as the backend, but designed to be swappable.
"""

from moneymate.services.storage.interface import (
    AuditStorageInterface,
    ByteStoreInterface,
    NotFoundError,
    StorageAccessError,
    StorageError,
)
from moneymate.services.storage.codec import (
    CodecError,
    decode_expenses,
    decode_loans,
    encode_expenses,
    encode_loans,
)
from moneymate.services.storage.local_files import LocalFileByteStore
from moneymate.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryByteStore,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "ByteStoreInterface",
    # Exceptions
    "CodecError",
    "NotFoundError",
    "StorageAccessError",
    "StorageError",
    # Codec
    "decode_expenses",
    "decode_loans",
    "encode_expenses",
    "encode_loans",
    # Implementations
    "InMemoryAuditStorage",
    "InMemoryByteStore",
    "LocalFileByteStore",
]

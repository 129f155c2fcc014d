"""Services package."""

from moneymate.services.storage import (
    AuditStorageInterface,
    ByteStoreInterface,
    CodecError,
    InMemoryAuditStorage,
    InMemoryByteStore,
    LocalFileByteStore,
    NotFoundError,
    StorageAccessError,
    StorageError,
)

__all__ = [
    "AuditStorageInterface",
    "ByteStoreInterface",
    "CodecError",
    "InMemoryAuditStorage",
    "InMemoryByteStore",
    "LocalFileByteStore",
    "NotFoundError",
    "StorageAccessError",
    "StorageError",
]

"""
Abstract Storage Interface

DESIGN DECISION: The ledger only ever needs to read and overwrite a named
blob of bytes. We define that as an abstract interface so that we can:
1. Keep files in an application-private directory in production
2. Use in-memory storage for testing
3. Swap in another backend later without touching ledger logic

The interface is intentionally tiny - no queries, no partial updates.
Every save rewrites the whole resource.
"""

from abc import ABC, abstractmethod

from moneymate.models.audit import AuditEvent


class ByteStoreInterface(ABC):
    """
    Abstract interface for a durable store of named byte blobs.

    Any storage implementation must implement these methods.
    Operations are synchronous; callers run them inline.
    """

    @abstractmethod
    def read(self, name: str) -> bytes:
        """
        Return the full contents of a named resource.

        Args:
            name: Resource name (e.g., "loans.json")

        Returns:
            The stored bytes

        Raises:
            NotFoundError: If nothing has been stored under this name
            StorageAccessError: If the resource exists but cannot be read
        """
        pass

    @abstractmethod
    def write(self, name: str, data: bytes) -> None:
        """
        Overwrite a named resource with the given bytes.

        Args:
            name: Resource name
            data: Complete new contents

        Raises:
            StorageAccessError: If the underlying location is inaccessible
        """
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether anything is stored under this name."""
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """
        Remove a named resource. Removing an absent resource is a no-op.

        Raises:
            StorageAccessError: If the resource exists but cannot be removed
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Args:
            event: The audit event to log

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Args:
            limit: Maximum number of events to return

        Returns:
            List of recent events (newest first)
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Nothing stored under the requested name."""
    pass


class StorageAccessError(StorageError):
    """The storage location exists but could not be read or written."""
    pass

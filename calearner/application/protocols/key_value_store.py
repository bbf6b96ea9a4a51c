from typing import Protocol


class KeyValueStoreProtocol(Protocol):
    """Protocol for the synchronous key-value persistence adapter."""

    def get(self, key: str) -> str | None:
        """
        Read a stored value.

        Args:
            key: Fully namespaced key

        Returns:
            The stored string, or None when absent
        """
        ...

    def set(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Raises:
            StorageError: If the backend rejects the write
        """
        ...

    def remove(self, key: str) -> None:
        """Delete a value. Removing an absent key is not an error."""
        ...

"""
Abstract base class for name-service backends
"""

from abc import ABC, abstractmethod


class NameService(ABC):
    """Abstract base class for forward and reverse name resolution"""

    name = "base"

    @abstractmethod
    def resolve_name(self, name: str) -> list[str]:
        """
        Resolve a hostname to addresses.

        Args:
            name: Hostname (or any text the backend accepts)

        Returns:
            Address strings in the order the backend returned them

        Raises:
            NameServiceError: If the name cannot be resolved
        """
        pass

    @abstractmethod
    def reverse_lookup(self, address: str) -> list[str]:
        """
        Resolve an address back to hostnames (PTR).

        Args:
            address: Canonical address text

        Returns:
            Hostnames, primary name first

        Raises:
            NameServiceError: If no name is associated with the address
        """
        pass

    def close(self):
        """Clean up resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

"""
Interface for Mapping Store.
Defines the contract that all capability mapping stores must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.value_objects import MappingEntry


class IMappingStore(ABC):
    """Interface for capability -> implementation lookups."""

    @abstractmethod
    def load(self, source) -> None:
        """
        Load mappings from a configuration source.

        Args:
            source: Path to a properties file or an open text stream

        Raises:
            ConfigLoadError: If the source cannot be opened or parsed
        """
        pass

    @abstractmethod
    def lookup(self, capability_id: str) -> Optional[str]:
        """
        Find the implementation mapped to a capability.

        Args:
            capability_id: Fully-qualified capability name

        Returns:
            Optional[str]: Implementation identifier if mapped, None otherwise
        """
        pass

    @abstractmethod
    def entries(self) -> List[MappingEntry]:
        """
        Get every loaded mapping.

        Returns:
            List[MappingEntry]: Snapshot of the current mappings
        """
        pass

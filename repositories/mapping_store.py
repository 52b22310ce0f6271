"""
Mapping store: capability id -> implementation id.
Loaded once from a properties source, read-only afterwards.
"""

import os
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, TextIO, Union

from core.errors import ConfigLoadError
from core.logger import logger, format_exception_short
from domain.value_objects import MappingEntry
from repositories.interfaces import IMappingStore
from repositories.properties_parser import parse_properties

Source = Union[str, "os.PathLike[str]", TextIO]


class MappingStore(IMappingStore):
    """In-memory capability mapping backed by a properties file."""

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize an empty store.

        Args:
            encoding: Text encoding used when load() opens a path
        """
        self.encoding = encoding
        self._mappings: Dict[str, str] = {}

    def load(self, source: Source) -> None:
        """
        Load mappings, replacing the current ones only if the whole source parses.

        Args:
            source: Path to a properties file, or an open text stream which is
                read but not closed

        Raises:
            ConfigLoadError: If the source cannot be opened, decoded or parsed
        """
        if hasattr(source, "read"):
            path = getattr(source, "name", None)
            pairs = self._parse(source, path)
        else:
            path = os.fspath(source)
            logger.debug(f"Loading capability mappings from {path}")
            try:
                with open(path, "r", encoding=self.encoding) as handle:
                    pairs = self._parse(handle, path)
            except (OSError, LookupError) as e:
                raise ConfigLoadError(
                    f"Cannot open mapping configuration: {format_exception_short(e)}",
                    path=path,
                ) from e

        mappings: Dict[str, str] = {}
        for number, key, value in pairs:
            if key in mappings and mappings[key] != value:
                logger.debug(
                    f"Duplicate capability {key} at line {number}: {mappings[key]} -> {value}"
                )
            mappings[key] = value

        self._mappings = mappings
        logger.info(f"Loaded {len(mappings)} capability mapping(s) from {path or '<stream>'}")

    def _parse(self, handle: TextIO, path: Optional[str]):
        try:
            return parse_properties(handle, path=path)
        except UnicodeDecodeError as e:
            raise ConfigLoadError(
                f"Cannot decode mapping configuration as {self.encoding}: {e.reason}",
                path=path,
            ) from e
        except (OSError, ValueError) as e:
            # Closed or failing streams
            raise ConfigLoadError(
                f"Cannot read mapping configuration: {format_exception_short(e)}",
                path=path,
            ) from e

    def lookup(self, capability_id: str) -> Optional[str]:
        """Exact, case-sensitive lookup."""
        return self._mappings.get(capability_id)

    def entries(self) -> List[MappingEntry]:
        return [
            MappingEntry(capability_id=key, implementation_id=value)
            for key, value in self._mappings.items()
        ]

    def as_dict(self) -> Mapping[str, str]:
        """Read-only view of the mappings."""
        return MappingProxyType(self._mappings)

    def __contains__(self, capability_id: object) -> bool:
        return capability_id in self._mappings

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        return f"MappingStore({len(self._mappings)} mapping(s))"

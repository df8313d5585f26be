"""
Config Store Port

Architectural Intent:
- Abstracts where the plugin's flat property set lives
- The host may hand over its own configuration store, files and
  environment variables are provided as adapters
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ConfigStorePort(Protocol):
    """Port for reading a persistent-id scoped property set."""

    def get_properties(self, pid: str) -> Optional[Mapping[str, Any]]:
        """Return the properties stored under pid, or None if there are none.

        Raises OSError when the backing store cannot be read.
        """
        ...

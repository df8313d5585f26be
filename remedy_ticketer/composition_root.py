"""
Composition Root

Architectural Intent:
- Single place where the config store, DAO and plugin are wired together
- Embedding hosts may pass their own store instead of a file path

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- The file format is picked from the path: a .json file, a .cfg file, or a
  directory of <pid>.cfg files
- Environment overrides are always layered on top
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from remedy_ticketer.domain.ports.config_store_port import ConfigStorePort
from remedy_ticketer.infrastructure.adapters.config_store_adapters import (
    EnvOverrideConfigStore,
    JsonFileConfigStore,
    PropertiesFileConfigStore,
)
from remedy_ticketer.infrastructure.adapters.remedy_ticketer_plugin import (
    RemedyTicketerPlugin,
)
from remedy_ticketer.infrastructure.config import (
    KNOWN_KEYS,
    REMEDY_CONFIG_PID,
    RemedyConfigDao,
)

DEFAULT_CONFIG_PATH = f"{REMEDY_CONFIG_PID}.cfg"


@dataclass
class RemedyContainer:
    """DI container holding all wired dependencies."""

    config_store: ConfigStorePort
    config_dao: RemedyConfigDao
    plugin: RemedyTicketerPlugin


def create_config_store(path: Optional[str] = None) -> ConfigStorePort:
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_PATH)
    if config_path.suffix == ".json":
        store = JsonFileConfigStore(str(config_path))
    else:
        store = PropertiesFileConfigStore(str(config_path))
    return EnvOverrideConfigStore(store, known_keys=KNOWN_KEYS)


def create_container(
    config_path: Optional[str] = None,
    config_store: Optional[ConfigStorePort] = None,
) -> RemedyContainer:
    """Create and wire all dependencies."""
    store = config_store if config_store is not None else create_config_store(config_path)
    config_dao = RemedyConfigDao(store)
    plugin = RemedyTicketerPlugin(config_dao)
    return RemedyContainer(config_store=store, config_dao=config_dao, plugin=plugin)

"""
Config Store Adapters

Architectural Intent:
- Implements ConfigStorePort over the places the plugin's properties can live
- DictConfigStore: properties handed over in memory by an embedding host
- JsonFileConfigStore / PropertiesFileConfigStore: files on disk, re-read on
  every lookup so edits are picked up without a restart
- EnvOverrideConfigStore: REMEDY_* environment variables win over any store

Design Decisions:
- A missing file means "no configuration" (None), not an error
- Unreadable or malformed files raise OSError (or ValueError from the
  properties parser) for the DAO to wrap
- Properties files follow the java.util.Properties line format used by .cfg
  files and its ISO-8859-1 encoding; non-Latin-1 text uses \\uXXXX escapes
"""

import json
import logging
import os
import string
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


class DictConfigStore:
    """In-memory configuration keyed by persistent id."""

    def __init__(self, configurations: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        self._configurations: dict[str, dict[str, Any]] = {
            pid: dict(props) for pid, props in (configurations or {}).items()
        }

    def get_properties(self, pid: str) -> Optional[Mapping[str, Any]]:
        return self._configurations.get(pid)

    def update(self, pid: str, properties: Mapping[str, Any]) -> None:
        self._configurations[pid] = dict(properties)


class JsonFileConfigStore:
    """A JSON object file holding the properties of a single persistent id."""

    def __init__(self, path: str) -> None:
        self._path = Path(path)

    def get_properties(self, pid: str) -> Optional[Mapping[str, Any]]:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("Config file not found: %s", self._path)
            return None
        except json.JSONDecodeError as e:
            raise OSError(f"Invalid config file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise OSError(f"Config file {self._path} does not hold a JSON object")
        return data


def _unescape(value: str) -> str:
    out = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        if nxt == "u":
            digits = "".join(next(chars, "") for _ in range(4))
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise ValueError(f"Malformed \\uXXXX encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            continue
        out.append({"t": "\t", "n": "\n", "r": "\r", "f": "\f"}.get(nxt, nxt))
    return "".join(out)


def _split_property(line: str) -> tuple[str, str]:
    """Split a logical line at the first unescaped '=', ':' or whitespace."""
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "=: \t\f":
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse java.util.Properties style text into a dict."""
    props: dict[str, str] = {}
    logical = ""
    for raw in text.splitlines():
        line = raw.lstrip(" \t\f")
        if not logical and (not line or line[0] in "#!"):
            continue
        # odd number of trailing backslashes continues the line
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            logical += line[:-1]
            continue
        logical += line
        key, value = _split_property(logical)
        props[key] = value
        logical = ""
    if logical:
        key, value = _split_property(logical)
        props[key] = value
    return props


class PropertiesFileConfigStore:
    """A .cfg (java properties) file.

    path is either the file itself or a directory holding <pid>.cfg files.
    """

    def __init__(self, path: str) -> None:
        self._path = Path(path)

    def path_for(self, pid: str) -> Path:
        if self._path.is_dir():
            return self._path / f"{pid}.cfg"
        return self._path

    def get_properties(self, pid: str) -> Optional[Mapping[str, Any]]:
        path = self.path_for(pid)
        try:
            text = path.read_text(encoding="latin-1")
        except FileNotFoundError:
            logger.debug("Config file not found: %s", path)
            return None
        return parse_properties(text)


def env_name(key: str, prefix: str = "REMEDY") -> str:
    """Environment variable name for a property key.

    remedy.endpoint.strict-ssl -> REMEDY_ENDPOINT_STRICT_SSL
    """
    base = key.split(".", 1)[1] if key.startswith("remedy.") else key
    return f"{prefix}_" + base.upper().replace(".", "_").replace("-", "_")


class EnvOverrideConfigStore:
    """Overlay REMEDY_* environment variables on top of another store.

    Variables matching a key of the wrapped store (or one of known_keys)
    replace that key. A variable extending such a key keeps its suffix
    verbatim, so REMEDY_ASSIGNEDGROUP_TNnet becomes remedy.assignedgroup.TNnet
    and still matches the case-sensitive target group. Any other variable is
    added as a lower-cased dotted key.
    """

    def __init__(
        self,
        delegate,
        prefix: str = "REMEDY",
        known_keys: tuple[str, ...] = (),
    ) -> None:
        self._delegate = delegate
        self._prefix = prefix
        self._known_keys = known_keys

    def get_properties(self, pid: str) -> Optional[Mapping[str, Any]]:
        base = self._delegate.get_properties(pid)
        overrides = {
            name: value
            for name, value in os.environ.items()
            if name.startswith(f"{self._prefix}_")
        }
        if not overrides:
            return base

        data: dict[str, Any] = dict(base or {})
        by_env = {env_name(k, self._prefix): k for k in (*self._known_keys, *data)}
        for name, value in overrides.items():
            key = by_env.get(name) or self._extended_key(name, by_env)
            if key is None:
                key = "remedy." + name[len(self._prefix) + 1:].lower().replace("_", ".")
            data[key] = value
        return data

    @staticmethod
    def _extended_key(name: str, by_env: Mapping[str, str]) -> Optional[str]:
        matches = [env for env in by_env if name.startswith(f"{env}_")]
        if not matches:
            return None
        env = max(matches, key=len)
        return f"{by_env[env]}.{name[len(env) + 1:]}"

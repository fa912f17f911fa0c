"""
Connection settings, adapter errors and the adapter interface.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence
from urllib.parse import urlencode

from ..dialects.base import Dialect
from ..security.dsns import DatabaseURL, parse_dsn


class AdapterError(RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Bad connection URL, or the database driver is not installed."""


class AdapterConnectionError(AdapterError):
    """The database could not be reached."""


class AdapterExecutionError(AdapterError):
    """A statement was rejected by the database."""


def _flag(raw: str, name: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise AdapterConfigurationError(f"'{name}' must be a boolean, got {raw!r}")


def _seconds(raw: str, name: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise AdapterConfigurationError(f"'{name}' must be a number of seconds, got {raw!r}") from exc


@dataclass
class ConnectionConfig:
    """
    Where and how to connect.

    ``url`` is what the driver sees; ``location`` keeps the parsed form for
    scheme lookups and masked log output.
    """

    url: str
    autocommit: bool = False
    timeout: float | None = None
    options: dict[str, Any] = field(default_factory=dict)
    source: str | None = None
    location: DatabaseURL | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **overrides: Any) -> "ConnectionConfig":
        try:
            location = parse_dsn(dsn)
        except ValueError as exc:
            raise AdapterConfigurationError(f"Malformed database URL: {exc}") from exc
        if not location.scheme:
            raise AdapterConfigurationError(f"Database URL {location.masked()!r} has no scheme.")

        params = dict(location.params)
        autocommit = _flag(params.pop("autocommit"), "autocommit") if "autocommit" in params else False
        timeout = _seconds(params.pop("timeout"), "timeout") if "timeout" in params else None
        driver_url = dsn.split("?", 1)[0]
        if params:
            driver_url += "?" + urlencode(params)

        settings: dict[str, Any] = {"autocommit": autocommit, "timeout": timeout}
        settings.update(overrides)
        return cls(url=driver_url, location=location, **settings)

    @classmethod
    def from_env(cls, env_var: str, *, default: str | None = None, **overrides: Any) -> "ConnectionConfig":
        value = os.getenv(env_var)
        if value:
            return cls.from_dsn(value, source=env_var, **overrides)
        if default is None:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(default, source="default", **overrides)

    def _location(self) -> DatabaseURL:
        return self.location or parse_dsn(self.url)

    @property
    def scheme(self) -> str:
        return self._location().scheme.lower().split("+", 1)[0]

    def label(self) -> str:
        """
        Masked URL, prefixed with where it came from.
        """
        masked = self._location().masked()
        return f"{self.source} ({masked})" if self.source else masked


class DatabaseAdapter(Protocol):
    """
    The operations the schema script and the CLI need from a database.
    """

    dialect: Dialect

    @property
    def autocommit(self) -> bool: ...

    def connect(self, config: ConnectionConfig) -> Any: ...

    def close(self) -> None: ...

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any: ...

    def begin(self) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

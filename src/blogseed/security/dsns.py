"""Database URL parsing with password masking for log output."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit

MASK = "***"

# Query keys whose values never reach a log line.
_SECRET_PARAMS = ("password", "sslkey", "sslpassword")


@dataclass(frozen=True)
class DatabaseURL:
    scheme: str
    user: str | None
    password: str | None
    host: str | None
    port: int | None
    path: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def database(self) -> str | None:
        return self.path.lstrip("/") or None

    def masked(self) -> str:
        """
        The URL with the password and secret query values replaced by ``***``.
        """
        auth = ""
        if self.user:
            auth = self.user + (f":{MASK}" if self.password else "") + "@"
        address = (self.host or "") + (f":{self.port}" if self.port else "")
        shown = {k: MASK if k.lower() in _SECRET_PARAMS else v for k, v in self.params.items()}
        query = f"?{urlencode(shown, safe='*/')}" if shown else ""
        return f"{self.scheme}://{auth}{address}{self.path}{query}"


def parse_dsn(dsn: str) -> DatabaseURL:
    """
    Split ``dsn`` into its parts. A malformed port raises ``ValueError``.
    """
    parts = urlsplit(dsn)
    return DatabaseURL(
        scheme=parts.scheme,
        user=parts.username,
        password=parts.password,
        host=parts.hostname,
        port=parts.port,
        path=parts.path,
        params=dict(parse_qsl(parts.query)),
    )

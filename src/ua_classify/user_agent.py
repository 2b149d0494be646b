"""Classification result for a User-Agent header."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

# Attribute -> serialized key, in document order
_KEYS = (
    ("header", "header"),
    ("fields", "fields"),
    ("client_type", "clientType"),
    ("client_name", "clientName"),
    ("client_version", "clientVersion"),
    ("device_type", "deviceType"),
    ("os_name", "osName"),
    ("os_version", "osVersion"),
    ("url", "url"),
)


@dataclass(frozen=True)
class UserAgent:
    """Client, device and operating system extracted from a header.

    Attributes
    ----------
    header : str
        The provided header, with quotes removed
    fields : tuple[str, ...]
        Cleaned header tokens used for matching
    client_type : str
        Application category (App, Bot, Browser, Other)
    client_name : str
        Application name (Chrome, Googlebot, Edge, ..., Other)
    client_version : str
        Major.minor client version, empty if unknown
    device_type : str
        Device category (Desktop, Mobile, Tablet, Other)
    os_name : str
        Operating system (Android, Linux, iOS, macOS, Windows, ..., Other)
    os_version : str
        Major.minor OS version, empty if unknown
    url : str
        URL advertised by a bot, empty if none
    """

    __slots__ = (
        "header",
        "fields",
        "client_type",
        "client_name",
        "client_version",
        "device_type",
        "os_name",
        "os_version",
        "url",
    )

    header: str
    fields: tuple[str, ...]
    client_type: str
    client_name: str
    client_version: str
    device_type: str
    os_name: str
    os_version: str
    url: str

    @classmethod
    def parse(cls, user_agent: str) -> UserAgent:
        """Classify a raw header. See :func:`ua_classify.classifier.parse`."""
        from .classifier import parse

        return parse(user_agent)

    def __str__(self) -> str:
        return self.summary()

    def summary(self) -> str:
        """Abbreviated one-line rendering, skipping empty values."""
        parts = (
            self.client_type,
            self.client_name,
            self.client_version,
            self.device_type,
            self.os_name,
            self.os_version,
            self.url,
        )
        return " ".join(part for part in parts if part)

    @property
    def cleaned(self) -> str:
        """The tokens joined back into a single line."""
        return " ".join(self.fields)

    def to_dict(self) -> dict[str, Any]:
        """Return a key/value document with empty values omitted."""
        document: dict[str, Any] = {}
        for attr, key in _KEYS:
            value = getattr(self, attr)
            if value:
                document[key] = list(value) if attr == "fields" else value
        return document

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

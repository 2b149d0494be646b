"""Version and URL extraction from header tokens.

Clients disagree on how to report versions, so several conventions are
supported:

- ``Name/1.2.3`` next to the matched client name (most clients)
- ``Version/1.2`` (Safari, whose own ``Safari/x`` token is a build number)
- ``rv:11.0`` (Gecko and Trident)
- ``<OS name> 10_15_7`` for operating systems

Every helper returns an empty string when nothing usable is found.
"""

from __future__ import annotations

from typing import Sequence

APPLE_OSES = frozenset({"iOS", "iPadOS", "macOS"})

# The normalizer rewrites the verbose Apple OS names to this marker.
APPLE_OS_MARKER = "OS"

VERSION_PREFIX = "Version/"
RELEASE_PREFIX = "rv:"
VERSION_CHARS = frozenset("0123456789._")


def _major_minor(ver: str) -> str:
    """Keep at most the first two dot separated segments."""
    return ".".join(ver.split(".")[:2])


def client_version(fields: Sequence[str], client_name: str) -> str:
    """Return the major.minor version from a ``name/version`` token.

    Tokens that contain ``client_name`` but carry no slash are skipped.
    """
    for field in fields:
        if client_name in field:
            _, sep, ver = field.partition("/")
            if sep:
                return _major_minor(ver)
    return ""


def version(fields: Sequence[str]) -> str:
    """Return the major.minor version from a ``Version/x.y.z`` token."""
    for field in fields:
        if field.startswith(VERSION_PREFIX) and len(field) > len(VERSION_PREFIX):
            return _major_minor(field[len(VERSION_PREFIX) :])
    return ""


def release_version(fields: Sequence[str]) -> str:
    """Return the text after ``rv:`` verbatim."""
    for field in fields:
        if field.startswith(RELEASE_PREFIX) and len(field) > len(RELEASE_PREFIX):
            return field[len(RELEASE_PREFIX) :]
    return ""


def os_version(fields: Sequence[str], os_name: str) -> str:
    """Return the version in the token following the OS name, if numeric."""
    if not os_name:
        return ""
    if os_name in APPLE_OSES:
        os_name = APPLE_OS_MARKER
    for i, field in enumerate(fields[:-1]):
        if field == os_name:
            return major_minor_version(fields[i + 1])
    return ""


def major_minor_version(ver: str) -> str:
    """Return a major.minor version from purely numeric text.

    Apple operating systems separate segments with ``_`` instead of ``.``.

    Examples
    --------
    >>> major_minor_version("10_15_5")
    '10.15'
    >>> major_minor_version("x86_64")
    ''
    """
    if not ver or not set(ver) <= VERSION_CHARS:
        return ""
    separator = "_" if "_" in ver else "."
    return ".".join(ver.split(separator)[:2])


def bot_url(fields: Sequence[str]) -> str:
    """Return the first URL token, without any marker before ``http``."""
    for field in fields:
        if "://" in field:
            start = field.find("http")
            return field[max(start, 0) :]
    return ""

"""Classification engine.

``parse`` normalizes the header, fills the four classification slots from
the rule catalog (first matching rule wins each slot), then applies the
default policy so that every slot holds a value. The engine keeps no state
between calls and never raises for string input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .normalize import normalize
from .rules import RULES, Rule
from .user_agent import UserAgent
from .versions import (
    APPLE_OSES,
    bot_url,
    client_version,
    os_version,
    release_version,
    version,
)

URL_MARKER = "://"
OTHER = "Other"


@dataclass
class _Draft:
    """Mutable slots filled while a single header is classified."""

    device_type: str = ""
    os_name: str = ""
    client_type: str = ""
    client_name: str = ""
    client_version: str = ""
    os_version: str = ""
    url: str = ""

    @property
    def complete(self) -> bool:
        return bool(
            self.device_type and self.os_name and self.client_type and self.client_name
        )


def classify(
    fields: Sequence[str], header: str, rules: Sequence[Rule] = RULES
) -> _Draft:
    """Fill classification slots from ``rules`` in order.

    A URL always marks the client as a bot. Each slot keeps the value of the
    first rule that supplies it; the scan stops once all four are filled.
    """
    draft = _Draft()
    if URL_MARKER in header:
        draft.client_type = "Bot"
        draft.url = bot_url(fields)

    cleaned = " ".join(fields)
    for rule in rules:
        if rule.find in cleaned:
            if rule.device_type and not draft.device_type:
                draft.device_type = rule.device_type
            if rule.os_name and not draft.os_name:
                draft.os_name = rule.os_name
            if rule.client_type and not draft.client_type:
                draft.client_type = rule.client_type
            if rule.client_name and not draft.client_name:
                draft.client_name = rule.client_name
                ver = client_version(fields, rule.find)
                if ver:
                    draft.client_version = ver
        if draft.complete:
            break
    return draft


def apply_defaults(draft: _Draft, fields: Sequence[str]) -> _Draft:
    """Supply default slot values and refine versions, in place."""
    if not draft.os_name:
        draft.os_name = OTHER
    else:
        draft.os_version = os_version(fields, draft.os_name)

    if not draft.device_type:
        draft.device_type = "Desktop"

    if not draft.client_name:
        # Platform browser assumed for Apple and Android devices
        if draft.os_name in APPLE_OSES:
            draft.client_type = draft.client_type or "Browser"
            draft.client_name = "Safari"
        elif draft.os_name == "Android":
            draft.client_type = draft.client_type or "Browser"
            draft.client_name = "Chrome"
        else:
            draft.client_name = OTHER

    if draft.client_name == "Safari":
        # Safari/x is a fixed build number; Version/x is the release.
        ver = version(fields)
        if ver:
            draft.client_version = ver
    elif draft.client_name == "InternetExplorer":
        ver = release_version(fields)
        if ver:
            draft.client_version = ver

    if not draft.client_type:
        draft.client_type = OTHER
    return draft


def parse(user_agent: str) -> UserAgent:
    """Extract client, device and operating system details from a header.

    Parameters
    ----------
    user_agent : str
        Raw ``User-Agent`` request header.

    Returns
    -------
    UserAgent
        Classification result. Versions and URL are empty when the header
        does not provide them; the other fields fall back to ``Other`` (or
        ``Desktop`` for the device) when the header is inconclusive.

    Examples
    --------
    >>> str(parse("facebookexternalhit/1.1"))
    'Bot FacebookBot 1.1 Desktop Other'
    """
    header, fields = normalize(user_agent)
    draft = apply_defaults(classify(fields, header), fields)
    return UserAgent(
        header=header,
        fields=fields,
        client_type=draft.client_type,
        client_name=draft.client_name,
        client_version=draft.client_version,
        device_type=draft.device_type,
        os_name=draft.os_name,
        os_version=draft.os_version,
        url=draft.url,
    )

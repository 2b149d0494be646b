"""Header normalization.

Turns a raw ``User-Agent`` header into the cleaned header and the token
sequence the rule table is matched against.
"""

from __future__ import annotations

import re

QUOTES = frozenset("'\"")

# Applied in order; "Mac OS X" collapses to the "OS" marker read by the
# OS version extractor.
NOISE: tuple[tuple[str, str], ...] = (
    ("Mozilla/5.0", ""),
    ("Safari/537.36", ""),
    ("KHTML", ""),
    ("like Gecko", ""),
    ("compatible", ""),
    (" like Mac OS X", ""),
    ("CPU ", ""),
    ("Intel ", ""),
    ("Mac OS X", "OS"),
    ("Windows NT", "Windows"),
    ("WOW64", ""),
    ("Win64", ""),
    ("x86_64", ""),
    ("x64", ""),
    ("aarch64", ""),
    ("(", " "),
    (")", " "),
    ("[", ""),
    ("]", ""),
    (";", " "),
)

ENGINE_PREFIX = "AppleWebKit"

# Unicode White_Space; the \x1c-\x1f separators are not token boundaries.
SEPARATORS = re.compile(
    "[ \t\n\v\f\r\x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def unquote(user_agent: str) -> str:
    """Strip every single and double quote from the header.

    Headers sometimes arrive quoted the way a literal would be written in
    code, and the quotes may be unbalanced.
    """
    return "".join(ch for ch in user_agent if ch not in QUOTES)


def parse_fields(header: str) -> tuple[str, ...]:
    """Remove meaningless text and split the header into tokens.

    Parameters
    ----------
    header : str
        Unquoted ``User-Agent`` header.

    Returns
    -------
    tuple[str, ...]
        Whitespace separated tokens, without commas and without the
        ``AppleWebKit`` version carrier.
    """
    cleaned = header
    for old, new in NOISE:
        cleaned = cleaned.replace(old, new)
    return tuple(
        token
        for token in SEPARATORS.split(cleaned)
        if token and token != "," and not token.startswith(ENGINE_PREFIX)
    )


def normalize(user_agent: str) -> tuple[str, tuple[str, ...]]:
    """Return the unquoted header together with its tokens."""
    header = unquote(user_agent)
    return header, parse_fields(header)

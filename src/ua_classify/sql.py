"""DuckDB scalar functions for classifying headers inside SQL.

Examples
--------
>>> conn = duckdb.connect()
>>> register_functions(conn)
>>> conn.sql("SELECT ua_client_name('facebookexternalhit/1.1')").fetchone()
('FacebookBot',)
"""

from __future__ import annotations

from typing import Callable

import duckdb
from duckdb.sqltypes import VARCHAR

from .classifier import parse

# SQL function name -> UserAgent attribute
FUNCTIONS: dict[str, str] = {
    "ua_client_type": "client_type",
    "ua_client_name": "client_name",
    "ua_client_version": "client_version",
    "ua_device_type": "device_type",
    "ua_os_name": "os_name",
    "ua_os_version": "os_version",
    "ua_url": "url",
}


def _field_function(attr: str) -> Callable[[str], str]:
    def extract(user_agent: str) -> str:
        return getattr(parse(user_agent), attr)

    return extract


def _summary(user_agent: str) -> str:
    return parse(user_agent).summary()


def _unregister(conn: duckdb.DuckDBPyConnection, name: str) -> None:
    try:
        conn.remove_function(name)
    except duckdb.Error:
        pass  # not registered yet


def register_functions(conn: duckdb.DuckDBPyConnection) -> list[str]:
    """Register the ``ua_*`` functions on ``conn``, replacing earlier ones.

    Parameters
    ----------
    conn : duckdb.DuckDBPyConnection
        Connection to register the functions on.

    Returns
    -------
    list[str]
        Names of the registered functions.
    """
    functions: dict[str, Callable[[str], str]] = {
        name: _field_function(attr) for name, attr in FUNCTIONS.items()
    }
    functions["ua_summary"] = _summary

    for name, function in functions.items():
        _unregister(conn, name)
        conn.create_function(name, function, [VARCHAR], VARCHAR)
    return list(functions)

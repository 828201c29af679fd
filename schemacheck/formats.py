"""String ``format`` checkers.

Each checker takes the string and returns ``True`` when it conforms. Formats
mapped to ``None`` are recognized but not checked.
"""
from __future__ import annotations

import re
from datetime import datetime
from ipaddress import IPv4Address, IPv6Address
from typing import Callable, Dict, Optional
from urllib.parse import urlsplit

_DATE_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{2}:\d{2}:\d{2}$")
_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$"
)


def _matches_strptime(pattern: "re.Pattern[str]", fmt: str, value: str) -> bool:
    if not pattern.fullmatch(value):
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True


def is_date_time(value: str) -> bool:
    return _matches_strptime(_DATE_TIME_RE, "%Y-%m-%dT%H:%M:%SZ", value)


def is_date(value: str) -> bool:
    return _matches_strptime(_DATE_RE, "%Y-%m-%d", value)


def is_time(value: str) -> bool:
    return _matches_strptime(_TIME_RE, "%H:%M:%S", value)


def is_uri(value: str) -> bool:
    """Absolute URI with a host and a query component."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc and parts.query)


def is_email(value: str) -> bool:
    return bool(_EMAIL_RE.fullmatch(value))


def is_ipv4(value: str) -> bool:
    try:
        IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    try:
        IPv6Address(value)
    except ValueError:
        return False
    return True


FORMAT_CHECKERS: Dict[str, Optional[Callable[[str], bool]]] = {
    "date-time": is_date_time,
    "date": is_date,
    "time": is_time,
    "uri": is_uri,
    "email": is_email,
    "ip-address": is_ipv4,
    "ipv6": is_ipv6,
    "host-name": None,
    "regex": None,
}

FORMAT_DESCRIPTIONS: Dict[str, str] = {
    "date-time": "a date-time (YYYY-MM-DDThh:mm:ssZ)",
    "date": "a date (YYYY-MM-DD)",
    "time": "a time (hh:mm:ss)",
    "uri": "a URI with a query component",
    "email": "an email address",
    "ip-address": "an IPv4 address",
    "ipv6": "an IPv6 address",
}

__all__ = [
    "FORMAT_CHECKERS",
    "FORMAT_DESCRIPTIONS",
    "is_date",
    "is_date_time",
    "is_email",
    "is_ipv4",
    "is_ipv6",
    "is_time",
    "is_uri",
]

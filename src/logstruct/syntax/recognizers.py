"""
Recognizers for well-known token shapes.

Each recognizer checks whether `text` matches its syntax starting at
`offset` and returns the number of characters consumed, or 0 if it does
not match. Callers decide whether a partial match is acceptable.
"""

import regex as re

MONTHS = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

_posint = re.compile(r"[0-9]+")
_time_24hr = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")
_duration = re.compile(r"[0-9]+:([0-9]{2}):([0-9]{2})")
_ipv4 = re.compile(
    r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})"
)
_rfc3164 = re.compile(
    r"(?i:(" + "|".join(MONTHS) + r")) ( ?[0-9]{1,2}) "
    r"(?:([0-9]{4}) )?([0-9]{2}):([0-9]{2}):([0-9]{2})"
)
_rfc5424 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.[0-9]{1,9})?(?:Z|[+-]([0-9]{2}):([0-9]{2}))"
)


def _in_range(groups, bounds):
    return all(
        g is None or low <= int(g) <= high for g, (low, high) in zip(groups, bounds)
    )


def posint(text: str, offset: int = 0) -> int:
    m = _posint.match(text, offset)
    return m.end() - offset if m else 0


def time_24hr(text: str, offset: int = 0) -> int:
    m = _time_24hr.match(text, offset)
    if m and _in_range(m.groups(), [(0, 23), (0, 59), (0, 59)]):
        return m.end() - offset
    return 0


def duration(text: str, offset: int = 0) -> int:
    m = _duration.match(text, offset)
    if m and _in_range(m.groups(), [(0, 59), (0, 59)]):
        return m.end() - offset
    return 0


def ipv4(text: str, offset: int = 0) -> int:
    m = _ipv4.match(text, offset)
    if m and _in_range(m.groups(), [(0, 255)] * 4):
        return m.end() - offset
    return 0


def rfc3164_date(text: str, offset: int = 0) -> int:
    """Syslog timestamp such as `Oct 11 22:14:15` or `Oct  1 2015 22:14:15`."""
    m = _rfc3164.match(text, offset)
    if not m:
        return 0
    _, day, _, hour, minute, second = m.groups()
    if _in_range(
        [day.strip(), hour, minute, second],
        [(1, 31), (0, 23), (0, 59), (0, 60)],
    ):
        return m.end() - offset
    return 0


def rfc5424_date(text: str, offset: int = 0) -> int:
    """Timestamp such as `2003-10-11T22:14:15.003Z` or with a +hh:mm offset."""
    m = _rfc5424.match(text, offset)
    if m and _in_range(
        m.groups()[1:],
        [(1, 12), (1, 31), (0, 23), (0, 59), (0, 60), (0, 23), (0, 59)],
    ):
        return m.end() - offset
    return 0

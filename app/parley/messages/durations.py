"""Duration string parsing.

Two forms are accepted:

- compact: one or more ``<number><unit>`` components, optionally separated by
  spaces, units ``d h m s ms us ns`` from largest to smallest, each at most
  once (e.g. "1s", "500ms", "1h 30m", "1.5s")
- ISO-8601: "PT1S", "PT1M30S", "P1DT2H"

Either form may carry a leading "-".
"""

import re
from datetime import timedelta

from parley.exceptions import MessageParseError

_UNIT_ORDER = ("d", "h", "m", "s", "ms", "us", "ns")

_UNIT_SECONDS = {
    "d": 86400.0,
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "ns": 1e-9,
}

# Longest units first so "ms" is not read as "m" followed by "s"
_COMPACT_COMPONENT = re.compile(r"\s*(\d+(?:\.\d+)?)(ms|us|ns|d|h|m|s)")
_ISO_PATTERN = re.compile(
    r"P(?:(?P<d>\d+(?:\.\d+)?)D)?"
    r"(?:T(?:(?P<h>\d+(?:\.\d+)?)H)?(?:(?P<m>\d+(?:\.\d+)?)M)?(?:(?P<s>\d+(?:\.\d+)?)S)?)?",
    re.IGNORECASE,
)


def parse_duration(value: str) -> timedelta:
    """Parse a duration string into a timedelta.

    Args:
        value: Duration string in compact or ISO-8601 form.

    Returns:
        The parsed duration.

    Raises:
        MessageParseError: If value matches neither form, or is too large
            for a timedelta.
    """
    text = value.strip()
    negative = text.startswith("-")
    if negative:
        text = text[1:].lstrip()

    seconds = _parse_iso(text) if text[:1] in ("P", "p") else _parse_compact(text)
    if seconds is None:
        raise MessageParseError(f"Invalid duration: {value!r}")

    try:
        duration = timedelta(seconds=seconds)
    except OverflowError as e:
        raise MessageParseError(f"Duration out of range: {value!r}") from e
    return -duration if negative else duration


def _parse_compact(text: str):
    position = 0
    last_rank = -1
    total = 0.0
    while position < len(text):
        match = _COMPACT_COMPONENT.match(text, position)
        if match is None:
            return None
        amount, unit = match.groups()
        rank = _UNIT_ORDER.index(unit)
        if rank <= last_rank:
            return None
        last_rank = rank
        total += float(amount) * _UNIT_SECONDS[unit]
        position = match.end()
    return total if last_rank >= 0 else None


def _parse_iso(text: str):
    match = _ISO_PATTERN.fullmatch(text)
    if match is None or not any(match.groupdict().values()):
        return None
    # "P1DT" has a dangling time designator
    if text.upper().endswith("T"):
        return None
    return sum(
        float(amount) * _UNIT_SECONDS[unit]
        for unit, amount in match.groupdict().items()
        if amount is not None
    )

import re
import typer

USERNAME_REGEX = re.compile(r"^[a-zA-Z0-9_.@-]{1,64}$")

SIZE_UNITS = {"": 1, "B": 1, "K": 1024, "M": 1024 ** 2, "G": 1024 ** 3, "T": 1024 ** 4}
DURATION_UNITS = {"": 1, "S": 1, "M": 60, "H": 3600, "D": 86400, "W": 604800}

_AMOUNT_RE = re.compile(r"^\s*(\d+)\s*([a-zA-Z]*)\s*$")


def _parse_amount(value: str, units: dict, kind: str) -> int:
    match = _AMOUNT_RE.match(value)
    if not match:
        raise typer.BadParameter(f"Invalid {kind}: {value!r}")
    number, unit = match.groups()
    unit = unit.upper()
    # Accept "MB", "GiB" etc. as their single-letter form
    if kind == "size":
        unit = unit.rstrip("B").rstrip("I") if len(unit) > 1 else unit
    if unit not in units:
        raise typer.BadParameter(f"Unknown {kind} unit in {value!r}")
    return int(number) * units[unit]


def parse_size(value: str) -> int:
    """
    Bytes from '0', '512', '500M', '2G', '1GiB'. 0 means unlimited.
    """
    return _parse_amount(value, SIZE_UNITS, "size")


def parse_duration(value: str) -> int:
    """
    Seconds from '0', '90', '30m', '12h', '7d', '2w'. 0 means unlimited.
    """
    return _parse_amount(value, DURATION_UNITS, "duration")


def format_limit(value: int, unit: str = "") -> str:
    if not value:
        return "unlimited"
    return f"{value}{unit}"

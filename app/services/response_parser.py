import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from app.core.errors import ParseError

PIPE = "|"

_CURRENCY_PREFIX = r"^\s*(?:₹|rs\.?|inr)?\s*"
_INT_PATTERN = re.compile(_CURRENCY_PREFIX + r"([-+]?\d+)", re.IGNORECASE)
_FLOAT_PATTERN = re.compile(_CURRENCY_PREFIX + r"([-+]?\d+(?:\.\d+)?)", re.IGNORECASE)
# Upper-case field names such as DECISION or TODAY_PRICE, as printed in the prompts
_PLACEHOLDER_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")


class FieldKind(str, Enum):
    INT = "int"
    FLOAT = "float"
    ENUM = "enum"
    TEXT = "text"


@dataclass(frozen=True)
class FieldSpec:
    """One positional field of a delimited model reply."""

    name: str
    kind: FieldKind = FieldKind.TEXT
    choices: tuple[str, ...] = ()
    default: Any = None
    required: bool = True


def coerce_int(value: str, default: Optional[int]) -> Optional[int]:
    match = _INT_PATTERN.match(value.replace(",", ""))
    if not match:
        return default
    return int(match.group(1))


def coerce_float(value: str, default: Optional[float]) -> Optional[float]:
    match = _FLOAT_PATTERN.match(value.replace(",", ""))
    if not match:
        return default
    return float(match.group(1))


def coerce_enum(value: str, choices: Sequence[str], default: Optional[str]) -> Optional[str]:
    normalized = value.strip().strip("*_`'\".").lower()
    if normalized in choices:
        return normalized
    for word in normalized.split():
        if word in choices:
            return word
    return default


def coerce(value: str, spec: FieldSpec) -> Any:
    value = value.strip()
    if spec.kind == FieldKind.INT:
        return coerce_int(value, spec.default)
    if spec.kind == FieldKind.FLOAT:
        return coerce_float(value, spec.default)
    if spec.kind == FieldKind.ENUM:
        return coerce_enum(value, spec.choices, spec.default)
    return value


def required_fields(schema: Sequence[FieldSpec]) -> int:
    return sum(1 for spec in schema if spec.required)


def _split(line: str, delimiter: str) -> list[str]:
    return [segment.strip() for segment in line.split(delimiter)]


def is_header(segments: Sequence[str]) -> bool:
    """True when a line only repeats the field names, e.g. ``DECISION|COLOR|REASON``."""
    filled = [segment for segment in segments if segment]
    return bool(filled) and all(_PLACEHOLDER_PATTERN.match(segment) for segment in filled)


def _coerce_segments(segments: list[str], schema: Sequence[FieldSpec]) -> dict[str, Any]:
    record = {}
    for index, spec in enumerate(schema):
        if index < len(segments) and segments[index] != "":
            record[spec.name] = coerce(segments[index], spec)
        elif spec.kind == FieldKind.TEXT and index < len(segments):
            record[spec.name] = ""
        else:
            record[spec.name] = spec.default
    return record


def parse_record(
    text: str, schema: Sequence[FieldSpec], delimiter: str = PIPE
) -> dict[str, Any]:
    """
    Parse a single-record reply such as ``SELL NOW|green|...``.

    The first line carrying at least as many segments as the schema requires is used,
    so a stray preamble or code fence around the record is tolerated. An echoed header
    line of field names is skipped. Fewer segments than required is a failed parse;
    there is no partially populated result.

    Raises:
        ParseError: no line of the reply matches the schema.
    """
    needed = required_fields(schema)
    for line in (text or "").splitlines():
        segments = _split(line, delimiter)
        if len(segments) >= needed and not is_header(segments):
            return _coerce_segments(segments, schema)
    raise ParseError(
        f"Expected {needed} '{delimiter}' separated fields, got: {(text or '')[:120]!r}"
    )


def parse_records(
    text: str, schema: Sequence[FieldSpec], delimiter: str = PIPE
) -> list[dict[str, Any]]:
    """Parse one record per line, silently dropping header lines and lines with too few fields."""
    needed = required_fields(schema)
    records = []
    for line in (text or "").splitlines():
        segments = _split(line, delimiter)
        if len(segments) < needed or is_header(segments):
            continue
        records.append(_coerce_segments(segments, schema))
    return records


INSIGHT_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("decision"),
    FieldSpec("decision_color", FieldKind.ENUM, ("green", "red", "yellow", "blue"), "yellow"),
    FieldSpec("main_reason"),
    FieldSpec("yesterday", FieldKind.INT, default=0),
    FieldSpec("today", FieldKind.INT, default=0),
    FieldSpec("tomorrow_low", FieldKind.INT, default=0),
    FieldSpec("tomorrow_high", FieldKind.INT, default=0),
    FieldSpec("trend", FieldKind.ENUM, ("rising", "falling", "stable"), "stable"),
    FieldSpec("confidence", FieldKind.ENUM, ("low", "medium", "high"), "medium"),
    FieldSpec("weather_impact"),
    FieldSpec("news_headline"),
)

PRICE_QUOTE_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("crop"),
    FieldSpec("variety"),
    FieldSpec("market"),
    FieldSpec("price", FieldKind.INT, default=0),
    FieldSpec("change", FieldKind.FLOAT, default=0.0),
    FieldSpec("trend", FieldKind.ENUM, ("up", "down", "stable"), "stable"),
    FieldSpec(
        "arrival_volume", FieldKind.ENUM, ("low", "medium", "high"), "medium", required=False
    ),
    FieldSpec("date", required=False),
)

WEATHER_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("temp", FieldKind.INT, default=30),
    FieldSpec("condition"),
    FieldSpec("humidity", FieldKind.INT, default=60),
    FieldSpec("wind_speed", FieldKind.INT, default=10),
    FieldSpec("advisory"),
    FieldSpec("rain_chance", FieldKind.INT, default=None, required=False),
)

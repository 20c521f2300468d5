"""Type-directed parsing of environment variable strings."""
import json
import math
from datetime import date, datetime
from typing import Any, Callable, Dict, Union
from .domain import Lookup
from .types import ValueType

BOOLEANS = {
    'true': True,
    'false': False,
}


def _parse_array(raw: str) -> Lookup:
    return Lookup.hit(raw.split(','))


def _parse_boolean(raw: str) -> Lookup:
    if raw in BOOLEANS:
        return Lookup.hit(BOOLEANS[raw])
    return Lookup.miss('Not a boolean value', level='error')


def _parse_integer(raw: str) -> Lookup:
    try:
        value = int(raw, 10)
    except ValueError:
        value = None
    # Only accept canonical text: rejects "007", "+1", " 1", "1_000"
    if value is not None and str(value) == raw:
        return Lookup.hit(value)
    return Lookup.miss('Not a valid parsable for integer string', level='error')


def _parse_float(raw: str) -> Lookup:
    try:
        value = float(raw)
    except ValueError:
        return Lookup.miss('Not a valid parsable for float string', level='error')
    if not math.isfinite(value):
        return Lookup.miss('Not a finite float value', level='error')
    canonical = {repr(value)}
    if value.is_integer():
        canonical.add(str(int(value)))
    if raw in canonical:
        return Lookup.hit(value)
    return Lookup.miss('Not a valid parsable for float string', level='error')


def _parse_json(raw: str) -> Lookup:
    try:
        return Lookup.hit(json.loads(raw))
    except (ValueError, RecursionError) as e:
        return Lookup.miss(f'Unable to parse JSON: {e}', level='error')


def _parse_string(raw: str) -> Lookup:
    if raw == 'null':
        return Lookup.hit(None)
    return Lookup.hit(raw)


def _parse_null(raw: str) -> Lookup:
    if raw == 'null':
        return Lookup.hit(None)
    return Lookup.miss('Not a null value', level='error')


def _parse_date(raw: str) -> Lookup:
    value: Union[date, datetime]
    try:
        if len(raw) == 10:
            value = date.fromisoformat(raw)
        else:
            value = datetime.fromisoformat(raw)
    except ValueError:
        return Lookup.miss('Not a valid ISO-8601 date string', level='error')
    return Lookup.hit(value)


PARSERS: Dict[ValueType, Callable[[str], Lookup]] = {
    ValueType.ARRAY: _parse_array,
    ValueType.BOOLEAN: _parse_boolean,
    ValueType.FLOAT: _parse_float,
    ValueType.INTEGER: _parse_integer,
    ValueType.JSON: _parse_json,
    ValueType.NULL: _parse_null,
    ValueType.STRING: _parse_string,
    ValueType.DATE: _parse_date,
}


def parse_value(value_type: Any, raw: str) -> Lookup:
    """Parse ``raw`` as ``value_type``.

    Never raises: failures come back as a miss carrying the reason, the
    caller decides whether that becomes an error or a log line.
    """
    parser = PARSERS.get(value_type) if isinstance(value_type, ValueType) else None
    if parser is None:
        return Lookup.miss(f'Unknown config type {value_type!r}', level='error')
    return parser(raw)

"""JsonType StrEnum and value helpers shared by every tree algorithm.

A JSON value is one of six closed variants: null, boolean, number, string,
object and array.  ``json_type_of`` maps a parsed Python value onto that tag
set and is the single place where runtime type dispatch happens; the
flattener, diff engine and query engine all branch on the returned tag.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "CONTAINER_TYPES",
    "JsonType",
    "JsonValue",
    "json_type_of",
    "primitive_text",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class JsonType(StrEnum):
    """The six JSON value kinds.

    StrEnum values are the lowercased member names, which double as the
    type labels shown to users ("array", "object", ...).
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()

    @property
    def is_container(self) -> bool:
        return self in CONTAINER_TYPES


CONTAINER_TYPES = frozenset({JsonType.OBJECT, JsonType.ARRAY})


def json_type_of(value: Any) -> JsonType:
    """Return the JsonType tag for a parsed JSON value.

    bool MUST be checked before int because bool subclasses int in Python.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    if value is None:
        return JsonType.NULL
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, dict):
        return JsonType.OBJECT
    if isinstance(value, list):
        return JsonType.ARRAY

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def primitive_text(value: Any) -> str:
    """Render a primitive the way it reads in JSON text.

    ``True`` -> ``true``, ``None`` -> ``null``.  Floats follow the JavaScript
    number-to-string rules (see ``_float_text``); ints are written exactly.
    Strings are returned unquoted.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


def _float_text(value: float) -> str:
    """Shortest round-trip digits laid out as JavaScript's ``String(number)``.

    Plain notation for magnitudes in [1e-6, 1e21), exponent notation with an
    explicit sign otherwise: ``3.0`` -> ``3``, ``1e21`` -> ``1e+21``,
    ``1e-07`` -> ``1e-7``, ``-0.0`` -> ``0``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # value == 0.digits * 10**n
    n = int(exponent) + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        e = n - 1
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return "-" + text if sign else text

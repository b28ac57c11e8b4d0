"""JSON text encoding and decoding with a canonical value layout."""

import json
import math
import re
from decimal import Decimal
from typing import Any, List

_LONE_SURROGATE = re.compile('[\ud800-\udfff]')


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Out of range float value {name} is not valid JSON")


class JSONText:
    """
    Utility class for reading and writing JSON text.

    Output follows the layout of ECMAScript ``JSON.stringify``: numbers
    switch to exponent notation only below 1e-6 or from 1e21 on, without
    zero padding in the exponent, and unpaired surrogates are written as
    ``\\uXXXX`` escapes. NaN and Infinity are rejected both ways.
    """

    @staticmethod
    def loads(text: str) -> Any:
        """
        Decode JSON text.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
            ValueError: If the text contains NaN, Infinity or -Infinity
        """
        return json.loads(text, parse_constant=_reject_constant)

    @staticmethod
    def quote(text: str) -> str:
        """Return ``text`` as a JSON string literal."""
        literal = json.dumps(text, ensure_ascii=False)
        return _LONE_SURROGATE.sub(lambda m: "\\u%04x" % ord(m.group()), literal)

    @staticmethod
    def format_float(value: float) -> str:
        """
        Format a float the way ECMAScript formats numbers.

        Integral floats inside the plain range keep a trailing ``.0`` so
        they decode back to floats.

        Raises:
            ValueError: If the value is NaN or infinite
        """
        if math.isnan(value) or math.isinf(value):
            raise ValueError("Out of range float values are not JSON compliant")

        sign = "-" if math.copysign(1.0, value) < 0 else ""
        if value == 0:
            return sign + "0.0"

        _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
        digits = "".join(str(d) for d in digit_tuple)
        # decimal point position relative to the first digit
        point = len(digits) + exponent
        digits = digits.rstrip("0")

        if len(digits) <= point <= 21:
            return sign + digits + "0" * (point - len(digits)) + ".0"
        if 0 < point <= 21:
            return sign + digits[:point] + "." + digits[point:]
        if -6 < point <= 0:
            return sign + "0." + "0" * -point + digits

        shift = point - 1
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return sign + mantissa + "e" + ("+" if shift > 0 else "-") + str(abs(shift))

    @staticmethod
    def dumps(value: Any, indent: int) -> str:
        """
        Encode a JSON value with ``indent`` spaces per level and ``\\n`` breaks.

        Raises:
            TypeError: If the value holds something JSON cannot represent
            ValueError: If the value holds NaN or an infinite float
        """
        parts: List[str] = []
        JSONText._encode(value, indent, 0, parts)
        return "".join(parts)

    @staticmethod
    def _encode_key(key: Any) -> str:
        if isinstance(key, str):
            return JSONText.quote(key)
        if key is True:
            return '"true"'
        if key is False:
            return '"false"'
        if key is None:
            return '"null"'
        if isinstance(key, int):
            return JSONText.quote(str(key))
        if isinstance(key, float):
            return JSONText.quote(JSONText.format_float(key))
        raise TypeError(f"keys must be str, int, float, bool or None, not {type(key).__name__}")

    @staticmethod
    def _encode(value: Any, indent: int, level: int, parts: List[str]) -> None:
        if value is None:
            parts.append("null")
        elif value is True:
            parts.append("true")
        elif value is False:
            parts.append("false")
        elif isinstance(value, str):
            parts.append(JSONText.quote(value))
        elif isinstance(value, int):
            parts.append(int.__repr__(value))
        elif isinstance(value, float):
            parts.append(JSONText.format_float(value))
        elif isinstance(value, dict):
            if not value:
                parts.append("{}")
                return
            inner = "\n" + " " * (indent * (level + 1))
            parts.append("{")
            for position, (key, item) in enumerate(value.items()):
                parts.append(("," if position else "") + inner + JSONText._encode_key(key) + ": ")
                JSONText._encode(item, indent, level + 1, parts)
            parts.append("\n" + " " * (indent * level) + "}")
        elif isinstance(value, (list, tuple)):
            if not value:
                parts.append("[]")
                return
            inner = "\n" + " " * (indent * (level + 1))
            parts.append("[")
            for position, item in enumerate(value):
                parts.append(("," if position else "") + inner)
                JSONText._encode(item, indent, level + 1, parts)
            parts.append("\n" + " " * (indent * level) + "]")
        else:
            raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

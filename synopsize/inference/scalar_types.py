# ==============================================
# Scalar Types
# ==============================================
#
# PURPOSE:
#   The closed set of scalar types a column can be inferred as.
#   Each type carries the pattern a value's string form must match
#   and the key used to order values of that type.
#
# CLASS: ScalarType (frozen dataclass)
# ------------------------------------
#   Attributes:
#   -----------
#   - name: str                     → "DATETIME", "DATE", ..., "TEXT"
#   - pattern: re.Pattern | None    → Full-match pattern (None for TEXT)
#   - sort_key: Callable[[str], Any] → Ordering rule (string or numeric)
#
#   Methods:
#   --------
#   - matches(value) -> bool        → Does str(value) conform?
#   - matches_all(values) -> bool   → Does every value conform?
#   - key(value) -> Any             → sort_key applied to str(value)
#
# TABLE:
# ------
#   KNOWN_TYPES is ordered from more- to less-specific:
#     DATETIME, DATE, INTEGER, BIGINT, REAL, TIME
#   TEXT is the fallback and is never tested.
#
# ==============================================

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class ScalarType:
    """
    One candidate type: a name, a validation pattern and an ordering rule.
    """

    name: str
    pattern: Optional[re.Pattern]  # None means "matches anything"
    sort_key: Callable[[str], Any]
    is_numeric: bool = False

    def matches(self, value: Any) -> bool:
        if self.pattern is None:
            return True
        return self.pattern.fullmatch(str(value)) is not None

    def matches_all(self, values: Iterable[Any]) -> bool:
        return all(self.matches(value) for value in values)

    def key(self, value: Any) -> Any:
        """
        Sort key for a value already known to match this type.

        Args:
            value: A value conforming to this type

        Returns:
            A str, int or Decimal that orders values of this type.
            Strings order by code point, so "C" sorts before "a".
        """
        return self.sort_key(str(value))

    def __str__(self) -> str:
        return self.name


def _compile(expression: str) -> re.Pattern:
    # ASCII so that \d and friends only accept 0-9
    return re.compile(expression, re.ASCII)


# DATETIME: '2016-01-18T01:45:53Z', '2016-01-18 15:10:20', '20160118T01:45'
DATETIME = ScalarType(
    name="DATETIME",
    pattern=_compile(r"[12]\d{3}(-?)[01]\d\1[0123]\d[T ][012]?\d:[0-5]\d(:[0-5]\d)?Z?"),
    sort_key=str,
)

# DATE: '2016-01-18', '20160118' (not '2016-01-40', '2016-0118', '201601-18')
DATE = ScalarType(
    name="DATE",
    pattern=_compile(r"[12]\d{3}(-?)[01]\d\1[0123]\d"),
    sort_key=str,
)

# INTEGER: '-100', '0', '99' (not '-' or '9223372036854775808')
INTEGER = ScalarType(
    name="INTEGER",
    pattern=_compile(r"-?\d{1,10}"),
    sort_key=int,
    is_numeric=True,
)

# BIGINT: '-1000000000000000000', '9223372036854775808' (not '-')
BIGINT = ScalarType(
    name="BIGINT",
    pattern=_compile(r"-?\d{1,19}"),
    sort_key=int,
    is_numeric=True,
)

# REAL: '-100.05', '20', '.5', '99.' (not '.' or '-')
REAL = ScalarType(
    name="REAL",
    pattern=_compile(r"-?(\d+|\.\d+|\d+\.\d*)"),
    sort_key=Decimal,
    is_numeric=True,
)

# TIME: '23:54', '01:45', '4:05' (not '4:90')
TIME = ScalarType(
    name="TIME",
    pattern=_compile(r"[012]?\d:[0-5]\d"),
    sort_key=str,
)

TEXT = ScalarType(name="TEXT", pattern=None, sort_key=str)

# Order is load-bearing: DATE before INTEGER ('20160118'),
# INTEGER before BIGINT, integers before REAL.
KNOWN_TYPES: Tuple[ScalarType, ...] = (DATETIME, DATE, INTEGER, BIGINT, REAL, TIME)

_TYPES_BY_NAME: Dict[str, ScalarType] = {
    scalar_type.name: scalar_type for scalar_type in KNOWN_TYPES + (TEXT,)
}


def get_scalar_type(name: str) -> ScalarType:
    """
    Look up a scalar type by name (case-insensitive).

    Raises:
        KeyError: If no type has that name
    """
    try:
        return _TYPES_BY_NAME[name.upper()]
    except KeyError:
        raise KeyError(f"Unknown scalar type: {name!r}") from None

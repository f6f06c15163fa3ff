import re
from typing import Any, Iterable, List

_BLANK = re.compile(r"\s*")


def is_empty(value: Any) -> bool:
    """
    True if the value counts as missing.

    A value is missing when it is None or when its string form is empty
    or made only of whitespace.
    """
    if value is None:
        return True
    return _BLANK.fullmatch(str(value)) is not None


def partition_missing(values: Iterable[Any]) -> List[Any]:
    """Return the non-missing values, in their original order."""
    return [value for value in values if not is_empty(value)]

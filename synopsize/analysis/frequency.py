from typing import Any, Dict, Iterable


def count(values: Iterable[Any]) -> Dict[str, int]:
    """
    Tabulate how often each distinct value occurs.

    Values are the same only when their text is identical, so 1, 1.0 and
    True are three entries. Keys keep first-occurrence order.

    Args:
        values: Values of any type (compared through str())

    Returns:
        Mapping of value text → number of occurrences
    """
    counts: Dict[str, int] = {}
    for value in values:
        text = str(value)
        counts[text] = counts.get(text, 0) + 1
    return counts

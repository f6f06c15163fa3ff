from typing import Any, Iterable, List, Optional, Sequence

from .scalar_types import KNOWN_TYPES, TEXT, ScalarType


class TypeClassifier:
    """
    Picks the most specific scalar type that every value conforms to.

    Candidates are tested in order and the first one matched by the whole
    sequence wins, so the candidate list must run from more- to
    less-specific types. TEXT is returned when nothing matches.
    """

    def __init__(self, candidates: Optional[Sequence[ScalarType]] = None):
        """
        Args:
            candidates: Ordered candidate types. Defaults to KNOWN_TYPES.
        """
        self.candidates = tuple(candidates) if candidates is not None else KNOWN_TYPES

    def classify(self, values: Iterable[Any]) -> ScalarType:
        """
        Return the first candidate type matched by every value.

        Args:
            values: Non-missing values (classified via their string form)

        Returns:
            The matching ScalarType, or TEXT
        """
        values = list(values)

        # every() over an empty list is vacuously true, which would
        # report the first candidate for a column with nothing in it
        if not values:
            return TEXT

        for candidate in self.candidates:
            if candidate.matches_all(values):
                return candidate
        return TEXT

    def candidates_for(self, value: Any) -> List[ScalarType]:
        """
        List every candidate a single value matches, in cascade order.

        Useful for explaining why a column fell back to TEXT.
        """
        return [candidate for candidate in self.candidates if candidate.matches(value)]


_default_classifier = TypeClassifier()


def classify(values: Iterable[Any]) -> ScalarType:
    return _default_classifier.classify(values)

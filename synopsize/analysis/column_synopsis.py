# ==============================================
# ColumnSynopsis
# ==============================================
#
# PURPOSE:
#   Data class that holds the synopsis of a single column:
#   its inferred type, missing-value accounting, extrema and
#   frequency table. Built once by the SynopsisAggregator and
#   never mutated afterwards.
#
# CLASS: ColumnSynopsis (dataclass)
# ---------------------------------
#   Attributes:
#   -----------
#   - type_name: str                → Inferred type ("INTEGER", "TEXT", ...)
#   - values: list                  → The original column, untouched
#   - non_empty_values: list        → values minus missing ones, same order
#   - minimum: Any | None           → First non-empty value in type order
#   - maximum: Any | None           → Last non-empty value in type order
#   - counts: dict[str, int]        → {"a": 3, "b": 1}, keyed by value text
#
#   Computed Properties:
#   --------------------
#   - total_count -> int            → len(values)
#   - missing_count -> int          → len(values) - len(non_empty_values)
#   - missing_ratio -> float        → missing_count / total_count (0.0 if empty)
#   - unique_count -> int           → Number of distinct non-empty values
#   - has_missing_values -> bool
#   - is_unique -> bool             → Every non-empty value occurs once
#   - is_constant -> bool           → Exactly one distinct non-empty value
#
#   Methods:
#   --------
#   - to_dict() -> dict
#       Serialize the summary (not the raw values) for JSON output.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ColumnSynopsis:
    """
    Summary of one column: type, extrema, counts and missing values.
    """

    # --- Inferred type ---
    type_name: str  # Name of the ScalarType chosen for the column

    # --- Values ---
    values: List[Any] = field(default_factory=list)  # Original column
    non_empty_values: List[Any] = field(default_factory=list)  # Missing values removed

    # --- Extrema (None when there are no non-empty values) ---
    minimum: Optional[Any] = None
    maximum: Optional[Any] = None

    # --- Frequency table over non-empty values ---
    counts: Dict[str, int] = field(default_factory=dict)

    # ======================================
    # Computed properties
    # ======================================
    @property
    def total_count(self) -> int:
        return len(self.values)

    @property
    def missing_count(self) -> int:
        return len(self.values) - len(self.non_empty_values)

    @property
    def missing_ratio(self) -> float:
        """
        Fraction of the column that is missing.

        Returns:
            A value between 0.0 and 1.0; 0.0 for an empty column.
        """
        if not self.values:
            return 0.0
        return self.missing_count / len(self.values)

    @property
    def unique_count(self) -> int:
        return len(self.counts)

    @property
    def has_missing_values(self) -> bool:
        return self.missing_count > 0

    @property
    def is_unique(self) -> bool:
        """True if there is at least one value and none repeats."""
        return bool(self.non_empty_values) and len(self.counts) == len(self.non_empty_values)

    @property
    def is_constant(self) -> bool:
        return len(self.counts) == 1

    # ======================================
    # Serialization
    # ======================================
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the synopsis to a JSON-serializable dictionary.

        Note: the raw values are summarized by their counts and are not
        included. Frequency keys are already value texts, so they map
        one-to-one onto JSON object keys.

        Returns:
            A dictionary representation suitable for JSON output.
        """
        return {
            "type_name": self.type_name,
            "total_count": self.total_count,
            "missing_count": self.missing_count,
            "unique_count": self.unique_count,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "counts": dict(self.counts),
        }

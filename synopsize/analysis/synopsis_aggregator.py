# ==============================================
# SynopsisAggregator
# ==============================================
#
# PURPOSE:
#   Build a ColumnSynopsis for a materialized column, and for
#   every field of a list of records.
#
# CLASS: SynopsisAggregator
# -------------------------
#   Stateless — columns are independent of one another, so
#   callers may synopsize several columns concurrently.
#
#   Constructor:
#   ------------
#   - __init__(classifier: TypeClassifier = None)
#
#   Methods:
#   --------
#   - synopsize(column: list) -> ColumnSynopsis
#       1. Drop missing values (order preserved)
#       2. Classify the remainder → ScalarType
#       3. Sort a copy by the type's key → minimum / maximum
#       4. Count occurrences of each non-empty value
#       5. Return the synopsis with the original column attached
#
#   - synopsize_records(records: list[dict], columns: list[str] = None)
#         -> dict[str, ColumnSynopsis]
#       One synopsis per field, in column order.
#
#   - extract_column(records, name) -> list        (staticmethod)
#   - column_names(records) -> list[str]           (staticmethod)
#
# ==============================================

from typing import Any, Dict, List, Optional, Sequence

from .column_synopsis import ColumnSynopsis
from .frequency import count
from .missing_values import partition_missing
from synopsize.inference import TypeClassifier


class SynopsisAggregator:
    """
    Turns columns of raw values into ColumnSynopsis records.
    """

    def __init__(self, classifier: Optional[TypeClassifier] = None):
        """
        Args:
            classifier: Optional TypeClassifier. If not provided, one with
                        the default candidate order is created.
        """
        self.classifier = classifier or TypeClassifier()

    def synopsize(self, column: Sequence[Any]) -> ColumnSynopsis:
        """
        Summarize a single column.

        Never raises: an empty or all-missing column yields TEXT with no
        extrema and an empty frequency table.

        Args:
            column: Raw values, one per record (None / blank = missing)

        Returns:
            The ColumnSynopsis for the column
        """
        non_empty_values = partition_missing(column)
        scalar_type = self.classifier.classify(non_empty_values)

        # sorted() is stable and the key gives a total order for values of this type
        ordered = sorted(non_empty_values, key=scalar_type.key)

        return ColumnSynopsis(
            type_name=scalar_type.name,
            values=column,
            non_empty_values=non_empty_values,
            minimum=ordered[0] if ordered else None,
            maximum=ordered[-1] if ordered else None,
            counts=count(non_empty_values),
        )

    def synopsize_records(
        self,
        records: List[Dict[str, Any]],
        columns: Optional[List[str]] = None
    ) -> Dict[str, ColumnSynopsis]:
        """
        Summarize every field of a record set.

        Args:
            records: Parsed records (field name → value)
            columns: Field names to summarize, in order. Defaults to every
                     field seen, in first-seen order.

        Returns:
            Dictionary of column name → ColumnSynopsis
        """
        if columns is None:
            columns = self.column_names(records)

        synopses = {}
        for name in columns:
            synopses[name] = self.synopsize(self.extract_column(records, name))
        return synopses

    @staticmethod
    def extract_column(records: List[Dict[str, Any]], name: str) -> List[Any]:
        """
        Pull one field out of every record.

        Records lacking the field contribute None, so the column always has
        one entry per record.
        """
        return [record.get(name) for record in records]

    @staticmethod
    def column_names(records: List[Dict[str, Any]]) -> List[str]:
        """Every field name across the records, in first-seen order."""
        names: Dict[str, None] = {}
        for record in records:
            for key in record:
                names.setdefault(key, None)
        return list(names)


_default_aggregator = SynopsisAggregator()


def synopsize(column: Sequence[Any]) -> ColumnSynopsis:
    return _default_aggregator.synopsize(column)

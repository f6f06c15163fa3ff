# ==============================================
# ANALYSIS
# ==============================================
#
# This package turns a materialized column of raw values
# into a ColumnSynopsis.
#
# Steps:
#   1. Drop missing values (None / whitespace-only)
#   2. Classify the rest (see synopsize.inference)
#   3. Sort under the type's ordering → minimum / maximum
#   4. Tabulate frequencies
#
# Modules:
# --------
# - missing_values.py       → Emptiness predicate and partitioning
# - frequency.py            → Frequency tabulation
# - column_synopsis.py      → Data class for the result of one column
# - synopsis_aggregator.py  → Builds synopses for columns and record sets
#
# ==============================================

from .missing_values import is_empty, partition_missing
from .frequency import count
from .column_synopsis import ColumnSynopsis
from .synopsis_aggregator import SynopsisAggregator, synopsize

__all__ = [
    "is_empty",
    "partition_missing",
    "count",
    "ColumnSynopsis",
    "SynopsisAggregator",
    "synopsize",
]

# ==============================================
# synopsize — Column Type Inference & Synopsis
# ==============================================
#
# Package Structure:
#
# synopsize/
# ├── inference/        # Scalar type table + classification cascade
# ├── analysis/         # Missing values, frequency counts, column synopsis
# ├── input/            # Read CSV / TSV / JSON records from files, stdin, URLs
# ├── report.py         # Console / JSON rendering of synopses
# ├── config.py         # Configuration management
# └── cli.py            # Command line entry point
#
# ==============================================

from .inference.type_classifier import classify
from .analysis.synopsis_aggregator import synopsize
from .analysis.column_synopsis import ColumnSynopsis
from .inference.scalar_types import ScalarType

__version__ = "0.1.0"

__all__ = ["classify", "synopsize", "ColumnSynopsis", "ScalarType", "__version__"]

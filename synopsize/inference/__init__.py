# ==============================================
# INFERENCE
# ==============================================
#
# This package decides which scalar type a column's
# non-missing values all conform to.
#
# Modules:
# --------
# - scalar_types.py     → The ordered table of candidate types (pattern + ordering)
# - type_classifier.py  → Cascade over the table, first full match wins
#
# ==============================================

from .scalar_types import ScalarType, KNOWN_TYPES, TEXT, get_scalar_type
from .type_classifier import TypeClassifier, classify

__all__ = ["ScalarType", "KNOWN_TYPES", "TEXT", "get_scalar_type", "TypeClassifier", "classify"]

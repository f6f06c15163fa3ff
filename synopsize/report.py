# ==============================================
# Report — Console & JSON Rendering
# ==============================================
#
# PURPOSE:
#   Render ColumnSynopsis records for people (text) or
#   for other programs (JSON). Rendering policy (sampling
#   long value lists, formatting percentages) lives here,
#   never in the synopsis core.
#
# CLASS: SynopsisPrinter
# ----------------------
#   - print_report(synopses: dict[str, ColumnSynopsis]) -> None
#   - print_synopsis(synopsis: ColumnSynopsis) -> None
#   - print_counts(counts: dict, show_count: bool = True) -> None
#       Lists every distinct value, or sample_size random ones
#       when there are more than sample_size.
#
# FUNCTION:
# ---------
#   - render_json(synopses) -> str
#
# ==============================================

import json
import random
import sys
from typing import Dict, Optional, TextIO

from synopsize.analysis import ColumnSynopsis


class SynopsisPrinter:
    """
    Prints a human-readable synopsis of each column.
    """

    def __init__(
        self,
        sample_size: int = 10,
        stream: Optional[TextIO] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            sample_size: Max number of example values listed per column
            stream: Where to write (defaults to sys.stdout at print time)
            rng: Random source for sampling (pass a seeded one for stable output)
        """
        self.sample_size = sample_size
        self.stream = stream
        self.rng = rng or random.Random()

    def _write(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout)

    def print_report(self, synopses: Dict[str, ColumnSynopsis]) -> None:
        for index, (name, synopsis) in enumerate(synopses.items()):
            self._write(f'[{index}] "{name}"')
            self.print_synopsis(synopsis)

    def print_synopsis(self, synopsis: ColumnSynopsis) -> None:
        self._write(f"  Type: {synopsis.type_name}")

        # Totals summary
        if synopsis.has_missing_values:
            self._write(
                f"  {synopsis.missing_count} missing values (out of {synopsis.total_count} total), "
                f"or {synopsis.missing_ratio * 100:.2f}%"
            )
        else:
            self._write(f"  No missing values ({synopsis.total_count} total)")

        value_ref = "(non-null) value" if synopsis.has_missing_values else "value"

        # Values / counts summary. A full value listing is not a synopsis,
        # but numeric columns are not assumed continuous either.
        if not synopsis.non_empty_values:
            self._write("  No values to show")
        elif synopsis.is_constant:
            self._write(f"  There is only one unique {value_ref}: {synopsis.minimum}")
        elif synopsis.is_unique:
            self._write(
                f"  All {value_ref}s are unique and range from {synopsis.minimum} to {synopsis.maximum}"
            )
            self.print_counts(synopsis.counts, show_count=False)
        else:
            self._write(
                f"  There are {synopsis.unique_count} unique {value_ref}s, "
                f"which range from {synopsis.minimum} to {synopsis.maximum}"
            )
            self.print_counts(synopsis.counts)

    def print_counts(self, counts: Dict[str, int], show_count: bool = True) -> None:
        unique_values = list(counts)
        is_sample = len(unique_values) > self.sample_size
        if is_sample:
            values = self.rng.sample(unique_values, self.sample_size)
            self._write(f"  {self.sample_size} random examples:")
        else:
            values = unique_values

        for value in values:
            if show_count:
                self._write(f"    {value}: {counts[value]}")
            else:
                self._write(f"    {value}")


def render_json(synopses: Dict[str, ColumnSynopsis]) -> str:
    """
    Serialize synopses as a JSON array, one object per column.

    Extrema keep their original types where JSON allows it; anything
    else is rendered with str(). Frequency keys are value texts.
    """
    document = [
        {"column": name, **synopsis.to_dict()}
        for name, synopsis in synopses.items()
    ]
    return json.dumps(document, indent=2, default=str)

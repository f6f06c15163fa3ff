# ==============================================
# Tests for Report Rendering
# ==============================================

import io
import json
import random

import pytest

from synopsize import synopsize
from synopsize.report import SynopsisPrinter, render_json


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def printer(output):
    return SynopsisPrinter(sample_size=10, stream=output, rng=random.Random(0))


def lines(output):
    return output.getvalue().splitlines()


class TestSynopsisPrinter:
    """Wording of the text report."""

    def test_all_unique_with_missing(self, printer, output):
        printer.print_synopsis(synopsize(["1", "2", ""]))
        assert lines(output) == [
            "  Type: INTEGER",
            "  1 missing values (out of 3 total), or 33.33%",
            "  All (non-null) values are unique and range from 1 to 2",
            "    1",
            "    2",
        ]

    def test_repeated_values(self, printer, output):
        printer.print_synopsis(synopsize(["a", "b", "a"]))
        assert lines(output) == [
            "  Type: TEXT",
            "  No missing values (3 total)",
            "  There are 2 unique values, which range from a to b",
            "    a: 2",
            "    b: 1",
        ]

    def test_constant_column(self, printer, output):
        printer.print_synopsis(synopsize(["x", "x"]))
        assert lines(output)[-1] == "  There is only one unique value: x"

    def test_constant_column_with_missing(self, printer, output):
        printer.print_synopsis(synopsize(["x", None]))
        assert lines(output)[-1] == "  There is only one unique (non-null) value: x"

    def test_no_values(self, printer, output):
        printer.print_synopsis(synopsize(["", None]))
        assert lines(output) == [
            "  Type: TEXT",
            "  2 missing values (out of 2 total), or 100.00%",
            "  No values to show",
        ]

    def test_numeric_range_uses_numeric_order(self, printer, output):
        printer.print_synopsis(synopsize(["9", "10", "2", "9"]))
        assert "which range from 2 to 10" in output.getvalue()

    def test_long_lists_are_sampled(self, output):
        printer = SynopsisPrinter(sample_size=5, stream=output, rng=random.Random(1))
        values = [str(n) for n in range(20)]
        printer.print_synopsis(synopsize(values))
        printed = lines(output)
        assert printed[3] == "  5 random examples:"
        examples = [line.strip() for line in printed[4:]]
        assert len(examples) == 5
        assert len(set(examples)) == 5
        assert set(examples) <= set(values)

    def test_short_lists_are_not_sampled(self, printer, output):
        printer.print_synopsis(synopsize(["a", "b", "c"]))
        assert "random examples" not in output.getvalue()

    def test_print_report_headers(self, printer, output):
        printer.print_report({"id": synopsize(["1"]), "name": synopsize(["a"])})
        printed = lines(output)
        assert printed[0] == '[0] "id"'
        assert '[1] "name"' in printed

    def test_defaults_to_stdout(self, capsys):
        SynopsisPrinter().print_synopsis(synopsize(["a"]))
        assert "  Type: TEXT" in capsys.readouterr().out


class TestRenderJson:
    """JSON output."""

    def test_render_json(self):
        document = json.loads(render_json({"n": synopsize(["2", "10", ""])}))
        assert document == [{
            "column": "n",
            "type_name": "INTEGER",
            "total_count": 3,
            "missing_count": 1,
            "unique_count": 2,
            "minimum": "2",
            "maximum": "10",
            "counts": {"2": 1, "10": 1},
        }]

    def test_render_empty(self):
        assert json.loads(render_json({})) == []

    def test_missing_extrema_are_null(self):
        document = json.loads(render_json({"n": synopsize([None])}))
        assert document[0]["minimum"] is None

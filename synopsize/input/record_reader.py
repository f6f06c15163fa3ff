import csv
import io
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests


class SourceReadError(ValueError):
    """Raised when input data cannot be parsed into records."""
    pass


@dataclass
class Table:
    """Parsed records plus their column names, in source order."""
    columns: List[str] = field(default_factory=list)
    records: List[Dict[str, Any]] = field(default_factory=list)


class RecordReader:
    FORMATS = ("auto", "csv", "tsv", "json")
    DELIMITERS = {"csv": ",", "tsv": "\t"}
    SNIFFED_DELIMITERS = (",", "\t", ";", "|")

    def __init__(self, input_format: str = "auto"):
        input_format = input_format.lower()
        if input_format not in self.FORMATS:
            raise ValueError(f"Unknown input format: {input_format!r}")
        self.input_format = input_format

    def read(self, text: str) -> Table:
        text = text.lstrip("\ufeff")
        if not text.strip():
            return Table()

        input_format = self.input_format
        if input_format == "auto":
            input_format = self.detect_format(text)

        if input_format == "json":
            return self._read_json(text)

        delimiter = self.DELIMITERS.get(input_format) or self.sniff_delimiter(text)
        return self._read_delimited(text, delimiter)

    @classmethod
    def detect_format(cls, text: str) -> str:
        if text.lstrip()[:1] in ("[", "{"):
            return "json"
        return "csv"

    @classmethod
    def sniff_delimiter(cls, text: str) -> str:
        # Only blank lines are skipped; a leading tab may be an empty first field
        header = text.lstrip("\r\n").splitlines()[0]
        best = max(cls.SNIFFED_DELIMITERS, key=header.count)
        if header.count(best) == 0:
            return ","
        return best

    def _read_delimited(self, text: str, delimiter: str) -> Table:
        reader = csv.reader(io.StringIO(text), delimiter=delimiter)
        try:
            rows = list(reader)
        except csv.Error as e:
            raise SourceReadError(f"Malformed delimited data at line {reader.line_num}: {e}") from e

        # Blank lines before the header are not data
        while rows and not rows[0]:
            rows.pop(0)
        if not rows:
            return Table()

        columns = rows[0]
        records = []
        for row in rows[1:]:
            if not row:
                # With one column a blank line is an empty value, otherwise it is skipped
                if len(columns) != 1:
                    continue
                row = [""]
            # Short rows leave the trailing fields missing
            padded = row + [None] * (len(columns) - len(row))
            records.append(dict(zip(columns, padded)))
        return Table(columns=list(columns), records=records)

    def _read_json(self, text: str) -> Table:
        try:
            document = json.loads(text)
        except json.JSONDecodeError:
            # Not a single document: one object per line
            document = self._read_json_lines(text)

        if isinstance(document, dict):
            document = [document]
        if not isinstance(document, list):
            raise SourceReadError("JSON input must be an object, an array of objects, or one object per line")

        records = []
        columns: Dict[str, None] = {}
        for index, item in enumerate(document):
            if not isinstance(item, dict):
                raise SourceReadError(f"JSON record {index} is not an object: {item!r}")
            record = {key: self._scalar(value) for key, value in item.items()}
            for key in record:
                columns.setdefault(key, None)
            records.append(record)
        return Table(columns=list(columns), records=records)

    @staticmethod
    def _read_json_lines(text: str) -> List[Any]:
        items = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                items.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise SourceReadError(f"Malformed JSON on line {line_number}: {e.msg}") from e
        return items

    @staticmethod
    def _scalar(value: Any) -> Any:
        # Nested values are summarized by their JSON text so they stay hashable
        if isinstance(value, (dict, list)):
            return json.dumps(value, sort_keys=True)
        # true / false keep their JSON spelling
        if isinstance(value, bool):
            return json.dumps(value)
        return value


def fetch_text(url: str, timeout: float = 10.0) -> str:
    """
    Download a remote source.

    Raises:
        requests.RequestException: On connection failure or HTTP error status
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def open_source(source: Optional[str] = None, timeout: float = 10.0) -> str:
    """
    Read the raw text of a source.

    Args:
        source: None or "-" for stdin, an http(s) URL, or a file path
        timeout: Request timeout for URLs, in seconds

    Returns:
        The source's text
    """
    if source is None or source == "-":
        return sys.stdin.read()

    if source.startswith(("http://", "https://")):
        return fetch_text(source, timeout=timeout)

    try:
        return Path(source).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise SourceReadError(f"{source} is not UTF-8 text") from e


def read_records(text: str, input_format: str = "auto") -> Table:
    return RecordReader(input_format).read(text)

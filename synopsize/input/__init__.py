# ==============================================
# INPUT
# ==============================================
#
# Reads raw records for the synopsis core. Delimiter and quote
# handling are left to the csv and json modules; requests
# fetches remote sources.
#
# Modules:
# --------
# - record_reader.py → CSV / TSV / JSON → Table(columns, records)
#
# ==============================================

from .record_reader import RecordReader, SourceReadError, Table, fetch_text, open_source, read_records

__all__ = ["RecordReader", "SourceReadError", "Table", "fetch_text", "open_source", "read_records"]

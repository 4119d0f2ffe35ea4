"""CSV extractor."""
import codecs
import csv
from typing import Any

from source_preview_core.preview.extractors.base import RecordParser, StreamExtractor


class CSVRecordParser(RecordParser):
    """Incremental CSV parser keyed by the header row.

    Bytes are decoded as UTF-8 (a BOM is dropped, bad bytes replaced) and
    scanned for record boundaries. ``\\r\\n``, ``\\n`` and a lone ``\\r`` all end
    a record unless a quoted field is open. Quote state follows the ``csv``
    module: a quote opens a quoted field only at the start of a field, and
    ``""`` inside one is an escaped quote. Empty lines are skipped. The first
    record is the header; short rows are padded with empty strings and long
    rows truncated to the header width.
    """

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter
        self.header: list[str] | None = None
        self._decoder = codecs.getincrementaldecoder("utf-8-sig")(errors="replace")
        self._buffer = ""
        self._record = ""
        self._in_quotes = False
        self._field_start = True
        self._closed_quote = False

    def feed(self, chunk: bytes) -> list[dict[str, Any]]:
        text = self._buffer + self._decoder.decode(chunk)
        # a trailing \r may be the first half of \r\n
        if text.endswith("\r"):
            self._buffer, text = "\r", text[:-1]
        else:
            self._buffer = ""
        return self._scan(text)

    def close(self) -> list[dict[str, Any]]:
        text = self._buffer + self._decoder.decode(b"", final=True)
        self._buffer = ""
        records = self._scan(text)
        if self._record:
            # last line without a terminator, or an unterminated quote
            records.extend(self._emit(self._record))
            self._record = ""
        return records

    def _scan(self, text: str) -> list[dict[str, Any]]:
        out: list[dict[str, Any]] = []
        start = 0
        i = 0
        while i < len(text):
            c = text[i]
            if self._in_quotes:
                if c == '"':
                    self._in_quotes = False
                    self._closed_quote = True
            elif c == '"' and (self._field_start or self._closed_quote):
                self._in_quotes = True
                self._field_start = self._closed_quote = False
            elif c == "\n" or c == "\r":
                record = self._record + text[start:i]
                if c == "\r" and text[i + 1:i + 2] == "\n":
                    i += 1
                start = i + 1
                self._record = ""
                self._field_start, self._closed_quote = True, False
                out.extend(self._emit(record))
            else:
                self._field_start = c == self.delimiter
                self._closed_quote = False
            i += 1
        self._record += text[start:]
        return out

    def _emit(self, record: str) -> list[dict[str, Any]]:
        if not record:
            return []
        out = []
        for values in csv.reader([record], delimiter=self.delimiter):
            if self.header is None:
                self.header = values
                continue
            width = len(self.header)
            if len(values) < width:
                values = values + [""] * (width - len(values))
            out.append(dict(zip(self.header, values[:width])))
        return out


class CSVExtractor(StreamExtractor):
    """Extractor for CSV files with a header row."""

    name = "csv"

    def open_parser(self) -> RecordParser:
        return CSVRecordParser()

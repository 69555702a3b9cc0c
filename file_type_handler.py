import datetime
import io
import os
import zipfile

import pandas as pd

from logger import Logger

log = Logger().setup_logger("Loader")


class GridLoadError(Exception):
    pass


class FileTypeHandler:
    FILE_TYPES = ("csv", "excel", "auto")
    EXCEL_SUFFIXES = (".xlsx", ".xls")

    def __init__(self, path: str, file_type: str = "auto", delimiter: str | None = None):
        if file_type not in self.FILE_TYPES:
            raise GridLoadError(
                f"file_type can only be one of: {', '.join(self.FILE_TYPES)}"
            )
        if delimiter is not None and len(delimiter) != 1:
            raise GridLoadError("delimiter can only be a single char")
        self.path = path
        self.file_type = file_type
        self.delimiter = delimiter
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

    def resolved_type(self) -> str:
        if self.file_type != "auto":
            return self.file_type
        return "excel" if self.ext in self.EXCEL_SUFFIXES else "csv"

    def load(self) -> tuple[list[str], list[list[str]]]:
        """Read the file into a header and rows of trimmed strings."""
        if not os.path.isfile(self.path):
            raise GridLoadError(f"Error reading file '{self.path}': no such file")

        if self.resolved_type() == "excel":
            df = self._load_excel()
        else:
            df = self._load_csv()

        columns, rows = self._split_records(df)
        log.info("Loaded %s: %d rows x %d columns", self.path, len(rows), len(columns))
        return columns, rows

    # ---------- delimited text ----------
    @staticmethod
    def guess_delimiter(content: str) -> str:
        semi_count = content.count(";")
        comma_count = content.count(",")
        return ";" if semi_count > comma_count else ","

    def _load_csv(self) -> pd.DataFrame:
        try:
            with open(self.path, "r", encoding="utf-8-sig", errors="replace") as f:
                content = f.read()
        except OSError as exc:
            raise GridLoadError(f"Error reading file '{self.path}': {exc}") from exc

        delimiter = self.delimiter or self.guess_delimiter(content)
        log.info("Parsing %s with delimiter %r", self.path, delimiter)
        try:
            return pd.read_csv(
                io.StringIO(content),
                sep=delimiter,
                header=None,
                dtype=str,
                keep_default_na=False,
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except pd.errors.ParserError as exc:
            raise GridLoadError(f"Error reading CSV from '{self.path}': {exc}") from exc

    # ---------- spreadsheets ----------
    def _load_excel(self) -> pd.DataFrame:
        if self.ext != ".xls":
            self._ensure_excel_engine()
        try:
            return pd.read_excel(self.path, sheet_name=0, header=None, dtype=object)
        except ImportError as exc:
            raise GridLoadError(f"Excel support is missing an engine: {exc}") from exc
        except (ValueError, OSError, zipfile.BadZipFile) as exc:
            raise GridLoadError(f"Error reading workbook '{self.path}': {exc}") from exc

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        raise GridLoadError(
            "XLSX support requires openpyxl. Install via: pip install openpyxl"
        )

    # ---------- records ----------
    @staticmethod
    def _split_records(df: pd.DataFrame) -> tuple[list[str], list[list[str]]]:
        if df is None or df.empty:
            return [], []
        records = [
            [FileTypeHandler._cell_text(v).strip(" ") for v in record]
            for record in df.itertuples(index=False, name=None)
        ]
        return records[0], records[1:]

    @staticmethod
    def _cell_text(value) -> str:
        """Display text of one cell; dates drop a midnight time."""
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return ""
        if isinstance(value, datetime.datetime):
            if value.time() == datetime.time():
                return value.strftime("%Y-%m-%d")
            return value.strftime("%Y-%m-%d %H:%M:%S")
        if isinstance(value, datetime.date):
            return value.isoformat()
        return str(value)

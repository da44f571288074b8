"""Parsing of uploaded translation files.

Accepted formats:
- Excel (.xlsx via openpyxl, .xls via xlrd): first sheet, one row per
  translation, columns module, translation_key, en, de, fr, es
- JSON (.json): an array of objects with the same keys, or a single object

The parsed rows are handed to ``crud.bulk_import`` unchanged; row-level
validation happens there so a bad row never rejects the whole file.
"""

import io
import json
from pathlib import PurePath
from typing import Any

import pandas as pd

from translation_admin.core.exceptions import ValidationError
from translation_admin.core.logging import get_logger
from translation_admin.translations.models import IMPORT_COLUMNS, REQUIRED_IMPORT_COLUMNS

logger = get_logger(__name__)

# File extension -> pandas reader engine
EXCEL_ENGINES: dict[str, str] = {"xlsx": "openpyxl", "xls": "xlrd"}
SUPPORTED_EXTENSIONS: tuple[str, ...] = (*EXCEL_ENGINES, "json")


def file_extension(filename: str | None) -> str:
    return PurePath(filename or "").suffix.lower().lstrip(".")


def parse_upload(
    filename: str | None, content: bytes, max_bytes: int | None = None
) -> list[Any]:
    """Turn an uploaded file into a list of translation rows.

    Raises:
        ValidationError: If the file is missing, too large, of an unsupported
            type, unreadable, or an Excel sheet lacks a required column
    """
    if not content:
        raise ValidationError("No file uploaded", field="file")
    if max_bytes is not None and len(content) > max_bytes:
        raise ValidationError(
            f"File is too large (limit {max_bytes} bytes)", field="file"
        )

    extension = file_extension(filename)
    if extension in EXCEL_ENGINES:
        rows = _parse_excel(content, EXCEL_ENGINES[extension])
    elif extension == "json":
        rows = _parse_json(content)
    else:
        raise ValidationError(
            "Unsupported file format. Please upload Excel or JSON files.",
            field="file",
        )

    logger.info("translation_file_parsed", filename=filename, rows=len(rows))
    return rows


def _parse_excel(content: bytes, engine: str) -> list[dict[str, Any]]:
    try:
        frame = pd.read_excel(io.BytesIO(content), sheet_name=0, dtype=str, engine=engine)
    except ImportError:
        raise
    except Exception as e:
        # Reader errors differ per engine (BadZipFile, XLRDError, ValueError...)
        logger.warning("spreadsheet_read_failed", engine=engine, error=str(e))
        raise ValidationError("Could not read the spreadsheet", field="file") from e

    frame.columns = [str(column).strip().lower() for column in frame.columns]
    if frame.empty:
        raise ValidationError("Excel file is empty", field="file")

    for column in REQUIRED_IMPORT_COLUMNS:
        if column not in frame.columns:
            raise ValidationError(f"Missing required column: {column}", field=column)

    columns = [column for column in IMPORT_COLUMNS if column in frame.columns]
    records: list[dict[str, Any]] = frame[columns].fillna("").to_dict(orient="records")
    return records


def _parse_json(content: bytes) -> list[Any]:
    try:
        data = json.loads(content.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError("Invalid JSON file", field="file") from e

    return data if isinstance(data, list) else [data]

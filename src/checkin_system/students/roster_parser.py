"""Parse an uploaded roster (CSV or XLSX) into students.

Expected columns: Name and Class Type, matched case-insensitively against a
few common header spellings. Row-level problems are collected, not raised.
"""
from __future__ import annotations

import csv
import io
import zipfile
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import IO, Optional, Sequence

import pandas as pd

from ..core.enums import ClassType
from ..core.exceptions import ValidationError

NAME_HEADERS = ("name", "student name", "studentname", "student")
CLASS_TYPE_HEADERS = ("class type", "classtype", "type", "class")

CLASS_TYPE_ALIASES = {
    "weekend": ClassType.WEEKEND,
    "weekends": ClassType.WEEKEND,
    "saturday": ClassType.WEEKEND,
    "sunday": ClassType.WEEKEND,
    "weekday": ClassType.WEEKDAY,
    "weekdays": ClassType.WEEKDAY,
    "monday": ClassType.WEEKDAY,
    "tuesday": ClassType.WEEKDAY,
    "wednesday": ClassType.WEEKDAY,
    "thursday": ClassType.WEEKDAY,
    "friday": ClassType.WEEKDAY,
    "both": ClassType.BOTH,
    "all": ClassType.BOTH,
    "weekend and weekday": ClassType.BOTH,
    "weekday and weekend": ClassType.BOTH,
}

SUPPORTED_EXTENSIONS = (".csv", ".xlsx")


@dataclass(frozen=True)
class ParsedStudent:
    name: str
    class_type: ClassType


@dataclass
class ParseResult:
    students: list[ParsedStudent] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    total_rows: int = 0


def parse_class_type(value: str) -> Optional[ClassType]:
    return CLASS_TYPE_ALIASES.get(str(value).strip().lower())


def _find_column(headers: Sequence[str], candidates: Sequence[str]) -> int:
    for name in candidates:
        if name in headers:
            return headers.index(name)
    return -1


def _cell(row: Sequence, index: int) -> str:
    if index >= len(row):
        return ""
    value = row[index]
    return "" if value is None else str(value).strip()


def parse_rows(rows: Sequence[Sequence]) -> ParseResult:
    result = ParseResult(total_rows=len(rows))

    if len(rows) < 2:
        result.errors.append("File must contain at least a header row and one data row")
        return result

    headers = [str(h).strip().lower() for h in rows[0]]
    name_col = _find_column(headers, NAME_HEADERS)
    type_col = _find_column(headers, CLASS_TYPE_HEADERS)

    if name_col == -1:
        result.errors.append('Could not find "Name" column. Please ensure the file has a "Name" or "Student Name" column.')
    if type_col == -1:
        result.errors.append('Could not find "Class Type" column. Please ensure the file has a "Class Type" or "Type" column.')
    if name_col == -1 or type_col == -1:
        return result

    for i, row in enumerate(rows[1:], start=2):
        if not any(_cell(row, j) for j in range(len(row))):
            continue

        name = _cell(row, name_col)
        raw_type = _cell(row, type_col)

        if not name:
            result.errors.append(f"Row {i}: Name is empty")
            continue

        class_type = parse_class_type(raw_type)
        if class_type is None:
            result.errors.append(f'Row {i}: Invalid class type "{raw_type}". Must be "Weekend", "Weekday", or "Both".')
            continue

        result.students.append(ParsedStudent(name=name, class_type=class_type))

    return result


def _read_csv_rows(stream: IO) -> list[list[str]]:
    # csv.reader keeps ragged rows (e.g. a trailing note cell) that
    # pandas.read_csv rejects.
    try:
        text = stream.read().decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ValidationError("CSV roster must be UTF-8 encoded")
    try:
        return [row for row in csv.reader(io.StringIO(text)) if row]
    except csv.Error as e:
        raise ValidationError(f"Could not read CSV roster: {e}")


def _read_xlsx_rows(stream: IO) -> list[list[str]]:
    try:
        frame = pd.read_excel(stream, header=None, dtype=str, keep_default_na=False, engine="openpyxl")
    except (zipfile.BadZipFile, ValueError, KeyError):
        raise ValidationError("Could not read the .xlsx roster. Save it as an Excel workbook and try again")
    return frame.values.tolist()


def read_roster_file(stream: IO, filename: str) -> ParseResult:
    extension = PurePath(filename or "").suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise ValidationError("Unsupported file type. Upload a .csv or .xlsx roster")

    if extension == ".csv":
        rows = _read_csv_rows(stream)
    else:
        rows = _read_xlsx_rows(stream)

    if not rows:
        raise ValidationError("Sheet is empty")

    return parse_rows(rows)


def find_duplicate_names(students: Sequence[ParsedStudent]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for s in students:
        key = s.name.lower()
        if key in seen and s.name not in duplicates:
            duplicates.append(s.name)
        seen.add(key)
    return duplicates

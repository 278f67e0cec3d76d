import logging
from pathlib import Path

import pandas as pd

from exam_seating.config import TAG_SEPARATOR
from exam_seating.errors import ImportFormatError, ImportReadError
from exam_seating.models import Room, Student

LOG = logging.getLogger(__name__)


def _read_table(file_path, required_cols):
    path = Path(file_path)
    try:
        if path.suffix.lower() == ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(path, dtype=str, keep_default_na=False, engine="openpyxl")
    except Exception as e:
        raise ImportReadError(path, e) from e

    df.columns = [str(c).strip() for c in df.columns]
    if not required_cols.issubset(df.columns):
        raise ImportFormatError(path, required_cols - set(df.columns))
    return df


def _tags(value):
    return tuple(t.strip() for t in str(value or "").split(TAG_SEPARATOR) if t.strip())


def _int(row, column, source, line, default=0):
    s = str(row.get(column) or "").strip()
    if not s:
        return default
    try:
        number = float(s)
    except ValueError:
        number = None
    # spreadsheets hand back whole numbers as "30.0"
    if number is None or not number.is_integer():
        raise ImportReadError(source, f"row {line}, column {column!r}: {s!r} is not a whole number")
    return int(number)


def student_import_excel(file_path):

    students = []
    skipped = 0
    df = _read_table(file_path, {"student_id", "name", "subject"})

    for _, row in df.iterrows():
        stu_id = str(row["student_id"]).strip()
        if not stu_id:
            skipped += 1
            continue

        students.append(
            Student(
                student_id = stu_id,
                name = str(row["name"]).strip(),
                subject = str(row["subject"]).strip(),
                special_requirements = _tags(row.get("special_requirements"))
            )
        )

    LOG.info("Imported %d students from %s (%d blank rows skipped)", len(students), file_path, skipped)
    return students


def room_import_excel(file_path):

    rooms = []
    df = _read_table(file_path, {"room_id", "name", "capacity"})

    # header is spreadsheet row 1
    for line, (_, row) in enumerate(df.iterrows(), start=2):
        room_id = str(row["room_id"]).strip()
        if not room_id:
            continue

        rooms.append(
            Room(
                room_id = room_id,
                name = str(row["name"]).strip(),
                capacity = _int(row, "capacity", file_path, line),
                rows = _int(row, "rows", file_path, line),
                columns = _int(row, "columns", file_path, line),
                facilities = _tags(row.get("facilities"))
            )
        )

    LOG.info("Imported %d rooms from %s", len(rooms), file_path)
    return rooms

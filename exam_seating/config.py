"""Seat allocation settings."""
import os
from pathlib import Path

# Fixed seat grid used for row/column derivation, regardless of a room's declared columns.
SEATS_PER_ROW = 5

ACCESSIBLE_FACILITY = os.environ.get("EXAM_SEATING_ACCESSIBLE_FACILITY", "Wheelchair Access")

QR_PREFIX = "QR"

EXPORT_DIR = Path(os.environ.get("EXAM_SEATING_EXPORT_DIR", "exports"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

TAG_SEPARATOR = ";"

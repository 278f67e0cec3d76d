import logging
from pathlib import Path

import pandas as pd
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from exam_seating.allocator import sort_rooms
from exam_seating.config import EXPORT_DIR

LOG = logging.getLogger(__name__)

COLUMNS = [
    "exam_id", "student_id", "name", "subject", "room_id", "room_name",
    "seat_number", "row", "column", "qr_code",
]


def arrangement_to_dataframe(arrangement, students, rooms):
    by_student = {s.student_id: s for s in students}
    by_room = {r.room_id: r for r in rooms}

    data = []
    for a in arrangement.assignments:
        student = by_student.get(a.student_id)
        room = by_room.get(a.room_id)
        data.append({
            "exam_id": arrangement.exam_id,
            "student_id": a.student_id,
            "name": student.name if student else "",
            "subject": student.subject if student else "",
            "room_id": a.room_id,
            "room_name": room.name if room else "",
            "seat_number": a.seat_number,
            "row": a.row,
            "column": a.column,
            "qr_code": a.qr_code
        })

    return pd.DataFrame(data, columns=COLUMNS)


def export_excel(arrangement, students, rooms, file_path=None):
    file_path = Path(file_path or EXPORT_DIR / f"allocation_{arrangement.exam_id}.xlsx")
    file_path.parent.mkdir(parents=True, exist_ok=True)

    df = arrangement_to_dataframe(arrangement, students, rooms)
    df.to_excel(file_path, index=False, engine="openpyxl")

    LOG.info("Wrote %d seating rows to %s", len(df), file_path)
    return file_path


def export_pdf(arrangement, students, rooms, file_path=None):
    file_path = Path(file_path or EXPORT_DIR / f"allocation_{arrangement.exam_id}.pdf")
    file_path.parent.mkdir(parents=True, exist_ok=True)

    names = {s.student_id: s.name for s in students}

    c = canvas.Canvas(str(file_path), pagesize=A4)
    width, height = A4

    for room in sort_rooms(rooms):
        seated = arrangement.assignments_for_room(room.room_id)
        if not seated:
            continue

        y = height - 50
        c.setFont("Helvetica-Bold", 14)
        c.drawString(50, y, f"Seating Arrangement - {arrangement.exam_id} - Room {room.room_id}")
        y -= 30

        c.setFont("Helvetica", 10)
        c.drawString(50, y, "Seat")
        c.drawString(100, y, "Stu ID")
        c.drawString(190, y, "Name")
        c.drawString(360, y, "Row")
        c.drawString(410, y, "Column")
        y -= 15

        c.line(50, y, 550, y)
        y -= 15

        for a in seated:
            if y < 60:
                c.showPage()
                c.setFont("Helvetica", 10)
                y = height - 50

            c.drawString(50, y, str(a.seat_number))
            c.drawString(100, y, a.student_id)
            c.drawString(190, y, names.get(a.student_id, "")[:28])
            c.drawString(360, y, str(a.row))
            c.drawString(410, y, str(a.column))
            y -= 15

        c.showPage()

    c.save()

    LOG.info("Wrote seating PDF to %s", file_path)
    return file_path

"""
Command-line seat allocation.

Reads a roster and a room list (Excel or CSV), seats every student and
prints the result, optionally exporting it as Excel and/or PDF.
"""
import argparse
import logging
import random
import sys

from exam_seating.allocator import allocate, allocate_with_special_requirements
from exam_seating.config import LOG_FORMAT
from exam_seating.errors import SeatingError
from exam_seating.export import export_excel, export_pdf
from exam_seating.models import Exam
from exam_seating.seat_stats import statistics
from exam_seating.student_import import room_import_excel, student_import_excel

LOG = logging.getLogger("exam_seating")


def build_parser():
    p = argparse.ArgumentParser(description="Allocate exam seats across rooms")
    p.add_argument("students", help="Roster workbook (.xlsx) or .csv")
    p.add_argument("rooms", help="Room workbook (.xlsx) or .csv")
    p.add_argument("--exam-id", required=True)
    p.add_argument("--subject", default="")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible shuffling")
    p.add_argument("--special", action="store_true",
                   help="Seat students with special requirements in accessible rooms first")
    p.add_argument("--excel", help="Write the arrangement to this .xlsx file")
    p.add_argument("--pdf", help="Write per-room seating sheets to this .pdf file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    exam = Exam(exam_id=args.exam_id, subject=args.subject)

    try:
        students = student_import_excel(args.students)
        rooms = room_import_excel(args.rooms)
        run = allocate_with_special_requirements if args.special else allocate
        arrangement = run(exam, students, rooms, rng=rng)
    except SeatingError as e:
        LOG.error("Seat allocation failed: %s", e)
        return 1

    names = {s.student_id: s.name for s in students}

    print("\n--- Seat Allocation ---")
    for a in arrangement.assignments:
        print(
            f"{names[a.student_id]} -> Room {a.room_id} | Seat {a.seat_number} | Row {a.row} | Column {a.column}"
        )

    stats = statistics(arrangement)
    print("\n--- Statistics ---")
    print(f"Students: {stats.total_students}, Rooms: {stats.total_rooms}, "
          f"Average per room: {stats.average_per_room:.2f}")
    for room_id, count in stats.per_room_counts.items():
        print(f"  {room_id}: {count}")

    if args.excel:
        export_excel(arrangement, students, rooms, args.excel)
    if args.pdf:
        export_pdf(arrangement, students, rooms, args.pdf)

    return 0


if __name__ == "__main__":
    sys.exit(main())

import logging
import random
from collections import Counter
from datetime import datetime, timezone

from exam_seating.config import ACCESSIBLE_FACILITY
from exam_seating.errors import CapacityError
from exam_seating.layouts import generate_layout, qr_code
from exam_seating.models import SeatingArrangement, SeatingAssignment
from exam_seating.sequencer import adjacent_conflicts, sequence
from exam_seating.validation import check_capacity, total_capacity, validate_inputs

LOG = logging.getLogger(__name__)


def sort_rooms(rooms):
    """Rooms ascending by capacity; equal capacities keep their input order."""
    return sorted(rooms, key=lambda r: r.capacity)


def allocate_students(students, room, first_seat=1):
    allocation = []
    index = 0

    for seat in generate_layout(room.capacity - first_seat + 1, first_seat):
        if index >= len(students):
            break

        student = students[index]
        allocation.append(
            SeatingAssignment(
                student_id=student.student_id,
                room_id=room.room_id,
                seat_number=seat.seat_number,
                row=seat.row,
                column=seat.column,
                qr_code=qr_code(student.student_id, room.room_id, seat.seat_number)
            )
        )

        index += 1
    return allocation


def fill(ordered, rooms, occupied=None):
    """
    Give each room, smallest first, the next consecutive slice of ``ordered``.

    ``occupied`` maps room ids to seats already taken in an earlier pass;
    those rooms continue numbering after their taken seats.
    """
    occupied = occupied or {}
    free = sum(r.capacity - occupied.get(r.room_id, 0) for r in rooms)
    if len(ordered) > free:
        raise CapacityError(len(ordered), free)

    assignments = []
    cursor = 0

    for room in sort_rooms(rooms):
        if cursor >= len(ordered):
            break

        used = occupied.get(room.room_id, 0)
        take = min(room.capacity - used, len(ordered) - cursor)
        if take <= 0:
            continue

        placed = allocate_students(ordered[cursor:cursor + take], room, first_seat=used + 1)
        LOG.debug("Room %s: seats %d-%d filled", room.room_id, used + 1, used + len(placed))
        assignments.extend(placed)
        cursor += take

    return assignments


def _arrangement(exam, students, rooms, assignments):
    return SeatingArrangement(
        exam_id=exam.exam_id,
        total_students=len(students),
        total_rooms=len(rooms),
        generated_at=datetime.now(timezone.utc),
        assignments=tuple(assignments)
    )


def allocate(exam, students, rooms, rng=None):
    """
    Build a seating arrangement for ``exam``.

    Raises ValidationError for bad input and CapacityError when the rooms
    cannot hold the roster. Nothing is assigned in either case.
    """
    validate_inputs(exam, students, rooms)
    check_capacity(students, rooms)

    ordered = sequence(students, rng)
    assignments = fill(ordered, rooms)

    LOG.info(
        "Exam %s: seated %d students in %d rooms (%d adjacent same-subject pairs)",
        exam.exam_id, len(assignments), len(rooms), adjacent_conflicts(ordered)
    )
    return _arrangement(exam, students, rooms, assignments)


def allocate_with_special_requirements(exam, students, rooms, rng=None, facility=ACCESSIBLE_FACILITY):
    """
    Seat students with special requirements in rooms offering ``facility``
    first, then everybody else in the capacity that remains.
    """
    validate_inputs(exam, students, rooms)
    check_capacity(students, rooms)

    if rng is None:
        rng = random.Random()

    special = [s for s in students if s.has_special_requirements]
    regular = [s for s in students if not s.has_special_requirements]
    accessible = [r for r in rooms if r.has_facility(facility)]

    ordered_special = sequence(special, rng)
    seatable = min(len(ordered_special), total_capacity(accessible))

    assignments = fill(ordered_special[:seatable], accessible)
    if seatable < len(ordered_special):
        LOG.warning(
            "Exam %s: %d students with special requirements could not be placed in rooms with %r",
            exam.exam_id, len(ordered_special) - seatable, facility
        )

    occupied = Counter(a.room_id for a in assignments)
    remaining = ordered_special[seatable:] + sequence(regular, rng)
    assignments.extend(fill(remaining, rooms, occupied))

    LOG.info(
        "Exam %s: seated %d students (%d in accessible rooms) across %d rooms",
        exam.exam_id, len(assignments), seatable, len(rooms)
    )
    return _arrangement(exam, students, rooms, assignments)

from collections import Counter

from exam_seating.errors import CapacityError, ValidationError


def _duplicates(ids):
    counts = Counter(ids)
    seen = []
    for i in ids:
        if counts[i] > 1 and i not in seen:
            seen.append(i)
    return seen


def validate_inputs(exam, students, rooms):
    if exam is None:
        raise ValidationError(ValidationError.MISSING_EXAM, "Exam cannot be null")

    if not students:
        raise ValidationError(ValidationError.EMPTY_ROSTER, "Students list cannot be null or empty")

    if not rooms:
        raise ValidationError(ValidationError.EMPTY_ROOMS, "Rooms list cannot be null or empty")

    dup_students = _duplicates([s.student_id for s in students])
    if dup_students:
        raise ValidationError(
            ValidationError.DUPLICATE_STUDENT,
            f"Duplicate student ID found: {', '.join(map(str, dup_students))}",
            dup_students
        )

    dup_rooms = _duplicates([r.room_id for r in rooms])
    if dup_rooms:
        raise ValidationError(
            ValidationError.DUPLICATE_ROOM,
            f"Duplicate room ID found: {', '.join(map(str, dup_rooms))}",
            dup_rooms
        )

    bad_rooms = [r.room_id for r in rooms if r.capacity <= 0]
    if bad_rooms:
        raise ValidationError(
            ValidationError.INVALID_CAPACITY,
            f"Room capacity must be positive: {', '.join(map(str, bad_rooms))}",
            bad_rooms
        )


def total_capacity(rooms):
    return sum(r.capacity for r in rooms)


def check_capacity(students, rooms):
    available = total_capacity(rooms)
    if len(students) > available:
        raise CapacityError(len(students), available)

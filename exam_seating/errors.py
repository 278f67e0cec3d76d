class SeatingError(Exception):
    """Base class for every failure raised while building a seating arrangement."""


class ValidationError(SeatingError):

    MISSING_EXAM = "missing_exam"
    EMPTY_ROSTER = "empty_roster"
    EMPTY_ROOMS = "empty_rooms"
    DUPLICATE_STUDENT = "duplicate_student"
    DUPLICATE_ROOM = "duplicate_room"
    INVALID_CAPACITY = "invalid_capacity"

    def __init__(self, kind, message, identifiers=()):
        super().__init__(message)
        self.kind = kind
        self.identifiers = tuple(identifiers)


class CapacityError(SeatingError):

    def __init__(self, required, available):
        super().__init__(
            f"Not enough room capacity for all students: {required} students, {available} seats"
        )
        self.required = required
        self.available = available

    @property
    def shortage(self):
        return self.required - self.available


class ImportFormatError(SeatingError):

    def __init__(self, source, missing):
        missing = sorted(missing)
        super().__init__(f"{source}: missing columns {missing}")
        self.source = str(source)
        self.missing = tuple(missing)


class ImportReadError(SeatingError):

    def __init__(self, source, reason):
        super().__init__(f"{source}: read failed: {reason}")
        self.source = str(source)
        self.reason = str(reason)

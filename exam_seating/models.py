from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Exam:
    exam_id: str
    subject: str = ""
    exam_date: Optional[str] = None
    session: Optional[str] = None


@dataclass(frozen=True)
class Student:
    student_id: str
    name: str
    subject: str
    special_requirements: Tuple[str, ...] = ()

    @property
    def has_special_requirements(self):
        return bool(self.special_requirements)


@dataclass(frozen=True)
class Room:
    room_id: str
    name: str
    capacity: int
    rows: int = 0
    columns: int = 0
    facilities: Tuple[str, ...] = ()

    def has_facility(self, facility):
        return facility in self.facilities


@dataclass(frozen=True)
class SeatingAssignment:
    student_id: str
    room_id: str
    seat_number: int
    row: int
    column: int
    qr_code: str


@dataclass(frozen=True)
class SeatingArrangement:
    exam_id: str
    total_students: int
    total_rooms: int
    generated_at: datetime
    assignments: Tuple[SeatingAssignment, ...] = field(default_factory=tuple)

    def assignments_for_room(self, room_id):
        return [a for a in self.assignments if a.room_id == room_id]

    def assignment_for_student(self, student_id):
        """Seat of ``student_id`` (matched case-insensitively), or None."""
        wanted = str(student_id).strip().lower()
        for a in self.assignments:
            if a.student_id.lower() == wanted:
                return a
        return None


@dataclass(frozen=True)
class RoomSummary:
    room_id: str
    name: str
    total_seats: int
    occupied_seats: int

    @property
    def available_seats(self):
        return self.total_seats - self.occupied_seats

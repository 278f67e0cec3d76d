from exam_seating.allocator import allocate, allocate_with_special_requirements, fill
from exam_seating.errors import CapacityError, ImportFormatError, ImportReadError, SeatingError, ValidationError
from exam_seating.models import Exam, Room, RoomSummary, SeatingArrangement, SeatingAssignment, Student
from exam_seating.sequencer import sequence
from exam_seating.seat_stats import SeatingStatistics, room_grid, room_summaries, statistics

__all__ = [
    "allocate", "allocate_with_special_requirements", "fill", "sequence",
    "statistics", "room_summaries", "room_grid", "SeatingStatistics",
    "Exam", "Room", "RoomSummary", "SeatingArrangement", "SeatingAssignment", "Student",
    "SeatingError", "ValidationError", "CapacityError", "ImportFormatError", "ImportReadError",
]

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from exam_seating.allocator import sort_rooms
from exam_seating.config import SEATS_PER_ROW
from exam_seating.models import RoomSummary

EMPTY_SEAT = "Empty"


@dataclass(frozen=True)
class SeatingStatistics:
    total_students: int
    total_rooms: int
    average_per_room: float
    per_room_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self):
        return {
            "totalStudents": self.total_students,
            "totalRooms": self.total_rooms,
            "averagePerRoom": self.average_per_room,
            "perRoomCounts": dict(self.per_room_counts),
        }


def statistics(arrangement) -> SeatingStatistics:
    per_room = Counter(a.room_id for a in arrangement.assignments)
    average = (
        arrangement.total_students / arrangement.total_rooms
        if arrangement.total_rooms else 0.0
    )
    return SeatingStatistics(
        total_students=arrangement.total_students,
        total_rooms=arrangement.total_rooms,
        average_per_room=float(average),
        per_room_counts=dict(per_room)
    )


def room_summaries(arrangement, rooms):
    occupied = Counter(a.room_id for a in arrangement.assignments)
    return [
        RoomSummary(
            room_id=r.room_id,
            name=r.name,
            total_seats=r.capacity,
            occupied_seats=occupied.get(r.room_id, 0)
        )
        for r in sort_rooms(rooms)
    ]


def room_grid(arrangement, room, students=None):
    """
    Rows of seat labels for ``room`` on the fixed seat grid.

    Occupied seats show the student id, or ``"id - name"`` when ``students``
    is given; free seats show ``EMPTY_SEAT``.
    """
    names = {s.student_id: s.name for s in students or ()}
    rows = max(1, math.ceil(room.capacity / SEATS_PER_ROW))
    grid = [[EMPTY_SEAT] * SEATS_PER_ROW for _ in range(rows)]

    for a in arrangement.assignments_for_room(room.room_id):
        label = f"{a.student_id} - {names[a.student_id]}" if a.student_id in names else a.student_id
        if a.row <= rows:
            grid[a.row - 1][a.column - 1] = label

    return grid

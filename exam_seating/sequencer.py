"""Anti-adjacency ordering of a roster.

Students are grouped by subject, each group is shuffled on its own, and the
groups are merged round-robin so neighbours come from different subjects
for as long as more than one group still has members.
"""
import logging
import random
from typing import Dict, List, Optional

from exam_seating.models import Student

LOG = logging.getLogger(__name__)


def group_by_subject(students) -> Dict[str, List[Student]]:
    groups = {}
    for s in students:
        groups.setdefault(s.subject, []).append(s)
    return groups


def sequence(students, rng: Optional[random.Random] = None) -> List[Student]:
    if rng is None:
        rng = random.Random()

    groups = list(group_by_subject(students).values())
    if not groups:
        return []

    for group in groups:
        rng.shuffle(group)

    longest = max(len(g) for g in groups)
    ordered = []
    for i in range(longest):
        for group in groups:
            if i < len(group):
                ordered.append(group[i])

    LOG.debug(
        "Sequenced %d students from %d subject groups (largest group %d)",
        len(ordered), len(groups), longest
    )
    return ordered


def adjacent_conflicts(ordered) -> int:
    """Number of neighbouring pairs that share a subject."""
    return sum(
        1 for prev, cur in zip(ordered, ordered[1:])
        if prev.subject == cur.subject
    )

"""
Group stage distribution.
"""
import string
from typing import Dict, List

MIN_GROUPS = 2
MAX_GROUPS = 8


def create_group_labels(count: int) -> List[str]:
    """Return the first `count` letters of the alphabet: ['A', 'B', ...]."""
    return list(string.ascii_uppercase[:count])


def distribute_into_groups(teams, enabled: bool, group_count: int) -> Dict[str, List[Dict]]:
    """
    Spread teams over groups round-robin style.

    Team at index i lands in group labels[i % group_count] with a 1-based
    group_rank of i // group_count + 1, so group sizes differ by at most one.
    Group rank is the distribution order, not a standing.

    Returns an empty dict when the group stage is disabled or fewer than
    MIN_GROUPS groups are requested.
    """
    if not enabled or group_count < MIN_GROUPS:
        return {}

    labels = create_group_labels(group_count)
    assignments = {label: [] for label in labels}

    for index, team in enumerate(teams):
        group = labels[index % len(labels)]
        group_rank = index // len(labels) + 1
        assignments[group].append({
            **team.to_dict(),
            'group': group,
            'group_rank': group_rank,
        })

    return assignments

"""
Global seed ordering for the knockout bracket.
"""
from typing import Dict, List


def compute_seeded_teams(teams, groups: Dict[str, List[Dict]], promotion_per_group: int,
                         use_groups: bool) -> List[Dict]:
    """
    Build the single, globally ordered seed list.

    With groups, the top `promotion_per_group` teams of each group (by
    group_rank) are promoted, group by group in label order, and labelled
    "A1", "A2", "B1", ... Without groups every team is seeded in the given
    order and labelled "S1", "S2", ...

    seed_rank is always the contiguous sequence 1..K. A short or empty list is
    a valid result; deciding whether a bracket can be built is up to the caller.
    """
    seeded_teams = []

    if use_groups and groups:
        for group in sorted(groups.keys()):
            ranked = sorted(groups[group], key=lambda t: t['group_rank'])
            for position, team in enumerate(ranked[:promotion_per_group]):
                seeded_teams.append({
                    **team,
                    'seed_label': f"{group}{position + 1}",
                    'seed_rank': len(seeded_teams) + 1,
                })
        return seeded_teams

    for index, team in enumerate(teams):
        seeded_teams.append({
            **team.to_dict(),
            'group': None,
            'group_rank': None,
            'seed_label': f"S{index + 1}",
            'seed_rank': index + 1,
        })

    return seeded_teams

"""
Single elimination bracket generation.
"""
import math
from typing import List, Dict, Optional

from core.formats import FormatOptions
from core.models import team_slot, winner_slot, bye_slot, is_bye


def calculate_bracket_size(num_teams: int) -> int:
    """Calculate the bracket size (next power of 2)."""
    if num_teams <= 0:
        return 0
    return 2 ** math.ceil(math.log2(num_teams))


def calculate_byes(num_teams: int) -> int:
    """Calculate number of byes needed."""
    bracket_size = calculate_bracket_size(num_teams)
    return bracket_size - num_teams


def get_round_name(round_index: int, total_rounds: int, bracket_size: int) -> str:
    """Get the name of a round from its position and the teams entering it."""
    if round_index == total_rounds - 1:
        return "Final"
    if round_index == total_rounds - 2 and total_rounds > 2:
        return "Semi-final"

    teams_in_round = bracket_size // 2 ** round_index
    if teams_in_round >= 8:
        return f"Round of {teams_in_round}"
    if teams_in_round == 4:
        return "Semi-final"
    return f"Round {round_index + 1}"


def determine_match_format(round_index: int, total_rounds: int, options: FormatOptions) -> str:
    """Pick the series format for every match of a round."""
    if round_index == total_rounds - 1:
        return options.final
    if round_index == total_rounds - 2 and total_rounds > 2:
        return options.semifinal
    return options.base


def _match_id(round_index: int, match_index: int) -> str:
    return f"R{round_index + 1}-M{match_index + 1}"


def build_bracket_rounds(seeded_teams: List[Dict], format_options: FormatOptions) -> List[Dict]:
    """
    Build every round of a single elimination bracket.

    Teams are ordered by seed_rank and padded with byes up to the next power
    of two. First round match j pairs position j with position N-1-j, so the
    top seed always faces the bottom seed. Later rounds only hold winner
    placeholders: slot k of match m points at match 2m+k of the previous round.

    Returns an empty list when fewer than two teams are seeded.
    """
    if len(seeded_teams) < 2:
        return []

    sorted_by_seed = sorted(seeded_teams, key=lambda t: t['seed_rank'])
    bracket_size = calculate_bracket_size(len(sorted_by_seed))
    padded: List[Optional[Dict]] = sorted_by_seed + [None] * (bracket_size - len(sorted_by_seed))
    total_rounds = int(math.log2(bracket_size))

    rounds = []
    first_round_matches = []
    for index in range(bracket_size // 2):
        primary = padded[index]
        secondary = padded[bracket_size - 1 - index]
        first_round_matches.append({
            'id': _match_id(0, index),
            'round_index': 0,
            'slots': (
                team_slot(primary) if primary is not None else bye_slot(),
                team_slot(secondary) if secondary is not None else bye_slot(),
            ),
            'format': determine_match_format(0, total_rounds, format_options),
        })

    rounds.append({
        'id': 'R1',
        'name': get_round_name(0, total_rounds, bracket_size),
        'matches': first_round_matches,
    })

    previous_round = first_round_matches
    for round_index in range(1, total_rounds):
        match_count = math.ceil(len(previous_round) / 2)
        current_round = []

        for match_index in range(match_count):
            slots = []
            for source_index in (match_index * 2, match_index * 2 + 1):
                if source_index < len(previous_round):
                    slots.append(winner_slot(previous_round[source_index]['id']))
                else:
                    slots.append(bye_slot())

            current_round.append({
                'id': _match_id(round_index, match_index),
                'round_index': round_index,
                'slots': tuple(slots),
                'format': determine_match_format(round_index, total_rounds, format_options),
            })

        rounds.append({
            'id': f"R{round_index + 1}",
            'name': get_round_name(round_index, total_rounds, bracket_size),
            'matches': current_round,
        })
        previous_round = current_round

    return rounds


def get_bracket_display(seeded_teams: List[Dict], format_options: FormatOptions) -> Dict:
    """
    Get bracket data formatted for UI display.
    """
    rounds = build_bracket_rounds(seeded_teams, format_options)

    if not rounds:
        return {
            'rounds': [],
            'bracket_size': 0,
            'total_rounds': 0,
            'total_teams': len(seeded_teams),
            'byes': 0,
            'matches_per_round': {}
        }

    bracket_size = calculate_bracket_size(len(seeded_teams))

    # Count actual matches (non-byes) per round
    matches_per_round = {}
    for bracket_round in rounds:
        actual_matches = [m for m in bracket_round['matches'] if not any(is_bye(s) for s in m['slots'])]
        matches_per_round[bracket_round['name']] = len(actual_matches)

    return {
        'rounds': rounds,
        'bracket_size': bracket_size,
        'total_rounds': len(rounds),
        'total_teams': len(seeded_teams),
        'byes': calculate_byes(len(seeded_teams)),
        'matches_per_round': matches_per_round
    }

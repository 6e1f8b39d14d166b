"""
Configuration boundary for the bracket builder.

Holds the tunable bounds, clamps raw settings into them and manages the team
list the engine is fed with. The engine functions in grouping, seeding and
elimination assume everything reaching them has been normalized here.
"""
import logging
from typing import Dict, List, Optional

from core.elimination import get_bracket_display
from core.formats import FormatOptions, is_series_format
from core.grouping import distribute_into_groups, MIN_GROUPS, MAX_GROUPS
from core.models import Team
from core.seeding import compute_seeded_teams

logger = logging.getLogger(__name__)

MIN_PARTICIPANTS = 4
MAX_PARTICIPANTS = 32
MIN_PROMOTION = 1
MAX_PROMOTION = 4

# field -> (min, max)
INT_BOUNDS = {
    'participants': (MIN_PARTICIPANTS, MAX_PARTICIPANTS),
    'group_count': (MIN_GROUPS, MAX_GROUPS),
    'promotion_per_group': (MIN_PROMOTION, MAX_PROMOTION),
}
FORMAT_FIELDS = ('base_format', 'semifinal_format', 'final_format')
TRUE_STRINGS = {'true', '1', 'yes', 'on'}
FALSE_STRINGS = {'false', '0', 'no', 'off', ''}


class InsufficientTeamsError(ValueError):
    """Raised when seed generation would leave fewer than two teams."""


def get_default_settings() -> Dict:
    """Return default builder settings."""
    return {
        'tournament_name': 'New Tournament',
        'participants': 8,
        'use_group_stage': True,
        'group_count': 4,
        'promotion_per_group': 2,
        'base_format': 'single',
        'semifinal_format': 'single',
        'final_format': 'bestOf3',
    }


def _clamp(value: int, low: int, high: int) -> int:
    return min(high, max(low, value))


def _to_bool(value, default: bool) -> bool:
    """Parse a flag that may arrive as a string from JSON or YAML."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    logger.debug("Invalid flag %r, using default", value)
    return bool(default)


def normalize_settings(data: Optional[Dict], defaults: Optional[Dict] = None) -> Dict:
    """
    Merge raw settings over the defaults and force them into range.

    Integer fields are clamped, unknown series formats fall back to the
    default and anything unparseable is replaced by the default value.
    """
    defaults = defaults if defaults is not None else get_default_settings()
    settings = dict(defaults)
    if data:
        settings.update({key: value for key, value in data.items() if key in defaults})

    for field, (low, high) in INT_BOUNDS.items():
        try:
            value = int(settings[field])
        except (TypeError, ValueError):
            logger.debug("Invalid %s %r, using default", field, settings[field])
            value = int(defaults[field])
        settings[field] = _clamp(value, low, high)

    for field in FORMAT_FIELDS:
        if not is_series_format(settings[field]):
            logger.debug("Unknown series format %r for %s", settings[field], field)
            settings[field] = defaults[field]

    settings['use_group_stage'] = _to_bool(settings['use_group_stage'], defaults['use_group_stage'])
    settings['tournament_name'] = str(settings['tournament_name']).strip() or defaults['tournament_name']
    return settings


def format_options_from_settings(settings: Dict) -> FormatOptions:
    return FormatOptions(
        base=settings['base_format'],
        semifinal=settings['semifinal_format'],
        final=settings['final_format'],
    )


def create_initial_teams(count: int) -> List[Team]:
    return [Team(id=index + 1, name=f"Team {index + 1}") for index in range(count)]


def resize_teams(teams: List[Team], count: int) -> List[Team]:
    """Grow or shrink the team list to `count`, keeping existing names."""
    if count <= len(teams):
        return [Team(id=t.id, name=t.name) for t in teams[:count]]

    resized = [Team(id=t.id, name=t.name) for t in teams]
    next_id = max((t.id for t in teams), default=0) + 1
    while len(resized) < count:
        resized.append(Team(id=next_id, name=f"Team {next_id}"))
        next_id += 1
    return resized


def rename_team(teams: List[Team], team_id, new_name: str) -> List[Team]:
    """Return a new team list with one team renamed. Blank names are ignored."""
    trimmed = (new_name or '').strip()
    if not trimmed:
        return list(teams)
    return [Team(id=t.id, name=trimmed if t.id == team_id else t.name) for t in teams]


def rename_seeded_team(seeded_teams: List[Dict], team_id, new_name: str) -> List[Dict]:
    """Apply a rename inside an already generated seed list."""
    trimmed = (new_name or '').strip()
    if not trimmed:
        return [dict(seed) for seed in seeded_teams]
    return [
        {**seed, 'name': trimmed} if seed['id'] == team_id else dict(seed)
        for seed in seeded_teams
    ]


def generate_seeds(teams: List[Team], settings: Dict) -> List[Dict]:
    """
    Group and seed the current team list.

    Raises InsufficientTeamsError when fewer than two teams would be seeded,
    since no bracket can be drawn from that.
    """
    groups = distribute_into_groups(teams, settings['use_group_stage'], settings['group_count'])
    seeded = compute_seeded_teams(
        teams, groups, settings['promotion_per_group'], settings['use_group_stage']
    )
    if len(seeded) < 2:
        raise InsufficientTeamsError("At least two teams are required to generate seeds.")
    logger.debug("Seeded %d of %d teams", len(seeded), len(teams))
    return seeded


def build_preview(teams: List[Team], settings: Dict, seeded_teams: Optional[List[Dict]] = None) -> Dict:
    """Groups for the current settings plus the bracket for the generated seeds."""
    groups = distribute_into_groups(teams, settings['use_group_stage'], settings['group_count'])
    seeded_teams = seeded_teams or []
    return {
        'groups': groups,
        'seeded_teams': seeded_teams,
        'bracket': get_bracket_display(seeded_teams, format_options_from_settings(settings)),
    }

BYE_LABEL = 'BYE'


class Team:
    def __init__(self, id, name):
        self.id = id
        self.name = name

    def to_dict(self):
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data):
        return cls(id=data['id'], name=data['name'])

    def __eq__(self, other):
        if not isinstance(other, Team):
            return NotImplemented
        return self.id == other.id and self.name == other.name

    def __repr__(self):
        return f"Team(id={self.id}, name={self.name})"


def team_slot(seeded_team):
    """Slot occupied by a concrete seeded team."""
    return {
        'type': 'team',
        'label': seeded_team['name'],
        'detail': seeded_team['seed_label'],
        'team_id': seeded_team['id'],
        'seed_rank': seeded_team['seed_rank'],
    }


def winner_slot(match_id):
    """Placeholder for the winner of an earlier match, referenced by match id."""
    label = f"Winner {match_id}"
    return {
        'type': 'winner',
        'label': label,
        'detail': label,
        'match_id': match_id,
    }


def bye_slot():
    return {'type': 'bye', 'label': BYE_LABEL}


def is_bye(slot) -> bool:
    return slot['type'] == 'bye'

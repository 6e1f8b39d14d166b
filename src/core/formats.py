"""
Knockout series formats and the per-round format configuration.
"""

SINGLE = 'single'
TWO_LEG = 'twoLeg'
BEST_OF_3 = 'bestOf3'
BEST_OF_5 = 'bestOf5'

SERIES_FORMATS = (SINGLE, TWO_LEG, BEST_OF_3, BEST_OF_5)

FORMAT_LABELS = {
    SINGLE: 'Single match',
    TWO_LEG: '2-Leg Aggregate',
    BEST_OF_3: 'Best of 3',
    BEST_OF_5: 'Best of 5',
}


def is_series_format(value) -> bool:
    return value in SERIES_FORMATS


class FormatOptions:
    """Series format for regular rounds, the semi-final round and the final."""

    def __init__(self, base=SINGLE, semifinal=SINGLE, final=BEST_OF_3):
        self.base = base
        self.semifinal = semifinal
        self.final = final

    def to_dict(self):
        return {'base': self.base, 'semifinal': self.semifinal, 'final': self.final}

    def __eq__(self, other):
        if not isinstance(other, FormatOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"FormatOptions(base={self.base}, semifinal={self.semifinal}, final={self.final})"

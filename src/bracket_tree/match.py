"""
Match table entries: which two seats meet and where the result goes.
"""
from collections import namedtuple


class Match(namedtuple("Match", ["seats", "winner_to", "loser_to"])):
    __slots__ = ()

    def __new__(cls, seats, winner_to=None, loser_to=None):
        seats = tuple(seats)
        if len(seats) != 2 or seats[0] == seats[1]:
            raise ValueError(f"A match needs two distinct seats, got {seats!r}")
        return super().__new__(cls, seats, winner_to, loser_to)

    @classmethod
    def from_dict(cls, data):
        """Build a match from a descriptor such as {'seats': [1, 3], 'winner_to': 2}."""
        if isinstance(data, cls):
            return data
        if 'seats' not in data:
            raise ValueError(f"Match descriptor has no seats: {data!r}")
        return cls(data['seats'], data.get('winner_to'), data.get('loser_to'))

    def include(self, seat):
        return seat in self.seats

    def opponent(self, seat):
        """The other seat in this match."""
        first, second = self.seats
        return second if seat == first else first

    def to_dict(self):
        data = {'seats': list(self.seats)}
        if self.winner_to is not None:
            data['winner_to'] = self.winner_to
        if self.loser_to is not None:
            data['loser_to'] = self.loser_to
        return data

"""
Bracket tree: seats stored in a binary search tree keyed by position.

The shape of the tree is decided by the order seats are added, so callers
add seats round by round (final first) to lay out a bracket. Matches link
pairs of seats to the seats their winner and loser move on to.
"""
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .match import Match
from .node import Node

logger = logging.getLogger(__name__)


class BracketError(Exception):
    """Base class for bracket configuration errors."""


class NoSeedOrderError(BracketError):
    pass


class SeedLimitExceededError(BracketError):
    pass


class Bracket:
    def __init__(self, matches: Optional[Iterable] = None, seed_order: Optional[List[int]] = None):
        self.root: Optional[Node] = None
        self.insertion_order: List[int] = []
        self.seed_order = seed_order
        self.matches: List[Match] = [Match.from_dict(m) for m in matches or []]

    @classmethod
    def from_h(cls, data: Optional[Dict], **kwargs) -> 'Bracket':
        """
        Rebuild a bracket from a `to_h` export.

        Nodes are added parent before children, which reproduces the
        exported shape exactly.
        """
        bracket = cls(**kwargs)
        pending = [data] if data else []
        while pending:
            current = pending.pop()
            bracket.add(current['position'], current.get('payload'))
            # Right is pushed first so the left subtree is added first
            if current.get('right'):
                pending.append(current['right'])
            if current.get('left'):
                pending.append(current['left'])
        return bracket

    def add(self, position: int, data: Any = None) -> None:
        """
        Add a seat at `position` holding `data`.

        Adding a position that already exists leaves the tree unchanged,
        though the attempt is still recorded in `insertion_order`.
        """
        node = Node(position, data)
        self.insertion_order.append(position)

        if self.root is None:
            self.root = node
            return

        current = self.root
        while True:
            if position < current.position:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            elif position > current.position:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                logger.debug(f"Seat {position} already exists, ignoring duplicate add")
                return

    def replace(self, position: int, payload: Any) -> bool:
        """Swap the payload at `position`. Returns False if there is no such seat."""
        node = self.at(position)
        if node is None:
            logger.debug(f"No seat at position {position} to replace")
            return False
        node.payload = payload
        return True

    def seed(self, players: Iterable) -> None:
        """
        Place players into the seats listed in `seed_order`, first player first.

        Raises NoSeedOrderError if `seed_order` is not set and
        SeedLimitExceededError if there are more players than seed slots.
        Neither error touches any seat. With fewer players than seed slots
        the remaining seats keep their current payload.
        """
        if self.seed_order is None:
            raise NoSeedOrderError('Bracket does not have a seed order.')
        players = list(players)
        if len(players) > len(self.seed_order):
            raise SeedLimitExceededError(
                f'Cannot seed {len(players)} players into {len(self.seed_order)} seed positions.'
            )

        for position, player in zip(self.seed_order, players):
            self.replace(position, player)
        logger.info(f"Seeded {len(players)} players into {len(self.seed_order)} seed positions")

    @property
    def winner(self) -> Any:
        return self.root.payload if self.root is not None else None

    def each(self) -> Iterator[Node]:
        """Yield nodes in ascending position order."""
        stack = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def __iter__(self) -> Iterator[Node]:
        return self.each()

    def __len__(self) -> int:
        return sum(1 for _ in self.each())

    @property
    def size(self) -> int:
        return len(self)

    def to_h(self) -> Optional[Dict]:
        return self.root.to_h() if self.root is not None else None

    def seats(self) -> List[Node]:
        """
        All nodes in the order their positions were first added.

        Re-adding seats in this order rebuilds the same tree, so this is the
        bracket layout rather than numeric seat order.
        """
        first_seen = {}
        for index, position in enumerate(self.insertion_order):
            first_seen.setdefault(position, index)
        # Nodes attached directly to the tree were never added; they go last
        unrecorded = len(self.insertion_order)
        return sorted(self.each(), key=lambda node: first_seen.get(node.position, unrecorded))

    to_list = seats

    def at(self, position: int) -> Optional[Node]:
        for node in self.each():
            if node.position == position:
                return node
        return None

    def match_for(self, seat: int) -> Optional[Match]:
        for match in self.matches:
            if match.include(seat):
                return match
        return None

    def match_winner(self, seat: int) -> bool:
        """
        Resolve the match `seat` played in with `seat` as the winner.

        The winner's payload is copied to `winner_to` and the loser's to
        `loser_to`, whichever of the two the match defines. Returns False
        if `seat` is not part of any match, or if either seat of the match
        is missing from the tree.
        """
        match = self.match_for(seat)
        if match is None:
            logger.debug(f"Seat {seat} is not part of any match")
            return False

        losing_seat = match.opponent(seat)
        winning_node = self.at(seat)
        losing_node = self.at(losing_seat)
        if winning_node is None or losing_node is None:
            logger.debug(f"Match {match.seats} references a seat missing from the bracket")
            return False

        if match.winner_to is not None:
            self.replace(match.winner_to, winning_node.payload)
        if match.loser_to is not None:
            self.replace(match.loser_to, losing_node.payload)

        logger.debug(f"Seat {seat} beat seat {losing_seat}")
        return True

    def match_loser(self, seat: int) -> bool:
        """Resolve the match `seat` played in with `seat` as the loser. See `match_winner`."""
        match = self.match_for(seat)
        if match is None:
            logger.debug(f"Seat {seat} is not part of any match")
            return False
        return self.match_winner(match.opponent(seat))

    def __repr__(self):
        return f"Bracket(size={len(self)}, matches={len(self.matches)})"

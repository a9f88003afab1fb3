"""
Bracket templates: building brackets from stored topologies.

A template is a plain mapping (usually kept as YAML) with:
- seats: positions in the order they are added to the tree
- starting_seats: seed order, first seed first (optional)
- matches: list of {'seats': [a, b], 'winner_to': c, 'loser_to': d} (optional)
- payloads: {position: payload} for seats that start with data (optional)
"""
import logging
import math
from typing import Any, Dict, List

import yaml

from .bracket import Bracket, BracketError
from .match import Match

logger = logging.getLogger(__name__)


class TemplateError(BracketError):
    pass


def from_template(data: Dict[str, Any]) -> Bracket:
    """Build a bracket from a template mapping."""
    if not isinstance(data, dict):
        raise TemplateError(f"Template must be a mapping, got {type(data).__name__}")
    if not data.get('seats'):
        raise TemplateError("Template has no seats")

    try:
        matches = [Match.from_dict(m) for m in data.get('matches') or []]
    except (KeyError, TypeError, ValueError) as e:
        raise TemplateError(f"Invalid match in template: {e}") from e

    payloads = data.get('payloads') or {}
    if not isinstance(payloads, dict):
        raise TemplateError(f"Template payloads must be a mapping, got {type(payloads).__name__}")
    starting_seats = data.get('starting_seats')

    bracket = Bracket(matches=matches, seed_order=list(starting_seats) if starting_seats is not None else None)
    for position in data['seats']:
        bracket.add(position, payloads.get(position))
    return bracket


def load_template(file_path: str) -> Bracket:
    """Load a bracket from a YAML template file."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        data = yaml.safe_load(file)
    bracket = from_template(data)
    logger.info(f"Loaded bracket template {file_path} with {len(bracket)} seats")
    return bracket


def to_template(bracket: Bracket) -> Dict[str, Any]:
    """Describe `bracket` as a template mapping. Inverse of `from_template`."""
    nodes = bracket.seats()
    data = {'seats': [node.position for node in nodes]}
    if bracket.seed_order is not None:
        data['starting_seats'] = list(bracket.seed_order)
    if bracket.matches:
        data['matches'] = [match.to_dict() for match in bracket.matches]
    payloads = {node.position: node.payload for node in nodes if node.payload is not None}
    if payloads:
        data['payloads'] = payloads
    return data


def dump_template(bracket: Bracket, file_path: str) -> None:
    with open(file_path, mode='w', encoding='utf-8') as file:
        yaml.safe_dump(to_template(bracket), file, default_flow_style=False, sort_keys=False)


def calculate_bracket_size(num_players: int) -> int:
    """Calculate the bracket size (next power of 2)."""
    if num_players <= 0:
        return 0
    return 2 ** math.ceil(math.log2(num_players))


def _generate_bracket_order(bracket_size: int) -> List[int]:
    """
    Generate the standard tournament bracket order.
    This ensures that if all higher seeds win, they meet in the proper rounds.

    For 8 players: [1, 8, 4, 5, 2, 7, 3, 6]
    """
    if bracket_size == 2:
        return [1, 2]

    upper_half = _generate_bracket_order(bracket_size // 2)
    lower_half = [bracket_size + 1 - seed for seed in upper_half]

    result = []
    for u, l in zip(upper_half, lower_half):
        result.extend([u, l])
    return result


def single_elimination(num_players: int, third_place: bool = False) -> Bracket:
    """
    Generate a single elimination bracket for `num_players` players.

    The bracket is padded to the next power of two. Seats are numbered
    1..2N-1 from left to right, so the final sits at position N with the
    first-round seats on the odd positions. Seeds are laid out in standard
    bracket order (1 v N, 2 v N-1, ...) and seats without a player hold 'BYE'.

    With `third_place`, the two semifinal losers drop into seats 2N and
    2N+1, whose match sends its winner to seat 2N+2.
    """
    if num_players < 2:
        raise TemplateError(f"Need at least 2 players for a bracket, got {num_players}")

    bracket_size = calculate_bracket_size(num_players)
    if third_place and bracket_size < 4:
        raise TemplateError("A third place match needs at least 4 players")

    depth = int(math.log2(bracket_size))
    top = 2 * bracket_size - 1

    seats = []
    matches = []
    for level in range(depth + 1):
        half = bracket_size >> level
        for position in range(half, 2 * bracket_size, 2 * half):
            seats.append(position)
            if level < depth:
                step = half // 2
                loser_to = None
                if third_place and level == 1:
                    loser_to = top + 1 if position < bracket_size else top + 2
                matches.append(Match((position - step, position + step), winner_to=position, loser_to=loser_to))

    first_round = list(range(1, 2 * bracket_size, 2))
    bracket_order = _generate_bracket_order(bracket_size)
    seed_order = [first_round[bracket_order.index(seed)] for seed in range(1, bracket_size + 1)]

    payloads = {}
    for seed, position in enumerate(seed_order, start=1):
        payloads[position] = f"Seed {seed}" if seed <= num_players else 'BYE'

    if third_place:
        seats.extend([top + 1, top + 2, top + 3])
        matches.append(Match((top + 1, top + 2), winner_to=top + 3))

    return from_template({
        'seats': seats,
        'starting_seats': seed_order,
        'matches': matches,
        'payloads': payloads,
    })

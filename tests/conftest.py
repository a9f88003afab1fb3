"""
Shared pytest fixtures for bracket tree tests.
"""
import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from bracket_tree import Bracket


@pytest.fixture
def bracket():
    """A 4-player bracket laid out round by round, final first."""
    bracket = Bracket(matches=[
        {'seats': [1, 3], 'winner_to': 2},
        {'seats': [5, 7], 'winner_to': 6},
        {'seats': [2, 6], 'winner_to': 4},
    ])
    for position in [4, 2, 6, 1, 3, 5, 7]:
        bracket.add(position, None)
    return bracket


@pytest.fixture
def match_bracket():
    """Two seats whose winner and loser both move on."""
    bracket = Bracket(matches=[{'seats': [10, 11], 'winner_to': 20, 'loser_to': 21}])
    bracket.add(20, None)
    bracket.add(10, 'Alice')
    bracket.add(11, 'Bob')
    bracket.add(21, None)
    return bracket


@pytest.fixture
def template_data():
    """Template mapping for the same 4-player layout as `bracket`."""
    return {
        'seats': [4, 2, 6, 1, 3, 5, 7],
        'starting_seats': [1, 5, 7, 3],
        'matches': [
            {'seats': [1, 3], 'winner_to': 2},
            {'seats': [5, 7], 'winner_to': 6},
            {'seats': [2, 6], 'winner_to': 4},
        ],
        'payloads': {1: 'Seed 1', 3: 'Seed 4', 5: 'Seed 2', 7: 'Seed 3'},
    }

"""
Tournament brackets modelled as a binary tree of seats.
"""
from .node import Node
from .match import Match
from .bracket import (
    Bracket,
    BracketError,
    NoSeedOrderError,
    SeedLimitExceededError,
)
from .templates import (
    TemplateError,
    from_template,
    load_template,
    to_template,
    dump_template,
    single_elimination,
)

__all__ = [
    'Node',
    'Match',
    'Bracket',
    'BracketError',
    'NoSeedOrderError',
    'SeedLimitExceededError',
    'TemplateError',
    'from_template',
    'load_template',
    'to_template',
    'dump_template',
    'single_elimination',
]

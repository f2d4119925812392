"""Configuration system for GenTreeLib.

This module defines the enums shared by the walker and the traversers, and
the small dataclass callers use to describe how a tree should be traversed.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Union


class WalkEventType(Enum):
    """Discriminator carried by every WalkEvent."""
    ENTER = "enter"     # Node opened, children not yet visited
    EXIT = "exit"       # Node closed, all descendants visited


class TraversalStrategy(Enum):
    """What a traversal yields.

    All strategies are driven by the same depth-first walk; they only
    differ in which part of the enter/exit stream they expose.
    """
    EVENTS = "events"           # Raw enter/exit events
    PRE_ORDER = "pre_order"     # Parent before children
    POST_ORDER = "post_order"   # Children before parent


_STRATEGY_ALIASES = {
    'events': TraversalStrategy.EVENTS,
    'walk': TraversalStrategy.EVENTS,
    'pre': TraversalStrategy.PRE_ORDER,
    'dfs_pre': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or (case-insensitive) alias

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If the strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The defaults give a plain lazy pre-order listing with no per-event
    logging.
    """

    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER

    # Emit one DEBUG record per walk event (noisy on large trees)
    log_events: bool = False

    def __post_init__(self):
        self.strategy = parse_strategy(self.strategy)

    @classmethod
    def from_kwargs(cls, **kwargs) -> 'TraversalConfig':
        """Build TraversalConfig from keyword arguments.

        Unknown keys are ignored so callers can pass through a wider set
        of options without filtering them first.

        Args:
            **kwargs: Configuration options

        Returns:
            TraversalConfig instance
        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in kwargs.items() if key in known})

from .patterns import HIDDEN, hidden_pattern, derive_pattern, partition, pattern_summary, matches_pattern
from .ranking import PatternGroup, rank_groups
from .selector import Difficulty, select_group

__all__ = [
    "HIDDEN", "hidden_pattern", "derive_pattern", "partition", "pattern_summary",
    "matches_pattern", "PatternGroup", "rank_groups", "Difficulty", "select_group",
]

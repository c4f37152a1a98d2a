"""Puzzle domain services: daily selection, guess scoring and the leaderboard.

HTTP routes and socket handlers import from here so transport concerns stay
separated from the puzzle mechanics.
"""

from .evaluator import ABSENT, CORRECT, PRESENT, evaluate
from .game import GameService, GuessOutcome
from .leaderboard import FastestTime, LeaderboardStore, RecordOutcome
from .selector import current_game_index, current_time_ms, daily_answer

__all__ = [
    'ABSENT',
    'CORRECT',
    'PRESENT',
    'evaluate',
    'GameService',
    'GuessOutcome',
    'FastestTime',
    'LeaderboardStore',
    'RecordOutcome',
    'current_game_index',
    'current_time_ms',
    'daily_answer',
]

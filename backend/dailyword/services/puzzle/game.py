from datetime import date
from typing import Callable, List, NamedTuple, Optional, Sequence

from dailyword.errors import InvalidLength, InvalidSolve, NotInWordList
from dailyword.words import WORD_LENGTH, build_vocabulary
from .evaluator import evaluate
from .leaderboard import FastestTime, LeaderboardStore, RecordOutcome
from .selector import DEFAULT_EPOCH, current_game_index, current_time_ms, daily_answer


# Leaderboard columns are 32-bit signed integers
INT32_MAX = 2**31 - 1


class GuessOutcome(NamedTuple):
    result: List[str]
    solved: bool
    game_index: int


def _require_int(value, field: str, minimum: int, maximum: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSolve(f'{field} must be an integer')
    if not minimum <= value <= maximum:
        raise InvalidSolve(f'{field} must be {minimum}..{maximum}')
    return value


class GameService:
    """Entry points behind the HTTP API.

    Holds only immutable collaborators (word list, epoch, clock) and the
    leaderboard store, so one instance is shared by every request.
    """

    def __init__(
        self,
        words: Sequence[str],
        epoch: date = DEFAULT_EPOCH,
        store: Optional[LeaderboardStore] = None,
        clock: Callable[[], int] = current_time_ms,
        max_guesses: int = 6,
    ):
        self.words = tuple(words)
        self.vocabulary = build_vocabulary(self.words)
        self.epoch = epoch
        self.store = store if store is not None else LeaderboardStore()
        self.clock = clock
        self.max_guesses = max_guesses

    def current_game(self) -> int:
        return current_game_index(self.clock(), self.epoch)

    def daily_answer(self) -> str:
        return daily_answer(self.clock(), self.words)

    def submit_guess(self, word) -> GuessOutcome:
        if not isinstance(word, str):
            raise InvalidLength()
        guess = word.strip().lower()
        if len(guess) != WORD_LENGTH:
            raise InvalidLength()
        if guess not in self.vocabulary:
            raise NotInWordList()

        # One clock reading: evaluation, the solved flag and the reported game
        # must agree even if the call straddles UTC midnight.
        now_ms = self.clock()
        answer = daily_answer(now_ms, self.words)
        return GuessOutcome(
            evaluate(guess, answer),
            guess == answer,
            current_game_index(now_ms, self.epoch),
        )

    def submit_solve(self, game_index, time_ms, num_guesses) -> RecordOutcome:
        """Record a solve; ``fastest`` on the result is the standing record."""
        game_index = _require_int(game_index, 'gameNumber', 0, INT32_MAX)
        time_ms = _require_int(time_ms, 'timeMs', 0, INT32_MAX)
        num_guesses = _require_int(num_guesses, 'numGuesses', 1, self.max_guesses)
        return self.store.record(game_index, time_ms, num_guesses)

    def get_fastest(self, game_index: int) -> Optional[FastestTime]:
        # Nothing outside the column range can have been stored
        if not -INT32_MAX - 1 <= game_index <= INT32_MAX:
            return None
        return self.store.get_fastest(game_index)

class PuzzleError(Exception):
    """Base class for request-scoped puzzle failures."""

    message = 'Puzzle error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(PuzzleError):
    """Bad client input. Always recoverable; reported back verbatim."""

    message = 'Invalid request'


class InvalidLength(ValidationError):
    message = 'Word must be 5 letters'


class NotInWordList(ValidationError):
    message = 'Not in word list'


class InvalidSolve(ValidationError):
    message = 'Invalid solve submission'


class StorageError(PuzzleError):
    """The leaderboard could not be read or written."""

    message = 'Leaderboard unavailable'

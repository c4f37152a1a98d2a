import threading
import weakref
from typing import NamedTuple, Optional

from flask import current_app
from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from dailyword import db
from dailyword.errors import StorageError
from dailyword.models import LeaderboardRecord, utcnow


class FastestTime(NamedTuple):
    time_ms: int
    num_guesses: int


class RecordOutcome(NamedTuple):
    fastest: FastestTime
    replaced: bool


# Dialects that can express "insert, or replace only if faster" as one statement
_UPSERT_INSERTS = {
    'sqlite': sqlite.insert,
    'postgresql': postgresql.insert,
}


class LeaderboardStore:
    """Fastest solve per game index, updated with a keep-minimum merge.

    ``record_if_faster`` is atomic per game index: calls for the same index
    are serialised by a per-index lock inside the process, and the write
    itself is a single conditional upsert so separate processes sharing the
    database cannot lose an update either. Different indexes never contend.
    A lock lives only while some call for its index holds or waits on it.
    """

    def __init__(self, session=None):
        self._session = session
        self._locks = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def _lock_for(self, game_index: int) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(game_index)
            if lock is None:
                lock = self._locks[game_index] = threading.Lock()
            return lock

    def get_fastest(self, game_index: int) -> Optional[FastestTime]:
        try:
            fastest = self._read(game_index)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            current_app.logger.error(f"[fastest] game={game_index} read failed: {exc}")
            raise StorageError() from exc
        return fastest

    def record_if_faster(self, game_index: int, time_ms: int, num_guesses: int) -> FastestTime:
        """Store the solve if it beats the current record, then return the record.

        The returned value is the fastest time after this call, which is the
        caller's own submission only when it won.
        """
        return self.record(game_index, time_ms, num_guesses).fastest

    def record(self, game_index: int, time_ms: int, num_guesses: int) -> RecordOutcome:
        """Like ``record_if_faster``, also reporting whether this call set the record."""
        with self._lock_for(game_index):
            try:
                replaced = self._write_if_faster(game_index, time_ms, num_guesses)
                fastest = self._read(game_index)
                self.session.commit()
            except SQLAlchemyError as exc:
                self.session.rollback()
                current_app.logger.error(f"[record] game={game_index} time_ms={time_ms} write failed: {exc}")
                raise StorageError() from exc

        current_app.logger.info(
            f"[record] game={game_index} time_ms={time_ms} replaced={replaced} fastest={fastest.time_ms}"
        )
        return RecordOutcome(fastest, replaced)

    def _read(self, game_index: int) -> Optional[FastestTime]:
        row = self.session.execute(
            select(LeaderboardRecord.time_ms, LeaderboardRecord.num_guesses)
            .where(LeaderboardRecord.game_number == game_index)
        ).first()
        if row is None:
            return None
        return FastestTime(row.time_ms, row.num_guesses)

    def _write_if_faster(self, game_index: int, time_ms: int, num_guesses: int) -> bool:
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            return self._write_locked_row(game_index, time_ms, num_guesses)

        table = LeaderboardRecord.__table__
        stmt = insert(table).values(
            game_number=game_index,
            time_ms=time_ms,
            num_guesses=num_guesses,
            created_at=utcnow(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.game_number],
            set_={
                'time_ms': stmt.excluded.time_ms,
                'num_guesses': stmt.excluded.num_guesses,
                'created_at': stmt.excluded.created_at,
            },
            where=stmt.excluded.time_ms < table.c.time_ms,
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1

    def _write_locked_row(self, game_index: int, time_ms: int, num_guesses: int) -> bool:
        # No native upsert: hold the row lock for the whole check-and-write
        row = self.session.execute(
            select(LeaderboardRecord)
            .where(LeaderboardRecord.game_number == game_index)
            .with_for_update()
        ).scalar_one_or_none()
        if row is None:
            self.session.add(LeaderboardRecord(
                game_number=game_index,
                time_ms=time_ms,
                num_guesses=num_guesses,
                created_at=utcnow(),
            ))
        elif time_ms < row.time_ms:
            row.time_ms = time_ms
            row.num_guesses = num_guesses
            row.created_at = utcnow()
        else:
            return False
        self.session.flush()
        return True

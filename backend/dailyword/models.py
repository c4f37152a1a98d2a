from datetime import datetime, timezone

from dailyword import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class LeaderboardRecord(db.Model):
    """Fastest completion recorded for one puzzle day."""
    __tablename__ = 'fastest_times'
    game_number = db.Column(db.Integer, primary_key=True, autoincrement=False)
    time_ms = db.Column(db.Integer, nullable=False)
    num_guesses = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=True)

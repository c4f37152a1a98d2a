from datetime import date

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Word list and epoch are fixed for the life of the process
    from dailyword.services.puzzle import GameService, LeaderboardStore
    from dailyword.words import DEFAULT_WORDS_FILE, load_words
    words_file = flask_app.config.get('WORDS_FILE') or DEFAULT_WORDS_FILE
    words = load_words(words_file)
    epoch = date.fromisoformat(str(flask_app.config.get('PUZZLE_EPOCH', '2025-01-01')))
    flask_app.extensions['game_service'] = GameService(
        words,
        epoch=epoch,
        store=LeaderboardStore(),
        max_guesses=int(flask_app.config.get('MAX_GUESSES', 6)),
    )
    flask_app.logger.info(f"[startup] words={len(words)} file={words_file} epoch={epoch.isoformat()}")

    from dailyword.api.puzzle import puzzle
    flask_app.register_blueprint(puzzle, url_prefix='/api')

    # Socket pushes are optional; the HTTP API keeps working without them
    try:
        from dailyword.socketio_events import register_socketio_handlers
        register_socketio_handlers(testing=flask_app.config.get('TESTING', False))
    except Exception as exc:
        flask_app.logger.warning(f"SocketIO events not loaded: {exc}")

    if flask_app.config.get('CREATE_SCHEMA_ON_STARTUP'):
        with flask_app.app_context():
            import dailyword.models  # noqa: F401
            db.create_all()

    @click.command('init-db')
    def init_db_command():
        """Creates the leaderboard table if it does not exist yet."""
        import dailyword.models  # noqa: F401
        db.create_all()
        click.echo('Leaderboard schema is ready.')

    @click.command('puzzle-today')
    def puzzle_today_command():
        """Prints today's game number and answer."""
        service = flask_app.extensions['game_service']
        click.echo(f'Game {service.current_game()}: {service.daily_answer()}')

    flask_app.cli.add_command(init_db_command)
    flask_app.cli.add_command(puzzle_today_command)

    return flask_app

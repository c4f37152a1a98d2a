def test_puzzle_today(flask_app, frozen_service):
    result = flask_app.test_cli_runner().invoke(args=['puzzle-today'])
    assert result.exit_code == 0
    assert 'Game 291: proof' in result.output


def test_init_db_is_idempotent(flask_app):
    runner = flask_app.test_cli_runner()
    for _ in range(2):
        result = runner.invoke(args=['init-db'])
        assert result.exit_code == 0
        assert 'Leaderboard schema is ready.' in result.output


def test_app_starts_when_socket_handlers_fail(monkeypatch, caplog):
    import logging
    from dailyword import create_app, socketio_events
    from conftest import TestConfig

    def broken_register(testing=False):
        raise RuntimeError('namespace clash')

    monkeypatch.setattr(socketio_events, 'register_socketio_handlers', broken_register)
    with caplog.at_level(logging.WARNING):
        application = create_app(TestConfig)

    assert 'game_service' in application.extensions
    assert 'SocketIO events not loaded: namespace clash' in caplog.text

import os
import tempfile

# Keep test logs out of the working tree; must happen before wordle_widget is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-widget-logs-'))

import pytest

from wordle_widget import create_app
from wordle_widget.config import TestingConfig
from wordle_widget.models.game import GameConfig
from wordle_widget.services.game_machine import start_session
from wordle_widget.services.game_service import initialize_game_service
from wordle_widget.services.word_source import FixedWordSource


@pytest.fixture
def crane_config():
    return GameConfig.for_word("CRANE", 6)


@pytest.fixture
def session(crane_config):
    return start_session(crane_config)


@pytest.fixture
def word_source():
    return FixedWordSource("CRANE", 6)


@pytest.fixture
def game_service(word_source):
    return initialize_game_service(word_source)


@pytest.fixture
def app_and_socketio(game_service):
    return create_app(TestingConfig)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()

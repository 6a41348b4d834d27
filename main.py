"""
Wordle Widget - Main Entry Point

This is the main entry point for the Wordle widget server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from wordle_widget import create_app
from wordle_widget.config import Config
from wordle_widget.services.game_service import initialize_game_service
from wordle_widget.services.word_source import WordListSource
from wordle_widget.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(WordListSource())
        print(f"✓ Game service initialized with {len(game_service.word_source.words)} words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle widget starting")

        print(f"\nStarting Wordle widget on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle widget shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()

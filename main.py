"""
TurnIt Game Server - Main Entry Point

This is the main entry point for the TurnIt game server.
It initializes all services and starts the Flask application.
"""

from turnit import create_app
from turnit.config import Config, validate_word_list_integrity, get_word_statistics
from turnit.services.game_service import initialize_game_service
from turnit.utils.game_logger import game_logger


def check_word_list() -> dict:
    """Validate the bundled word list and log its statistics."""
    validate_word_list_integrity()
    word_stats = get_word_statistics()
    game_logger.logger.info(f"Word list loaded: {word_stats}")
    return word_stats


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        word_stats = check_word_list()
        print(f"✓ Word list validated ({word_stats['total_words']} words)")

        game_service = initialize_game_service()
        print(f"✓ Game service initialized ({len(game_service.dictionary)} dictionary words)")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("TurnIt Server Starting")

        print(f"\nStarting TurnIt Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("TurnIt Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()

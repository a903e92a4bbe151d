"""
TurnIt Game Server Application Package

A combination-lock word puzzle served per post: ring generation, Wordle-style
guess scoring, streaks, achievements and leaderboards.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    from .services.auth_service import initialize_auth_service
    initialize_auth_service(app.config['JWT_SECRET'], app.config['JWT_EXPIRATION_DAYS'])

    # Register blueprints
    from .controllers.puzzle_controller import puzzle_bp
    from .controllers.stats_controller import stats_bp
    from .controllers.internal_controller import internal_bp

    app.register_blueprint(puzzle_bp, url_prefix='/api')
    app.register_blueprint(stats_bp, url_prefix='/api')
    app.register_blueprint(internal_bp, url_prefix='/internal')

    return app

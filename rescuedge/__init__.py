import logging

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from .config import Config, as_bool, as_int, parse_command_line_args
from .logging_config import setup_logging

db = SQLAlchemy()

logger = logging.getLogger(__name__)


def should_seed(config):
    """Seed demo hospitals outside production, or whenever SEED_HOSPITALS is set true."""
    seed = config.get('SEED_HOSPITALS')
    if seed is not None:
        return as_bool(seed, 'SEED_HOSPITALS')
    return config.get('APP_ENV') != 'production'


def create_app(config_class=Config, args=None):
    app = Flask(__name__, instance_relative_config=False)
    app.config.from_object(config_class)

    # launch arguments (--server.port=9090 ...) override the environment
    properties, positional = parse_command_line_args(args)
    app.config.update(properties)
    app.config['COMMAND_LINE_ARGS'] = list(args or [])
    app.config['POSITIONAL_ARGS'] = positional
    app.config['SERVER_PORT'] = as_int(app.config.get('SERVER_PORT', 8080), 'SERVER_PORT')
    app.config['DEBUG'] = as_bool(app.config.get('DEBUG', False), 'DEBUG')

    setup_logging(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)

    # register blueprints
    from .hospitals import hospitals_bp

    app.register_blueprint(hospitals_bp)

    # create database tables if they don't exist
    with app.app_context():
        db.create_all()
        if should_seed(app.config):
            from .registry import seed_demo_hospitals
            seed_demo_hospitals()

    logger.info("RescuEdge app created (env=%s)", app.config.get('APP_ENV'))
    return app

"""Process entry point: start the application container and serve it."""
import logging
import sys

from . import create_app
from .config import Config

STARTUP_MESSAGE = "RescuEdge Application has started successfully!"

logger = logging.getLogger(__name__)


def run(config_class, args):
    """Build the application container from ``config_class`` and launch ``args``.

    Returns the ready application. Startup failures propagate to the caller.
    """
    return create_app(config_class, args)


def serve(app):
    """Hand control to the Flask server loop; blocks until it stops."""
    host = app.config.get('SERVER_HOST', '127.0.0.1')
    port = app.config['SERVER_PORT']
    debug = app.config['DEBUG']
    logger.info("Serving RescuEdge on %s:%s", host, port)
    # the reloader re-executes the process, which would start and announce twice
    app.run(host=host, port=port, debug=debug, use_reloader=False)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    app = run(Config, args)
    print(STARTUP_MESSAGE)
    serve(app)

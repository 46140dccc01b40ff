import sys
from flask import Flask, jsonify

from src.infrastructure.config import settings
from src.infrastructure.database import init_app as init_db
from src.infrastructure.logging_config import logger, setup_logging

PING_RESPONSE = {"mindful": "insights"}

def create_app(repository=None):
    """Application factory for Flask.

    ``repository`` is registered as the app's user repository; when omitted
    one is connected from MONGO_URI on first use.
    """
    app = Flask(__name__)

    # --- Core Configuration ---
    app.config.from_object(settings)

    # --- Initialize Extensions ---
    init_db(app, repository)

    @app.route('/ping')
    def ping():
        return jsonify(PING_RESPONSE), 200

    logger.info(f"Flask App created successfully (debug={settings.DEBUG}).")
    return app

def main():
    setup_logging()
    app = create_app()
    try:
        app.run(host=settings.HOST, port=settings.PORT)
    except OSError as exc:
        logger.critical(f"HTTP server failed to start: {exc}", exc_info=True)
        sys.exit(1)
    except SystemExit as exc:
        # werkzeug exits on its own when the port is already bound
        if exc.code:
            logger.critical(
                "HTTP server failed to start",
                extra={"host": settings.HOST, "port": settings.PORT, "exit_code": exc.code},
            )
        raise

if __name__ == '__main__':
    main()

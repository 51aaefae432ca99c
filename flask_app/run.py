import logging

from flask import request

from flask_app.app import create_app

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')
    app = create_app()

    # ✅ Log every request Flask processes
    @app.before_request
    def log_request():
        logger.debug(f"🔹 Flask received request: {request.method} {request.path}")

    logger.info("✅ Flask is running in DEBUG mode. Logging all requests.")
    app.run(debug=True)


if __name__ == '__main__':
    main()

"""
Blog Article API - Entry Point
"""
import logging
import sys

from blog_api import create_app
from blog_api.utils.config import Config, ConfigurationError


def setup_logging(level: str = 'INFO', log_file: str = None):
    """Configure logging for the application."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        # Use UTF-8 encoding for file handler to support Unicode characters
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def main():
    """Run the article API"""
    setup_logging(Config.LOG_LEVEL, Config.LOG_FILE)
    logger = logging.getLogger(__name__)

    try:
        Config.validate()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    app = create_app()

    logger.info(f"listening on {Config.HOST}:{Config.PORT}")
    try:
        app.run(
            host=Config.HOST,
            port=Config.PORT,
            debug=Config.DEBUG,
            use_reloader=Config.DEBUG
        )
    finally:
        app.extensions['database'].close()


if __name__ == '__main__':
    main()

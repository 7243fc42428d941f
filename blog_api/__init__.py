"""
Flask Application Factory for the blog article API
"""
import logging
import os
from typing import Optional

from flask import Flask
from pymongo import MongoClient

from .controller.article_controller import ArticleController
from .model.article_model import ArticleModel
from .model.database import Database
from .utils.config import Config
from .utils.json_provider import MongoJSONProvider

logger = logging.getLogger(__name__)


class ArticleApp:
    """Builds one Flask application together with its store and handlers"""

    def __init__(self, config: Optional[dict] = None, client: Optional[MongoClient] = None):
        self._config = config
        self._client = client
        self._app: Optional[Flask] = None
        self.database: Optional[Database] = None

    def create_app(self) -> Flask:
        """Create and configure the Flask application"""
        # The bundle is served by serve_frontend, not Flask's static route
        self._app = Flask(__name__, static_folder=None)
        self._app.json = MongoJSONProvider(self._app)

        # Default configuration from environment variables
        self._app.config.update(Config.as_flask_config())

        # Update with custom config if provided
        if self._config:
            self._app.config.update(self._config)

        self._app.config['STATIC_FOLDER'] = os.path.abspath(self._app.config['STATIC_FOLDER'])

        self._init_database()
        self._register_routes()

        return self._app

    def _init_database(self):
        """Initialize the pooled database connection shared by all requests"""
        self.database = Database()
        self.database.connect(
            connection_string=self._app.config['MONGODB_URI'],
            database_name=self._app.config['DATABASE_NAME'],
            max_pool_size=self._app.config['MONGODB_MAX_POOL_SIZE'],
            min_pool_size=self._app.config['MONGODB_MIN_POOL_SIZE'],
            timeout_ms=self._app.config['MONGODB_TIMEOUT_MS'],
            client=self._client
        )
        self._app.extensions['database'] = self.database

    def _register_routes(self):
        """Register application routes"""
        article_model = ArticleModel(self.database)
        controller = ArticleController(
            article_model,
            self.database,
            static_folder=self._app.config['STATIC_FOLDER']
        )
        self._app.extensions['article_controller'] = controller

        # API routes
        self._app.add_url_rule('/api/health', 'api_health', controller.get_health)
        self._app.add_url_rule('/api/articles/<path:name>', 'api_article', controller.get_article)
        self._app.add_url_rule('/api/articles/<path:name>/upvote', 'api_article_upvote',
                               controller.upvote_article, methods=['POST'])
        self._app.add_url_rule('/api/articles/<path:name>/add-comment', 'api_article_add_comment',
                               controller.add_comment, methods=['POST'])

        # Front-end bundle and single-page-app fallback
        self._app.add_url_rule('/', 'frontend_index', controller.serve_frontend, defaults={'path': ''})
        self._app.add_url_rule('/<path:path>', 'frontend', controller.serve_frontend)

        logger.info(f"Serving front-end from {self._app.config['STATIC_FOLDER']}")


def create_app(config: Optional[dict] = None, client: Optional[MongoClient] = None) -> Flask:
    """Factory function to create Flask app"""
    return ArticleApp(config, client).create_app()

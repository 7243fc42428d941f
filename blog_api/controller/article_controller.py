"""
Article Controller - Handles article API routes and the front-end fallback
"""
import logging

from flask import jsonify, request, send_from_directory
from werkzeug.exceptions import NotFound

from ..model.article_model import ArticleModel
from ..model.database import Database
from ..utils.errors import ArticleAPIError, ValidationError

logger = logging.getLogger(__name__)


class ArticleController:
    """Controller for article operations"""

    def __init__(self, article_model: ArticleModel, database: Database, static_folder: str):
        self.article_model = article_model
        self.database = database
        self.static_folder = static_folder

    @staticmethod
    def _error_response(error: Exception):
        if isinstance(error, ArticleAPIError):
            if error.status_code >= 500:
                logger.error(f"{error.message}: {error.error}")
            else:
                logger.warning(f"{error.message}: {error.error}")
            return jsonify(error.to_dict()), error.status_code

        logger.exception("Unhandled error while processing request")
        return jsonify({
            "message": "Internal server error",
            "error": str(error)
        }), 500

    def get_article(self, name: str):
        """API endpoint for single article (null body when absent)"""
        try:
            article = self.article_model.get_article(name)
            return jsonify(article), 200
        except Exception as e:
            return self._error_response(e)

    def upvote_article(self, name: str):
        """API endpoint to upvote an article"""
        try:
            article = self.article_model.upvote_article(name)
            return jsonify(article), 200
        except Exception as e:
            return self._error_response(e)

    def add_comment(self, name: str):
        """API endpoint to append a comment to an article"""
        try:
            user_name, text = self._comment_fields()
            article = self.article_model.add_comment(name, user_name, text)
            return jsonify(article), 200
        except Exception as e:
            return self._error_response(e)

    @staticmethod
    def _comment_fields():
        # Accept JSON and URL-encoded form bodies
        if request.is_json:
            data = request.get_json(silent=True)
            if data is None:
                raise ValidationError("Malformed JSON body")
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
        else:
            data = request.form

        user_name = data.get('userName')
        text = data.get('text')

        missing = [field for field, value in (('userName', user_name), ('text', text)) if value is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        if not isinstance(user_name, str) or not isinstance(text, str):
            raise ValidationError("Fields 'userName' and 'text' must be strings")

        return user_name, text

    def get_health(self):
        """API endpoint for store health check"""
        try:
            self.database.ping()
            return jsonify({
                "status": "ok",
                "database": self.database.name
            }), 200
        except Exception as e:
            return self._error_response(e)

    def serve_frontend(self, path: str = ''):
        """Serve a bundle file if it exists, else the single-page-app entry file"""
        if path:
            try:
                return send_from_directory(self.static_folder, path)
            except NotFound:
                pass
        return send_from_directory(self.static_folder, 'index.html')

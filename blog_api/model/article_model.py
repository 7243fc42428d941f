"""
Article Model - Business logic for article data
"""
import logging
from typing import Any, Dict, Optional

from pymongo import ReturnDocument

from .database import Database
from ..utils.errors import ArticleNotFoundError

logger = logging.getLogger(__name__)


class ArticleModel:
    """Article data model with business logic"""

    collection_name = "articles"

    def __init__(self, database: Database):
        self.db = database

    def get_article(self, name: str) -> Optional[Dict[str, Any]]:
        """Retrieve a single article by name, or None if there is no match"""
        with self.db.scope() as db:
            article = db[self.collection_name].find_one({"name": name})
        return article

    def _update_article(self, name: str, update: Dict[str, Any]) -> Dict[str, Any]:
        with self.db.scope() as db:
            article = db[self.collection_name].find_one_and_update(
                {"name": name},
                update,
                return_document=ReturnDocument.AFTER
            )
        if article is None:
            raise ArticleNotFoundError(name)
        return article

    def upvote_article(self, name: str) -> Dict[str, Any]:
        """
        Increment an article's upvote counter by one.

        The increment is a single atomic update, so concurrent upvotes on
        the same article are all counted.

        Args:
            name: Article name

        Returns:
            The article document after the increment

        Raises:
            ArticleNotFoundError: If no article has this name
        """
        article = self._update_article(name, {"$inc": {"upvotes": 1}})
        logger.info(f"Upvoted article '{name}' ({article.get('upvotes')} upvotes)")
        return article

    def add_comment(self, name: str, user_name: str, text: str) -> Dict[str, Any]:
        """
        Append a comment to the end of an article's comment list.

        Args:
            name: Article name
            user_name: Comment author as supplied by the caller
            text: Comment body

        Returns:
            The article document after the append

        Raises:
            ArticleNotFoundError: If no article has this name
        """
        comment = {"userName": user_name, "text": text}
        article = self._update_article(name, {"$push": {"comments": comment}})
        logger.info(f"Added comment by '{user_name}' to article '{name}'")
        return article

"""Model package - Database and business logic"""
from .database import Database
from .article_model import ArticleModel

__all__ = ['Database', 'ArticleModel']

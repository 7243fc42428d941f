"""Controller package - HTTP request handlers"""
from .article_controller import ArticleController

__all__ = ['ArticleController']

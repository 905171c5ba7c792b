from blog.models.article import Article, Comment
from blog.models.user import AuthenticatedUser, Identity

__all__ = ["Article", "Comment", "AuthenticatedUser", "Identity"]

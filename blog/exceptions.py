"""
Domain errors mapped to HTTP responses in blog.main
"""


class ArticleNotFoundError(Exception):
    """No article document matches the requested name"""

    def __init__(self, name: str):
        super().__init__(f"Article not found: {name}")
        self.name = name


class NotAuthenticatedError(Exception):
    """A gated route was called without an authenticated user"""

"""
Blog backend: article upvotes and comments over Firestore
"""

__version__ = "1.0.0"
__app_name__ = "Blog Backend"

"""
Article engagement operations on the Firestore ``articles`` collection
"""

import asyncio
import logging
from typing import List, Optional

from firebase_admin import firestore
from google.api_core.exceptions import AlreadyExists

from blog.models.article import (
    Article,
    Comment,
    article_model_to_firestore,
    firestore_article_to_model,
)

logger = logging.getLogger(__name__)


def _upvote_in_transaction(transaction, doc_ref, uid: str) -> Optional[Article]:
    snapshot = doc_ref.get(transaction=transaction)
    if not snapshot.exists:
        return None

    article = firestore_article_to_model(snapshot.to_dict(), snapshot.id)
    if not article.can_upvote(uid):
        logger.debug("User %s already upvoted %s, skipping", uid, article.name)
        return article

    transaction.update(
        doc_ref,
        {
            "upvotes": firestore.Increment(1),
            "upvotedIds": firestore.ArrayUnion([uid]),
        },
    )
    return article.model_copy(
        update={
            "upvotes": article.upvotes + 1,
            "upvoted_ids": [*article.upvoted_ids, uid],
        }
    )


def _comment_in_transaction(transaction, doc_ref, entry: Comment) -> Optional[Article]:
    snapshot = doc_ref.get(transaction=transaction)
    if not snapshot.exists:
        return None

    article = firestore_article_to_model(snapshot.to_dict(), snapshot.id)
    comments = [*article.comments, entry]
    # ArrayUnion would drop repeated identical comments, so the list is rewritten
    transaction.update(
        doc_ref, {"comments": [c.model_dump() for c in comments]}
    )
    return article.model_copy(update={"comments": comments})


class ArticleService:
    """Find/update operations for article documents keyed by name"""

    def __init__(self, db, collection_name: str = "articles"):
        self.db = db
        self.collection_name = collection_name

    def _collection(self):
        return self.db.collection(self.collection_name)

    def _document(self, name: str):
        return self._collection().document(name)

    async def get_article(self, name: str) -> Optional[Article]:
        doc = await asyncio.to_thread(self._document(name).get)
        if not doc.exists:
            logger.info("Article %s not found", name)
            return None
        return firestore_article_to_model(doc.to_dict(), doc.id)

    async def list_article_names(self) -> List[str]:
        def _stream_ids():
            return [doc.id for doc in self._collection().stream()]

        return sorted(await asyncio.to_thread(_stream_ids))

    async def upvote_article(self, name: str, uid: str) -> Optional[Article]:
        """
        Record one upvote by ``uid``.

        The membership check and the increment run in one transaction, so
        concurrent requests from the same user cannot both count. A user who
        already upvoted gets the current article back unchanged.

        Returns:
            The article after the operation, or None when it does not exist
        """

        def _run():
            transaction = self.db.transaction()
            upvote = firestore.transactional(_upvote_in_transaction)
            return upvote(transaction, self._document(name), uid)

        return await asyncio.to_thread(_run)

    async def add_comment(self, name: str, username: str, comment: str) -> Optional[Article]:
        """Append a comment; returns None (and writes nothing) for unknown articles"""
        entry = Comment(username=username, comment=comment)

        def _run():
            transaction = self.db.transaction()
            append = firestore.transactional(_comment_in_transaction)
            return append(transaction, self._document(name), entry)

        return await asyncio.to_thread(_run)

    async def create_article(self, name: str) -> bool:
        """
        Create an empty engagement document for ``name``.

        Returns:
            False when the document already exists (it is left untouched)
        """
        try:
            await asyncio.to_thread(
                self._document(name).create,
                article_model_to_firestore(Article(name=name)),
            )
        except AlreadyExists:
            return False
        return True

"""
Create the Firestore engagement document for every bundled article.

Existing documents are left alone, so the script can be re-run safely.

    python -m scripts.seed_articles
"""

import asyncio
import logging

from blog.config import settings
from blog.services.article_service import ArticleService
from blog.services.firebase_service import FirebaseService
from blog.web.article_contents import articles

logger = logging.getLogger(__name__)


async def seed_articles(service: ArticleService) -> list[str]:
    """Returns the names of the documents that were created"""
    created = []
    for article in articles:
        if await service.create_article(article["name"]):
            logger.info("Created %s", article["name"])
            created.append(article["name"])
        else:
            logger.info("Skipped %s, already present", article["name"])
    return created


async def main():
    firebase = FirebaseService(settings).open()
    try:
        service = ArticleService(firebase.db, settings.ARTICLES_COLLECTION)
        created = await seed_articles(service)
        print(f"--- Seeded {len(created)} of {len(articles)} articles ---")
    finally:
        firebase.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())

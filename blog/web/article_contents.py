"""
Article titles and bodies bundled with the frontend

Engagement state (upvotes, comments) lives in Firestore under the same name.
"""

from typing import List, Optional, TypedDict


class ArticleContent(TypedDict):
    name: str
    title: str
    content: List[str]


articles: List[ArticleContent] = [
    {
        "name": "learn-react",
        "title": "The Fastest Way to Learn React",
        "content": [
            "React rewards learning by building. Start with a single component "
            "that renders a list, then add state, then add a form that changes "
            "that state.",
            "Resist reaching for a state management library on day one. Local "
            "component state and props carry a small application much further "
            "than most tutorials admit.",
            "Once the basics feel natural, read the official docs on effects "
            "from top to bottom. Most bugs beginners hit come from effects that "
            "run more often than they expect.",
        ],
    },
    {
        "name": "learn-node",
        "title": "How to Build a Node Server in 10 Minutes",
        "content": [
            "A web server only needs to do two things: listen on a port and "
            "answer requests. Everything else is convenience.",
            "Begin with a single route that returns JSON, then add a second one "
            "that reads a parameter from the path.",
            "When the routes start to repeat themselves, that is the moment to "
            "introduce middleware, not before.",
        ],
    },
    {
        "name": "learn-firestore",
        "title": "Learn Firestore Document Modelling",
        "content": [
            "Firestore stores documents in collections and charges per read, so "
            "model your documents around the screens that read them.",
            "Counters and small lists can live on the document itself. Use "
            "transactions whenever a write depends on what you just read.",
            "Unbounded lists belong in subcollections; a single document has a "
            "hard size limit.",
        ],
    },
]


def find_article_content(name: str) -> Optional[ArticleContent]:
    return next((a for a in articles if a["name"] == name), None)

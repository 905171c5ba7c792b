"""
Firebase service owning the Admin SDK app and the Firestore client
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

from blog.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class FirebaseService:
    """
    Long-lived handle on the Firebase Admin SDK.

    Opened once at application startup and closed at shutdown; request
    handlers receive it (or services built on it) through dependencies.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings
        self.app: Optional[firebase_admin.App] = None
        self._db = None

    @property
    def db(self):
        if self._db is None:
            raise RuntimeError("FirebaseService is not open")
        return self._db

    @property
    def is_open(self) -> bool:
        return self.app is not None

    def open(self) -> "FirebaseService":
        """Initialize Firebase Admin SDK and the Firestore client"""
        if self.app is not None:
            return self

        options = {}
        if self.config.FIREBASE_PROJECT_ID:
            options["projectId"] = self.config.FIREBASE_PROJECT_ID

        try:
            if self.config.FIRESTORE_EMULATOR_HOST:
                # Use emulator for development
                os.environ["FIRESTORE_EMULATOR_HOST"] = self.config.FIRESTORE_EMULATOR_HOST
                self.app = firebase_admin.initialize_app(options=options or None)
                logger.info(
                    "Firebase initialized with emulator: %s",
                    self.config.FIRESTORE_EMULATOR_HOST,
                )
            else:
                self.app = firebase_admin.initialize_app(
                    self._load_credentials(), options or None
                )
        except Exception:
            logger.exception("Firebase Admin SDK initialization failed")
            raise

        self._db = firestore.client(self.app)
        logger.info("Firebase Admin SDK initialization successful.")
        return self

    def close(self) -> None:
        """Release the Admin SDK app; safe to call more than once"""
        if self.app is None:
            return
        try:
            firebase_admin.delete_app(self.app)
        finally:
            self.app = None
            self._db = None
        logger.info("Firebase Admin SDK app released.")

    def _load_credentials(self) -> credentials.Certificate:
        if self.config.FIREBASE_CREDENTIALS_JSON:
            try:
                cred_dict = json.loads(self.config.FIREBASE_CREDENTIALS_JSON)
            except json.JSONDecodeError:
                logger.error("FIREBASE_CREDENTIALS_JSON is not valid JSON")
                raise
            logger.info(
                "Firebase initialized with credentials from FIREBASE_CREDENTIALS_JSON")
            return credentials.Certificate(cred_dict)

        # Fallback to file path
        logger.info(
            "Firebase initialized with credentials from %s",
            self.config.FIREBASE_CREDENTIALS_PATH,
        )
        return credentials.Certificate(self.config.FIREBASE_CREDENTIALS_PATH)

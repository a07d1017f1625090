"""Firebase app and Firestore client bootstrap.

Both the identity provider and the document store share the default Firebase
app, created lazily on first use with either a service-account file or the
application-default credentials.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import firebase_admin
from firebase_admin import credentials, firestore

from app.core.config import settings

logger = logging.getLogger(__name__)


def _app_options() -> Dict[str, Any]:
    if settings.FIREBASE_PROJECT_ID:
        return {"projectId": settings.FIREBASE_PROJECT_ID}
    return {}


def get_firebase_app() -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first call."""

    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if settings.FIREBASE_CREDENTIALS_PATH:
        cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
    else:
        cred = credentials.ApplicationDefault()

    app = firebase_admin.initialize_app(cred, _app_options())
    logger.info("Initialized Firebase app %s", app.name)
    return app


def get_firestore_client() -> Any:
    return firestore.client(get_firebase_app())


__all__ = ["get_firebase_app", "get_firestore_client"]

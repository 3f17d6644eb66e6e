"""
Firebase Admin SDK bootstrap.

One firebase-admin App is shared per process. It backs both the Firestore
client used by FirestoreDocumentStore and the claim management used by
FirebaseIdentityProvider.
"""

import logging
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore import Client

logger = logging.getLogger(__name__)


def get_firebase_app(
    project_id: str,
    credentials_path: Optional[str] = None,
) -> firebase_admin.App:
    """
    Return the default firebase-admin App, initialising it on first use.

    Args:
        project_id: Firebase / GCP project id
        credentials_path: Service account JSON file. Application Default
            Credentials are used when omitted.
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if credentials_path:
        cred = credentials.Certificate(credentials_path)
    else:
        cred = credentials.ApplicationDefault()

    app = firebase_admin.initialize_app(cred, {"projectId": project_id})
    logger.info(f"Initialized Firebase app for project {project_id}")
    return app


def create_firestore_client(
    app: firebase_admin.App,
    database_id: Optional[str] = None,
) -> Client:
    """Create a Firestore client bound to ``app``."""
    if database_id:
        return firestore.client(app=app, database_id=database_id)
    return firestore.client(app=app)

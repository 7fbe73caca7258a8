# migrator/providers/firebase.py
"""
Firebase implementations of the identity provider and document store.

Both share one ``firebase_admin`` app. Credentials come from a service
account file; without one the app falls back to application default
credentials, which is also how the local emulators are reached
(FIREBASE_AUTH_EMULATOR_HOST / FIRESTORE_EMULATOR_HOST).
"""

import logging
from typing import Any

import firebase_admin
from django.conf import settings
from firebase_admin import auth, credentials, firestore
from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import DocumentReference

from migrator.exceptions import (
    DocumentReadError,
    DocumentWriteError,
    IdentityProvisioningError,
)
from migrator.models.documents import DocumentRef
from migrator.providers.base import DocumentStore, IdentityProvider

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "legacy-migration"


def get_firebase_settings() -> dict[str, Any]:
    """Read Firebase configuration from Django settings."""
    return {
        "credentials_path": getattr(settings, "FIREBASE_CREDENTIALS_PATH", ""),
        "project_id": getattr(settings, "FIREBASE_PROJECT_ID", ""),
        "app_name": getattr(settings, "FIREBASE_APP_NAME", DEFAULT_APP_NAME),
    }


def get_firebase_app(config: dict[str, Any]) -> firebase_admin.App:
    """Return the named Firebase app, initializing it on first use."""
    app_name = config.get("app_name") or DEFAULT_APP_NAME
    try:
        return firebase_admin.get_app(app_name)
    except ValueError:
        pass

    credentials_path = config.get("credentials_path")
    credential = (
        credentials.Certificate(credentials_path) if credentials_path else None
    )
    options = {}
    if config.get("project_id"):
        options["projectId"] = config["project_id"]

    logger.info(
        f"Initializing Firebase app '{app_name}' "
        f"(project={config.get('project_id') or 'default'})"
    )
    return firebase_admin.initialize_app(credential, options, name=app_name)


def _firebase_configured(config: dict[str, Any]) -> bool:
    return bool(config.get("credentials_path") or config.get("project_id"))


class FirebaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Firebase Authentication."""

    provider_name = "firebase"

    def __init__(self, config: dict[str, Any] | None = None, app=None):
        super().__init__(config)
        if not self.config:
            self.config = get_firebase_settings()
        self._app = app

    @property
    def app(self) -> firebase_admin.App:
        if self._app is None:
            self._app = get_firebase_app(self.config)
        return self._app

    def is_configured(self) -> bool:
        return self._app is not None or _firebase_configured(self.config)

    def create_identity(self, uid: str | None, display_name: str, email: str) -> str:
        params: dict[str, Any] = {
            "display_name": display_name or None,
            "email": email or None,
            "disabled": False,
        }
        if uid:
            params["uid"] = uid

        try:
            record = auth.create_user(app=self.app, **params)
        except (FirebaseError, ValueError) as e:
            logger.error(f"Firebase identity creation failed for {email}: {e}")
            raise IdentityProvisioningError(
                message=f"Could not create identity for {email or uid}: {e}",
                code=getattr(e, "code", None),
                details={"uid": uid, "email": email},
            ) from e
        return record.uid

    def set_role_claim(self, uid: str, role: str) -> None:
        try:
            auth.set_custom_user_claims(uid, {"role": role}, app=self.app)
        except (FirebaseError, ValueError) as e:
            logger.error(f"Firebase claim update failed for {uid}: {e}")
            raise IdentityProvisioningError(
                message=f"Could not set role claim on {uid}: {e}",
                details={"uid": uid, "role": role},
            ) from e


class FirestoreDocumentStore(DocumentStore):
    """Document store backed by Cloud Firestore."""

    provider_name = "firestore"

    def __init__(self, config: dict[str, Any] | None = None, client=None, app=None):
        super().__init__(config)
        if not self.config:
            self.config = get_firebase_settings()
        self._client = client
        self._app = app

    @property
    def client(self):
        if self._client is None:
            app = self._app or get_firebase_app(self.config)
            self._client = firestore.client(app)
        return self._client

    def is_configured(self) -> bool:
        return self._client is not None or _firebase_configured(self.config)

    def new_reference(self, collection: str) -> DocumentRef:
        native = self.client.collection(collection).document()
        return DocumentRef(collection, native.id)

    def write_document(
        self, collection: str, doc_id: str, fields: dict[str, Any]
    ) -> DocumentRef:
        try:
            self.client.collection(collection).document(doc_id).set(
                self._to_native(fields)
            )
        except (GoogleAPIError, ValueError, TypeError) as e:
            logger.error(f"Firestore write to {collection}/{doc_id} failed: {e}")
            raise DocumentWriteError(
                message=f"Could not write {collection}/{doc_id}: {e}",
                details={"collection": collection, "doc_id": doc_id},
            ) from e
        return DocumentRef(collection, doc_id)

    def stream_collection(self, collection: str) -> list[dict[str, Any]]:
        records = []
        try:
            for snapshot in self.client.collection(collection).stream():
                data = self._from_native(snapshot.to_dict() or {})
                records.append({"docId": snapshot.id, **data})
        except GoogleAPIError as e:
            logger.error(f"Firestore read of {collection} failed: {e}")
            raise DocumentReadError(
                message=f"Could not read {collection}: {e}",
                details={"collection": collection},
            ) from e
        return records

    def _to_native(self, value: Any) -> Any:
        if isinstance(value, DocumentRef):
            return self.client.collection(value.collection).document(value.id)
        if isinstance(value, dict):
            return {key: self._to_native(item) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._to_native(item) for item in value]
        return value

    def _from_native(self, value: Any) -> Any:
        if isinstance(value, DocumentReference):
            return DocumentRef(value.parent.id, value.id)
        if isinstance(value, dict):
            return {key: self._from_native(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._from_native(item) for item in value]
        return value

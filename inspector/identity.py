"""Optional users listing against an Appwrite identity service.

The dispatcher calls :meth:`IdentityDirectory.count_users` once per request
purely to log the total; the response never depends on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from appwrite.client import Client
from appwrite.services.users import Users

from inspector.config import settings


@dataclass
class IdentityDirectory:
    endpoint: str
    project_id: str
    api_key: str

    @classmethod
    def from_settings(cls, api_key: str = "") -> Optional["IdentityDirectory"]:
        """Build a directory from :data:`settings`, or ``None`` when disabled.

        *api_key* (typically the caller's ``x-appwrite-key`` header) takes
        precedence over the configured key.
        """
        if not settings.identity_enabled:
            return None
        return cls(
            endpoint=settings.identity_endpoint,
            project_id=settings.identity_project_id,
            api_key=api_key or settings.identity_api_key,
        )

    def client(self) -> Client:
        return (
            Client()
            .set_endpoint(self.endpoint)
            .set_project(self.project_id)
            .set_key(self.api_key)
        )

    def count_users(self) -> int:
        """Return the ``total`` reported by the Users service.

        Raises:
            appwrite.exception.AppwriteException: On transport failures or an
                error answer from the service.
        """
        response = Users(self.client()).list()
        total = response["total"] if isinstance(response, dict) else response.total
        return int(total)

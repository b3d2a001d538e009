import logging
from typing import Optional, Protocol

from supabase import Client, create_client

from talentpatriot_resume.errors import StorageError
from talentpatriot_resume.settings import Settings


logger = logging.getLogger(__name__)


class ResumeStore(Protocol):
    def download(self, storage_path: str) -> bytes: ...


class SupabaseResumeStore:
    """Reads resume files from a Supabase Storage bucket.

    The Supabase client is created on first download, so a deployment without
    storage credentials can still parse raw resume text.
    """

    def __init__(self, settings: Settings, client: Optional[Client] = None) -> None:
        self._settings = settings
        self._client = client

    def _get_client(self) -> Client:
        if self._client is None:
            if not self._settings.supabase_url or not self._settings.supabase_key:
                raise StorageError(
                    "Supabase URL or key not configured. Set SUPABASE_URL and SUPABASE_KEY."
                )
            try:
                self._client = create_client(self._settings.supabase_url, self._settings.supabase_key)
            except Exception as e:
                raise StorageError(f"Failed to initialize Supabase client: {e}") from e
        return self._client

    def download(self, storage_path: str) -> bytes:
        client = self._get_client()
        bucket = self._settings.resume_bucket
        try:
            data = client.storage.from_(bucket).download(storage_path)
        except Exception as e:
            logger.exception("Download of %s from bucket %s failed", storage_path, bucket)
            raise StorageError(f"Failed to download file from storage: {e}") from e

        if not data:
            raise StorageError(f"Failed to download file from storage: {storage_path} not found")
        return bytes(data)

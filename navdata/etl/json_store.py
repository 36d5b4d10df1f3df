"""Write decoded navdata as JSON, locally or to Google Cloud Storage."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic_core import to_jsonable_python

logger = logging.getLogger(__name__)

BUCKET_ENV = "NAVDATA_GCS_BUCKET"
OUTPUT_DIR_ENV = "NAVDATA_OUTPUT_DIR"


class StorageError(Exception):
    """Raised when a JSON document cannot be written or uploaded."""


def to_json(data: Any) -> str:
    """Serialize dicts/lists of contract models using their published keys."""
    return json.dumps(to_jsonable_python(data, by_alias=True))


class JSONStore:
    """Stores one JSON document per call, to a GCS bucket or a directory.

    When ``bucket`` is set, documents are uploaded to ``gs://{bucket}/{name}``;
    otherwise they are written to ``output_dir``.
    """

    def __init__(
        self,
        bucket: str | None = None,
        output_dir: str | Path = ".",
    ):
        self._bucket = bucket
        self._output_dir = Path(output_dir)
        self._client: Any = None

    @classmethod
    def from_env(cls) -> JSONStore:
        """Build a store from ``NAVDATA_GCS_BUCKET`` / ``NAVDATA_OUTPUT_DIR``."""
        return cls(
            bucket=os.environ.get(BUCKET_ENV) or None,
            output_dir=os.environ.get(OUTPUT_DIR_ENV, "."),
        )

    @property
    def destination(self) -> str:
        if self._bucket:
            return f"gs://{self._bucket}"
        return str(self._output_dir)

    def store(self, data: Any, filename: str) -> str:
        """Serialize ``data`` and write it under ``filename``.

        Returns the GCS URI or local path written.
        """
        try:
            payload = to_json(data)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot serialize {filename}: {e}") from e

        if self._bucket:
            return self._upload(payload, filename)
        return self._write(payload, filename)

    def _upload(self, payload: str, filename: str) -> str:
        from google.cloud import storage

        if self._client is None:
            self._client = storage.Client()

        blob = self._client.bucket(self._bucket).blob(filename)
        try:
            blob.upload_from_string(payload, content_type="application/json")
        except Exception as e:
            raise StorageError(f"Failed to upload {filename} to gs://{self._bucket}: {e}") from e

        uri = f"gs://{self._bucket}/{filename}"
        logger.info("Uploaded %d bytes to %s", len(payload), uri)
        return uri

    def _write(self, payload: str, filename: str) -> str:
        path = self._output_dir / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

        logger.info("Wrote %d bytes to %s", len(payload), path)
        return str(path)

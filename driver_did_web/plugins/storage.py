"""Filesystem storage for did:web documents."""

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path

import canonicaljson

from driver_did_web.plugins.errors import StorageError

logger = logging.getLogger(__name__)

FILE_NAME = "did.json"


def current_umask() -> int:
    """Return the process umask."""
    umask = os.umask(0)
    os.umask(umask)
    return umask


class DidFileStorage:
    """Stores one ``did.json`` per directory under a base path.

    Directories are computed by the driver; this class only owns the file
    inside them. Every filesystem failure surfaces as a StorageError.
    """

    def __init__(self, base_path):
        """Initialize the storage."""
        self.base_path = Path(base_path)

    def directory(self, *segments) -> Path:
        """Return the directory for the given path segments."""
        return self.base_path.joinpath(*segments)

    def document_path(self, directory) -> Path:
        """Return the document file path for a directory."""
        return Path(directory) / FILE_NAME

    def exists(self, directory) -> bool:
        """Check if the directory exists."""
        return Path(directory).exists()

    def document_exists(self, directory) -> bool:
        """Check if the directory holds a document."""
        return self.document_path(directory).is_file()

    def store(self, directory, document: dict):
        """Write the canonical JSON of a document into the directory."""
        path = self.document_path(directory)
        data = canonicaljson.encode_canonical_json(document)
        name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(dir=str(path.parent), delete=False) as tmp:
                name = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            # Temporary files are created 0600; served documents follow the umask.
            os.chmod(name, 0o666 & ~current_umask())
            os.replace(name, str(path))
        except OSError as err:
            if name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(name)
            logger.error(f"Unable to store {path}: {err}")
            raise StorageError(f"Unable to store DID document: {err}") from err
        logger.debug(f"Stored {len(data)} bytes at {path}")

    def fetch(self, directory) -> dict:
        """Read the document stored in the directory."""
        path = self.document_path(directory)
        try:
            with open(path, "r", encoding="utf-8") as document_file:
                return json.load(document_file)
        except (OSError, ValueError) as err:
            logger.error(f"Unable to read {path}: {err}")
            raise StorageError(f"Unable to read DID document: {err}") from err

    def delete(self, directory):
        """Remove the document file, leaving the directory in place."""
        path = self.document_path(directory)
        try:
            path.unlink()
        except OSError as err:
            logger.error(f"Unable to delete {path}: {err}")
            raise StorageError(f"Unable to delete DID document: {err}") from err
        logger.debug(f"Deleted {path}")

"""DID Web (did:web) registrar driver."""

import logging
import os
import uuid
from pathlib import Path
from typing import Union
from urllib.parse import urlsplit

import validators

from driver_did_web.config import DriverSettings
from driver_did_web.models import (
    CreateRequest,
    CreateState,
    DeactivateRequest,
    DeactivateState,
    DidState,
    UpdateRequest,
    UpdateState,
)
from driver_did_web.plugins.errors import (
    AlreadyExists,
    ConfigurationError,
    DomainMismatch,
    InvalidIdentifier,
    InvalidInput,
    NotFound,
)
from driver_did_web.plugins.storage import DidFileStorage

logger = logging.getLogger(__name__)

METHOD_PREFIX = "did:web:"


class DidWebDriver:
    """DID Web registrar driver.

    Maps a did:web identifier onto ``<basePath>/<segment>/.../did.json`` and
    keeps that file in sync through create, update and deactivate.

    The existence checks and the filesystem writes that follow them are not
    atomic. Hosts issuing concurrent operations on the same identifier must
    serialize them, for instance with a lock keyed by the resolved path.
    """

    def __init__(self, properties: Union[dict, None] = None):
        """Initialize the driver from a properties mapping or the environment."""
        if properties is None:
            properties = DriverSettings().to_properties()
            logger.debug(f"Loaded properties from environment: {properties}")

        self._properties = dict(properties)
        logger.debug(f"Configuring from properties: {self._properties}")

        self.base_url = self._properties.get("baseUrl") or None
        base_path = self._properties.get("basePath") or None

        if not self.base_url:
            raise ConfigurationError("Base URL is not defined")
        if not validators.url(self.base_url, simple_host=True):
            raise ConfigurationError(f"Invalid base URL {self.base_url}")

        url = urlsplit(self.base_url)
        if url.scheme != "https":
            raise ConfigurationError(
                f"Protocol must be https. Provided URL protocol is {url.scheme}"
            )
        self.host = url.hostname

        if not base_path:
            raise ConfigurationError("Base path is not defined")
        self.base_path = Path(os.path.abspath(base_path))
        if not self.base_path.is_dir():
            raise ConfigurationError(f"Base path {self.base_path} is not a directory")
        if not os.access(self.base_path, os.W_OK):
            raise ConfigurationError(f"Base path {self.base_path} is not writable")

        self.storage = DidFileStorage(self.base_path)
        logger.info(f"did:web driver ready for {self.host} at {self.base_path}")

    def properties(self) -> dict:
        """Return the driver properties."""
        return dict(self._properties)

    def resolve_path(self, did: str) -> Path:
        """Return the directory holding the document of a did:web identifier."""
        if did is None:
            raise InvalidIdentifier("DID is null")
        if not did.startswith(METHOD_PREFIX):
            raise InvalidIdentifier(f"Unknown DID method: {did}")

        parsed = did[len(METHOD_PREFIX) :].split(":")
        if len(parsed) < 2:
            raise InvalidIdentifier(f"DID format error: {did}")

        domain, segments = parsed[0], parsed[1:]
        if domain.lower() != self.host.lower():
            raise DomainMismatch(f"Domain name mismatch: {domain} is not {self.host}")

        for segment in segments:
            if segment in ("", ".", "..") or "/" in segment or os.sep in segment:
                raise InvalidIdentifier(f"Invalid path segment '{segment}' in {did}")

        path = self.storage.directory(*segments)
        logger.debug(f"Resolved {did} to {path}")
        return path

    def generate_did(self):
        """Return a fresh DID and its directory."""
        token = str(uuid.uuid4())
        return f"{METHOD_PREFIX}{self.host}:{token}", self.storage.directory(token)

    def create(self, request: CreateRequest) -> CreateState:
        """Store a new DID document."""
        if request is None or request.didDocument is None:
            raise InvalidInput("DID document is null")

        document = request.didDocument
        if document.id is not None:
            did = document.id
            did_path = self.resolve_path(did)
        else:
            did, did_path = self.generate_did()
            document = document.with_id(did)

        if self.storage.exists(did_path):
            logger.warning(f"Refusing to create {did}: {did_path} already exists")
            raise AlreadyExists(f"DID already exists: {did}")

        did_document = document.model_dump()
        self.storage.store(did_path, did_document)
        logger.info(f"Created {did}")

        return CreateState(didState=DidState(did=did, didDocument=did_document))

    def update(self, request: UpdateRequest) -> UpdateState:
        """Replace a stored DID document."""
        if request is None or request.didDocument is None:
            raise InvalidInput("DID document is null")
        if request.didDocument.id is None:
            raise InvalidInput("DID is null")

        did = request.didDocument.id
        did_path = self.resolve_path(did)
        if not self.storage.document_exists(did_path):
            logger.warning(f"Refusing to update {did}: no document at {did_path}")
            raise NotFound(f"DID does not exist: {did}")

        did_document = request.didDocument.model_dump()
        # The document is absent if the store fails after this delete.
        self.storage.delete(did_path)
        self.storage.store(did_path, did_document)
        logger.info(f"Updated {did}")

        return UpdateState(didState=DidState(did=did, didDocument=did_document))

    def deactivate(self, request: DeactivateRequest) -> DeactivateState:
        """Delete a stored DID document, leaving its directory behind."""
        if request is None or request.identifier is None:
            raise InvalidInput("Identifier is null")

        did = request.identifier
        did_path = self.resolve_path(did)
        if not self.storage.document_exists(did_path):
            logger.warning(f"Refusing to deactivate {did}: no document at {did_path}")
            raise NotFound(f"DID does not exist: {did}")

        self.storage.delete(did_path)
        logger.info(f"Deactivated {did}")

        return DeactivateState(didState=DidState(did=did))

    def resolve(self, did: str) -> dict:
        """Return the stored document of a did:web identifier."""
        did_path = self.resolve_path(did)
        if not self.storage.document_exists(did_path):
            raise NotFound(f"DID does not exist: {did}")
        return self.storage.fetch(did_path)

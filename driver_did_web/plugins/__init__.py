from .didweb import METHOD_PREFIX, DidWebDriver
from .errors import (
    AlreadyExists,
    ConfigurationError,
    DomainMismatch,
    InvalidIdentifier,
    InvalidInput,
    NotFound,
    RegistrationError,
    StorageError,
)
from .storage import FILE_NAME, DidFileStorage

__all__ = [
    "METHOD_PREFIX",
    "FILE_NAME",
    "DidWebDriver",
    "DidFileStorage",
    "RegistrationError",
    "ConfigurationError",
    "InvalidInput",
    "InvalidIdentifier",
    "DomainMismatch",
    "AlreadyExists",
    "NotFound",
    "StorageError",
]

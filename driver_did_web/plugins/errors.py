"""Registration errors raised by the did:web driver."""


class RegistrationError(Exception):
    """Registration error."""

    pass


class ConfigurationError(RegistrationError):
    """Invalid or missing base URL or base path."""

    pass


class InvalidInput(RegistrationError):
    """Missing document or identifier in a request."""

    pass


class InvalidIdentifier(RegistrationError):
    """Malformed did:web identifier."""

    pass


class DomainMismatch(RegistrationError):
    """Identifier domain does not match the configured host."""

    pass


class AlreadyExists(RegistrationError):
    """A stored document or directory already exists for the identifier."""

    pass


class NotFound(RegistrationError):
    """No stored document exists for the identifier."""

    pass


class StorageError(RegistrationError):
    """Filesystem operation failed."""

    pass

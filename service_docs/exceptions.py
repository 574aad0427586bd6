"""
Exception classes raised while building service descriptors and documentation.
"""

from typing import Any, Optional


class DocsError(Exception):
    """
    Base error for the documentation pipeline.

    Carries a human-readable message and optional structured data so the HTTP
    layer can report it without knowing the concrete subclass.
    """

    def __init__(self, message: str = "Documentation error", data: Optional[Any] = None):
        """
        Initialize a documentation error.

        Args:
            message: Human-readable error message
            data: Additional error data (optional)
        """
        self.message = message
        self.data = data
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert the error to a serializable mapping."""
        error_dict = {"message": self.message}
        if self.data is not None:
            error_dict["data"] = self.data
        return error_dict


class ConfigurationError(DocsError):
    """A registered service class lacks required declared metadata."""

    def __init__(self, service: Any, reason: str, data: Optional[Any] = None):
        service_repr = getattr(service, "__qualname__", repr(service))
        super().__init__(
            message=f"Invalid service class {service_repr}: {reason}", data=data
        )
        self.service = service


class MetadataParseError(DocsError):
    """A method docstring could not be turned into a summary."""

    def __init__(self, method: str, data: Optional[Any] = None):
        super().__init__(
            message=f"Cannot parse documentation of method: {method}", data=data
        )
        self.method = method


class MergeAmbiguityError(DocsError):
    """A descriptor path is used both as a container and as a scalar or array."""

    def __init__(self, path: str, reason: str, data: Optional[Any] = None):
        super().__init__(message=f"Ambiguous descriptor path '{path}': {reason}", data=data)
        self.path = path

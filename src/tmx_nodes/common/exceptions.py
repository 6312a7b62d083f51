"""Custom exceptions for the ThreatMetrix nodes.

Provides a hierarchy of exceptions for different error types.
All node errors inherit from TmxNodeError and abort the current
authentication attempt.
"""

from typing import Any, Dict, Optional


class TmxNodeError(Exception):
    """Base exception for all ThreatMetrix node errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        code: str = "TMX_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for host error reporting."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(TmxNodeError):
    """Raised when configuration is invalid or internally inconsistent."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ValidationError(TmxNodeError):
    """Raised when caller-supplied input fails validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class MissingStateError(TmxNodeError):
    """Raised when a required shared state key is absent."""

    def __init__(
        self,
        message: str,
        key: str,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        details["key"] = key
        self.key = key
        super().__init__(message, code="MISSING_STATE", details=details)


class RemoteServiceError(TmxNodeError):
    """Raised when the risk service answers with a failure or garbage."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        if body:
            details["body"] = body
        self.status_code = status_code
        self.body = body
        super().__init__(message, code="REMOTE_SERVICE_ERROR", details=details)


class MalformedResponseError(TmxNodeError):
    """Raised when a response field does not have the expected shape."""

    def __init__(
        self,
        message: str,
        field: str,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        details["field"] = field
        self.field = field
        super().__init__(message, code="MALFORMED_RESPONSE", details=details)


class NodeProcessingError(TmxNodeError):
    """Raised when a node fails to process the current attempt."""

    def __init__(
        self,
        message: str,
        node_name: str,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        details["node_name"] = node_name
        self.node_name = node_name
        super().__init__(message, code="NODE_PROCESSING_ERROR", details=details)

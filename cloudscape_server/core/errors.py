"""Error types raised by the Cloudscape catalog and MCP layers."""


class CloudscapeError(Exception):
    """Base exception for all Cloudscape Server errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CatalogIntegrityError(CloudscapeError):
    """Raised when the static catalog definition breaks an invariant."""


class MalformedAddressError(CloudscapeError):
    """Raised when a resource address does not have the expected shape."""

    def __init__(self, address: str, reason: str | None = None):
        self.address = address
        message = f"Invalid resource URI format: {address}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, {"address": address})


class UnknownResourceTypeError(MalformedAddressError):
    """Raised when an address names a resource type that does not exist."""

    def __init__(self, address: str, resource_type: str):
        self.resource_type = resource_type
        super().__init__(address, f"unknown resource type '{resource_type}'")


class NotFoundError(CloudscapeError):
    """Raised when a well-formed address does not match any catalog entry."""

    def __init__(self, resource_type: str, resource_id: str):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            f"{resource_type.capitalize()} '{resource_id}' not found",
            {"type": resource_type, "id": resource_id},
        )


class UnknownToolError(CloudscapeError):
    """Raised when a caller invokes a tool outside the fixed tool set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}", {"name": name})


class UnknownPromptError(CloudscapeError):
    """Raised when a caller requests a prompt outside the fixed prompt set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown prompt: {name}", {"name": name})


class InvalidToolArgumentsError(CloudscapeError):
    """Raised when tool arguments fail validation."""


__all__ = [
    "CloudscapeError",
    "CatalogIntegrityError",
    "MalformedAddressError",
    "UnknownResourceTypeError",
    "NotFoundError",
    "UnknownToolError",
    "UnknownPromptError",
    "InvalidToolArgumentsError",
]

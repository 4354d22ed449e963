"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation, raised before any I/O."""


class InvalidFieldForLineType(ValidationError):
    """A conditional field was set while the line type does not allow it."""

    def __init__(self, field: str, line_type) -> None:
        self.field = field
        self.line_type = line_type
        super().__init__(invalid_field_for_line_type(field, line_type))


class NotFoundError(DomainError):
    """The service answered a read request without the requested entity."""


class ServiceError(DomainError):
    """The service rejected a request.

    ``messages`` holds every error message found in the response document.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__(service_rejected(self.messages))


class TransportError(DomainError):
    """Network, HTTP or SOAP level failure while talking to the service."""


def invalid_field_for_line_type(field: str, line_type) -> str:
    """Return message for a conditional field set under the wrong line type."""
    type_name = getattr(line_type, "value", line_type)
    return f"Field '{field}' is not allowed for line type '{type_name}'"


def empty_batch(entity_name: str) -> str:
    """Return message for an empty batch passed to a connector."""
    return f"Expected at least one {entity_name} to send"


def wrong_entity_type(expected: str, actual: object) -> str:
    """Return message for a batch element of the wrong type."""
    return f"Expected an instance of {expected}, got {type(actual).__name__}"


def description_too_long(max_length: int, length: int) -> str:
    """Return message for a description over the allowed length."""
    return f"Description may be at most {max_length} characters, got {length}"


def service_rejected(messages: list[str]) -> str:
    """Return message for a request the service rejected."""
    if not messages:
        return "Request was rejected by the service"
    return "Request was rejected by the service: " + "; ".join(messages)


def entity_not_in_response(element_name: str) -> str:
    """Return message for a response without the expected entity element."""
    return f"Response does not contain a <{element_name}> element"


def non_finite_amount(amount) -> str:
    """Return message for an amount that is NaN or infinite."""
    return f"Amount must be a finite number, got {amount}"


def currency_mismatch(field: str, currency: str, expected: str) -> str:
    """Return message for a line amount in a different currency than its entity."""
    return f"Field '{field}' is in {currency}, expected {expected}"

"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidDispatchRequestError(ValidationError):
    """Raised when a dispatch request is structurally invalid.

    Nothing is recorded: the request never reached a dispatchable state.
    """

    pass


class DeliveryDisabledError(BusinessRuleViolationError):
    """Raised when an EMAIL dispatch is requested but mail is not configured."""

    def __init__(self, message: str = "Email delivery is not configured"):
        super().__init__(message)


class DeliveryError(DomainError):
    """Raised when the mail transport fails or times out.

    The message is a short description safe to store in the audit trail:
    no credentials, no server responses, no stack traces.
    """

    pass

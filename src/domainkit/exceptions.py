class DomainKitError(Exception):
    """Base exception for all domainkit errors."""


class DecodeError(ValueError, DomainKitError):
    """Raised when a payload or stored state blob does not match the expected shape."""

    def __init__(self, domain: str, what: str, original_exception: Exception | None = None):
        msg = f"Unable to decode {domain} {what}"
        if original_exception is not None:
            msg += f": {original_exception}"
        super().__init__(msg)
        self.domain = domain
        self.what = what


class EncodeError(DomainKitError):
    """Raised when a state cannot be serialized back to bytes.

    This indicates a defect, not a user-facing validation failure.
    """


class DomainValidationError(ValueError, DomainKitError):
    """Base exception for command and event validation failures."""


class UnsupportedActionError(DomainValidationError):
    """Raised when an action type is not part of the domain's action set."""

    def __init__(self, domain: str, action: str, kind: str = "command") -> None:
        super().__init__(f"unsupported {domain} {kind}: {action}")
        self.domain = domain
        self.action = action
        self.kind = kind


class MissingFieldError(DomainValidationError):
    """Raised when a field required by a command action is absent."""

    def __init__(self, action: str, field: str, requirement: str | None = None) -> None:
        super().__init__(f"{requirement or field} required for {action}")
        self.action = action
        self.field = field


class FieldConstraintError(MissingFieldError):
    """Raised when a command field is present but violates a declared constraint."""

    def __init__(self, action: str, field: str, constraint: str) -> None:
        DomainValidationError.__init__(self, f"{field} {constraint} for {action}")
        self.action = action
        self.field = field
        self.constraint = constraint


class DomainRegistryError(DomainKitError):
    """Base exception for domain registry errors."""


class DomainNotRegisteredError(LookupError, DomainRegistryError):
    """Raised when looking up a domain that hasn't been registered."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"No device domain registered for name: {domain}")
        self.domain = domain

"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


# Connection timeouts for the USGS request (seconds)
DEFAULT_CONNECT_TIMEOUT = 15
DEFAULT_READ_TIMEOUT = 10


@dataclass(frozen=True)
class DisplayStrings:
    """Labels shown for the tsunami alert tri-state.

    Attributes:
        alert_no: Shown for code 0
        alert_yes: Shown for code 1
        alert_not_available: Shown for any other code
    """
    alert_no: str = "no"
    alert_yes: str = "yes"
    alert_not_available: str = "not available"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.
    The request URL is deliberately absent; it is fixed.

    Attributes:
        strings: Display labels
        connect_timeout: Seconds to wait for the connection
        read_timeout: Seconds to wait for response data
    """
    strings: DisplayStrings = field(default_factory=DisplayStrings)
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    for name in ("connect_timeout", "read_timeout"):
        value = getattr(config, name)
        if value <= 0:
            errors.append(ValidationError(
                field=name,
                message=f"Timeout must be positive, got {value}",
            ))

    for name in ("alert_no", "alert_yes", "alert_not_available"):
        if not getattr(config.strings, name).strip():
            errors.append(ValidationError(
                field=f"strings.{name}",
                message="Label is empty",
                severity="warning",
            ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )

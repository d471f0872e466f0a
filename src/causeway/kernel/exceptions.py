"""Unified exception hierarchy for Causeway.

All library exceptions inherit from CausewayException, which implements the
Diagnostic capability itself, so library failures can be wrapped in a
Report like any other error kind.

Categories:
- ReportException: misuse of a report handle (consumed handle, cycles)
- ConfigurationException: invalid or unresolvable configuration
"""

from __future__ import annotations

from causeway.diagnostic.derive import DiagnosticMixin

# =============================================================================
# Base Exception
# =============================================================================


class CausewayException(DiagnosticMixin, Exception):
    """Base exception for all Causeway errors.

    Carries an optional error code, help text, and context dict for
    structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "causeway::report::consumed").
        help: Remediation hint shown alongside the message.
        context: Arbitrary key-value pairs for error context and debugging.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        help: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self._code = code if code is not None else self.default_code
        self._help = help
        self.context: dict = context if context is not None else {}

    def code(self) -> str | None:
        return self._code

    def help(self) -> str | None:
        return self._help


# =============================================================================
# Report Exceptions
# =============================================================================


class ReportException(CausewayException):
    """Invalid use of a report handle."""

    default_code = "causeway::report"


class ReportConsumedException(ReportException):
    """A mutating operation was called on a handle that was frozen or adopted by a parent."""

    default_code = "causeway::report::consumed"


class ReportOwnershipException(ReportException):
    """Adopting a child would make a node its own descendant."""

    default_code = "causeway::report::ownership"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(CausewayException, ValueError):
    """Configuration could not be loaded, resolved, or validated."""

    default_code = "causeway::config"

"""Tests for the Causeway kernel exception hierarchy."""

from causeway.diagnostic import Diagnostic
from causeway.kernel.exceptions import (
    CausewayException,
    ConfigurationException,
    ReportConsumedException,
    ReportException,
    ReportOwnershipException,
)


class TestCausewayException:
    def test_basic_creation(self):
        exc = CausewayException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code() is None
        assert exc.help() is None
        assert exc.context == {}

    def test_with_error_code_and_help(self):
        exc = CausewayException("bad input", code="app::bad_input", help="Fix the input.")
        assert exc.code() == "app::bad_input"
        assert exc.help() == "Fix the input."

    def test_context_defaults_to_empty_dict(self):
        exc = CausewayException("test")
        exc.context["key"] = "value"
        exc2 = CausewayException("test2")
        assert exc2.context == {}

    def test_is_a_diagnostic(self):
        exc = CausewayException("test")
        assert isinstance(exc, Diagnostic)
        assert exc.severity() is None
        assert exc.labels() is None
        assert exc.related() is None


class TestExceptionHierarchy:
    def test_report_exceptions_share_a_base(self):
        assert issubclass(ReportConsumedException, ReportException)
        assert issubclass(ReportOwnershipException, ReportException)
        assert issubclass(ReportException, CausewayException)

    def test_default_codes(self):
        assert ReportConsumedException("x").code() == "causeway::report::consumed"
        assert ReportOwnershipException("x").code() == "causeway::report::ownership"
        assert ConfigurationException("x").code() == "causeway::config"

    def test_explicit_code_wins_over_default(self):
        assert ReportConsumedException("x", code="custom").code() == "custom"

    def test_configuration_exception_is_value_error(self):
        assert issubclass(ConfigurationException, ValueError)

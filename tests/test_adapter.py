"""Tests for LibReport, the raisable Diagnostic wrapper around a report."""

import pytest

from causeway import LibReport
from causeway.cli.errors import ConfigParseError, IoError, NetworkTimeout
from causeway.diagnostic import Diagnostic, DiagnosticMixin, diagnostic
from causeway.kernel.types import Severity
from causeway.report import Report

TEST_DOCS_URL = "https://docs.example.test/causeway"


class TestLibReportForwarding:
    def test_is_an_exception_and_a_diagnostic(self, config_error):
        lib = LibReport(Report(config_error()))
        assert isinstance(lib, Exception)
        assert isinstance(lib, Diagnostic)

    def test_display_is_root_display(self, config_error):
        lib = LibReport(Report(config_error()).attach("extra context"))
        assert str(lib) == "Failed to parse config at config.json"

    def test_code_and_help_come_from_root(self, config_error):
        lib = LibReport(Report(config_error()))
        assert lib.code() == "config::invalid_format"
        assert lib.help() == "Ensure the configuration file is valid JSON."

    def test_source_and_labels_come_from_root(self, config_error):
        err = config_error()
        lib = LibReport(Report(err))
        assert lib.source_code() is err.src
        [labeled] = lib.labels()
        assert labeled.label == "syntax error here"
        assert (labeled.offset, labeled.length) == (10, 9)

    def test_absent_metadata_stays_absent(self):
        lib = LibReport(Report("plain string"))
        assert lib.code() is None
        assert lib.help() is None
        assert lib.url() is None
        assert lib.severity() is None
        assert lib.labels() is None
        assert lib.source_code() is None
        assert lib.related() is None
        assert lib.diagnostic_source() is None

    def test_child_codes_are_not_forwarded(self):
        lib = LibReport(Report("root without code").with_child(Report(NetworkTimeout(timeout=5))))
        assert lib.code() is None
        assert lib.help() is None

    def test_severity_is_forwarded(self):
        @diagnostic(code="cache::stale", severity=Severity.WARNING)
        class StaleCache(DiagnosticMixin, Exception):
            pass

        lib = LibReport(Report(StaleCache("served stale entry")))
        assert lib.severity() is Severity.WARNING
        assert lib.code() == "cache::stale"


class TestLibReportUrl:
    def test_url_is_derived_from_code(self, config_error):
        lib = LibReport(Report(config_error()))
        assert lib.url() == f"{TEST_DOCS_URL}/#config::invalid_format"

    def test_identical_across_wrappers(self):
        first = LibReport(Report(NetworkTimeout(timeout=30)))
        second = LibReport(Report(NetworkTimeout(timeout=30)))
        assert first.url() == second.url() == f"{TEST_DOCS_URL}/#network::timeout"
        assert first.url() == first.url()


class TestLibReportIntrospection:
    def test_raise_and_catch(self, config_error):
        with pytest.raises(LibReport) as info:
            raise LibReport(Report(config_error()))
        assert info.value.downcast(ConfigParseError) is not None
        assert info.value.downcast(IoError) is None

    def test_from_error_captures_cause_chain(self):
        try:
            try:
                open("/nonexistent/causeway/config.json", encoding="utf-8")
            except OSError as exc:
                raise IoError(exc) from exc
        except IoError as err:
            lib = LibReport.from_error(err)
        assert [type(node.current_context) for node in lib.iter_reports()] == [IoError, FileNotFoundError]
        assert lib.code() == "io::error"

    def test_from_error_wraps_non_exceptions(self):
        lib = LibReport.from_error("disk full")
        assert str(lib) == "disk full"
        assert len(list(lib.iter_reports())) == 1

    def test_wraps_shared_reports(self):
        shared = Report(NetworkTimeout(timeout=1)).attach("first try").into_cloneable()
        lib = LibReport(shared)
        assert lib.report is shared
        assert lib.code() == "network::timeout"

"""Tests for the demo error kinds and helpers."""

import pytest

from causeway import LibReport
from causeway.cli.demo import missing_file_detected, perform_task, read_config_file
from causeway.cli.errors import ConfigParseError, IoError, NetworkTimeout


class TestErrorKinds:
    def test_config_parse_error_metadata(self, config_error):
        err = config_error()
        assert str(err) == "Failed to parse config at config.json"
        assert err.code() == "config::invalid_format"
        assert err.src.snippet(err.labels()[0].span) == "!invalid "
        assert err.severity() is None

    def test_network_timeout(self):
        err = NetworkTimeout(timeout=30)
        assert str(err) == "Network timeout after 30s"
        assert err.code() == "network::timeout"
        assert err.help() == "Check network connectivity and consider increasing the timeout."
        assert err.labels() is None

    def test_io_error_has_no_help(self):
        err = IoError(OSError("disk full"))
        assert str(err) == "IO error: disk full"
        assert err.code() == "io::error"
        assert err.help() is None


class TestDemoHelpers:
    def test_perform_task_raises_lib_report(self):
        with pytest.raises(LibReport) as info:
            perform_task()
        lib = info.value
        assert isinstance(lib.downcast(ConfigParseError), ConfigParseError)
        assert lib.report.attachments == ("The application cannot proceed without a valid config.",)

    def test_read_config_file_wraps_os_error(self, tmp_path):
        with pytest.raises(IoError) as info:
            read_config_file(tmp_path / "missing.json")
        assert isinstance(info.value.source, FileNotFoundError)
        assert info.value.__cause__ is info.value.source

    def test_missing_file_detection(self, tmp_path):
        with pytest.raises(IoError) as info:
            read_config_file(tmp_path / "missing.json")
        assert missing_file_detected(LibReport.from_error(info.value))

    def test_no_missing_file_in_parse_error(self):
        with pytest.raises(LibReport) as info:
            perform_task()
        assert not missing_file_detected(info.value)

# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for StructlogAdapter — default LoggingPort implementation."""

import io
import json
import logging

import structlog

from causeway import LibReport
from causeway.api import report_api_error
from causeway.core.config import Config
from causeway.logging import LoggingPort, StructlogAdapter
from causeway.report import Report


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"causeway": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"causeway": {"logging": {"format": "json"}}}))
        assert adapter._format == "json"

    def test_unknown_format_falls_back_to_console(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"causeway": {"logging": {"format": "xml"}}}))
        assert adapter._format == "console"

    def test_configure_reads_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"causeway": {"logging": {"level": {"root": "INFO", "myapp.services": "debug"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"myapp.services": "DEBUG"}
        assert logging.getLogger("myapp.services").level == logging.DEBUG

    def test_env_overrides_root_level(self, monkeypatch):
        monkeypatch.setenv("CAUSEWAY_LOGGING_LEVEL_ROOT", "WARNING")
        adapter = StructlogAdapter()
        adapter.configure(Config({"causeway": {"logging": {"level": {"root": "DEBUG"}}}}))
        assert adapter._root_level == "WARNING"


class TestStructlogAdapterOutput:
    def test_json_lines_on_stream(self):
        stream = io.StringIO()
        StructlogAdapter(stream=stream).configure(Config({"causeway": {"logging": {"format": "json"}}}))
        structlog.get_logger("causeway.test").warning("disk_low", free_mb=12, mount="/données")

        [event] = _json_lines(stream.getvalue())
        assert event["event"] == "disk_low"
        assert event["level"] == "warning"
        assert event["logger"] == "causeway.test"
        assert event["free_mb"] == 12
        assert event["mount"] == "/données"
        assert "timestamp" in event

    def test_below_root_level_is_dropped(self):
        stream = io.StringIO()
        config = Config({"causeway": {"logging": {"format": "json", "level": {"root": "ERROR"}}}})
        StructlogAdapter(stream=stream).configure(config)
        structlog.get_logger("causeway.test").info("noise")
        assert stream.getvalue() == ""

    def test_file_receives_json(self, tmp_path):
        log_file = tmp_path / "causeway.jsonl"
        config = Config({"causeway": {"logging": {"format": "console", "file": str(log_file)}}})
        StructlogAdapter(stream=io.StringIO()).configure(config)
        structlog.get_logger("causeway.test").error("written_to_file")
        assert _json_lines(log_file.read_text(encoding="utf-8"))[0]["event"] == "written_to_file"

    def test_api_error_event_is_machine_readable(self, config_error, build, sequential_ids):
        stream = io.StringIO()
        StructlogAdapter(stream=stream).configure(Config({"causeway": {"logging": {"format": "json"}}}))
        lib = LibReport(Report(config_error()).attach("The application cannot proceed without a valid config."))
        report_api_error(lib, id_source=sequential_ids, build=build)

        [event] = _json_lines(stream.getvalue())
        assert event["event"] == "api_error_reported"
        assert event["logger"] == "causeway.api"
        assert event["correlation_id"] == "id-1"
        assert event["git_hash"] == "abc1234"
        assert event["history"] == ["The application cannot proceed without a valid config."]


class TestStructlogAdapterGetLogger:
    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("myapp.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "error", None))


class TestStructlogAdapterSetLevel:
    def test_set_level_updates_module_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        adapter.set_level("myapp.services", "WARNING")
        assert logging.getLogger("myapp.services").level == logging.WARNING

"""Tests for report-to-ApiError conversion."""

import threading
import uuid

from causeway.api import convert, generate_correlation_id
from causeway.api.conversion import flatten_history
from causeway.cli.errors import ConfigParseError, NetworkTimeout
from causeway.core.build import DEFAULT_DOCS_URL, UNKNOWN_GIT_HASH, reset_build_info
from causeway.kernel.types import NamedSource, SourceSpan
from causeway.report import Report


class TestConvertScenarios:
    def test_config_parse_error(self, config_error, build, sequential_ids):
        report = Report.new(config_error()).attach("The application cannot proceed without a valid config.")
        api_error = report.to_api_error(id_source=sequential_ids, build=build)
        assert api_error.correlation_id == "id-1"
        assert api_error.title == "Failed to parse config at config.json"
        assert api_error.code == "config::invalid_format"
        assert api_error.help == "Ensure the configuration file is valid JSON."
        assert api_error.git_hash == "abc1234"
        assert api_error.docs_url == "https://docs.example.test/causeway/#config::invalid_format"
        assert api_error.history == ("The application cannot proceed without a valid config.",)

    def test_error_without_metadata(self, build):
        api_error = Report(ValueError("bad value")).to_api_error(build=build)
        assert api_error.title == "bad value"
        assert api_error.code is None
        assert api_error.help is None
        assert api_error.docs_url is None
        assert set(api_error.to_dict()) == {"correlation_id", "title", "git_hash", "history"}

    def test_empty_source_file(self, build):
        err = ConfigParseError(path="empty.json", src=NamedSource("empty.json", ""), span=SourceSpan(0, 0))
        data = Report(err).to_api_error(build=build).to_dict()
        assert data["title"] == "Failed to parse config at empty.json"
        assert data["history"] == []

    def test_large_attachment_is_not_truncated(self, build):
        big = "".join(chr(0x41 + i % 26) for i in range(10_000))
        api_error = Report(NetworkTimeout(timeout=1)).attach(big).to_api_error(build=build)
        assert api_error.history == (big,)
        assert len(api_error.history[0]) == 10_000

    def test_default_build_info_is_used(self):
        api_error = Report(NetworkTimeout(timeout=1)).to_api_error()
        assert api_error.git_hash == "abc1234"
        assert api_error.docs_url == "https://docs.example.test/causeway/#network::timeout"

    def test_invalid_build_config_does_not_fail_conversion(self, monkeypatch):
        monkeypatch.setenv("CAUSEWAY_BUILD_DOCS_URL", "docs.example.test")
        reset_build_info()
        api_error = Report(ValueError("boom")).attach("ctx").to_api_error()
        assert api_error.git_hash == UNKNOWN_GIT_HASH
        assert api_error.history == ("ctx",)
        coded = Report(NetworkTimeout(timeout=1)).to_api_error()
        assert coded.docs_url == f"{DEFAULT_DOCS_URL}/#network::timeout"


class TestHistory:
    def test_pre_order_concatenation(self, build):
        tree = (
            Report("root")
            .attach("r1")
            .attach("r2")
            .with_child(Report("a").attach("a1").with_child(Report("a-child").attach("aa1")))
            .with_child(Report("b").attach("b1").attach("b2"))
        )
        assert tree.to_api_error(build=build).history == ("r1", "r2", "a1", "aa1", "b1", "b2")

    def test_non_string_attachments_are_displayed(self):
        assert flatten_history(Report("root").attach(42).attach({"k": 1}).iter_reports()) == ["42", "{'k': 1}"]

    def test_only_root_metadata_is_surfaced(self, build):
        tree = Report("root without code").with_child(Report(NetworkTimeout(timeout=5)).attach("upstream"))
        api_error = tree.to_api_error(build=build)
        assert api_error.code is None
        assert api_error.help is None
        assert api_error.docs_url is None
        assert api_error.history == ("upstream",)

    def test_conversion_does_not_mutate(self, build):
        report = Report(NetworkTimeout(timeout=5)).attach("ctx")
        report.to_api_error(build=build)
        report.to_api_error(build=build)
        assert report.attachments == ("ctx",)
        assert report.is_exclusive()
        report.attach("still exclusive")


class TestCorrelationIds:
    def test_generated_ids_are_uuids(self):
        assert uuid.UUID(generate_correlation_id()).version == 4

    def test_fresh_id_per_call(self, build):
        report = Report(NetworkTimeout(timeout=5))
        first = report.to_api_error(build=build)
        second = report.to_api_error(build=build)
        assert first.correlation_id != second.correlation_id
        assert first.to_dict() | {"correlation_id": None} == second.to_dict() | {"correlation_id": None}

    def test_injected_source(self, build, sequential_ids):
        report = Report("x")
        ids = [convert(report, id_source=sequential_ids, build=build).correlation_id for _ in range(3)]
        assert ids == ["id-1", "id-2", "id-3"]

    def test_concurrent_conversion_of_shared_tree(self, build):
        shared = (
            Report(NetworkTimeout(timeout=30))
            .attach("calling billing")
            .with_child(Report("dns failure").attach("resolver timeout"))
            .into_cloneable()
        )
        expected = shared.to_api_error(build=build).to_dict()
        ids: list[str] = []
        mismatches: list[dict] = []
        lock = threading.Lock()

        def worker() -> None:
            clone = shared.clone()
            local_ids = []
            local_bad = []
            for _ in range(1000):
                data = clone.to_api_error(build=build).to_dict()
                local_ids.append(data["correlation_id"])
                if data | {"correlation_id": expected["correlation_id"]} != expected:
                    local_bad.append(data)
            with lock:
                ids.extend(local_ids)
                mismatches.extend(local_bad)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert mismatches == []
        assert len(ids) == 8000
        assert len(set(ids)) == 8000

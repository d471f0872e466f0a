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
"""'causeway demo' — Walk through building, rendering, and flattening reports."""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from causeway.adapter import LibReport
from causeway.api.sink import report_api_error
from causeway.cli.console import console, err_console, print_section
from causeway.cli.errors import ConfigParseError, IoError
from causeway.core.build import BuildInfo, build_info
from causeway.kernel.types import NamedSource, SourceSpan
from causeway.rendering import GraphicalReportRenderer
from causeway.report import Report

logger = structlog.get_logger("causeway.cli")

DEMO_CONFIG_SOURCE = '{ "key": !!invalid }'


def perform_task() -> None:
    """Fail the way a config loader would, with a source snippet and context."""
    err = ConfigParseError(
        path="config.json",
        src=NamedSource("config.json", DEMO_CONFIG_SOURCE),
        span=SourceSpan(10, 9),
    )
    raise LibReport(Report(err).attach("The application cannot proceed without a valid config."))


def read_config_file(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise IoError(exc) from exc


def missing_file_detected(lib_report: LibReport) -> bool:
    """Typed introspection: was any cause in the tree a missing file?"""
    return any(True for _ in lib_report.report.iter_contexts(FileNotFoundError))


def _handle(lib_report: LibReport, *, as_json: bool, renderer: GraphicalReportRenderer, build: BuildInfo) -> None:
    if missing_file_detected(lib_report):
        logger.info("missing_file_detected", title=str(lib_report))
        if not as_json:
            console.print("[warning]Logic check: missing file detected[/warning]")

    api_error = report_api_error(lib_report, log=logger, build=build)
    if as_json:
        click.echo(api_error.to_json())
        return
    renderer.print(lib_report.report, console=err_console)
    console.print(f"\n[dim]\\[Diagnostic ID: {api_error.correlation_id}][/dim]")
    console.print_json(api_error.to_json())


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print only the ApiError records, one JSON object per line.")
@click.option(
    "--config-path",
    default="nonexistent.json",
    show_default=True,
    help="File the IO demo tries to read.",
)
@click.pass_obj
def demo_command(build: BuildInfo | None, as_json: bool, config_path: str) -> None:
    """Build two failure reports and show their rendered and flattened forms."""
    build = build or build_info()
    renderer = GraphicalReportRenderer(docs_base_url=build.docs_base_url)

    if not as_json:
        print_section("Demo 1: Config parse error")
    try:
        perform_task()
    except LibReport as lib_report:
        _handle(lib_report, as_json=as_json, renderer=renderer, build=build)

    if not as_json:
        print_section("Demo 2: IO error captured from a raised exception")
    try:
        read_config_file(config_path)
    except IoError as err:
        _handle(LibReport.from_error(err), as_json=as_json, renderer=renderer, build=build)
    else:
        if not as_json:
            console.print(f"[success]Read {config_path} without errors.[/success]")

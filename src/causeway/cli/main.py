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
"""Causeway CLI — demonstrations and build metadata."""

from __future__ import annotations

from pathlib import Path

import click

from causeway.core.build import resolve_build_info
from causeway.core.config import Config
from causeway.kernel.exceptions import ConfigurationException
from causeway.logging import StructlogAdapter


@click.group()
@click.version_option(package_name="causeway")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file (defaults to causeway.yaml in the working directory).",
)
@click.option("--log-level", help="Root log level, overriding causeway.logging.level.root.")
@click.option("--log-format", type=click.Choice(["console", "json"]), help="Log output format.")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, log_level: str | None, log_format: str | None) -> None:
    """Causeway — error reports as cause trees.

    The loaded configuration also decides the build metadata every
    subcommand reports.
    """
    try:
        config = Config.from_file(config_file) if config_file else Config.from_sources(Path.cwd())
        build = resolve_build_info(config)
    except ConfigurationException as exc:
        raise click.ClickException(str(exc)) from exc
    overrides: dict = {}
    if log_level:
        overrides.setdefault("level", {})["root"] = log_level.upper()
    if log_format:
        overrides["format"] = log_format
    if overrides:
        config = config.merged({"causeway": {"logging": overrides}})
    adapter = StructlogAdapter()
    adapter.configure(config)
    ctx.call_on_close(adapter.close)
    ctx.obj = build


from causeway.cli.demo import demo_command  # noqa: E402
from causeway.cli.info import info_command  # noqa: E402

cli.add_command(demo_command, name="demo")
cli.add_command(info_command, name="info")

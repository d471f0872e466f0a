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
"""'causeway info' — Display version and build metadata."""

from __future__ import annotations

import platform

import click
from rich.table import Table

from causeway import __version__
from causeway.cli.console import console
from causeway.core.build import BuildInfo, build_info


@click.command()
@click.pass_obj
def info_command(build: BuildInfo | None) -> None:
    """Show the version, git revision, and documentation base URL."""
    info = build or build_info()
    table = Table(title="[causeway]Causeway[/causeway]", border_style="dim", show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Version", __version__)
    table.add_row("Git hash", info.git_hash)
    table.add_row("Docs", info.docs_base_url)
    table.add_row("Python", platform.python_version())
    console.print(table)

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
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

CAUSEWAY_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "causeway": "bold magenta",
    "dim": "dim",
})

console = Console(theme=CAUSEWAY_THEME)
err_console = Console(theme=CAUSEWAY_THEME, stderr=True)


def print_section(title: str) -> None:
    """Print a section header: '--- Demo 1: Config parse error ---'."""
    console.print(f"\n[causeway]---[/causeway] [info]{title}[/info] [causeway]---[/causeway]")

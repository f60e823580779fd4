# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

r"""Walk an installed dependency tree and sniff every module.

The walk is depth-first over a LIFO stack of pending modules.  Each
module's nested dependencies live in ``<module>/node_modules``; every
entry there except ``.bin`` is a dependency module::

    app/                     app@1.0.0
    └── node_modules/
        ├── .bin/            (skipped)
        ├── lib-a/           app@1.0.0 → lib-a@2.1.0
        │   └── node_modules/
        │       └── lib-c/   app@1.0.0 → lib-a@2.1.0 → lib-c@0.3.0
        └── lib-b/           app@1.0.0 → lib-b@1.4.2

Records are returned in visitation order.  Any error aborts the whole
walk: every module in the tree must be attributable.

Usage::

    from license_sniffer.tree import format_records_table, sniff_tree

    records = await sniff_tree(Path('.'))
    print(format_records_table(records))
"""

from __future__ import annotations

import asyncio
import json
from io import StringIO
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from license_sniffer._fs import list_directory_if_exists
from license_sniffer._types import DependencyRecord, ModuleVisit
from license_sniffer.logging import get_logger
from license_sniffer.manifest import manifest_identity, read_manifest
from license_sniffer.sniffer import SniffOptions, sniff_module

__all__ = [
    'DEPENDENCY_DIRNAME',
    'EXCLUDED_ENTRIES',
    'format_records_table',
    'print_records_table',
    'records_to_json',
    'sniff_tree',
]

log = get_logger('license_sniffer.tree')

#: Directory holding a module's nested dependencies.
DEPENDENCY_DIRNAME: Final[str] = 'node_modules'

#: Entries of the dependency directory that are not modules.
EXCLUDED_ENTRIES: Final[frozenset[str]] = frozenset({'.bin'})


async def sniff_tree(root_path: Path | str, options: SniffOptions | None = None) -> list[DependencyRecord]:
    """Sniff the module at *root_path* and every module nested below it.

    Args:
        root_path: Root module directory.
        options: Detection options passed to every
            :func:`~license_sniffer.sniffer.sniff_module` call.

    Returns:
        One :class:`DependencyRecord` per module, in visitation order.

    Raises:
        NotFoundError: A module in the tree has no ``package.json``.
        ParseError: A manifest is malformed.
        FilesystemError: A file or directory could not be read.
    """
    opts = options or SniffOptions()
    records: list[DependencyRecord] = []
    pending: list[ModuleVisit] = [ModuleVisit(module_path=Path(root_path))]

    while pending:
        visit = pending.pop()
        result, manifest = await asyncio.gather(
            sniff_module(visit.module_path, opts),
            read_manifest(visit.module_path),
        )
        chain = (*visit.parent_chain, manifest_identity(manifest))
        records.append(
            DependencyRecord(
                module_path=visit.module_path,
                names=result.names,
                text=result.text,
                dependency_chain=chain,
            )
        )
        log.debug('module_sniffed', module=visit.module_path, chain=chain, licenses=result.names)

        deps_dir = visit.module_path / DEPENDENCY_DIRNAME
        for entry in await list_directory_if_exists(deps_dir):
            if entry in EXCLUDED_ENTRIES:
                continue
            pending.append(ModuleVisit(module_path=deps_dir / entry, parent_chain=chain))

    unknown = sum(1 for r in records if not r.is_known)
    log.info('tree_sniffed', root=Path(root_path), modules=len(records), unknown=unknown)
    return records


# ── Rendering ────────────────────────────────────────────────────────


def records_to_json(records: list[DependencyRecord], *, indent: int = 2) -> str:
    """Serialize dependency records to JSON.

    Args:
        records: Records from :func:`sniff_tree`.
        indent: JSON indentation level.

    Returns:
        JSON string.
    """
    return json.dumps([r.to_dict() for r in records], indent=indent)


def print_records_table(
    records: list[DependencyRecord],
    console: Console | None = None,
) -> None:
    """Print dependency records as a Rich table.

    Args:
        records: Records from :func:`sniff_tree`.
        console: Rich :class:`Console` to print to.  When ``None``,
            a default ``Console()`` is created (auto-detects TTY).
    """
    if console is None:
        console = Console()

    table = Table(
        show_header=True,
        header_style='bold',
        show_edge=False,
        pad_edge=False,
        expand=True,
    )
    table.add_column('Module', min_width=20, style='bold')
    table.add_column('License', min_width=14)
    table.add_column('Depth', width=5, justify='right')
    table.add_column('Path', ratio=2, style='dim')

    for r in records:
        if r.is_known:
            lic = Text(', '.join(r.names), style='green')
        else:
            lic = Text('Unknown', style='bold red')
        table.add_row(
            Text(r.identity),
            lic,
            str(max(len(r.dependency_chain) - 1, 0)),
            Text(str(r.module_path)),
        )

    console.print(table)

    unknown = [r for r in records if not r.is_known]
    if not unknown:
        console.print(f'\n[bold green]{len(records)}/{len(records)} modules have a known license.[/]')
        return
    console.print(f'\n{len(records) - len(unknown)}/{len(records)} modules have a known license.')
    console.print()
    for r in unknown:
        console.print(f'[bold yellow]warning[/][bold]: no license found for {escape(r.identity)}[/]')
        console.print(f'  [cyan]-->[/] {escape(str(r.module_path))}')
        if len(r.dependency_chain) > 1:
            console.print(f'   [cyan]=[/] [bold]note[/]: required via {escape(" → ".join(r.dependency_chain[:-1]))}')
        console.print()


def format_records_table(records: list[DependencyRecord], *, color: bool = False) -> str:
    """Format dependency records as a string.

    Thin wrapper around :func:`print_records_table` that captures the
    Rich output to a string.

    Args:
        records: Records from :func:`sniff_tree`.
        color: If ``True``, include ANSI color codes in the output.

    Returns:
        Multi-line formatted string.
    """
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, width=120)
    print_records_table(records, console=console)
    return buf.getvalue().rstrip('\n')

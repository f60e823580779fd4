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

r"""Detect the license of a single module directory.

Three strategies run in a fixed order; the first one that yields a
known license wins::

    ┌──────────────┐  unknown  ┌──────────────┐  unknown  ┌──────────────┐
    │ package.json │─────────→│ LICENSE file │─────────→│ README.md    │
    │ license(s)   │           │ classified   │           │ ## License   │
    └──────────────┘           └──────────────┘           └──────────────┘

1. **Manifest**: names from ``license`` / ``licenses``.  Text comes
   from the first license file on disk, else from the README license
   section, else (with ``generate_body``) from the catalog template.
2. **License file**: the first of ``LICENSE``, ``UNLICENSE``,
   ``LICENSE.txt``, ``UNLICENSE.txt`` classified by
   :func:`~license_sniffer.matcher.classify`.
3. **README**: the blocks under the first ``License`` / ``Licence``
   heading of ``README.md`` (any case), classified the same way.

Usage::

    from license_sniffer.sniffer import SniffOptions, sniff_module

    result = await sniff_module(Path('node_modules/left-pad'))
    result.names  # ("WTFPL",)
"""

from __future__ import annotations

import datetime
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from license_sniffer._chain import first
from license_sniffer._fs import file_exists, list_directory_if_exists, read_text_file
from license_sniffer._markdown import parse_markdown
from license_sniffer._types import UNKNOWN, LicenseResult
from license_sniffer.catalog import LicenseCatalog, default_catalog
from license_sniffer.logging import get_logger
from license_sniffer.manifest import read_manifest, resolve_manifest_licenses
from license_sniffer.matcher import classify

__all__ = [
    'LICENSE_FILENAMES',
    'README_FILENAME',
    'SniffOptions',
    'extract_license_section',
    'render_license_text',
    'sniff_module',
]

log = get_logger('license_sniffer.sniffer')

#: License files tried in order.  Names are case-sensitive.
LICENSE_FILENAMES: Final[tuple[str, ...]] = ('LICENSE', 'UNLICENSE', 'LICENSE.txt', 'UNLICENSE.txt')

#: Preferred README name; other casings are found by listing the module.
README_FILENAME: Final[str] = 'README.md'

_LICENSE_HEADINGS: Final[frozenset[str]] = frozenset({'license', 'licence'})

_YEAR_PLACEHOLDER: Final[str] = '<year>'
_HOLDER_PLACEHOLDER: Final[str] = '<copyright holders>'


@dataclass(frozen=True)
class SniffOptions:
    """Options for :func:`sniff_module` and :func:`~license_sniffer.tree.sniff_tree`.

    Attributes:
        generate_body: Render license text from the catalog template
            when a manifest names a license but no text is on disk.
        catalog: Reference templates.  ``None`` uses the built-in
            catalog.
    """

    generate_body: bool = True
    catalog: LicenseCatalog | None = None

    def resolved_catalog(self) -> LicenseCatalog:
        """Return :attr:`catalog`, or the shared default catalog."""
        return self.catalog if self.catalog is not None else default_catalog()


# ── Template rendering ───────────────────────────────────────────────


def render_license_text(
    name: str,
    holder: str,
    *,
    catalog: LicenseCatalog | None = None,
    year: int | None = None,
) -> str | None:
    """Fill the catalog template for *name* with *holder* and *year*.

    Only the first ``<year>`` and the first ``<copyright holders>``
    placeholders are replaced.

    Args:
        name: License name; must be one of a template's aliases
            (case-sensitive).
        holder: Copyright holder, usually the module name.
        catalog: Templates to search.  Defaults to the built-in catalog.
        year: Copyright year.  Defaults to the current year.

    Returns:
        The rendered text, or ``None`` if no template matches *name*.
    """
    template = (catalog if catalog is not None else default_catalog()).find(name)
    if template is None:
        return None
    if year is None:
        year = datetime.date.today().year
    text = template.text.replace(_YEAR_PLACEHOLDER, str(year), 1)
    return text.replace(_HOLDER_PLACEHOLDER, holder, 1)


def _generate_text(names: Iterable[str], holder: str, catalog: LicenseCatalog) -> str | None:
    for name in names:
        text = render_license_text(name, holder, catalog=catalog)
        if text is not None:
            return text
    return None


# ── README section extraction ────────────────────────────────────────


def extract_license_section(markdown: str) -> str | None:
    """Return the body of the first ``License`` section of *markdown*.

    The section runs from the first heading whose text is ``License``
    or ``Licence`` (any case) up to the next heading of any level.
    Its blocks are joined with a blank line.

    Returns:
        The section text, or ``None`` if there is no such heading or
        the section is empty.
    """
    blocks = parse_markdown(markdown)
    for index, block in enumerate(blocks):
        if block.kind != 'header' or block.text.strip().lower() not in _LICENSE_HEADINGS:
            continue
        section: list[str] = []
        for following in blocks[index + 1 :]:
            if following.kind == 'header':
                break
            section.append(following.text)
        return '\n\n'.join(section) or None
    return None


# ── File lookup ──────────────────────────────────────────────────────


def _existing_file(directory: Path) -> Callable[[str], Awaitable[Path | None]]:
    async def lookup(name: str) -> Path | None:
        path = directory / name
        return path if await file_exists(path) else None

    return lookup


async def _find_license_file(module_path: Path) -> Path | None:
    return await first(LICENSE_FILENAMES, _existing_file(module_path), None)


async def _find_readme(module_path: Path) -> Path | None:
    lookup = _existing_file(module_path)
    literal = await lookup(README_FILENAME)
    if literal is not None:
        return literal
    entries = await list_directory_if_exists(module_path)
    others = [e for e in entries if e.lower() == README_FILENAME.lower() and e != README_FILENAME]
    return await first(others, lookup, None)


async def _read_readme_section(module_path: Path) -> str | None:
    readme = await _find_readme(module_path)
    if readme is None:
        return None
    return extract_license_section(await read_text_file(readme))


async def _read_literal_text(module_path: Path) -> str | None:
    license_file = await _find_license_file(module_path)
    if license_file is not None:
        return await read_text_file(license_file)
    return await _read_readme_section(module_path)


# ── Strategies ───────────────────────────────────────────────────────


async def _sniff_manifest(module_path: Path, options: SniffOptions) -> LicenseResult:
    manifest: Mapping[str, Any] = await read_manifest(module_path)
    declared = resolve_manifest_licenses(manifest)
    if not declared.is_known:
        return UNKNOWN

    text = await _read_literal_text(module_path)
    if text is None and options.generate_body:
        holder = str(manifest.get('name', ''))
        text = _generate_text(declared.names, holder, options.resolved_catalog())
        if text is not None:
            log.debug('license_text_generated', module=module_path, holder=holder)
    return declared.with_text(text)


async def _sniff_license_file(module_path: Path, options: SniffOptions) -> LicenseResult:
    license_file = await _find_license_file(module_path)
    if license_file is None:
        return UNKNOWN
    return classify(await read_text_file(license_file), catalog=options.resolved_catalog())


async def _sniff_readme(module_path: Path, options: SniffOptions) -> LicenseResult:
    section = await _read_readme_section(module_path)
    if section is None:
        return UNKNOWN
    return classify(section, catalog=options.resolved_catalog())


_Strategy = Callable[[Path, SniffOptions], Awaitable[LicenseResult]]

_STRATEGIES: Final[tuple[tuple[str, _Strategy], ...]] = (
    ('manifest', _sniff_manifest),
    ('license_file', _sniff_license_file),
    ('readme', _sniff_readme),
)


async def sniff_module(module_path: Path | str, options: SniffOptions | None = None) -> LicenseResult:
    """Detect the license of the module at *module_path*.

    Args:
        module_path: Module directory containing ``package.json``.
        options: Detection options.  Defaults to :class:`SniffOptions`.

    Returns:
        The first known result of the manifest, license-file and README
        strategies, or :data:`~license_sniffer._types.UNKNOWN`.

    Raises:
        NotFoundError: The module has no ``package.json``.
        ParseError: The ``package.json`` is malformed.
        FilesystemError: A file could not be read.
    """
    path = Path(module_path)
    opts = options or SniffOptions()

    async def attempt(entry: tuple[str, _Strategy]) -> LicenseResult | None:
        label, strategy = entry
        result = await strategy(path, opts)
        if not result.is_known:
            return None
        log.debug('strategy_matched', module=path, strategy=label, licenses=result.names)
        return result

    result = await first(_STRATEGIES, attempt, UNKNOWN)
    if not result.is_known:
        log.debug('license_unknown', module=path)
    return result

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

r"""Reference license catalog: loads TOML data and answers lookups.

The catalog is an ordered list of :class:`LicenseTemplate` entries.
Order is significant: when two templates are equally close to a
candidate text, the earlier one wins.

Usage::

    from license_sniffer.catalog import LicenseCatalog, default_catalog

    catalog = default_catalog()  # built-in data, loaded once
    catalog = LicenseCatalog.load(Path('my_licenses.toml'))

    catalog.find('BSD').name  # "BSD-2-Clause"
    catalog.names()  # ("MIT", "BSD-2-Clause", ...)
"""

from __future__ import annotations

import importlib.resources
import sys
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from license_sniffer._types import LicenseTemplate
from license_sniffer.errors import CatalogError
from license_sniffer.logging import get_logger

__all__ = [
    'LicenseCatalog',
    'default_catalog',
    'reset_default_catalog',
]

log = get_logger('license_sniffer.catalog')


def _builtin_catalog_path() -> Path:
    """Return the path to the bundled ``licenses.toml``."""
    return Path(str(importlib.resources.files('license_sniffer') / 'data' / 'licenses.toml'))


@dataclass(frozen=True)
class LicenseCatalog:
    """Immutable, ordered collection of reference license templates.

    Attributes:
        templates: Templates in catalog order.
    """

    templates: tuple[LicenseTemplate, ...] = ()

    def __iter__(self) -> Iterator[LicenseTemplate]:
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    def names(self) -> tuple[str, ...]:
        """Return every canonical license name, in catalog order."""
        return tuple(t.name for t in self.templates)

    def find(self, name: str) -> LicenseTemplate | None:
        """Return the first template listing *name* as an alias.

        Matching is exact and case-sensitive.
        """
        for template in self.templates:
            if name in template.aliases:
                return template
        return None

    @classmethod
    def from_entries(cls, entries: list[dict[str, object]]) -> LicenseCatalog:
        """Build a catalog from ``[[license]]`` tables.

        Raises:
            CatalogError: An entry is missing a field, has a field of
                the wrong type, or repeats an earlier name.
        """
        errors: list[str] = []
        templates: list[LicenseTemplate] = []
        seen: set[str] = set()
        for index, entry in enumerate(entries):
            where = f'license[{index}]'
            name = entry.get('name')
            text = entry.get('text')
            aliases = entry.get('aliases', [])
            if not isinstance(name, str) or not name:
                errors.append(f'{where}.name must be a non-empty string')
                continue
            if not isinstance(text, str):
                errors.append(f'{where} ({name}): text must be a string')
                continue
            if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
                errors.append(f'{where} ({name}): aliases must be a list of strings')
                continue
            if name in seen:
                errors.append(f'{where}: duplicate license name {name!r}')
                continue
            seen.add(name)
            all_aliases = (name, *(a for a in aliases if a != name))
            templates.append(LicenseTemplate(name=name, aliases=all_aliases, text=text))

        if errors:
            raise CatalogError(
                f'License catalog has {len(errors)} error(s): ' + '; '.join(errors),
                hint='Each [[license]] entry needs a unique "name", a "text" string and optional "aliases".',
            )
        return cls(templates=tuple(templates))

    @classmethod
    def load(cls, path: Path | None = None) -> LicenseCatalog:
        """Load a catalog from a TOML file.

        Args:
            path: Catalog file.  Defaults to the bundled
                ``data/licenses.toml``.

        Raises:
            CatalogError: The file is missing, unreadable, or invalid.
        """
        catalog_path = path or _builtin_catalog_path()
        try:
            with catalog_path.open('rb') as f:
                data = tomllib.load(f)
        except FileNotFoundError as exc:
            raise CatalogError(f'License catalog not found: {catalog_path}') from exc
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise CatalogError(f'Cannot load license catalog {catalog_path}: {exc}') from exc

        entries = data.get('license', [])
        if not isinstance(entries, list):
            raise CatalogError(f'{catalog_path}: "license" must be an array of tables')
        catalog = cls.from_entries(entries)
        log.debug('catalog_loaded', path=str(catalog_path), count=len(catalog))
        return catalog


_default_catalog: LicenseCatalog | None = None
_default_lock = threading.Lock()


def default_catalog() -> LicenseCatalog:
    """Return the shared catalog loaded from the bundled data.

    The catalog is loaded once on first call and cached for the
    lifetime of the process.  Safe to call from several threads.
    """
    global _default_catalog  # noqa: PLW0603
    if _default_catalog is None:
        with _default_lock:
            if _default_catalog is None:
                _default_catalog = LicenseCatalog.load()
    return _default_catalog


def reset_default_catalog() -> None:
    """Drop the cached default catalog (for testing)."""
    global _default_catalog  # noqa: PLW0603
    with _default_lock:
        _default_catalog = None

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

r"""Identify the license of installed modules and whole dependency trees.

A module is a directory with a ``package.json``.  Its license is taken
from the manifest's ``license`` / ``licenses`` fields, else from a
``LICENSE`` file, else from the ``License`` section of its README; the
last two are classified by fuzzy comparison against a catalog of
reference license texts.

Usage::

    import asyncio
    from license_sniffer import sniff_module, sniff_tree

    result = asyncio.run(sniff_module('node_modules/left-pad'))
    print(result.describe())

    for record in asyncio.run(sniff_tree('.')):
        print(' > '.join(record.dependency_chain), record.names)
"""

from license_sniffer._types import UNKNOWN, DependencyRecord, LicenseResult, LicenseTemplate
from license_sniffer.catalog import LicenseCatalog, default_catalog
from license_sniffer.errors import (
    CatalogError,
    ConfigError,
    FilesystemError,
    LicenseSnifferError,
    NotFoundError,
    ParseError,
)
from license_sniffer.manifest import resolve_manifest_licenses
from license_sniffer.matcher import MATCH_THRESHOLD, classify, closest_match
from license_sniffer.sniffer import SniffOptions, render_license_text, sniff_module
from license_sniffer.tree import sniff_tree

__all__ = [
    'MATCH_THRESHOLD',
    'UNKNOWN',
    'CatalogError',
    'ConfigError',
    'DependencyRecord',
    'FilesystemError',
    'LicenseCatalog',
    'LicenseResult',
    'LicenseSnifferError',
    'LicenseTemplate',
    'NotFoundError',
    'ParseError',
    'SniffOptions',
    'classify',
    'closest_match',
    'default_catalog',
    'render_license_text',
    'resolve_manifest_licenses',
    'sniff_module',
    'sniff_tree',
]

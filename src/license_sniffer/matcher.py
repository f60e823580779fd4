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

r"""Classify a block of text as a known license.

Every catalog template is compared with the candidate text using the
normalized Levenshtein distance::

    distance = levenshtein(template, candidate) / max(len(template), len(candidate))

The closest template wins (ties go to the earlier catalog entry) and is
accepted only if its distance is strictly below :data:`MATCH_THRESHOLD`.
Comparison is over raw characters: no case folding or whitespace
normalization.

Only distances under the threshold need to be exact, so each comparison
is bounded: :func:`rapidfuzz.distance.Levenshtein.distance` stops as
soon as the distance is known to exceed the bound, which keeps
full-length texts such as Apache-2.0 fast to reject or accept.

Usage::

    from license_sniffer.matcher import classify

    result = classify(Path('LICENSE').read_text())
    result.names  # ("MIT",)
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Final

from rapidfuzz.distance import Levenshtein

from license_sniffer._types import UNKNOWN, LicenseResult, LicenseTemplate
from license_sniffer.catalog import LicenseCatalog, default_catalog

__all__ = [
    'MATCH_THRESHOLD',
    'LicenseMatch',
    'classify',
    'closest_match',
    'levenshtein',
]

#: Normalized distance a candidate must stay strictly below to match.
MATCH_THRESHOLD: Final[float] = 0.2


@dataclass(frozen=True)
class LicenseMatch:
    """A template that matched a candidate text.

    Attributes:
        template: The matching catalog template.
        distance: Normalized edit distance, ``0.0`` for identical text.
    """

    template: LicenseTemplate
    distance: float

    @property
    def name(self) -> str:
        """Canonical name of the matched license."""
        return self.template.name


def levenshtein(a: str, b: str, *, limit: int | None = None) -> int:
    """Return the Levenshtein distance between *a* and *b*.

    Insertions, deletions and substitutions each cost one.

    Args:
        a: First string.
        b: Second string.
        limit: If given, the result is exact only when it is at most
            *limit*; larger distances are reported as ``limit + 1``.

    Returns:
        The edit distance, capped at ``limit + 1`` when *limit* is set.
    """
    return Levenshtein.distance(a, b, score_cutoff=limit)


@functools.lru_cache(maxsize=512)
def _closest(catalog: LicenseCatalog, candidate: str) -> LicenseMatch | None:
    best: LicenseMatch | None = None
    for template in catalog:
        longest = max(len(template.text), len(candidate))
        if longest == 0:
            distance = 0.0
        else:
            bound = int(MATCH_THRESHOLD * longest) + 1
            distance = levenshtein(template.text, candidate, limit=bound) / longest
        if distance >= MATCH_THRESHOLD:
            continue
        if best is None or distance < best.distance:
            best = LicenseMatch(template=template, distance=distance)
            if distance == 0.0:
                break
    return best


def closest_match(candidate: str, *, catalog: LicenseCatalog | None = None) -> LicenseMatch | None:
    """Return the catalog template closest to *candidate*.

    Args:
        candidate: Text to classify.
        catalog: Templates to compare against.  Defaults to
            :func:`~license_sniffer.catalog.default_catalog`.

    Returns:
        The best :class:`LicenseMatch` whose distance is below
        :data:`MATCH_THRESHOLD`, or ``None`` if no template is close
        enough.
    """
    return _closest(catalog if catalog is not None else default_catalog(), candidate)


def classify(candidate: str, *, catalog: LicenseCatalog | None = None) -> LicenseResult:
    """Classify *candidate* as a known license.

    Returns:
        A result naming the matched license and carrying *candidate* as
        its text, or :data:`~license_sniffer._types.UNKNOWN`.
    """
    match = closest_match(candidate, catalog=catalog)
    if match is None:
        return UNKNOWN
    return LicenseResult(names=(match.name,), text=candidate)

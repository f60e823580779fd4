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

r"""Markdown block splitter.

A small, zero-dependency parser that splits a Markdown document into a
flat sequence of top-level blocks.  Inline markup is left untouched;
only block structure matters to callers, which look for a heading and
collect the blocks under it.

Block kinds:

- ``header``: ATX (``## Title``) and setext (``Title`` / ``===``)
  headings.  ``text`` is the heading text, ``level`` is 1–6.
- ``paragraph``: consecutive non-blank lines.
- ``code``: fenced (triple backtick or tilde) and indented code.
- ``list``: a bullet or ordered list, including continuation lines.
- ``blockquote``: ``>``-prefixed lines, with the marker removed.
- ``html``: raw HTML block.
- ``rule``: thematic break (``---``, ``***``, ``___``).

Usage::

    from license_sniffer._markdown import parse_markdown

    blocks = parse_markdown('# License\n\nMIT\n')
    # [MarkdownBlock(kind='header', text='License', level=1),
    #  MarkdownBlock(kind='paragraph', text='MIT', level=0)]
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    'MarkdownBlock',
    'parse_markdown',
]

_ATX_RE = re.compile(r'^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$')
_ATX_CLOSING_RE = re.compile(r'(?:^|[ \t]+)#+$')
_SETEXT_RE = re.compile(r'^ {0,3}(=+|-+)[ \t]*$')
_FENCE_RE = re.compile(r'^ {0,3}(`{3,}|~{3,})')
_RULE_RE = re.compile(r'^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$')
_INDENTED_RE = re.compile(r'^(?: {4}|\t)')
_QUOTE_RE = re.compile(r'^ {0,3}> ?')
_LIST_RE = re.compile(r'^ {0,3}(?:[-+*]|\d{1,9}[.)])(?:[ \t]+|$)')
_HTML_RE = re.compile(r'^ {0,3}<[A-Za-z/!?]')


@dataclass(frozen=True)
class MarkdownBlock:
    """One top-level Markdown block.

    Attributes:
        kind: Block kind (``"header"``, ``"paragraph"``, ...).
        text: Heading text for headers, block content otherwise.
        level: Heading level for headers, ``0`` otherwise.
    """

    kind: str
    text: str
    level: int = 0


def _is_blank(line: str) -> bool:
    return not line.strip()


def _closes_fence(line: str, marker: str) -> bool:
    stripped = line.strip()
    return len(stripped) >= len(marker) and set(stripped) == {marker[0]} and len(line) - len(line.lstrip(' ')) < 4


def _interrupts_paragraph(line: str) -> bool:
    return bool(
        _ATX_RE.match(line)
        or _FENCE_RE.match(line)
        or _QUOTE_RE.match(line)
        or _RULE_RE.match(line)
        or _LIST_RE.match(line)
        or _HTML_RE.match(line)
    )


def _dedent(line: str) -> str:
    if line.startswith('\t'):
        return line[1:]
    return line[4:] if line.startswith('    ') else line.lstrip(' ')


def parse_markdown(text: str) -> list[MarkdownBlock]:
    """Split *text* into top-level Markdown blocks, in document order."""
    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    blocks: list[MarkdownBlock] = []
    i = 0
    n = len(lines)

    while i < n:
        line = lines[i]
        if _is_blank(line):
            i += 1
            continue

        fence = _FENCE_RE.match(line)
        if fence:
            marker = fence.group(1)
            body: list[str] = []
            i += 1
            while i < n and not _closes_fence(lines[i], marker):
                body.append(lines[i])
                i += 1
            i += 1
            blocks.append(MarkdownBlock('code', '\n'.join(body)))
            continue

        atx = _ATX_RE.match(line)
        if atx:
            heading = _ATX_CLOSING_RE.sub('', atx.group(2) or '').strip()
            blocks.append(MarkdownBlock('header', heading, len(atx.group(1))))
            i += 1
            continue

        if _RULE_RE.match(line):
            blocks.append(MarkdownBlock('rule', line.strip()))
            i += 1
            continue

        if _INDENTED_RE.match(line):
            body = []
            while i < n and (_is_blank(lines[i]) or _INDENTED_RE.match(lines[i])):
                body.append(_dedent(lines[i]))
                i += 1
            while body and _is_blank(body[-1]):
                body.pop()
            blocks.append(MarkdownBlock('code', '\n'.join(body)))
            continue

        if _QUOTE_RE.match(line):
            body = []
            while i < n and not _is_blank(lines[i]):
                body.append(_QUOTE_RE.sub('', lines[i], count=1))
                i += 1
            blocks.append(MarkdownBlock('blockquote', '\n'.join(body).strip()))
            continue

        if _LIST_RE.match(line):
            body = []
            while i < n:
                current = lines[i]
                if _is_blank(current):
                    # A blank line continues the list only if more list
                    # content follows it.
                    nxt = lines[i + 1] if i + 1 < n else ''
                    if _is_blank(nxt) or not (_LIST_RE.match(nxt) or _INDENTED_RE.match(nxt)):
                        break
                elif body and not (_LIST_RE.match(current) or _INDENTED_RE.match(current)):
                    if _interrupts_paragraph(current) or _is_blank(lines[i - 1]):
                        break
                body.append(current.rstrip())
                i += 1
            blocks.append(MarkdownBlock('list', '\n'.join(body).strip('\n')))
            continue

        if _HTML_RE.match(line):
            body = []
            while i < n and not _is_blank(lines[i]):
                body.append(lines[i].rstrip())
                i += 1
            blocks.append(MarkdownBlock('html', '\n'.join(body)))
            continue

        # Paragraph, possibly turned into a setext heading.
        body = [line.strip()]
        i += 1
        setext_level = 0
        while i < n and not _is_blank(lines[i]):
            setext = _SETEXT_RE.match(lines[i])
            if setext:
                setext_level = 1 if setext.group(1).startswith('=') else 2
                i += 1
                break
            if _interrupts_paragraph(lines[i]):
                break
            body.append(lines[i].strip())
            i += 1
        if setext_level:
            blocks.append(MarkdownBlock('header', ' '.join(body), setext_level))
        else:
            blocks.append(MarkdownBlock('paragraph', '\n'.join(body)))

    return blocks

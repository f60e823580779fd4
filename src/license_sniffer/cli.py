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

"""Command-line entry point.

Exit codes:
    0  Success.
    1  The module or tree could not be sniffed.

Usage::

    license-sniffer                      # license of ./package.json's module
    license-sniffer path/to/module -v    # ... and its license text
    license-sniffer --tree               # every module under ./node_modules
    license-sniffer --tree --json | jq   # machine-readable
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from license_sniffer.config import load_config, resolve_config
from license_sniffer.errors import LicenseSnifferError
from license_sniffer.logging import configure_logging, get_logger
from license_sniffer.sniffer import sniff_module
from license_sniffer.tree import print_records_table, records_to_json, sniff_tree

__all__ = ['main']

log = get_logger('license_sniffer.cli')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='license-sniffer',
        description='Identify the license of a module or of its whole dependency tree.',
    )
    parser.add_argument('path', nargs='?', type=Path, default=Path('.'), help='Module directory (default: .)')
    parser.add_argument('--tree', action='store_true', help='Sniff every module under node_modules too')
    parser.add_argument(
        '--json',
        dest='output_format',
        action='store_const',
        const='json',
        help='Print JSON instead of a table',
    )
    parser.add_argument('--no-body', action='store_true', help='Do not generate license text from templates')
    parser.add_argument('--color', dest='color', action='store_true', help='Force colored output')
    parser.add_argument('--no-color', dest='color', action='store_false', help='Disable colored output')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging; print license text')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors')
    parser.add_argument('--json-log', action='store_true', help='Log JSON lines to stderr')
    parser.set_defaults(color=None, output_format=None)
    return parser


def _console(color: bool | None) -> Console:
    if color is None:
        return Console()
    return Console(force_terminal=color, no_color=not color)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    args = _build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        config = resolve_config(
            load_config(args.path),
            no_body=args.no_body,
            output_format=args.output_format,
            color=args.color,
        )
        options = config.to_options()

        if args.tree:
            records = asyncio.run(sniff_tree(args.path, options))
            if config.format == 'json':
                print(records_to_json(records))
            else:
                print_records_table(records, console=_console(config.color))
            return 0

        result = asyncio.run(sniff_module(args.path, options))
    except LicenseSnifferError as exc:
        log.debug('sniff_failed', path=args.path, error=type(exc).__name__)
        err = Console(stderr=True)
        err.print(f'[bold red]error[/][bold]: {escape(exc.message)}[/]', highlight=False)
        if exc.hint:
            err.print(f'   [cyan]=[/] [green]help[/]: {escape(exc.hint)}', highlight=False)
        return 1

    if config.format == 'json':
        print(
            json.dumps(
                {
                    'path': str(args.path),
                    'names': list(result.names),
                    'license': result.describe(),
                    'text': result.text,
                },
                indent=2,
            )
        )
        return 0

    console = _console(config.color)
    console.print(result.describe(), markup=False, highlight=False)
    if args.verbose and result.text:
        console.print()
        console.print(result.text, markup=False, highlight=False)
    return 0


if __name__ == '__main__':
    sys.exit(main())

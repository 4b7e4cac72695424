#!/usr/bin/env python3
"""
Command line entry point: convert an EDS document to custom element markup.

Usage:
    eds-convert page.html -o element.html
    cat page.html | eds-convert - --report
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigError, load_config
from .converter import EDSBlockDeserializer
from .utils import setup_logger


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert EDS block or table markup to custom element markup"
    )
    parser.add_argument('input', help="Input HTML file ('-' for stdin)")
    parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    parser.add_argument('--config', help='Path to config.yaml')
    parser.add_argument(
        '--log-level',
        help='Logging level (overrides the configuration file)',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR']
    )
    parser.add_argument(
        '--report',
        action='store_true',
        help='Print conversion status, root and component count to stderr'
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config) if args.config else None)

        setup_logger(
            'eds_converter',
            log_file=Path(config.log_file) if config.log_file else None,
            level=args.log_level or config.log_level
        )

        if args.input == '-':
            html = sys.stdin.read()
        else:
            input_path = Path(args.input)
            if not input_path.exists():
                parser.error(f"Input file not found: {input_path}")
            html = input_path.read_text(encoding='utf-8')

        result = EDSBlockDeserializer(config).convert(html)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.markup, encoding='utf-8')
        else:
            sys.stdout.write(result.markup + '\n')

        if args.report:
            print(f"Status:     {result.status.value}", file=sys.stderr)
            print(f"Root:       {result.root_identifier or '-'}", file=sys.stderr)
            print(f"Components: {result.component_count}", file=sys.stderr)
            if result.unresolved_references:
                print(f"Unresolved: {', '.join(result.unresolved_references)}", file=sys.stderr)

    except (OSError, UnicodeDecodeError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())

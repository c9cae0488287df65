#!/usr/bin/env python3
"""
html5-tree command line entry point.

Parses an HTML file (or stdin) and prints the resulting document tree.
"""

import argparse
import sys
from typing import List, Optional

from html5_tree.dom import DocumentType
from html5_tree.parser import parse_html
from html5_tree.utils.config import Config
from html5_tree.utils.logging import get_default_log_file, log_exception, setup_logging


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Parse HTML and print the document tree")
    parser.add_argument('file', nargs='?', default=None, help='HTML file to parse (stdin if omitted)')
    parser.add_argument('--config', type=str, default=None, help='Path to a JSON config file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', nargs='?', const='', default=None,
                        help='Also log to this file (the dated default log file if no path is given)')
    parser.add_argument('--max-prefix', type=int, default=None,
                        help='Stop printing deeper once the indentation exceeds this many bytes (UTF-8)')
    parser.add_argument('--srcdoc', action='store_true', help='Treat the input as an iframe srcdoc document')
    parser.add_argument('--nodes', action='store_true', help='Also dump every node in the arena')
    parser.add_argument('--save-config', action='store_true',
                        help='Write the effective settings back to the config file')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_arguments(argv)
    config = Config(args.config)

    if args.log_file is not None:
        config.set("logging.log_file", args.log_file or get_default_log_file())
    if args.max_prefix is not None:
        config.set("tree.max_print_prefix", args.max_prefix)

    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    logger = setup_logging(log_file=config.get("logging.log_file"),
                           console_level=console_level,
                           file_level=config.get("logging.file_level", "DEBUG"))
    logger.debug(f"Effective configuration: {config.get_all()}")

    if args.save_config:
        try:
            config.save()
        except OSError as e:
            log_exception(logger, e, "Error saving configuration")
            return 1

    try:
        if args.file:
            with open(args.file, 'rb') as f:
                content = f.read()
        else:
            content = sys.stdin.buffer.read()
    except OSError as e:
        log_exception(logger, e, "Error reading input")
        return 1

    doctype = DocumentType.IFRAME_SRCDOC if args.srcdoc else DocumentType.HTML
    try:
        document = parse_html(content, doctype=doctype)
    except Exception as e:
        log_exception(logger, e, "Error parsing HTML")
        return 1

    logger.info(f"Parsed {len(document)} nodes (quirks mode: {document.quirks_mode.name})")

    try:
        output = document.render(config.get("tree.max_print_prefix", 40))
    except RecursionError as e:
        log_exception(logger, e, "Error rendering document, try a smaller --max-prefix")
        return 1
    sys.stdout.write(output)

    if args.nodes:
        sys.stdout.write("\n")
        document.print_nodes(sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())

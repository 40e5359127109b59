#!/usr/bin/env python3
"""
Gradient Engine - Main Entry Point

Parses a CSS linear gradient (or every gradient in a stylesheet) and prints
the gradient line and color stops as JSON.
"""

import argparse
import json
import sys
from typing import List, Optional

from gradient_engine import __version__
from gradient_engine.css import Bounds, GradientError, GradientExtractor, GradientParser
from gradient_engine.utils.config import Config
from gradient_engine.utils.logging import log_exception, setup_logging

def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="gradient-engine",
        description="Convert CSS linear gradients into start/end points and color stops")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("gradient", nargs="?", help="CSS gradient, e.g. 'linear-gradient(red, blue)'")
    source.add_argument("--stylesheet", metavar="FILE", help="Extract all gradients from a CSS file")

    parser.add_argument("--width", type=float, help="Bounding box width (default from config)")
    parser.add_argument("--height", type=float, help="Bounding box height (default from config)")
    parser.add_argument("--config", metavar="PATH", help="Path to a JSON config file")
    parser.add_argument("--save-config", action="store_true",
                        help="Store --width/--height as the defaults in the config file")
    parser.add_argument("--show-config", action="store_true", help="Print the effective config and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"Gradient Engine {__version__}")

    args = parser.parse_args(argv)
    if not (args.gradient or args.stylesheet or args.save_config or args.show_config):
        parser.error("a gradient or --stylesheet is required")

    return args

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the gradient engine."""
    args = parse_args(argv)
    config = Config(args.config)

    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    logger = setup_logging(log_file=config.get("logging.log_file"), console_level=console_level)

    width = args.width if args.width is not None else config.get("bounds.width", 1)
    height = args.height if args.height is not None else config.get("bounds.height", 1)
    indent = config.get("output.indent", 2)

    try:
        bounds = Bounds(width, height)
    except ValueError as e:
        logger.error(str(e))
        return 2

    logger.debug(f"Using {bounds!r}")

    if args.save_config:
        config.set("bounds.width", width)
        config.set("bounds.height", height)
        try:
            config.save()
        except OSError as e:
            log_exception(logger, e, f"Could not save {config.config_path}", traceback=False)
            return 1
        logger.info(f"Saved bounds {width}x{height} to {config.config_path}")

    if args.show_config:
        print(json.dumps(config.get_all(), indent=indent))
        return 0

    if not (args.gradient or args.stylesheet):
        return 0

    if args.stylesheet:
        try:
            with open(args.stylesheet, 'r', encoding='utf-8') as f:
                css_content = f.read()
        except OSError as e:
            log_exception(logger, e, f"Could not read {args.stylesheet}", traceback=False)
            return 1

        extracted = GradientExtractor(bounds).extract(css_content)
        result = [gradient.to_dict() for gradient in extracted]
    else:
        try:
            result = GradientParser(bounds).parse(args.gradient).to_dict()
        except GradientError as e:
            log_exception(logger, e, "Could not parse gradient", traceback=args.debug)
            return 1

    print(json.dumps(result, indent=indent))
    return 0

if __name__ == "__main__":
    sys.exit(main())

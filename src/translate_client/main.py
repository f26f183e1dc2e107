"""Command-line entry point for looking up translations."""

import argparse
import json
import logging
import sys
from typing import Optional

from translate_client.coordinators import Translator
from translate_client.core import TranslateError
from translate_client.services import SettingsManager


def parse_replacement(pair: str) -> tuple[str, str]:
    """Split a "name=value" argument into its name and value."""
    name, sep, value = pair.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"replacement must be NAME=VALUE, got {pair!r}")
    return name, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translate-client", description="Look up a translated string or section."
    )
    parser.add_argument("section")
    parser.add_argument("key", nargs="?", help="omit to print the whole section as JSON")
    parser.add_argument("--platform")
    parser.add_argument("--language")
    parser.add_argument(
        "--replace", action="append", default=[], type=parse_replacement, metavar="NAME=VALUE"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Bootstrap the client following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = build_parser().parse_args(argv)

    # 1. Load configuration
    config = SettingsManager().get_config()
    logging.basicConfig(
        level=logging.DEBUG if config.log else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Wire cache, backoff and remote client
    translator = Translator.from_settings(config)

    # 3. Look up
    if args.key is None:
        try:
            section = translator.get_section(
                args.section, platform=args.platform, language=args.language
            )
        except TranslateError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(json.dumps(section, indent=2, ensure_ascii=False))
        return 0

    print(
        translator.get(
            args.section,
            args.key,
            platform=args.platform,
            language=args.language,
            replace=dict(args.replace),
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

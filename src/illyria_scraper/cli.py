# SPDX-License-Identifier: Apache-2.0
"""
Illyria Scraper - CLI Tool

Queries Google Translate from the command line.

Usage:
    illyria <command> [options]

Examples:
    illyria text auto es "win"                  # Plain translation
    illyria info en es "win"                    # Full metadata as JSON
    illyria audio es "ganar" -o ganar.mp3       # Speech synthesis
    illyria languages --type target             # List target codes
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

from illyria_scraper.core.languages import LanguageType, is_valid_code, language_list
from illyria_scraper.scraper import synthesize_audio, translate_info, translate_text
from illyria_scraper.transport.config import DEFAULT_CONFIG, RequestConfig

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="illyria",
        description="Google Translate scraper - translations, metadata and speech",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s text auto es "win"                 # Detect source, translate to Spanish
  %(prog)s info en es "win"                   # Definitions, examples, etc. (JSON)
  %(prog)s audio es "ganar" -o ganar.mp3      # Save speech to file
  %(prog)s audio es "ganar" --slow -o slow.mp3
  %(prog)s languages                          # All language codes
  %(prog)s languages --type source            # Codes usable as source
""",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_CONFIG.timeout,
        help=f"Request timeout in seconds (default: {DEFAULT_CONFIG.timeout:g})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    text_parser = subparsers.add_parser("text", help="Translate text")
    text_parser.add_argument("source", help="Source language code (or 'auto')")
    text_parser.add_argument("target", help="Target language code")
    text_parser.add_argument("query", help="Text to translate")

    info_parser = subparsers.add_parser("info", help="Show translation metadata as JSON")
    info_parser.add_argument("source", help="Source language code (or 'auto')")
    info_parser.add_argument("target", help="Target language code")
    info_parser.add_argument("query", help="Text to look up")
    info_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )

    audio_parser = subparsers.add_parser("audio", help="Synthesize speech")
    audio_parser.add_argument("target", help="Language code of the text")
    audio_parser.add_argument("text", help="Text to speak (first 200 characters)")
    audio_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Output MP3 file path",
    )
    audio_parser.add_argument(
        "--slow",
        action="store_true",
        help="Use the slow speaking rate",
    )

    languages_parser = subparsers.add_parser("languages", help="List language codes")
    languages_parser.add_argument(
        "--type",
        dest="lang_type",
        choices=[t.value for t in LanguageType],
        help="Only list codes valid for this direction",
    )

    return parser.parse_args()


def check_code(code: str, lang_type: LanguageType) -> bool:
    """Validate a language code, printing an error if it is unknown.

    Args:
        code: Language code from the command line.
        lang_type: Direction the code is used in.

    Returns:
        True if the code can be used.
    """
    if is_valid_code(code, lang_type):
        return True
    print(
        f"Error: Invalid {lang_type.value} language code: {code}\n"
        f"  Run 'illyria languages --type {lang_type.value}' for valid codes.",
        file=sys.stderr,
    )
    return False


async def run(args: argparse.Namespace) -> int:
    """Execute the selected command.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    config = RequestConfig(timeout=args.timeout)

    if args.command == "languages":
        lang_type = LanguageType(args.lang_type) if args.lang_type else None
        for code, name in language_list(lang_type).items():
            print(f"{code}\t{name}")
        return 0

    if args.command in ("text", "info"):
        if not (
            check_code(args.source, LanguageType.SOURCE)
            and check_code(args.target, LanguageType.TARGET)
        ):
            return 1

        if args.command == "text":
            translation = await translate_text(args.source, args.target, args.query, config)
            if translation is None:
                print("Error: No translation retrieved", file=sys.stderr)
                return 1
            print(translation)
            return 0

        info = await translate_info(args.source, args.target, args.query, config)
        if info is None:
            print("Error: No translation info retrieved", file=sys.stderr)
            return 1
        print(json.dumps(info.to_dict(), ensure_ascii=False, indent=args.indent))
        return 0

    # audio
    if not check_code(args.target, LanguageType.TARGET):
        return 1

    audio = await synthesize_audio(args.target, args.text, slow=args.slow, config=config)
    if audio is None:
        print("Error: No audio retrieved", file=sys.stderr)
        return 1

    output_path: Path = args.output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(bytes(audio))
    print(f"Saved: {output_path} ({len(audio)} bytes)")
    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

"""
Command line entry point
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from checktasks.config import load_settings
from checktasks.config.settings import Settings
from checktasks.exceptions import CheckError
from checktasks.gems import Gems
from checktasks.locales.checker import Locales
from checktasks.reporter import run_check
from checktasks.services.translation_service import create_translation_service
from checktasks.services.translator import LocaleTranslator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def setup_logging(level: str) -> None:
    """Configure logging for the command line run"""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='checktasks', description="Locale and dependency checks")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    subparsers = parser.add_subparsers(dest='command', required=True)

    locales = subparsers.add_parser('locales', help="Report keys missing from or stale in each locale")
    locales.add_argument('directories', nargs='*', help="Locale directories (default: LOCALE_DIRECTORIES)")
    locales.add_argument('--missing-reference', choices=['skip', 'error'], default=None,
                         help="What to do with a directory that has no reference locale")

    gems = subparsers.add_parser('gems', help="Report gems installed in more than one version")
    gems.add_argument('pattern', help="Glob matching installed gem directories, e.g. 'vendor/bundle/ruby/*/gems/*'")

    translate = subparsers.add_parser('translate', help="Machine-translate keys from the reference locale")
    translate.add_argument('locale', help="Reference locale file, e.g. config/locales/en.yml")
    translate.add_argument('values_file', help="File with one dotted key path per line")
    translate.add_argument('language', help="Target language code, e.g. fr")
    translate.add_argument('--output-dir', default='.', help="Directory for <language>.yml (default: current)")
    translate.add_argument('--backend', choices=['google', 'openai'], default=None,
                           help="Translation backend (default: TRANSLATION_BACKEND)")
    return parser


def check_locales(settings: Settings, args: argparse.Namespace) -> int:
    directories = args.directories or settings.checker.directories
    if not directories:
        logger.error("No locale directories given and LOCALE_DIRECTORIES is not set")
        return EXIT_ERROR

    checker = Locales(
        directories,
        missing_reference=args.missing_reference or settings.checker.missing_reference,
        reference_file=settings.checker.reference_file
    )
    return run_check(checker)


def check_gems(settings: Settings, args: argparse.Namespace) -> int:
    return run_check(Gems(args.pattern))


async def translate_locale(settings: Settings, args: argparse.Namespace) -> int:
    translator_settings = settings.translator
    if args.backend:
        translator_settings = translator_settings.with_backend(args.backend)

    async with create_translation_service(translator_settings) as service:
        translator = LocaleTranslator(
            service,
            source_language=translator_settings.source_language,
            text_format=translator_settings.text_format
        )
        output = await translator.translate_file(args.locale, args.values_file, args.language, args.output_dir)

    print(f"Wrote {output}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        setup_logging('INFO')
        logger.error(f"Invalid configuration: {e}")
        return EXIT_ERROR

    setup_logging('DEBUG' if args.verbose else settings.log_level)

    try:
        if args.command == 'locales':
            return check_locales(settings, args)
        if args.command == 'gems':
            return check_gems(settings, args)
        return asyncio.run(translate_locale(settings, args))
    except (CheckError, OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"{args.command} failed: {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())

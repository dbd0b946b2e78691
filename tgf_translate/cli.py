#!/usr/bin/env python3
# ABOUTME: Command-line interface for the translator.
# ABOUTME: Handles arguments, env file loading, exit codes and displays results.

import argparse
import logging
import sys
from importlib import metadata
from typing import List, NoReturn, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tgf_translate.config import ModelConfig, Settings, load_env_file
from tgf_translate.errors import (
    EnvFileReadError,
    InvalidInputError,
    TranslationError,
)
from tgf_translate.input_handler import InputHandler
from tgf_translate.translator import Translator

try:
    __version__ = metadata.version("tgf-translate")
except metadata.PackageNotFoundError:
    # running from a source checkout
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1

# Diagnostics go to stderr so stdout carries only the translation
console = Console(stderr=True)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        console.print(f"[bold red]Error:[/] {escape(message)}")
        sys.exit(EXIT_USAGE)


class TranslatorCLI:
    """Command-line interface for the translator."""

    @staticmethod
    def build_parser() -> ArgumentParser:
        """Build the argument parser for the `t` command."""
        parser = ArgumentParser(
            prog="t",
            description="Translates text using ChatGPT. Text is taken from the arguments "
            "and, when piped, from standard input.",
            epilog=f"The default target language is read from {ModelConfig.DEFAULT_LANGUAGE_VARIABLE} "
            f"(fallback: {ModelConfig.FALLBACK_LANGUAGE}). {ModelConfig.API_KEY_VARIABLE} must be set.",
        )
        parser.add_argument("text", nargs="*", help="Text to translate")
        parser.add_argument(
            "-l", "--language", default="", help="The name of the target language"
        )
        parser.add_argument(
            "-c", "--context", default="", help="Additional context information for the chat model"
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=ModelConfig.DEFAULT_TIMEOUT,
            help=f"Request timeout in seconds (default: {ModelConfig.DEFAULT_TIMEOUT:g})",
        )
        parser.add_argument(
            "-v", "--verbose", action="store_true", help="Print diagnostic logging to stderr"
        )
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        return parser

    @classmethod
    def parse_arguments(cls, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Options may appear anywhere between the words of the text.

        Args:
            argv: Arguments to parse, defaults to sys.argv[1:]

        Returns:
            Parsed arguments
        """
        parser = cls.build_parser()
        args = parser.parse_intermixed_args(argv)
        if args.timeout <= 0:
            parser.error("--timeout must be greater than zero")
        return args

    @staticmethod
    def setup_logging(verbose: bool) -> None:
        """Route package logging through rich on stderr."""
        package_logger = logging.getLogger("tgf_translate")
        if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
            package_logger.addHandler(
                RichHandler(console=console, show_path=False, markup=False)
            )
        package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    @classmethod
    def run(cls, argv: Optional[List[str]] = None) -> None:
        """Run the translator command-line interface.

        Always terminates through sys.exit with one of the documented codes.
        """
        try:
            env_loaded = load_env_file()
        except EnvFileReadError as e:
            console.print(f"[bold red]Error:[/] {escape(str(e))}")
            sys.exit(e.exit_code)

        args = cls.parse_arguments(argv)
        cls.setup_logging(args.verbose)
        if env_loaded:
            logger.debug("Loaded env file %s", ModelConfig.ENV_FILE)
        else:
            logger.debug("No env file at %s", ModelConfig.ENV_FILE)

        settings = Settings.from_env(timeout=args.timeout)

        try:
            request = InputHandler.assemble(
                args.text,
                InputHandler.read_stdin(),
                language=args.language,
                context=args.context,
                default_language=settings.default_language,
            )
        except InvalidInputError as e:
            console.print(f"[bold red]Error:[/] {escape(str(e))}")
            sys.exit(e.exit_code)

        try:
            result = Translator(settings).translate_text(request)
        except TranslationError as e:
            console.print(f"[bold red]Error:[/] could not translate text: {escape(str(e))}")
            sys.exit(e.exit_code)

        sys.stdout.write(result.translated_text)
        sys.stdout.flush()
        sys.exit(EXIT_OK)
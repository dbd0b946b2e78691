#!/usr/bin/env python3
# ABOUTME: Command-line tool for translating text to another language.
# ABOUTME: Uses OpenAI's chat completions API while keeping the text's formatting.

from tgf_translate.cli import TranslatorCLI


def main() -> None:
    """Main entry point for the translator CLI."""
    TranslatorCLI.run()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Docpreview CLI

Command-line interface for previewing structured plain text as a styled
document.

Usage:
    docpreview <source> [options]
    docpreview notes.txt
    docpreview notes.txt --grammar doc_style
    docpreview https://example.com/notes.md
    docpreview ./transcripts/              # preview all files in directory
    cat notes.txt | docpreview - --stdout  # read from standard input

Options:
    -o, --output DIR     Output directory (default: ./docpreview_output)
    -g, --grammar NAME   Grammar to apply: previewer or doc_style
    -f, --format FMT     Output format: html, markdown or json
    --stdout             Print to stdout instead of saving files
    --grammars           Show the supported grammars
"""

import argparse
import sys

from .core import OUTPUT_EXTENSIONS, Previewer
from .grammar import GrammarVariant


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docpreview",
        description=(
            "Structured Text Previewer\n\n"
            "Turns transcript-like plain text with headings, bullets, bold\n"
            "markers, metadata and links into a styled document."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  docpreview meeting.txt\n"
            "  docpreview meeting.txt -g doc_style         # ##/### headings, inline bold\n"
            "  docpreview ./transcripts/                   # whole directory\n"
            "  docpreview meeting.txt -f markdown --stdout # print normalized markdown\n"
            "  docpreview meeting.txt -o ./previews        # custom output dir\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files, directories, URLs, or '-' for stdin",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./docpreview_output)",
    )
    parser.add_argument(
        "-g", "--grammar",
        choices=[variant.value for variant in GrammarVariant],
        default=GrammarVariant.PREVIEWER.value,
        help="Grammar used to classify lines (default: previewer)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=list(OUTPUT_EXTENSIONS),
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print output to stdout instead of saving to files",
    )
    parser.add_argument(
        "--grammars",
        action="store_true",
        help="Show the supported grammars and exit",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.grammars:
        _show_grammars()
        return 0

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify files, directories, URLs, or '-'.")
        return 1

    engine = Previewer(
        output_dir=args.output,
        grammar=args.grammar,
        output_format=args.format,
    )
    save = not args.stdout

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            output = engine.preview(source, save=save)
            if args.stdout:
                print(output)
            success_count += 1
        except Exception as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    print("-" * 60, file=sys.stderr)
    print(f"  Done: {success_count} previewed, {error_count} errors", file=sys.stderr)
    if save:
        print(f"  Output: {engine.output_dir}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)

    return 1 if error_count else 0


def _show_grammars():
    """Display all supported grammars."""
    grammars = Previewer.supported_grammars()
    print("\nSupported Grammars:")
    print("-" * 40)
    for name, details in grammars.items():
        print(f"\n  {name}:")
        print(f"    title marker:   {details['title_marker']}")
        print(f"    section marker: {details['section_marker']}")
        print(f"    rules:          {', '.join(details['rules'])}")
        blank_mode = "one spacer per run" if details["collapse_blank_runs"] else "one spacer per line"
        print(f"    blank lines:    {blank_mode}")
    print()


if __name__ == "__main__":
    sys.exit(main())

"""Coderunner CLI: resolve build and run commands for a set of source files."""

import argparse
import json
import sys
from importlib.metadata import version as get_version, PackageNotFoundError

from coderunner.api import run_instructions
from coderunner.kernel.instructions import RunInstructions
from coderunner.kernel.language import Language


def _instructions_json(instructions: RunInstructions) -> str:
    """Byte-stable JSON: sorted keys, compact separators, command order kept."""
    return json.dumps(
        instructions.model_dump(mode="json"),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def _print_text(language: Language, instructions: RunInstructions, file_count: int, quiet: bool) -> None:
    if not quiet:
        print(f"[OK] Resolved {language.display_name} ({file_count} file{'s' if file_count != 1 else ''})")
    for command in instructions.build_commands:
        print(f"build: {command}")
    print(f"run: {instructions.run_command}")


def main():
    """Main CLI entry point for coderunner commands."""
    try:
        coderunner_version = get_version("coderunner")
    except PackageNotFoundError:
        coderunner_version = "dev"

    parser = argparse.ArgumentParser(
        prog="coderunner",
        description="Coderunner: deterministic build and run commands for submitted source files"
    )
    parser.add_argument("--version", action="version", version=f"coderunner {coderunner_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output except the resolved commands."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # resolve command
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Print the build and run commands for the given files",
        parents=[parent_parser]
    )
    resolve_parser.add_argument(
        "--language",
        required=True,
        help="Language wire name (see 'coderunner languages')"
    )
    resolve_parser.add_argument(
        "files",
        nargs="+",
        help="Source files, main file first"
    )
    resolve_parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format: json (canonical JSON object) or text (one command per line)"
    )

    # languages command
    subparsers.add_parser(
        "languages",
        help="List supported language wire names",
        parents=[parent_parser]
    )

    args = parser.parse_args()

    if args.command == "resolve":
        try:
            language = Language.from_name(args.language)
            instructions = run_instructions(language, args.files)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)

        if args.format == "json":
            print(_instructions_json(instructions))
        else:
            _print_text(language, instructions, len(args.files), args.quiet)
    elif args.command == "languages":
        for language in sorted(Language, key=lambda item: item.value):
            if args.quiet:
                print(language.value)
            else:
                print(f"{language.value}\t{language.display_name}")
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

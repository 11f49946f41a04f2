#!/usr/bin/env python3
"""Command-line interface for the integrity zome scaffold generator."""

import argparse
import contextlib
import json
import shutil
import sys
import tempfile
import traceback
from collections.abc import Generator
from pathlib import Path

from zome_scaffold_generator.errors import ScaffoldError
from zome_scaffold_generator.file_tree import ScDirectory, write_file_tree
from zome_scaffold_generator.generator.template_engine import ZomeCodeGenerator, ZomeTemplateEngine
from zome_scaffold_generator.parser.zome_parser import ZomeDefinition, ZomeDefinitionParser

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_FILE_NOT_FOUND = 1
EXIT_INVALID_JSON = 2
EXIT_INVALID_DEFINITION = 3
EXIT_GENERATION_ERROR = 4


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate a Holochain integrity zome from a zome definition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s zome.json
  %(prog)s zome.json --output ./zomes/posts_integrity
  %(prog)s zome.json --no-validate --verbose
        """,
    )
    parser.add_argument(
        "definition_file",
        type=Path,
        help="Path to the zome definition file (JSON)",
        metavar="DEFINITION_FILE",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("./generated"),
        help="Output directory for the generated crate (default: %(default)s)",
        dest="output_dir",
    )
    parser.add_argument(
        "--template-dir",
        "-t",
        type=Path,
        help="Custom template directory (optional)",
        dest="template_dir",
    )
    parser.add_argument(
        "--no-validate",
        action="store_false",
        help="Skip entry type name validation",
        dest="validate",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(args)


def print_generation_summary(*, files: list[Path], output_dir: Path) -> None:
    """Print summary of generated files."""
    print(f"Generated {len(files)} files:")
    for file_path in sorted(files):
        print(f"  {file_path}")
    print(f"\nIntegrity zome generated successfully in {output_dir}")


@contextlib.contextmanager
def backup_and_clean_output_dir(output_dir: Path) -> Generator[None, None, None]:
    """Back up and clean the output directory, restoring it if generation fails."""
    backup_dir = None
    if output_dir.exists() and any(output_dir.iterdir()):
        backup_dir = Path(tempfile.mkdtemp())
        shutil.copytree(output_dir, backup_dir, dirs_exist_ok=True)

    shutil.rmtree(output_dir, ignore_errors=True)
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        yield
    except Exception:
        if backup_dir:
            print(
                "Error: Generation failed. Restoring original content.",
                file=sys.stderr,
            )
            shutil.rmtree(output_dir, ignore_errors=True)
            shutil.copytree(backup_dir, output_dir, dirs_exist_ok=True)
        raise
    finally:
        if backup_dir:
            shutil.rmtree(backup_dir)


def generate_zome_tree(*, zome: ZomeDefinition, template_dir: Path | None = None) -> ScDirectory:
    """Generate an integrity zome crate in memory."""
    generator = ZomeCodeGenerator(ZomeTemplateEngine(template_dir))
    return generator.generate_zome(zome)


def main(args: list[str] | None = None) -> int:
    """Generate an integrity zome from a zome definition."""
    parsed_args = parse_command_line_args(args)
    definition_file = parsed_args.definition_file

    # Parse and render before touching the output directory so bad input leaves it intact
    try:
        zome = ZomeDefinitionParser(strict=parsed_args.validate).parse_file(definition_file)
    except FileNotFoundError:
        print(f"Error: Definition file not found: {definition_file}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND
    except OSError as e:
        print(f"Error: Cannot read definition file {definition_file}: {e}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND
    except UnicodeDecodeError as e:
        print(f"Error: Definition file is not valid UTF-8: {e}", file=sys.stderr)
        return EXIT_INVALID_JSON
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in definition file: {e}", file=sys.stderr)
        return EXIT_INVALID_JSON
    except ScaffoldError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_DEFINITION

    if parsed_args.verbose:
        print(f"Parsed zome '{zome.name}' with {len(zome.entry_defs)} entry types")

    try:
        tree = generate_zome_tree(zome=zome, template_dir=parsed_args.template_dir)
    except ScaffoldError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_DEFINITION
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_GENERATION_ERROR

    try:
        with backup_and_clean_output_dir(parsed_args.output_dir):
            written_files = write_file_tree(tree, parsed_args.output_dir)

            if parsed_args.verbose:
                print_generation_summary(files=written_files, output_dir=parsed_args.output_dir)
            else:
                print(f"Integrity zome generated successfully in {parsed_args.output_dir}")

        return EXIT_SUCCESS

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_GENERATION_ERROR


if __name__ == "__main__":
    sys.exit(main())

#!python3
"""Generate a Rust icon enum from a directory of image files.

    python generate.py assets/icons src/icon.rs
"""
import argparse
import logging
import sys

from pack import COLLISION_POLICIES, DEFAULT_ENUM_NAME, create_enum_file
from utils import setup_logging


class ArgumentParser(argparse.ArgumentParser):
    # Usage errors exit with 1, not argparse's usual 2.
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog="icon-enums",
        description="Generate a Rust enum mapping icon names to their file paths.",
    )
    parser.add_argument("input_dir", help="Directory containing the icon files")
    parser.add_argument("output_file", help="Rust source file to write")
    parser.add_argument(
        "--enum-name",
        default=DEFAULT_ENUM_NAME,
        help="Name of the generated enum",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Write the enum over multiple indented lines",
    )
    parser.add_argument(
        "--on-collision",
        choices=COLLISION_POLICIES,
        default="keep",
        help="What to do when two icons map to the same variant name",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide the progress bar",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(args):
    try:
        create_enum_file(
            args.input_dir,
            args.output_file,
            args.enum_name,
            on_collision=args.on_collision,
            pretty=args.pretty,
            quiet=args.quiet,
        )
    except (OSError, ValueError) as e:
        logging.error("Error: %s", e)
        return

    print(f"Enum file created: {args.output_file}")


def cli_entry(argv=None):
    args = build_parser().parse_args(argv)

    setup_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    main(args)


if __name__ == "__main__":
    cli_entry()

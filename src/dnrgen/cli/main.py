"""CLI entrypoint for dnrgen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dnrgen import __version__
from dnrgen.constants.branding import CLI_DESCRIPTION
from dnrgen.exceptions import ConfigurationError, DnrgenError
from dnrgen.exceptions.validation import format_errors
from dnrgen.generator import generate_workspace
from dnrgen.reporting import StdoutReporter
from dnrgen.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="dnrgen",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate static DNR rule files")
    generate.add_argument("-r", "--root", type=Path, required=True, help="Extension workspace root path")
    generate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    generate.add_argument(
        "-m",
        "--manifest",
        type=Path,
        default=None,
        help="Extension manifest.json (overrides config)",
    )
    generate.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for generated rule files (overrides config)",
    )
    generate.add_argument("--dry-run", action="store_true", help="Generate and check rules without writing files")
    generate.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    generate.add_argument("-v", "--verbose", action="store_true", help="Show debug logging and written paths")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without generating")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Extension workspace root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "generate":
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        result = generate_workspace(
            root=args.root,
            config_path=args.config,
            manifest_path=args.manifest,
            output_dir=args.output_dir,
            dry_run=args.dry_run,
        )
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except DnrgenError as exc:
        print(f"Generation error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        print(StdoutReporter(result, verbose=args.verbose).render())

    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

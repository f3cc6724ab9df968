#!/usr/bin/env python3
"""
rdfwriter CLI - Rewrites an RDF file as indented RDF/XML.

Usage:
    rdfwriter --help
    rdfwriter data.ttl
    rdfwriter data.nt --output out/data.rdf --tab "  "
    rdfwriter data.ttl --check --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from rdfwriter import __version__
from rdfwriter.config.settings import Settings, load_config
from rdfwriter.loaders import load_file
from rdfwriter.triples import RDFWriterError, RDFXMLWriter, TripleValidator
from rdfwriter.utils.logging import setup_colored_logging

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings, verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, settings.logging.level)

    setup_colored_logging(level=level, log_file=settings.logging.log_file)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rdfwriter",
        description="rdfwriter - Serialize RDF graphs as indented RDF/XML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a Turtle file as RDF/XML
  rdfwriter data.ttl

  # Write to a file with two-space indentation
  rdfwriter data.nt --output out/data.rdf --tab "  "

  # Only report problems that would stop serialization
  rdfwriter data.ttl --check
        """,
    )

    parser.add_argument("input", type=str, help="RDF file to read")

    parser.add_argument(
        "--input-format",
        "-i",
        type=str,
        default=None,
        help="rdflib parser format (default: guessed from the file suffix)",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file (default: standard output)",
    )

    parser.add_argument(
        "--tab",
        "-t",
        type=str,
        default=None,
        help="Indentation unit (default: from config)",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="YAML configuration file",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the triples and exit without writing",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print graph statistics to standard error",
    )

    # Logging
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> None:
    """Apply CLI arguments to settings."""
    if args.tab is not None:
        settings.writer.tab = args.tab

    if args.input_format:
        settings.input.format = args.input_format


def run_check(triples, namespaces, settings: Settings, quiet: bool) -> int:
    validator = TripleValidator(namespaces, settings.writer.declare_rdf_namespace)
    result = validator.validate(triples)

    if not quiet:
        for error in result.errors:
            print(f"error: {error}", file=sys.stderr)
        for warning in result.warnings:
            print(f"warning: {warning}", file=sys.stderr)
        print(result.summary(), file=sys.stderr)

    return 0 if result.is_valid else 2


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_config(args.config) if args.config else load_config()
        apply_cli_overrides(settings, args)
    except Exception as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings, verbose=args.verbose, debug=args.debug)
    if args.quiet:
        logging.disable(logging.CRITICAL)

    try:
        triples, namespaces = load_file(
            args.input, settings.input.format, settings.namespaces.extra
        )
    except Exception as e:
        logger.debug("Input parsing failed", exc_info=True)
        print(f"❌ Could not read {args.input}: {e}", file=sys.stderr)
        return 1

    writer = RDFXMLWriter.from_settings(settings)

    if args.stats and not args.quiet:
        for key, value in writer.get_statistics(triples).items():
            print(f"  {key}: {value}", file=sys.stderr)

    if args.check:
        return run_check(triples, namespaces, settings, args.quiet)

    try:
        if args.output:
            path = writer.to_file(triples, namespaces, Path(args.output))
            if not args.quiet:
                print(f"✅ Wrote {path}", file=sys.stderr)
        else:
            sys.stdout.write(writer.to_string(triples, namespaces) + "\n")
    except RDFWriterError as e:
        print(f"❌ Serialization error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"❌ Could not write {args.output}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
cargo2port - Main Entry Point

Reads the requested Cargo.lock sources, resolves their packages and writes
the Portfile ``cargo.crates`` block, with error handling and user-friendly
messaging for every failure kind.
"""

import signal
import sys
import traceback
from pathlib import Path

from cargo2port.cli_parser import parse_arguments
from cargo2port.config import C2P_DEBUG, EXIT_CODE
from cargo2port.c2p_logging import setup_logging, apply_logging_options
from cargo2port.errors import (
    Cargo2PortException,
    ConfigurationError,
    DownloadError,
    LockfileIOError,
    io_error_kind,
)
from cargo2port.error_messages import format_error, ErrorFormatter
from cargo2port.formatter import format_cargo_crates
from cargo2port.lockfile import read_packages_from_lockfiles

logger = setup_logging("cargo2port")
error_formatter = ErrorFormatter(use_colors=sys.stderr.isatty())


def signal_handler(sig, frame):
    """Handle SIGINT (Ctrl+C) and SIGTERM."""
    signal_name = signal.Signals(sig).name
    logger.warning(f"Received signal {signal_name} ({sig})")
    logger.info("Exiting due to signal")
    sys.exit(EXIT_CODE.INTERRUPTED)


def write_output(block: str, output_path=None) -> None:
    """Write the block, newline terminated, to ``output_path`` or stdout.

    Raises:
        LockfileIOError: If the output file cannot be written.
    """
    if output_path is None:
        sys.stdout.write(block + "\n")
        sys.stdout.flush()
        return

    try:
        Path(output_path).write_text(block + "\n", encoding="utf-8")
    except OSError as e:
        raise LockfileIOError(io_error_kind(e), path=str(output_path)) from e


def _main_impl(argv=None):
    """
    Main implementation.

    Separated out so that main() can wrap it with exception handling.
    """
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    args = parse_arguments(argv, logger=logger)
    apply_logging_options(logger, args)

    logger.verbose(f"Reading {len(args.lockfiles)} lockfile source(s)")
    packages = read_packages_from_lockfiles(args.lockfiles, logger=logger)

    block = format_cargo_crates(packages, args.alignment)
    write_output(block, args.output)

    if args.output:
        logger.status(f"Wrote {len(packages)} crates to {args.output}")
    else:
        logger.verbose(f"Wrote {len(packages)} crates")

    return EXIT_CODE.SUCCESS


def _report(error: Cargo2PortException) -> None:
    logger.error(error_formatter.format_exception(error))


def main(argv=None):
    """
    Main entry point with comprehensive error handling.

    Any failure aborts the run; nothing is written to the output.

    Returns:
        EXIT_CODE for the run.
    """
    try:
        return _main_impl(argv)

    except ConfigurationError as e:
        _report(e)
        return EXIT_CODE.CONFIG_ERROR

    except LockfileIOError as e:
        _report(e)
        if e.kind == "NotFound":
            logger.info(format_error('LOCKFILE_NOT_FOUND', path=e.error.context.get("path")))
            return EXIT_CODE.FILE_NOT_FOUND
        return EXIT_CODE.FAILURE

    except DownloadError as e:
        _report(e)
        return EXIT_CODE.DOWNLOAD_ERROR

    except Cargo2PortException as e:
        # Parse errors, missing Cargo.lock in a crate, bad crate specifiers
        _report(e)
        return EXIT_CODE.FAILURE

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_CODE.INTERRUPTED

    except SystemExit:
        raise

    except Exception as e:
        logger.error(format_error('INTERNAL_ERROR', error=str(e)))

        if C2P_DEBUG:
            logger.debug("Stack trace:")
            traceback.print_exc()
        else:
            logger.info("Set C2P_DEBUG=1 for the full stack trace")

        return EXIT_CODE.FAILURE


if __name__ == "__main__":
    sys.exit(main())

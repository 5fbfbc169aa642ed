"""
Load Cargo.lock documents from the places a packager points at.

Source strings follow one convention:
- ``-`` reads the lockfile from standard input
- ``crate:<name>@<version>`` fetches the lockfile embedded in a crates.io crate
- anything else is a local path
"""

import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from cargo2port.config import CRATE_SOURCE_PREFIX, STDIN_SOURCE
from cargo2port.errors import LockfileIOError, LockfileParseError, io_error_kind
from cargo2port.lockfile.crates_io import (
    download_crate,
    extract_cargo_lock_from_pkg,
    parse_crate_spec,
)
from cargo2port.lockfile.models import Lockfile, Package, parse_lockfile
from cargo2port.resolver import resolve_lockfile_packages


def lockfile_from_str(contents: str) -> Lockfile:
    """Parse a Cargo.lock file from the contents provided."""
    return parse_lockfile(contents)


def lockfile_from_path(filename: str) -> Lockfile:
    """Load a Cargo.lock file from the filename provided.

    Raises:
        LockfileIOError: If the file cannot be read.
        LockfileParseError: If the contents are not a valid lockfile.
    """
    try:
        contents = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LockfileIOError(io_error_kind(e), path=filename) from e

    try:
        return lockfile_from_str(contents)
    except LockfileParseError as e:
        raise LockfileParseError(e.message, source=filename) from e


def lockfile_from_stdin(stream: Optional[TextIO] = None) -> Lockfile:
    """Read Cargo.lock data from stdin and parse it."""
    stream = stream if stream is not None else sys.stdin
    try:
        contents = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LockfileIOError(io_error_kind(e), path="<stdin>") from e

    try:
        return lockfile_from_str(contents)
    except LockfileParseError as e:
        raise LockfileParseError(e.message, source="<stdin>") from e


def lockfile_from_crates_io(crate_spec: str, logger=None) -> Lockfile:
    """Fetch a crate from crates.io and parse its bundled Cargo.lock.

    Args:
        crate_spec: ``name@version`` of the published crate.
        logger: Optional logger for download status.
    """
    name, version = parse_crate_spec(crate_spec)
    pkg = download_crate(name, version, logger=logger)
    cargo_lock = extract_cargo_lock_from_pkg(pkg, crate=f"{name}@{version}")
    return lockfile_from_str(cargo_lock)


def load_lockfile(source: str, logger=None) -> Lockfile:
    """Load one lockfile, dispatching on the source string convention."""
    if source == STDIN_SOURCE:
        if logger is not None:
            logger.verbose("Reading lockfile from stdin")
        return lockfile_from_stdin()

    if source.startswith(CRATE_SOURCE_PREFIX):
        return lockfile_from_crates_io(source[len(CRATE_SOURCE_PREFIX):], logger=logger)

    if logger is not None:
        logger.verbose(f"Reading lockfile: {source}")
    return lockfile_from_path(source)


def read_packages_from_lockfiles(sources: Iterable[str], logger=None) -> List[Package]:
    """Read the lockfiles named by ``sources`` and resolve them into a
    de-duplicated, sorted package list.

    The first source that fails aborts the whole read.
    """
    lockfiles = []
    for source in sources:
        lockfile = load_lockfile(source, logger=logger)
        if logger is not None:
            logger.verboser(f"{source}: {len(lockfile.packages)} packages (format v{lockfile.version})")
        lockfiles.append(lockfile)

    return resolve_lockfile_packages(lockfiles, logger=logger)

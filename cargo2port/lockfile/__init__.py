"""
Cargo.lock loading for cargo2port.

Public exports:
    SemanticVersion: Crate version with precedence ordering
    Package: A locked crate (name, version, checksum)
    Lockfile: A parsed Cargo.lock document
    parse_lockfile: Parse Cargo.lock TOML text
    lockfile_from_str / lockfile_from_path / lockfile_from_stdin: Local sources
    lockfile_from_crates_io: Lockfile bundled in a published crate
    load_lockfile: Dispatch on a source string ("-", "crate:name@version", path)
    read_packages_from_lockfiles: Load sources and resolve their packages
"""

from cargo2port.lockfile.models import (
    SemanticVersion,
    Package,
    Lockfile,
    parse_lockfile,
)
from cargo2port.lockfile.crates_io import (
    parse_crate_spec,
    download_crate,
    extract_cargo_lock_from_pkg,
)
from cargo2port.lockfile.sources import (
    lockfile_from_str,
    lockfile_from_path,
    lockfile_from_stdin,
    lockfile_from_crates_io,
    load_lockfile,
    read_packages_from_lockfiles,
)

__all__ = [
    # Models
    "SemanticVersion",
    "Package",
    "Lockfile",
    "parse_lockfile",
    # crates.io
    "parse_crate_spec",
    "download_crate",
    "extract_cargo_lock_from_pkg",
    # Sources
    "lockfile_from_str",
    "lockfile_from_path",
    "lockfile_from_stdin",
    "lockfile_from_crates_io",
    "load_lockfile",
    "read_packages_from_lockfiles",
]

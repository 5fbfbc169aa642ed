"""
cargo2port - generate the MacPorts Portfile ``cargo.crates`` block from Cargo.lock files.

Public exports:
    resolve_lockfile_packages: Merge lockfiles into a sorted, de-duplicated package list
    format_cargo_crates: Render packages into a ``cargo.crates`` block
    AlignmentMode: Column alignment policies for the rendered block
    read_packages_from_lockfiles: Load lockfile sources and resolve their packages
"""

VERSION = "0.4.0"
__version__ = VERSION

from cargo2port.formatter import AlignmentMode, format_cargo_crates  # noqa: E402
from cargo2port.resolver import resolve_lockfile_packages  # noqa: E402
from cargo2port.lockfile.sources import read_packages_from_lockfiles  # noqa: E402

__all__ = [
    "VERSION",
    "AlignmentMode",
    "format_cargo_crates",
    "resolve_lockfile_packages",
    "read_packages_from_lockfiles",
]

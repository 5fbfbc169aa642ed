"""
Merge the packages of several lockfiles into one canonical list.
"""

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from cargo2port.lockfile.models import Lockfile, Package


def resolve_lockfile_packages(lockfiles: Iterable["Lockfile"], logger=None) -> List["Package"]:
    """Resolve packages from a sequence of lockfiles to a de-duplicated list
    sorted by name and version.

    Packages without a checksum are omitted (this usually happens for the
    package owning the Cargo.lock file or files being processed). Packages
    that appear in more than one lockfile with the same name, version and
    checksum collapse into one entry.

    Args:
        lockfiles: Parsed lockfiles, in the order they were given.
        logger: Optional logger for a debug summary and per-package traces.

    Returns:
        Sorted list of unique packages.
    """
    package_set = set()
    skipped = 0

    for lockfile in lockfiles:
        for package in lockfile.packages:
            if package.checksum is None:
                skipped += 1
                if logger is not None:
                    logger.ridiculous(f"Skipping {package}: no checksum")
                continue

            package_set.add(package)

    # Checksum only breaks ties between packages with equal name and version
    packages = sorted(package_set, key=lambda package: (*package.sort_key, package.checksum))

    if logger is not None:
        logger.debug(f"Resolved {len(packages)} unique packages ({skipped} without checksum skipped)")
    return packages

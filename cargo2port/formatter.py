"""
Render resolved packages into the Portfile ``cargo.crates`` block.

The block is the ``cargo.crates`` header followed by one continued line per
package, each holding the crate name, version and sha256 checksum:

    cargo.crates \\
        aho-corasick                     1.1.3  8e60d3430d3a69478ad0993f19238d2df97c507009a52b3c10addcd7f6bcb916 \\
        memchr                           2.7.4  78ca9ab1a0babb1e7d5695e3530886289c18cf2f87ec19a2fbc8fa8ec7c1f2bb

How the columns line up is controlled by ``AlignmentMode``.
"""

import enum
from typing import Iterable, List

from cargo2port.config import (
    CARGO_CRATES_HEADER,
    COLUMN_SEPARATOR,
    JUSTIFIED_BASE_WIDTH,
    LINE_CONTINUATION,
    LINE_INDENT,
    NORMAL_NAME_WIDTH,
    NORMAL_VERSION_WIDTH,
)
from cargo2port.errors import ConfigurationError
from cargo2port.lockfile.models import Package


class AlignmentMode(enum.Enum):
    """Column alignment policies for the ``cargo.crates`` block.

    NORMAL: name padded to 28 columns, version right-aligned in 8.
    MAXLEN: name and version padded to the longest name and version.
    MULTILINE: name, version and checksum each on their own line.
    JUSTIFY: gap before the version sized so name + gap + version is constant.
    """
    NORMAL = "normal"
    MAXLEN = "maxlen"
    MULTILINE = "multiline"
    JUSTIFY = "justify"

    @classmethod
    def values(cls) -> List[str]:
        return [mode.value for mode in cls]

    @classmethod
    def from_string(cls, value: str) -> "AlignmentMode":
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown alignment mode: {value}",
                parameter="align",
                expected=cls.values(),
                actual=value,
                suggestion=f"Use one of: {', '.join(cls.values())}",
            ) from None


def _version_len(package: Package) -> int:
    return len(str(package.version))


def justify_gap(package: Package, max_combined_width: int) -> int:
    """Width of the gap between name and version in JUSTIFY mode."""
    return max_combined_width - len(package.name) - _version_len(package) + JUSTIFIED_BASE_WIDTH


def format_cargo_crates(packages: Iterable[Package], mode: AlignmentMode = AlignmentMode.NORMAL) -> str:
    """Return the Portfile ``cargo.crates`` block for the given packages.

    The packages are assumed to be sorted and de-duplicated already (see
    ``resolve_lockfile_packages``); they are rendered in the order given.
    Packages without a checksum are skipped.

    Args:
        packages: Packages to render.
        mode: Column alignment policy.

    Returns:
        The block, without a trailing newline. An empty package list gives
        just the header.
    """
    packages = list(packages)

    name_min_width = 0
    version_min_width = 0
    package_max_width = 0

    if mode is AlignmentMode.MAXLEN:
        name_min_width = max((len(package.name) for package in packages), default=0)
        version_min_width = max((_version_len(package) for package in packages), default=0)
    elif mode is AlignmentMode.JUSTIFY:
        package_max_width = max(
            (len(package.name) + _version_len(package) for package in packages), default=0
        )

    output = [CARGO_CRATES_HEADER]

    for package in packages:
        if package.checksum is None:
            continue

        output.append(LINE_CONTINUATION)

        name, version, checksum = package.name, str(package.version), package.checksum
        if mode is AlignmentMode.MAXLEN:
            line = (f"{LINE_INDENT}{name:<{name_min_width}}{COLUMN_SEPARATOR}"
                    f"{version:<{version_min_width}}{COLUMN_SEPARATOR}{checksum}")
        elif mode is AlignmentMode.MULTILINE:
            line = LINE_CONTINUATION.join(f"{LINE_INDENT}{field}" for field in (name, version, checksum))
        elif mode is AlignmentMode.JUSTIFY:
            space_width = justify_gap(package, package_max_width)
            version_width = len(version)
            line = (f"{LINE_INDENT}{name}{' ':<{space_width}}"
                    f"{version:>{version_width}}{COLUMN_SEPARATOR}{checksum}")
        else:
            line = (f"{LINE_INDENT}{name:<{NORMAL_NAME_WIDTH}}{COLUMN_SEPARATOR}"
                    f"{version:>{NORMAL_VERSION_WIDTH}}{COLUMN_SEPARATOR}{checksum}")

        output.append(line)

    return "".join(output)

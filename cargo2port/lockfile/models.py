"""
Cargo.lock data model and parser.

A Cargo.lock file is a TOML document with one ``[[package]]`` table per
locked crate. Packages pulled from a registry carry a sha256 ``checksum``;
the workspace's own packages (and path dependencies) have none.

Format v1 lockfiles keep the checksums out of the package tables, in a
``[metadata]`` table keyed by ``"checksum <name> <version> (<source>)"``.
Both layouts are read into the same model.
"""

import functools
import tomllib
from dataclasses import dataclass, field
from typing import Any, Optional

import semver

from cargo2port.config import METADATA_CHECKSUM_PREFIX, METADATA_NO_CHECKSUM
from cargo2port.errors import LockfileParseError


@functools.total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    """A crate version.

    Renders exactly as written in the lockfile. Ordering follows SemVer 2.0
    precedence, so pre-releases sort before their release and build metadata
    is ignored; the text breaks ties so the order is total and agrees with
    equality.
    """
    text: str
    _parsed: semver.Version = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        try:
            parsed = semver.Version.parse(self.text)
        except ValueError as e:
            raise LockfileParseError(f"invalid version {self.text!r}: {e}") from e
        object.__setattr__(self, "_parsed", parsed)

    def __str__(self) -> str:
        return self.text

    def __lt__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return (self._parsed, self.text) < (other._parsed, other.text)


@dataclass(frozen=True)
class Package:
    """A locked crate.

    Identity is ``(name, version, checksum)``; source and dependencies are
    informational and take no part in equality.
    """
    name: str
    version: SemanticVersion
    checksum: Optional[str] = None
    source: Optional[str] = field(default=None, compare=False)
    dependencies: tuple = field(default=(), compare=False)

    @property
    def sort_key(self):
        return (self.name, self.version)

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


@dataclass
class Lockfile:
    """A parsed Cargo.lock document."""
    version: int = 1
    packages: list[Package] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


def _metadata_checksums(metadata: dict[str, Any]) -> dict[tuple[str, str], Optional[str]]:
    """Collect v1 ``[metadata]`` checksum entries keyed by (name, version)."""
    checksums = {}
    for key, value in metadata.items():
        if not key.startswith(METADATA_CHECKSUM_PREFIX):
            continue
        parts = key[len(METADATA_CHECKSUM_PREFIX):].split(" ", 2)
        if len(parts) < 2:
            raise LockfileParseError(f"malformed metadata checksum key: {key!r}")
        name, version = parts[0], parts[1]
        checksums[(name, version)] = None if value == METADATA_NO_CHECKSUM else value
    return checksums


def _parse_package(entry: Any, metadata_checksums: dict) -> Package:
    if not isinstance(entry, dict):
        raise LockfileParseError(f"expected a table for [[package]], found {type(entry).__name__}")

    for key in ("name", "version"):
        if key not in entry:
            raise LockfileParseError(f"[[package]] entry is missing required key '{key}'")
        if not isinstance(entry[key], str) or not entry[key]:
            raise LockfileParseError(f"[[package]] key '{key}' must be a non-empty string")

    name = entry["name"]
    checksum = entry.get("checksum")
    if checksum is None:
        checksum = metadata_checksums.get((name, entry["version"]))

    return Package(
        name=name,
        version=SemanticVersion(entry["version"]),
        checksum=checksum,
        source=entry.get("source"),
        dependencies=tuple(entry.get("dependencies", ())),
    )


def parse_lockfile(contents: str) -> Lockfile:
    """Parse the text of a Cargo.lock file.

    Args:
        contents: TOML text of the lockfile.

    Returns:
        Lockfile with packages in document order.

    Raises:
        LockfileParseError: If the text is not valid TOML or a package entry
            is malformed.
    """
    try:
        document = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as e:
        raise LockfileParseError(str(e)) from e

    metadata = document.get("metadata", {})
    if not isinstance(metadata, dict):
        raise LockfileParseError("[metadata] must be a table")

    entries = document.get("package", [])
    if not isinstance(entries, list):
        raise LockfileParseError("'package' must be an array of tables")

    format_version = document.get("version", 1)
    if not isinstance(format_version, int):
        raise LockfileParseError(f"lockfile version must be an integer, found {format_version!r}")

    checksums = _metadata_checksums(metadata)
    packages = [_parse_package(entry, checksums) for entry in entries]

    return Lockfile(version=format_version, packages=packages, metadata=metadata)

"""
Version parsing and ordering for export-gate.

Versions follow the dotted-numeric grammar reported by the monitoring
cluster, with optional pre-release qualifiers:

    7.3.1
    6.0.0-alpha2
    6.0.0-beta1
    6.0.0-rc1
    7.4.0-SNAPSHOT

Pre-releases sort before the final release of the same revision
(alpha < beta < rc < release).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from export_gate.errors import InvalidVersionError

# export-gate package version
GATE_VERSION = "0.1.0"

# Build numbers used to order pre-release qualifiers
ALPHA_OFFSET = 0
BETA_OFFSET = 25
RC_OFFSET = 50
RELEASE_BUILD = 99

_MAX_QUALIFIER = {
    "alpha": BETA_OFFSET - ALPHA_OFFSET - 1,
    "beta": RC_OFFSET - BETA_OFFSET - 1,
    "rc": RELEASE_BUILD - RC_OFFSET - 1,
}

_VERSION_RE = re.compile(
    r"^v?(\d{1,9})\.(\d{1,9})\.(\d{1,9})"
    r"(?:-(alpha|beta|rc)(\d{1,2}))?"
    r"(?:-snapshot)?$",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True, order=True)
class Version:
    """
    An immutable, totally ordered version.

    Instances compare component-wise on (major, minor, revision, build).
    A final release has build 99; pre-releases map into lower builds.
    """
    major: int
    minor: int
    revision: int
    build: int = RELEASE_BUILD

    @classmethod
    def from_string(cls, version: str) -> "Version":
        """
        Parse a version string.

        Args:
            version: Version string like "7.3.1", "v7.3.1" or "6.0.0-rc1"

        Returns:
            The parsed Version

        Raises:
            InvalidVersionError: If the string does not match the grammar
        """
        if not isinstance(version, str):
            raise InvalidVersionError(version)

        match = _VERSION_RE.match(version.strip())
        if not match:
            raise InvalidVersionError(version)

        # Components are bounded by the pattern, so int() cannot overflow
        # the interpreter's digit limit
        major, minor, revision = (int(match.group(i)) for i in (1, 2, 3))
        build = RELEASE_BUILD

        qualifier = match.group(4)
        if qualifier:
            qualifier = qualifier.lower()
            number = int(match.group(5))
            if number > _MAX_QUALIFIER[qualifier]:
                raise InvalidVersionError(version)
            if qualifier == "alpha":
                build = ALPHA_OFFSET + number
            elif qualifier == "beta":
                build = BETA_OFFSET + number
            else:
                build = RC_OFFSET + number

        return cls(major, minor, revision, build)

    @property
    def is_release(self) -> bool:
        return self.build == RELEASE_BUILD

    def on_or_after(self, other: "Version") -> bool:
        """True if this version is the same as or newer than ``other``."""
        return self >= other

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.revision}"
        if self.build == RELEASE_BUILD:
            return base
        if self.build < BETA_OFFSET:
            return f"{base}-alpha{self.build - ALPHA_OFFSET}"
        if self.build < RC_OFFSET:
            return f"{base}-beta{self.build - BETA_OFFSET}"
        return f"{base}-rc{self.build - RC_OFFSET}"

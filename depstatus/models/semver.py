"""Cargo-style version requirements over semantic versions.

A requirement is a comma-separated list of comparators, all of which must
hold. Supported comparator forms:

    1.2.3  ^1.2.3   caret (the default when no operator is given)
    ~1.2            tilde
    =1.2.3  1.2.*  *  exact and wildcard
    >1.2  >=1.2  <1.2  <=1.2

A pre-release version only matches when some comparator names the same
``major.minor.patch`` with a pre-release of its own.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable
from dataclasses import dataclass

from semantic_version import Version

_COMPARATOR_RE = re.compile(
    r"^(?P<op>\^|~|=|>=|<=|>|<)?\s*"
    r"(?P<major>\d+|[*xX])"
    r"(?:\.(?P<minor>\d+|[*xX]))?"
    r"(?:\.(?P<patch>\d+|[*xX]))?"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?"
    r"(?:\+[0-9A-Za-z.-]+)?$"
)

_OPS: dict[str, Callable[[Version, Version], bool]] = {
    "==": operator.eq,
    ">=": operator.ge,
    ">": operator.gt,
    "<": operator.lt,
    "<=": operator.le,
}


@dataclass(frozen=True)
class Bound:
    """One primitive comparison against a fully specified version."""

    op: str
    version: Version

    def admits(self, version: Version) -> bool:
        return _OPS[self.op](version, self.version)


def _v(major: int, minor: int, patch: int, pre: str | None = None) -> Version:
    text = f"{major}.{minor}.{patch}"
    return Version(f"{text}-{pre}" if pre else text)


def _part(raw: str | None) -> int | None:
    if raw is None or raw in ("*", "x", "X"):
        return None
    return int(raw)


def _bounds(text: str) -> list[Bound]:
    m = _COMPARATOR_RE.match(text)
    if m is None:
        raise ValueError(f"invalid version requirement: {text!r}")

    major, minor, patch = _part(m["major"]), _part(m["minor"]), _part(m["patch"])
    pre = m["pre"]
    wildcard = major is None or (m["minor"] is not None and minor is None) or (
        m["patch"] is not None and patch is None
    )
    op = m["op"] or ("=" if wildcard else "^")

    if major is None:
        return []
    if minor is None:
        patch = None

    lower = _v(major, minor or 0, patch or 0, pre)
    if op == "=":
        if minor is None:
            return [Bound(">=", lower), Bound("<", _v(major + 1, 0, 0))]
        if patch is None:
            return [Bound(">=", lower), Bound("<", _v(major, minor + 1, 0))]
        return [Bound("==", lower)]
    if op == "^":
        if major > 0 or minor is None:
            upper = _v(major + 1, 0, 0)
        elif minor > 0 or patch is None:
            upper = _v(0, minor + 1, 0)
        else:
            upper = _v(0, 0, patch + 1)
        return [Bound(">=", lower), Bound("<", upper)]
    if op == "~":
        upper = _v(major + 1, 0, 0) if minor is None else _v(major, minor + 1, 0)
        return [Bound(">=", lower), Bound("<", upper)]
    if op == ">=":
        return [Bound(">=", lower)]
    if op == "<":
        return [Bound("<", lower)]
    # Partial versions in ">" and "<=" cover the whole omitted range.
    if minor is None:
        edge = _v(major + 1, 0, 0)
    elif patch is None:
        edge = _v(major, minor + 1, 0)
    else:
        return [Bound(op, lower)]
    return [Bound(">=", edge)] if op == ">" else [Bound("<", edge)]


@dataclass(frozen=True)
class VersionReq:
    """A version requirement as declared in a manifest.

    ``text`` is kept verbatim for display.
    """

    text: str
    bounds: tuple[Bound, ...]

    @classmethod
    def parse(cls, text: str) -> VersionReq:
        parts = [p.strip() for p in text.split(",")]
        if not all(parts):
            raise ValueError(f"invalid version requirement: {text!r}")
        bounds = tuple(b for part in parts for b in _bounds(part))
        return cls(text=text, bounds=bounds)

    def matches(self, version: Version) -> bool:
        if not all(b.admits(version) for b in self.bounds):
            return False
        if not version.prerelease:
            return True
        return any(
            b.version.prerelease
            and (b.version.major, b.version.minor, b.version.patch)
            == (version.major, version.minor, version.patch)
            for b in self.bounds
        )

    def __str__(self) -> str:
        return self.text

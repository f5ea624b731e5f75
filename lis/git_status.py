"""Git status collection for the tree's git column.

Finds the enclosing repository, runs ``git status --porcelain -z`` and maps
each reported path to a ``GitKind`` keyed by canonical path.
"""

from __future__ import annotations

import logging
import subprocess
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_STATUS_TIMEOUT_SECONDS = 2.0


class GitKind(Enum):
    UNTRACKED = "untracked"
    MODIFIED = "modified"
    STAGED = "staged"
    RENAMED = "renamed"
    IGNORED = "ignored"
    UNMERGED = "unmerged"
    DELETED = "deleted"
    UNKNOWN = "unknown"
    NONE = "none"


GIT_GLYPHS: dict[GitKind, str] = {
    GitKind.UNTRACKED: "✭",
    GitKind.MODIFIED: "✹",
    GitKind.STAGED: "✚",
    GitKind.RENAMED: "➜",
    GitKind.IGNORED: "☒",
    GitKind.UNMERGED: "═",
    GitKind.DELETED: "✖",
    GitKind.UNKNOWN: "?",
}


def git_glyph(kind: GitKind) -> str:
    """Return the one-cell glyph for ``kind`` (a space for ``NONE``)."""
    return GIT_GLYPHS.get(kind, " ")


def classify_git(x: str, y: str) -> GitKind:
    """Classify a porcelain ``XY`` status pair.

    Checks run in a fixed order and the first match wins, so e.g. ``AA`` is
    reported as staged and ``MD`` as staged rather than deleted.
    """
    if x == "?" and y == "?":
        return GitKind.UNTRACKED
    if x == "!" and y == "!":
        return GitKind.IGNORED
    if x == " " and y == "M":
        return GitKind.MODIFIED
    if x in {"M", "A", "C"}:
        return GitKind.STAGED
    if x == "R":
        return GitKind.RENAMED
    if x == "U" or y == "U" or (x == "A" and y == "A") or (x == "D" and y == "D"):
        return GitKind.UNMERGED
    if x == "D" or y == "D":
        return GitKind.DELETED
    if x == " " and y == " ":
        return GitKind.NONE
    return GitKind.UNKNOWN


def find_git_root(start: Path) -> Path | None:
    """Walk upward from ``start`` to the first directory holding ``.git``.

    The filesystem root itself is never treated as a repository.
    """
    current = start
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return None


def _run_git(repo_root: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(repo_root), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning("git %s failed in %s: %s", " ".join(args), repo_root, exc)
        return None


def iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Split ``--porcelain -z`` output into ``(XY, path)`` records."""
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        path_text = token[3:]
        records.append((status, path_text))

        # Renamed/copied records carry the source path in the next token;
        # the first path is the destination.
        if "R" in status or "C" in status:
            index += 1

    return records


def collect_git_status(
    git_root: Path | None,
    timeout_seconds: float = GIT_STATUS_TIMEOUT_SECONDS,
) -> dict[Path, GitKind]:
    """Return canonical path -> ``GitKind`` for every path git reports.

    An absent repository or a failing ``git`` yields an empty mapping.
    """
    if git_root is None:
        return {}

    proc = _run_git(git_root, ["status", "--porcelain", "-z", "-uall"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        if proc is not None:
            logger.debug("git status exited with %s in %s", proc.returncode, git_root)
        return {}

    statuses: dict[Path, GitKind] = {}
    for status, rel_path in iter_porcelain_records(proc.stdout):
        if not rel_path:
            continue
        target = (git_root / rel_path).resolve()
        statuses[target] = classify_git(status[0], status[1])
    logger.debug("collected %d git status entries under %s", len(statuses), git_root)
    return statuses

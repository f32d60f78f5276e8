"""
Local Repository Scanner.

Read-only directory walk producing the FileInfo tree of a repository.
Hidden entries (leading ".") and entries matched by the root .gitignore
are skipped. Child paths are root-relative and "/"-separated.
"""

import fnmatch
import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Pattern

from ..domain.models import FileInfo
from ..ports.scanner_port import ScannerPort, ScanError

logger = logging.getLogger(__name__)


class IgnoreMatcher:
    """
    Glob rules from a .gitignore, translated to regexes with fnmatch.

    Rules without a "/" match the entry name at any depth, rules with one
    match the root-relative path. Negated rules ("!") are not supported
    and are skipped.
    """

    def __init__(self, patterns: Optional[List[str]] = None):
        self._name_rules: List[Pattern] = []
        self._path_rules: List[Pattern] = []
        for pattern in patterns or []:
            self.add(pattern)

    @classmethod
    def from_file(cls, gitignore_path: Path) -> "IgnoreMatcher":
        if not gitignore_path.is_file():
            return cls()
        try:
            lines = gitignore_path.read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError as e:
            logger.warning("Could not read %s: %s", gitignore_path, e)
            return cls()
        return cls(lines)

    def add(self, pattern: str) -> None:
        pattern = pattern.strip()
        if not pattern or pattern.startswith("#") or pattern.startswith("!"):
            return
        pattern = pattern.rstrip("/")
        if "/" in pattern:
            self._path_rules.append(re.compile(fnmatch.translate(pattern.lstrip("/"))))
        else:
            self._name_rules.append(re.compile(fnmatch.translate(pattern)))

    def matches(self, relative_path: str) -> bool:
        name = relative_path.rsplit("/", 1)[-1]
        if any(rule.match(name) for rule in self._name_rules):
            return True
        return any(rule.match(relative_path) for rule in self._path_rules)

    def __len__(self) -> int:
        return len(self._name_rules) + len(self._path_rules)


class LocalScanner(ScannerPort):
    """
    Read-only scanner implementation.

    SAFETY GUARANTEES:
    - Only scandir/stat, no file contents are read besides the root .gitignore
    - No write, delete, move or rename operations
    """

    def __init__(self, respect_gitignore: bool = True):
        self.respect_gitignore = respect_gitignore

    def scan(self, root_path: str) -> FileInfo:
        """Scan a repository directory into a FileInfo tree."""
        if not root_path:
            raise ScanError("No repository path given")

        root = Path(root_path).expanduser()
        try:
            root = root.resolve()
        except OSError as e:
            raise ScanError(f"Invalid repository path {root_path!r}: {e}") from e
        if not root.exists():
            raise ScanError(f"Repository path does not exist: {root}")

        matcher = IgnoreMatcher()
        if self.respect_gitignore:
            matcher = IgnoreMatcher.from_file(root / ".gitignore")
            logger.debug("Loaded %d ignore rules from %s", len(matcher), root)

        tree = self._build(root, "", matcher)
        tree.name = root.name or str(root)
        logger.info("Scanned %s: %d entries", root, tree.count())
        return tree

    def _build(self, base: Path, relative: str, matcher: IgnoreMatcher) -> FileInfo:
        full_path = base / relative if relative else base
        info = FileInfo(name=full_path.name, path=relative, is_dir=full_path.is_dir())
        if not info.is_dir:
            return info

        try:
            with os.scandir(full_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            # Unreadable directory: keep it as an empty node
            logger.debug("Cannot list %s: %s", full_path, e)
            return info

        children = []
        for entry in entries:
            if entry.name.startswith("."):
                continue
            child_relative = f"{relative}/{entry.name}" if relative else entry.name
            if matcher.matches(child_relative):
                continue
            try:
                children.append(self._build(base, child_relative, matcher))
            except OSError as e:
                logger.debug("Skipping %s: %s", child_relative, e)
                continue

        info.children = children
        return info

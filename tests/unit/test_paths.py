"""
Tests for path utilities.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from repoviz_core.domain.models import Connection
from repoviz_core.services.paths import (
    normalize,
    ancestors_of,
    parent_of,
    last_segment,
    depth_of,
    resolve_endpoints,
)


class TestNormalize:
    """normalize() turns backslashes into forward slashes."""

    def test_backslashes_replaced(self):
        assert normalize("src\\app\\main.py") == "src/app/main.py"

    def test_mixed_separators(self):
        assert normalize("src/app\\main.py") == "src/app/main.py"

    def test_idempotent(self):
        once = normalize("a\\b\\c")
        assert normalize(once) == once

    def test_empty(self):
        assert normalize("") == ""
        assert normalize(None) == ""


class TestAncestors:
    """ancestors_of() lists every proper prefix path."""

    def test_nested_path(self):
        assert ancestors_of("a/b/c") == ["a", "a/b"]

    def test_single_segment_has_none(self):
        assert ancestors_of("main.py") == []

    def test_path_itself_excluded(self):
        assert "a/b" not in ancestors_of("a/b")

    def test_parent_and_last_segment(self):
        assert parent_of("a/b/c.py") == "a/b"
        assert parent_of("c.py") == ""
        assert last_segment("a/b/c.py") == "c.py"
        assert depth_of("a/b/c.py") == 2
        assert depth_of("c.py") == 0


class TestResolveEndpoints:
    """Path fields win, display names are the fallback."""

    def test_paths_take_precedence(self):
        conn = Connection(from_path="src/a.ts", to_path="src/b.ts", from_file="a.ts", to_file="b.ts")
        assert resolve_endpoints(conn) == ("src/a.ts", "src/b.ts")

    def test_display_name_fallback(self):
        conn = Connection(from_file="a.ts", to_file="b.ts")
        assert resolve_endpoints(conn) == ("a.ts", "b.ts")

    def test_fallback_per_side(self):
        conn = Connection(from_path="src/a.ts", to_file="b.ts")
        assert resolve_endpoints(conn) == ("src/a.ts", "b.ts")

    def test_resolved_ids_are_normalized(self):
        conn = Connection(from_path="src\\a.ts", to_file="lib\\b.ts")
        assert resolve_endpoints(conn) == ("src/a.ts", "lib/b.ts")

    def test_malformed_gives_empty(self):
        conn = Connection(from_path="a.ts")
        assert resolve_endpoints(conn) == ("a.ts", "")

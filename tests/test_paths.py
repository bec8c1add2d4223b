"""Tests for screenroute.routing.paths: normalize and query splitting."""

from screenroute.routing.paths import normalize, split_query, strip_query


class TestNormalize:
    def test_empty_is_basepath(self) -> None:
        assert normalize("", "/app") == "/app"

    def test_slash_is_basepath(self) -> None:
        assert normalize("/", "/app") == "/app"

    def test_root_basepath(self) -> None:
        assert normalize("users", "/") == "/users"

    def test_nested_basepath(self) -> None:
        assert normalize("users/:id", "/app/admin") == "/app/admin/users/:id"

    def test_default_basepath(self) -> None:
        assert normalize("users") == "/users"
        assert normalize("") == "/"


class TestSplitQuery:
    def test_query(self) -> None:
        assert split_query("/a/b?x=1") == "x=1"

    def test_no_query(self) -> None:
        assert split_query("/a/b") == ""

    def test_first_question_mark_only(self) -> None:
        assert split_query("/a?x=1?y=2") == "x=1?y=2"

    def test_empty_query(self) -> None:
        assert split_query("/a?") == ""

    def test_not_decoded(self) -> None:
        assert split_query("/a?q=hello%20world") == "q=hello%20world"


class TestStripQuery:
    def test_strips(self) -> None:
        assert strip_query("/a/b?x=1") == "/a/b"

    def test_no_query(self) -> None:
        assert strip_query("/a/b") == "/a/b"

    def test_query_only(self) -> None:
        assert strip_query("?x=1") == ""

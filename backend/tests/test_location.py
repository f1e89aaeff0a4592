"""Tests for the location parser and the shared marker helpers."""
import pytest

from stackmodel.parser.location import Location, parse_location
from stackmodel.parser.markers import is_native_marker, strip_constructor


class TestParseLocation:
    def test_unix_path(self):
        assert parse_location("/a/b:10:5") == Location("/a/b", 10, 5)

    def test_returns_ints(self):
        loc = parse_location("app.js:007:12")
        assert loc.line == 7
        assert loc.column == 12

    def test_rightmost_numeric_groups_win(self):
        assert parse_location("file:1:2:3") == Location("file:1", 2, 3)

    def test_url(self):
        loc = parse_location("http://localhost:8080/main.js:4:20")
        assert loc == Location("http://localhost:8080/main.js", 4, 20)

    def test_windows_path(self):
        loc = parse_location("C:\\proj\\app.js:3:4")
        assert loc == Location("C:\\proj\\app.js", 3, 4)

    def test_path_with_spaces(self):
        loc = parse_location("/home/me/My Projects/app.js:8:1")
        assert loc.file == "/home/me/My Projects/app.js"

    def test_frozen_module_name(self):
        loc = parse_location("<frozen importlib._bootstrap>:241:1")
        assert loc == Location("<frozen importlib._bootstrap>", 241, 1)

    @pytest.mark.parametrize("fragment", [
        "native",
        "<anonymous>",
        "/a/b:10",
        "/a/b:x:5",
        "/a/b:10:5 ",
        "",
    ])
    def test_no_match(self, fragment):
        assert parse_location(fragment) is None

    def test_eval_descriptor_is_never_a_location(self):
        assert parse_location("eval at outer (/a/b:1:1), /a/b:2:2") is None


class TestMarkers:
    def test_strip_constructor(self):
        assert strip_constructor("new Baz") == ("Baz", True)

    def test_plain_name_untouched(self):
        assert strip_constructor("Foo.bar") == ("Foo.bar", False)

    def test_anonymous_construction_leaves_empty_name(self):
        assert strip_constructor("new ") == ("", True)

    def test_marker_must_be_a_prefix(self):
        assert strip_constructor("renew it") == ("renew it", False)

    @pytest.mark.parametrize("fragment", ["native", "<anonymous>", "unknown location", "index 0", "index 12"])
    def test_native_markers(self, fragment):
        assert is_native_marker(fragment)

    @pytest.mark.parametrize("fragment", ["index", "/a/b:1:1", "somewhere", "index x"])
    def test_not_native(self, fragment):
        assert not is_native_marker(fragment)

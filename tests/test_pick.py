"""Tests for waypoint.routing.pick — best-match selection."""

import pytest

from waypoint.routing.pick import pick
from waypoint.routing.route import RoutePattern


class TestPickDynamic:
    def test_binds_param(self) -> None:
        match = pick([RoutePattern("/users/:id")], "/users/123")
        assert match is not None
        assert match.params == {"id": "123"}
        assert match.matched_uri == "/users/123"

    def test_uri_shorter_than_route(self) -> None:
        assert pick([RoutePattern("/users/:id")], "/users") is None

    def test_uri_longer_than_route(self) -> None:
        assert pick([RoutePattern("/users/:id")], "/users/123/settings") is None

    def test_static_mismatch_after_param(self) -> None:
        assert pick([RoutePattern("/users/:id/profile")], "/users/123/settings") is None

    def test_percent_decoded(self) -> None:
        match = pick([RoutePattern("/users/:name")], "/users/john%20doe")
        assert match is not None
        assert match.params == {"name": "john doe"}

    def test_query_ignored(self) -> None:
        match = pick([RoutePattern("/users/:id")], "/users/42?tab=posts")
        assert match is not None
        assert match.params == {"id": "42"}
        assert match.matched_uri == "/users/42"

    def test_several_params(self) -> None:
        match = pick([RoutePattern("/:org/:repo/issues/:number")], "/acme/site/issues/7")
        assert match is not None
        assert match.params == {"org": "acme", "repo": "site", "number": "7"}

    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("/u/%E0%A4%A", "\ufffd%A"),
            ("/u/%zz", "%zz"),
            ("/u/%", "%"),
        ],
    )
    def test_malformed_escape_kept_or_replaced(self, uri: str, expected: str) -> None:
        match = pick([RoutePattern("/u/:x")], uri)
        assert match is not None
        assert match.params == {"x": expected}


class TestPickSplat:
    def test_bare_splat_named_star(self) -> None:
        match = pick([RoutePattern("/files/*")], "/files/docs/work")
        assert match is not None
        assert match.params == {"*": "docs/work"}

    def test_named_splat(self) -> None:
        match = pick([RoutePattern("/files/*path")], "/files/docs/work")
        assert match is not None
        assert match.params == {"path": "docs/work"}

    def test_matched_uri_is_prefix_before_splat(self) -> None:
        match = pick([RoutePattern("/files/*")], "/files/docs/work")
        assert match is not None
        assert match.matched_uri == "/files"

    def test_splat_segments_decoded(self) -> None:
        match = pick([RoutePattern("/files/*")], "/files/a%20b/c")
        assert match is not None
        assert match.params == {"*": "a b/c"}

    def test_splat_captures_empty_tail(self) -> None:
        match = pick([RoutePattern("/files/*")], "/files")
        assert match is not None
        assert match.params == {"*": ""}

    def test_splat_ignores_later_segments(self) -> None:
        match = pick([RoutePattern("/files/*/edit")], "/files/x/y")
        assert match is not None
        assert match.params == {"*": "x/y"}

    def test_splat_at_root(self) -> None:
        match = pick([RoutePattern("*")], "/")
        assert match is not None
        assert match.params == {"*": ""}
        assert match.matched_uri == "/"

    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("/f/%zz/%FF", "%zz/\ufffd"),
            ("/f/%E0%A4%A/b", "\ufffd%A/b"),
            ("/f/%", "%"),
        ],
    )
    def test_malformed_escape_kept_or_replaced(self, uri: str, expected: str) -> None:
        match = pick([RoutePattern("/f/*")], uri)
        assert match is not None
        assert match.params == {"*": expected}


class TestPickRoot:
    def test_root_route(self) -> None:
        match = pick([RoutePattern("/")], "/")
        assert match is not None
        assert match.params == {}
        assert match.matched_uri == "/"

    def test_empty_uri_is_root(self) -> None:
        match = pick([RoutePattern("/")], "")
        assert match is not None
        assert match.matched_uri == "/"

    def test_root_route_does_not_match_deeper(self) -> None:
        assert pick([RoutePattern("/")], "/about") is None

    def test_dynamic_does_not_bind_root_uri(self) -> None:
        assert pick([RoutePattern(":x")], "/") is None

    def test_dynamic_does_not_bind_root_uri_with_query(self) -> None:
        assert pick([RoutePattern("/:x")], "/?q=1") is None


class TestPickPriority:
    def test_static_beats_dynamic_in_any_order(self) -> None:
        routes = [RoutePattern("/:id", payload="dynamic"), RoutePattern("/new", payload="static")]
        match = pick(routes, "/new")
        assert match is not None
        assert match.route.payload == "static"

        match = pick(list(reversed(routes)), "/new")
        assert match is not None
        assert match.route.payload == "static"

    def test_dynamic_when_static_misses(self) -> None:
        routes = [RoutePattern("/new"), RoutePattern("/:id")]
        match = pick(routes, "/42")
        assert match is not None
        assert match.route.path == "/:id"
        assert match.params == {"id": "42"}

    def test_tie_goes_to_earlier_declaration(self) -> None:
        routes = [RoutePattern("/a/:x", payload=1), RoutePattern("/:y/b", payload=2)]
        match = pick(routes, "/a/b")
        assert match is not None
        assert match.route.payload == 1

        match = pick(list(reversed(routes)), "/a/b")
        assert match is not None
        assert match.route.payload == 2
        assert match.params == {"y": "a"}

    def test_payload_returned_unchanged(self) -> None:
        payload = object()
        match = pick([RoutePattern("/a", payload=payload)], "/a")
        assert match is not None
        assert match.route.payload is payload

    def test_does_not_reorder_input(self) -> None:
        routes = [RoutePattern("*"), RoutePattern("/a")]
        pick(routes, "/a")
        assert [r.path for r in routes] == ["*", "/a"]

    def test_empty_route_list(self) -> None:
        assert pick([], "/anything") is None


class TestPickDefault:
    def test_default_when_nothing_matches(self) -> None:
        routes = [RoutePattern("/about"), RoutePattern("", default=True, payload="not-found")]
        match = pick(routes, "/missing?x=1")
        assert match is not None
        assert match.route.payload == "not-found"
        assert match.params == {}
        assert match.matched_uri == "/missing?x=1"

    def test_positional_match_beats_default(self) -> None:
        routes = [RoutePattern("", default=True), RoutePattern("/about", payload="about")]
        match = pick(routes, "/about")
        assert match is not None
        assert match.route.payload == "about"

    def test_splat_ranked_below_default_still_wins(self) -> None:
        routes = [RoutePattern("*", payload="splat"), RoutePattern("", default=True, payload="default")]
        match = pick(routes, "/anything/here")
        assert match is not None
        assert match.route.payload == "splat"

    def test_first_default_wins(self) -> None:
        routes = [
            RoutePattern("", default=True, payload="first"),
            RoutePattern("/x"),
            RoutePattern("", default=True, payload="second"),
        ]
        match = pick(routes, "/y")
        assert match is not None
        assert match.route.payload == "first"

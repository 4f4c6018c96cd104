"""Directory-style path resolution.

Relative links resolve as though every path is a directory, never a
file. Browsers resolve relative URLs against the *file* you are on::

    browser:  "foo" against "/bar/" -> /bar/foo
    browser:  "foo" against "/bar"  -> /foo

Here both give ``/bar/foo``, the same way ``cd foo`` works from a shell.
A link only needs to know where it wants to go relative to where it is
mounted, not whether the current URL ends in a slash.
"""

from waypoint.routing.segments import segmentize, strip_slashes


def add_query(pathname: str, query: str) -> str:
    """Append ``?query`` to *pathname* when *query* is non-empty."""
    return f"{pathname}?{query}" if query else pathname


def _split_query(uri: str) -> tuple[str, str]:
    parts = uri.split("?")
    return parts[0], parts[1] if len(parts) > 1 else ""


def resolve(to: str, base: str) -> str:
    """Resolve *to* against *base*, treating *base* as a directory.

    Examples::

        resolve("/foo/bar", "/baz/qux")   -> "/foo/bar"
        resolve("?a=b", "/users?b=c")     -> "/users?a=b"
        resolve("profile", "/users/789")  -> "/users/789/profile"
        resolve("./", "/users/123")       -> "/users/123"
        resolve("../", "/users/123")      -> "/users"
        resolve("../..", "/users/123")    -> "/"
        resolve("../../one", "/a/b/c/d")  -> "/a/b/one"
        resolve(".././one", "/a/b/c/d")   -> "/a/b/c/one"

    Only the query of *to* survives. Surplus ``..`` segments stop at the
    root instead of failing.
    """
    if to.startswith("/"):
        return to

    to_pathname, to_query = _split_query(to)
    base_pathname, _ = _split_query(base)
    to_segments = segmentize(to_pathname)
    base_segments = segmentize(base_pathname)

    if to_segments[0] == "":
        return add_query(base_pathname, to_query)

    if not to_segments[0].startswith("."):
        pathname = "/".join(base_segments + to_segments)
        return add_query(("" if base_pathname == "/" else "/") + pathname, to_query)

    segments: list[str] = []
    for segment in base_segments + to_segments:
        if segment == "..":
            if segments:
                segments.pop()
        elif segment != ".":
            segments.append(segment)

    return add_query("/" + "/".join(segments), to_query)


def combine_paths(basepath: str, path: str) -> str:
    """Mount *path* under *basepath* as a directory-style pattern.

    The result carries no leading slash and exactly one trailing slash::

        combine_paths("/", "/")           -> "/"
        combine_paths("/admin", "/")      -> "admin/"
        combine_paths("/admin", "users")  -> "admin/users/"
        combine_paths("/", "/users/:id")  -> "users/:id/"
    """
    combined = basepath if path == "/" else f"{strip_slashes(basepath)}/{strip_slashes(path)}"
    return f"{strip_slashes(combined)}/"

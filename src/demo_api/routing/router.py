"""Compiled router with trie-based path matching."""

import re
from dataclasses import dataclass

from demo_api.errors import ConfigurationError, NotFound
from demo_api.routing.params import CONVERTERS, compile_converter
from demo_api.routing.route import PathSegment, Route, RouteMatch


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/api/users"        -> [PathSegment("api"), PathSegment("users")]
        "/api/sum/{a}/{b}"  -> [..., PathSegment("{a}", is_param=True, param_name="a"), ...]
        "/items/{id:int}"   -> [..., PathSegment("{id:int}", is_param=True, param_type="int")]

    Raises ``ConfigurationError`` for ``<param>``-style segments, empty
    parameter names, and unknown converters.
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route {path!r} uses <param> syntax; "
                f"declare path parameters as {{param}} or {{param:type}}."
            )
            raise ConfigurationError(msg)
        if not (part.startswith("{") and part.endswith("}")):
            segments.append(PathSegment(value=part))
            continue

        param_name, _, param_type = part[1:-1].partition(":")
        param_type = param_type or "str"
        if not param_name:
            msg = f"Route {path!r} has a path parameter without a name."
            raise ConfigurationError(msg)
        if param_type not in CONVERTERS:
            known = ", ".join(sorted(CONVERTERS))
            msg = f"Route {path!r} uses unknown converter {param_type!r} (known: {known})."
            raise ConfigurationError(msg)
        segments.append(
            PathSegment(
                value=part,
                is_param=True,
                param_name=param_name,
                param_type=param_type,
            )
        )
    return segments


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "param_child", "routes_by_method")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        # Only one parameter pattern per level
        self.param_child: _ParamEdge | None = None
        self.routes_by_method: dict[str, Route] = {}


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        router.add(Route("/api/users", list_users, frozenset({"GET"})))
        router.add(Route("/api/sum/{a}/{b}", add, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/api/sum/5/3")
    """

    __slots__ = ("_compiled", "_root", "_routes")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if not seg.is_param:
                node = node.children.setdefault(seg.value, _TrieNode())
                continue

            edge = node.param_child
            if edge is None:
                edge = _ParamEdge(
                    param_name=seg.param_name or "",
                    param_type=seg.param_type,
                    regex=compile_converter(seg.param_type),
                    node=_TrieNode(),
                )
                node.param_child = edge
            elif (edge.param_name, edge.param_type) != (seg.param_name, seg.param_type):
                msg = (
                    f"Route {route.path!r} conflicts with an existing parameter "
                    f"{{{edge.param_name}:{edge.param_type}}} at the same position."
                )
                raise ConfigurationError(msg)
            node = edge.node

        for method in route.methods:
            node.routes_by_method[method] = route
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request method and path against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` for any unmatched method and path pair, including
        a known path requested with a method it does not serve.
        """
        parts = [p for p in path.strip("/").split("/") if p]
        result = self._match_node(self._root, parts, 0, {})
        route = None
        if result is not None:
            node, params = result
            route = node.routes_by_method.get(method)
            if route is None and method == "HEAD":
                route = node.routes_by_method.get("GET")
        if route is None:
            raise NotFound(f"No route matches {method} {path!r}")
        return RouteMatch(route=route, path_params=params)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[_TrieNode, dict[str, str]] | None:
        """Recursively match path parts against the trie."""
        if index == len(parts):
            if node.routes_by_method:
                return node, params
            return None

        part = parts[index]

        # Static children win over parameters
        child = node.children.get(part)
        if child is not None:
            result = self._match_node(child, parts, index + 1, params)
            if result is not None:
                return result

        edge = node.param_child
        if edge is not None and edge.regex.fullmatch(part):
            return self._match_node(
                edge.node, parts, index + 1, {**params, edge.param_name: part}
            )

        return None

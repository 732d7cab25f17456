"""``Link`` header parsing (RFC 8288 subset) for cursor pagination.

Example:
    >>> parse_link_header('<https://a.example/x?page=2>; rel="next", <https://a.example/x?page=1>; rel="prev"')
    {'next': 'https://a.example/x?page=2', 'prev': 'https://a.example/x?page=1'}
"""

from __future__ import annotations


def _split(text: str, sep: str) -> list[str]:
    """Split on ``sep`` outside quoted strings and ``<...>`` targets."""
    parts: list[str] = []
    buf: list[str] = []
    quoted = bracketed = escaped = False
    for ch in text:
        if escaped:
            escaped = False
        elif quoted:
            if ch == "\\":
                escaped = True
            elif ch == '"':
                quoted = False
        elif bracketed:
            if ch == ">":
                bracketed = False
        elif ch == '"':
            quoted = True
        elif ch == "<":
            bracketed = True
        elif ch == sep:
            parts.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    parts.append("".join(buf))
    return parts


def _rel_names(params: str) -> list[str]:
    for param in _split(params, ";"):
        name, eq, value = param.partition("=")
        if eq and name.strip().lower() == "rel":
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            return value.split()
    return []


def parse_link_header(value: str | None) -> dict[str, str]:
    """Map relation names to URLs.

    Entries that do not start with ``<url>``, have an empty URL, or carry no
    ``rel`` parameter are skipped. A ``rel`` holding several space-separated
    names registers the URL under each. When a relation repeats, the first
    occurrence wins.
    """
    links: dict[str, str] = {}
    if not value:
        return links

    for entry in _split(value, ","):
        entry = entry.strip()
        end = entry.find(">")
        if not entry.startswith("<") or end < 0:
            continue
        url = entry[1:end].strip()
        params = entry[end + 1 :].strip()
        if not url or (params and not params.startswith(";")):
            continue
        for name in _rel_names(params):
            links.setdefault(name.lower(), url)
    return links

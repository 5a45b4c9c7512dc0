"""Lexical scan of template source for Handlebars partial references."""

from __future__ import annotations

import re

_COMMENT_PATTERN = re.compile(r"\{\{!--.*?--\}\}|\{\{![^}]*\}\}", re.DOTALL)

# {{> name}}, {{>name arg=1}}, {{~> name ~}}, {{#> layout}}, {{> "role/expert"}}.
# Dynamic partials ({{> (lookup ...)}}) carry no static name and are not matched.
_PARTIAL_PATTERN = re.compile(
    r"""
    \{\{~?\s*\#?>\s*
    (?:"(?P<dq>[^"{}]+)"|'(?P<sq>[^'{}]+)'|(?P<bare>[^\s"'(){}~]+))
    [^{}]*\}\}
    """,
    re.VERBOSE,
)


def extract_partials(template: str) -> list[str]:
    """Return partial names referenced by *template* in first-seen order.

    Duplicates are collapsed. Incomplete or malformed references are
    skipped rather than reported.

    Parameters
    ----------
    template : str
        Raw template text.

    Returns
    -------
    list[str]
    """
    source = _COMMENT_PATTERN.sub("", template)
    names: dict[str, None] = {}
    for match in _PARTIAL_PATTERN.finditer(source):
        name = (match.group("dq") or match.group("sq") or match.group("bare")).strip()
        if name:
            names.setdefault(name, None)
    return list(names)

"""Parse Markdown and normalize to canonical AST tokens.

This module wraps mistune v3's AST renderer and normalises the raw token
stream into the canonical types the block builder dispatches on.

Canonical block tokens:
    heading, paragraph, block_quote, list, list_item, block_code,
    indented_code, table, thematic_break, html_block

Canonical inline tokens:
    text, strong, emphasis, codespan, strikethrough, link, image,
    softbreak, linebreak, html_inline

Tokens of any other type are passed through under their raw mistune
name so that the builder can report them as skipped.

Mistune percent-encodes link destinations.  Link tokens get their
``url`` replaced with the destination as written in the source, so
non-ASCII URLs survive a Markdown -> ADF -> Markdown round trip.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import mistune
from mistune.helpers import unescape_char
from mistune.util import escape_url

from adfify.config import GFM_PLUGINS

# ---------------------------------------------------------------------------
# Mistune-to-canonical type mapping
# ---------------------------------------------------------------------------

_BLOCK_TYPE_MAP: dict[str, str] = {
    "heading": "heading",
    "paragraph": "paragraph",
    "block_quote": "block_quote",
    "list": "list",
    "list_item": "list_item",
    # Task items become plain list items; the checkbox has no ADF mark.
    "task_list_item": "list_item",
    "block_code": "block_code",
    "table": "table",
    "thematic_break": "thematic_break",
    "block_html": "html_block",
    # Tight-list text block
    "block_text": "paragraph",
}

_INLINE_TYPE_MAP: dict[str, str] = {
    "text": "text",
    "strong": "strong",
    "emphasis": "emphasis",
    "codespan": "codespan",
    "strikethrough": "strikethrough",
    "link": "link",
    "image": "image",
    "softbreak": "softbreak",
    "linebreak": "linebreak",
    "inline_html": "html_inline",
}

_SKIP_TYPES: frozenset[str] = frozenset({
    "blank_line",
})

# Canonical tokens whose payload lives in "raw" rather than "children".
_RAW_TYPES: frozenset[str] = frozenset({
    "text",
    "codespan",
    "html_block",
    "html_inline",
})

# Destination of an inline link: ``](<dest>`` or ``](dest`` with at most
# one level of balanced parentheses.
_INLINE_DEST_RE = re.compile(
    r"\]\([ \t]*\n?[ \t]*"
    r"(?:<((?:\\.|[^<>\\\n])*)>"
    r"|((?:\\.|[^\s()\\]|\((?:\\.|[^\s()\\])*\))+))"
)

# Destination of a link reference definition: ``[label]: dest``.
_REF_DEF_RE = re.compile(
    r"^ {0,3}\[[^\]\n]+\]:[ \t]*\n?[ \t]*"
    r"(?:<((?:\\.|[^<>\\\n])*)>|(\S+))",
    re.MULTILINE,
)


def _link_destinations(markdown: str) -> dict[str, str]:
    """Map mistune's encoded form of each link destination to its source text."""
    found: dict[str, str] = {}
    for pattern in (_INLINE_DEST_RE, _REF_DEF_RE):
        for match in pattern.finditer(markdown):
            written = match.group(1) if match.group(1) is not None else match.group(2)
            dest = unescape_char(written)
            found.setdefault(escape_url(dest), dest)
    return found


class ASTNormalizer:
    """Parse Markdown and normalize to canonical AST tokens.

    Parameters
    ----------
    plugins:
        Mistune plugin names.  Defaults to the GFM set.
    """

    def __init__(self, plugins: Iterable[str] = GFM_PLUGINS) -> None:
        self._parser = mistune.create_markdown(
            renderer="ast",
            plugins=list(plugins),
        )

    def parse(self, markdown: str) -> list[dict]:
        """Parse markdown and return the normalized token list."""
        raw_tokens = self._parser(markdown)
        if isinstance(raw_tokens, str):
            return []
        return self._normalize_tokens(raw_tokens, _link_destinations(markdown))

    def _normalize_tokens(self, tokens: list[dict], destinations: dict[str, str]) -> list[dict]:
        result: list[dict] = []
        for token in tokens:
            normalized = self._normalize_token(token, destinations)
            if normalized is not None:
                result.append(normalized)
        return result

    def _normalize_token(self, token: dict, destinations: dict[str, str]) -> dict | None:
        """Normalize a single token, returning None if it should be dropped."""
        raw_type = token.get("type", "")

        if raw_type in _SKIP_TYPES:
            return None

        if raw_type == "block_code":
            return self._normalize_code(token)

        canonical = _BLOCK_TYPE_MAP.get(raw_type) or _INLINE_TYPE_MAP.get(raw_type)
        if canonical is None:
            # Unknown to the converter: keep the raw name for reporting.
            canonical = raw_type or "unknown"

        result: dict = {"type": canonical}

        if canonical in _RAW_TYPES:
            result["raw"] = token.get("raw", "")
            return result

        attrs = token.get("attrs")
        if attrs:
            result["attrs"] = dict(attrs)

        if canonical == "link":
            result.setdefault("attrs", {})["url"] = self._written_url(token, destinations)

        children = token.get("children")
        if children:
            result["children"] = self._normalize_tokens(children, destinations)

        return result

    @staticmethod
    def _written_url(token: dict, destinations: dict[str, str]) -> str:
        """Return the link destination as it appears in the source.

        Falls back to the link text for autolinks, and to mistune's
        encoded URL when neither matches.
        """
        url = (token.get("attrs") or {}).get("url", "")
        written = destinations.get(url)
        if written is not None:
            return written

        children = token.get("children") or []
        if len(children) == 1 and children[0].get("type") == "text":
            text = children[0].get("raw", "")
            for candidate in (text, "mailto:" + text):
                if escape_url(candidate) == url:
                    return candidate
        return url

    def _normalize_code(self, token: dict) -> dict:
        """Normalize fenced and indented code blocks.

        Mistune keeps the code's final newline; one is stripped.  The
        language is the first word of the fence info string.  Indented
        blocks become ``indented_code``, which has no ADF mapping.
        """
        raw_code = token.get("raw", "")
        if raw_code.endswith("\n"):
            raw_code = raw_code[:-1]

        code_type = "indented_code" if token.get("style") == "indent" else "block_code"
        result: dict = {"type": code_type, "raw": raw_code}

        info = (token.get("attrs") or {}).get("info") or ""
        words = info.split()
        if words:
            result["attrs"] = {"language": words[0]}
        return result

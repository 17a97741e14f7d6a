"""Round-trip tests: Markdown → ADF → Markdown.

For the supported subset of GitHub-Flavored Markdown the renderer emits
exactly the syntax the parser accepts, and text is never escaped, so a
round trip reproduces the input byte for byte with no warnings.
"""

import pytest

from adfify.api import ADFConverter

COMPLEX_DOCUMENT = """# Main Heading

This is a paragraph with **bold** and *italic* text.

## Subheading

- First item
- Second item

1. Numbered one
2. Numbered two

> A blockquote

```go
func main() {}
```"""


def _roundtrip(md: str) -> tuple[str, list[str], list[str]]:
    converter = ADFConverter()
    document, to_adf_warnings = converter.to_adf(md)
    result, to_md_warnings = converter.to_markdown(document)
    return result, to_adf_warnings, to_md_warnings


@pytest.mark.parametrize("md", [
    pytest.param("Hello, world!", id="plain-text"),
    pytest.param("This is **bold** text.", id="bold"),
    pytest.param("This is *italic* text.", id="italic"),
    pytest.param("Use `fmt.Println` function.", id="inline-code"),
    pytest.param('```go\nfmt.Println("hello")\n```', id="code-block"),
    pytest.param("## My Heading", id="heading"),
    pytest.param("- Item 1\n- Item 2", id="bullet-list"),
    pytest.param("1. First\n2. Second", id="ordered-list"),
    pytest.param("Visit [Google](https://google.com) for more.", id="link"),
    pytest.param("> This is a quote.", id="blockquote"),
    pytest.param("First paragraph.\n\nSecond paragraph.", id="paragraphs"),
    pytest.param("This is ***bold and italic*** text.", id="bold-italic"),
    pytest.param(COMPLEX_DOCUMENT, id="complex-document"),
])
def test_supported_markdown_roundtrips_exactly(md):
    result, to_adf_warnings, to_md_warnings = _roundtrip(md)
    assert to_adf_warnings == []
    assert to_md_warnings == []
    assert result == md


@pytest.mark.parametrize("md, expected", [
    pytest.param("```\nno language\n```", "```\nno language\n```", id="code-no-language"),
    pytest.param("3. three\n4. four", "3. three\n4. four", id="ordered-start"),
    pytest.param("###### Deep", "###### Deep", id="h6"),
    pytest.param("[x](https://例え.jp/パス)", "[x](https://例え.jp/パス)", id="non-ascii-link"),
    pytest.param("> a\n>\n> b", "> a\n>\n> b", id="multi-paragraph-quote"),
    # Link is rendered outermost.
    pytest.param("**[docs](https://x.io)**", "[**docs**](https://x.io)", id="bold-link"),
    # A hard break renders as a bare newline.
    pytest.param("line one  \nline two", "line one\nline two", id="hard-break"),
])
def test_additional_constructs(md, expected):
    result, to_adf_warnings, to_md_warnings = _roundtrip(md)
    assert result == expected
    assert to_adf_warnings == to_md_warnings == []


def test_unsupported_content_dropped_both_ways():
    result, to_adf_warnings, to_md_warnings = _roundtrip("Before\n\n---\n\nAfter")
    assert result == "Before\n\nAfter"
    assert to_adf_warnings == ["skipped unsupported node type 'thematic_break'"]
    assert to_md_warnings == []


def test_second_roundtrip_is_stable():
    md = "# T\n\n- a **b**\n- [c](https://x.io)\n\n> q"
    once, _, _ = _roundtrip(md)
    twice, _, _ = _roundtrip(once)
    assert twice == once


def test_indented_code_reported_not_converted():
    result, to_adf_warnings, _ = _roundtrip("Intro\n\n    indented code")
    assert result == "Intro"
    assert to_adf_warnings == ["skipped unsupported node type 'indented_code'"]

"""Tests for HTML document generation."""

from __future__ import annotations

import pytest

from englang.ast import Node, NodeType, element
from englang.codegen import CodeGenerator, generate_document
from englang.codegen.frontend.document import collect_metadata
from englang.codegen.frontend.renderers import RenderContext, render_import, render_node
from englang.config import EngConfig
from englang.lang.parser import parse_document


def _render(node: Node) -> list:
    ctx = RenderContext()
    render_node(node, ctx)
    return ctx.lines


def test_minimal_page_layout() -> None:
    html = generate_document(parse_document('create page\nadd heading "Hi"'))

    assert html == "\n".join([
        "<!DOCTYPE html>",
        "<html>",
        "  <head>",
        '    <meta charset="UTF-8">',
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        "    <title>ENG Page</title>",
        "  </head>",
        "  <body>",
        "    <h1>Hi</h1>",
        "  </body>",
        "</html>",
    ])


def test_exactly_one_head_and_body() -> None:
    html = generate_document(parse_document('add heading "a"\nadd paragraph "b"'))

    assert html.count("<head>") == 1
    assert html.count("<body>") == 1
    assert html.index("</head>") < html.index("<body>")


@pytest.mark.parametrize(
    "kind,opening",
    [
        ("heading", "<h1"),
        ("paragraph", "<p"),
        ("button", "<button"),
        ("link", '<a href="#"'),
        ("image", "<img"),
        ("input", '<input type="text"'),
        ("div", "<div"),
        ("label", "<label"),
        ("span", "<span"),
        ("item", "<li"),
    ],
)
def test_attributes_render_as_classes_and_data_list(kind: str, opening: str) -> None:
    lines = _render(element(kind, "x", ["big", "red"]))

    assert lines[0].startswith(opening)
    assert ' class="with-big with-red" data-with="big red"' in lines[0]


@pytest.mark.parametrize(
    "kind,expected",
    [
        ("heading", "<h1>Heading</h1>"),
        ("paragraph", "<p>Paragraph</p>"),
        ("button", "<button>Button</button>"),
        ("link", '<a href="#">Link</a>'),
        ("label", "<label>Label</label>"),
        ("image", '<img src="" alt="Image">'),
        ("input", '<input type="text">'),
    ],
)
def test_default_content(kind: str, expected: str) -> None:
    assert _render(element(kind)) == [expected]


def test_text_content_is_escaped_once() -> None:
    root = parse_document('add paragraph "<b>Tom & \\"Jerry\\"</b>"')
    html = generate_document(root)

    assert '<p>&lt;b&gt;Tom &amp; &quot;Jerry&quot;&lt;/b&gt;</p>' in html
    assert "&amp;amp;" not in html
    assert generate_document(root) == html


def test_div_with_markup_is_emitted_raw() -> None:
    assert _render(element("div", "<b>bold</b>\n<i>it</i>")) == [
        "<div>",
        "  <b>bold</b>",
        "  <i>it</i>",
        "</div>",
    ]


def test_div_with_text_is_escaped() -> None:
    assert _render(element("div", "a & b")) == ["<div>", "  a &amp; b", "</div>"]


def test_empty_div() -> None:
    assert _render(element("div")) == ["<div>", "</div>"]


def test_unknown_element_becomes_comment() -> None:
    assert _render(element("widget", "x")) == ["<!-- Unknown element: WIDGET -->"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("script", ["<script>", "  // Inline script", "</script>"]),
        ("cscript with ts", ['<script type="module">', "  // TypeScript (transpile required in production)", "</script>"]),
        ("cstyle", ["<style>", "  /* custom style block */", "</style>"]),
    ],
)
def test_script_block_placeholders(source: str, expected: list) -> None:
    assert _render(parse_document(source).children[0]) == expected


def test_setup_function_title_and_imports_are_hoisted() -> None:
    root = parse_document(
        'function setup_page\n'
        'title "First"\n'
        'tite "Real & True"\n'
        'import css from [theme.css]\n'
        'function main\n'
        'add heading "Hi"\n'
    )
    html = generate_document(root)
    head, body = html.split("<body>")

    assert "<title>Real &amp; True</title>" in head
    assert '<link rel="stylesheet" href="theme.css">' in head
    assert "First" not in html
    assert "<h1>Hi</h1>" in body
    assert "theme.css" not in body


def test_setup_title_with_empty_content_keeps_default() -> None:
    metadata = collect_metadata(parse_document('function setup\ntitle ""'))
    assert metadata.title is None


def test_non_setup_function_body_is_spliced_into_page() -> None:
    root = parse_document('create page\nadd heading "A"\nfunction more\nadd paragraph "B"')
    html = generate_document(root)

    assert html.index("<h1>A</h1>") < html.index("<p>B</p>")


def test_top_level_imports_render_in_head_in_order() -> None:
    root = parse_document("import js from [a.js]\nadd label \"x\"\nimport css from [b.css]")
    html = generate_document(root)
    head = html.split("</head>")[0]

    assert head.index('<script src="a.js"></script>') < head.index('<link rel="stylesheet" href="b.css">')


@pytest.mark.parametrize(
    "attributes,expected",
    [
        ({"importType": "js", "path": "a.js"}, ['<script src="a.js"></script>']),
        ({"importType": "ts", "path": "a.ts"}, ['<script type="module" src="a.ts"></script>']),
        ({"importType": "css", "path": "a.css"}, ['<link rel="stylesheet" href="a.css">']),
        ({"importType": "ceng", "path": "a.ceng"}, ['<link rel="stylesheet" href="a.ceng">']),
        ({"importType": "seng", "path": "a.seng"}, ['<script src="a.seng"></script>']),
        ({"importType": None, "path": "a.css"}, ['<link rel="stylesheet" href="a.css">']),
        ({"importType": None, "path": "a.txt"}, ['<script src="a.txt"></script>']),
        ({"importType": "js", "path": None}, []),
    ],
)
def test_external_import_references(attributes: dict, expected: list) -> None:
    ctx = RenderContext()
    render_import(Node(NodeType.IMPORT, attributes), ctx)
    assert ctx.lines == expected


def test_compiled_imports_are_inlined_verbatim() -> None:
    ctx = RenderContext()
    render_import(
        Node(NodeType.IMPORT, {"importType": "seng", "path": "a.seng", "compiled": "if (a < b) {\n}\n"}),
        ctx,
    )
    render_import(
        Node(NodeType.IMPORT, {"importType": "ceng", "path": "a.ceng", "compiled": ".a {\n}\n"}),
        ctx,
    )

    assert ctx.lines == [
        "<script>",
        "  if (a < b) {",
        "  }",
        "</script>",
        "<style>",
        "  .a {",
        "  }",
        "</style>",
    ]


def test_configured_title_and_indent() -> None:
    html = CodeGenerator(EngConfig(default_title="Docs", indent="\t")).generate(parse_document("add input"))

    assert "\t\t<title>Docs</title>" in html
    assert "\t\t<input type=\"text\">" in html

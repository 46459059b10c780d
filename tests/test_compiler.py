"""End-to-end tests for the structural compiler."""

import pytest

from englang import CompileResult, EngCompiler, compile_source
from englang.config import EngConfig


def test_compile_page_with_inlined_script(write_source, tmp_path) -> None:
    write_source(
        "game.seng",
        """
        function start
        log("go")
        """,
    )
    source = (
        "function setup_head\n"
        'title "Game"\n'
        "import seng from [game.seng]\n"
        "create page\n"
        'add heading "Play" with big\n'
    )

    result = EngCompiler().compile(source, tmp_path)

    assert isinstance(result, CompileResult)
    assert result.success
    assert result.warnings == []
    html = result.html
    assert "<title>Game</title>" in html
    assert "    <script>\n      function start() {\n      console.log(\"go\");\n      }\n    </script>" in html
    assert "<script src" not in html
    assert '<h1 class="with-big" data-with="big">Play</h1>' in html


def test_missing_import_falls_back_to_external_reference(tmp_path) -> None:
    result = EngCompiler().compile("import seng from [nope.seng]", tmp_path)

    assert result.success
    assert '<script src="nope.seng"></script>' in result.html
    assert result.warnings == [f"Could not compile nope.seng: file not found: {tmp_path / 'nope.seng'}"]


def test_syntax_error_fails_compilation() -> None:
    result = EngCompiler().compile('add "orphan"')

    assert not result.success
    assert result.html is None
    assert result.error == "Expected KEYWORD or IDENTIFIER, got STRING"


def test_compile_source_raises_on_failure() -> None:
    with pytest.raises(ValueError, match="Compilation failed"):
        compile_source("create page add")


def test_compile_source_uses_config() -> None:
    html = compile_source('add label "x"', config=EngConfig(default_title="Mine"))
    assert "<title>Mine</title>" in html


def test_compile_file_writes_html_beside_source(write_source) -> None:
    source = write_source("index.heng", 'create page\nadd paragraph "hello"\n')

    result = EngCompiler().compile_file(source)

    assert result.success
    assert result.output_path == source.with_suffix(".html")
    assert "<p>hello</p>" in result.output_path.read_text(encoding="utf-8")


def test_compile_file_explicit_output(write_source, tmp_path) -> None:
    source = write_source("index.heng", "add button")
    target = tmp_path / "site.html"

    result = EngCompiler().compile_file(source, target)

    assert result.output_path == target
    assert "<button>Button</button>" in target.read_text(encoding="utf-8")
    assert not source.with_suffix(".html").exists()


def test_compile_file_requires_heng_extension(write_source) -> None:
    source = write_source("index.txt", "add button")

    result = EngCompiler().compile_file(source)

    assert not result.success
    assert result.error == "Input file must have .heng extension"


def test_compile_file_failure_writes_nothing(write_source) -> None:
    source = write_source("broken.heng", "add")

    result = EngCompiler().compile_file(source)

    assert not result.success
    assert result.output_path is None
    assert not source.with_suffix(".html").exists()


def test_compile_file_missing_source(tmp_path) -> None:
    result = EngCompiler().compile_file(tmp_path / "absent.heng")

    assert not result.success
    assert result.error.startswith("Cannot read")


def test_imports_relative_to_source_directory(write_source) -> None:
    write_source("site/theme.ceng", "color: red\n")
    source = write_source("site/index.heng", "import ceng from [theme.ceng]\n")

    result = EngCompiler().compile_file(source)

    html = result.output_path.read_text(encoding="utf-8")
    assert "<style>\n      color: red;\n    </style>" in html
    assert (source.parent / "theme.css").is_file()


def test_undecodable_import_does_not_fail_compilation(tmp_path) -> None:
    (tmp_path / "bad.seng").write_bytes(b"log(\xff\xfe)\n")
    (tmp_path / "bad.ceng").write_bytes(b"bg: \xff\n")

    result = EngCompiler().compile(
        'import seng from [bad.seng]\nimport ceng from [bad.ceng]\ncreate page\nadd heading "x"',
        tmp_path,
    )

    assert result.success
    assert '<script src="bad.seng"></script>' in result.html
    assert '<link rel="stylesheet" href="bad.ceng">' in result.html
    assert "<h1>x</h1>" in result.html
    assert len(result.warnings) == 2


def test_compile_file_undecodable_source(tmp_path) -> None:
    source = tmp_path / "bad.heng"
    source.write_bytes(b'add heading "\xff"\n')

    result = EngCompiler().compile_file(source)

    assert not result.success
    assert result.error.startswith(f"Cannot read {source}")
    assert not source.with_suffix(".html").exists()


def test_setup_head_then_main_page(write_source, tmp_path) -> None:
    write_source(
        "game.seng",
        """
        function start
        log("go")

        on button click (e)
        call start()
        """,
    )
    write_source(
        "theme.ceng",
        """
        class card {
        size: 3em
        }
        button when hover {
        bg: gold
        }
        """,
    )
    source = write_source(
        "index.heng",
        """
        function setup_head
        title "My Game"
        import seng from [game.seng]
        import ceng from [theme.ceng]

        function main
        create page
        add heading "Welcome" with big
        add button "Play"
        """,
    )

    result = EngCompiler().compile_file(source)

    html = result.output_path.read_text(encoding="utf-8")
    head, body = html.split("<body>")
    assert "<title>My Game</title>" in head
    assert "button.addEventListener('click', (e) => {" in head
    assert "button:hover {" in head
    assert '<h1 class="with-big" data-with="big">Welcome</h1>' in body
    assert "<button>Play</button>" in body
    assert result.warnings == []

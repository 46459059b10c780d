"""Tests for the statement-dialect transpiler."""

import logging
import textwrap

import pytest

from englang.errors import EngTranspileError
from englang.seng import compile_statement_file, transpile_statements


def _seng(source: str) -> str:
    return transpile_statements(textwrap.dedent(source).lstrip("\n"))


def _braces_balanced(js: str) -> bool:
    depth = 0
    for char in js:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def test_class_with_single_method_closes_method_before_class() -> None:
    js = transpile_statements("class Foo\nconstructor(x)\nthis.x = x\n")

    assert js == "class Foo {\nconstructor(x) {\nthis.x = x;\n}\n}\n"


def test_unclosed_conditionals_close_in_reverse_order() -> None:
    js = transpile_statements("when (a)\nwhen (b)\nwhen (c)")

    assert js == "if (a) {\nif (b) {\nif (c) {\n}\n}\n}\n"
    assert _braces_balanced(js)


def test_function_with_params_and_return() -> None:
    js = _seng(
        """
        function add (a, b)
        return a + b
        """
    )
    assert js == "function add(a, b) {\nreturn a + b;\n}\n"


def test_function_without_params() -> None:
    assert transpile_statements("function tick") == "function tick() {\n}\n"


def test_event_handler_closes_with_call_terminator() -> None:
    js = _seng(
        """
        on button click (e)
        log(e.type)
        """
    )
    assert js == "button.addEventListener('click', (e) => {\nconsole.log(e.type);\n});\n"


def test_event_handler_closed_by_blank_line() -> None:
    js = transpile_statements("on window load\ninit()\n\nlog(1)")
    assert js == "window.addEventListener('load', () => {\ninit();\n});\nconsole.log(1);\n"


def test_else_chains_onto_open_conditional() -> None:
    js = _seng(
        """
        when (x > 1)
        log("big")
        else
        log("small")
        """
    )
    assert js == 'if (x > 1) {\nconsole.log("big");\n} else {\nconsole.log("small");\n}\n'


def test_else_without_conditional_opens_bare_block() -> None:
    assert transpile_statements("else\nx = 1") == "else {\nx = 1;\n}\n"


def test_loop_becomes_while() -> None:
    assert transpile_statements("loop (i < 3)\ni = i + 1") == "while (i < 3) {\ni = i + 1;\n}\n"


def test_variable_declarations() -> None:
    js = _seng(
        """
        var count = 0
        varibal name
        var total = 5;
        """
    )
    assert js == "let count = 0;\nlet name;\nlet total = 5;\n"


def test_log_print_and_calls() -> None:
    js = _seng(
        """
        print("hi")
        call draw()
        render(1, 2);
        """
    )
    assert js == 'console.log("hi");\ndraw();\nrender(1, 2);\n'


def test_fallback_appends_terminator_only_when_missing() -> None:
    js = _seng(
        """
        x = x + 1
        y = 2;
        """
    )
    assert js == "x = x + 1;\ny = 2;\n"


def test_english_macros_are_expanded() -> None:
    js = _seng(
        """
        var box = get element by id "box"
        var btn = get element by selector '.primary'
        request animation frame tick
        for i from 0 to 4
        log(i)
        """
    )
    assert js == (
        'let box = document.getElementById("box");\n'
        'let btn = document.querySelector(".primary");\n'
        "requestAnimationFrame(tick);\n"
        "for (let i = 0; i <= 4; i++) {\n"
        "console.log(i);\n"
        "}\n"
    )


def test_top_level_construct_closes_open_class() -> None:
    js = _seng(
        """
        class Ball
        move()
        x = 1
        function main
        log(1)
        """
    )
    assert js == "class Ball {\nmove() {\nx = 1;\n}\n}\nfunction main() {\nconsole.log(1);\n}\n"


def test_new_method_closes_previous_method() -> None:
    js = transpile_statements("class A\none()\ntwo()\n")
    assert js == "class A {\none() {\n}\ntwo() {\n}\n}\n"


def test_static_methods() -> None:
    assert transpile_statements("class M\nstatic make(a)") == "class M {\nstatic make(a) {\n}\n}\n"


def test_statement_words_inside_methods_are_not_methods() -> None:
    js = _seng(
        """
        class A
        run()
        when (ok)
        log(1)
        """
    )
    assert js == "class A {\nrun() {\nif (ok) {\nconsole.log(1);\n}\n}\n}\n"


def test_calls_nested_in_method_blocks_stay_calls() -> None:
    js = transpile_statements("class A\nrun()\nloop (busy)\nstep()")
    assert js == "class A {\nrun() {\nwhile (busy) {\nstep();\n}\n}\n}\n"


def test_line_ending_in_brace_opens_generic_block() -> None:
    js = transpile_statements("if (a) {\nb()\n}\n")
    assert js == "if (a) {\nb();\n}\n"


def test_inline_comments_are_stripped() -> None:
    js = _seng(
        """
        var x = 1 -- counter
        -- whole line
        i--
        """
    )
    assert js == "let x = 1;\ni--;\n"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("@raw\nX\nY", "X\nY"),
        ("@raw\nconst a = 1;\n", "const a = 1;\n"),
        ("\n@raw\nwhen (x)", "when (x)"),
    ],
)
def test_raw_passthrough(source: str, expected: str) -> None:
    assert transpile_statements(source) == expected


def test_empty_source() -> None:
    assert transpile_statements("") == ""


def test_mixed_program_is_balanced() -> None:
    js = _seng(
        """
        class Game
        constructor(canvas)
        this.canvas = canvas
        update(dt)
        when (this.paused)
        return 0
        else
        loop (dt > 0)
        dt = dt - 1

        on button click (e)
        when (e.shiftKey)
        log("shift")
        function start
        call update(1)
        """
    )
    assert _braces_balanced(js)
    assert js.count("});") == 1


def test_compile_statement_file_writes_js(write_source, caplog) -> None:
    source = write_source("app.seng", "function hello\nlog('hi')\n")

    with caplog.at_level(logging.INFO, logger="englang"):
        js = compile_statement_file(source)

    output = source.with_suffix(".js")
    assert output.read_text(encoding="utf-8") == js
    assert js == "function hello() {\nconsole.log('hi');\n}\n"
    assert "Seng compilation successful" in caplog.text


def test_compile_statement_file_raw_logs_passthrough(write_source, caplog) -> None:
    source = write_source("raw.seng", "@raw\nexport const a = 1;\n")

    with caplog.at_level(logging.INFO, logger="englang"):
        js = compile_statement_file(source)

    assert js == "export const a = 1;\n"
    assert "Seng (raw) passthrough" in caplog.text


def test_compile_statement_file_without_emit_writes_nothing(write_source) -> None:
    source = write_source("quiet.seng", "log(1)\n")

    assert compile_statement_file(source, emit=False) == "console.log(1);\n"
    assert not source.with_suffix(".js").exists()


def test_compile_statement_file_missing(tmp_path) -> None:
    with pytest.raises(EngTranspileError, match="Cannot read"):
        compile_statement_file(tmp_path / "missing.seng")


@pytest.mark.parametrize("source", ["log(1)\n}\n", "});\nlog(1)", "when (a)\n}\n}\n"])
def test_closer_without_open_block_is_dropped(source: str) -> None:
    js = transpile_statements(source)

    assert _braces_balanced(js)
    assert "});" not in js


def test_compile_statement_file_undecodable(tmp_path) -> None:
    source = tmp_path / "bad.seng"
    source.write_bytes(b"log(\xff\xfe)\n")

    with pytest.raises(EngTranspileError, match="Cannot read"):
        compile_statement_file(source)

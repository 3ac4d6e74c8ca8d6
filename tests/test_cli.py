import pytest

from pytoylex.cli import main, run
from pytoylex.syntax_tree import NodeType


def test_run_reports_lines_and_tree(tmp_path):
    import io

    script = tmp_path / "prog.py"
    script.write_text("a = 5\nprint(a)\n", encoding="utf-8")
    out = io.StringIO()
    root = run(str(script), out)
    text = out.getvalue()
    assert "-> Line 1: a = 5\n" in text
    assert "-> Line 2: print(a)\n" in text
    assert "Token: a, Type: TOKEN_IDENTIFIER\n" in text
    assert [n.type for n in root.chain()] == [NodeType.ASSIGNMENT, NodeType.PRINT]
    assert text.endswith("Assignment: a = 5\n  Print: a\n")


def test_run_missing_file_raises(tmp_path):
    import io

    with pytest.raises(OSError):
        run(str(tmp_path / "absent.py"), io.StringIO())


def test_main_success(tmp_path, capsys):
    script = tmp_path / "prog.py"
    script.write_text("while a < 10:\n", encoding="utf-8")
    assert main([str(script)]) == 0
    assert "While: a < 10\n" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.py")]) == 1
    assert capsys.readouterr().out == "Error opening file"
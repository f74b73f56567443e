import io

from memdb.__main__ import main
from memdb.display import format_result
from memdb.executor import Executor
from memdb.repl import repl_loop, run_script, split_statements

SCRIPT = """
CREATE TABLE student (id int, name string, age int);
INSERT INTO student (id, name, age) VALUES (1, 'Alice', 20);
INSERT INTO student (id, name) VALUES (2, 'Bob');
INSERT INTO student (id, name, age) VALUES (2, 'Bob; Jr', 21);
SELECT * FROM student
"""


def test_split_statements_ignores_quoted_semicolons():
    assert list(split_statements("a; b 'x;y' ;; c")) == ["a", "b 'x;y'", "c"]
    assert list(split_statements("  ")) == []


def test_format_messages():
    exe = Executor()
    assert format_result(exe.execute("CREATE TABLE t (id int)")) == "Table t created successfully."
    assert format_result(exe.execute("INSERT INTO t (id) VALUES (1)")) == "1 row inserted into t."
    assert format_result(exe.execute("UPDATE t SET id = 2")) == "1 row(s) updated in t."
    assert format_result(exe.execute("DELETE FROM t")) == "1 row(s) deleted from t."
    assert format_result(exe.try_execute("SELECT * FROM nope")) == "Error: Table not found: nope"
    assert format_result(None) == ""


def test_format_select_pads_fields():
    exe = Executor()
    exe.execute("CREATE TABLE t (id int, name string)")
    exe.execute("INSERT INTO t (id, name) VALUES (7, 'Al')")
    out = format_result(exe.execute("SELECT * FROM t"), width=6)
    assert out.splitlines() == [
        "Query result (1 rows):",
        "    id  name",
        "     7    Al",
    ]


def test_run_script_continues_after_errors():
    out = io.StringIO()
    exe = Executor()
    failures = run_script(exe, SCRIPT, out)
    assert failures == 1
    text = out.getvalue()
    assert "Error: Missing column: age" in text
    assert "Query result (2 rows):" in text
    assert "Bob; Jr" in text


def test_main_runs_a_file(tmp_path, capsys):
    script = tmp_path / "demo.sql"
    script.write_text(SCRIPT, encoding="utf-8")
    assert main(["-f", str(script)]) == 1
    assert "Table student created successfully." in capsys.readouterr().out

    good = tmp_path / "good.sql"
    good.write_text("CREATE TABLE t (id int); SELECT * FROM t;", encoding="utf-8")
    assert main(["--file", str(good), "--width", "4"]) == 0


def test_repl_loop_buffers_and_handles_dot_commands(monkeypatch, capsys):
    lines = iter([
        "CREATE TABLE t (id int);",
        ".tables",
        ".schema T",
        "INSERT INTO t (id)",
        "VALUES (1);",
        "",
        "SELECT * FROM t;",
        ".schema nope",
        ".schema",
        ".exit",
        "SELECT * FROM t;",
    ])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    exe = Executor()
    repl_loop(exe, width=4)
    out = capsys.readouterr().out
    assert "Table t created successfully." in out
    assert "Tables: ['t']" in out
    assert "t (id int) -- 0 rows" in out
    assert "1 row inserted into t." in out
    assert "Query result (1 rows):\n  id\n   1\n" in out
    assert "Error: Table not found: nope" in out
    assert "Usage: .schema <table>" in out
    # .exit stops the loop before the last statement is read
    assert next(lines) == "SELECT * FROM t;"


def test_repl_loop_stops_at_end_of_input(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    repl_loop(Executor())
    assert "memdb REPL" in capsys.readouterr().out

# tests/test_driver.py
import json
import io
from scope_context.driver import main, run_script
from scope_context import Context

SCRIPT = """
# escenario básico
insert a 10
push
insert b 20
search a
search b
pop
search b      # ya no existe
search a
depth
"""

def test_main_runs_script(tmp_path, capsys):
    path = tmp_path / "basic.ctx"
    path.write_text(SCRIPT, encoding="utf-8")
    code = main([str(path)])
    out = capsys.readouterr().out.splitlines()
    assert code == 1  # 'search b' tras el pop falla
    assert out == [
        "[OK] insert a = 10",
        "[OK] push -> depth 2",
        "[OK] insert b = 20",
        "[OK] search a -> 10",
        "[OK] search b -> 20",
        "[OK] pop -> depth 1",
        "[ERROR] line 9: search b: Undefined. (UNDEFINED)",
        "[OK] search a -> 10",
        "[OK] depth 1",
    ]

def test_main_all_ok_exit_zero(tmp_path, capsys):
    path = tmp_path / "ok.ctx"
    path.write_text("insert x 1\nhash a\nreset\ndepth\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "[OK] hash a -> 193" in out
    assert out[-1] == "[OK] depth 1"

def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.ctx")]) == 2
    assert "cannot read" in capsys.readouterr().err

def test_main_bad_capacity(tmp_path, capsys):
    path = tmp_path / "s.ctx"
    path.write_text("depth\n", encoding="utf-8")
    assert main(["--capacity", "0", str(path)]) == 2

def test_capacity_option(tmp_path, capsys):
    path = tmp_path / "full.ctx"
    path.write_text("insert a 1\ninsert b 2\ninsert c 3\n", encoding="utf-8")
    assert main(["--capacity", "2", str(path)]) == 1
    out = capsys.readouterr().out
    assert "(MAXIMIZED)" in out

def test_run_script_reports_malformed_lines():
    buf = io.StringIO()
    ctx = Context()
    failures = run_script(ctx, ["frobnicate", "insert a", "insert a ten", "pop", "insert a 1", "insert a 2"], out=buf)
    lines = buf.getvalue().splitlines()
    assert failures == 5
    assert lines[0] == "[ERROR] line 1: unknown command 'frobnicate'"
    assert lines[1] == "[ERROR] line 2: usage: insert KEY VALUE"
    assert lines[2] == "[ERROR] line 3: not an integer: 'ten'"
    assert lines[3] == "[ERROR] line 4: pop -> depth 1: Memory is minimised. (MINIMIZED)"
    assert lines[4] == "[OK] insert a = 1"
    assert lines[5] == "[ERROR] line 6: insert a = 2: Redefined. (REDEFINED)"

def test_dump_is_json():
    buf = io.StringIO()
    ctx = Context(capacity=4)
    run_script(ctx, ["insert a 1", "push", "dump"], out=buf)
    last = buf.getvalue().splitlines()[-1]
    assert last.startswith("[OK] ")
    data = json.loads(last[len("[OK] "):])
    assert data["depth"] == 2
    assert [s["size"] for s in data["scopes"]] == [1, 0]

import pytest
from app.repl import BANNER, main, repl, run_line
from styx.config import Settings


@pytest.fixture
def settings():
    return Settings(prompt="Styx> ", history_file=None)


def feed(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_run_line_result(settings):
    assert run_line("+ 1 2 3 4", settings) == "10.000000"
    assert run_line("/ 5 0", settings) == "Error: Division By Zero!"


def test_run_line_parse_failure(settings):
    out = run_line("+ 1 x", settings)
    assert out.startswith("<stdin>:1:5: error: expected")
    assert "\n" not in out


def test_run_line_ast(settings):
    out = run_line("- 4 1", settings, show_ast=True)
    assert out.splitlines() == ["Program(-)", "  arg[0]: Number(4)", "  arg[1]: Number(1)", "3.000000"]


def test_one_output_line_per_input(settings):
    out = []
    repl(settings, read=feed(["+ 1 2", "(+ 1", "min 4 2 8"]), write=out.append)
    assert out[0] == BANNER
    assert out[1:4] == ["3.000000", run_line("(+ 1", settings), "2.000000"]
    # blank line printed on exit
    assert out[4:] == [""]


def test_ctrl_c_exits(settings):
    def read(prompt):
        raise KeyboardInterrupt
    out = []
    repl(settings, read=read, write=out.append)
    assert out == [BANNER, ""]


def test_main_expr(capsys):
    assert main(["-e", "* (+ 1 2) (- 10 4)"]) == 0
    assert capsys.readouterr().out == "18.000000\n"


def test_main_file(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("+ 1 2\n/ 1 0\n", encoding="utf-8")
    assert main(["-f", str(src)]) == 1
    assert capsys.readouterr().out == "3.000000\nError: Division By Zero!\n"


def test_main_file_csv(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("+ 1 2\n", encoding="utf-8")
    dst = tmp_path / "out.csv"
    assert main(["-f", str(src), "--csv", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8").splitlines()[0] == "input,ok,value,error,output"

import numpy as np
import pandas as pd
import pytest
from engine.batch import COLUMNS, evaluate_file, evaluate_lines
from scripts.gen_expressions import make_programs
from styx.config import Settings
from styx.eval import evaluate
from styx.parser import parse_program
from styx.values import render


@pytest.fixture(scope="session")
def programs():
    return make_programs(seed=7, n=300)


def test_generated_programs_parse(programs):
    for src in programs:
        parse_program(src)


def test_batch_matches_single_line(programs):
    df = evaluate_lines(programs)
    assert list(df.columns) == COLUMNS
    assert len(df) == len(programs)
    for src, row in zip(programs, df.itertuples(index=False)):
        v = evaluate(parse_program(src))
        assert row.output == render(v)
        assert row.ok == (not v.is_error)
        if v.is_error:
            assert row.error == v.err.name
            assert np.isnan(row.value)
        else:
            assert row.error is None
            assert (np.isnan(row.value) and np.isnan(v.num)) or row.value == v.num


def test_batch_rows():
    df = evaluate_lines(["+ 1 2", "", "(+ 1", "/ 1 0", "   ", "max 1 7 3\n"])
    assert df["input"].tolist() == ["+ 1 2", "(+ 1", "/ 1 0", "max 1 7 3"]
    assert df["ok"].tolist() == [True, False, False, True]
    assert df["error"].tolist() == [None, "ParseFailure", "DIV_ZERO", None]
    assert df.loc[0, "value"] == 3.0
    assert df.loc[3, "output"] == "7.000000"
    assert df.loc[1, "output"].startswith("<stdin>:1:1: error:")


def test_batch_uses_settings_format():
    df = evaluate_lines(["/ 1 4"], Settings(float_format="%g"))
    assert df["output"].tolist() == ["0.25"]


def test_evaluate_file(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("+ 1 2\n* 2 (+ 3 4)\n", encoding="utf-8")
    df = evaluate_file(str(path))
    assert isinstance(df, pd.DataFrame)
    assert df["value"].tolist() == [3.0, 14.0]

import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from styx.config import Settings, get_settings
from styx.eval import EvaluationContext, eval_node
from styx.parser import ParseFailure, parse_program
from styx.values import render

logger = logging.getLogger("styx.batch")

COLUMNS = ["input", "ok", "value", "error", "output"]


def evaluate_lines(lines: Iterable[str], settings: Optional[Settings] = None) -> pd.DataFrame:
    """
    Evaluate each non-blank line independently, one row per line.
    `output` holds exactly what the REPL would print for that line.
    """
    settings = settings or get_settings()
    ctx = EvaluationContext(settings.max_depth)
    rows = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            ast = parse_program(line)
        except ParseFailure as e:
            rows.append((line, False, np.nan, "ParseFailure", str(e)))
            continue
        v = eval_node(ctx, ast)
        rows.append((
            line,
            not v.is_error,
            np.nan if v.is_error else v.num,
            v.err.name if v.is_error else None,
            render(v, settings.float_format),
        ))
    df = pd.DataFrame(rows, columns=COLUMNS)
    logger.debug("evaluated %d lines, %d failed", len(df), int((~df["ok"]).sum()) if len(df) else 0)
    return df


def evaluate_file(path: str, settings: Optional[Settings] = None) -> pd.DataFrame:
    with open(path, "r", encoding="utf-8") as f:
        return evaluate_lines(f, settings)

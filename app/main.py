import logging
from typing import List

import numpy as np

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from engine.batch import evaluate_lines
from styx import __version__
from styx.analyzer import analyze
from styx.ast_utils import ast_to_dict, ast_to_pretty
from styx.config import get_settings
from styx.eval import EvaluationContext, eval_node
from styx.parser import ParseFailure, parse_program
from styx.registry import list_operators
from styx.values import render

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("styx.api")

app = FastAPI(title="Styx calculator", version=__version__)


class ExprBody(BaseModel):
    expr: str


class BatchBody(BaseModel):
    lines: List[str]


def _parse_or_400(src: str):
    try:
        return parse_program(src)
    except ParseFailure as e:
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "column": e.column, "expected": e.expected},
        )


@app.get("/operators")
def operators():
    return {"operators": list_operators()}


@app.post("/parse")
def parse(body: ExprBody):
    ast = _parse_or_400(body.expr)
    meta = analyze(ast)
    return {
        "ok": True,
        "operators": sorted(meta.operators),
        "numbers": meta.numbers,
        "depth": meta.depth,
    }


@app.post("/evaluate")
def evaluate(body: ExprBody):
    ast = _parse_or_400(body.expr)
    v = eval_node(EvaluationContext(settings.max_depth), ast)
    if v.is_error:
        logger.info("evaluation of %r failed: %s", body.expr, v.err.name)
    return {
        "result": render(v, settings.float_format),
        "value": None if v.is_error or not np.isfinite(v.num) else v.num,
        "error": v.err.name if v.is_error else None,
    }


@app.post("/evaluate_batch")
def evaluate_batch(body: BatchBody):
    df = evaluate_lines(body.lines, settings)
    # NaN and inf are not valid JSON
    finite = df["ok"].astype(bool) & np.isfinite(df["value"].astype(float))
    df["value"] = df["value"].astype(object).where(finite, None)
    return {"rows": df.to_dict(orient="records")}


@app.post("/ast")
def ast_view(body: ExprBody):
    ast = _parse_or_400(body.expr)
    if ast.depth > settings.max_depth:
        raise HTTPException(status_code=400, detail=f"expression nests deeper than {settings.max_depth}")
    return {
        "ok": True,
        "pretty": ast_to_pretty(ast),
        "tree": ast_to_dict(ast),
    }

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine
from ...db.session import get_engine
from ...schemas.query import (
    ChartRequest, ChartResult, ExplainRequest, GeneratedSQL, NLQuery, NLResult,
    QueryExplanations, RunResult, SQLRun,
)
from ...services import executor, guard
from ...services.charts import generate_chart_config
from ...services.errors import PipelineError
from ...services.explain import explain_query
from ...services.nl2sql import CandidateQuery, build_sql_from_question
from ...services.provider import LLMClient, get_llm
from ..errors import to_http

router = APIRouter()

@router.post("/query/generate", response_model=GeneratedSQL)
def generate(body: NLQuery, llm: LLMClient = Depends(get_llm)):
    try:
        candidate = build_sql_from_question(llm, body.question)
    except PipelineError as e:
        raise to_http(e)
    return GeneratedSQL(sql=candidate.sql, source=candidate.source)

@router.post("/query/run", response_model=RunResult)
def run(body: SQLRun, engine: Engine = Depends(get_engine)):
    try:
        query = guard.validate(CandidateQuery(body.sql))
        return executor.execute(engine, query)
    except PipelineError as e:
        raise to_http(e)

@router.post("/query/explain", response_model=QueryExplanations)
def explain(body: ExplainRequest, llm: LLMClient = Depends(get_llm)):
    try:
        return QueryExplanations(explanations=explain_query(llm, body.question, body.sql))
    except PipelineError as e:
        raise to_http(e)

@router.post("/chart", response_model=ChartResult)
def chart(body: ChartRequest, llm: LLMClient = Depends(get_llm)):
    try:
        return ChartResult(config=generate_chart_config(llm, body.rows, body.question))
    except PipelineError as e:
        raise to_http(e)

@router.post("/ask", response_model=NLResult)
def ask(body: NLQuery, llm: LLMClient = Depends(get_llm), engine: Engine = Depends(get_engine)):
    try:
        candidate = build_sql_from_question(llm, body.question)
        result = executor.execute(engine, guard.validate(candidate))
        config = generate_chart_config(llm, result.rows, body.question)
    except PipelineError as e:
        raise to_http(e)
    return NLResult(sql=candidate.sql, source=candidate.source, rows=result.rows, csv=result.csv, config=config)

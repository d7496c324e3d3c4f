from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from markup_census.aggregate import analyze_directory
from markup_census.errors import AnalysisError
from markup_census.model import AnalysisResult, AnalyzerOptions


app = FastAPI(title="Markup Census")


class AnalyzeRequest(BaseModel):
	root_path: str
	options: AnalyzerOptions = AnalyzerOptions()


@app.post("/analyze", response_model=AnalysisResult)
def analyze(req: AnalyzeRequest) -> AnalysisResult:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")
	try:
		return analyze_directory(root, req.options)
	except AnalysisError as e:
		raise HTTPException(status_code=422, detail=str(e)) from e


def create_app() -> FastAPI:
	return app

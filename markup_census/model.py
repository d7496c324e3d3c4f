from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field


class FunctionKind(str, Enum):
	DECLARATION = "declaration"
	EXPRESSION = "expression"
	ARROW_BLOCK = "arrow_block"
	ARROW_EXPRESSION = "arrow_expression"


class MarkupKind(str, Enum):
	ELEMENT = "element"
	SELF_CLOSING = "self_closing"
	FRAGMENT = "fragment"


class Classification(str, Enum):
	MARKUP = "markup"
	PLAIN = "plain"


class AnalyzerOptions(BaseModel):
	extensions: List[str] = [".ts", ".tsx"]
	exclude_dirs: List[str] = ["node_modules", "dist"]
	# Count only the outermost function-like nodes of each file.
	top_level_only: bool = False
	# Stricter classifier: markup inside a nested function no longer marks the enclosing one.
	exclude_nested_markup: bool = False
	# Treat any tree-sitter ERROR or MISSING node as a fatal ParseError.
	strict_syntax: bool = False
	skip_invalid: bool = False
	jobs: int = Field(default=1, ge=1)


class FileInfo(BaseModel):
	path: str
	rel_path: str
	language: str


class FunctionFacts(BaseModel):
	name: Optional[str] = None
	kind: FunctionKind
	line: int
	column: int
	classification: Classification
	returns_markup_directly: bool = False


class FileFacts(BaseModel):
	path: str
	rel_path: str
	language: str
	functions: List[FunctionFacts] = []
	error: Optional[str] = None


class AnalysisReport(BaseModel):
	root: str = ""
	files_analyzed: int = 0
	markup_producing_count: int = 0
	plain_count: int = 0
	skipped_files: List[str] = []

	@computed_field  # type: ignore[misc]
	@property
	def total_functions(self) -> int:
		return self.markup_producing_count + self.plain_count

	def record(self, classification: Classification) -> None:
		if classification is Classification.MARKUP:
			self.markup_producing_count += 1
		else:
			self.plain_count += 1

	def add_file(self, facts: FileFacts) -> None:
		if facts.error is not None:
			self.skipped_files.append(facts.rel_path)
			return
		self.files_analyzed += 1
		for fn in facts.functions:
			self.record(fn.classification)

	def merge(self, other: AnalysisReport) -> AnalysisReport:
		return AnalysisReport(
			root=self.root or other.root,
			files_analyzed=self.files_analyzed + other.files_analyzed,
			markup_producing_count=self.markup_producing_count + other.markup_producing_count,
			plain_count=self.plain_count + other.plain_count,
			skipped_files=self.skipped_files + other.skipped_files,
		)


class AnalysisResult(BaseModel):
	report: AnalysisReport
	files: List[FileFacts] = []

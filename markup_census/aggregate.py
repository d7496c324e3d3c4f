from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, List, Optional, Tuple

from .classify import classify, returns_markup_directly
from .errors import AnalysisError, PathError
from .fs_scan import scan_repository
from .functions import iter_functions
from .model import AnalysisReport, AnalysisResult, AnalyzerOptions, FileFacts, FileInfo, FunctionFacts
from .syntax import char_column, parse_source


logger = logging.getLogger(__name__)


def analyze_source(text: str, path: str, language: str, options: Optional[AnalyzerOptions] = None, rel_path: Optional[str] = None) -> FileFacts:
	options = options or AnalyzerOptions()
	tree = parse_source(text, path, language, strict=options.strict_syntax)
	source = text.encode("utf-8")
	functions: List[FunctionFacts] = []
	for fn in iter_functions(tree, top_level_only=options.top_level_only):
		functions.append(
			FunctionFacts(
				name=fn.name,
				kind=fn.kind,
				line=fn.line,
				column=char_column(source, fn.node),
				classification=classify(fn, options.exclude_nested_markup),
				returns_markup_directly=returns_markup_directly(fn),
			)
		)
	logger.debug("%s: %d functions", path, len(functions))
	return FileFacts(path=path, rel_path=rel_path or path, language=language, functions=functions)


def analyze_file(info: FileInfo, options: Optional[AnalyzerOptions] = None) -> FileFacts:
	try:
		with open(info.path, "r", encoding="utf-8-sig") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise AnalysisError(info.path, str(e)) from e
	return analyze_source(text, info.path, info.language, options, rel_path=info.rel_path)


def _analyze_or_skip(info: FileInfo, options: AnalyzerOptions) -> FileFacts:
	try:
		return analyze_file(info, options)
	except AnalysisError as e:
		if not options.skip_invalid:
			raise
		logger.warning("Skipping %s: %s", info.rel_path, e.reason)
		return FileFacts(path=info.path, rel_path=info.rel_path, language=info.language, error=e.reason)


def iter_file_facts(files: List[FileInfo], options: AnalyzerOptions) -> Iterator[FileFacts]:
	"""Analyze files in input order, fanning out to worker threads when jobs > 1.

	Workers only build FileFacts; folding them into a report is left to the
	consumer, so no counter is ever shared between threads.
	"""
	if options.jobs <= 1 or len(files) <= 1:
		for info in files:
			yield _analyze_or_skip(info, options)
		return
	pool = ThreadPoolExecutor(max_workers=options.jobs)
	try:
		yield from pool.map(lambda info: _analyze_or_skip(info, options), files)
	finally:
		# Files not yet started are dropped when a fatal error ends the run early.
		pool.shutdown(wait=True, cancel_futures=True)


def analyze_paths(
	files: List[FileInfo],
	options: Optional[AnalyzerOptions] = None,
	root: str = "",
	on_file: Optional[Callable[[FileFacts], None]] = None,
) -> Tuple[AnalysisReport, List[FileFacts]]:
	options = options or AnalyzerOptions()
	report = AnalysisReport(root=root)
	results: List[FileFacts] = []
	for facts in iter_file_facts(files, options):
		if on_file is not None:
			on_file(facts)
		report.add_file(facts)
		results.append(facts)
	return report, results


def analyze_directory(root: str, options: Optional[AnalyzerOptions] = None) -> AnalysisResult:
	root = os.path.abspath(root)
	if not os.path.isdir(root):
		raise PathError(root)
	options = options or AnalyzerOptions()
	files = scan_repository(root, options)
	report, results = analyze_paths(files, options, root=root)
	return AnalysisResult(report=report, files=results)

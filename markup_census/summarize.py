from __future__ import annotations

from typing import List

from .model import AnalysisReport, Classification, FileFacts


def summarize_file(f: FileFacts) -> str:
	parts: List[str] = []
	for fn in f.functions:
		label = "JSX" if fn.classification is Classification.MARKUP else "normal"
		parts.append(
			f"{f.rel_path}:{fn.line}:{fn.column} {fn.name or '[Anonymous]'} ({fn.kind.value}) -> {label}"
		)
	return "\n".join(parts)


def summarize_report(report: AnalysisReport) -> str:
	parts: List[str] = [
		"--- Analysis Complete ---",
		f"Total Files Analyzed: {report.files_analyzed}",
		f"Functions returning JSX (heuristic): {report.markup_producing_count}",
		f"Other functions: {report.plain_count}",
		f"Total functions found: {report.total_functions}",
	]
	if report.skipped_files:
		parts.append(f"Skipped files: {len(report.skipped_files)}")
	return "\n".join(parts)

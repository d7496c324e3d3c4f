from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from markup_census.aggregate import analyze_paths
from markup_census.errors import CensusError, PathError, UsageError
from markup_census.fs_scan import scan_repository
from markup_census.model import AnalysisResult, AnalyzerOptions, FileFacts
from markup_census.summarize import summarize_file, summarize_report


logger = logging.getLogger("markup_census.cli")

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
USAGE = "Usage: markup-census <path-to-folder>"


class ArgumentParser(argparse.ArgumentParser):
	"""argparse exits with status 2 on bad input; the census reports usage errors as 1."""

	def error(self, message: str) -> None:  # type: ignore[override]
		raise UsageError(message)


def _configure_logging(level_name: str) -> None:
	logging.basicConfig(
		level=getattr(logging, level_name.upper(), logging.WARNING),
		format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
		stream=sys.stderr,
	)


def build_parser() -> ArgumentParser:
	parser = ArgumentParser(prog="markup-census", description="Count functions that return JSX markup")
	parser.add_argument("path", nargs="?", help="Path to the folder to analyze")
	parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
	parser.add_argument("--list", action="store_true", help="Print one line per function found")
	parser.add_argument("--top-level-only", action="store_true", help="Do not count functions nested in other functions")
	parser.add_argument(
		"--exclude-nested-markup",
		action="store_true",
		help="Stricter classifier: ignore markup that only appears inside nested functions",
	)
	parser.add_argument("--strict-syntax", action="store_true", help="Abort on any syntax error instead of analyzing the recovered tree")
	parser.add_argument("--skip-invalid", action="store_true", help="Skip files that fail to load or parse instead of aborting")
	parser.add_argument("--jobs", type=int, default=1, help="Number of files analyzed in parallel")
	parser.add_argument("--exclude", action="append", default=[], metavar="DIR", help="Extra directory name to skip")
	parser.add_argument("--log-level", choices=LOG_LEVELS, default="warning")
	return parser


def build_options(args: argparse.Namespace) -> AnalyzerOptions:
	defaults = AnalyzerOptions()
	try:
		return AnalyzerOptions(
			exclude_dirs=defaults.exclude_dirs + list(args.exclude),
			top_level_only=args.top_level_only,
			exclude_nested_markup=args.exclude_nested_markup,
			strict_syntax=args.strict_syntax,
			skip_invalid=args.skip_invalid,
			jobs=args.jobs,
		)
	except ValidationError as e:
		raise UsageError(str(e)) from e


def cmd_analyze(root: str, options: AnalyzerOptions, as_json: bool = False, listing: bool = False) -> None:
	files = scan_repository(root, options)

	def on_file(facts: FileFacts) -> None:
		if not as_json:
			print(f"Processing file: {facts.path}")

	if not as_json:
		print(f"Analyzing {len(files)} files in {root}...")
	report, results = analyze_paths(files, options, root=root, on_file=on_file)

	if as_json:
		print(json.dumps(AnalysisResult(report=report, files=results).model_dump(mode="json"), indent=2))
		return
	if listing:
		for facts in results:
			if facts.functions:
				print(summarize_file(facts))
	print()
	print(summarize_report(report))


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	try:
		args = parser.parse_args(argv)
		if not args.path:
			raise UsageError("Please provide the target folder path as a command-line argument.")
		options = build_options(args)
	except UsageError as e:
		print(f"Error: {e}", file=sys.stderr)
		print(USAGE, file=sys.stderr)
		return 1

	_configure_logging(args.log_level)
	root = os.path.abspath(args.path)
	if not os.path.isdir(root):
		print(f"Error: {PathError(root)}", file=sys.stderr)
		return 1

	try:
		cmd_analyze(root, options, as_json=args.json, listing=args.list)
	except CensusError as e:
		print(f"An error occurred during analysis: {e}", file=sys.stderr)
		return 1
	except Exception as e:
		logger.debug("Analysis failed", exc_info=True)
		print(f"An error occurred during analysis: {e}", file=sys.stderr)
		return 1
	return 0


def serve_main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="markup-census-serve")
	parser.add_argument("--host", default="127.0.0.1")
	parser.add_argument("--port", type=int, default=8000)
	parser.add_argument("--reload", action="store_true")
	args = parser.parse_args(argv)
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
	sys.exit(main())

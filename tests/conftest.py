from pathlib import Path
from textwrap import dedent

import pytest

from markup_census.functions import iter_functions
from markup_census.syntax import parse_source


@pytest.fixture
def functions_of():
	"""Parse a snippet and return its function-like nodes in enumeration order."""

	def _functions_of(code: str, language: str = "tsx", top_level_only: bool = False):
		tree = parse_source(dedent(code), f"snippet.{'tsx' if language == 'tsx' else 'ts'}", language)
		return list(iter_functions(tree, top_level_only=top_level_only))

	return _functions_of


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
	"""
	A small source tree: 3 analyzable files with 4 markup and 3 plain functions,
	plus a node_modules copy that must be ignored.
	"""
	files = {
		"src/App.tsx": """
			import React from "react";

			export function App() {
				return <div className="app">hello</div>;
			}

			export const Header = () => <h1>title</h1>;

			function helper(a: number, b: number) {
				return a + b;
			}
			""",
		"src/util.ts": """
			export function add(a: number, b: number): number {
				return a + b;
			}

			export const twice = (n: number) => n * 2;
			""",
		"src/nested.tsx": """
			function outer() {
				function inner() {
					return <p/>;
				}
				return 0;
			}
			""",
		"node_modules/pkg/index.tsx": """
			export const Ignored = () => <div/>;
			""",
	}
	root = tmp_path / "project"
	for rel, code in files.items():
		path = root / rel
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(dedent(code).lstrip(), encoding="utf-8")
	return root

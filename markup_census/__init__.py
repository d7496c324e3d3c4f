"""Census of markup-producing functions in TypeScript/TSX codebases.

Modules:
- fs_scan.py: Filesystem scanning and language detection.
- syntax.py: tree-sitter parsing plus node-kind predicates and accessors.
- walk.py: Depth-first visitor with explicit descend/prune control.
- functions.py: Enumeration of function-like nodes.
- classify.py: Heuristic markup classification of one function.
- aggregate.py: Per-file analysis and corpus-wide counting.
- model.py: Data structures for options, facts and the report.
- summarize.py: Textual report rendering.
"""

__all__ = [
	"fs_scan",
	"syntax",
	"walk",
	"functions",
	"classify",
	"aggregate",
	"model",
	"summarize",
	"errors",
]

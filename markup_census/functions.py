from __future__ import annotations

from typing import Iterator

from tree_sitter import Node, Tree

from .syntax import FunctionNode, function_node, is_function
from .walk import Visit, traverse


def iter_functions(tree: Tree, top_level_only: bool = False) -> Iterator[FunctionNode]:
	"""Yield every function-like node of a file in source (pre-)order.

	Nested functions are their own units and are yielded after the function
	that encloses them, unless top_level_only prunes the walk at each match.
	Class methods are not function-like, but functions inside them are.
	"""
	on_match = Visit.MATCH_PRUNE if top_level_only else Visit.MATCH

	def visit(node: Node) -> Visit:
		return on_match if is_function(node) else Visit.CONTINUE

	for node in traverse(tree.root_node, visit):
		yield function_node(node)

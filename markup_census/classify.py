"""Heuristic markup classifier for a single function-like node.

Two structural checks are OR-ed together:

1. Subtree presence: any JSX element, self-closing element or fragment
   anywhere under the body (the body node included) marks the function.
   Whether that markup sits on a return path is not checked, so markup passed
   as a plain argument counts, and so does markup inside a nested function's
   body. That over-approximation is the default. The stricter
   ``exclude_nested_markup`` mode stops the scan at nested function-like
   nodes and is a different contract.

2. Direct return: a top-level ``return <markup>`` statement, or an arrow
   whose expression body is markup. Anything it finds, check 1 has already
   found; it stays as the explicit statement of the intended signal and is
   reported on its own as ``returns_markup_directly``.
"""

from __future__ import annotations

from .model import Classification, FunctionKind
from .syntax import FunctionNode, is_function, is_markup, is_return_statement, return_expression
from .walk import Visit, traverse


def contains_markup(fn: FunctionNode, exclude_nested: bool = False) -> bool:
	if fn.body is None:
		return False
	body_id = fn.body.id

	def visit(node):
		if is_markup(node):
			return Visit.MATCH
		if exclude_nested and node.id != body_id and is_function(node):
			return Visit.PRUNE
		return Visit.CONTINUE

	return next(traverse(fn.body, visit), None) is not None


def returns_markup_directly(fn: FunctionNode) -> bool:
	if fn.body is None:
		return False
	if fn.kind is FunctionKind.ARROW_EXPRESSION:
		return is_markup(fn.body)
	for statement in fn.body_statements():
		if is_return_statement(statement):
			expression = return_expression(statement)
			if expression is not None and is_markup(expression):
				return True
	return False


def classify(fn: FunctionNode, exclude_nested_markup: bool = False) -> Classification:
	if contains_markup(fn, exclude_nested_markup) or returns_markup_directly(fn):
		return Classification.MARKUP
	return Classification.PLAIN

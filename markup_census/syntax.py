from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser, Tree

from .errors import ParseError
from .model import FunctionKind, MarkupKind
from .walk import Visit, traverse


logger = logging.getLogger(__name__)


# tree-sitter node type -> function kind; arrow functions are split by body shape.
FUNCTION_NODE_TYPES: Dict[str, Optional[FunctionKind]] = {
	"function_declaration": FunctionKind.DECLARATION,
	"generator_function_declaration": FunctionKind.DECLARATION,
	"function_signature": FunctionKind.DECLARATION,
	"function_expression": FunctionKind.EXPRESSION,
	"function": FunctionKind.EXPRESSION,
	"generator_function": FunctionKind.EXPRESSION,
	"arrow_function": None,
}

# Parent node type -> (field holding the name, field holding the function).
NAMING_PARENTS: Dict[str, Tuple[str, str]] = {
	"variable_declarator": ("name", "value"),
	"pair": ("key", "value"),
	"assignment_expression": ("left", "right"),
	"public_field_definition": ("name", "value"),
}


@lru_cache(maxsize=None)
def get_language(language: str) -> Language:
	if language == "tsx":
		return Language(tstypescript.language_tsx())
	if language == "typescript":
		return Language(tstypescript.language_typescript())
	raise ValueError(f"Unsupported language: {language}")


def parse_source(text: str, path: str, language: str, strict: bool = False) -> Tree:
	"""Parse one file into a tree-sitter tree.

	Syntax errors are logged and the recovered tree is returned, since the
	grammar rejects some valid TypeScript (`export type *`, variance
	annotations). With strict, any ERROR or MISSING node raises ParseError.

	Builds a new Parser per call, so worker threads share only the cached,
	immutable Language objects.
	"""
	parser = Parser(get_language(language))
	source = text.encode("utf-8")
	tree = parser.parse(source)
	if tree.root_node.has_error:
		bad = first_error(tree.root_node)
		line = column = None
		if bad is not None:
			line, column = bad.start_point[0] + 1, char_column(source, bad)
		if strict:
			raise ParseError(path, line, column)
		logger.warning("%s: syntax error at line %s, column %s; analyzing the recovered tree", path, line, column)
	return tree


def first_error(root: Node) -> Optional[Node]:
	def visit(node: Node) -> Visit:
		if node.type == "ERROR" or node.is_missing:
			return Visit.MATCH_PRUNE
		return Visit.CONTINUE if node.has_error else Visit.PRUNE

	return next(traverse(root, visit), None)


def node_text(node: Node) -> str:
	return node.text.decode("utf-8") if node.text is not None else ""


def is_function(node: Node) -> bool:
	# The bare "function" keyword token shares its type with old-style function expressions.
	return node.is_named and node.type in FUNCTION_NODE_TYPES


def markup_kind(node: Node) -> Optional[MarkupKind]:
	if node.type == "jsx_self_closing_element":
		return MarkupKind.SELF_CLOSING
	if node.type == "jsx_element":
		opening = node.child_by_field_name("open_tag")
		if opening is None and node.named_children:
			opening = node.named_children[0]
		if opening is not None and opening.child_by_field_name("name") is None:
			return MarkupKind.FRAGMENT
		return MarkupKind.ELEMENT
	return None


def is_markup(node: Node) -> bool:
	return markup_kind(node) is not None


def is_return_statement(node: Node) -> bool:
	return node.type == "return_statement"


def statements(block: Node) -> List[Node]:
	return [child for child in block.named_children if child.type != "comment"]


def return_expression(statement: Node) -> Optional[Node]:
	for child in statement.named_children:
		if child.type != "comment":
			return child
	return None


@dataclass(frozen=True)
class FunctionNode:
	kind: FunctionKind
	node: Node
	body: Optional[Node]
	name: Optional[str] = None

	@property
	def node_id(self) -> int:
		return self.node.id

	@property
	def line(self) -> int:
		return self.node.start_point[0] + 1

	def body_statements(self) -> List[Node]:
		"""Top-level statements of a block body; expression bodies have none."""
		if self.body is None or self.kind is FunctionKind.ARROW_EXPRESSION:
			return []
		return statements(self.body)


def function_node(node: Node) -> FunctionNode:
	if not is_function(node):
		raise ValueError(f"Not a function-like node: {node.type}")
	body = node.child_by_field_name("body")
	kind = FUNCTION_NODE_TYPES[node.type]
	if kind is None:
		if body is not None and body.type == "statement_block":
			kind = FunctionKind.ARROW_BLOCK
		else:
			kind = FunctionKind.ARROW_EXPRESSION
	return FunctionNode(kind=kind, node=node, body=body, name=function_name(node))


def function_name(node: Node) -> Optional[str]:
	name = node.child_by_field_name("name")
	if name is None and node.parent is not None and node.parent.type in NAMING_PARENTS:
		name_field, value_field = NAMING_PARENTS[node.parent.type]
		value = node.parent.child_by_field_name(value_field)
		if value is not None and value.id == node.id:
			name = node.parent.child_by_field_name(name_field)
	return node_text(name) if name is not None else None


def char_column(source: bytes, node: Node) -> int:
	"""1-based character column of node; tree-sitter points count bytes."""
	line_start = node.start_byte - node.start_point[1]
	return len(source[line_start:node.start_byte].decode("utf-8", errors="replace")) + 1

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, List

from tree_sitter import Node


class Visit(Enum):
	"""What a visitor wants done with the node it was just shown.

	The first flag says whether the node is yielded, the second whether the
	traversal descends into its children.
	"""

	CONTINUE = (False, True)
	MATCH = (True, True)
	MATCH_PRUNE = (True, False)
	PRUNE = (False, False)

	@property
	def matched(self) -> bool:
		return self.value[0]

	@property
	def descend(self) -> bool:
		return self.value[1]


Visitor = Callable[[Node], Visit]


def traverse(root: Node, visitor: Visitor) -> Iterator[Node]:
	"""Depth-first pre-order walk yielding the nodes the visitor matches.

	Iterative so that deeply nested expressions cannot hit the recursion limit.
	Lazy: stop consuming the iterator to stop the walk.
	"""
	stack: List[Node] = [root]
	while stack:
		node = stack.pop()
		step = visitor(node)
		if step.matched:
			yield node
		if step.descend:
			stack.extend(reversed(node.children))

"""Parse and evaluate expressions of single digits, '+', '*' and parentheses."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

_DIGITS = "0123456789"


class NodeType(Enum):
    ADD = auto()
    MULTI = auto()
    VAL = auto()


@dataclass(frozen=True)
class Node:
    """One node of an expression tree; operators have both children."""

    type: NodeType
    value: int = 0
    left: Optional[Node] = None
    right: Optional[Node] = None


class ParseError(ValueError):
    """The expression is malformed; ``token`` is None at end of input."""

    def __init__(self, token: Optional[str]) -> None:
        self.token = token
        if token is None:
            message = "Unexpected end of input"
        else:
            message = f"Unexpected token '{token}'"
        super().__init__(message)


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def accept(self, c: str) -> bool:
        if self.peek() == c:
            self._pos += 1
            return True
        return False

    def unexpected(self) -> ParseError:
        return ParseError(self.peek() or None)

    def parse_add(self) -> Node:
        left = self.parse_multi()
        while self.accept("+"):
            left = Node(NodeType.ADD, left=left, right=self.parse_multi())
        return left

    def parse_multi(self) -> Node:
        left = self.parse_val()
        while self.accept("*"):
            left = Node(NodeType.MULTI, left=left, right=self.parse_val())
        return left

    def parse_val(self) -> Node:
        if self.accept("("):
            node = self.parse_add()
            if not self.accept(")"):
                raise self.unexpected()
            return node
        c = self.peek()
        if c and c in _DIGITS:
            self._pos += 1
            return Node(NodeType.VAL, value=int(c))
        raise self.unexpected()


def parse_expr(text: str) -> Node:
    """Build the tree for ``text``; '*' binds tighter and both operators group left."""
    parser = _Parser(text)
    tree = parser.parse_add()
    if parser.peek():
        raise parser.unexpected()
    return tree


def eval_tree(tree: Node) -> int:
    """Compute the value of an expression tree."""
    match tree.type:
        case NodeType.ADD:
            return eval_tree(tree.left) + eval_tree(tree.right)
        case NodeType.MULTI:
            return eval_tree(tree.left) * eval_tree(tree.right)
        case NodeType.VAL:
            return tree.value
    raise ValueError(f"unknown node type {tree.type!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate the single argument and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        tree = parse_expr(args[0])
    except ParseError as exc:
        print(exc)
        return 1
    print(eval_tree(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())
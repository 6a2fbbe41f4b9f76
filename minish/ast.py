"""Syntax tree produced by the parser and walked by the executor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from .tokens import REDIRECTIONS, TokenType


class NodeType(Enum):
    """Kinds of nodes in a command syntax tree."""

    SEQUENCE = auto()
    PIPE = auto()
    AND = auto()
    OR = auto()
    GROUP = auto()
    COMMAND = auto()


BINARY_NODE_TYPES = frozenset(
    {NodeType.SEQUENCE, NodeType.PIPE, NodeType.AND, NodeType.OR}
)


@dataclass
class Redirect:
    """One redirection: its kind, its target (or delimiter) and quoting."""

    filename: str
    type: TokenType
    quoted: bool = False

    def __post_init__(self) -> None:
        if self.type not in REDIRECTIONS:
            raise ValueError(f"not a redirection type: {self.type}")


@dataclass
class Command:
    """A simple command: its name, full argument list and attached parts.

    ``args`` holds the command name as its first element, as handed to the
    program that is run; ``name`` is None when the line has no command word.
    """

    name: str | None = None
    args: list[str] = field(default_factory=list)
    temp_assignments: list[str] = field(default_factory=list)
    perm_assignments: list[str] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)


@dataclass
class AstNode:
    """A node of the syntax tree.

    Command nodes carry ``cmd``; binary nodes carry ``left`` and ``right``;
    group nodes carry ``subtree`` and their own ``group_redirects``.
    """

    type: NodeType
    cmd: Command | None = None
    left: AstNode | None = None
    right: AstNode | None = None
    group_redirects: list[Redirect] = field(default_factory=list)
    subtree: AstNode | None = None

    @classmethod
    def command(cls, command: Command) -> AstNode:
        """Build a leaf node that runs ``command``."""
        return cls(NodeType.COMMAND, cmd=command)

    @classmethod
    def binary(cls, node_type: NodeType, left: AstNode, right: AstNode) -> AstNode:
        """Build a sequence, pipe, and or or node joining two subtrees."""
        if node_type not in BINARY_NODE_TYPES:
            raise ValueError(f"not a binary node type: {node_type}")
        return cls(node_type, left=left, right=right)

    @classmethod
    def group(
        cls, subtree: AstNode, redirects: Iterable[Redirect] = ()
    ) -> AstNode:
        """Build a parenthesised group around ``subtree``."""
        return cls(NodeType.GROUP, subtree=subtree, group_redirects=list(redirects))
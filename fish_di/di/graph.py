"""
Static inspection of recorded dependency graphs.

Walks the metadata store from a class without constructing anything, so a
wiring problem (such as a cycle) can be seen before the first resolve.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..constants import TREE_INDENT
from .metadata import DependencyMetadataStore, default_metadata_store
from .tokens import is_class_token, token_name


@dataclass
class DependencyNode:
    """
    One token in a dependency tree.

    Attributes:
        token: The token this node stands for
        children: Nodes for the token's dependencies, in constructor order
        cyclic: True if the token already appears on the path from the root;
                such nodes are not expanded further
    """

    token: Any
    children: list["DependencyNode"] = field(default_factory=list)
    cyclic: bool = False

    @property
    def name(self) -> str:
        return token_name(self.token)

    def has_cycle(self) -> bool:
        """Whether this node or any descendant closes a cycle."""
        return self.cyclic or any(child.has_cycle() for child in self.children)


def build_dependency_tree(
    target: Any, store: Optional[DependencyMetadataStore] = None
) -> DependencyNode:
    """
    Build the dependency tree rooted at target.

    Args:
        target: Root token, usually a class
        store: Metadata store to read (defaults to the process-wide one)

    Returns:
        The root DependencyNode
    """
    source = store if store is not None else default_metadata_store

    def visit(token: Any, path: tuple[Any, ...]) -> DependencyNode:
        if token in path:
            return DependencyNode(token, cyclic=True)
        node = DependencyNode(token)
        if is_class_token(token):
            node.children = [visit(dep, path + (token,)) for dep in source.lookup(token)]
        return node

    return visit(target, ())


def render_tree(node: DependencyNode, depth: int = 0) -> str:
    """Render a dependency tree as indented text, one token per line."""
    line = f"{TREE_INDENT * depth}{node.name}"
    if node.cyclic:
        line += " (cycle)"
    lines = [line]
    lines.extend(render_tree(child, depth + 1) for child in node.children)
    return "\n".join(lines)


__all__ = ["DependencyNode", "build_dependency_tree", "render_tree"]

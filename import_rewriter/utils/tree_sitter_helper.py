from typing import Iterator, Tuple

from tree_sitter import Node


def extract_content(node: Node, content: bytes) -> bytes:
    return content[node.start_byte:node.end_byte]


def node_position(node: Node) -> Tuple[int, int]:
    """1-based line and byte column of the node's start."""
    return node.start_point[0] + 1, node.start_point[1] + 1


def iter_error_nodes(node: Node) -> Iterator[Node]:
    if node.is_error or node.is_missing:
        yield node
        return
    if not node.has_error:
        return
    for child in node.children:
        yield from iter_error_nodes(child)


def describe_token(node: Node, content: bytes, limit: int = 20) -> str:
    if node.is_missing:
        return node.type
    text = extract_content(node, content).decode("utf-8", errors="replace").split("\n", 1)[0]
    if not text:
        return "EOF"
    if len(text) > limit:
        text = text[:limit] + "..."
    return f"'{text}'"

"""Build nested reply trees from the backend's flat comment list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from blog_engagement.core.domain_types import Comment, CommentWithReplies, ThreadEntry
from blog_engagement.core.formatting import format_comment_date

MAX_REPLY_DEPTH = 3

_COMMENT_FIELDS = set(Comment.model_fields)


def build_comment_tree(flat_comments: Iterable[Comment]) -> list[CommentWithReplies]:
    """Nest comments under their parents.

    A comment whose parent id is absent or not present in the input becomes
    a root. Roots keep their input order; every replies list is sorted by
    creation time, oldest first.

    A repeated id is placed once, at the position of its first occurrence,
    with the fields of its last.

    Parent chains are not checked for cycles. Comments caught in a cycle
    never resolve to a root and are therefore absent from the result.

    Args:
        flat_comments: Comments in any order.

    Returns:
        The root nodes of the forest.
    """
    nodes: dict[str, CommentWithReplies] = {
        c.id: CommentWithReplies(**c.model_dump(include=_COMMENT_FIELDS), replies=[])
        for c in flat_comments
    }

    roots: list[CommentWithReplies] = []
    for node in nodes.values():
        parent = nodes.get(node.parent_comment_id) if node.parent_comment_id else None
        if parent is not None:
            parent.replies.append(node)
        else:
            roots.append(node)

    for root in roots:
        _sort_replies(root)
    return roots


def _sort_replies(node: CommentWithReplies) -> None:
    node.replies = sorted(node.replies, key=lambda reply: reply.created_at)
    for reply in node.replies:
        _sort_replies(reply)


def can_reply(depth: int, max_depth: int = MAX_REPLY_DEPTH) -> bool:
    """Whether the Reply action is offered for a comment at this depth."""
    return depth < max_depth


def walk_thread(
    tree: Iterable[CommentWithReplies],
    max_depth: int = MAX_REPLY_DEPTH,
    depth: int = 0,
) -> Iterator[ThreadEntry]:
    """Yield every node depth-first, parents before their replies.

    Args:
        tree: Nodes at the given depth.
        max_depth: First depth at which replying is no longer offered.
        depth: Depth of the nodes in `tree`.

    Yields:
        A ThreadEntry per node, in display order.
    """
    for node in tree:
        yield ThreadEntry(
            comment=node,
            depth=depth,
            can_reply=can_reply(depth, max_depth),
            date_label=format_comment_date(node.created_at),
        )
        yield from walk_thread(node.replies, max_depth, depth + 1)


def count_nodes(tree: Iterable[CommentWithReplies]) -> int:
    """Count every node in a forest."""
    return sum(1 + count_nodes(node.replies) for node in tree)

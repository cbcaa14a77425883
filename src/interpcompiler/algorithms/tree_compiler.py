import logging
from typing import List, Sequence

from interpcompiler.core.decision_tree import DecisionNode, Interior, Leaf
from interpcompiler.core.segments import Segment

logger = logging.getLogger(__name__)


def compile_tree(segments: Sequence[Segment]) -> DecisionNode:
    """
    Fold an ordered segment list into a balanced decision tree.

    Neighbouring nodes are merged pairwise, (0, 1), (2, 3), ..., each pair becoming
    an Interior node split at the threshold of its right-hand member. An odd node
    out is carried unmerged into the next round. Rounds repeat until a single root
    remains, giving a depth of ceil(log2(len(segments))).
    Args:
        segments: Segments ordered by threshold; only the first may lack one
    Returns:
        The root node
    Raises:
        ValueError: If no segments are given, or a non-leading segment has no threshold
    """
    if not segments:
        raise ValueError("Cannot compile an empty segment list")
    nodes: List[DecisionNode] = [Leaf(segment) for segment in segments]
    rounds = 0
    while len(nodes) > 1:
        merged = []
        for i in range(1, len(nodes), 2):
            low, high = nodes[i - 1], nodes[i]
            if high.threshold_x is None:
                raise ValueError(f"Segment {i} has no threshold; only the first segment may be unbounded")
            merged.append(Interior(split_x=high.threshold_x, low=low, high=high))
        if len(nodes) % 2:
            merged.append(nodes[-1])
        nodes = merged
        rounds += 1
    logger.debug("Compiled %d segments into a decision tree of depth %d", len(segments), rounds)
    return nodes[0]

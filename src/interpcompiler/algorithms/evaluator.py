from typing import Optional

from interpcompiler.core.decision_tree import DecisionNode, Interior


def evaluate(node: DecisionNode, x: float) -> Optional[float]:
    """
    Evaluate a compiled decision tree at ``x``.

    Returns None where the curve is undefined. Raises DomainError where the curve
    was compiled with the 'die' edge and ``x`` lies outside its domain.
    """
    while isinstance(node, Interior):
        node = node.low if x < node.split_x else node.high
    return node.segment.evaluate(x)

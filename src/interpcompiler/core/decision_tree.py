"""Binary decision nodes for compiled piecewise functions."""
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from interpcompiler.core.segments import Segment


@dataclass(frozen=True)
class Leaf:
    segment: Segment

    @property
    def threshold_x(self) -> Optional[float]:
        return self.segment.threshold_x

    @property
    def depth(self) -> int:
        return 0

    def leaves(self) -> Iterator["Leaf"]:
        yield self


@dataclass(frozen=True)
class Interior:
    """If x < split_x use ``low``, else use ``high``."""
    split_x: float
    low: "DecisionNode"
    high: "DecisionNode"

    @property
    def threshold_x(self) -> Optional[float]:
        """Lowest threshold covered by this subtree."""
        return self.low.threshold_x

    @property
    def depth(self) -> int:
        return 1 + max(self.low.depth, self.high.depth)

    def leaves(self) -> Iterator[Leaf]:
        """In-order traversal of the leaves below this node."""
        yield from self.low.leaves()
        yield from self.high.leaves()


DecisionNode = Union[Leaf, Interior]

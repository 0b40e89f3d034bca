from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .edge import Edge


class EventKind(Enum):
    ACCEPTED = 'accepted'
    REJECTED = 'rejected'


@dataclass(frozen=True)
class EdgeEvent:
    '''One decision made by an MST strategy.

    ``total_weight`` is the running weight of the accepted edges after this
    decision. Consumers (e.g. a renderer) only observe these; nothing they
    do flows back into the algorithm.
    '''

    kind: EventKind
    edge: Edge
    total_weight: float

    @property
    def accepted(self) -> bool:
        return self.kind is EventKind.ACCEPTED

    def __str__(self):
        return f'{self.kind.value:>8} {self.edge}  (total {self.total_weight:.5f})'


Listener = Optional[Callable[[EdgeEvent], object]]

from dataclasses import dataclass
from typing import Iterable, Iterator

from .edge import Edge
from .events import EdgeEvent, Listener


@dataclass(frozen=True)
class MSTResult:
    '''Edges of a minimum spanning tree (or forest) in acceptance order.'''

    edges: tuple[Edge, ...]
    total_weight: float

    @classmethod
    def collect(cls, events: Iterable[EdgeEvent], listener: Listener = None) -> 'MSTResult':
        '''Drain an event stream, forwarding each event to ``listener``.'''
        edges = []
        total = 0.0
        for event in events:
            if listener is not None:
                listener(event)
            if event.accepted:
                edges.append(event.edge)
                total = event.total_weight
        return cls(tuple(edges), total)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __str__(self):
        lines = [str(e) for e in self.edges]
        lines.append(f'{self.total_weight:.5f}')
        return '\n'.join(lines)

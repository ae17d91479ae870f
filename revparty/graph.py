'''Weighted directed graphs over candidates.

Used by the Ranked Pairs evaluator to lock pairwise victories into an
acyclic preference graph. Vertices are candidate indices ``0..n-1``; there is
at most one arc for each ordered pair of vertices.
'''

import collections
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from revparty.candidate import LabelIndex
from revparty.table import DimensionMismatch, IndexOutOfRange


class Arc(NamedTuple):
    '''A directed, weighted edge between two candidates.'''
    source: int
    dest: int
    weight: int


class ArcError(ValueError):
    '''An arc was added twice, or a missing arc was modified.'''
    def __init__(self, source: int, dest: int, message: str):
        self.source = source
        self.dest = dest
        super().__init__(f'arc ({source}, {dest}) {message}')


class Graph:
    '''A directed graph with integer arc weights.

    :param n_vertices: Number of vertices (candidates).
    :param labels: Optional vertex labels, one per vertex.
    :raises revparty.table.DimensionMismatch: If the number of labels does
        not match the number of vertices.
    '''
    def __init__(self,
                 n_vertices: int,
                 labels: Optional[Iterable[str]] = None,
                 ):
        if n_vertices < 0:
            raise DimensionMismatch('vertex count', n_vertices, 0)
        self.n_vertices = n_vertices
        if labels is None:
            self._index = None
        else:
            self._index = LabelIndex(labels)
            if len(self._index) != n_vertices:
                raise DimensionMismatch(
                    'label count', len(self._index), n_vertices
                )
        self._arcs: Dict[int, Dict[int, int]] = {
            vertex: {} for vertex in range(n_vertices)
        }

    def _check_vertices(self, source: int, dest: int) -> None:
        n = self.n_vertices
        if not (0 <= source < n and 0 <= dest < n):
            raise IndexOutOfRange(source, dest, (n, n))

    def _check_vertex(self, vertex: int) -> None:
        self._check_vertices(vertex, vertex)

    def add(self, source: int, dest: int, weight: int) -> None:
        '''Add a new arc.

        :raises ArcError: If the arc already exists.
        '''
        self._check_vertices(source, dest)
        if dest in self._arcs[source]:
            raise ArcError(source, dest, 'already exists')
        self._arcs[source][dest] = weight

    def add_arc(self, arc: Arc) -> None:
        self.add(*arc)

    def set_weight(self, source: int, dest: int, weight: int) -> None:
        '''Change the weight of an existing arc.

        :raises ArcError: If the arc does not exist.
        '''
        self._check_vertices(source, dest)
        if dest not in self._arcs[source]:
            raise ArcError(source, dest, 'does not exist')
        self._arcs[source][dest] = weight

    def weight(self, source: int, dest: int, default: int = 0) -> int:
        '''Return the arc weight, or default if there is no such arc.'''
        self._check_vertices(source, dest)
        return self._arcs[source].get(dest, default)

    @property
    def n_arcs(self) -> int:
        return sum(len(targets) for targets in self._arcs.values())

    def label(self, vertex: int) -> str:
        self._check_vertex(vertex)
        if self._index is None:
            return str(vertex)
        return self._index.label(vertex)

    def successors(self, vertex: int) -> List[int]:
        self._check_vertex(vertex)
        return list(self._arcs[vertex])

    def out_degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(self._arcs[vertex])

    def out_degrees(self) -> List[int]:
        return [self.out_degree(v) for v in range(self.n_vertices)]

    def arcs(self) -> List[Arc]:
        '''Return all arcs, ordered by source and then destination.'''
        return [
            Arc(source, dest, weight)
            for source in range(self.n_vertices)
            for dest, weight in sorted(self._arcs[source].items())
        ]

    def has_path(self, source: int, dest: int) -> bool:
        '''Whether dest can be reached from source along the arcs.

        Uses a breadth-first search; every vertex reaches itself.
        '''
        self._check_vertices(source, dest)
        if source == dest:
            return True
        visited = {source}
        queue = collections.deque([source])
        while queue:
            vertex = queue.popleft()
            for succ in self.successors(vertex):
                if succ == dest:
                    return True
                if succ not in visited:
                    visited.add(succ)
                    queue.append(succ)
        return False

    def would_create_cycle(self, arc: Arc) -> bool:
        '''Whether adding the arc would close a directed cycle.

        This is the case when the arc's source is already reachable from
        its destination.
        '''
        return self.has_path(arc.dest, arc.source)

    def has_cycle(self) -> bool:
        '''Whether the graph contains any directed cycle.'''
        in_degrees = [0] * self.n_vertices
        for targets in self._arcs.values():
            for dest in targets:
                in_degrees[dest] += 1
        queue = collections.deque(
            v for v in range(self.n_vertices) if in_degrees[v] == 0
        )
        n_sorted = 0
        while queue:
            vertex = queue.popleft()
            n_sorted += 1
            for dest in self.successors(vertex):
                in_degrees[dest] -= 1
                if in_degrees[dest] == 0:
                    queue.append(dest)
        return n_sorted != self.n_vertices

    def __repr__(self) -> str:
        return f'<Graph({self.n_vertices} vertices, {self.n_arcs} arcs)>'


def arc_tuples(graph: Graph) -> List[Tuple[str, str, int]]:
    '''List the arcs of a graph with vertex labels instead of indices.'''
    return [
        (graph.label(arc.source), graph.label(arc.dest), arc.weight)
        for arc in graph.arcs()
    ]

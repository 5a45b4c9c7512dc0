"""Cycle detection over a file-keyed adjacency map."""

from __future__ import annotations

from typing import Hashable, Iterator, Mapping, Sequence, TypeVar

NodeT = TypeVar("NodeT", bound=Hashable)

_EXHAUSTED = object()


def detect_cycles(graph: Mapping[NodeT, Sequence[NodeT]]) -> list[tuple[NodeT, ...]]:
    """Find cycles with an iterative depth-first search.

    Each cycle is the slice of the current path from the revisited node to
    the top of the stack, so its last node has an edge back to its first.
    Nodes that have been fully explored are never entered again, which keeps
    one back edge from being reported once per starting point.

    Parameters
    ----------
    graph : Mapping
        Adjacency map. Targets missing from the keys are treated as leaves.

    Returns
    -------
    list[tuple]
        Distinct cycles in discovery order. A self-edge yields a one-node cycle.
    """
    cycles: list[tuple[NodeT, ...]] = []
    seen: set[tuple[NodeT, ...]] = set()
    done: set[NodeT] = set()

    for start in graph:
        if start in done:
            continue
        path: list[NodeT] = [start]
        on_path: dict[NodeT, int] = {start: 0}
        iterators: list[Iterator[NodeT]] = [iter(graph.get(start, ()))]

        while iterators:
            target = next(iterators[-1], _EXHAUSTED)
            if target is _EXHAUSTED:
                iterators.pop()
                finished = path.pop()
                del on_path[finished]
                done.add(finished)
            elif target in on_path:
                cycle = tuple(path[on_path[target]:])
                if cycle not in seen:
                    seen.add(cycle)
                    cycles.append(cycle)
            elif target not in done:
                on_path[target] = len(path)
                path.append(target)
                iterators.append(iter(graph.get(target, ())))

    return cycles

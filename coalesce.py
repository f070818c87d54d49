from __future__ import annotations
import logging
from typing import Iterable, List, Tuple
import networkx as nx
from endpoint import Endpoint, Number
from interval import Interval, EVERYTHING

log = logging.getLogger(__name__)


def _position(i: Interval) -> Tuple[Endpoint, Endpoint]:
    return (i.lower, i.upper)


def touching(a: Interval, b: Interval) -> bool:
    return a.overlaps(b) or a.adheres_to(b)


def touch_graph(intervals: Iterable[Interval]) -> nx.Graph:
    """Graph over bounded intervals, with an edge between any two that touch."""
    ordered = sorted({i for i in intervals if i.is_bounded()}, key=_position)
    g = nx.Graph()
    g.add_nodes_from(ordered)
    for n, a in enumerate(ordered):
        for b in ordered[n + 1:]:
            if touching(a, b):
                g.add_edge(a, b)
            elif b.lower > a.upper:
                # later intervals start even further right
                break
    return g


def _merge(component: Iterable[Interval]) -> Interval:
    ordered = sorted(component, key=_position)
    merged = ordered[0]
    for i in ordered[1:]:
        parts = merged.union(i)
        if len(parts) != 1:
            raise RuntimeError(f"{merged} and {i} do not touch")
        merged = parts[0]
    return merged


def coalesce(intervals: Iterable[Interval]) -> List[Interval]:
    """Smallest list of disjoint intervals covering the same points.

    The result is sorted left to right and no two of its intervals overlap
    or adhere. Empty intervals are dropped.
    """
    items = list(intervals)
    for i in items:
        if not isinstance(i, Interval):
            raise TypeError(f"Cannot coalesce object of type {type(i)}")
    if any(i.is_everything() for i in items):
        log.debug("coalesce: %d intervals reduced to everything", len(items))
        return [EVERYTHING]
    g = touch_graph(items)
    result = sorted(
        (_merge(c) for c in nx.connected_components(g)), key=_position
    )
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "coalesce: %d intervals, %d components -> %s",
            len(items),
            len(result),
            ", ".join(str(i) for i in result),
        )
    return result


def covers(intervals: Iterable[Interval], x: Number) -> bool:
    return any(i.contains(x) for i in intervals)

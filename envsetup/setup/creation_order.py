# envsetup/setup/creation_order.py
"""
Body Creation Order
===================

A body's models may be defined relative to another body (an ephemeris
about its frame origin, a synchronous rotation about its central body).
Those bodies have to exist before the dependent body is created.

resolve_creation_order() sorts the body settings so that every frame
origin that is itself one of the bodies comes first. Origins outside the
settings (e.g. "SSB") are assumed to be available externally and impose
no constraint.

Kahn's algorithm is used with a priority on input position: whenever
several bodies are ready, the one that came first in the input mapping is
taken, so the result is reproducible and unconstrained bodies keep their
relative input order.
"""

from __future__ import annotations

import heapq
import logging
from typing import Dict, List, Mapping, Sequence, Set, Tuple

from envsetup.core.errors import CycleDetected
from envsetup.settings.body_settings import BodySettings

log = logging.getLogger(__name__)


def _in_set_dependencies(body_settings: Mapping[str, BodySettings]) -> Dict[str, List[str]]:
    return {
        name: [origin for origin in settings.frame_origins() if origin in body_settings]
        for name, settings in body_settings.items()
    }


def _find_cycle(
    names: Sequence[str],
    dependencies: Mapping[str, Sequence[str]],
    created: Set[str],
) -> List[str]:
    """
    Walk unresolved dependencies from the first unresolved body until a
    body repeats. Every unresolved body has at least one unresolved
    dependency, so the walk always closes a loop.
    """
    index = {name: i for i, name in enumerate(names)}
    current = next(name for name in names if name not in created)
    path: List[str] = []
    seen: Dict[str, int] = {}
    while current not in seen:
        seen[current] = len(path)
        path.append(current)
        current = next(d for d in dependencies[current] if d not in created)
    cycle = path[seen[current]:]

    start = min(range(len(cycle)), key=lambda k: index[cycle[k]])
    return cycle[start:] + cycle[:start]


def resolve_creation_order(
    body_settings: Mapping[str, BodySettings],
) -> List[Tuple[str, BodySettings]]:
    """
    Order body settings so that frame-origin bodies precede the bodies
    that reference them.

    Parameters
    ----------
    body_settings : mapping body name -> BodySettings (iteration order is
        the input order used to break ties)

    Returns
    -------
    list of (name, settings) pairs in creation order

    Raises
    ------
    CycleDetected
        If the in-set frame-origin references form a cycle (including a
        body referencing itself). No partial order is returned.
    """
    names = list(body_settings)
    index = {name: i for i, name in enumerate(names)}
    dependencies = _in_set_dependencies(body_settings)

    for name in names:
        if name in dependencies[name]:
            raise CycleDetected([name])

    dependents: Dict[str, List[str]] = {name: [] for name in names}
    unresolved = {name: len(dependencies[name]) for name in names}
    for name in names:
        for origin in dependencies[name]:
            dependents[origin].append(name)

    ready = [index[name] for name in names if unresolved[name] == 0]
    heapq.heapify(ready)

    order: List[str] = []
    while ready:
        name = names[heapq.heappop(ready)]
        order.append(name)
        for dependent in dependents[name]:
            unresolved[dependent] -= 1
            if unresolved[dependent] == 0:
                heapq.heappush(ready, index[dependent])

    if len(order) < len(names):
        cycle = _find_cycle(names, dependencies, set(order))
        log.debug("Frame-origin cycle among bodies: %s", cycle)
        raise CycleDetected(cycle)

    log.debug("Body creation order: %s", order)
    return [(name, body_settings[name]) for name in order]


__all__ = ["resolve_creation_order"]

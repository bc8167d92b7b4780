"""Append-only registry of super-vertices.

During contraction each working-graph vertex stands for a set of original
vertices. The registry maps small integer ids to those sets and back. Sets are
immutable and ids are never reused: merging two super-vertices registers the
union under a fresh id while the old ids simply drop out of the working graph.
"""

from __future__ import annotations

from typing import AbstractSet, Dict, FrozenSet, Iterable, List

from mincut.graph.weighted_graph import NodeID


class SuperVertexRegistry:
    """Bidirectional table between integer ids and frozen vertex sets."""

    def __init__(self) -> None:
        self._sets: List[FrozenSet[NodeID]] = []
        self._ids: Dict[FrozenSet[NodeID], int] = {}

    def register(self, members: Iterable[NodeID]) -> int:
        """Return the id of ``members``, allocating the next id if unseen.

        Args:
            members: Original vertices represented by the super-vertex.

        Returns:
            int: Id of the set.

        Raises:
            ValueError: If ``members`` is empty.
        """
        key = frozenset(members)
        if not key:
            raise ValueError("A super-vertex must represent at least one vertex.")
        existing = self._ids.get(key)
        if existing is not None:
            return existing
        new_id = len(self._sets)
        self._sets.append(key)
        self._ids[key] = new_id
        return new_id

    def merge(self, first: int, second: int) -> int:
        """Register the union of two super-vertices and return its id."""
        return self.register(self._sets[first] | self._sets[second])

    def members(self, super_vertex: int) -> FrozenSet[NodeID]:
        """Return the original vertices represented by ``super_vertex``.

        Raises:
            KeyError: If the id was never registered.
        """
        if not 0 <= super_vertex < len(self._sets):
            raise KeyError(f"Unknown super-vertex id {super_vertex}.")
        return self._sets[super_vertex]

    def id_of(self, members: AbstractSet[NodeID]) -> int:
        """Return the id registered for exactly ``members``.

        Raises:
            KeyError: If the set was never registered.
        """
        return self._ids[frozenset(members)]

    def __contains__(self, members: object) -> bool:
        if not isinstance(members, (set, frozenset)):
            return False
        return frozenset(members) in self._ids

    def __len__(self) -> int:
        return len(self._sets)

"""
Per-node best-known cost and predecessor records.

Both engines route every cost update through CostTable.relax so the
"found a better path" decision lives in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional
import math

from nodes import Node


@dataclass(frozen=True)
class CostRecord:
    best_cost: float = math.inf
    predecessor: Optional[Node] = None


_UNSEEN = CostRecord()


class CostTable:
    """
    Arena of CostRecord values keyed by node id, owned by one search call.

    Nodes without a record report (inf, None).
    """

    def __init__(self) -> None:
        self._records: Dict[Node, CostRecord] = {}

    def seed(self, node: Node) -> None:
        """Record the search origin at cost 0 with no predecessor."""
        self._records[node] = CostRecord(0, None)

    def get(self, node: Node) -> CostRecord:
        return self._records.get(node, _UNSEEN)

    def best_cost(self, node: Node) -> float:
        return self.get(node).best_cost

    def predecessor(self, node: Node) -> Optional[Node]:
        return self.get(node).predecessor

    def relax(self, node: Node, candidate_cost: float, via: Node) -> bool:
        """
        Offer candidate_cost for node, reached through via.

        Returns True and stores (candidate_cost, via) when the node has no
        record yet or the candidate is strictly cheaper. Otherwise returns
        False and leaves the table untouched.
        """
        record = self._records.get(node)
        if record is not None and not candidate_cost < record.best_cost:
            return False
        self._records[node] = CostRecord(candidate_cost, via)
        return True

    def path_to(self, node: Node) -> List[Node]:
        """
        Walk predecessor links from node back to the seeded origin.

        Returns the nodes in origin -> node order, or [] if node was never
        reached.
        """
        if node not in self._records:
            return []
        path: List[Node] = []
        current: Optional[Node] = node
        while current is not None:
            path.append(current)
            current = self._records[current].predecessor
        path.reverse()
        return path

    def __contains__(self, node: object) -> bool:
        return node in self._records

    def __len__(self) -> int:
        return len(self._records)

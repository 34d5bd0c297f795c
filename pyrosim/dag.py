"""A directed acyclic graph with depth computation for ordering."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import List

from pyrosim.index_vector import IndexVector


@dataclass
class DagNode:
    """A node: its incoming edge count, its depth and its children."""

    incoming: int = 0
    depth: int = 0
    out: List[int] = field(default_factory=list)

    @property
    def out_connection_count(self) -> int:
        return len(self.out)


class Dag:
    """Nodes connected by edges that may never form a cycle."""

    def __init__(self) -> None:
        self.nodes: IndexVector[DagNode] = IndexVector()

    def create_node(self) -> int:
        """Add a node and return its identifier."""
        return self.nodes.append(DagNode())

    def set_parent(self, child: int, parent: int) -> bool:
        return self.create_connection(parent, child)

    def create_connection(self, source: int, target: int) -> bool:
        """Add an edge; return False if it is invalid, duplicated or would form a cycle."""
        if not self.is_valid(source) or not self.is_valid(target):
            return False
        if source == target:
            return False
        if self.is_ancestor(target, source):
            return False
        if self.is_parent(source, target):
            return False
        self.nodes[source].out.append(target)
        self.nodes[target].incoming += 1
        return True

    def is_valid(self, node: int) -> bool:
        return self.nodes.is_valid_id(node)

    def is_parent(self, node_1: int, node_2: int) -> bool:
        """True if node_2 is a direct child of node_1."""
        return node_2 in self.nodes[node_1].out

    def is_ancestor(self, node_1: int, node_2: int) -> bool:
        """True if node_2 can be reached from node_1."""
        out = self.nodes[node_1].out
        return self.is_parent(node_1, node_2) or any(self.is_ancestor(o, node_2) for o in out)

    def compute_depth(self) -> None:
        """Set each node's depth to the length of the longest path reaching it."""
        incoming = [n.incoming for n in self.nodes]
        start_nodes: List[int] = []
        for i, node in enumerate(self.nodes):
            if node.incoming == 0:
                node.depth = 0
                start_nodes.append(i)

        while start_nodes:
            idx = start_nodes.pop()
            node = self.nodes[idx]
            for o in node.out:
                incoming[o] -= 1
                connected = self.nodes[o]
                connected.depth = max(connected.depth, node.depth + 1)
                if incoming[o] == 0:
                    start_nodes.append(o)

    def order(self) -> List[int]:
        """Node identifiers sorted by depth."""
        return sorted(range(len(self.nodes)), key=lambda i: self.nodes[i].depth)

    def remove_connection(self, source: int, target: int) -> None:
        """Remove the edge source -> target; warn if there is none."""
        connections = self.nodes[source].out
        found = 0
        i = 0
        while i < len(connections):
            if connections[i] == target:
                connections[i], connections[-1] = connections[-1], connections[i]
                connections.pop()
                self.nodes[target].incoming -= 1
                found += 1
            else:
                i += 1
        if not found:
            warnings.warn(f"connection {source} -> {target} not found", RuntimeWarning, stacklevel=2)
# -*- coding: utf-8 -*-
# PolyTopo/polymesh/core/partition.py

"""
Project: PolyTopo
Author: Erfan Vaezi
Date: 10/12/2025

Purpose:
--------
Disjoint-set partition (union-find) over the integers 0..n-1, backed by numpy arrays.
Used as a short-lived local during mesh classification and then dropped.

Notes:
------
   - Union by size, path compression on find.
   - Every element starts in its own singleton class.
"""

import numpy as np


class Partition:
    """
    Union-find over n elements.
    """

    __slots__ = ("_parent", "_size", "_n_parts")

    def __init__(self, n: int):
        n = int(n)
        self._parent = np.arange(n, dtype=np.int64)
        self._size = np.ones(n, dtype=np.int64)
        self._n_parts = n

    def __len__(self) -> int:
        return int(self._parent.size)

    def find(self, i: int) -> int:
        """Representative of the class containing i."""
        parent = self._parent
        root = int(i)
        while parent[root] != root:
            root = int(parent[root])
        # compress
        while parent[i] != root:
            nxt = int(parent[i])
            parent[i] = root
            i = nxt
        return root

    def join(self, a: int, b: int) -> int:
        """Merge the classes of a and b; return the surviving representative."""
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return ra
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        self._n_parts -= 1
        return ra

    def size(self, i: int) -> int:
        """Number of elements in the class containing i."""
        return int(self._size[self.find(i)])

    def number_of_parts(self) -> int:
        return self._n_parts

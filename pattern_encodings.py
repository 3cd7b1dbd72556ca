#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Dec 10 21:12:07 2020

Projections of a cube_state onto the dense index of a pattern database.
Each one only knows how to turn a cube into an index, the table and the
BFS live in pattern_db.
  corner_perm_encoding   - which corner sits in each corner slot, 8! = 40320
  corner_orient_encoding - twist of the corners, 3^7 = 2187
  corner_state_encoding  - both of the above, 8! * 3^7 = 88179840
  edge_subset_encoding   - slots (and flips) of a chosen set of edges,
                           12 pick k (* 2^k)
"""

import numpy as np
import lehmer_code as lc

# All cubes can be solved in 20 or fewer moves in the half turn basis
#  so no projection of the cube can be further than that
GODS_NUMBER = 20


class corner_perm_encoding():
    # Relative permutation of the 8 corners. Orientations and edges
    #  are dropped on purpose, two cubes that only differ there share
    #  an index.
    max_depth = GODS_NUMBER

    def __init__(self):
        self.lehcode = lc.lehmer_code(8)
        self.size = self.lehcode.size

    def index_for(self, state):
        return self.lehcode.encode(state.cp)


class corner_orient_encoding():
    # The twist of the last corner is fixed by the other 7
    #  (twists always sum to 0 mod 3) so only 7 base 3 digits are needed
    max_depth = GODS_NUMBER
    orient_weights = np.array([729, 243, 81, 27, 9, 3, 1], dtype=np.int64)

    def __init__(self):
        self.size = 2187
        self._weights = self.orient_weights.tolist()

    def index_for(self, state):
        return sum(o * w for o, w in zip(state.co, self._weights))


class corner_state_encoding():
    # corner cubie index * 2187 + corner orient index
    max_depth = GODS_NUMBER

    def __init__(self):
        self.perm = corner_perm_encoding()
        self.orient = corner_orient_encoding()
        self.size = self.perm.size * self.orient.size

    def index_for(self, state):
        return self.perm.index_for(state) * self.orient.size + self.orient.index_for(state)


class edge_subset_encoding():
    """Slots occupied by a tracked subset of the 12 edges, as an
    n pick k lehmer code, optionally times the flips of those edges.

    tracked is the tuple of edge cubie ids to follow, in the order
    their slots get ranked.  With all 12 edges and no orientation this
    is the full edge permutation db (12! entries).
    """
    max_depth = GODS_NUMBER

    def __init__(self, tracked, orient=True):
        tracked = tuple(int(e) for e in tracked)
        if len(set(tracked)) != len(tracked) or any(e < 0 or e > 11 for e in tracked):
            raise ValueError('tracked edges must be distinct ids in 0..11, got {0}'.format(tracked))
        self.tracked = tracked
        self.orient = orient
        k = len(tracked)
        self.lehcode = lc.lehmer_code(12, k)
        self.norient = 2 ** k if orient else 1
        self.size = self.lehcode.size * self.norient

    def index_for(self, state):
        # invert ep to get the slot holding each tracked edge
        where = [0] * 12
        for slot, e in enumerate(state.ep):
            where[e] = slot
        slots = [where[e] for e in self.tracked]
        edge_cubie_index = self.lehcode.encode(slots)
        if not self.orient:
            return edge_cubie_index
        edge_orient_index = 0
        for slot in slots:
            edge_orient_index = edge_orient_index * 2 + state.eo[slot]
        return edge_cubie_index * self.norient + edge_orient_index

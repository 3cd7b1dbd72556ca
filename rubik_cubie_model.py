#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Dec 18 22:07:51 2020

Cubie level model of the rubik's cube
  The state is the permutation and orientation of the 8 corner
  and 12 edge cubies.  cp[i] is the corner cubie sitting in corner
  slot i and co[i] is its twist (0-2), likewise ep/eo for the edges
  with flips (0-1).
  Corner slots  URF=0, UFL=1, ULB=2, UBR=3, DFR=4, DLF=5, DBL=6, DRB=7
  Edge slots    UR=0, UF=1, UL=2, UB=3, DR=4, DF=5, DL=6, DB=7,
                FR=8, FL=9, BL=10, BR=11
  The pattern databases only need solved, moves and apply() from here.
"""

from collections import namedtuple
import itertools
import random

cube_state = namedtuple('cube_state', ['cp', 'co', 'ep', 'eo'])

SOLVED = cube_state(tuple(range(8)), (0,)*8, tuple(range(12)), (0,)*12)


# state * move composition
#  slot i of the result takes the cubie from slot move.cp[i] of state
#  and adds the twist the move gives that slot
def multiply(a, b):
    cp = tuple([a.cp[j] for j in b.cp])
    co = tuple([(a.co[j] + t) % 3 for j, t in zip(b.cp, b.co)])
    ep = tuple([a.ep[j] for j in b.ep])
    eo = tuple([(a.eo[j] + f) % 2 for j, f in zip(b.ep, b.eo)])
    return cube_state(cp, co, ep, eo)


class rubiks_cube():

    # Clockwise quarter turns of each face as cubie states
    base_turns = {
        'U': cube_state((3, 0, 1, 2, 4, 5, 6, 7), (0, 0, 0, 0, 0, 0, 0, 0),
                        (3, 0, 1, 2, 4, 5, 6, 7, 8, 9, 10, 11), (0,)*12),
        'R': cube_state((4, 1, 2, 0, 7, 5, 6, 3), (2, 0, 0, 1, 1, 0, 0, 2),
                        (8, 1, 2, 3, 11, 5, 6, 7, 4, 9, 10, 0), (0,)*12),
        'F': cube_state((1, 5, 2, 3, 0, 4, 6, 7), (1, 2, 0, 0, 2, 1, 0, 0),
                        (0, 9, 2, 3, 4, 8, 6, 7, 1, 5, 10, 11),
                        (0, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0)),
        'D': cube_state((0, 1, 2, 3, 5, 6, 7, 4), (0, 0, 0, 0, 0, 0, 0, 0),
                        (0, 1, 2, 3, 5, 6, 7, 4, 8, 9, 10, 11), (0,)*12),
        'L': cube_state((0, 2, 6, 3, 4, 1, 5, 7), (0, 1, 2, 0, 0, 2, 1, 0),
                        (0, 1, 10, 3, 4, 5, 9, 7, 8, 2, 6, 11), (0,)*12),
        'B': cube_state((0, 1, 3, 7, 4, 5, 2, 6), (0, 0, 1, 2, 0, 0, 2, 1),
                        (0, 1, 2, 11, 4, 5, 6, 10, 8, 9, 3, 7),
                        (0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 1)),
    }
    faces = ['U', 'R', 'F', 'D', 'L', 'B']
    # half turn metric: quarter turn, half turn, inverse quarter turn
    suffixes = ['', '2', "'"]
    all_moves = [f + s for f, s in itertools.product(faces, suffixes)]

    def __init__(self, moves=None):
        # moves restricts the move set, e.g. the <U,R,F> group of the 2x2x2
        self.move_table = {}
        for f in self.faces:
            turn = self.base_turns[f]
            cur = turn
            for s in self.suffixes:
                self.move_table[f + s] = cur
                cur = multiply(cur, turn)
        if moves is None:
            moves = self.all_moves
        for m in moves:
            if m not in self.move_table:
                raise KeyError('unknown move {0}'.format(m))
        self.moves = tuple(moves)
        self.solved = SOLVED

    def apply(self, state, move):
        return multiply(state, self.move_table[move])

    def apply_sequence(self, state, seq):
        # seq may be a list of move names or a space separated string
        if isinstance(seq, str):
            seq = seq.split()
        for m in seq:
            state = self.apply(state, m)
        return state

    def scramble(self, nmoves, rng=None):
        if rng is None:
            rng = random.Random()
        seq = [rng.choice(self.moves) for i in range(nmoves)]
        return self.apply_sequence(self.solved, seq), seq

    def inverse(self, move):
        face, suffix = move[0], move[1:]
        return face + {'': "'", '2': '2', "'": ''}[suffix]


if __name__ == '__main__':
    cube = rubiks_cube()
    st, seq = cube.scramble(10, random.Random(1))
    print(' '.join(seq))
    print(st)

"""
Shared fixtures for the pattern database tests.
"""

import os
import sys

import pytest

# The modules live at the repository root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import rubik_cubie_model as rcm
import rubik_cornerdb_gen as gen

# <U,R,F> with half turn metric, the move group of a 2x2x2 holding DBL fixed
URF_MOVES = ('U', 'U2', "U'", 'R', 'R2', "R'", 'F', 'F2', "F'")


@pytest.fixture(scope='session')
def cube():
    return rcm.rubiks_cube()


@pytest.fixture(scope='session')
def cube222():
    return rcm.rubiks_cube(moves=URF_MOVES)


@pytest.fixture(scope='session')
def corner_perm_built(cube):
    """Full 18 move corner permutation db, built once (8! entries)."""
    db = gen.corner_perm_db(cube)
    assert db.build()
    return db


@pytest.fixture(scope='session')
def corner_perm_222(cube222):
    db = gen.corner_perm_db(cube222)
    assert db.build()
    return db

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Nov 23 19:46:24 2020

Build the corner pattern databases and save them to disk
  rubik_cornerperm_db.npz   - moves to put the 8 corners in place
  rubik_cornerorient_db.npz - moves to twist the 8 corners right
The full corner db (permutation and orientation together, 88179840
entries) is available from corner_db() but takes a long time to build
in python.
"""

import logging
from multiprocessing import cpu_count
from timeit import default_timer as timer
import pattern_db as pdb
import pattern_encodings as pe
import rubik_cubie_model as rcm

logger = logging.getLogger(__name__)


def _make(encoding, model, seed):
    if model is None:
        model = rcm.rubiks_cube()
    return pdb.pattern_db(encoding, model, seed=seed)


def corner_perm_db(model=None, seed=None):
    return _make(pe.corner_perm_encoding(), model, seed)


def corner_orient_db(model=None, seed=None):
    return _make(pe.corner_orient_encoding(), model, seed)


def corner_db(model=None, seed=None):
    return _make(pe.corner_state_encoding(), model, seed)


def edge_db(tracked, orient=True, model=None, seed=None):
    return _make(pe.edge_subset_encoding(tracked, orient), model, seed)


if __name__ == '__main__':

    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    startts = timer()
    USENCPUS = cpu_count()
    logger.info('Found {0:d} CPUS'.format(USENCPUS))

    cube = rcm.rubiks_cube()
    for name, mkdb in [('rubik_cornerperm_db', corner_perm_db),
                       ('rubik_cornerorient_db', corner_orient_db)]:
        curdb = mkdb(cube)
        curdb.build(workers=USENCPUS)
        logger.info('{0} level counts {1}'.format(name, curdb.level_counts()))
        logger.info('Done. Start saving {0}'.format(name))
        curdb.save_db(name)
    logger.info('Elapsed time (s) {0:.1f}'.format(timer() - startts))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Dec  8 20:41:15 2020

Pattern database of minimum moves to solve a sub-problem of the cube.
  The table is a flat uint8 array over the dense index space of an
  encoding (see pattern_encodings.py).  It is filled by a breadth first
  search outward from the solved cube, using the index rather than the
  full cube as the visited key, so memory is bounded by the index space.
  First assignment of an index wins since BFS reaches every index
  at its shortest distance first.

  The encoding supplies
      size               - number of indices
      index_for(state)   - projection of a full state to its index
      max_depth          - (optional) upper bound on any distance
  The model supplies
      solved, moves, apply(state, move)

  Level parallel builds follow the multiprocessing Pool + RawArray
  scheme used by the solver: workers read the shared table and propose
  (index, state) pairs, the parent is the only writer and commits them
  between levels.
"""

import logging
from collections import deque as dq
from multiprocessing import Pool, RawArray, cpu_count
import numpy as np
from pattern_errors import (UnpopulatedIndex, ConstructionInterrupted,
                            DistanceOverflow)

logger = logging.getLogger(__name__)

# table status
EMPTY = 'empty'
SEEDED = 'seeded'
BUILDING = 'building'
COMPLETE = 'complete'
INCOMPLETE = 'incomplete'
FAILED = 'failed'


class pattern_db():
    SENTINEL = 255
    MAXDIST = 254

    def __init__(self, encoding, model, seed=None):
        self.encoding = encoding
        self.model = model
        self.size = int(encoding.size)
        # The distance width is fixed by the dtype, so an encoding that
        #  can produce longer distances is a configuration error
        max_depth = getattr(encoding, 'max_depth', None)
        if max_depth is not None and max_depth > self.MAXDIST:
            raise DistanceOverflow('max_depth {0:d} does not fit uint8 table (max {1:d})'.format(
                max_depth, self.MAXDIST))
        self.db = np.full((self.size,), self.SENTINEL, dtype=np.uint8)
        self.status = EMPTY
        if seed is not None:
            self.seed(seed)

    @property
    def is_complete(self):
        return self.status == COMPLETE

    @property
    def populated(self):
        return int(np.count_nonzero(self.db != self.SENTINEL))

    @property
    def table(self):
        # read only view for callers, index order is the encoding rank order
        view = self.db.view()
        view.flags.writeable = False
        return view

    def index_for(self, state):
        return self.encoding.index_for(state)

    def distance(self, state):
        idx = self.index_for(state)
        if self.status == EMPTY:
            raise UnpopulatedIndex(idx, 'pattern db was never built or seeded')
        if self.status in (BUILDING, INCOMPLETE, FAILED):
            raise ConstructionInterrupted('pattern db build did not complete ({0})'.format(self.status))
        val = int(self.db[idx])
        # seeded tables hand back whatever value they were seeded with
        if self.status == COMPLETE and val == self.SENTINEL:
            raise UnpopulatedIndex(idx)
        return val

    def distance_or_none(self, state):
        try:
            return self.distance(state)
        except UnpopulatedIndex:
            return None

    def seed(self, value):
        # Fill the whole table with a constant, for driving a search
        #  without paying for the build
        if value < 0 or value > self.SENTINEL:
            raise DistanceOverflow('seed {0} does not fit uint8 table'.format(value))
        self.db.fill(value)
        self.status = SEEDED

    def build(self, workers=1, cancel=None, chunksize=None):
        # returns True when the table is complete, False if cancelled
        #  cancel is anything with is_set(), e.g. threading.Event
        if self.status == COMPLETE:
            return True
        if workers is None:
            workers = cpu_count()
        self.db.fill(self.SENTINEL)
        self.status = BUILDING
        if cancel is not None and cancel.is_set():
            logger.warning('Pattern db build cancelled before start')
            self.status = INCOMPLETE
            return False
        try:
            if workers > 1:
                finished = self._bfs_parallel(workers, cancel, chunksize)
            else:
                finished = self._bfs(cancel)
        except DistanceOverflow:
            self._discard()
            raise
        except Exception as err:
            self._discard()
            raise ConstructionInterrupted('pattern db build failed: {0}'.format(err)) from err
        except BaseException:
            # KeyboardInterrupt and friends, nothing partial survives
            self._discard()
            raise
        if finished:
            self.status = COMPLETE
            logger.info('Pattern db done. {0:d} of {1:d} indices populated'.format(
                self.populated, self.size))
        else:
            self.status = INCOMPLETE
            logger.warning('Pattern db build cancelled. {0:d} of {1:d} indices populated'.format(
                self.populated, self.size))
        return finished

    def _discard(self):
        self.db.fill(self.SENTINEL)
        # reset, lookups keep reporting the failed build
        self.status = FAILED

    def _check_width(self, level):
        if level > self.MAXDIST:
            raise DistanceOverflow('distance {0:d} does not fit uint8 table (max {1:d})'.format(
                level, self.MAXDIST))

    def _bfs(self, cancel):
        # run the BFS to exhaustion to record
        #  min number of moves needed to complete
        db = self.db
        SENTINEL = self.SENTINEL
        index_for = self.encoding.index_for
        apply = self.model.apply
        moves = self.model.moves

        begfc = self.model.solved
        db[index_for(begfc)] = 0
        # neighbor list of [cube state, level] pairs
        nlist = dq([(begfc, 0)])
        levelCounts = [1]
        reportLevel = -1
        while nlist:
            if cancel is not None and cancel.is_set():
                return False
            curfc, curLevel = nlist.popleft()
            # every index at curLevel was assigned before the first of them
            #  comes off the queue, so the count is final here
            if curLevel != reportLevel:
                logger.info('Level {0:d}: {1:d} states'.format(curLevel, levelCounts[curLevel]))
                reportLevel = curLevel
            nxtLevel = curLevel + 1
            for mv in moves:
                newfc = apply(curfc, mv)
                statecode = index_for(newfc)
                if db[statecode] == SENTINEL:
                    self._check_width(nxtLevel)
                    db[statecode] = nxtLevel
                    nlist.append((newfc, nxtLevel))
                    if len(levelCounts) == nxtLevel:
                        levelCounts.append(0)
                    levelCounts[nxtLevel] += 1
        return True

    def _bfs_parallel(self, workers, cancel, chunksize):
        # Shared copy of the table the workers can read
        #  'B' is unsigned char to match np.uint8
        shDB = RawArray('B', self.size)
        shDB_np = np.frombuffer(shDB, dtype=np.uint8)
        np.copyto(shDB_np, self.db)
        index_for = self.encoding.index_for

        begfc = self.model.solved
        shDB_np[index_for(begfc)] = 0
        frontier = [begfc]
        curLevel = 0
        pmp = Pool(processes=workers, initializer=_init_worker,
                   initargs=(self.encoding, self.model, shDB))
        finished = False
        try:
            while frontier:
                logger.info('Level {0:d}: {1:d} states'.format(curLevel, len(frontier)))
                if cancel is not None and cancel.is_set():
                    break
                usechunk = chunksize
                if usechunk is None:
                    usechunk = max(1, len(frontier) // (workers * 4))
                chunks = [frontier[i:i + usechunk] for i in range(0, len(frontier), usechunk)]
                logger.debug('Expanding {0:d} chunks of up to {1:d} states'.format(len(chunks), usechunk))
                # map returning is the barrier between levels
                results = pmp.map(_expand_chunk, chunks)
                nxtLevel = curLevel + 1
                frontier = []
                # Single writer commit, assign only if still unset
                for proposals in results:
                    for statecode, newfc in proposals:
                        if shDB_np[statecode] == self.SENTINEL:
                            self._check_width(nxtLevel)
                            shDB_np[statecode] = nxtLevel
                            frontier.append(newfc)
                curLevel = nxtLevel
            else:
                finished = True
            pmp.close()
        finally:
            pmp.terminate()
            pmp.join()
            np.copyto(self.db, shDB_np)
        return finished

    def level_counts(self):
        # number of indices at each distance
        populated = self.db[self.db != self.SENTINEL]
        counts = np.bincount(populated)
        return {i: int(c) for i, c in enumerate(counts) if c > 0}

    def save_db(self, outfile):
        # only finished tables get written
        if self.status != COMPLETE:
            raise ConstructionInterrupted('refusing to save a {0} pattern db'.format(self.status))
        np.savez_compressed(outfile, db=self.db)

    def load_db(self, infile):
        with np.load(infile) as data:
            arr = data['db']
        if arr.shape != (self.size,):
            raise ValueError('stored db has shape {0}, expected ({1:d},)'.format(arr.shape, self.size))
        # a cast to uint8 would wrap bad values around to small distances
        if not np.issubdtype(arr.dtype, np.unsignedinteger):
            raise ValueError('stored db has dtype {0}, expected unsigned integers'.format(arr.dtype))
        if arr.size and int(arr.max()) > self.SENTINEL:
            raise ValueError('stored db has value {0:d} above {1:d}'.format(int(arr.max()), self.SENTINEL))
        np.copyto(self.db, arr.astype(np.uint8))
        self.status = COMPLETE
        return self


# Worker side of the level parallel build
#  module level so the Pool can find it
_worker_ctx = {}


def _init_worker(encoding, model, shDB):
    _worker_ctx['encoding'] = encoding
    _worker_ctx['model'] = model
    _worker_ctx['db'] = np.frombuffer(shDB, dtype=np.uint8)


def _expand_chunk(states):
    index_for = _worker_ctx['encoding'].index_for
    apply = _worker_ctx['model'].apply
    moves = _worker_ctx['model'].moves
    db = _worker_ctx['db']
    seen = set()
    out = []
    for curfc in states:
        for mv in moves:
            newfc = apply(curfc, mv)
            statecode = index_for(newfc)
            # the table is frozen while the level runs
            if statecode not in seen and db[statecode] == pattern_db.SENTINEL:
                seen.add(statecode)
                out.append((statecode, newfc))
    return out


def combined_distance(dbs, state):
    # The max of admissible heuristics is still admissible
    dbs = list(dbs)
    if not dbs:
        raise ValueError('combined_distance needs at least one pattern db')
    return max(db.distance(state) for db in dbs)

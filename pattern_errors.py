#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan  2 11:05:40 2021

Exceptions raised by the lehmer code indexer and the pattern databases
"""


class PatternDBError(Exception):
    pass


# Indexer was given a tuple with a repeated or out of range symbol,
#  or an index outside of the rank range
class InvalidPermutation(PatternDBError, ValueError):
    pass


class UnpopulatedIndex(PatternDBError, LookupError):
    """Distance requested for an index the build never reached.
    Means 'no bound known'. Never treat it as 0 (solved)."""

    def __init__(self, index, msg=None):
        self.index = index
        if msg is None:
            msg = 'no distance stored for index {0:d}'.format(index)
        super().__init__(msg)


# Build was cancelled or failed partway, or a lookup hit such a table
class ConstructionInterrupted(PatternDBError, RuntimeError):
    pass


# Distance does not fit the uint8 table width
class DistanceOverflow(PatternDBError, OverflowError):
    pass

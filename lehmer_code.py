#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Nov 30 18:53:52 2020

Lehmer code (factorial number system) ranking of permutations.
  lehmer_code(n) ranks full permutations of the symbols 0..n-1 into [0, n!)
  lehmer_code(n, k) ranks k-permutations (n pick k) into [0, n!/(n-k)!)
Based on Ben Botto Blog post
https://medium.com/@benjamin.botto/implementing-an-optimal-rubiks-cube-solver-using-korf-s-algorithm-bf750b332cf9
"""
import math
import numpy as np
from pattern_errors import InvalidPermutation


class lehmer_code():
    MAXN = 12

    def __init__(self, n, k=None):
        # Build factorial or pick function table
        # n [int] - item size
        # k [int] - number selected from items
        if k is None:
            k = n
        if n < 0 or k < 0:
            raise ValueError('lehmer code needs n >= 0 and k >= 0')
        if n > self.MAXN:
            raise ValueError('lehmer code cannot handle n > {0:d}. '
                             'Increase np.uint sizes if you want larger n'.format(self.MAXN))
        if k > n:
            raise ValueError('cannot pick k={0:d} from n={1:d} items'.format(k, n))

        self.n = n
        self.k = k
        # Build the factorial and n pick k functions ahead of time
        #  in reverse order, useFacts[i] = (n-i-1)! / (n-k)!
        #  for n == k this reduces to the plain factorials
        self.useFacts = np.zeros((k,), dtype=np.uint64)
        for i in range(k):
            self.useFacts[i] = math.factorial(n-i-1) // math.factorial(n-k)
        self.size = math.factorial(n) // math.factorial(n-k)
        # Build count seen lookup table
        #  countbits[i] is the number of set bits in i
        lrgInt = 2 ** n
        self.countbits = np.zeros((lrgInt,), dtype=np.int8)
        for i in range(lrgInt):
            self.countbits[i] = bin(i).count("1")
        # plain int copies for the per call loops
        self._facts = [int(x) for x in self.useFacts]
        self._counts = self.countbits.tolist()

    def check(self, p):
        # Fail fast on anything that is not k distinct symbols from 0..n-1
        if len(p) != self.k:
            raise InvalidPermutation('expected {0:d} symbols, got {1:d}'.format(self.k, len(p)))
        seen = 0
        for s in p:
            s = int(s)
            if s < 0 or s >= self.n:
                raise InvalidPermutation('symbol {0:d} outside alphabet 0..{1:d}'.format(s, self.n - 1))
            bit = 1 << s
            if seen & bit:
                raise InvalidPermutation('symbol {0:d} repeats in {1}'.format(s, tuple(p)))
            seen |= bit

    def encode(self, p):
        self.check(p)
        n = self.n
        counts = self._counts
        idx = 0
        # seen has a bit set at position n-s-1 for each symbol s placed so far
        #  so shifting right by n-s leaves only the placed symbols smaller than s
        seen = 0
        for i in range(self.k):
            s = int(p[i])
            numOnes = counts[seen >> (n - s)]
            seen = seen | (1 << (n - s - 1))
            idx += (s - numOnes) * self._facts[i]
        return idx

    def decode(self, idx):
        idx = int(idx)
        if idx < 0 or idx >= self.size:
            raise InvalidPermutation('index {0:d} outside [0, {1:d})'.format(idx, self.size))
        # Peel off the lehmer digits with the descending place values
        #  then pick the digit-th symbol not yet used
        remaining = list(range(self.n))
        out = []
        for i in range(self.k):
            digit, idx = divmod(idx, self._facts[i])
            out.append(remaining.pop(digit))
        return tuple(out)


if __name__ == '__main__':

    lc = lehmer_code(8)
    lcidx = lc.encode([7, 6, 5, 4, 3, 2, 1, 0])
    print(lcidx, lc.decode(lcidx))

    lc = lehmer_code(4, 2)
    lcidx = lc.encode([0, 2])
    print(lcidx, lc.decode(lcidx))

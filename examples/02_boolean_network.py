"""
A random boolean network. Every bit has two neighbour bits and an operation, all picked at
random; each step sets every bit to its operation applied to its neighbours' previous values.
"""

import operator
import random
from collections.abc import Callable

from densebits import BitArray

OPERATIONS: list[Callable[[int, int], int]] = [operator.and_, operator.or_, operator.xor]


class BooleanNetwork:
    def __init__(self, size: int = 80) -> None:
        self.size = size
        self.state = BitArray([random.getrandbits(1) for _ in range(size)])
        self._rules = [
            (random.choice(OPERATIONS), random.randrange(size), random.randrange(size))
            for _ in range(size)
        ]

    def step(self) -> BitArray:
        old = self.state.copy()
        for idx, (op, left, right) in enumerate(self._rules):
            self.state[idx] = op(old[left], old[right])

        return self.state

    def run(self, steps: int = 23) -> None:
        print(self.state)
        for _ in range(steps):
            print(self.step())


if __name__ == "__main__":
    BooleanNetwork().run()

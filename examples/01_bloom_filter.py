"""
A Bloom filter built on a BitArray. Loads a word list and answers membership queries.

Parameters for a dictionary of ~100k words at a false positive rate of 0.001: about 1.4 million
bits and 10 hash functions.
"""

import hashlib
import sys

import anyio
from anyio import to_thread

from densebits import BitArray


class BloomFilter:
    def __init__(self, size: int = 1_000_000, hashes: int = 3) -> None:
        self.size = size
        self.hashes = max(hashes, 3)
        self.bits = BitArray(size)

    def _indices(self, item: str) -> list[int]:
        # Kirsch-Mitzenmacher: derive every index from two base hashes.
        digest = hashlib.sha1(item.encode("utf-8")).digest()
        h1 = int.from_bytes(digest[:8], "big") % self.size
        h2 = int.from_bytes(digest[8:16], "big") % self.size
        return [(h1 + i * h2) % self.size for i in range(self.hashes)]

    def add(self, item: str) -> None:
        for idx in self._indices(item):
            self.bits.set_bit(idx)

    def __contains__(self, item: str) -> bool:
        return all(self.bits[idx] for idx in self._indices(item))


async def main(path: str) -> None:
    bf = BloomFilter(1_417_185, 10)

    print("Loading dictionary...")
    content = await anyio.Path(path).read_text(encoding="utf-8")
    for word in content.splitlines():
        bf.add(word.strip())

    print(f"done, {bf.bits.total_set()} bits set")
    print("Enter words to look up, ctrl-d to quit.")

    while True:
        try:
            word = await to_thread.run_sync(input, "Word: ")
        except EOFError:
            print()
            return

        print("In dictionary:", word.strip() in bf)


if __name__ == "__main__":
    anyio.run(main, sys.argv[1] if len(sys.argv) > 1 else "/usr/share/dict/words")

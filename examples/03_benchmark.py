import random
import timeit

from densebits import BitArray

N = 10_000


def report(name: str, stmt: str, **names: object) -> None:
    scope = {"BitArray": BitArray, "random": random, **names}
    taken = timeit.timeit(stmt, number=N, globals=scope)
    print(f"{name:<30}{taken:.4f}s")


def main() -> None:
    report("initialize", "BitArray(256)")
    report("init from string", "BitArray(s)", s="0" * 256)
    report("init from list", "BitArray(a)", a=[0] * 256)

    ba = BitArray(256)
    report("[]", "ba[random.randrange(256)]", ba=ba)
    report("[]=", "ba[random.randrange(256)] = random.getrandbits(1)", ba=ba)
    report("iterate", "for _ in ba: pass", ba=ba)
    report("str", "str(ba)", ba=ba)
    report("to_list", "ba.to_list()", ba=ba)

    ba = BitArray(256)
    report("total_set (none)", "ba.total_set()", ba=ba)
    ba.set_all_bits()
    report("total_set (all)", "ba.total_set()", ba=ba)

    report("set_all_bits", "ba.set_all_bits()", ba=ba)
    report("clear_all_bits", "ba.clear_all_bits()", ba=ba)
    report("toggle_bit", "ba.toggle_bit(1)", ba=ba)
    report("toggle_all_bits", "ba.toggle_all_bits()", ba=ba)
    report("copy", "ba.copy()", ba=ba)
    report("slice (begin, length)", "ba[17, 230]", ba=ba)
    report("slice (range)", "ba[17:248]", ba=ba)

    ba.set_all_bits()
    report("+ (256, all set)", "ba + ba", ba=ba)
    ba2 = BitArray(240).set_all_bits()
    report("+ (240, all set)", "ba + ba", ba=ba2)


if __name__ == "__main__":
    main()

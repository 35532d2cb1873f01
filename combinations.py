import argparse
import sys
from typing import Iterator

from notation import ConfigurationError


def choose(chars: str, k: int) -> Iterator[str]:
    """Yield every k-subset of ``chars``.

    Subsets come in co-lexicographic order of their index sets and each one
    is spelled with its highest index first: ``choose("abcd", 2)`` gives
    ba, ca, cb, da, db, dc.
    """
    if k < 0:
        raise ConfigurationError(f"k must not be negative, got {k}")
    n = len(chars)
    if k > n:
        return
    comb = list(range(k)) # 升序下标
    while True:
        yield "".join(chars[i] for i in reversed(comb))
        j = 0 # 找到最低的、还能加一的位置
        while j < k and comb[j] + 1 == (comb[j + 1] if j + 1 < k else n):
            j += 1
        if j == k:
            return
        comb[j] += 1
        comb[:j] = range(j)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="combinations", description="Print every k-subset of CHARS.")
    parser.add_argument("chars")
    parser.add_argument("k", type=int)
    args = parser.parse_args(argv)
    try:
        for comb in choose(args.chars, args.k):
            print(comb)
    except ConfigurationError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())

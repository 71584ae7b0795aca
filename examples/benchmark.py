"""
Timing of squared products in the symmetric group algebra.
"""

import time

from gl_crystals import SYM, algebra_mul, algebra_part

CASES = [(2, 2), (3, 2, 1), (4, 3, 3), (4, 3, 2, 1)]


def bench(part, repeat=3):
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        result = algebra_mul(SYM, algebra_part(part), algebra_part(part))
        best = min(best, time.perf_counter() - start)
    return best, len(result)


if __name__ == "__main__":
    for part in CASES:
        seconds, terms = bench(part)
        print(f"{list(part)} * {list(part)} in Sym: {seconds * 1000:.1f} ms, {terms} terms")

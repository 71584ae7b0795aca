"""
Demonstration of the GL Crystals package

This script walks through the pieces that make up a tensor product
decomposition:
1. Highest-weight words and lattice words
2. Walking a crystal and checking it against the dimension formula
3. Decomposing products in GL(n) and in the symmetric groups
"""

from gl_crystals import (
    SYM,
    AlgebraType,
    Crystal,
    algebra_string,
    evaluate,
    is_lattice_word,
    partition_to_hw,
    tensor_partitions,
)


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_lattice_words():
    print_section("STEP 1: Highest-Weight Words")

    for part in [(1,), (2, 1), (4, 2, 1)]:
        word = partition_to_hw(part)
        print(f"  {list(part)} -> {list(word)}  lattice word: {is_lattice_word(word)}")

    for word in [(1, 1, 2, 3, 1), (1, 2, 2)]:
        print(f"  {list(word)} lattice word: {is_lattice_word(word)}")


def demonstrate_crystal():
    print_section("STEP 2: Walking a Crystal")

    crystal = Crystal.from_partition(3, (2, 1))
    for vertex in crystal:
        print(f"  {list(vertex)}")

    summary = crystal.get_crystal_summary()
    print(f"\n  Vertices walked: {summary['vertices']}")
    print(f"  Hook length formula: {summary['dimension']}")
    print(f"  Deepest path: {summary['max_depth']}")


def demonstrate_products():
    print_section("STEP 3: Tensor Products")

    print(f"  [2, 1] x [2, 1] in GL(3): {sorted(tensor_partitions(3, (2, 1), (2, 1)), reverse=True)}")

    for algebra_type, text in [
        (AlgebraType.gl(2), "[1]^3"),
        (AlgebraType.gl(3), "[2, 1]^2"),
        (SYM, "[2, 1] * [1] + 2"),
    ]:
        print(f"  {text} in {algebra_type}: {algebra_string(evaluate(algebra_type, text))}")


if __name__ == "__main__":
    demonstrate_lattice_words()
    demonstrate_crystal()
    demonstrate_products()

import logging

import numpy as np

from ordered_map import (
    OrderedTree,
    ascending_keys,
    shuffled_keys,
    level_order_keys,
    build_tree,
    height_profile,
)

EXAMPLE_KEYS = [5, 3, 8, 1, 4, 7, 9]
PROFILE_SIZES = [15, 63, 255]
PROFILE_SEEDS = range(32)


def display_tree(tree: OrderedTree):
    print(tree.pretty_print_keys(), end="")
    print("in order: " + tree.print_keys_in_order())
    print(
        "size={} height={} median={}".format(
            tree.size(), tree.height(), tree.median()
        )
    )

    ranks = ", ".join("{}:{}".format(k, tree.rank(k)) for k in tree.keys())
    print("ranks: " + ranks)


def display_profiles():
    header_1 = "    N | ascending | level order | shuffled (min/mean/max)"
    header_2 = "------|-----------|-------------|-----------------------"
    print(header_1 + "\n" + header_2)

    for n in PROFILE_SIZES:
        asc = build_tree(ascending_keys(n)).height()
        level = build_tree(level_order_keys(n)).height()
        heights = height_profile(n, PROFILE_SEEDS)

        print(
            "{:>5d} | {:>9d} | {:>11d} | {:>3d} / {:>5.1f} / {:>3d}".format(
                n,
                asc,
                level,
                int(heights.min()),
                np.mean(heights),
                int(heights.max()),
            )
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    tree = OrderedTree()
    for k in EXAMPLE_KEYS:
        tree.put(k, "value-" + str(k))

    print("Example tree:")
    display_tree(tree)

    print("\nAfter deleting 5:")
    tree.delete(5)
    display_tree(tree)
    print("value now stored under 4: {}".format(tree[4]))

    print("\nRandom insertion order (seed 0):")
    display_tree(build_tree(shuffled_keys(10, 0)))

    print("\nHeight by insertion order:")
    display_profiles()

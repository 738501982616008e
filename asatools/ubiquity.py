"""Random toy-factory instances: toys with profits and capacities, and packs.

Each toy has a profit and a maximum production capacity. Each pack combines
three distinct toys and sells for about the sum of their profits, slightly
above or below depending on the share of packs meant to be worthwhile. The
factory's total capacity is drawn between 86% and 95% of the toys' summed
capacities.
"""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field

PACK_SIZE = 3


@dataclass
class Instance:
    """A generated instance; toys and packs refer to toys by 1-based number."""

    capacity: int
    toys: list[tuple[int, int]] = field(default_factory=list)
    packs: list[tuple[int, int, int, int]] = field(default_factory=list)


def _validate(
    toys: int, packs: int, min_capacity: int, max_capacity: int,
    max_profit: int, valid_percent: int,
) -> None:
    if toys < 0 or packs < 0:
        raise ValueError("numbers of toys and packs must not be negative")
    if packs > toys:
        raise ValueError("Packs cannot be greater than toys")
    if packs > 0 and toys < PACK_SIZE:
        raise ValueError(f"packs need at least {PACK_SIZE} toys")
    if min_capacity > max_capacity:
        raise ValueError("Toy min capacity cannot be greater than max capacity")
    if max_profit < 0:
        raise ValueError(f"toy max profit must not be negative: {max_profit}")
    if not 0 <= valid_percent <= 100:
        raise ValueError("Pok must be between [0, 100]")


def generate_instance(
    toys: int,
    packs: int,
    min_capacity: int,
    max_capacity: int,
    max_profit: int,
    valid_percent: int,
    rng: random.Random | None = None,
) -> Instance:
    """Generate a random instance with ``toys`` toys and ``packs`` packs."""
    _validate(toys, packs, min_capacity, max_capacity, max_profit, valid_percent)
    rng = rng if rng is not None else random.Random()

    toy_list = []
    for _ in range(toys):
        profit = rng.randrange(max_profit + 1)
        capacity = rng.randrange(max_capacity - min_capacity + 1) + min_capacity
        toy_list.append((profit, capacity))

    total = sum(capacity for _, capacity in toy_list)
    capacity = int(total * (95 - rng.randrange(10)) / 100)

    ids = list(range(1, toys + 1))
    pack_list = []
    for _ in range(packs):
        rng.shuffle(ids)
        chosen = ids[:PACK_SIZE]
        profit = int(sum(toy_list[i - 1][0] for i in chosen) * 1.1)
        if rng.randrange(101) > valid_percent:
            profit = int(profit * 0.9)
        else:
            profit = int(profit * 1.1)
        pack_list.append((chosen[0], chosen[1], chosen[2], profit))

    return Instance(capacity, toy_list, pack_list)


def format_instance(instance: Instance) -> str:
    """Render ``T P capacity``, a ``profit capacity`` line per toy, then packs."""
    lines = [f"{len(instance.toys)} {len(instance.packs)} {instance.capacity}"]
    lines.extend(f"{profit} {capacity}" for profit, capacity in instance.toys)
    lines.extend(" ".join(map(str, pack)) for pack in instance.packs)
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Generate an instance from command-line parameters and print it."""
    parser = argparse.ArgumentParser(description="Generate a random toy-factory instance.")
    parser.add_argument("T", type=int, help="number of toys")
    parser.add_argument("P", type=int, help="number of packs")
    parser.add_argument("Tcmin", type=int, help="toy min capacity")
    parser.add_argument("Tcmax", type=int, help="toy max capacity")
    parser.add_argument("Tlmax", type=int, help="toy max profit")
    parser.add_argument("Pok", type=int, help="percentage of valid packs [0,100]")
    parser.add_argument("seed", type=int, nargs="?", help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    try:
        instance = generate_instance(
            args.T, args.P, args.Tcmin, args.Tcmax, args.Tlmax, args.Pok, rng
        )
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(format_instance(instance))
    return 0


if __name__ == "__main__":
    sys.exit(main())
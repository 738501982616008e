# asatools

Small algorithm tools: two solvers and two random instance generators.

- **asa-marble** prints the highest total price obtainable by cutting a marble
  slab into priced pieces. Every cut runs straight across the whole slab,
  vertically or horizontally, and a piece may be rotated by a quarter turn.
- **asa-spread** prints the largest number of jumps a disease can make through
  a network of directed contacts. Individuals who reach each other in both
  directions form one group; moving inside a group costs no jump.
- **asa-gen-tuganet** prints a random social network made of disconnected
  sub-networks, in the input format of `asa-spread`.
- **asa-gen-ubiquity** prints a random toy-factory instance: toys with profits
  and capacities, and packs of three toys.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Solvers

Both solvers read standard input and print one integer. If the input is not
made of integers, is missing values, or describes an impossible case (such as
a negative slab size or a vertex number outside the network), they print a
message starting with `error:` to standard error and exit with status 1.

### Marble slab

Input: the slab's width and height, the number of pieces, then `x y price`
for each piece. Pieces with a non-positive size or price, or that fit the slab
in neither orientation, are ignored.

```
$ printf '1 1\n1\n1 1 7\n' | asa-marble
7
```

### Disease spread

Input: the number of individuals and the number of connections, then `u v`
for each connection, meaning `u` can infect `v`. Individuals are numbered
from 1.

```
$ printf '4 3\n1 2\n2 3\n3 4\n' | asa-spread
3
```

## Generators

```
asa-gen-tuganet V E SubN [m [M [seed]]]
asa-gen-ubiquity T P Tcmin Tcmax Tlmax Pok [seed]
```

`asa-gen-tuganet` prints `V E` followed by one `u v` line per connection.
The `V` individuals are split into `SubN` sub-networks of between `m`
(default 1) and `M` (default 10) individuals. Each sub-network is first made
connected as a cycle, a line or a tree; random connections inside
sub-networks are then added until `E` is reached or free pairs become too
hard to find, so the printed count may differ from `E`. Identifiers are
shuffled before printing.

`asa-gen-ubiquity` prints `T P capacity`, one `profit capacity` line per toy,
then one `a b c profit` line per pack of three distinct toys. Toy capacities
lie between `Tcmin` and `Tcmax`, profits between 0 and `Tlmax`. A pack sells
for about the sum of its toys' profits, a little above for roughly `Pok`
percent of packs and a little below otherwise. The total capacity is drawn
between 86% and 95% of the toys' summed capacities.

Given a seed, a generator's output is reproducible; without one, a fresh
random source is used. Invalid parameters (for example `SubN` greater than
`V`, `m` greater than `M`, `P` greater than `T`, or `Pok` outside 0..100)
print a message starting with `ERROR:` and exit with status 1.

## Library use

```python
import random

from asatools.marble import max_slab_value, parse_input
from asatools.spread import max_jumps, parse_graph
from asatools.tuganet import generate_network, format_network
from asatools.ubiquity import generate_instance, format_instance

max_slab_value(1, 1, [(1, 1, 7)])          # 7
max_jumps(3, [(1, 2), (2, 1), (2, 3)])    # 1

network = generate_network(20, 30, 4, 2, 8, random.Random(1))
print(format_network(network))

instance = generate_instance(10, 5, 1, 10, 20, 50, random.Random(1))
print(format_instance(instance))
```

`marble.build_price_table` returns the table of best single-piece prices per
size. `parse_input` and `parse_graph` turn solver input text into arguments
for `max_slab_value` and `max_jumps`, raising `ValueError` on bad input; the
solvers and generators raise `ValueError` for invalid parameters as well.
`Network` holds `vertex_count`, `edges` and `edge_count`; `Instance` holds
`capacity`, `toys` and `packs`.

## What this package does not do

There is no solver for the toy-factory instances that `asa-gen-ubiquity`
produces; the package only generates and prints them.
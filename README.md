# roadnet

Small, dependency-free building blocks for working with road network data:
compact containers, binary serialisation, OD-pair import, road categories,
per-edge attributes and a handful of parsing and math helpers.

## Modules

- `roadnet.constants`: `INFTY`, the invalid-id markers (`INVALID_ID`,
  `INVALID_VERTEX`, `INVALID_EDGE`, …), `EARTH_RADIUS`, the `RoadDirection`
  enum and the helpers `to_radians`, `to_degrees`, `minmax` and `signum`.
- `roadnet.bitwise`: bit helpers on non-negative integers (`get_bit`,
  `set_bit`, `bit_count`, `bit_count_before_index`, `num_leading_zeros`,
  `num_trailing_zeros`, `highest_one_bit`, `lowest_one_bit`,
  `highest_differing_bit`).
- `roadnet.strings`: `is_whitespace`, `trim`, `to_lower_case`,
  `to_upper_case`, `lexical_cast` and `contains`.
- `roadnet.dates`: `DayOfWeek`, `parse_time`, `parse_day_of_week` (English
  and German, full and short names) and `seconds_since_mon_midnight`.
- `roadnet.timer`: `Timer`, a monotonic stopwatch with `elapsed(unit)` and
  `restart()`. Units are `"ns"`, `"us"`, `"ms"`, `"s"`, `"min"` and `"h"`.
- `roadnet.progress`: `ProgressBar`, which prints `0% .... 20% ....` style
  progress to a stream.
- `roadnet.cli`: `CommandLineParser` for options of the form
  `-name [value ...]`.
- `roadnet.binary_io`: reading and writing scalars, null-terminated strings,
  count-prefixed arrays and bit sequences in little-endian binary form, plus
  the matching `size_of_*` functions.
- `roadnet.bit_vector`: `BitVector`, a fixed-size vector of bits in 64-bit
  blocks with `first_set_bit` and `next_set_bit`.
- `roadnet.local_id_map`: `LocalIdMap` (over a `BitVector`) and
  `ConcurrentLocalIdMap` (over a sequence of 0/1 integers), which map the
  selected global IDs onto sequential local IDs, keeping their order.
- `roadnet.permutation`: `Permutation`, with `inverse`, `invert`,
  `apply_to`, `random` and binary `read_from` / `write_to`.
- `roadnet.point`: an immutable integer `Point` with vector addition,
  subtraction, dot product and Manhattan, Euclidean and Chebyshev distances.
- `roadnet.origin_destination`: `OriginDestination`,
  `ClusteredOriginDestination` and the CSV readers `import_od_pairs` and
  `import_clustered_od_pairs`.
- `roadnet.bisection`: `bisection_method`, a line search on the derivative of
  a ditonic function.
- `roadnet.road_categories`: `OsmRoadCategory`, `XatfRoadCategory`,
  `EnumParser` and `parse_osm_road_category`.
- `roadnet.attributes`: `Attribute` descriptors with their defaults
  (`TRAVEL_TIME`, `LENGTH`, `CAPACITY`, `UNPACKING_INFO`, …, all collected
  in `ATTRIBUTES`), `bit_attribute`, and `AttributeValues`, the storage of one
  attribute's values.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Times and days:

```python
from roadnet.dates import DayOfWeek, parse_day_of_week, parse_time, seconds_since_mon_midnight

parse_time("10:15:30")                          # 36930
parse_day_of_week("Di") is DayOfWeek.TUESDAY    # True
seconds_since_mon_midnight("Tue", "10:15:30")   # 123330
```

Bit vectors and local IDs:

```python
from roadnet.bit_vector import BitVector
from roadnet.local_id_map import LocalIdMap

bits = BitVector(100)
bits[3] = True
bits[70] = True
bits.first_set_bit()      # 3
bits.next_set_bit(3)      # 70

ids = LocalIdMap(bits)
ids.num_local_ids()       # 2
ids.to_local_id(70)       # 1
```

Permutations and binary storage:

```python
import io
from roadnet.permutation import Permutation

perm = Permutation([2, 0, 1])
perm.apply_to(["a", "b", "c"])   # ['b', 'c', 'a']
perm.inverse()                   # Permutation([1, 2, 0])

buf = io.BytesIO()
perm.write_to(buf)
buf.seek(0)
Permutation.read_from(buf) == perm   # True
```

Command-line options:

```python
from roadnet.cli import CommandLineParser

clp = CommandLineParser(["-n", "5", "-g", "graph.bin", "-v"])
clp.get_value("n", cast=int)    # 5
clp.get_value("d", 30, int)     # 30 (not given)
clp.is_set("v")                 # True
```

Line search for the minimum of a convex function, given its derivative:

```python
from roadnet.bisection import bisection_method

tau = bisection_method(lambda x: 2 * (x - 0.25), 0.0, 1.0)
# tau is 0.25 up to the tolerance
```

Road categories and attribute defaults:

```python
from roadnet.attributes import TRAVEL_TIME, AttributeValues
from roadnet.constants import INFTY
from roadnet.road_categories import OsmRoadCategory, parse_osm_road_category

parse_osm_road_category("motorway_link") is OsmRoadCategory.MOTORWAY_LINK  # True
str(OsmRoadCategory.LIVING_STREET)                                         # 'living_street'

times = AttributeValues(TRAVEL_TIME, 3)
times[0] == INFTY   # True
```

## Errors

Problems are reported by raising. Malformed times, unknown day names or road
categories, unparsable numbers and malformed OD files raise `ValueError`;
`lexical_cast` raises `OverflowError` for integers outside the 32-bit range;
out-of-range indices raise `IndexError`; asking a local ID map for an
unmapped ID raises `KeyError`; truncated binary input raises `EOFError`.

## What this package does not do

There is no graph class, no graph traversal and no shortest-path or traffic
assignment algorithm here: the package supplies the pieces such code is built
from (attributes, containers, OD-pairs, the bisection line search), not the
routing itself. It also installs no commands; `CommandLineParser` and
`ProgressBar` are meant for your own scripts.
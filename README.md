# algonotes

A collection of classic algorithms and data structures in plain Python, with no
dependencies outside the standard library.

## Installation

```
pip install algonotes
```

To run the test suite:

```
pip install "algonotes[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.geometry` | 2D primitives on complex numbers: `cross`, `dot`, `rotate`, `reflect`, `Line`, `Circle`, line and segment intersection, point–line and point–segment distances, circle–line and circle–circle intersection, tangent points, triangle areas, sine and cosine rules, great-circle distance, diamond (45°) grid rotation |
| `algonotes.polygons` | Polygon area and centroid, lattice points by Pick's theorem, polygon cutting by a line, convex polygon intersection, Voronoi cells, two point-in-polygon tests, monotone-chain and Graham convex hulls, angular sort, closest pair, minimum enclosing circle |
| `algonotes.numtheory` | Extended GCD, modular inverse, linear congruences, linear Diophantine equations, Chinese remainder theorem (coprime and general moduli), sieve and prime listing, factoring and factor tables, Euler phi, Möbius and divisor tables, discrete logarithm (baby-step giant-step), primitive roots, discrete roots, continued fractions, modular matrix power, Fibonacci sums, prime power in `n!`, Lucas' theorem |
| `algonotes.combinatorics` | Catalan numbers, derangements, subset and submask enumeration, ranking and unranking of combinations and k-permutations, Josephus problem, Nim and greedy Nim moves, Floyd cycle detection, ternary and binary search |
| `algonotes.linalg` | Determinant, Gaussian elimination, radix-2 FFT, `TableauSimplex`, `revised_simplex`, `two_phase_simplex` |
| `algonotes.strings` | KMP, Z-function, Manacher, Rabin–Karp, `Trie`, `AhoCorasick`, `PalindromicTree`, suffix array and LCP array |
| `algonotes.grammar` | Conversion of rules such as `"S -> aSb \| ab"` to Chomsky normal form (`to_cnf`) and CYK parsing (`cyk`) |
| `algonotes.graphs` | Tarjan SCC, 2-SAT, articulation points and bridges, Bellman–Ford, Euler paths, `HeavyLight` decomposition with LCA |
| `algonotes.flows` | `Dinic`, `EdmondsKarp`, `MinCostMaxFlow`, maximum bipartite matching, stable marriage |
| `algonotes.fenwick` | `FenwickTree`, `RangeUpdatePointQuery`, `RangeUpdateRangeQuery`, `FenwickTree2D` (all 1-based) |
| `algonotes.treap` | Order-statistic `Treap` of distinct keys |

Points are Python `complex` numbers throughout the geometry modules. Functions
that have no answer for their input raise `ValueError` (for example
`mod_inverse` of a non-invertible value, or `chinese_remainder` on inconsistent
congruences); out-of-range positions in the Fenwick trees and the treap raise
`IndexError`.

## Examples

```python
from algonotes.geometry import Line, intersect_lines
from algonotes.polygons import convex_hull, polygon_area
from algonotes.numtheory import chinese_remainder, mod_inverse
from algonotes.strings import kmp_search
from algonotes.flows import Dinic

# Where two lines cross
hit = intersect_lines(Line(0j, 2 + 2j), Line(2j, 2 + 0j))   # (1+1j)

# Hull and area of a point set; the hull is a closed ring
hull = convex_hull([0j, 2 + 0j, 2 + 2j, 0 + 2j, 1 + 1j])
# [0j, (2+0j), (2+2j), 2j, 0j]
area = polygon_area(hull)                                   # 4.0

# Number theory
inv = mod_inverse(3, 7)                                     # 5
x = chinese_remainder([2, 3], [3, 5])                       # 8

# Pattern matching
positions = kmp_search("abababa", "aba")                    # [0, 2, 4]

# Maximum flow
net = Dinic(4)
net.add_edge(0, 1, 3, 0)
net.add_edge(1, 3, 2, 0)
net.add_edge(0, 2, 2, 0)
net.add_edge(2, 3, 3, 0)
flow = net.max_flow(0, 3)                                   # 4
```

The randomised `Treap` and `minimum_enclosing_circle` take a `random.Random`
instance, so you can seed them for reproducible results:

```python
import random
from algonotes.treap import Treap

t = Treap(random.Random(42))
for k in (5, 1, 9, 3):
    t.insert(k)
t.kth(0)      # 1
t.count(5)    # keys smaller than 5 -> 2
len(t)        # 4
```

## Scope

This is a library only: it has no command-line tool. Among range-query
structures it offers Fenwick trees and the treap; it does not include a
union-find, sparse table, segment tree, square-root decomposition, monotonic
queue, convex-hull-trick envelope or skip list.
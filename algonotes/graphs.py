"""Graph algorithms: strongly connected components, 2-SAT, cut vertices,
shortest paths with negative weights, Euler paths and heavy-light decomposition."""

from __future__ import annotations

import math
from collections import Counter, defaultdict


def tarjan_scc(adj):
    """Strongly connected components of a directed graph given as adjacency lists.

    Components come out in reverse topological order: a component is listed
    before every component that has an edge into it.
    """
    n = len(adj)
    num = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack = []
    sccs = []
    counter = 0
    for root in range(n):
        if num[root] != -1:
            continue
        num[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        work = [(root, 0)]
        while work:
            u, i = work[-1]
            if i < len(adj[u]):
                work[-1] = (u, i + 1)
                v = adj[u][i]
                if num[v] == -1:
                    num[v] = low[v] = counter
                    counter += 1
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, 0))
                elif on_stack[v]:
                    low[u] = min(low[u], low[v])
                continue
            work.pop()
            if low[u] == num[u]:
                component = []
                while True:
                    v = stack.pop()
                    on_stack[v] = False
                    component.append(v)
                    if v == u:
                        break
                sccs.append(component)
            if work:
                p = work[-1][0]
                if on_stack[u]:
                    low[p] = min(low[p], low[u])
    return sccs


def _literal_node(lit, n):
    var = lit if lit >= 0 else ~lit
    if var >= n:
        raise ValueError(f"literal {lit} refers to a variable outside range({n})")
    return 2 * var if lit >= 0 else 2 * var + 1


def two_sat(n, clauses):
    """Satisfy a conjunction of two-literal clauses over ``n`` variables.

    A literal ``i`` stands for variable ``i`` and ``~i`` for its negation; each
    clause ``(a, b)`` means ``a or b``. Returns one assignment as a list of
    booleans, or None when the formula cannot be satisfied.
    """
    adj = [[] for _ in range(2 * n)]
    for a, b in clauses:
        x, y = _literal_node(a, n), _literal_node(b, n)
        adj[x ^ 1].append(y)
        adj[y ^ 1].append(x)
    sccs = tarjan_scc(adj)
    comp = [0] * (2 * n)
    for idx, component in enumerate(sccs):
        for v in component:
            comp[v] = idx
    if any(comp[2 * i] == comp[2 * i + 1] for i in range(n)):
        return None
    values = [None] * (2 * n)
    for component in sccs:
        for v in component:
            if values[v] is None:
                values[v] = True
                values[v ^ 1] = False
    return [values[2 * i] for i in range(n)]


def articulation_points_and_bridges(adj):
    """Cut vertices and bridges of an undirected graph.

    Returns ``(points, bridges)``: the articulation points in ascending order
    and the bridges as ``(u, v)`` pairs in the order they were found.
    """
    n = len(adj)
    num = [-1] * n
    low = [0] * n
    parent = [-1] * n
    articulation = [False] * n
    bridges = []
    counter = 0
    for root in range(n):
        if num[root] != -1:
            continue
        root_children = 0
        num[root] = low[root] = counter
        counter += 1
        work = [(root, 0)]
        while work:
            u, i = work[-1]
            if i < len(adj[u]):
                work[-1] = (u, i + 1)
                v = adj[u][i]
                if num[v] == -1:
                    parent[v] = u
                    if u == root:
                        root_children += 1
                    num[v] = low[v] = counter
                    counter += 1
                    work.append((v, 0))
                elif v != parent[u]:
                    low[u] = min(low[u], num[v])
                continue
            work.pop()
            if work:
                p = work[-1][0]
                if low[u] >= num[p]:
                    articulation[p] = True
                if low[u] > num[p]:
                    bridges.append((p, u))
                low[p] = min(low[p], low[u])
        articulation[root] = root_children > 1
    return [v for v in range(n) if articulation[v]], bridges


def bellman_ford(adj, source):
    """Shortest distances from ``source``; ``adj[u]`` lists ``(v, weight)`` pairs.

    Returns ``(dist, has_negative_cycle)``; unreachable vertices are at ``inf``.
    """
    n = len(adj)
    dist = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for u, edges in enumerate(adj):
            if dist[u] == math.inf:
                continue
            for v, w in edges:
                if dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
                    changed = True
        if not changed:
            break
    has_negative_cycle = any(
        dist[u] + w < dist[v]
        for u, edges in enumerate(adj)
        if dist[u] != math.inf
        for v, w in edges
    )
    return dist, has_negative_cycle


def euler_path(edges):
    """Euler path or circuit through every undirected edge, as a vertex list.

    The walk starts at the smallest vertex of odd degree, or at the smallest
    vertex when all degrees are even, and prefers smaller neighbours. Raises
    ValueError when no such walk exists.
    """
    edges = list(edges)
    if not edges:
        return []
    count = defaultdict(Counter)
    degree = Counter()
    for u, v in edges:
        count[u][v] += 1
        count[v][u] += 1
        degree[u] += 1
        degree[v] += 1
    odd = sorted(v for v, d in degree.items() if d % 2)
    if len(odd) not in (0, 2):
        raise ValueError("more than two vertices have odd degree")
    neighbours = {u: sorted(c) for u, c in count.items()}
    pointer = dict.fromkeys(neighbours, 0)
    start = odd[0] if odd else min(degree)
    stack = [start]
    path = []
    while stack:
        u = stack[-1]
        nbrs = neighbours[u]
        while pointer[u] < len(nbrs) and count[u][nbrs[pointer[u]]] == 0:
            pointer[u] += 1
        if pointer[u] == len(nbrs):
            path.append(stack.pop())
            continue
        v = nbrs[pointer[u]]
        count[u][v] -= 1
        count[v][u] -= 1
        stack.append(v)
    path.reverse()
    if len(path) != len(edges) + 1:
        raise ValueError("the edges are not connected")
    return path


class HeavyLight:
    """Heavy-light decomposition of a rooted tree, answering lowest common ancestors."""

    def __init__(self, adj, root=0):
        n = len(adj)
        self.parent = [-1] * n
        self.depth = [0] * n
        seen = [False] * n
        seen[root] = True
        order = [root]
        for u in order:
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    self.parent[v] = u
                    self.depth[v] = self.depth[u] + 1
                    order.append(v)
        if len(order) != n:
            raise ValueError("the tree is not connected")
        self.subsize = [1] * n
        for u in reversed(order[1:]):
            self.subsize[self.parent[u]] += self.subsize[u]

        self.chain_head = []
        self.chain_size = []
        self.chain_ind = [0] * n
        self.chain_pos = [0] * n
        stack = [(root, True)]
        while stack:
            cur, new_chain = stack.pop()
            if new_chain:
                self.chain_head.append(cur)
                self.chain_size.append(0)
            chain = len(self.chain_head) - 1
            self.chain_ind[cur] = chain
            self.chain_pos[cur] = self.chain_size[chain]
            self.chain_size[chain] += 1
            children = [v for v in adj[cur] if v != self.parent[cur]]
            heavy, best = -1, -1
            for idx, v in enumerate(children):
                if self.subsize[v] > best:
                    best, heavy = self.subsize[v], idx
            for idx in range(len(children) - 1, -1, -1):
                if idx != heavy:
                    stack.append((children[idx], True))
            if heavy >= 0:
                stack.append((children[heavy], False))

    def lca(self, u, v):
        """Lowest common ancestor of ``u`` and ``v``."""
        while True:
            if self.chain_ind[u] == self.chain_ind[v]:
                return v if self.chain_pos[u] > self.chain_pos[v] else u
            head_u = self.chain_head[self.chain_ind[u]]
            head_v = self.chain_head[self.chain_ind[v]]
            if self.depth[head_u] > self.depth[head_v]:
                u = self.parent[head_u] if self.parent[head_u] != -1 else head_u
            else:
                v = self.parent[head_v] if self.parent[head_v] != -1 else head_v
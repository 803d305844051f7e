"""Network flows, bipartite matching and stable marriage."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass


def _check_vertex(n, v):
    if not 0 <= v < n:
        raise ValueError(f"vertex {v} is outside range({n})")


class Dinic:
    """Maximum flow by Dinic's blocking-flow algorithm."""

    def __init__(self, n):
        self.n = n
        self._to = []
        self._cap = []
        self._graph = [[] for _ in range(n)]

    def add_edge(self, u, v, cap, rev_cap=0):
        """Add an edge ``u -> v``; give ``rev_cap = cap`` for an undirected edge."""
        _check_vertex(self.n, u)
        _check_vertex(self.n, v)
        self._graph[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(cap)
        self._graph[v].append(len(self._to))
        self._to.append(u)
        self._cap.append(rev_cap)

    def _levels(self, t):
        dist = [-1] * self.n
        dist[t] = 0
        queue = deque([t])
        while queue:
            v = queue.popleft()
            for e in self._graph[v]:
                w = self._to[e]
                if self._cap[e ^ 1] > 0 and dist[w] == -1:
                    dist[w] = dist[v] + 1
                    queue.append(w)
        return dist

    def _augment(self, v, t, f, dist, it):
        if v == t:
            return f
        edges = self._graph[v]
        while it[v] < len(edges):
            e = edges[it[v]]
            w = self._to[e]
            if self._cap[e] > 0 and dist[w] == dist[v] - 1:
                ret = self._augment(w, t, min(f, self._cap[e]), dist, it)
                if ret > 0:
                    self._cap[e] -= ret
                    self._cap[e ^ 1] += ret
                    return ret
            it[v] += 1
        return 0

    def max_flow(self, s, t):
        """Push as much flow as possible from ``s`` to ``t`` and return it."""
        _check_vertex(self.n, s)
        _check_vertex(self.n, t)
        if s == t:
            raise ValueError("source and sink must differ")
        total = 0
        while True:
            dist = self._levels(t)
            if dist[s] == -1:
                return total
            it = [0] * self.n
            while True:
                pushed = self._augment(s, t, math.inf, dist, it)
                if not pushed:
                    break
                total += pushed


@dataclass
class _Edge:
    to: int
    capacity: int
    flow: int
    back: int
    cost: int = 0


class EdmondsKarp:
    """Maximum flow along shortest augmenting paths; edges are directed."""

    def __init__(self, n):
        self.n = n
        self._graph = [[] for _ in range(n)]

    def add_edge(self, frm, to, cap):
        """Add a directed edge ``frm -> to`` of capacity ``cap``."""
        _check_vertex(self.n, frm)
        _check_vertex(self.n, to)
        forward = _Edge(to, cap, 0, len(self._graph[to]))
        backward = _Edge(frm, 0, 0, len(self._graph[frm]))
        self._graph[frm].append(forward)
        self._graph[to].append(backward)

    def max_flow(self, s, t):
        """Push as much flow as possible from ``s`` to ``t`` and return it."""
        _check_vertex(self.n, s)
        _check_vertex(self.n, t)
        if s == t:
            raise ValueError("source and sink must differ")
        flow = 0
        while True:
            prev = [None] * self.n
            dist = [math.inf] * self.n
            dist[s] = 0
            queue = deque([s])
            while queue:
                v = queue.popleft()
                if v == t:
                    break
                for i, edge in enumerate(self._graph[v]):
                    if edge.flow < edge.capacity and dist[v] + 1 < dist[edge.to]:
                        dist[edge.to] = dist[v] + 1
                        prev[edge.to] = (v, i)
                        queue.append(edge.to)
            if dist[t] == math.inf:
                return flow
            path = []
            v = t
            while v != s:
                pv, i = prev[v]
                path.append((pv, i))
                v = pv
            add = min(self._graph[pv][i].capacity - self._graph[pv][i].flow for pv, i in path)
            for pv, i in path:
                edge = self._graph[pv][i]
                edge.flow += add
                self._graph[edge.to][edge.back].flow -= add
            flow += add


class MinCostMaxFlow:
    """Cheapest flow of up to ``k`` units; edges are directed and carry a unit cost."""

    def __init__(self, n):
        self.n = n
        self._graph = [[] for _ in range(n)]

    def add_edge(self, frm, to, cap, cost):
        """Add a directed edge ``frm -> to`` with capacity ``cap`` and unit cost ``cost``."""
        _check_vertex(self.n, frm)
        _check_vertex(self.n, to)
        forward = _Edge(to, cap, 0, len(self._graph[to]), cost)
        backward = _Edge(frm, 0, 0, len(self._graph[frm]), -cost)
        self._graph[frm].append(forward)
        self._graph[to].append(backward)

    def max_flow(self, s, t, k=math.inf):
        """Send up to ``k`` units from ``s`` to ``t``; return ``(flow, cost)``."""
        _check_vertex(self.n, s)
        _check_vertex(self.n, t)
        if s == t:
            raise ValueError("source and sink must differ")
        flow = cost = 0
        while flow < k:
            state = [0] * self.n
            dist = [math.inf] * self.n
            prev = [None] * self.n
            dist[s] = 0
            queue = deque([s])
            while queue:
                v = queue.popleft()
                state[v] = 2
                for i, edge in enumerate(self._graph[v]):
                    if edge.flow < edge.capacity and dist[v] + edge.cost < dist[edge.to]:
                        dist[edge.to] = dist[v] + edge.cost
                        if state[edge.to] == 0:
                            queue.append(edge.to)
                        elif state[edge.to] == 2:
                            queue.appendleft(edge.to)
                        state[edge.to] = 1
                        prev[edge.to] = (v, i)
            if dist[t] == math.inf:
                break
            path = []
            v = t
            while v != s:
                pv, i = prev[v]
                path.append((pv, i))
                v = pv
            add = k - flow
            for pv, i in path:
                edge = self._graph[pv][i]
                add = min(add, edge.capacity - edge.flow)
            for pv, i in path:
                edge = self._graph[pv][i]
                edge.flow += add
                self._graph[edge.to][edge.back].flow -= add
                cost += edge.cost * add
            flow += add
        return flow, cost


def max_bipartite_matching(adj, n, k):
    """Maximum matching by Kuhn's augmenting paths.

    ``adj[i]`` lists the right-side neighbours of left vertex ``i`` (``0 <= i < n``),
    numbered ``n`` to ``n + k - 1``. Returns ``(left, right)`` pairs ordered by
    the right vertex.
    """
    if len(adj) != n:
        raise ValueError("adj must hold one list per left vertex")
    for nbrs in adj:
        for r in nbrs:
            if not n <= r < n + k:
                raise ValueError(f"right vertex {r} is outside range({n}, {n + k})")
    right_pair = [-1] * k
    left_pair = [-1] * n

    def kuhn(v, used):
        if used[v]:
            return False
        used[v] = True
        for r in adj[v]:
            to = r - n
            if right_pair[to] == -1 or kuhn(right_pair[to], used):
                right_pair[to] = v
                left_pair[v] = to
                return True
        return False

    found = True
    while found:
        used = [False] * n
        found = False
        for i in range(n):
            if left_pair[i] < 0 and not used[i]:
                found |= kuhn(i, used)
    return [(right_pair[i], i + n) for i in range(k) if right_pair[i] != -1]


def _check_prefs(prefs, n, who):
    for row in prefs:
        if sorted(row) != list(range(n)):
            raise ValueError(f"each {who} must rank every partner exactly once")


def stable_marriage(men_prefs, women_prefs):
    """Man-proposing Gale-Shapley matching.

    ``men_prefs[m]`` lists the women from most to least preferred and
    ``women_prefs[w]`` the men likewise. Returns ``(man, woman)`` for every man.
    """
    n = len(men_prefs)
    if len(women_prefs) != n:
        raise ValueError("there must be as many women as men")
    _check_prefs(men_prefs, n, "man")
    _check_prefs(women_prefs, n, "woman")
    rank = [{m: r for r, m in enumerate(row)} for row in women_prefs]
    next_choice = [0] * n
    wife = [-1] * n
    husband = [-1] * n
    free = deque(range(n))
    while free:
        man = free.popleft()
        while True:
            woman = men_prefs[man][next_choice[man]]
            next_choice[man] += 1
            current = husband[woman]
            if current == -1:
                husband[woman], wife[man] = man, woman
                break
            if rank[woman][man] < rank[woman][current]:
                free.append(current)
                wife[current] = -1
                husband[woman], wife[man] = man, woman
                break
    return [(m, wife[m]) for m in range(n)]
"""Polygon algorithms: areas, cuts, hulls, Voronoi cells and point location."""

from __future__ import annotations

import bisect
import math
import random
from functools import cmp_to_key

from .geometry import (
    EPS,
    Circle,
    Line,
    State,
    circle_from_2_points,
    circle_from_3_points,
    circle_point,
    cross,
    dot,
    intersect_lines,
    length,
    length_sqr,
    midpoint,
    perp,
    point_on_ray,
    point_on_segment,
    same,
)


def _points(p):
    return [complex(v) for v in p]


def _edges(poly):
    """Consecutive vertex pairs of a closed polygon."""
    return zip(poly, poly[1:] + poly[:1])


def twice_area(p):
    """Signed doubled area; positive when the vertices run anticlockwise."""
    return sum(cross(a, b) for a, b in _edges(_points(p)))


def polygon_area(p):
    """Area of a simple polygon."""
    return abs(twice_area(p)) / 2


def polygon_centroid(p):
    """Centre of mass of a polygon of uniform density."""
    poly = _points(p)
    cx = cy = area = 0.0
    for a, b in _edges(poly):
        c = a.real * b.imag - b.real * a.imag
        cx += (a.real + b.real) * c
        cy += (a.imag + b.imag) * c
        area += c
    area *= 0.5
    if abs(area) < EPS:
        raise ValueError("the polygon has no area")
    return complex(cx / (6 * area), cy / (6 * area))


def picks_lattice_interior(p):
    """Number of lattice points strictly inside a lattice polygon."""
    poly = _points(p)
    area = abs(twice_area(poly)) / 2
    boundary = sum(
        abs(math.gcd(int((b - a).real), int((b - a).imag))) for a, b in _edges(poly)
    )
    return round(area - boundary / 2 + 1)


def polygon_cut(p, a, b):
    """Part of polygon ``p`` lying strictly left of the directed line ``a``->``b``."""
    a, b = complex(a), complex(b)
    cut_line = Line(a, b)
    direction = b - a
    res = []
    for cur, nxt in _edges(_points(p)):
        in1 = cross(direction, cur - a) > EPS
        in2 = cross(direction, nxt - a) > EPS
        if in1:
            res.append(cur)
        if in1 != in2:
            hit = intersect_lines(cut_line, Line(cur, nxt))
            if hit is not None:
                res.append(hit)
    return res


def convex_polygon_intersect(p, q):
    """Intersection of two anticlockwise convex polygons."""
    res = _points(q)
    for a, b in _edges(_points(p)):
        res = polygon_cut(res, a, b)
        if not res:
            return []
    return res


def voronoi(points, rect):
    """Voronoi cell of every point, clipped to the anticlockwise polygon ``rect``."""
    sites = _points(points)
    cells = []
    for i, site in enumerate(sites):
        cell = _points(rect)
        for j, other in enumerate(sites):
            if j == i:
                continue
            m = midpoint(site, other)
            cell = polygon_cut(cell, m, m + perp(other - site))
        cells.append(cell)
    return cells


def point_in_polygon(p, pnt):
    """Locate ``pnt`` against polygon ``p`` by casting a ray to the right."""
    poly = _points(p)
    pnt = complex(pnt)
    ray = Line(pnt, pnt + 1)
    count = 0
    for a, b in _edges(poly):
        if point_on_segment(a, b, pnt):
            return State.BOUNDARY
        r = intersect_lines(ray, Line(a, b))
        if r is None or not point_on_ray(pnt, pnt + 1, r):
            continue
        if (same(r, a) or same(r, b)) and abs(r.imag - min(a.imag, b.imag)) < EPS:
            continue
        if not point_on_segment(a, b, r):
            continue
        count += 1
    return State.IN if count % 2 else State.OUT


def pt_in_poly(p, a):
    """Locate ``a`` against polygon ``p`` by the crossing-number rule."""
    poly = _points(p)
    a = complex(a)
    ax, ay = a.real, a.imag
    inside = False
    for cur, prev in zip(poly, poly[-1:] + poly[:-1]):
        ia, ja = a - cur, a - prev
        if abs(cross(ia, ja)) < EPS and dot(ia, ja) < EPS:
            return State.BOUNDARY
        ix, iy, jx, jy = cur.real, cur.imag, prev.real, prev.imag
        if (iy <= ay < jy) or (jy <= ay < iy):
            if ax < ix + (jx - ix) * (ay - iy) / (jy - iy):
                inside = not inside
    return State.IN if inside else State.OUT


def _yx(p):
    return (p.imag, p.real)


def sort_anticlockwise(points):
    """Points sorted anticlockwise about the lowest (then leftmost) one."""
    pts = _points(points)
    if not pts:
        return []
    about = min(pts, key=_yx)

    def less(p, q):
        cr = cross(p - about, q - about)
        if abs(cr) < EPS:
            return _yx(p) < _yx(q)
        return cr > 0

    def compare(p, q):
        if less(p, q):
            return -1
        if less(q, p):
            return 1
        return 0

    return sorted(pts, key=cmp_to_key(compare))


def graham_hull(points):
    """Convex hull by an angular sweep, anticlockwise from the lowest point."""
    pts = sort_anticlockwise(points)
    if not pts:
        raise ValueError("no points given")
    hull = [pts[0]]
    if len(pts) == 1:
        return hull
    hull.append(pts[1])
    n = len(pts)
    for i in range(2, n + 1):
        c = pts[i % n]
        while len(hull) > 1:
            b, a = hull[-1], hull[-2]
            if cross(a - b, c - b) < -EPS:
                break
            hull.pop()
        if i < n:
            hull.append(pts[i])
    return hull


def _xy_compare(a, b):
    if abs(a.real - b.real) > EPS:
        return -1 if a.real < b.real else 1
    if abs(a.imag - b.imag) > EPS:
        return -1 if a.imag < b.imag else 1
    return 0


def convex_hull(points):
    """Convex hull by the monotone chain.

    The hull is returned as a closed ring: the first point is repeated at the end.
    """
    pts = sorted(_points(points), key=cmp_to_key(_xy_compare))
    lower, upper = [], []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-1] - lower[-2], p - lower[-1]) < EPS:
            lower.pop()
        while len(upper) >= 2 and cross(upper[-1] - upper[-2], p - upper[-1]) > EPS:
            upper.pop()
        lower.append(p)
        upper.append(p)
    return lower + upper[-2::-1]


def _quad(p):
    if p.imag < 0:
        return 3 - (p.real < 0)
    return int(p.real < 0)


def angular_sort(points, wrt):
    """Indices of ``points`` ordered by angle, then distance, about ``points[wrt]``."""
    pts = _points(points)
    origin = pts[wrt]

    def compare(i, j):
        a, b = pts[i] - origin, pts[j] - origin
        qa, qb = _quad(a), _quad(b)
        if qa != qb:
            return -1 if qa < qb else 1
        lhs, rhs = a.imag * b.real, b.imag * a.real
        if lhs != rhs:
            return -1 if lhs < rhs else 1
        na, nb = length_sqr(a), length_sqr(b)
        return (na > nb) - (na < nb)

    return sorted(range(len(pts)), key=cmp_to_key(compare))


def closest_pair(points):
    """Indices ``(i, j)`` with ``i < j`` of the two nearest points."""
    pts = _points(points)
    if len(pts) < 2:
        raise ValueError("at least two points are needed")
    order = sorted(range(len(pts)), key=lambda i: (pts[i].real, pts[i].imag))
    best = math.inf
    res = (order[0], order[1])
    active = []
    left = 0
    for pos, i in enumerate(order):
        p = pts[i]
        while left < pos and p.real - pts[order[left]].real > best:
            gone = order[left]
            del active[bisect.bisect_left(active, (pts[gone].imag, gone))]
            left += 1
        for y, j in active[bisect.bisect_left(active, (p.imag - best,)):]:
            if y - p.imag >= best:
                break
            dist = length(p - pts[j])
            if dist < best:
                best, res = dist, (min(i, j), max(i, j))
        bisect.insort(active, (p.imag, i))
    return res


def _outside(circle, p):
    return circle_point(circle.center, circle.radius, p) is State.OUT


def _circle_through(p, q, r):
    try:
        return circle_from_3_points(p, q, r)
    except ValueError:
        a, b = max(((p, q), (q, r), (p, r)), key=lambda ab: length(ab[1] - ab[0]))
        return circle_from_2_points(a, b)


def minimum_enclosing_circle(points, rng=None):
    """Smallest circle holding every point (randomised incremental method)."""
    pts = _points(points)
    if not pts:
        raise ValueError("no points given")
    (rng or random.Random()).shuffle(pts)
    circle = Circle(pts[0], 0.0)
    for i, p in enumerate(pts):
        if not _outside(circle, p):
            continue
        circle = Circle(p, 0.0)
        for j, q in enumerate(pts[:i]):
            if not _outside(circle, q):
                continue
            circle = circle_from_2_points(p, q)
            for r in pts[:j]:
                if _outside(circle, r):
                    circle = _circle_through(p, q, r)
    return circle
"""Planar geometry primitives on points represented as complex numbers."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from enum import Enum

EPS = 1e-9


class State(Enum):
    """Position of a point relative to a closed figure."""

    IN = "in"
    OUT = "out"
    BOUNDARY = "boundary"


class Line:
    """Line through ``p`` and ``q``, also kept as ``a*x + b*y + c = 0``."""

    def __init__(self, p, q):
        self.p = complex(p)
        self.q = complex(q)
        if abs(self.p.real - self.q.real) < EPS:
            self.a, self.b, self.c = 1.0, 0.0, -self.p.real
        else:
            self.a = self.p.imag - self.q.imag
            self.b = self.q.real - self.p.real
            self.c = -(self.a * self.p.real + self.b * self.p.imag)

    def __call__(self, x):
        """Return the y coordinate of the line at ``x``."""
        if self.b == 0:
            raise ValueError("a vertical line has no single y for a given x")
        return -(self.c + self.a * x) / self.b

    def __repr__(self):
        return f"Line({self.p!r}, {self.q!r})"


@dataclass(frozen=True)
class Circle:
    """Circle given by its centre and radius."""

    center: complex
    radius: float


def cross(a, b):
    """Z component of the cross product of two vectors."""
    return (complex(a).conjugate() * b).imag


def dot(a, b):
    """Dot product of two vectors."""
    return (complex(a).conjugate() * b).real


def length(v):
    """Euclidean length of a vector."""
    v = complex(v)
    return math.hypot(v.imag, v.real)


def length_sqr(v):
    """Squared length of a vector."""
    return dot(v, v)


def same(a, b):
    """Whether two points coincide within tolerance."""
    return length_sqr(b - a) < EPS


def midpoint(a, b):
    """Point halfway between ``a`` and ``b``."""
    return (complex(a) + b) / 2


def perp(a):
    """Vector rotated a quarter turn anticlockwise."""
    a = complex(a)
    return complex(-a.imag, a.real)


def normalize(p):
    """Unit vector in the direction of ``p``."""
    return complex(p) / length(p)


def rotate(v, t):
    """Rotate vector ``v`` by ``t`` radians about the origin."""
    return complex(v) * cmath.exp(complex(0, t))


def rotate_about(v, t, a):
    """Rotate point ``v`` by ``t`` radians about point ``a``."""
    return rotate(complex(v) - a, t) + a


def rotate_by(p, o, rads):
    """Rotate point ``p`` by ``rads`` radians about the origin point ``o``."""
    return (complex(p) - o) * cmath.exp(complex(0, rads)) + o


def reflect(p, about1, about2):
    """Mirror ``p`` in the line through ``about1`` and ``about2``."""
    z = complex(p) - about1
    w = complex(about2) - about1
    return (z / w).conjugate() * w + about1


def parallel(a, b):
    """Whether two lines are parallel."""
    return abs(cross(a.q - a.p, b.q - b.p)) < EPS


def intersect_lines(a, b):
    """Intersection point of two lines, or None when they are parallel."""
    if parallel(a, b):
        return None
    d1 = cross(b.p - a.p, a.q - a.p)
    d2 = cross(b.q - a.p, a.q - a.p)
    return (d1 * b.q - d2 * b.p) / (d1 - d2)


def intersect_line_segment(line, seg):
    """Point where ``line`` crosses the inside of segment ``seg``, or None."""
    res = intersect_lines(line, seg)
    if res is None:
        return None
    span = length(seg.q - seg.p)
    if length(res - seg.p) < span and length(res - seg.q) < span:
        return res
    return None


def intersect_segments(a, b):
    """Crossing point of two segments, or None."""
    res = intersect_line_segment(a, b)
    if res is None or intersect_line_segment(b, a) is None:
        return None
    return res


def point_on_line(a, b, p):
    """Whether ``p`` lies on the line through ``a`` and ``b``."""
    if same(a, b):
        return same(a, p)
    return abs(cross(b - a, p - a)) < EPS


def point_on_ray(a, b, p):
    """Whether ``p`` lies on the ray from ``a`` through ``b``."""
    if same(a, b):
        return same(a, p)
    if same(a, p):
        return True
    return same(normalize(b - a), normalize(p - a))


def point_on_segment(a, b, p):
    """Whether ``p`` lies on the segment from ``a`` to ``b``."""
    if same(a, b):
        return same(a, p)
    return point_on_ray(a, b, p) and point_on_ray(b, a, p)


def point_line_dist(a, b, p):
    """Distance from ``p`` to the line through ``a`` and ``b``."""
    if same(a, b):
        return length(complex(a) - p)
    return abs(cross(b - a, p - a) / length(b - a))


def point_segment_dist(a, b, p):
    """Distance from ``p`` to the segment from ``a`` to ``b``."""
    if dot(b - a, p - a) < EPS:
        return length(p - a)
    if dot(a - b, p - b) < EPS:
        return length(p - b)
    return point_line_dist(a, b, p)


def closest_on_line(line, o):
    """Point of ``line`` nearest to ``o``."""
    pq = line.q - line.p
    u = dot(o - line.p, pq) / length_sqr(pq)
    return line.p + u * pq


def closest_on_segment(seg, o):
    """Point of segment ``seg`` nearest to ``o``."""
    pq = seg.q - seg.p
    u = dot(o - seg.p, pq)
    if u < 0:
        return seg.p
    if u > length_sqr(pq):
        return seg.q
    return closest_on_line(seg, o)


def line_lattice_points_count(x1, y1, x2, y2):
    """Number of integer points on the segment between two integer points."""
    return abs(math.gcd(x1 - x2, y1 - y2)) + 1


def triangle_area_bh(b, h):
    """Triangle area from base and height."""
    return b * h / 2


def triangle_area_2sides_angle(a, b, t):
    """Triangle area from two sides and the angle between them."""
    return abs(a * b * math.sin(t) / 2)


def triangle_area_2angles_side(t1, t2, s):
    """Triangle area from a side and its two adjacent angles."""
    return abs(s * s * math.sin(t1) * math.sin(t2) / (2 * math.sin(t1 + t2)))


def triangle_area_3sides(a, b, c):
    """Triangle area from its three sides (Heron's formula)."""
    s = (a + b + c) / 2
    return math.sqrt(s * (s - a) * (s - b) * (s - c))


def triangle_area_3points(a, b, c):
    """Triangle area from its three vertices."""
    return abs(cross(a, b) + cross(b, c) + cross(c, a)) / 2


def picks_theorem(area, boundary):
    """Interior lattice points of a lattice polygon by Pick's theorem."""
    return area - boundary // 2 + 1


def cos_rule(a, b, c):
    """Angle opposite side ``a`` of a triangle with sides ``a``, ``b``, ``c``."""
    res = (b * b + c * c - a * a) / (2 * b * c)
    return math.acos(min(1.0, max(-1.0, res)))


def sin_rule_angle(s1, s2, a1):
    """Angle opposite ``s2`` given side ``s1`` and its opposite angle ``a1``."""
    res = s2 * math.sin(a1) / s1
    return math.asin(min(1.0, max(-1.0, res)))


def sin_rule_side(s1, a1, a2):
    """Side opposite ``a2`` given side ``s1`` and its opposite angle ``a1``."""
    return abs(s1 * math.sin(a2) / math.sin(a1))


def circle_line_intersection(p0, p1, cen, rad):
    """Points where the line through ``p0`` and ``p1`` meets a circle."""
    p0, p1, cen = complex(p0), complex(p1), complex(cen)
    if same(p0, p1):
        if abs(length_sqr(cen - p0) - rad * rad) < EPS:
            return (p0,)
        return ()
    d = p1 - p0
    a = dot(d, d)
    b = 2 * dot(d, p0 - cen)
    c = dot(p0 - cen, p0 - cen) - rad * rad
    det = b * b - 4 * a * c
    if abs(det) < EPS:
        return (p0 + (-b / (2 * a)) * d,)
    if det < 0:
        return ()
    root = math.sqrt(det)
    t1 = (-b + root) / (2 * a)
    t2 = (-b - root) / (2 * a)
    return (p0 + t1 * d, p0 + t2 * d)


def circle_circle_intersection(c1, r1, c2, r2):
    """Points common to two circles.

    Raises ValueError when the circles coincide and so share every point.
    """
    c1, c2 = complex(c1), complex(c2)
    if same(c1, c2) and abs(r1 - r2) < EPS:
        if abs(r1) < EPS:
            return (c1,)
        raise ValueError("the circles coincide")
    dist = length(c2 - c1)
    if abs(dist - (r1 + r2)) < EPS or abs(abs(r1 - r2) - dist) < EPS:
        if r1 > r2:
            d, c, r = c2 - c1, c1, r1
        else:
            d, c, r = c1 - c2, c2, r2
        return (normalize(d) * r + c,)
    if dist > r1 + r2 or dist < abs(r1 - r2):
        return ()
    a = cos_rule(r2, r1, dist)
    c1c2 = normalize(c2 - c1) * r1
    return (rotate(c1c2, a) + c1, rotate(c1c2, -a) + c1)


def circle_from_2_points(p1, p2):
    """Circle having the segment ``p1``-``p2`` as a diameter."""
    return Circle(midpoint(p1, p2), length(complex(p2) - p1) / 2)


def circle_from_3_points(p1, p2, p3):
    """Circle through three points; ValueError if they are collinear."""
    m1 = midpoint(p1, p2)
    m2 = midpoint(p2, p3)
    bisector1 = Line(m1, m1 + perp(complex(p2) - p1))
    bisector2 = Line(m2, m2 + perp(complex(p3) - p2))
    cen = intersect_lines(bisector1, bisector2)
    if cen is None:
        raise ValueError("the points are collinear")
    return Circle(cen, length(complex(p1) - cen))


def circle_point(cen, r, p):
    """Whether ``p`` is inside, outside or on the circle."""
    lensqr = length_sqr(complex(p) - cen)
    if abs(lensqr - r * r) < EPS:
        return State.BOUNDARY
    if lensqr < r * r:
        return State.IN
    return State.OUT


def tangent_points(cen, r, p):
    """Points where tangents from ``p`` touch the circle."""
    p, cen = complex(p), complex(cen)
    state = circle_point(cen, r, p)
    if state is State.BOUNDARY:
        return (p,)
    if state is State.IN:
        return ()
    cp = p - cen
    a = math.acos(r / length(cp))
    cp = normalize(cp) * r
    return (rotate(cp, a) + cen, rotate(cp, -a) + cen)


def great_circle(lat1, lon1, lat2, lon2, r):
    """Great circle distance between two points given in degrees."""
    a = math.radians(lat1)
    b = math.radians(lat2)
    c = math.radians(lon2 - lon1)
    cosine = math.sin(a) * math.sin(b) + math.cos(a) * math.cos(b) * math.cos(c)
    return r * math.acos(min(1.0, max(-1.0, cosine)))


def _half(x):
    q = abs(x) // 2
    return q if x >= 0 else -q


def to_diamond(r, c):
    """Map grid coordinates to the 45 degree rotated grid."""
    return (r + c, c - r)


def from_diamond(i, j):
    """Map rotated grid coordinates back to the original grid."""
    return (_half(i - j), _half(i + j))

from typing import List, Tuple

from pytest import approx

from geosvg import PlanePoint


def parse_path(path: str) -> List[Tuple[str, List[Tuple[float, float]]]]:
    """Splits path geometry into (command, [coordinate pairs]) tuples"""
    commands: List[Tuple[str, List[Tuple[float, float]]]] = []
    for token in path.split(' '):
        if token in ('M', 'L', 'C'):
            commands.append((token, []))
            continue

        x, y = token.split(',')
        commands[-1][1].append((float(x), float(y)))

    return commands


def assert_plane_points_equal(p1: PlanePoint, p2: PlanePoint, abs_tol=1e-7):
    """Asserts that two plane points are equal within an absolute tolerance"""
    assert p1.x == approx(p2.x, abs=abs_tol)
    assert p1.y == approx(p2.y, abs=abs_tol)

import logging

from pathlib import Path
from geometry import Point

logger = logging.getLogger(__name__)


def _parse_point(line: str, line_no: int) -> Point:
    parts = line.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError(f'Line {line_no}: expected "x y", got {line!r}')
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f'Line {line_no}: coordinates must be integers, got {line!r}') from None


def read_points(path: str | Path) -> list[Point]:
    """
    Read a point file: the number of points on the first line,
    then one "x y" (or "x,y") pair per line.
    """
    points = []
    with open(path, 'r', encoding='utf-8') as f:
        header = f.readline().strip()
        try:
            n = int(header)
        except ValueError:
            raise ValueError(f'Line 1: expected point count, got {header!r}') from None

        for line_no, line in enumerate(f, start=2):
            line = line.strip()
            if line:
                points.append(_parse_point(line, line_no))

    if len(points) != n:
        raise ValueError(f'{path}: header declares {n} points, found {len(points)}')

    logger.info('Loaded %d points from %s', len(points), path)
    return points


def write_hull_points(hull: list[Point], path: str | Path):
    """
    Write hull vertices one per line as "x,y", in the given order.
    """
    with open(path, 'w', encoding='utf-8') as f:
        for p in hull:
            f.write(f'{p.x},{p.y}\n')
    logger.info('Wrote %d hull points to %s', len(hull), path)

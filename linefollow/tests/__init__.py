"""
This file is also needed for the correct work of relative imports in the tests. For example:
from . import makeTest
from .. import follow
"""

from .. import (
    GeometryFactory,
    SegmentIdentifier,
    TurnInfo,
    TurnOperation,
    MethodType,
    OperationType,
    FollowOp,
    follow
)


square = [(0., 0.), (10., 0.), (10., 10.), (0., 10.), (0., 0.)]


def makeTurn(point, segmentIndex, distance, method=MethodType.CROSSES, operation=OperationType.INTERSECTION):
    """
    A turn on the linestring (source 0) with a dummy polygon side (source 1)
    """
    return TurnInfo(
        point,
        method,
        [
            TurnOperation(operation, SegmentIdentifier(0, -1, -1, segmentIndex), distance),
            TurnOperation(OperationType.NONE, SegmentIdentifier(1, -1, -1, 0), 0.)
        ]
    )


def toTuples(pieces):
    return [ [(v.x, v.y) for v in piece] for piece in pieces ]


def makeTest(line, polygon, turns, referenceOutput):
    pieces = follow(
        GeometryFactory.createLineString(line),
        GeometryFactory.toPolygon(polygon),
        FollowOp.opINTERSECTION,
        turns
    )
    assert toTuples(pieces) == referenceOutput

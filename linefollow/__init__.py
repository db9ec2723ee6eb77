from .shared import (
    Coordinate,
    CoordinateSequence,
    Location,
    TopologyException
    )
from .geom import (
    LineString,
    LinearRing,
    Polygon,
    GeometryFactory
    )
from .algorithms import (
    PointLocator,
    within
    )
from .turn_info import (
    OperationType,
    MethodType,
    SegmentIdentifier,
    TurnOperation,
    TurnInfo,
    TurnException
    )
from .op_follow import (
    FollowOp,
    Verdict,
    appendNoDuplicates,
    copySegments,
    follow
    )

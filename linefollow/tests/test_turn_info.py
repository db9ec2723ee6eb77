import pytest

from . import makeTurn
from .. import (
    FollowOp,
    GeometryFactory,
    MethodType,
    OperationType,
    SegmentIdentifier,
    TopologyException,
    TurnException,
    TurnInfo
)


line = GeometryFactory.createLineString([(-1., 5.), (5., 5.), (11., 5.)])


def test_segment_identifier_order():
    assert SegmentIdentifier(0, -1, -1, 0) < SegmentIdentifier(0, -1, -1, 1)
    assert SegmentIdentifier(0, -1, -1, 5) < SegmentIdentifier(0, 0, -1, 0)
    assert SegmentIdentifier(0, 2, 3, 4) > SegmentIdentifier(0, 2, 2, 9)
    assert SegmentIdentifier(1, -1, -1, 0) > SegmentIdentifier(0, 9, 9, 9)
    assert SegmentIdentifier(0, -1, -1, 2) == SegmentIdentifier(0, -1, -1, 2)
    assert SegmentIdentifier() == SegmentIdentifier(0, -1, -1, -1)
    assert len({SegmentIdentifier(0, -1, -1, 2), SegmentIdentifier(0, -1, -1, 2)}) == 1


def test_sort_turns():
    turns = [
        makeTurn((10., 5.), 1, 5., operation=OperationType.UNION),
        makeTurn((3., 5.), 0, 4.),
        makeTurn((0., 5.), 0, 1.),
        makeTurn((6., 5.), 1, 1.)
    ]
    FollowOp.sortTurns(turns)
    assert [t.point.x for t in turns] == [0., 3., 6., 10.]


def test_sort_turns_keeps_ties():
    a = makeTurn((5., 5.), 1, 0., MethodType.TOUCH, OperationType.UNION)
    b = makeTurn((5., 5.), 1, 0., MethodType.TOUCH, OperationType.INTERSECTION)
    c = makeTurn((0., 5.), 0, 1.)
    turns = [a, b, c]
    FollowOp.sortTurns(turns)
    assert turns[0] is c
    assert turns[1] is a
    assert turns[2] is b


def test_sort_on_segment():
    a = makeTurn((0., 5.), 0, 1.)
    b = makeTurn((3., 5.), 0, 4.)
    assert FollowOp.sortOnSegment(a, b)
    assert not FollowOp.sortOnSegment(b, a)
    assert not FollowOp.sortOnSegment(a, a)


def test_symbols():
    assert OperationType.toOperationSymbol(OperationType.UNION) == 'u'
    assert OperationType.toOperationSymbol(OperationType.BLOCKED) == 'x'
    assert MethodType.toMethodSymbol(MethodType.CROSSES) == 'i'
    assert MethodType.toMethodSymbol(MethodType.TOUCH_INTERIOR) == 'm'
    assert str(makeTurn((0., 5.), 0, 1.)).startswith("i/i (0.0, 5.0)")
    assert str(makeTurn((0., 5.), 0, 1.).operations[0]) == "seg s:0, m:-1, r:-1, #:0 dist 1.0"


def test_check_valid_turn():
    makeTurn((0., 5.), 0, 1.).check(line)
    makeTurn((11., 5.), 1, 6., operation=OperationType.UNION).check(line)


@pytest.mark.parametrize("turn", [
    makeTurn((0., 5.), 0, -1.),
    makeTurn((0., 5.), 0, float("nan")),
    makeTurn((0., 5.), 0, float("inf")),
    makeTurn((0., 5.), 2, 0.),
    makeTurn((0., 5.), -1, 0.),
    makeTurn((0., 5.), 0, 1., method=99),
    makeTurn((0., 5.), 0, 1., operation=99),
    TurnInfo((0., 5.), MethodType.CROSSES)
])
def test_check_malformed_turn(turn):
    with pytest.raises(TurnException) as excinfo:
        turn.check(line)
    assert excinfo.value.turn is turn
    assert isinstance(excinfo.value, TopologyException)
    assert "(0.0, 5.0)" in str(excinfo.value)

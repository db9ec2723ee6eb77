from . import makeTurn, square
from .. import (
    FollowOp,
    Verdict,
    MethodType,
    OperationType
)


inside = FollowOp([(5., 5.), (11., 5.)], square)
outside = FollowOp([(-1., 5.), (5., 5.)], square)


def test_is_entering():
    for operation in (OperationType.INTERSECTION, OperationType.CONTINUE, OperationType.BLOCKED):
        turn = makeTurn((0., 5.), 0, 1., operation=operation)
        assert FollowOp.isEntering(turn, turn.operations[0])
    for operation in (OperationType.UNION, OperationType.NONE, OperationType.OPPOSITE):
        turn = makeTurn((0., 5.), 0, 1., operation=operation)
        assert not FollowOp.isEntering(turn, turn.operations[0])


def test_was_entered():
    for method in (MethodType.COLLINEAR, MethodType.EQUAL):
        turn = makeTurn((0., 5.), 0, 1., method)
        assert FollowOp.wasEntered(turn, True)
        assert not FollowOp.wasEntered(turn, False)
    for method in (MethodType.CROSSES, MethodType.TOUCH, MethodType.TOUCH_INTERIOR, MethodType.NONE):
        assert not FollowOp.wasEntered(makeTurn((0., 5.), 0, 1., method), True)


def test_crossing_entering():
    turn = makeTurn((0., 5.), 0, 1.)
    # even if already entered, a crossing is never "staying inside"
    assert outside.classify(turn, True, True) == Verdict.ENTERING
    assert inside.classify(turn, False, True) == Verdict.ENTERING


def test_crossing_leaving():
    turn = makeTurn((10., 5.), 0, 5., operation=OperationType.UNION)
    assert outside.classify(turn, False, False) == Verdict.LEAVING
    assert outside.classify(turn, True, False) == Verdict.LEAVING


def test_staying_inside():
    turn = makeTurn((10., 5.), 0, 5., MethodType.TOUCH, OperationType.CONTINUE)
    assert outside.classify(turn, True, False) == Verdict.STAYING_INSIDE
    # first turn, the first point is inside
    assert inside.classify(turn, False, True) == Verdict.STAYING_INSIDE
    # the first point is only located for the first turn
    assert inside.classify(turn, False, False) == Verdict.ENTERING
    assert outside.classify(turn, False, True) == Verdict.ENTERING


def test_touch_leaving():
    turn = makeTurn((10., 5.), 0, 5., MethodType.TOUCH, OperationType.UNION)
    assert outside.classify(turn, True, False) == Verdict.LEAVING
    assert inside.classify(turn, False, True) == Verdict.LEAVING
    assert inside.classify(turn, False, False) == Verdict.IGNORE
    assert outside.classify(turn, False, True) == Verdict.IGNORE


def test_ignore():
    for operation in (OperationType.NONE, OperationType.OPPOSITE):
        turn = makeTurn((10., 5.), 0, 5., MethodType.TOUCH, operation)
        assert inside.classify(turn, True, True) == Verdict.IGNORE


def test_verdict_names():
    assert Verdict.toVerdictName(Verdict.IGNORE) == 'Ignore'
    assert Verdict.toVerdictName(Verdict.STAYING_INSIDE) == 'Staying inside'
    assert Verdict.toVerdictName(Verdict.ENTERING) == 'Entering'
    assert Verdict.toVerdictName(Verdict.LEAVING) == 'Leaving'

# -*- coding:utf-8 -*-

# ##### BEGIN LGPL LICENSE BLOCK #####
#
# This is free software you can redistribute and/or modify it under
# the terms of the GNU Lesser General Public Licence as published
# by the Free Software Foundation.
#
# ##### END LGPL LICENSE BLOCK #####

# <pep8 compliant>


import logging
logger = logging.getLogger("linefollow.op_follow")
from functools import cmp_to_key
from .shared import (
    CoordinateSequence,
    TopologyException
    )
from .geom import GeometryFactory
from .algorithms import within
from .turn_info import (
    OperationType,
    MethodType,
    SegmentIdentifier
    )
from .defs import Follow


def appendNoDuplicates(piece, coord) -> None:
    """
     * Appends coord to piece unless it equals the last coordinate of piece
    """
    if len(piece) == 0 or piece[-1] != coord:
        piece.append(coord)


def copySegments(linestring, segId, toIndex: int, piece) -> None:
    """
     * Appends to piece the vertices of linestring lying after the segment
     * segId up to and including the vertex toIndex, in forward direction.
     *
     * @param linestring the linestring to copy the vertices from
     * @param segId SegmentIdentifier, the copy starts at segId.segmentIndex + 1
     * @param toIndex index of the last vertex to copy
     * @param piece the output piece, appends suppress duplicates
     * @throws TopologyException if toIndex is past the last vertex
    """
    if toIndex >= len(linestring):
        raise TopologyException(
            "copySegments(): vertex index {} out of range, linestring has {} vertices".format(
                toIndex, len(linestring)))

    fromIndex = segId.segmentIndex + 1
    if fromIndex < 0 or fromIndex > toIndex:
        return

    for i in range(fromIndex, toIndex + 1):
        appendNoDuplicates(piece, linestring[i])


class Verdict():
    """
     * Outcome of the classification of a turn
    """
    IGNORE = 0
    STAYING_INSIDE = 1
    ENTERING = 2
    LEAVING = 3

    @staticmethod
    def toVerdictName(verdict: int) -> str:
        return (
            'Ignore',
            'Staying inside',
            'Entering',
            'Leaving'
            )[verdict]


class FollowOp():
    """
     * Follows a linestring from intersection point to intersection point,
     * outputting the pieces which are inside a polygon.
     *
     * The turns are sorted along the linestring, then visited in order,
     * keeping track of whether the current position along the linestring
     * is inside the polygon. Each maximal inside run is emitted as one piece.
    """

    opINTERSECTION = 1
    opDIFFERENCE = 3

    def __init__(self, linestring, polygon, pieceFactory=None, checkTurns=None, debugTraverse=None):
        """
         * @param linestring LineString or a sequence of (x, y) tuples, read only
         * @param polygon Polygon or a sequence of (x, y) tuples (exterior only), read only
         * @param pieceFactory callable returning an empty output piece,
         *        any list like container with len(), [-1] and append()
         * @param checkTurns validate turns before following them,
         *        defaults to defs.Follow.checkTurns
         * @param debugTraverse log the decision for each turn,
         *        defaults to defs.Follow.debugTraverse
        """
        self.linestring = GeometryFactory.toLineString(linestring)
        self.polygon = GeometryFactory.toPolygon(polygon)
        self.pieceFactory = CoordinateSequence if pieceFactory is None else pieceFactory
        self.checkTurns = Follow.checkTurns if checkTurns is None else checkTurns
        self.debugTraverse = Follow.debugTraverse if debugTraverse is None else debugTraverse

    @staticmethod
    def sortOnSegment(left, right) -> bool:
        """
         * Less than predicate: order of two turns along the linestring
        """
        sl = left.operations[0].segId
        sr = right.operations[0].segId
        if sl == sr:
            return left.operations[0].distance < right.operations[0].distance
        return sl < sr

    @staticmethod
    def sortTurns(turns) -> None:
        """
         * Sorts turns in place on segment-along-linestring then distance.
         * Turns on the same location keep their order.
        """
        def compare(left, right):
            if FollowOp.sortOnSegment(left, right):
                return -1
            if FollowOp.sortOnSegment(right, left):
                return 1
            return 0

        turns.sort(key=cmp_to_key(compare))

    @staticmethod
    def isEntering(turn, op) -> bool:
        # Blocked means: blocked for polygon/polygon intersection, because
        # they are reversed. But for polygon/line it is similar to continue
        return op.operation in (
            OperationType.INTERSECTION,
            OperationType.CONTINUE,
            OperationType.BLOCKED
            )

    def isLeaving(self, turn, op, entered: bool, first: bool) -> bool:
        if op.operation == OperationType.UNION:
            return (entered or
                turn.method == MethodType.CROSSES or
                (first and self.firstPointWithin()))
        return False

    def isStayingInside(self, turn, op, entered: bool, first: bool) -> bool:
        if turn.method == MethodType.CROSSES:
            # crossings are completely covered by entering/leaving,
            # don't run the point location for them
            return False

        if FollowOp.isEntering(turn, op):
            return entered or (first and self.firstPointWithin())

        return False

    @staticmethod
    def wasEntered(turn, first: bool) -> bool:
        """
         * If it is the very first point, and either equal or collinear, there is only one
         * turn generated. So consider this as having entered.
         * It may leave immediately after that, which is checked by isLeaving().
        """
        return first and turn.method in (MethodType.COLLINEAR, MethodType.EQUAL)

    def firstPointWithin(self) -> bool:
        return within(self.linestring[0], self.polygon)

    def classify(self, turn, entered: bool, first: bool) -> int:
        """
         * Classifies a turn given the scan state.
         * The "was entered" mark must have been applied to entered beforehand.
         *
         * @return a Verdict value
        """
        op = turn.operations[0]
        if self.isStayingInside(turn, op, entered, first):
            return Verdict.STAYING_INSIDE
        if FollowOp.isEntering(turn, op):
            return Verdict.ENTERING
        if self.isLeaving(turn, op, entered, first):
            return Verdict.LEAVING
        return Verdict.IGNORE

    def _debugTraverse(self, turn, header: str) -> None:
        if self.debugTraverse:
            logger.debug("%s -> %s", turn, header)

    def getResult(self, opCode: int, turns) -> list:
        """
         * Gets the pieces of the linestring inside the polygon.
         *
         * @param opCode FollowOp.opINTERSECTION
         * @param turns list of TurnInfo, sorted in place
         * @return list of pieces, in order of appearance along the linestring
         * @throws TurnException if a turn is malformed
        """
        if opCode == FollowOp.opDIFFERENCE:
            raise NotImplementedError("FollowOp: difference is not supported")
        if opCode != FollowOp.opINTERSECTION:
            raise ValueError("FollowOp: unknown operation code {}".format(opCode))

        linestring = self.linestring
        result = []

        if linestring.is_empty:
            return result

        if self.checkTurns:
            for turn in turns:
                turn.check(linestring)

        FollowOp.sortTurns(turns)

        currentPiece = self.pieceFactory()
        currentSegId = SegmentIdentifier(0, -1, -1, -1)

        # without any turn the linestring is either fully inside or fully outside
        entered = len(turns) == 0 and self.firstPointWithin()
        first = True

        for turn in turns:
            op = turn.operations[0]

            if FollowOp.wasEntered(turn, first):
                self._debugTraverse(turn, "Was entered")
                entered = True

            verdict = self.classify(turn, entered, first)
            self._debugTraverse(turn, Verdict.toVerdictName(verdict))

            if verdict == Verdict.STAYING_INSIDE:
                entered = True

            elif verdict == Verdict.ENTERING:
                entered = True
                appendNoDuplicates(currentPiece, turn.point)
                currentSegId = op.segId

            elif verdict == Verdict.LEAVING:
                entered = False
                copySegments(linestring, currentSegId, op.segId.segmentIndex, currentPiece)
                appendNoDuplicates(currentPiece, turn.point)

                if len(currentPiece) > 0:
                    logger.debug("FollowOp.getResult() piece %s with %s points", len(result), len(currentPiece))
                    result.append(currentPiece)
                    currentPiece = self.pieceFactory()

            first = False

        if entered:
            logger.debug("FollowOp.getResult() tail from %s", currentSegId)
            copySegments(linestring, currentSegId, len(linestring) - 1, currentPiece)

        if len(currentPiece) > 0:
            logger.debug("FollowOp.getResult() last piece %s with %s points", len(result), len(currentPiece))
            result.append(currentPiece)

        return result


def follow(linestring, polygon, opCode: int, turns, pieceFactory=None) -> list:
    """
     * Computes the pieces of a linestring inside a polygon
     * from the turns between the linestring and the polygon boundary.
     *
     * @param linestring LineString or sequence of (x, y)
     * @param polygon Polygon or sequence of (x, y)
     * @param opCode the requested set operation, FollowOp.opINTERSECTION
     * @param turns list of TurnInfo, reordered by the call
     * @param pieceFactory callable returning an empty output piece
     * @return list of pieces
    """
    return FollowOp(linestring, polygon, pieceFactory).getResult(opCode, turns)

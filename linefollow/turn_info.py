# -*- coding:utf-8 -*-

# ##### BEGIN LGPL LICENSE BLOCK #####
# GEOS - Geometry Engine Open Source
# http://geos.osgeo.org
#
# Copyright (C) 2011 Sandro Santilli <strk@kbt.io>
# Copyright (C) 2005 2006 Refractions Research Inc.
# Copyright (C) 2001-2002 Vivid Solutions Inc.
# Copyright (C) 1995 Olivier Devillers <Olivier.Devillers@sophia.inria.fr>
#
# This is free software you can redistribute and/or modify it under
# the terms of the GNU Lesser General Public Licence as published
# by the Free Software Foundation.
# See the COPYING file for more information.
#
# ##### END LGPL LICENSE BLOCK #####

# <pep8 compliant>

# ----------------------------------------------------------
# Partial port (version 3.7.0) by: Stephen Leger (s-leger)
#
# ----------------------------------------------------------


from math import isfinite
from .shared import (
    Coordinate,
    TopologyException
    )


class TurnException(TopologyException):
    """
     * Indicates a malformed turn record: the turn producer broke
     * its contract and the follow operation can't go on.
    """
    def __init__(self, message="", turn=None):
        TopologyException.__init__(self, message, None if turn is None else turn.point)
        self.turn = turn


class OperationType():
    """
     * Semantic role of a turn for the requested set operation
    """
    NONE = 0
    UNION = 1
    INTERSECTION = 2
    BLOCKED = 3
    CONTINUE = 4
    OPPOSITE = 5

    _symbols = {
        NONE: '-',
        UNION: 'u',
        INTERSECTION: 'i',
        BLOCKED: 'x',
        CONTINUE: 'c',
        OPPOSITE: '?'
    }

    @staticmethod
    def isValid(operation: int) -> bool:
        return operation in OperationType._symbols

    @staticmethod
    def toOperationSymbol(operation: int) -> str:
        return OperationType._symbols.get(operation, '#')


class MethodType():
    """
     * How the two geometries meet locally at a turn
    """
    NONE = 0
    DISJOINT = 1
    CROSSES = 2
    TOUCH = 3
    TOUCH_INTERIOR = 4
    COLLINEAR = 5
    EQUAL = 6
    ERROR = 7

    _symbols = {
        NONE: '-',
        DISJOINT: 'd',
        CROSSES: 'i',
        TOUCH: 't',
        TOUCH_INTERIOR: 'm',
        COLLINEAR: 'c',
        EQUAL: 'e',
        ERROR: '!'
    }

    @staticmethod
    def isValid(method: int) -> bool:
        return method in MethodType._symbols

    @staticmethod
    def toMethodSymbol(method: int) -> str:
        return MethodType._symbols.get(method, '#')


class SegmentIdentifier():
    """
     * Locates a segment: the source geometry, the part of a multi geometry,
     * the ring (-1 for the exterior or a linestring) and the segment index.
     * Identifiers are ordered lexicographically.
    """
    def __init__(self, sourceIndex: int=0, multiIndex: int=-1, ringIndex: int=-1, segmentIndex: int=-1):
        self.sourceIndex = sourceIndex
        self.multiIndex = multiIndex
        self.ringIndex = ringIndex
        self.segmentIndex = segmentIndex

    @property
    def key(self):
        return (self.sourceIndex, self.multiIndex, self.ringIndex, self.segmentIndex)

    def compareTo(self, other) -> int:
        if self.key < other.key:
            return -1
        if self.key > other.key:
            return 1
        return 0

    def __lt__(self, other):
        return self.compareTo(other) < 0

    def __le__(self, other):
        return self.compareTo(other) <= 0

    def __gt__(self, other):
        return self.compareTo(other) > 0

    def __ge__(self, other):
        return self.compareTo(other) >= 0

    def __eq__(self, other):
        if not isinstance(other, SegmentIdentifier):
            return NotImplemented
        return self.key == other.key

    def __ne__(self, other):
        if not isinstance(other, SegmentIdentifier):
            return NotImplemented
        return self.key != other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self) -> str:
        return "s:{}, m:{}, r:{}, #:{}".format(*self.key)


class TurnOperation():
    """
     * One side of a turn.
     *
     * @param operation an OperationType value
     * @param segId the SegmentIdentifier of the segment the turn lies on
     * @param distance the (enriched) distance of the turn from the start
     *        of that segment, monotone along the segment
    """
    def __init__(self, operation: int=OperationType.NONE, segId=None, distance: float=0.0):
        self.operation = operation
        self.segId = SegmentIdentifier() if segId is None else segId
        self.distance = distance

    def __str__(self) -> str:
        return "seg {} dist {}".format(
            self.segId,
            self.distance)


class TurnInfo():
    """
     * An intersection point between a linestring and the boundary
     * of a polygon.
     * operations[0] describes the linestring side, operations[1]
     * (when present) the polygon side.
    """
    def __init__(self, point, method: int=MethodType.NONE, operations=None):
        self.point = Coordinate.fromTuple(point)
        self.method = method
        self.operations = [] if operations is None else list(operations)

    def check(self, linestring) -> None:
        """
         * Validates the turn against the linestring it was computed for.
         *
         * @throws TurnException when the turn is malformed
        """
        if len(self.operations) == 0:
            raise TurnException("turn has no operations", self)

        if not MethodType.isValid(self.method):
            raise TurnException("unknown method {}".format(self.method), self)

        op = self.operations[0]

        if not OperationType.isValid(op.operation):
            raise TurnException("unknown operation {}".format(op.operation), self)

        if not isfinite(op.distance) or op.distance < 0:
            raise TurnException("invalid distance {}".format(op.distance), self)

        segmentIndex = op.segId.segmentIndex
        if not 0 <= segmentIndex < linestring.numSegments:
            raise TurnException(
                "segment index {} out of range [0, {})".format(segmentIndex, linestring.numSegments),
                self)

    def __str__(self) -> str:
        return "{}/{} {} {}".format(
            MethodType.toMethodSymbol(self.method),
            OperationType.toOperationSymbol(self.operations[0].operation) if self.operations else '-',
            self.point,
            self.operations[0] if self.operations else "")

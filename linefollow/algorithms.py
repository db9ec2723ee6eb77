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


import logging
logger = logging.getLogger("linefollow.algorithms")
from .shared import (
    Location,
    Coordinate
    )


class RayCrossingCounter():
    """
     * Counts the number of segments crossed by a horizontal ray extending to the right
     * from a given point, in an incremental fashion.
     *
     * The class determines the situation where the point lies exactly on a segment.
     * When being used for Point-In-Polygon determination, this case allows short-circuiting
     * the evaluation.
     *
     * The orientation of the rings is unimportant.
    """
    def __init__(self, point):
        self._point = point
        self._crossingCount = 0
        self._isPointOnSegment = False

    @staticmethod
    def locatePointInRing(p, ring):
        """
         * Determines the {Location} of a point in a ring.
         *
         * @param p the point to test
         * @param ring an array of Coordinates forming a ring
         * @return the location of the point in the ring
        """
        rcc = RayCrossingCounter(p)

        for i in range(1, len(ring)):
            rcc.countSegment(ring[i - 1], ring[i])
            if rcc._isPointOnSegment:
                return rcc.location

        return rcc.location

    @staticmethod
    def orientationIndex(p1, p2, q) -> int:
        """
         * Returns the index of the direction of the point q
         * relative to a vector specified by p1-p2.
         *
         * @return 1 if q is counter-clockwise (left) from p1-p2
         * @return -1 if q is clockwise (right) from p1-p2
         * @return 0 if q is collinear with p1-p2
        """
        det = (p2.x - p1.x) * (q.y - p2.y) - (p2.y - p1.y) * (q.x - p2.x)
        if det > 0:
            return 1
        if det < 0:
            return -1
        return 0

    def countSegment(self, p1, p2):
        """
         * Counts a segment
         *
         * @param p1 an endpoint of the segment
         * @param p2 another endpoint of the segment
        """
        point = self._point

        # segment strictly to the left of the test point
        if p1.x < point.x and p2.x < point.x:
            return

        if p2 == point:
            self._isPointOnSegment = True
            return

        # horizontal segments are only checked for the point lying on them
        if p1.y == point.y and p2.y == point.y:
            minx, maxx = min(p1.x, p2.x), max(p1.x, p2.x)
            if maxx >= point.x >= minx:
                self._isPointOnSegment = True
            return

        # an upward edge includes its starting endpoint and excludes its final endpoint,
        # a downward edge excludes its starting endpoint and includes its final endpoint
        if (p1.y > point.y and p2.y <= point.y) or (p2.y > point.y and p1.y <= point.y):

            sign = RayCrossingCounter.orientationIndex(p1, p2, point)

            if sign == 0:
                self._isPointOnSegment = True
                return

            if p2.y < p1.y:
                sign = -sign

            if sign > 0:
                self._crossingCount += 1

    @property
    def location(self):
        if self._isPointOnSegment:
            return Location.BOUNDARY

        # odd number of crossings
        if (self._crossingCount % 2) == 1:
            return Location.INTERIOR

        return Location.EXTERIOR


class PointLocator():
    """
     * Computes the topological relationship (Location)
     * of a single point to a Polygon.
     *
     * A point on the exterior or on a hole ring is on the BOUNDARY,
     * a point inside a hole is in the EXTERIOR.
    """
    @staticmethod
    def locateInRing(coord, ring):
        if not ring.envelope.covers(coord):
            return Location.EXTERIOR
        return RayCrossingCounter.locatePointInRing(coord, ring.coords)

    @staticmethod
    def locate(coord, polygon):
        if polygon.is_empty:
            return Location.EXTERIOR

        exteriorLoc = PointLocator.locateInRing(coord, polygon.exterior)
        if exteriorLoc != Location.INTERIOR:
            return exteriorLoc

        for hole in polygon.interiors:
            holeLoc = PointLocator.locateInRing(coord, hole)
            if holeLoc == Location.INTERIOR:
                return Location.EXTERIOR
            if holeLoc == Location.BOUNDARY:
                return Location.BOUNDARY

        return Location.INTERIOR


def within(coord, polygon) -> bool:
    """
     * Tests whether a point lies in the interior of a polygon.
     * The boundary is not inside.
    """
    loc = PointLocator.locate(Coordinate.fromTuple(coord), polygon)
    logger.debug("within(): %s is %s", coord, Location.toLocationSymbol(loc))
    return loc == Location.INTERIOR

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


from math import sqrt
import logging
import numpy as np
logger = logging.getLogger("linefollow")


class TopologyException(Exception):
    """
     * Indicates an invalid or inconsistent topological situation encountered
     * during processing
    """
    def __init__(self, message="", coord=None):
        if coord is None:
            msg = "TopologyException: {}".format(message)
        else:
            msg = "TopologyException: {} at {}".format(message, coord)
        Exception.__init__(self, msg)
        self.coord = coord


class Location():
    """
    *  Used for uninitialized location values.
    """
    UNDEF = -1

    """
    * Location value for the interiors of a geometry.
    """
    INTERIOR = 0

    """
    * Location value for the boundary of a geometry.
    """
    BOUNDARY = 1

    """
    * Location value for the exterior of a geometry.
    """
    EXTERIOR = 2

    @staticmethod
    def toLocationSymbol(loc: int) -> str:
        """
         *  Converts the location value to a location symbol, for example, EXTERIOR => 'e'.
        """
        if loc == Location.EXTERIOR:
            return 'e'
        elif loc == Location.BOUNDARY:
            return 'b'
        elif loc == Location.INTERIOR:
            return 'i'
        elif loc == Location.UNDEF:
            return '-'
        raise ValueError("Unknown location value: {}".format(loc))


class Envelope():
    """
     * An Envelope defines a rectangulare region of the 2D coordinate plane.
     *
     * It is used here as the bounding box of a ring, a cheap reject
     * before any point location.
    """
    def __init__(self, minx=0, miny=0, maxx=-1, maxy=-1):
        self.minx = minx
        self.miny = miny
        self.maxx = maxx
        self.maxy = maxy

    @staticmethod
    def fromCoords(coords):
        """
         * Computes the bounding box of a sequence of Coordinates.
         * An empty sequence gives a null Envelope.
        """
        if len(coords) == 0:
            return Envelope()
        xy = np.array([(c.x, c.y) for c in coords], dtype=float)
        minx, miny = xy.min(axis=0)
        maxx, maxy = xy.max(axis=0)
        return Envelope(float(minx), float(miny), float(maxx), float(maxy))

    def isNull(self) -> bool:
        return self.maxx < self.minx

    def covers(self, coord) -> bool:
        if self.isNull():
            return False
        return (self.minx <= coord.x <= self.maxx and
            self.miny <= coord.y <= self.maxy)

    def __str__(self) -> str:
        return "Env[{}:{},{}:{}]".format(self.minx, self.maxx, self.miny, self.maxy)


class Coordinate():
    """
    * Coordinate is the lightweight class used to store coordinates.
    *
    * Coordinate objects are two-dimensional points, with an additional
    * z-ordinate. Comparison and equality ignore the z-ordinate.
    """
    def __init__(self, x: float=0, y: float=0, z: float=0):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def fromTuple(v):
        if isinstance(v, Coordinate):
            return v
        if len(v) > 2:
            return Coordinate(v[0], v[1], v[2])
        return Coordinate(v[0], v[1])

    def compareTo(self, other) -> int:
        if self.x < other.x:
            return -1
        if self.x > other.x:
            return 1
        if self.y < other.y:
            return -1
        if self.y > other.y:
            return 1
        return 0

    def distance(self, other):
        """ 2d distance """
        dx = self.x - other.x
        dy = self.y - other.y
        return sqrt(dx ** 2 + dy ** 2)

    def equals2D(self, other):
        if self.x != other.x or self.y != other.y:
            return False
        return True

    def clone(self):
        return Coordinate(self.x, self.y, self.z)

    def __hash__(self):
        return hash((self.x, self.y))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.equals2D(other)

    def __ne__(self, other) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return not self.equals2D(other)

    def __lt__(self, other):
        return self.compareTo(other) < 0

    def __le__(self, other):
        return self.compareTo(other) <= 0

    def __gt__(self, other):
        return self.compareTo(other) > 0

    def __ge__(self, other):
        return self.compareTo(other) >= 0

    def __repr__(self) -> str:
        return "Coordinate({}, {})".format(self.x, self.y)

    def __str__(self) -> str:
        return "({}, {})".format(self.x, self.y)


class CoordinateSequence(list):
    """
     * CoordinateSequence
     *
     * An ordered list of Coordinates. It is the default container
     * of the pieces emitted by the follow operation.
    """
    def __init__(self, coords=None):
        list.__init__(self)
        if coords is not None:
            self.extend(coords)

    @property
    def envelope(self):
        return Envelope.fromCoords(self)

    def __str__(self) -> str:
        return "({})".format(", ".join([str(c) for c in self]))

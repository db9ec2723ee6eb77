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


from .shared import (
    Coordinate,
    CoordinateSequence
    )


class LineString():
    """
     *  Models a LineString.
     *
     *  A LineString consists of a sequence of vertices v0 .. v(n-1),
     *  segment i being (vi, v(i+1)).
     *  Consecutive vertices may be equal: they are kept as given,
     *  since segment indices of intersections refer to them.
     *
     *  A linestring must have either 0 or 2 or more points.
     *  If these conditions are not met, the constructor throws
     *  a ValueError
    """
    def __init__(self, coords=None):

        if coords is None:
            coords = []

        # Envelope internal cache
        self._env = None
        self._coords = CoordinateSequence([Coordinate.fromTuple(c) for c in coords])

        self.validateConstruction()

    def validateConstruction(self):
        if self.numpoints == 1:
            raise ValueError("point array must contain 0 or >1 elements")

    @property
    def coords(self):
        return self._coords

    @property
    def numpoints(self) -> int:
        return len(self._coords)

    @property
    def numSegments(self) -> int:
        return max(0, len(self._coords) - 1)

    @property
    def is_empty(self) -> bool:
        return len(self._coords) == 0

    @property
    def isClosed(self) -> bool:
        if self.is_empty:
            return False
        return self._coords[0] == self._coords[-1]

    @property
    def envelope(self):
        if self._env is None:
            self._env = self._coords.envelope
        return self._env

    def __len__(self) -> int:
        return len(self._coords)

    def __getitem__(self, index):
        return self._coords[index]

    def __iter__(self):
        return iter(self._coords)

    def __str__(self) -> str:
        return "LINESTRING {}".format(self._coords)


class LinearRing(LineString):
    """
     * Models a LinearRing.
     *
     * A LinearRing is a LineString which is both closed and simple.
     * Either orientation of the ring is allowed.
     *
     * A ring must have either 0 or 4 or more points.
     * The first and last points must be equal (in 2D).
     * If these conditions are not met, the constructor throws
     * a ValueError
    """
    def validateConstruction(self):
        if 0 < self.numpoints < 4:
            raise ValueError("point array must contain 0 or >3 elements")
        elif self.numpoints > 0 and self._coords[0] != self._coords[-1]:
            raise ValueError("first and last points must be equal")

    @property
    def isClosed(self) -> bool:
        return True

    def __str__(self) -> str:
        return "LINEARRING {}".format(self._coords)


class Polygon():
    """
     * Polygon
     *
     * Represents a linear polygon, which may include interiors (holes).
     *
     * The exterior and interiors of the polygon are represented by {LinearRing}s.
     * The orientation of the rings in the polygon does not matter.
    """
    def __init__(self, exterior=None, interiors=None):

        if exterior is None:
            exterior = LinearRing()

        if not isinstance(exterior, LinearRing):
            raise ValueError("exterior must be a LinearRing")

        if interiors is None:
            interiors = []

        for hole in interiors:
            if not isinstance(hole, LinearRing):
                raise ValueError("interiors must be LinearRings")

        if exterior.is_empty and any(not hole.is_empty for hole in interiors):
            raise ValueError("exterior is empty but interiors are not")

        self.exterior = exterior
        self.interiors = list(interiors)

    @property
    def is_empty(self) -> bool:
        return self.exterior.is_empty

    @property
    def envelope(self):
        return self.exterior.envelope

    @property
    def rings(self):
        return [self.exterior] + self.interiors

    def __str__(self) -> str:
        return "POLYGON ({})".format(", ".join(str(ring.coords) for ring in self.rings))


class GeometryFactory():
    """
     * Supplies a set of utility methods for building Geometry objects
     * from Coordinates or from (x, y) tuples.
    """
    @staticmethod
    def createLineString(coords=None):
        return LineString(coords)

    @staticmethod
    def createLinearRing(coords=None):
        """
         * An open ring (first point differs from the last one)
         * is closed before the LinearRing is built.
        """
        if coords is None:
            return LinearRing()
        coords = [Coordinate.fromTuple(c) for c in coords]
        if len(coords) > 0 and coords[0] != coords[-1]:
            coords.append(coords[0].clone())
        return LinearRing(coords)

    @staticmethod
    def createPolygon(exterior=None, interiors=None):
        if exterior is not None and not isinstance(exterior, LinearRing):
            exterior = GeometryFactory.createLinearRing(exterior)
        if interiors is not None:
            interiors = [
                hole if isinstance(hole, LinearRing) else GeometryFactory.createLinearRing(hole)
                for hole in interiors
            ]
        return Polygon(exterior, interiors)

    @staticmethod
    def toLineString(geom):
        if isinstance(geom, LineString):
            return geom
        return LineString(geom)

    @staticmethod
    def toPolygon(geom):
        if isinstance(geom, Polygon):
            return geom
        if isinstance(geom, LinearRing):
            return Polygon(geom)
        return GeometryFactory.createPolygon(geom)

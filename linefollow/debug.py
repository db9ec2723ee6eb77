from matplotlib import pyplot as plt

from .defs import Debug
from .turn_info import (
    MethodType,
    OperationType
    )


def plotLine(line, vertsOrder, lineColor=None, width=None, order=100):
    x = [v.x for v in line]
    y = [v.y for v in line]
    plt.plot(
        x, y,
        color=Debug.lineColor if lineColor is None else lineColor,
        linewidth=Debug.width if width is None else width,
        zorder=order
    )
    if vertsOrder:
        for i, (xx, yy) in enumerate(zip(x, y)):
            plt.text(xx, yy, str(i), fontsize=12)


def plotPolygon(polygon, vertsOrder, lineColor=None, fillColor=None, width=None, fill=False, alpha=None, order=50):
    lineColor = Debug.polygonColor if lineColor is None else lineColor
    fillColor = Debug.polygonColor if fillColor is None else fillColor
    for ring in polygon.rings:
        if ring.is_empty:
            continue
        x = [v.x for v in ring]
        y = [v.y for v in ring]
        if fill:
            plt.fill(x[:-1], y[:-1], color=fillColor, alpha=Debug.fillAlpha if alpha is None else alpha, zorder=order)
        plt.plot(x, y, color=lineColor, linestyle=':', linewidth=Debug.width if width is None else width, zorder=order)
        if vertsOrder:
            for i, (xx, yy) in enumerate(zip(x[:-1], y[:-1])):
                plt.text(xx, yy, str(i), fontsize=12)


def plotTurns(turns, color=None, order=200):
    color = Debug.turnColor if color is None else color
    for turn in turns:
        p = turn.point
        plt.plot(p.x, p.y, 'o', color=color, zorder=order)
        # e.g. "i/u": a crossing turn leaving the polygon
        label = "%s/%s" % (
            MethodType.toMethodSymbol(turn.method),
            OperationType.toOperationSymbol(turn.operations[0].operation) if turn.operations else '-'
        )
        plt.text(p.x, p.y, '  ' + label, fontsize=10, zorder=order)


def plotFollow(linestring, polygon, turns, pieces, vertsOrder=False):
    """
    Plots the input of a follow operation together with the resulting pieces
    """
    plotPolygon(polygon, vertsOrder, fill=True)
    plotLine(linestring, vertsOrder)
    plotTurns(turns)
    for piece in pieces:
        plotLine(piece, False, Debug.pieceColor, 3 * Debug.width, 150)


def plotEnd():
    plt.gca().axis('equal')
    plt.show()

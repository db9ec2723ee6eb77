"""
Settings of the linefollow package.

The values are class attributes, they can be changed at runtime, for example:
    from linefollow.defs import Follow
    Follow.debugTraverse = True
"""


class Follow:
    # validate each turn against the linestring before following the turns
    checkTurns = True
    # log the decision taken for each turn at DEBUG level
    debugTraverse = False


class Debug:
    lineColor = 'k'
    polygonColor = 'b'
    pieceColor = 'r'
    turnColor = 'g'
    width = 1.
    fillAlpha = 0.2

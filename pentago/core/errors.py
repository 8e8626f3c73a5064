from __future__ import annotations


class PentagoError(Exception):
    pass


class IllegalMoveError(PentagoError, ValueError):
    pass


class SearchError(PentagoError, ValueError):
    pass

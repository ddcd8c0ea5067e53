"""
Errors raised while building and logging a flight
"""


class FlightLogError(Exception):
    """
    Base class for every error that should end a flog run with a message instead of a
    traceback
    """


class MalformedDuration(FlightLogError, ValueError):
    pass


class EditorIo(FlightLogError):
    """
    Reading or writing the temporary notes file failed, or the editor couldn't be run
    """


class StoreIo(FlightLogError):
    """
    The flight log (or the directory holding it) couldn't be created or written to
    """

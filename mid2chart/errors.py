'''
Exceptions for the mid2chart library
'''


class Mid2ChartException(Exception):
    """
    Generic base class for mid2chart exceptions
    """
    pass


class Mid2ChartIOError(Mid2ChartException):
    """
    IO error (MIDI file could not be read or is not a supported type)
    """
    pass


class Mid2ChartValueError(Mid2ChartException, ValueError):
    """
    Value error
    """
    pass


class Mid2ChartContentError(Mid2ChartException):
    """
    Content error (such as no PART GUITAR track)
    """
    pass

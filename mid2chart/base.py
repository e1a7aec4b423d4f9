import collections
from enum import Enum
from mid2chart.errors import *
from mid2chart import constants


# Named tuple types for several lists throughout
RawEvent = collections.namedtuple('RawEvent', ['tick', 'msg'])
TempoMarker = collections.namedtuple('TempoMarker', ['tick', 'bpm'])
TimeSignatureMarker = collections.namedtuple('TimeSignatureMarker', ['tick', 'num'])
ChartNote = collections.namedtuple('ChartNote', ['tick', 'note_type', 'lane', 'sustain'])
ChartEvent = collections.namedtuple('ChartEvent', ['tick', 'text'])


class TrackRole(Enum):
    """
    Semantic role of a MIDI track, decided from its track name
    """
    GUITAR = constants.GUITAR_TRACK_NAME
    GUITAR_COOP = constants.GUITAR_COOP_TRACK_NAME
    RHYTHM = constants.RHYTHM_TRACK_NAME
    BASS = constants.BASS_TRACK_NAME
    DRUMS = constants.DRUMS_TRACK_NAME
    EVENTS = constants.EVENTS_TRACK_NAME
    UNKNOWN = None

    @classmethod
    def from_name(cls, name):
        """
        Looks up the role for a track name.  Names must match exactly.

        :param name: track name, or None if the track has no name
        :type name: str
        :return: track role
        :rtype: TrackRole
        """
        if name is None:
            return cls.UNKNOWN
        for role in cls:
            if role.value == name:
                return role
        return cls.UNKNOWN

    @property
    def instrument(self):
        """ Output instrument for note tracks, or None for roles without note sections """
        return _ROLE_INSTRUMENTS.get(self)


_ROLE_INSTRUMENTS = {
    TrackRole.GUITAR: 'Single',
    TrackRole.GUITAR_COOP: 'DoubleGuitar',
    TrackRole.RHYTHM: 'DoubleBass',
    TrackRole.BASS: 'DoubleBass',
    TrackRole.DRUMS: 'Drums',
}


class Mid2ChartBase:
    @classmethod
    def m2c_type(cls):
        return 'Mid2ChartBase'

    def __init__(self):
        self._options = {}

    def get_option(self, arg, default=None):
        """
        Get an option

        :param arg: option name
        :type arg: str
        :param default: default value
        :type default: type of option
        :return: value of option
        :rtype: option type
        """
        if arg in self._options:
            return self._options[arg]
        return default

    def set_options(self, **kwargs):
        """
        Set options.  All option keywords are converted to lowercase.

        :param kwargs: options
        :type kwargs: keyword options
        """
        for op, val in kwargs.items():
            self._options[op.lower()] = val


class Mid2ChartIO(Mid2ChartBase):
    @classmethod
    def m2c_type(cls):
        return 'IO'

    def __init__(self):
        Mid2ChartBase.__init__(self)

    def to_bin(self, sequence, **kwargs):
        """
        Outputs a sequence into the desired format (which may be ASCII text)

        :param sequence: decoded MIDI sequence
        :type sequence: midi.MidiSequence
        :param kwargs: Keyword options for the particular I/O class
        :return: binary
        :rtype: either str or bytearray, depending on the output
        """
        raise NotImplementedError("Not implemented for type %s" % self.m2c_type())

    def to_file(self, sequence, filename, **kwargs):
        """
        Writes a sequence to a file

        :param sequence: decoded MIDI sequence
        :type sequence: midi.MidiSequence
        :param filename: Name of output file
        :type filename: str
        :param kwargs: Keyword options for the particular I/O class
        :return: True on success
        :rtype: bool
        """
        raise NotImplementedError("Not implemented for type %s" % self.m2c_type())


# --------------------------------------------------------------------------------------
#
#  Utility functions
#
# --------------------------------------------------------------------------------------


def scale_tick(tick, resolution):
    """
    Rescales a MIDI tick to the fixed chart resolution of 192 ticks per beat.
    The result is truncated, never rounded.

    :param tick: tick in the source resolution
    :type tick: int
    :param resolution: source ticks per quarter note
    :type resolution: int
    :return: tick in chart resolution
    :rtype: int
    """
    if resolution <= 0:
        raise Mid2ChartValueError("Illegal resolution %d" % resolution)
    if tick < 0:
        raise Mid2ChartValueError("Illegal tick %d" % tick)
    return tick * constants.CHART_RESOLUTION // resolution


def difficulty_for_note(note_num):
    """
    Gets the difficulty band for a MIDI note number.  The highest matching band wins.

    :param note_num: MIDI note number
    :type note_num: int
    :return: difficulty name, or None for notes below the Easy band
    :rtype: str
    """
    for low, difficulty in constants.DIFFICULTY_THRESHOLDS:
        if note_num >= low:
            return difficulty
    return None


def lane_for_note(note_num):
    """
    Gets the chart note type and lane for a MIDI note number.

    :param note_num: MIDI note number
    :type note_num: int
    :return: ('N', 0-4) for fret lanes, ('S', 0-2) for special lanes, None if the note has no lane
    :rtype: tuple
    """
    return constants.LANE_MAP.get(note_num % 12)


def strip_brackets(text):
    """ Removes one pair of enclosing square brackets, if present """
    if len(text) >= 2 and text.startswith('[') and text.endswith(']'):
        return text[1:-1]
    return text

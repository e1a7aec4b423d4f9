import mido
from mid2chart.base import *


class MidiSequence:
    """
    A decoded Standard MIDI File: an ordered list of tracks, each an ordered list of
    RawEvents with absolute ticks, plus the file resolution (ticks per quarter note).

    Decoding is done by the `mido`_ library.  mido decodes the text of track name, text
    and marker meta messages with the latin-1 charset, which maps every byte to the code
    point of the same value.

    .. _mido: https://mido.readthedocs.io/en/latest/
    """

    def __init__(self, resolution, tracks=None):
        if resolution is None or resolution <= 0:
            raise Mid2ChartIOError("Illegal MIDI resolution %s" % resolution)
        self.resolution = resolution  #: ticks per quarter note in the source file
        self.tracks = tracks if tracks is not None else []  #: list of lists of RawEvent

    @classmethod
    def from_file(cls, filename):
        """
        Reads a MIDI file into a MidiSequence.

        :param filename: MIDI filename
        :type filename: str
        :return: decoded sequence
        :rtype: MidiSequence
        """
        try:
            midi_file = mido.MidiFile(filename)
        except Exception as e:
            raise Mid2ChartIOError("Could not read MIDI sequence from %s: %s" % (filename, e)) from e
        return cls.from_mido(midi_file)

    @classmethod
    def from_mido(cls, midi_file):
        """
        Builds a MidiSequence from a mido MidiFile.  Type 0 files are split into a meta
        track followed by one track per channel.

        :param midi_file: mido MIDI file
        :type midi_file: mido.MidiFile
        :return: decoded sequence
        :rtype: MidiSequence
        """
        if int(midi_file.type) > 1:
            raise Mid2ChartIOError("Midi type %d detected. Only midi type 0 and 1 files supported."
                                   % midi_file.type)
        midi_tracks = midi_file.tracks
        if midi_file.type == 0 and len(midi_tracks) > 0:
            midi_tracks = split_midi_zero_into_tracks(midi_tracks[0])
        tracks = [midi_track_to_events(t) for t in midi_tracks]
        return cls(midi_file.ticks_per_beat, tracks)


def midi_track_to_events(midi_track):
    """
    Converts a mido track (delta times) into a list of RawEvents (absolute ticks)

    :param midi_track: mido track
    :type midi_track: mido.MidiTrack
    :return: events in file order
    :rtype: list of RawEvent
    """
    current_time = 0
    events = []
    for msg in midi_track:
        current_time += msg.time
        events.append(RawEvent(current_time, msg))
    return events


def track_name(events):
    """
    Finds the first track name meta event in a track.

    :param events: track events
    :type events: list of RawEvent
    :return: the decoded name, or None if there is no name event
    :rtype: str
    """
    name_event = next((e for e in events if e.msg.type == 'track_name'), None)
    if name_event is None:
        return None
    return name_event.msg.name


def split_midi_zero_into_tracks(midi_track):
    """
    For MIDI Type 0 files, split the notes into tracks.  Meta messages go to track 0
    and the channel messages go to tracks 1-16 by channel.

    :param midi_track: the single track of a type 0 file
    :type midi_track: mido.MidiTrack
    :return: tracks with delta times
    :rtype: list of mido.MidiTrack
    """
    last_times = [0 for i in range(17)]
    tracks = [mido.MidiTrack() for i in range(17)]
    current_time = 0
    for msg in midi_track:
        current_time += msg.time
        if msg.is_meta:
            ch = 0
        elif msg.type != 'sysex':
            ch = msg.channel + 1
        else:
            continue
        tracks[ch].append(msg.copy(time=current_time - last_times[ch]))
        last_times[ch] = current_time
    # Track 0 always stays, since it is the tempo track
    return [tracks[0]] + [t for t in tracks[1:] if len(t) > 0]

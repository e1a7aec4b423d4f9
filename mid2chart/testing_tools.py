import hashlib
import re
import struct
import mido
from mid2chart.midi import MidiSequence


def md5_hash_no_spaces(input):
    input = re.sub('\\s', '', input)
    md5 = hashlib.md5(input.encode('ascii', 'ignore'))
    return md5.hexdigest()


def note(tick, note_num, duration, velocity=100, channel=0):
    """
    A note as a note_on/note_off pair with absolute ticks

    :return: list of (tick, message)
    """
    return [(tick, mido.Message('note_on', note=note_num, velocity=velocity, channel=channel)),
            (tick + duration, mido.Message('note_off', note=note_num, velocity=0, channel=channel))]


def make_track(name, timed_messages=()):
    """
    Builds a mido track from (absolute tick, message) pairs.  Messages with equal ticks
    keep their given order.

    :param name: track name, or None for a track without a name event
    :param timed_messages: iterable of (tick, mido message)
    :return: track with delta times
    :rtype: mido.MidiTrack
    """
    track = mido.MidiTrack()
    if name is not None:
        track.append(mido.MetaMessage('track_name', name=name, time=0))
    last_time = 0
    for tick, msg in sorted(timed_messages, key=lambda tm: tm[0]):
        track.append(msg.copy(time=tick - last_time))
        last_time = tick
    return track


def make_midi(tracks, ticks_per_beat=480):
    midi_file = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
    midi_file.tracks.extend(tracks)
    return midi_file


def make_sequence(tracks, ticks_per_beat=480):
    return MidiSequence.from_mido(make_midi(tracks, ticks_per_beat))


def raw_midi_bytes(track_chunks, ticks_per_beat=480):
    """
    Builds the bytes of a type 1 MIDI file from raw track data, for events that mido
    refuses to write

    :param track_chunks: list of track data bytes (delta times and events, without the MTrk header)
    :return: file contents
    :rtype: bytes
    """
    result = struct.pack('>4sIHHH', b'MThd', 6, 1, len(track_chunks), ticks_per_beat)
    for data in track_chunks:
        result += struct.pack('>4sI', b'MTrk', len(data)) + data
    return result

""" Interpretation of instrument and EVENTS tracks into chart note and event lines """

import collections
import itertools
import more_itertools as moreit
from mid2chart.base import *

# Result of pairing a note_on with the event that ends it.  A later note_on for the same
# note number also ends the note; that event is consumed and never starts a note itself.
ExplicitOff = collections.namedtuple('ExplicitOff', ['index', 'tick'])
ImplicitOffByRepeatOn = collections.namedtuple('ImplicitOffByRepeatOn', ['index', 'tick'])


def find_note_off(events, on_index):
    """
    Finds the event that ends the note started at events[on_index].  The nearest following
    note_off or note_on with the same note number wins; the channel is not compared.

    :param events: track events
    :type events: list of RawEvent
    :param on_index: index of the note_on event
    :type on_index: int
    :return: the pairing, or None if the note is never turned off
    :rtype: ExplicitOff, ImplicitOffByRepeatOn or None
    """
    note_num = events[on_index].msg.note

    def ends_note(item):
        msg = item[1].msg
        return msg.type in ('note_on', 'note_off') and msg.note == note_num

    following = enumerate(itertools.islice(events, on_index + 1, None), on_index + 1)
    match = moreit.first_true(following, pred=ends_note)
    if match is None:
        return None
    index, event = match
    if event.msg.type == 'note_off':
        return ExplicitOff(index, event.tick)
    return ImplicitOffByRepeatOn(index, event.tick)


def note_sustain(on_tick, off_tick):
    """
    Sustain in chart ticks.  Anything shorter than the sustain threshold is a plain hit.

    :param on_tick: scaled start tick
    :param off_tick: scaled end tick, or None if the note never ends
    :return: sustain length, 0 for plain hits
    :rtype: int
    """
    if off_tick is None:
        return 0
    sustain = off_tick - on_tick
    if sustain < constants.SUSTAIN_THRESHOLD:
        return 0
    return sustain


def allowed_events(role):
    """
    Gets the text events kept for an instrument track.

    :param role: track role
    :type role: TrackRole
    :return: allowed event strings (brackets included), or None if the role keeps no text events
    :rtype: frozenset
    """
    if role in (TrackRole.GUITAR, TrackRole.GUITAR_COOP):
        return constants.GUITAR_EVENTS
    if role in (TrackRole.BASS, TrackRole.RHYTHM):
        return constants.BASS_EVENTS
    return None


def is_allowed_event(text, allowed):
    return text in allowed or ('[' + constants.SECTION_EVENT_PREFIX) in text


def interpret_track(builder, events, role, resolution):
    """
    Walks one classified track in order and writes its notes and text events into the chart.

    Notes go to the bucket of their difficulty for the role's instrument.  Allowed text
    events go to every difficulty of the instrument.  On the EVENTS track every text
    event goes to [Events].

    :param builder: chart being built
    :type builder: ChartBuilder
    :param events: track events
    :type events: list of RawEvent
    :param role: role of the track
    :type role: TrackRole
    :param resolution: source ticks per quarter note
    :type resolution: int
    :return: the notes written, in order, as (difficulty, ChartNote)
    :rtype: list of tuple
    """
    instrument = role.instrument
    allowed = allowed_events(role)
    consumed = set()
    written = []
    for i, event in enumerate(events):
        if i in consumed:
            continue
        msg = event.msg
        tick = scale_tick(event.tick, resolution)
        if msg.type == 'note_on':
            pairing = find_note_off(events, i)
            off_tick = None
            if pairing is not None:
                consumed.add(pairing.index)
                off_tick = scale_tick(pairing.tick, resolution)
            difficulty = difficulty_for_note(msg.note)
            lane = lane_for_note(msg.note)
            if instrument is None or difficulty is None or lane is None:
                continue
            note = ChartNote(tick, lane[0], lane[1], note_sustain(tick, off_tick))
            builder.add_note(instrument, difficulty, *note)
            written.append((difficulty, note))
        elif msg.type == 'text':
            if role is TrackRole.EVENTS:
                builder.add_global_event(tick, strip_brackets(msg.text))
            elif allowed is not None and is_allowed_event(msg.text, allowed):
                builder.add_instrument_event(instrument, tick, strip_brackets(msg.text))
    return written

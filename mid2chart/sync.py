""" Sync track extraction from the tempo track (track 0) """

import math
from mid2chart.base import *


def tempo_to_chart_bpm(mpq):
    """
    Converts a MIDI tempo (microseconds per quarter note) to the chart's BPM * 1000

    :param mpq: microseconds per quarter note
    :type mpq: int
    :return: beats per minute times 1000, truncated
    :rtype: int
    """
    if mpq <= 0:
        raise Mid2ChartValueError("Illegal tempo %d" % mpq)
    return int(math.floor(6.0e7 / mpq * 1000.0))


def extract_sync(builder, events, resolution, synthesize_sections=True):
    """
    Walks the tempo track in order, writing tempo and time signature markers into the
    [SyncTrack] section and setting the song name.  When synthesize_sections is True,
    marker meta events become "section" events in [Events]; that is only wanted for
    files without an EVENTS track.

    :param builder: chart being built
    :type builder: ChartBuilder
    :param events: tempo track events
    :type events: list of RawEvent
    :param resolution: source ticks per quarter note
    :type resolution: int
    :param synthesize_sections: create section events from marker events
    :type synthesize_sections: bool
    :return: the sync markers written, in order
    :rtype: list of TempoMarker and TimeSignatureMarker
    """
    markers = []
    for event in events:
        msg = event.msg
        tick = scale_tick(event.tick, resolution)
        if msg.type == 'track_name':
            builder.name = msg.name
        elif msg.type == 'set_tempo':
            marker = TempoMarker(tick, tempo_to_chart_bpm(msg.tempo))
            builder.add_tempo(*marker)
            markers.append(marker)
        elif msg.type == 'time_signature':
            # Only the numerator goes into the chart
            marker = TimeSignatureMarker(tick, msg.numerator)
            builder.add_time_signature(*marker)
            markers.append(marker)
        elif msg.type == 'marker' and synthesize_sections:
            builder.add_global_event(tick, constants.SECTION_EVENT_PREFIX + msg.text)
    return markers

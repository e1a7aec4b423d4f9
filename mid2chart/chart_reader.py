""" Reader for .chart documents, the consumer side of the chart format """

import re
from dataclasses import dataclass, field
from mid2chart.base import *

section_header_format = re.compile(r'^\[(.+)\]$')
chart_line_format = re.compile(r'^(\S+)\s*=\s*(.*)$')


@dataclass
class SongInfo:
    name: str = ''  #: Song name, without quotes
    offset: int = 0  #: Audio offset
    resolution: int = constants.CHART_RESOLUTION  #: Chart ticks per beat
    player2: str = constants.DEFAULT_COOP  #: Co-op instrument


@dataclass
class ChartFile:
    metadata: SongInfo = field(default_factory=SongInfo)
    sync_track: list = field(default_factory=list)  #: TempoMarker / TimeSignatureMarker in file order
    events: list = field(default_factory=list)  #: ChartEvent from [Events]
    sections: dict = field(default_factory=dict)  #: section name -> list of ChartNote / ChartEvent

    def notes(self, section):
        """ Notes of a section, without its events """
        return [n for n in self.sections.get(section, []) if isinstance(n, ChartNote)]

    def note_times_ms(self, section):
        """
        Gets the time of every note of a section, in milliseconds from the start of the song.
        Times come from the B markers in the sync track; before the first one the tempo is
        120 BPM.

        :param section: section name, e.g. 'ExpertSingle'
        :type section: str
        :return: (milliseconds, note) pairs in note order
        :rtype: list of tuple
        """
        tempos = [m for m in self.sync_track if isinstance(m, TempoMarker)]
        resolution = self.metadata.resolution
        result = []
        current_time = 0.0
        current_tick = 0
        current_bpm = constants.DEFAULT_CHART_BPM
        for note in self.notes(section):
            while len(tempos) > 0 and tempos[0].tick <= note.tick:
                tempo = tempos.pop(0)
                current_time += ticks_to_ms(tempo.tick - current_tick, current_bpm, resolution)
                current_tick = tempo.tick
                current_bpm = tempo.bpm
            result.append((current_time + ticks_to_ms(note.tick - current_tick, current_bpm, resolution), note))
        return result


def ticks_to_ms(ticks, bpm, resolution):
    """
    Converts a tick count to milliseconds

    :param ticks: elapsed chart ticks
    :param bpm: tempo as BPM * 1000
    :param resolution: chart ticks per beat
    :return: elapsed milliseconds
    :rtype: float
    """
    if bpm <= 0 or resolution <= 0:
        raise Mid2ChartValueError("Illegal tempo %d or resolution %d" % (bpm, resolution))
    return 1000 * (ticks / resolution) * (60000 / bpm)


def _to_int(value, line):
    try:
        return int(value)
    except ValueError:
        raise Mid2ChartValueError('Illegal number "%s" in chart line "%s"' % (value, line)) from None


def _parse_song_line(metadata, key, value, line):
    if key == 'Name':
        metadata.name = value.strip('"')
    elif key == 'Offset':
        metadata.offset = _to_int(value, line)
    elif key == 'Resolution':
        metadata.resolution = _to_int(value, line)
    elif key == 'Player2':
        metadata.player2 = value


def _parse_timed_line(key, value, line):
    tick = _to_int(key, line)
    fields = value.split(' ', 1)
    kind = fields[0]
    args = fields[1] if len(fields) > 1 else ''
    if kind == 'B':
        return TempoMarker(tick, _to_int(args, line))
    if kind == 'TS':
        return TimeSignatureMarker(tick, _to_int(args.split()[0], line))
    if kind == 'E':
        return ChartEvent(tick, args.strip('"'))
    if kind in ('N', 'S'):
        parts = args.split()
        if len(parts) != 2:
            raise Mid2ChartValueError('Illegal note in chart line "%s"' % line)
        return ChartNote(tick, kind, _to_int(parts[0], line), _to_int(parts[1], line))
    raise Mid2ChartValueError('Unknown chart entry type "%s" in line "%s"' % (kind, line))


def parse_chart(text):
    """
    Parses a .chart document

    :param text: chart document
    :type text: str
    :return: parsed chart
    :rtype: ChartFile
    """
    chart = ChartFile()
    section = None
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if len(line) == 0 or line in ('{', '}'):
            continue
        m = section_header_format.match(line)
        if m:
            section = m.group(1)
            if section not in ('Song', 'SyncTrack', 'Events'):
                chart.sections.setdefault(section, [])
            continue
        m = chart_line_format.match(line)
        if m is None or section is None:
            raise Mid2ChartValueError('Illegal chart line "%s"' % line)
        key, value = m.group(1), m.group(2).strip()
        if section == 'Song':
            _parse_song_line(chart.metadata, key, value, line)
            continue
        entry = _parse_timed_line(key, value, line)
        if section == 'SyncTrack':
            chart.sync_track.append(entry)
        elif section == 'Events':
            chart.events.append(entry)
        else:
            chart.sections[section].append(entry)
    return chart


def read_chart(filename):
    """
    Reads a .chart file

    :param filename: chart filename
    :type filename: str
    :return: parsed chart
    :rtype: ChartFile
    """
    with open(filename, 'r', encoding='utf-8') as f:
        return parse_chart(f.read())

import collections
from mid2chart.base import *


class ChartBuilder:
    """
    Accumulates the text lines of every chart section during a conversion.

    There is one append-only bucket per section: [Song], [SyncTrack], [Events] and one
    per (difficulty, instrument) pair, such as [ExpertSingle].  The bucket headers and
    closing braces are added by render(), so the buckets only hold body lines.
    """

    def __init__(self):
        self.name = None                  #: song name from the tempo track, None if unnamed
        self.coop = constants.DEFAULT_COOP  #: Player2 instrument
        self.sections = collections.OrderedDict()
        for section in section_names():
            self.sections[section] = []

    def add_line(self, section, tick, body):
        """
        Appends one "tick = body" line to a section

        :param section: section name, e.g. 'ExpertSingle'
        :type section: str
        :param tick: chart tick
        :type tick: int
        :param body: right hand side of the line, e.g. 'N 0 0'
        :type body: str
        """
        if section not in self.sections:
            raise Mid2ChartValueError("Unknown chart section %s" % section)
        self.sections[section].append("\t%d = %s" % (tick, body))

    def add_tempo(self, tick, bpm):
        self.add_line('SyncTrack', tick, "B %d" % bpm)

    def add_time_signature(self, tick, num):
        self.add_line('SyncTrack', tick, "TS %d" % num)

    def add_global_event(self, tick, text):
        """ Global events are written once, quoted """
        self.add_line('Events', tick, 'E "%s"' % text)

    def add_note(self, instrument, difficulty, tick, note_type, lane, sustain):
        self.add_line(difficulty + instrument, tick, "%s %d %d" % (note_type, lane, sustain))

    def add_instrument_event(self, instrument, tick, text):
        """ Instrument events are copied into every difficulty of the instrument """
        for difficulty in constants.DIFFICULTIES:
            self.add_line(difficulty + instrument, tick, "E %s" % text)

    def song_lines(self):
        name = '"%s"' % self.name if self.name is not None else ''
        return ["\tName = %s" % name,
                "\tOffset = 0",
                "\tResolution = %d" % constants.CHART_RESOLUTION,
                "\tPlayer2 = %s" % self.coop]

    def render(self):
        """
        Renders all sections in canonical order

        :return: chart document
        :rtype: str
        """
        lines = []
        for section, body in self.sections.items():
            lines.append("[%s]" % section)
            lines.append("{")
            if section == 'Song':
                lines.extend(self.song_lines())
            lines.extend(body)
            lines.append("}")
        return '\n'.join(lines) + '\n'


def section_names():
    """
    All chart section names in output order

    :return: section names
    :rtype: list of str
    """
    names = ['Song', 'SyncTrack', 'Events']
    for instrument in constants.INSTRUMENTS:
        names.extend(difficulty + instrument for difficulty in constants.DIFFICULTIES)
    return names

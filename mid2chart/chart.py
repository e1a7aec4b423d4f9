import os
from mid2chart.base import *
from mid2chart.builder import ChartBuilder
from mid2chart.midi import MidiSequence
from mid2chart.tracks import classify_tracks
from mid2chart.sync import extract_sync
from mid2chart.notes import interpret_track


def chart_path_for(midi_filename):
    """ Output path for a MIDI file: the same path with the extension replaced by .chart """
    return os.path.splitext(midi_filename)[0] + '.chart'


class Chart(Mid2ChartIO):
    """
    Converts MIDI sequences into the textual .chart format used by rhythm game engines.

    Every track is classified before anything is interpreted, so the decision about
    synthesizing section events from the tempo track's markers does not depend on
    where the EVENTS track sits in the file.

    :keyword options:
        * **verbose** (bool) - print the source resolution and scale factor (default False)
        * **coop_tracks** (bool) - convert PART GUITAR COOP into the DoubleGuitar sections
          (default True)
    """
    @classmethod
    def m2c_type(cls):
        return 'Chart'

    def __init__(self):
        Mid2ChartIO.__init__(self)
        self.set_options(verbose=False, coop_tracks=True)
        self.notices = []  #: notice lines from the most recent conversion
        self.converted = False  #: True if the most recent convert() wrote a chart

    def build(self, sequence):
        """
        Interprets a sequence into a ChartBuilder

        :param sequence: decoded MIDI sequence
        :type sequence: MidiSequence
        :return: the filled chart builder
        :rtype: ChartBuilder
        """
        ignored = () if self.get_option('coop_tracks', True) else (TrackRole.GUITAR_COOP,)
        classification = classify_tracks(sequence.tracks, ignored_roles=ignored)
        if not classification.has_guitar:
            raise Mid2ChartContentError("%s not found. No chart created." % constants.GUITAR_TRACK_NAME)

        if self.get_option('verbose', False):
            print("Resolution = %d" % sequence.resolution)
            print("Scaler = %s" % (constants.CHART_RESOLUTION / sequence.resolution))
        self.notices.append("NumTracks = %d" % len(sequence.tracks))

        builder = ChartBuilder()
        builder.coop = classification.coop
        if len(sequence.tracks) > 0:
            extract_sync(builder, sequence.tracks[0], sequence.resolution,
                         synthesize_sections=not classification.has_events)
        for i, role in classification.note_tracks():
            interpret_track(builder, sequence.tracks[i], role, sequence.resolution)
        self.notices.extend(classification.notices)
        return builder

    def to_bin(self, sequence, **kwargs):
        """
        Converts a MIDI sequence to chart text

        :param sequence: decoded MIDI sequence
        :type sequence: MidiSequence
        :return: chart text
        :rtype: str
        """
        self.set_options(**kwargs)
        self.notices = []
        return self.build(sequence).render()

    def to_file(self, sequence, filename, **kwargs):
        """
        Writes a MIDI sequence to a .chart file.  Nothing is written if the conversion fails.

        :param sequence: decoded MIDI sequence
        :type sequence: MidiSequence
        :param filename: output filename
        :type filename: str
        :return: True on success
        :rtype: bool
        """
        chart_text = self.to_bin(sequence, **kwargs)
        with open(filename, 'w', encoding='utf-8', newline='\n') as f:
            f.write(chart_text)
        return True

    def convert(self, midi_filename, chart_filename=None, **kwargs):
        """
        Reads a MIDI file and writes the chart next to it.  Fatal problems (unreadable file,
        no PART GUITAR track, illegal values such as a zero tempo) end up in the returned
        notice log instead of being raised.

        :param midi_filename: MIDI file to convert
        :type midi_filename: str
        :param chart_filename: output filename, defaults to the MIDI filename with a .chart extension
        :type chart_filename: str
        :return: notice log, one entry per line
        :rtype: list of str
        """
        if chart_filename is None:
            chart_filename = chart_path_for(midi_filename)
        self.converted = False
        log = ["%s:" % os.path.basename(midi_filename)]
        try:
            sequence = MidiSequence.from_file(midi_filename)
            self.to_file(sequence, chart_filename, **kwargs)
        except Mid2ChartIOError as e:
            log.append("Unknown Error: Could not read MIDI sequence. (%s)" % e)
            return log
        except Mid2ChartContentError as e:
            log.extend(self.notices)
            log.append(str(e))
            return log
        except Mid2ChartException as e:
            log.extend(self.notices)
            log.append("Error: %s. No chart created." % e)
            return log
        self.converted = True
        log.extend(self.notices)
        log.append("Conversion Complete!")
        return log

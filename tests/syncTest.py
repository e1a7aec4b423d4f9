import unittest
import mido
from parameterized import parameterized

from mid2chart.base import TempoMarker, TimeSignatureMarker
from mid2chart.builder import ChartBuilder
from mid2chart.sync import extract_sync, tempo_to_chart_bpm
from mid2chart.errors import Mid2ChartValueError
from mid2chart import testing_tools


def tempo_track(name='My Song'):
    return testing_tools.make_track(name, [
        (0, mido.MetaMessage('time_signature', numerator=4, denominator=4)),
        (0, mido.MetaMessage('set_tempo', tempo=500000)),
        (960, mido.MetaMessage('marker', text='intro')),
        (1920, mido.MetaMessage('set_tempo', tempo=400000)),
        (2400, mido.MetaMessage('time_signature', numerator=3, denominator=8)),
        (3000, mido.MetaMessage('marker', text='verse 1')),
        (3000, mido.MetaMessage('key_signature', key='C')),
    ])


class TempoTestCase(unittest.TestCase):
    @parameterized.expand([
        (500000, 120000),
        (400000, 150000),
        (428571, 140000),
        (600000, 100000),
        (1000000, 60000),
        (352941, 170000),
    ])
    def test_tempo_to_chart_bpm(self, mpq, expected):
        self.assertEqual(tempo_to_chart_bpm(mpq), expected)

    def test_illegal_tempo(self):
        with self.assertRaises(Mid2ChartValueError):
            tempo_to_chart_bpm(0)


class ExtractSyncTestCase(unittest.TestCase):
    def setUp(self):
        self.sequence = testing_tools.make_sequence([tempo_track()])
        self.builder = ChartBuilder()

    def test_sync_markers(self):
        markers = extract_sync(self.builder, self.sequence.tracks[0], self.sequence.resolution)
        self.assertEqual(markers, [TimeSignatureMarker(0, 4), TempoMarker(0, 120000),
                                   TempoMarker(768, 150000), TimeSignatureMarker(960, 3)])
        self.assertEqual(self.builder.sections['SyncTrack'],
                         ["\t0 = TS 4", "\t0 = B 120000", "\t768 = B 150000", "\t960 = TS 3"])
        self.assertEqual(self.builder.name, 'My Song')

    def test_marker_sections(self):
        extract_sync(self.builder, self.sequence.tracks[0], self.sequence.resolution)
        self.assertEqual(self.builder.sections['Events'],
                         ['\t384 = E "section intro"', '\t1200 = E "section verse 1"'])

    def test_marker_sections_suppressed(self):
        extract_sync(self.builder, self.sequence.tracks[0], self.sequence.resolution,
                     synthesize_sections=False)
        self.assertEqual(self.builder.sections['Events'], [])

    def test_unnamed_tempo_track(self):
        sequence = testing_tools.make_sequence([tempo_track(name=None)])
        extract_sync(self.builder, sequence.tracks[0], sequence.resolution)
        self.assertIsNone(self.builder.name)
        self.assertEqual(self.builder.song_lines()[0], "\tName = ")

import unittest

from mid2chart.base import ChartNote, ChartEvent, TempoMarker, TimeSignatureMarker
from mid2chart.chart_reader import parse_chart, ticks_to_ms
from mid2chart.errors import Mid2ChartValueError

CHART_TEXT = """[Song]
{
\tName = "Reader Song"
\tOffset = 0
\tResolution = 192
\tPlayer2 = rhythm
}
[SyncTrack]
{
\t0 = TS 4
\t0 = B 120000
\t768 = B 60000
}
[Events]
{
\t0 = E "section intro"
}
[ExpertSingle]
{
\t0 = N 0 0
\t192 = E solo_on
\t384 = N 3 192
\t768 = S 2 0
\t960 = N 1 0
}
[HardSingle]
{
}
"""


class ParseChartTestCase(unittest.TestCase):
    def setUp(self):
        self.chart = parse_chart(CHART_TEXT)

    def test_metadata(self):
        self.assertEqual(self.chart.metadata.name, 'Reader Song')
        self.assertEqual(self.chart.metadata.offset, 0)
        self.assertEqual(self.chart.metadata.resolution, 192)
        self.assertEqual(self.chart.metadata.player2, 'rhythm')

    def test_sync_and_events(self):
        self.assertEqual(self.chart.sync_track, [TimeSignatureMarker(0, 4), TempoMarker(0, 120000),
                                                 TempoMarker(768, 60000)])
        self.assertEqual(self.chart.events, [ChartEvent(0, 'section intro')])

    def test_sections(self):
        self.assertEqual(sorted(self.chart.sections), ['ExpertSingle', 'HardSingle'])
        self.assertEqual(self.chart.sections['ExpertSingle'][1], ChartEvent(192, 'solo_on'))
        self.assertEqual(self.chart.notes('ExpertSingle'),
                         [ChartNote(0, 'N', 0, 0), ChartNote(384, 'N', 3, 192), ChartNote(768, 'S', 2, 0),
                          ChartNote(960, 'N', 1, 0)])
        self.assertEqual(self.chart.notes('HardSingle'), [])
        self.assertEqual(self.chart.notes('EasyDrums'), [])

    def test_note_times(self):
        times = [round(t, 3) for t, _ in self.chart.note_times_ms('ExpertSingle')]
        # 120 BPM for the first four beats, then 60 BPM
        self.assertEqual(times, [0.0, 1000.0, 2000.0, 3000.0])

    def test_default_tempo(self):
        chart = parse_chart("[Song]\n{\n\tResolution = 192\n}\n[ExpertSingle]\n{\n\t192 = N 0 0\n}\n")
        self.assertEqual([t for t, _ in chart.note_times_ms('ExpertSingle')], [500.0])

    def test_ticks_to_ms(self):
        self.assertEqual(ticks_to_ms(192, 120000, 192), 500.0)
        with self.assertRaises(Mid2ChartValueError):
            ticks_to_ms(192, 0, 192)

    def test_malformed(self):
        with self.assertRaises(Mid2ChartValueError):
            parse_chart("[SyncTrack]\n{\n\tzero = B 120000\n}\n")
        with self.assertRaises(Mid2ChartValueError):
            parse_chart("[ExpertSingle]\n{\n\t0 = N 0\n}\n")
        with self.assertRaises(Mid2ChartValueError):
            parse_chart("[ExpertSingle]\n{\n\t0 = Q 0 0\n}\n")
        with self.assertRaises(Mid2ChartValueError):
            parse_chart("\t0 = N 0 0\n")

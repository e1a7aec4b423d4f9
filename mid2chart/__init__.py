
from .midi import MidiSequence
from .chart import Chart
from .builder import ChartBuilder
from .chart_reader import parse_chart, read_chart

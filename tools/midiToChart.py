import sys
import argparse
from os import path

from mid2chart.chart import Chart

"""
Converts a rhythm game MIDI file (one with a PART GUITAR track) into a .chart file.
The chart is written next to the MIDI file unless an output file is given.
"""


def main():
    parser = argparse.ArgumentParser(description="Convert a rhythm game midi file into a .chart file.")
    parser.add_argument('midi_in_file', nargs='?', help='midi filename to import (prompted for if omitted)')
    parser.add_argument('-o', '--output', help='chart filename to export (default: input name with .chart)')
    parser.add_argument('-v', '--verbose', action="store_true", help='print resolution information')
    parser.add_argument('--no-coop', action="store_true", help='ignore PART GUITAR COOP tracks')

    args = parser.parse_args()

    midi_in_file = args.midi_in_file
    if midi_in_file is None:
        midi_in_file = input("Enter mid file path: ").strip()
    print("mid path: %s" % midi_in_file)
    if not path.exists(midi_in_file):
        print('Error: Cannot find "%s"' % midi_in_file, file=sys.stderr)
        sys.exit(1)

    chart = Chart()
    notices = chart.convert(midi_in_file, args.output, verbose=args.verbose, coop_tracks=not args.no_coop)
    print('\n'.join(notices))
    print("\n----------\n")
    if not chart.converted:
        sys.exit(1)


if __name__ == '__main__':
    main()

# Constants for mid2chart
#

# Version information.  Update BUILD_VERSION with every significant bugfix;
# update MINOR_VERSION with every feature addition
MAJOR_VERSION = 0
MINOR_VERSION = 2
BUILD_VERSION = 0

MID2CHART_VERSION = f"{MAJOR_VERSION}.{MINOR_VERSION}.{BUILD_VERSION}"
MID2CHART_RELEASE = f"{MAJOR_VERSION}.{MINOR_VERSION}"

CHART_RESOLUTION = 192    # chart ticks per beat
SUSTAIN_THRESHOLD = 96    # sustains shorter than this (in chart ticks) become plain hits
DEFAULT_COOP = 'bass'
DEFAULT_CHART_BPM = 120000

# Lowest MIDI note number of each difficulty band, checked from the top down
DIFFICULTY_THRESHOLDS = [
    (96, 'Expert'),
    (84, 'Hard'),
    (72, 'Medium'),
    (60, 'Easy'),
]

# Note number mod 12 -> (chart note type, lane)
LANE_MAP = {
    0: ('N', 0),
    1: ('N', 1),
    2: ('N', 2),
    3: ('N', 3),
    4: ('N', 4),
    7: ('S', 2),
    9: ('S', 0),
    10: ('S', 1),
}

# Track names, exactly as they appear in the track name meta event
GUITAR_TRACK_NAME = 'PART GUITAR'
GUITAR_COOP_TRACK_NAME = 'PART GUITAR COOP'
RHYTHM_TRACK_NAME = 'PART RHYTHM'
BASS_TRACK_NAME = 'PART BASS'
DRUMS_TRACK_NAME = 'PART DRUMS'
EVENTS_TRACK_NAME = 'EVENTS'

SECTION_EVENT_PREFIX = 'section '

# Canonical output order of the note sections
INSTRUMENTS = ['Single', 'DoubleGuitar', 'DoubleBass', 'Drums']
DIFFICULTIES = ['Expert', 'Hard', 'Medium', 'Easy']

GUITAR_EVENTS = frozenset([
    '[lighting (chase)]', '[lighting (strobe)]', '[lighting (color1)]', '[lighting (color2)]',
    '[lighting (sweep)]', '[crowd_lighters_fast]', '[crowd_lighters_off]', '[crowd_lighters_slow]',
    '[crowd_half_tempo]', '[crowd_normal_tempo]', '[crowd_double_tempo]', '[band_jump]',
    '[sync_head_bang]', '[sync_wag]', '[lighting ()]', '[lighting (flare)]', '[lighting (blackout)]',
    '[music_start]', '[verse]', '[chorus]', '[solo]', '[end]',
])

BASS_EVENTS = frozenset([
    '[idle]', '[play]', '[solo_on]', '[solo_off]', '[wail_on]', '[wail_off]',
    '[ow_face_on]', '[ow_face_off]', '[half_tempo]', '[normal_tempo]',
])

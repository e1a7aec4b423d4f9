from dataclasses import dataclass, field
from mid2chart.base import *
from mid2chart.midi import track_name


def classify_track(events):
    """
    Determines the role of a track from its first track name event.

    :param events: track events
    :type events: list of RawEvent
    :return: (role, name); name is None when the track has no name event
    :rtype: tuple of (TrackRole, str)
    """
    name = track_name(events)
    return TrackRole.from_name(name), name


@dataclass
class TrackClassification:
    """
    Roles of every track in a sequence, decided before any track is interpreted.
    Track 0 is the tempo track and is never classified by name.
    """
    roles: list = field(default_factory=list)  #: TrackRole per track; index 0 is None
    names: list = field(default_factory=list)  #: track name per track, None if unnamed
    notices: list = field(default_factory=list)  #: one line per ignored track

    @property
    def has_guitar(self):
        return TrackRole.GUITAR in self.roles

    @property
    def has_events(self):
        return TrackRole.EVENTS in self.roles

    @property
    def coop(self):
        """ Song co-op player: 'rhythm' if there is a PART RHYTHM track, otherwise 'bass' """
        if TrackRole.RHYTHM in self.roles:
            return 'rhythm'
        return constants.DEFAULT_COOP

    def note_tracks(self):
        """
        Yields (index, role) for every track that gets interpreted, in file order

        :return: generator of (int, TrackRole)
        """
        for i, role in enumerate(self.roles):
            if i > 0 and role is not TrackRole.UNKNOWN:
                yield i, role


def classify_tracks(tracks, ignored_roles=()):
    """
    Classifies every track of a sequence.  Unnamed and unrecognized tracks are recorded
    as notices and marked UNKNOWN so the rest of the conversion skips them.

    :param tracks: sequence tracks
    :type tracks: list of list of RawEvent
    :param ignored_roles: recognized roles to treat as unknown (reported as ignored)
    :type ignored_roles: collection of TrackRole
    :return: classification of all tracks
    :rtype: TrackClassification
    """
    result = TrackClassification()
    for i, events in enumerate(tracks):
        if i == 0:
            result.roles.append(None)
            result.names.append(track_name(events))
            continue
        role, name = classify_track(events)
        if role in ignored_roles:
            role = TrackRole.UNKNOWN
        result.roles.append(role)
        result.names.append(name)
        if role is TrackRole.UNKNOWN:
            if name is None:
                result.notices.append("Track %d ignored." % i)
            else:
                result.notices.append("Track %d (%s) ignored." % (i, name))
    return result

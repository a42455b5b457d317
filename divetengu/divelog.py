#
# DiveTengu - dive log data engine.
#
# Copyright (C) 2013-2014 by Artur Wroblewski <wrobell@pld-linux.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#


"""
DiveTengu dive log.

The dive log owns all dive log state - dive store, trip registry and
configuration. All operations of the presentation layer are performed
via dive log object.
"""

from functools import cmp_to_key
import logging

from .store import DiveStore
from .trip import TripRegistry
from .assign import TripAssigner
from .deco import Replayer
from . import stats
from . import const

logger = logging.getLogger(__name__)


class DiveLog(object):
    """
    Dive log.

    :var dives: Dive store.
    :var trips: Trip registry.
    :var assigner: Trip assigner.
    :var replayer: Decompression replayer.
    :var surface_depth: Depth below which diver is at the surface, used
        for SAC calculation [mm].
    :var autogroup_enabled: Group dives into trips automatically when
        dives are added or changed.
    :var changed: Dive log has unsaved changes if true.
    """
    def __init__(self):
        super().__init__()
        self.dives = DiveStore()
        self.trips = TripRegistry()
        self.assigner = TripAssigner(self.dives, self.trips)
        self.replayer = Replayer(self.dives)
        self.surface_depth = const.SURFACE_DEPTH
        self.autogroup_enabled = False
        self.changed = False


    @property
    def trip_threshold(self):
        """
        Maximum time between start of two dives grouped into the same
        trip [s].
        """
        return self.assigner.trip_threshold


    @trip_threshold.setter
    def trip_threshold(self, value):
        self.assigner.trip_threshold = value


    @property
    def amount_selected(self):
        """
        Number of selected dives.
        """
        return self.dives.amount_selected


    @property
    def selected_dive(self):
        """
        Position of current selected dive, -1 if none.
        """
        return self.dives.selected_dive


    @property
    def unsaved_changes(self):
        """
        True if dive log changed since last save.
        """
        return self.changed


    def mark_changed(self, changed=True):
        """
        Mark or clear unsaved changes of the dive log.

        :param changed: Dive log has unsaved changes if true.
        """
        self.changed = changed


    def get_dive(self, idx):
        """
        Get dive at a position or null.

        :param idx: Dive position.
        """
        return self.dives.get(idx)


    def find_dive(self, dive_id):
        """
        Find dive by its identifier or return null.

        :param dive_id: Dive identifier.
        """
        return self.dives.find(dive_id)


    def find_trip(self, trip_id):
        """
        Find trip by its identifier or return null.

        :param trip_id: Trip identifier.
        """
        return self.trips.find(trip_id)


    def trip_dives(self, trip):
        """
        Get dives of a trip in chronological order.

        :param trip: Trip.
        """
        return self.assigner.trip_dives(trip)


    def entries(self):
        """
        Get top level dive list entries in display order.

        The entries are trips and dives, which do not belong to any trip.
        """
        items = list(self.trips)
        items.extend(d for d in self.dives if d.trip is None)
        return sorted(items, key=cmp_to_key(self.assigner.compare_for_display))


    def add_dive(self, dive):
        """
        Add dive to the dive log.

        Dive statistics are calculated and the dive is grouped into a trip
        if automatic grouping is enabled.

        The position of the dive is returned.

        :param dive: Dive to add.
        """
        idx = self.dives.add(dive)
        self.update_stats(dive)
        if self.autogroup_enabled:
            self.assigner.autogroup()
        self.mark_changed()
        return idx


    def remove_dive(self, dive):
        """
        Remove dive from the dive log.

        The dive is removed from its trip first. Null is returned if the
        dive is not in the dive log.

        :param dive: Dive to remove.
        """
        idx = self.dives.index(dive)
        if idx < 0:
            return None
        self.assigner.remove_dive_from_trip(dive)
        self.dives.remove(idx)
        self.mark_changed()
        return dive


    def delete_selected_dives(self):
        """
        Remove all selected dives from the dive log.

        The number of removed dives is returned.
        """
        dives = self.dives.selected()
        for dive in dives:
            self.remove_dive(dive)
        return len(dives)


    def set_dive_when(self, dive, when):
        """
        Change start time of a dive.

        The dive keeps its trip if it is the only dive of the trip or if
        the new start time is still within the trip. Otherwise, the dive is
        removed from its trip. The dive is moved to its new position in the
        dive store.

        Nothing is changed if the dive is not in the dive log.

        :param dive: Dive to change.
        :param when: New start time of the dive.
        """
        idx = self.dives.index(dive)
        if idx < 0 or dive.when == when:
            return

        trip = self.assigner.trip_of(dive)
        if trip is not None and trip.nrdives > 1 \
                and (when < trip.when or self.trips.find_matching(when) is not trip):
            self.assigner.remove_dive_from_trip(dive)
            trip = None

        current = self.dives.selected_dive == idx
        self.dives.remove(idx)
        dive.when = when
        idx = self.dives.add(dive)
        if current:
            self.dives.selected_dive = idx

        if trip is not None:
            self.assigner.update_start_time(trip)
            others = [t for t in self.trips
                    if t.when == trip.when and t is not trip]
            if others:
                self.assigner.merge_trips(others[0], trip)

        if self.autogroup_enabled:
            self.assigner.autogroup()
        self.mark_changed()

        if __debug__:
            logger.debug('{} moved to position {}'.format(dive, idx))


    def set_autogroup(self, enabled):
        """
        Enable or disable automatic grouping of dives into trips.

        Disabling automatic grouping removes automatically generated
        trips.

        :param enabled: Automatic grouping is enabled if true.
        """
        self.autogroup_enabled = enabled
        if enabled:
            self.assigner.autogroup()
        else:
            self.assigner.remove_autogen_trips()
        self.mark_changed()


    def autogroup(self):
        """
        Group dives without trip into trips.
        """
        self.assigner.autogroup()
        self.mark_changed()


    def add_dive_to_trip(self, dive, trip):
        """
        Add dive to a trip.

        :param dive: Dive to add.
        :param trip: Destination trip.
        """
        self.assigner.add_dive_to_trip(dive, trip)
        self.mark_changed()


    def remove_dive_from_trip(self, dive):
        """
        Remove dive from its trip.

        :param dive: Dive to remove from its trip.
        """
        self.assigner.remove_dive_from_trip(dive)
        self.mark_changed()


    def remove_selected_from_trips(self):
        """
        Remove all selected dives from their trips.
        """
        for dive in self.dives.selected():
            self.assigner.remove_dive_from_trip(dive)
        self.mark_changed()


    def create_trip_from_dive(self, dive):
        """
        Create trip from a dive and return it.

        :param dive: Dive to create trip from.
        """
        trip = self.assigner.create_trip_from_dive(dive)
        self.mark_changed()
        return trip


    def insert_trip(self, trip, dives=()):
        """
        Insert trip draft with its dives and return inserted or merged
        trip.

        :param trip: Trip draft.
        :param dives: Dives of the trip.
        """
        trip = self.assigner.insert_trip(trip, dives)
        self.mark_changed()
        return trip


    def merge_trips(self, target, source):
        """
        Merge source trip into target trip.

        :param target: Trip to merge into.
        :param source: Trip to merge from.
        """
        self.assigner.merge_trips(target, source)
        self.mark_changed()


    def split_trip(self, dive):
        """
        Split trip of a dive at the dive and return the new trip.

        :param dive: Dive, which is not first dive of its trip.
        """
        trip = self.assigner.split_trip(dive)
        self.mark_changed()
        return trip


    def merge_dive_into_trip_above(self, dive):
        """
        Add dive without trip into trip of the previous dive.

        :param dive: Dive without trip.
        """
        trip = self.assigner.merge_dive_into_trip_above(dive)
        self.mark_changed()
        return trip


    def remove_trip(self, trip):
        """
        Remove trip keeping its dives.

        :param trip: Trip to remove.
        """
        self.assigner.remove_trip(trip)
        self.mark_changed()


    def select_dive(self, idx):
        """
        Select dive at a position.

        :param idx: Dive position.
        """
        self.dives.select(idx)


    def deselect_dive(self, idx):
        """
        Deselect dive at a position.

        :param idx: Dive position.
        """
        self.dives.deselect(idx)


    def show_and_select_dive(self, dive):
        """
        Make a dive the only selected dive.

        :param dive: Dive to select.
        """
        return self.dives.select_only(dive)


    def update_stats(self, dive):
        """
        Recalculate cached statistics of a dive.

        :param dive: Dive.
        """
        return stats.update_stats(dive, self.surface_depth)


    def init_decompression(self, dive):
        """
        Calculate tissue state at start of a dive using its dive history.

        :param dive: Dive.

        .. seealso:: :class:`divetengu.deco.Replayer`
        """
        return self.replayer.replay(dive)


# vim: sw=4:et:ai

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
DiveTengu trip assignment.

The trip assigner moves dives between trips while keeping the trip
invariants

- start time of a trip is start time of its earliest dive
- a trip has at least one dive, the trip is removed from trip registry
  when its last dive is removed
- two trips do not start at the same time, a trip inserted at start time
  of another trip is merged into the other trip

The trip membership order is chronological order of trip dives.
"""

import logging

from .dive import Trip
from . import const

logger = logging.getLogger(__name__)


class TripAssigner(object):
    """
    Trip assigner.

    :var dives: Dive store.
    :var trips: Trip registry.
    :var trip_threshold: Maximum time between start of two dives grouped
        into the same trip by automatic grouping [s].
    """
    def __init__(self, dives, trips, trip_threshold=const.TRIP_THRESHOLD):
        self.dives = dives
        self.trips = trips
        self.trip_threshold = trip_threshold


    def trip_of(self, dive):
        """
        Get trip of a dive or null if the dive is not in a trip.

        :param dive: Dive.
        """
        return self.trips.find(dive.trip)


    def trip_dives(self, trip):
        """
        Get dives of a trip in chronological order.

        :param trip: Trip.
        """
        dives = [self.dives.find(k) for k in self.trips.members(trip)]
        assert all(d is not None for d in dives), dives
        return sorted(dives, key=lambda d: (d.when, d.id))


    def add_dive_to_trip(self, dive, trip):
        """
        Add dive to a trip.

        The dive is removed from its current trip first. Start time of the
        trip is updated if the dive starts earlier than the trip, then a
        trip starting at the new start time is merged into the trip.

        :param dive: Dive to add.
        :param trip: Destination trip.
        """
        if dive.trip is not None and dive.trip == trip.id:
            return
        assert trip.when, 'trip start time not set'
        assert trip in self.trips, trip

        self.remove_dive_from_trip(dive)
        self.trips.link(trip, dive.id)
        dive.trip = trip.id

        if dive.when and trip.when > dive.when:
            trip.when = dive.when
            self.trips.reorder()
            self.merge_same_start(trip)

        if __debug__:
            logger.debug('added {} to {}'.format(dive, trip))


    def remove_dive_from_trip(self, dive):
        """
        Remove dive from its trip.

        The trip is deleted if the dive was its last dive. Otherwise, the
        trip start time is recalculated if the dive was the earliest dive
        of the trip.

        :param dive: Dive to remove from its trip.
        """
        trip = self.trips.find(dive.trip)
        if trip is None:
            return

        left = self.trips.unlink(trip, dive.id)
        dive.trip = None
        if not left:
            self.trips.remove(trip)
        elif trip.when == dive.when:
            self.update_start_time(trip)

        if __debug__:
            logger.debug('removed {} from {}'.format(dive, trip))


    def merge_same_start(self, trip):
        """
        Merge trips starting at the same time as a trip into the trip.

        Location and notes of a merged trip are copied only when not set
        in the trip.

        :param trip: Trip to merge into.
        """
        others = [t for t in self.trips if t.when == trip.when and t is not trip]
        for other in others:
            if not trip.location:
                trip.location = other.location
            if not trip.notes:
                trip.notes = other.notes
            self.merge_trips(trip, other)


    def update_start_time(self, trip):
        """
        Set start time of a trip to the start time of its earliest dive.

        :param trip: Trip with at least one dive.
        """
        dives = (self.dives.find(k) for k in self.trips.members(trip))
        trip.when = min(d.when for d in dives)
        self.trips.reorder()


    def insert_trip(self, trip, dives=()):
        """
        Insert trip draft into trip registry.

        If there is a trip starting at the same time, then the trip draft
        is merged into the existing trip - location and notes are copied
        only when not set in the existing trip and the pending dives are
        added to the existing trip.

        The inserted or existing trip is returned.

        :param trip: Trip draft.
        :param dives: Dives to be added to the trip.
        """
        existing = self.trips.find_at(trip.when)
        if existing is not None:
            if not existing.location:
                existing.location = trip.location
            if not existing.notes:
                existing.notes = trip.notes
            trip = existing
            if __debug__:
                logger.debug('trip draft merged into {}'.format(trip))
        else:
            self.trips.add(trip)

        for dive in dives:
            self.add_dive_to_trip(dive, trip)
        return trip


    def create_trip_from_dive(self, dive, autogen=False):
        """
        Create trip using start time and location of a dive and add the
        dive to the trip.

        The created trip is returned. If there is a trip starting at the
        time of the dive, then the dive joins that trip, instead.

        :param dive: Dive to create trip from.
        :param autogen: Mark the created trip as automatically generated.
        """
        draft = Trip(dive.when, location=dive.location)
        draft.autogen = autogen
        return self.insert_trip(draft, [dive])


    def autogroup(self):
        """
        Group dives into trips automatically.

        The dives are walked in chronological order. A dive without a trip
        is added to the trip of the previous dive if the dive starts within
        trip gap threshold since the start of previous dive. Otherwise, a
        new trip is created for the dive.

        Dives marked to never be grouped into a trip break the grouping.
        """
        lastdive = None
        for dive in list(self.dives):
            if dive.trip is not None:
                lastdive = dive
                continue

            if dive.notrip:
                lastdive = None
                continue

            if lastdive is not None \
                    and dive.when < lastdive.when + self.trip_threshold:
                trip = self.trip_of(lastdive)
                if trip is None:
                    trip = self.create_trip_from_dive(lastdive, autogen=True)
                self.add_dive_to_trip(dive, trip)
                if dive.location and not trip.location:
                    trip.location = dive.location
                lastdive = dive
                continue

            lastdive = dive
            self.create_trip_from_dive(dive, autogen=True)

        if __debug__:
            logger.debug('autogroup: {} trips'.format(len(self.trips)))


    def remove_autogen_trips(self):
        """
        Remove all dives from automatically generated trips, which deletes
        the trips.
        """
        for dive in list(self.dives):
            trip = self.trip_of(dive)
            if trip is not None and trip.autogen:
                self.remove_dive_from_trip(dive)


    def merge_trips(self, target, source):
        """
        Move all dives of source trip into target trip.

        The source trip is deleted.

        :param target: Trip to merge into.
        :param source: Trip to merge from.
        """
        assert target is not source, 'cannot merge trip with itself'
        while source.nrdives:
            self.add_dive_to_trip(self.trip_dives(source)[0], target)
        assert source not in self.trips


    def split_trip(self, dive):
        """
        Split trip of a dive into two trips.

        A new trip is created from the dive, then the dive and all later
        dives of its trip are moved into the new trip.

        The new trip is returned.

        :param dive: Dive of a trip, which is not the first dive of the
            trip.
        """
        trip = self.trip_of(dive)
        assert trip is not None, dive

        members = self.trip_dives(trip)
        idx = members.index(dive)
        assert idx > 0, 'cannot split trip at its first dive'

        draft = Trip(dive.when, location=dive.location)
        new_trip = self.insert_trip(draft, members[idx:])

        if __debug__:
            logger.debug('split {} at {} into {}'.format(trip, dive, new_trip))
        return new_trip


    def merge_dive_into_trip_above(self, dive):
        """
        Add a dive without trip into the trip of the previous dive.

        If the dive is selected, the following dives without trip are
        added to the trip as well until a dive is not selected.

        The trip is returned.

        :param dive: Dive without a trip.
        """
        idx = self.dives.index(dive)
        assert idx > 0 and dive.trip is None, dive

        trip = self.trip_of(self.dives.get(idx - 1))
        assert trip is not None, 'previous dive is not in a trip'

        while True:
            self.add_dive_to_trip(dive, trip)
            idx += 1
            nxt = self.dives.get(idx)
            if nxt is None or nxt.trip is not None \
                    or not (dive.selected and nxt.selected):
                break
            dive = nxt
        return trip


    def remove_trip(self, trip):
        """
        Remove all dives from a trip, which deletes the trip.

        :param trip: Trip to remove.
        """
        for dive in self.trip_dives(trip):
            self.remove_dive_from_trip(dive)
        assert trip not in self.trips


    def compare_for_display(self, a, b):
        """
        Compare two dive list entries - dives or trips.

        The entries are compared by their own start time if they belong to
        the same trip or none of them belongs to a trip. Otherwise start
        time of their trips is used, so dives of a trip are never
        interleaved with dives of another trip.

        Negative, zero or positive number is returned.

        :param a: Dive or trip.
        :param b: Dive or trip.
        """
        trip_a, when_a = self._entry_trip(a)
        trip_b, when_b = self._entry_trip(b)
        if trip_a is not trip_b:
            if trip_a is not None:
                when_a = trip_a.when
            if trip_b is not None:
                when_b = trip_b.when
        return when_a - when_b


    def _entry_trip(self, entry):
        """
        Get trip and start time of a dive list entry.

        :param entry: Dive or trip.
        """
        if isinstance(entry, Trip):
            return entry, entry.when
        return self.trip_of(entry), entry.when


# vim: sw=4:et:ai

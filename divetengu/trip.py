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
DiveTengu trip registry.

The registry keeps trips ordered by their start time and maintains trip
membership - a mapping of trip identifier to identifiers of trip dives.
"""

import bisect
import logging
import operator

logger = logging.getLogger(__name__)


class TripRegistry(object):
    """
    Collection of trips ordered by start time.

    :var _trips: List of trips ordered by start time.
    :var _ids: Trip identifier to trip mapping.
    :var _members: Trip identifier to dive identifiers mapping. Dive
        identifiers are kept as keys of a dictionary, so a dive can be
        unlinked in constant time.
    :var _next_id: Next trip identifier.
    """
    def __init__(self):
        self._trips = []
        self._ids = {}
        self._members = {}
        self._next_id = 1


    def __len__(self):
        return len(self._trips)


    def __iter__(self):
        return iter(self._trips)


    def __contains__(self, trip):
        return trip.id is not None and self._ids.get(trip.id) is trip


    def find(self, trip_id):
        """
        Find trip by its identifier.

        Null is returned if trip is not found.

        :param trip_id: Trip identifier.
        """
        if trip_id is None:
            return None
        return self._ids.get(trip_id)


    def find_at(self, when):
        """
        Find trip starting exactly at specified time.

        :param when: Start time of a trip.
        """
        idx = bisect.bisect_left(self._whens(), when)
        if idx < len(self._trips) and self._trips[idx].when == when:
            return self._trips[idx]
        return None


    def find_matching(self, when):
        """
        Find the latest trip starting at or before specified time.

        Null is returned if all trips start after the time.

        :param when: Time to look trip for.
        """
        idx = bisect.bisect_right(self._whens(), when)
        trip = self._trips[idx - 1] if idx else None
        if __debug__:
            logger.debug('matching trip for {}: {}'.format(when, trip))
        return trip


    def add(self, trip):
        """
        Add trip draft to the registry and assign its identifier.

        :param trip: Trip draft.
        """
        assert trip.id is None, trip
        assert trip.when, 'trip start time not set'
        assert self.find_at(trip.when) is None, trip

        trip.id = self._next_id
        self._next_id += 1

        idx = bisect.bisect_right(self._whens(), trip.when)
        self._trips.insert(idx, trip)
        self._ids[trip.id] = trip
        self._members[trip.id] = {}

        if __debug__:
            logger.debug('trip registry: added {}'.format(trip))


    def remove(self, trip):
        """
        Remove empty trip from the registry.

        :param trip: Trip to remove.
        """
        assert trip in self, trip
        assert trip.nrdives == 0 and not self._members[trip.id], trip

        self._trips.remove(trip)
        del self._ids[trip.id]
        del self._members[trip.id]

        if __debug__:
            logger.debug('trip registry: removed {}'.format(trip))


    def reorder(self):
        """
        Restore start time order of trips after start time of a trip
        changed.
        """
        self._trips.sort(key=operator.attrgetter('when'))


    def members(self, trip):
        """
        Get identifiers of trip dives.

        :param trip: Trip registered in the registry.
        """
        return list(self._members[trip.id])


    def link(self, trip, dive_id):
        """
        Make dive a member of a trip.

        :param trip: Trip registered in the registry.
        :param dive_id: Dive identifier.
        """
        members = self._members[trip.id]
        assert dive_id not in members, dive_id
        members[dive_id] = None
        trip.nrdives += 1


    def unlink(self, trip, dive_id):
        """
        Remove dive from trip members.

        The number of remaining trip dives is returned.

        :param trip: Trip registered in the registry.
        :param dive_id: Dive identifier.
        """
        del self._members[trip.id][dive_id]
        assert trip.nrdives > 0
        trip.nrdives -= 1
        return trip.nrdives


    def _whens(self):
        return [t.when for t in self._trips]


# vim: sw=4:et:ai

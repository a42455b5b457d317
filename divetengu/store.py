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
DiveTengu dive store.

The dive store keeps dives in chronological order. A dive is assigned
a stable identifier when added to the store, so it can be referenced
regardless of its position, i.e. by trip membership.
"""

import bisect
import logging

logger = logging.getLogger(__name__)


class DiveStore(object):
    """
    Collection of dives ordered by start time.

    :var amount_selected: Number of selected dives.
    :var selected_dive: Index of current selected dive, -1 if no dive is
        selected.
    :var _dives: List of dives.
    :var _ids: Dive identifier to dive mapping.
    :var _next_id: Next dive identifier.
    """
    def __init__(self):
        self._dives = []
        self._ids = {}
        self._next_id = 1
        self.amount_selected = 0
        self.selected_dive = -1


    def __len__(self):
        return len(self._dives)


    def __iter__(self):
        return iter(self._dives)


    def get(self, idx):
        """
        Get dive at position `idx` or null if there is no such dive.

        :param idx: Dive position.
        """
        if 0 <= idx < len(self._dives):
            return self._dives[idx]
        return None


    def find(self, dive_id):
        """
        Find dive by its identifier.

        Null is returned if dive is not found.

        :param dive_id: Dive identifier.
        """
        return self._ids.get(dive_id)


    def index(self, dive):
        """
        Find position of a dive.

        Return -1 if dive is not in the store.

        :param dive: Dive to look for.
        """
        for i, d in enumerate(self._dives):
            if d is dive:
                return i
        return -1


    def insert_index(self, when):
        """
        Find position for a dive starting at specified time.

        The position is after all dives starting at the same time or
        earlier.

        :param when: Start time of a dive.
        """
        return bisect.bisect_right([d.when for d in self._dives], when)


    def insert(self, idx, dive):
        """
        Insert dive at specified position.

        Dives at and after the position are shifted. Caller is responsible
        for keeping the store ordered.

        :param idx: Dive position.
        :param dive: Dive to insert.
        """
        assert 0 <= idx <= len(self._dives)
        assert dive.id is None or dive.id not in self._ids, dive.id

        if dive.id is None:
            dive.id = self._next_id
            self._next_id += 1
        else:
            self._next_id = max(self._next_id, dive.id + 1)

        self._dives.insert(idx, dive)
        self._ids[dive.id] = dive

        if idx <= self.selected_dive:
            self.selected_dive += 1
        if dive.selected:
            self.amount_selected += 1
            if self.selected_dive < 0:
                self.selected_dive = idx

        if __debug__:
            logger.debug('dive store: inserted {} at {}'.format(dive, idx))


    def add(self, dive):
        """
        Add dive to the store keeping chronological order.

        Position of the dive is returned.

        :param dive: Dive to add.
        """
        idx = self.insert_index(dive.when)
        self.insert(idx, dive)
        return idx


    def remove(self, idx):
        """
        Remove dive at specified position and return it.

        Dives after the position are shifted. The dive keeps its
        identifier.

        :param idx: Dive position.
        """
        dive = self._dives.pop(idx)
        del self._ids[dive.id]

        if dive.selected:
            self.amount_selected -= 1
        if self.selected_dive == idx:
            self.selected_dive = self._nearest_selected(idx)
        elif self.selected_dive > idx:
            self.selected_dive -= 1

        if __debug__:
            logger.debug('dive store: removed {} from {}'.format(dive, idx))
        return dive


    def select(self, idx):
        """
        Select dive at specified position and make it current one.

        :param idx: Dive position.
        """
        dive = self.get(idx)
        if dive is not None and not dive.selected:
            dive.selected = True
            self.amount_selected += 1
            self.selected_dive = idx


    def deselect(self, idx):
        """
        Deselect dive at specified position.

        If the dive is current one, then the nearest selected dive
        becomes current, searching earlier dives first.

        :param idx: Dive position.
        """
        dive = self.get(idx)
        if dive is not None and dive.selected:
            dive.selected = False
            self.amount_selected -= 1
            if self.selected_dive == idx:
                self.selected_dive = self._nearest_selected(idx)


    def select_only(self, dive):
        """
        Select a dive and deselect all other dives.

        Return false if dive is not in the store.

        :param dive: Dive to select.
        """
        idx = self.index(dive)
        if idx < 0:
            return False
        for d in self._dives:
            d.selected = False
        dive.selected = True
        self.amount_selected = 1
        self.selected_dive = idx
        return True


    def selected(self):
        """
        Return list of selected dives in chronological order.
        """
        return [d for d in self._dives if d.selected]


    def _nearest_selected(self, idx):
        """
        Find selected dive nearest to the position, earlier dives first.

        Return -1 if no dive is selected.

        :param idx: Dive position.
        """
        if not self.amount_selected:
            return -1
        for i in range(min(idx, len(self._dives)) - 1, -1, -1):
            if self._dives[i].selected:
                return i
        for i in range(idx, len(self._dives)):
            if self._dives[i].selected:
                return i
        return -1


# vim: sw=4:et:ai

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
Dive log tests.
"""

import divetengu
from divetengu.dive import Cylinder, GasMix, WeightSystem
from divetengu.error import ConfigError
from divetengu.model import ZH_L16B_GF, ZH_L16C_GF

from .tools import _dive, _log, _check_trips, T, HOUR, DAY

import unittest


class CreateTestCase(unittest.TestCase):
    """
    Dive log creation tests.
    """
    def test_create(self):
        """
        Test creating dive log with default configuration
        """
        log = divetengu.create()
        self.assertEqual(3 * DAY, log.trip_threshold)
        self.assertEqual(100, log.surface_depth)
        self.assertEqual(48 * HOUR, log.replayer.window)
        self.assertFalse(log.autogroup_enabled)
        self.assertFalse(log.unsaved_changes)


    def test_create_config(self):
        """
        Test creating dive log with custom configuration
        """
        log = divetengu.create(
            trip_threshold=DAY, surface_depth=500, deco_window=24 * HOUR,
            time_delta=10, autogroup=True
        )
        self.assertEqual(DAY, log.trip_threshold)
        self.assertEqual(DAY, log.assigner.trip_threshold)
        self.assertEqual(500, log.surface_depth)
        self.assertEqual(24 * HOUR, log.replayer.window)
        self.assertEqual(10, log.replayer.conveyor.time_delta)
        self.assertTrue(log.autogroup_enabled)


    def test_create_invalid(self):
        """
        Test creating dive log with invalid configuration
        """
        self.assertRaises(ConfigError, divetengu.create, trip_threshold=0)
        self.assertRaises(ConfigError, divetengu.create, surface_depth=-1)
        self.assertRaises(ConfigError, divetengu.create, deco_window=0)
        self.assertRaises(ConfigError, divetengu.create, time_delta=0)
        self.assertRaises(ConfigError, divetengu.create, model='vpm')
        self.assertRaises(ConfigError, divetengu.create, gf=0)
        self.assertRaises(ConfigError, divetengu.create, gf=2)


    def test_create_model(self):
        """
        Test creating dive log with tissue model configuration
        """
        log = divetengu.create()
        self.assertIsInstance(log.replayer.tissues.model, ZH_L16B_GF)
        self.assertEqual(0.3, log.replayer.tissues.model.gf)

        log = divetengu.create(model='zh-l16c-gf')
        self.assertIsInstance(log.replayer.tissues.model, ZH_L16C_GF)

        log = divetengu.create(gf=0.5)
        self.assertIsInstance(log.replayer.tissues.model, ZH_L16B_GF)
        self.assertEqual(0.5, log.replayer.tissues.model.gf)



class DiveLogTestCase(unittest.TestCase):
    """
    Dive log tests.
    """
    def test_add_dive(self):
        """
        Test adding dive to dive log
        """
        log = divetengu.create()
        dive = _dive(T, weights=[WeightSystem(2000)])
        dive.cylinders = [Cylinder(GasMix(320))]
        self.assertEqual(0, log.add_dive(dive))
        self.assertEqual(2000, dive.stats.weight)
        self.assertEqual(320, dive.stats.gas.o2)
        self.assertIs(dive, log.get_dive(0))
        self.assertIs(dive, log.find_dive(dive.id))
        self.assertIsNone(dive.trip)
        self.assertTrue(log.unsaved_changes)


    def test_mark_changed(self):
        """
        Test clearing unsaved changes flag
        """
        log = _log(T)
        log.mark_changed(False)
        self.assertFalse(log.unsaved_changes)
        log.mark_changed()
        self.assertTrue(log.unsaved_changes)


    def test_add_dive_autogroup(self):
        """
        Test adding dives with automatic grouping enabled
        """
        log = divetengu.create(trip_threshold=DAY, autogroup=True)
        for when in (T, T + HOUR, T + 50 * HOUR):
            log.add_dive(_dive(when))

        t1, t2 = log.trips
        self.assertEqual(2, t1.nrdives)
        self.assertEqual(1, t2.nrdives)
        _check_trips(self, log.assigner)


    def test_set_autogroup(self):
        """
        Test enabling and disabling automatic grouping
        """
        log = _log(T, T + HOUR, T + 10 * DAY)
        log.set_autogroup(True)
        self.assertEqual(2, len(log.trips))

        log.set_autogroup(False)
        self.assertEqual(0, len(log.trips))
        self.assertTrue(all(d.trip is None for d in log.dives))


    def test_remove_dive(self):
        """
        Test removing sole dive of a trip from dive log
        """
        log = _log(T, T + HOUR)
        d1, d2 = log.dives
        trip = log.create_trip_from_dive(d1)
        self.assertIs(d1, log.remove_dive(d1))
        self.assertIsNone(log.find_trip(trip.id))
        self.assertEqual([d2], list(log.dives))
        self.assertIsNone(log.remove_dive(d1))


    def test_delete_selected_dives(self):
        """
        Test removing selected dives from dive log
        """
        log = _log(T, T + HOUR, T + 2 * HOUR)
        d1, d2, d3 = log.dives
        log.insert_trip(divetengu.Trip(T), [d1, d2])
        log.select_dive(0)
        log.select_dive(1)

        self.assertEqual(2, log.delete_selected_dives())
        self.assertEqual([d3], list(log.dives))
        self.assertEqual(0, len(log.trips))
        self.assertEqual(0, log.amount_selected)
        self.assertEqual(-1, log.selected_dive)


    def test_selection(self):
        """
        Test dive selection
        """
        log = _log(T, T + HOUR, T + 2 * HOUR)
        log.select_dive(0)
        log.select_dive(2)
        log.deselect_dive(2)
        self.assertEqual(1, log.amount_selected)
        self.assertEqual(0, log.selected_dive)

        self.assertTrue(log.show_and_select_dive(log.get_dive(1)))
        self.assertEqual(1, log.selected_dive)
        self.assertEqual([log.get_dive(1)], log.dives.selected())


    def test_remove_selected_from_trips(self):
        """
        Test removing selected dives from their trips
        """
        log = _log(T, T + HOUR, T + 2 * HOUR)
        d1, d2, d3 = log.dives
        trip = log.insert_trip(divetengu.Trip(T), [d1, d2, d3])
        log.select_dive(0)
        log.select_dive(2)
        log.remove_selected_from_trips()
        self.assertEqual([d2], log.trip_dives(trip))
        self.assertEqual(T + HOUR, trip.when)


    def test_entries(self):
        """
        Test top level dive list entries
        """
        log = _log(T, T + HOUR, T + 2 * HOUR, T + 10 * DAY)
        d1, d2, d3, d4 = log.dives
        trip = log.insert_trip(divetengu.Trip(T), [d1, d3])
        self.assertEqual([trip, d2, d4], log.entries())


    def test_init_decompression(self):
        """
        Test calculating tissue state at start of a dive
        """
        log = divetengu.create(time_delta=10)
        d1 = _dive(T, depth=30000)
        d2 = _dive(T + 2 * HOUR)
        log.add_dive(d1)
        log.add_dive(d2)

        replay = log.init_decompression(d2)
        self.assertEqual((d1,), replay.dives)

        replay = log.init_decompression(d1)
        self.assertEqual((), replay.dives)



class TripOperationsTestCase(unittest.TestCase):
    """
    Dive log trip operations tests.
    """
    def setUp(self):
        self.log = _log(T, T + HOUR, T + 2 * HOUR, T + 5 * DAY)
        self.dives = list(self.log.dives)
        self.trip = self.log.insert_trip(divetengu.Trip(T), self.dives[:3])
        self.log.mark_changed(False)


    def tearDown(self):
        _check_trips(self, self.log.assigner)


    def test_split_merge(self):
        """
        Test splitting trip and merging it back
        """
        log = self.log
        trip = log.split_trip(self.dives[2])
        self.assertEqual(2, len(log.trips))
        self.assertTrue(log.unsaved_changes)

        log.merge_trips(self.trip, trip)
        self.assertEqual(self.dives[:3], log.trip_dives(self.trip))
        self.assertEqual(T, self.trip.when)


    def test_merge_dive_into_trip_above(self):
        """
        Test adding dive into trip of previous dive
        """
        log = self.log
        log.merge_dive_into_trip_above(self.dives[3])
        self.assertEqual(4, self.trip.nrdives)


    def test_add_remove_dive(self):
        """
        Test moving dive into and out of a trip
        """
        log = self.log
        d4 = self.dives[3]
        log.add_dive_to_trip(d4, self.trip)
        self.assertEqual(self.trip.id, d4.trip)
        log.remove_dive_from_trip(d4)
        self.assertIsNone(d4.trip)
        log.remove_trip(self.trip)
        self.assertEqual(0, len(log.trips))


    def test_autogroup(self):
        """
        Test grouping remaining dives into trips
        """
        log = self.log
        log.autogroup()
        self.assertEqual(2, len(log.trips))
        self.assertTrue(log.assigner.trip_of(self.dives[3]).autogen)



class SetDiveWhenTestCase(unittest.TestCase):
    """
    Tests of changing start time of a dive.
    """
    def setUp(self):
        self.log = _log(T, T + HOUR, T + 10 * DAY, T + 10 * DAY + HOUR)
        self.dives = d1, d2, d3, d4 = list(self.log.dives)
        self.t1 = self.log.insert_trip(divetengu.Trip(T), [d1, d2])
        self.t2 = self.log.insert_trip(divetengu.Trip(T + 10 * DAY), [d3, d4])


    def tearDown(self):
        _check_trips(self, self.log.assigner)
        dives = list(self.log.dives)
        self.assertEqual(sorted(d.when for d in dives), [d.when for d in dives])


    def test_same_time(self):
        """
        Test setting the same start time of a dive
        """
        self.log.mark_changed(False)
        self.log.set_dive_when(self.dives[0], T)
        self.assertFalse(self.log.unsaved_changes)


    def test_unknown_dive(self):
        """
        Test changing start time of a dive, which is not in dive log
        """
        self.log.mark_changed(False)
        dive = _dive(T + HOUR)
        self.log.set_dive_when(dive, T + 11 * DAY)

        self.assertEqual(T + HOUR, dive.when)
        self.assertEqual(self.dives, list(self.log.dives))
        self.assertTrue(all(self.log.find_dive(d.id) is d for d in self.dives))
        self.assertFalse(self.log.unsaved_changes)


    def test_within_trip(self):
        """
        Test moving dive within its trip
        """
        d1, d2 = self.dives[:2]
        self.log.set_dive_when(d1, T + 2 * HOUR)
        self.assertEqual(self.t1.id, d1.trip)
        self.assertEqual(T + HOUR, self.t1.when)
        self.assertEqual([d2, d1], self.log.trip_dives(self.t1))
        self.assertTrue(self.log.unsaved_changes)


    def test_before_trip(self):
        """
        Test moving dive before start of its trip
        """
        d1, d2 = self.dives[:2]
        self.log.set_dive_when(d2, T - HOUR)
        self.assertIsNone(d2.trip)
        self.assertEqual([d1], self.log.trip_dives(self.t1))
        self.assertIs(d2, self.log.get_dive(0))


    def test_into_other_trip(self):
        """
        Test moving dive into time range of other trip
        """
        d2 = self.dives[1]
        self.log.set_dive_when(d2, T + 11 * DAY)
        self.assertIsNone(d2.trip)
        self.assertEqual(1, self.t1.nrdives)
        self.assertIs(d2, self.log.get_dive(3))


    def test_sole_dive(self):
        """
        Test moving sole dive of a trip moves the trip
        """
        d1, d2 = self.dives[:2]
        self.log.remove_dive_from_trip(d1)
        self.log.set_dive_when(d2, T + 5 * DAY)
        self.assertEqual(self.t1.id, d2.trip)
        self.assertEqual(T + 5 * DAY, self.t1.when)
        self.assertEqual([self.t1, self.t2], list(self.log.trips))


    def test_sole_dive_trip_collision(self):
        """
        Test moving sole dive of a trip to start time of other trip
        """
        d1, d2, d3 = self.dives[:3]
        self.log.remove_dive_from_trip(d1)
        self.log.set_dive_when(d2, T + 10 * DAY)
        self.assertEqual([self.t2], list(self.log.trips))
        self.assertEqual(self.t2.id, d2.trip)
        self.assertEqual(3, self.t2.nrdives)


    def test_selection(self):
        """
        Test moving current dive keeps the selection
        """
        d1 = self.dives[0]
        self.log.select_dive(1)
        self.log.select_dive(0)
        self.log.set_dive_when(d1, T + 2 * HOUR)
        self.assertIs(d1, self.log.get_dive(1))
        self.assertEqual(1, self.log.selected_dive)
        self.assertEqual(2, self.log.amount_selected)


# vim: sw=4:et:ai

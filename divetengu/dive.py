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
DiveTengu dive log data model.

A dive log consists of dives and trips. A dive is described by its
cylinders, weight systems and data recorded by dive computers. A trip is
a group of temporally adjacent dives.
"""

from collections import namedtuple

from . import const

GasMix = namedtuple('GasMix', 'o2 he')
GasMix.__new__.__defaults__ = (0, 0)
GasMix.__doc__ = """
Gas mix of a cylinder.

Oxygen value zero means air.

:var o2: O2 fraction [permille].
:var he: Helium fraction [permille].
"""

AIR = GasMix(const.O2_IN_AIR, 0)

Sample = namedtuple('Sample', 'time depth po2 cylinder')
Sample.__new__.__defaults__ = (0, 0)
Sample.__doc__ = """
Dive computer sample.

:var time: Time since start of a dive [s].
:var depth: Depth [mm].
:var po2: Measured partial pressure of oxygen [mbar], zero if not
    recorded.
:var cylinder: Index of cylinder used at time of the sample.
"""

Event = namedtuple('Event', 'time name value')
Event.__doc__ = """
Dive computer event.

The gas change event has name ``gaschange`` and its value is O2
percentage of the new gas in low 16 bits.

:var time: Time since start of a dive [s].
:var name: Name of the event.
:var value: Value of the event.
"""

WeightSystem = namedtuple('WeightSystem', 'weight description')
WeightSystem.__new__.__defaults__ = (None,)
WeightSystem.__doc__ = """
Weight system.

:var weight: Mass [g].
:var description: Description, i.e. "belt".
"""

GasInfo = namedtuple('GasInfo', 'o2 he o2low')
GasInfo.__doc__ = """
Gas classification of a dive.

All values zero mean air dive.

:var o2: O2 fraction of representative gas mix [permille].
:var he: Helium fraction of representative gas mix [permille].
:var o2low: Minimal O2 fraction of all gas mixes [permille].
"""

DiveStats = namedtuple('DiveStats', 'sac otu weight gas')
DiveStats.__doc__ = """
Derived dive statistics.

:var sac: Surface air consumption rate [ml/min].
:var otu: Oxygen toxicity units.
:var weight: Total weight [g].
:var gas: Gas classification.
"""

EMPTY_STATS = DiveStats(0, 0, 0, GasInfo(0, 0, 0))


class Cylinder(object):
    """
    Dive cylinder.

    :var gasmix: Gas mix.
    :var size: Size of cylinder [ml].
    :var workpressure: Working pressure [mbar].
    :var start: Recorded start pressure [mbar].
    :var end: Recorded end pressure [mbar].
    :var sample_start: Start pressure found in dive samples [mbar].
    :var sample_end: End pressure found in dive samples [mbar].
    :var description: Description, i.e. "D12".
    """
    def __init__(self, gasmix=None, size=0, start=0, end=0,
            sample_start=0, sample_end=0, workpressure=0, description=None):
        self.gasmix = GasMix() if gasmix is None else gasmix
        self.size = size
        self.workpressure = workpressure
        self.start = start
        self.end = end
        self.sample_start = sample_start
        self.sample_end = sample_end
        self.description = description


    def is_empty(self):
        """
        Check if cylinder has no information at all.
        """
        return not (self.size or self.workpressure or self.description
            or self.gasmix.o2 or self.gasmix.he
            or self.start or self.end
            or self.sample_start or self.sample_end)


    def __repr__(self):
        return 'Cylinder(o2={}, he={}, size={})'.format(
            self.gasmix.o2, self.gasmix.he, self.size
        )



class DiveComputer(object):
    """
    Data recorded by a dive computer.

    :var samples: List of samples ordered by time.
    :var events: List of events ordered by time.
    :var duration: Duration of a dive [s].
    :var meandepth: Mean depth [mm].
    :var maxdepth: Maximum depth [mm].
    """
    def __init__(self, samples=(), events=(), duration=0, meandepth=0,
            maxdepth=0):
        self.samples = list(samples)
        self.events = list(events)
        self.duration = duration
        self.meandepth = meandepth
        self.maxdepth = maxdepth



class Dive(object):
    """
    Dive record.

    :var id: Dive identifier, assigned when dive is added to dive store.
    :var number: Dive number.
    :var when: Start of a dive [s since epoch].
    :var duration: Duration of a dive [s].
    :var cylinders: List of cylinders.
    :var weights: List of weight systems.
    :var computers: List of dive computer records, first one is primary.
    :var location: Dive location.
    :var notes: Dive notes.
    :var rating: Dive rating (0-5).
    :var surface_pressure: Surface pressure [mbar], zero if unknown.
    :var salinity: Water salinity [g/10l], zero if unknown.
    :var notrip: Never group dive into a trip automatically if true.
    :var selected: Dive is selected if true.
    :var trip: Identifier of dive trip or null.
    :var stats: Cached derived statistics.
    """
    def __init__(self, when, duration=0, cylinders=(), weights=(),
            computers=(), location=None, notes=None, number=0):
        self.id = None
        self.number = number
        self.when = when
        self.duration = duration
        self.cylinders = list(cylinders)
        self.weights = list(weights)
        self.computers = list(computers) or [DiveComputer(duration=duration)]
        self.location = location
        self.notes = notes
        self.rating = 0
        self.surface_pressure = 0
        self.salinity = 0
        self.notrip = False
        self.selected = False
        self.trip = None
        self.stats = EMPTY_STATS


    @property
    def dc(self):
        """
        Primary dive computer record.
        """
        return self.computers[0]


    @property
    def end(self):
        """
        End of a dive [s since epoch].
        """
        return self.when + self.duration


    def __repr__(self):
        return 'Dive(id={}, when={}, duration={}, trip={})'.format(
            self.id, self.when, self.duration, self.trip
        )



class Trip(object):
    """
    Dive trip.

    A trip is created as a draft (without identifier) and obtains its
    identifier when inserted into trip registry.

    :var id: Trip identifier.
    :var when: Start time of a trip - time of its earliest dive.
    :var location: Trip location.
    :var notes: Trip notes.
    :var autogen: Trip created by automatic grouping if true.
    :var nrdives: Number of dives in a trip.
    """
    def __init__(self, when, location=None, notes=None):
        self.id = None
        self.when = when
        self.location = location
        self.notes = notes
        self.autogen = False
        self.nrdives = 0


    def __repr__(self):
        return 'Trip(id={}, when={}, nrdives={}, location={!r})'.format(
            self.id, self.when, self.nrdives, self.location
        )


# vim: sw=4:et:ai

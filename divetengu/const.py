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
DiveTengu constants.
"""

# minute and hour in seconds
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# surface pressure at sea level [mbar]
SURFACE_PRESSURE = 1013

# O2 in air [permille]
O2_IN_AIR = 209

# salinity of sea water [g/10l]
SEAWATER_SALINITY = 10300

# standard gravity scaled to depth in mm and pressure in mbar
GRAVITY = 0.981

# millibars in one atmosphere
ATM = 1013.25

# dives closer than the threshold are grouped into one trip
TRIP_THRESHOLD = 3 * DAY

# depth below which a diver is at the surface during a dive [mm]
SURFACE_DEPTH = 100

# look for previous dives within the window when initializing tissues
DECO_WINDOW = 48 * HOUR

# pO2 above which oxygen toxicity units are accumulated [mbar]
OTU_PO2_THRESHOLD = 500

# water vapour pressure in lungs [bar]
WATER_VAPOUR_PRESSURE_DEFAULT = 0.0627

LOG_2 = 0.6931471805599453

# vim: sw=4:et:ai

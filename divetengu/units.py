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
DiveTengu unit conversion functions.

All functions are pure. Depth is expressed in millimeters, pressure in
millibars.
"""

from . import const


def surface_pressure(dive):
    """
    Get surface pressure of a dive [mbar].

    If dive surface pressure is not known, then standard sea level
    pressure is returned.

    :param dive: Dive or null.
    """
    if dive is not None and dive.surface_pressure:
        return dive.surface_pressure
    return const.SURFACE_PRESSURE


def depth_to_mbar(depth, dive=None):
    """
    Convert depth into absolute pressure.

    Salinity and surface pressure of a dive are taken into account, sea
    water and sea level pressure are assumed when not known.

    :param depth: Depth [mm].
    :param dive: Dive (optional).
    """
    salinity = const.SEAWATER_SALINITY
    if dive is not None and dive.salinity:
        salinity = dive.salinity
    specific_weight = salinity / 10000 * const.GRAVITY
    return int(depth / 10 * specific_weight + surface_pressure(dive) + 0.5)


def to_atm(pressure):
    """
    Convert pressure into atmospheres.

    :param pressure: Pressure [mbar].
    """
    return pressure / const.ATM


def to_bar(pressure):
    """
    Convert pressure in millibars into bars.

    :param pressure: Pressure [mbar].
    """
    return pressure / 1000


def interpolate(a, b, part, whole):
    """
    Interpolate value between `a` and `b` at `part` of `whole`.

    >>> interpolate(0, 10000, 15, 60)
    2500

    :param a: Starting value.
    :param b: Ending value.
    :param part: Position between `a` and `b`.
    :param whole: Distance between `a` and `b`.
    """
    assert whole > 0
    return round((a * (whole - part) + b * part) / whole)


# vim: sw=4:et:ai

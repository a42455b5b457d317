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
DiveTengu derived dive statistics.

The functions calculate dive information derived from dive cylinders,
weight systems and samples

- gas mix classification
- surface air consumption rate (SAC)
- oxygen toxicity units (OTU)
- total weight

Only the primary dive computer record is used for calculations.
"""

import logging

from .dive import GasInfo, DiveStats
from .units import depth_to_mbar, to_atm, to_bar
from . import const

logger = logging.getLogger(__name__)

AIR_GAS_INFO = GasInfo(0, 0, 0)


def is_air(o2, he=0):
    """
    Check if gas mix is air.

    O2 fraction rounding to 21% is considered air.

    :param o2: O2 fraction [permille].
    :param he: Helium fraction [permille].
    """
    return not he and (o2 + 5) // 10 == 21


def classify_gas(dive):
    """
    Find representative gas mix of a dive.

    The rules are

    - trimix trumps nitrox, the highest helium fraction wins and oxygen
      fraction breaks ties
    - nitrox trumps air, even if hypoxic

    The minimal oxygen fraction is found as well, so dives using multiple
    nitrox mixes can be shown as a range. Dives using air only are
    classified as air, which is all values zero.

    :param dive: Dive to classify.
    """
    max_o2 = max_he = -1
    min_o2 = 1000
    for cyl in dive.cylinders:
        if cyl.is_empty():
            continue
        o2 = cyl.gasmix.o2 or const.O2_IN_AIR
        he = cyl.gasmix.he
        min_o2 = min(min_o2, o2)
        if he > max_he or he == max_he and o2 > max_o2:
            max_he = he
            max_o2 = o2

    if max_he <= 0 and max_o2 == min_o2 and is_air(max_o2) or max_o2 < 0:
        return AIR_GAS_INFO
    return GasInfo(max_o2, max_he, min_o2)


def compare_gas(a, b):
    """
    Compare gas mixes of two dives.

    The dives are compared by helium fraction, then oxygen fraction and
    finally by minimal oxygen fraction.

    Negative, zero or positive number is returned.

    :param a: Dive.
    :param b: Dive.
    """
    ga = classify_gas(a)
    gb = classify_gas(b)
    if ga.he == gb.he:
        if ga.o2 == gb.o2:
            return ga.o2low - gb.o2low
        return ga.o2 - gb.o2
    return ga.he - gb.he


def total_weight(dive):
    """
    Calculate total weight carried during a dive [g].

    :param dive: Dive or null.
    """
    if dive is None:
        return 0
    return sum(ws.weight for ws in dive.weights)


def calculate_air_use(dive):
    """
    Calculate volume of gas used during a dive [l].

    Recorded cylinder pressures are preferred over pressures found in
    dive samples. Cylinders of unknown size are skipped.

    :param dive: Dive.
    """
    air_use = 0
    for cyl in dive.cylinders:
        if not cyl.size:
            continue
        start = cyl.start or cyl.sample_start
        end = cyl.end or cyl.sample_end
        # liters of gas at 1 atm == milliliters at 1000 atm
        kilo_atm = (to_atm(start) - to_atm(end)) / 1000
        air_use += kilo_atm * cyl.size
    return air_use


def surface_time(samples, surface_depth=const.SURFACE_DEPTH):
    """
    Calculate time spent at the surface during a dive [s].

    Only surface intervals within a dive are taken into account, i.e.
    time spent at the surface before descent or after ascent is ignored.

    :param samples: Dive samples.
    :param surface_depth: Depth below which diver is at the surface [mm].
    """
    n = len(samples)
    total = 0
    i = 1
    while i < n:
        if samples[i].depth < surface_depth and samples[i - 1].depth >= surface_depth:
            end = i + 1
            while end < n and samples[end].depth < surface_depth:
                end += 1
            if end == n:
                break
            total += samples[end - 1].time - samples[i].time
            i = end
        i += 1
    return total


def mean_depth(dc):
    """
    Get mean depth of a dive [mm].

    If mean depth is not recorded by dive computer, then it is calculated
    using dive samples.

    :param dc: Dive computer record.
    """
    if dc.meandepth:
        return dc.meandepth

    samples = dc.samples
    if len(samples) < 2 or samples[-1].time <= samples[0].time:
        return 0
    area = sum(
        (s1.depth + s2.depth) / 2 * (s2.time - s1.time)
        for s1, s2 in zip(samples, samples[1:])
    )
    return round(area / (samples[-1].time - samples[0].time))


def calculate_sac(dive, surface_depth=const.SURFACE_DEPTH):
    """
    Calculate surface air consumption rate of a dive [ml/min].

    Zero is returned if gas usage or duration of the dive is unknown.

    :param dive: Dive.
    :param surface_depth: Depth below which diver is at the surface [mm].
    """
    air_use = calculate_air_use(dive)
    if not air_use:
        return 0
    dc = dive.dc
    duration = dive.duration or dc.duration
    if not duration:
        return 0

    duration -= surface_time(dc.samples, surface_depth)
    if duration <= 0:
        logger.warning(
            'dive {} spent at the surface, cannot calculate sac'.format(dive)
        )
        return 0

    # mean pressure in bar (sac calculations are in bar*l/min)
    pressure = to_bar(depth_to_mbar(mean_depth(dc), dive))
    sac = air_use / pressure * 60 / duration
    if __debug__:
        logger.debug('sac of {}: {:.4f}l/min'.format(dive, sac))
    return int(sac * 1000)


def active_o2(dive, dc, time):
    """
    Get O2 fraction of gas breathed at specified time [permille].

    The O2 fraction of the first cylinder (air if not set) is used until
    changed by gas change event. The O2 fraction of a gas change event is
    taken as recorded, so zero value means no oxygen.

    :param dive: Dive.
    :param dc: Dive computer record.
    :param time: Time since start of the dive [s].
    """
    o2 = dive.cylinders[0].gasmix.o2 if dive.cylinders else 0
    o2 = o2 or const.O2_IN_AIR
    for event in dc.events:
        if event.time > time:
            break
        if event.name != 'gaschange':
            continue
        o2 = 10 * (event.value & 0xffff)
    return o2


def calculate_otu(dive):
    """
    Calculate oxygen toxicity units of a dive.

    Measured partial pressure of oxygen is used if recorded in dive
    samples, otherwise it is calculated from depth and active gas mix.

    :param dive: Dive.
    """
    dc = dive.dc
    samples = dc.samples
    otu = 0.0
    for psample, sample in zip(samples, samples[1:]):
        t = sample.time - psample.time
        po2 = sample.po2
        if not po2:
            o2 = active_o2(dive, dc, sample.time)
            po2 = int(o2 / 1000 * depth_to_mbar(sample.depth, dive))
        if po2 >= const.OTU_PO2_THRESHOLD:
            otu += ((po2 - 500) / 1000) ** 0.83 * t / 30
    return int(otu + 0.5)


def update_cylinder_related_info(dive, surface_depth=const.SURFACE_DEPTH):
    """
    Recalculate cached SAC and OTU values of a dive.

    :param dive: Dive or null.
    :param surface_depth: Depth below which diver is at the surface [mm].
    """
    if dive is not None:
        dive.stats = dive.stats._replace(
            sac=calculate_sac(dive, surface_depth),
            otu=calculate_otu(dive),
        )


def update_stats(dive, surface_depth=const.SURFACE_DEPTH):
    """
    Recalculate all cached statistics of a dive and return them.

    :param dive: Dive.
    :param surface_depth: Depth below which diver is at the surface [mm].
    """
    dive.stats = DiveStats(
        calculate_sac(dive, surface_depth),
        calculate_otu(dive),
        total_weight(dive),
        classify_gas(dive),
    )
    return dive.stats


# vim: sw=4:et:ai

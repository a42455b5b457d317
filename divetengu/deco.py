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
DiveTengu decompression replay.

Tissue loading before a dive depends on dives performed earlier. The
replayer finds dives preceding a dive within decompression window (48
hours by default), then feeds their samples and surface intervals into
a tissue state collaborator.

The tissue state collaborator implements three methods

init(surface_pressure)
    Create tissue state of a diver saturated at the surface.
add_segment(data, abs_p, gas, time, po2)
    Create new tissue state after exposure to absolute pressure for
    specified time.
tolerance(data)
    Get tissue tolerance of tissue state.

The tissue state is threaded through the replay as a value, so replay
of a dive has no side effects.
"""

from collections import namedtuple
import logging

from .dive import AIR
from .model import ZH_L16B_GF
from .conveyor import Conveyor
from .units import depth_to_mbar, surface_pressure, to_bar
from . import const

logger = logging.getLogger(__name__)

Replay = namedtuple('Replay', 'tolerance data dives')
Replay.__doc__ = """
Result of decompression replay.

:var tolerance: Tissue tolerance [bar].
:var data: Tissue state.
:var dives: Dives replayed to obtain the tissue state.
"""


class TissueModel(object):
    """
    Tissue state collaborator using decompression model.

    Pressure is expressed in bars, time in seconds.

    :var model: Decompression model.
    """
    def __init__(self, model=None):
        """
        Create tissue state collaborator.

        :param model: Decompression model, ZH-L16B-GF by default.
        """
        self.model = ZH_L16B_GF() if model is None else model


    def init(self, surface_pressure):
        """
        Create tissue state of a diver saturated at the surface.

        :param surface_pressure: Surface pressure [bar].
        """
        return self.model.init(surface_pressure)


    def add_segment(self, data, abs_p, gas, time, po2=0):
        """
        Calculate tissue state after exposure at constant pressure.

        :param data: Tissue state.
        :param abs_p: Absolute pressure [bar].
        :param gas: Gas mix configuration.
        :param time: Time of exposure [s].
        :param po2: Measured partial pressure of oxygen [bar].
        """
        return self.model.load(abs_p, time / const.MINUTE, gas, data, po2)


    def tolerance(self, data):
        """
        Get tissue tolerance - the pressure of ascent ceiling [bar].

        :param data: Tissue state.
        """
        return self.model.ceiling_limit(data)



class Replayer(object):
    """
    Decompression replayer.

    :var dives: Dive store.
    :var tissues: Tissue state collaborator.
    :var conveyor: Conveyor expanding dive samples into segments.
    :var window: Surface interval after which previous dives are not
        taken into account [s].
    """
    def __init__(self, dives, tissues=None, conveyor=None,
            window=const.DECO_WINDOW):
        self.dives = dives
        self.tissues = TissueModel() if tissues is None else tissues
        self.conveyor = Conveyor(1) if conveyor is None else conveyor
        self.window = window


    def history(self, dive):
        """
        Find dives affecting tissue loading at start of a dive.

        The dives are returned in chronological order. If the dive belongs
        to a trip, then dives of other trips are ignored.

        :param dive: Dive to find history of.
        """
        idx = self.dives.index(dive)
        dives = []
        for i in range(idx - 1, -1, -1):
            pdive = self.dives.get(i)
            # do not mix dives of different trips
            if dive.trip is not None and pdive.trip != dive.trip:
                continue
            if pdive.when > dive.when or pdive.end + self.window < dive.when:
                break
            dives.append(pdive)
        dives.reverse()
        return dives


    def replay(self, dive):
        """
        Calculate tissue state at start of a dive by replaying its dive
        history.

        A dive without history results in tissue state of a diver
        saturated at the surface.

        :param dive: Dive to calculate tissue state for.
        """
        tissues = self.tissues
        if dive is None:
            data = tissues.init(to_bar(const.SURFACE_PRESSURE))
            return Replay(tissues.tolerance(data), data, ())

        history = self.history(dive)
        if not history:
            data = tissues.init(to_bar(surface_pressure(dive)))
            if __debug__:
                logger.debug('no dives before {}'.format(dive))
            return Replay(tissues.tolerance(data), data, ())

        data = tissues.init(to_bar(surface_pressure(history[0])))
        following = history[1:] + [dive]
        for pdive, ndive in zip(history, following):
            data = self.add_dive(data, pdive)

            interval = ndive.when - pdive.end
            if interval > 0:
                # final surface interval at surface pressure of the dive
                sdive = dive if ndive is dive else pdive
                p = to_bar(surface_pressure(sdive))
                data = tissues.add_segment(data, p, AIR, interval)
                if __debug__:
                    logger.debug('after surface interval of {}s'.format(interval))

        return Replay(tissues.tolerance(data), data, tuple(history))


    def add_dive(self, data, dive):
        """
        Feed samples of a dive into tissue state.

        The primary dive computer record of the dive is used.

        :param data: Tissue state.
        :param dive: Dive to add.
        """
        cylinders = dive.cylinders
        for segment in self.conveyor(dive.dc):
            if 0 <= segment.cylinder < len(cylinders):
                gas = cylinders[segment.cylinder].gasmix
            else:
                gas = AIR
            abs_p = to_bar(depth_to_mbar(segment.depth, dive))
            data = self.tissues.add_segment(
                data, abs_p, gas, segment.duration, to_bar(segment.po2)
            )
        if __debug__:
            logger.debug('added dive {} to tissue state'.format(dive))
        return data


# vim: sw=4:et:ai

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
Conveyor to expand dive samples into exposure segments.
"""

from collections import namedtuple
import logging
import math

from .error import ConfigError
from .units import interpolate

logger = logging.getLogger(__name__)

Segment = namedtuple('Segment', 'time depth cylinder po2 duration')
Segment.__doc__ = """
Exposure segment of a dive.

:var time: Start of the segment since start of a dive [s].
:var depth: Depth interpolated at start of the segment [mm].
:var cylinder: Index of cylinder used during the segment.
:var po2: Measured partial pressure of oxygen [mbar], zero if not
    recorded.
:var duration: Duration of the segment [s].
"""


class Conveyor(object):
    """
    Conveyor to expand dive samples into exposure segments of fixed
    duration.

    The depth of a segment is interpolated between two samples. The
    cylinder and measured pO2 of a segment are taken from the later
    sample::

        >>> from divetengu.dive import DiveComputer, Sample
        >>> dc = DiveComputer([Sample(0, 0), Sample(4, 2000)])
        >>> conveyor = Conveyor(1)
        >>> for segment in conveyor(dc):
        ...     print(segment.time, segment.depth, segment.duration)
        0 0 1
        1 500 1
        2 1000 1
        3 1500 1

    :var time_delta: Duration of a segment [s].
    """
    def __init__(self, time_delta=1):
        """
        Create conveyor.

        :param time_delta: Duration of a segment [s].
        """
        if time_delta <= 0:
            raise ConfigError('Time delta has to be positive')
        if time_delta % 1 != 0:
            logger.warning(
                'possible calculation problems: time delta is not whole'
                ' number of seconds'
            )
        self.time_delta = time_delta


    def trays(self, start_time, end_time):
        """
        Return count of trays and time rest.

        The count of trays is amount of time delta values existing between
        start and end time (exclusive). The time rest is amount of seconds
        between last tray and end of time::

            >>> conveyor = Conveyor(10)
            >>> conveyor.trays(0, 25)
            (2, 5)

        :param start_time: Starting time [s].
        :param end_time: Ending time [s].
        """
        dt = end_time - start_time
        k = math.ceil(dt / self.time_delta) - 1
        r = dt - k * self.time_delta
        return k, r


    def __call__(self, dc):
        """
        Expand samples of dive computer record into exposure segments.

        :param dc: Dive computer record.
        """
        samples = dc.samples
        delta = self.time_delta
        for prev, sample in zip(samples, samples[1:]):
            t0 = prev.time
            t1 = sample.time
            if t1 <= t0:
                if __debug__:
                    logger.debug('conveyor: skipping sample {}'.format(sample))
                continue

            k, tr = self.trays(t0, t1)
            depth = lambda t: interpolate(prev.depth, sample.depth, t - t0, t1 - t0)
            for i in range(k):
                t = t0 + i * delta
                yield Segment(t, depth(t), sample.cylinder, sample.po2, delta)

            t = t0 + k * delta
            yield Segment(t, depth(t), sample.cylinder, sample.po2, tr)


# vim: sw=4:et:ai

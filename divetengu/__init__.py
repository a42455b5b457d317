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
Basic Usage
-----------

The DiveTengu dive log data engine exports its main API via ``divetengu``
module.

The dive log is created with :func:`~divetengu.create` function, which
creates :class:`dive log <DiveLog>` object. Having dive log object, we
can add dives to it and group them into trips::

    >>> import divetengu
    >>> from divetengu import Dive
    >>> log = divetengu.create()
    >>> d1 = Dive(1400000000, duration=2400)
    >>> d2 = Dive(1400010000, duration=2700)
    >>> log.add_dive(d1)
    0
    >>> log.add_dive(d2)
    1
    >>> trip = log.create_trip_from_dive(d1)
    >>> log.add_dive_to_trip(d2, trip)
    >>> trip.nrdives
    2
    >>> trip.when
    1400000000

Dives are grouped into trips automatically when automatic grouping is
enabled::

    >>> log = divetengu.create(autogroup=True)
    >>> log.add_dive(Dive(1400000000, duration=2400))
    0
    >>> log.add_dive(Dive(1400003600, duration=2400))
    1
    >>> log.add_dive(Dive(1400345600, duration=2400))
    2
    >>> [t.nrdives for t in log.trips]
    [2, 1]

Decompression Replay
--------------------
Tissue state at start of a dive is calculated by replaying previous dives
and surface intervals. The default decompression model used by DiveTengu
library is Buhlmann's :class:`ZH-L16B <ZH_L16B_GF>` model with gradient
factors::

    >>> log = divetengu.create()
    >>> dive = Dive(1400000000, duration=2400)
    >>> log.add_dive(dive)
    0
    >>> replay = log.init_decompression(dive)
    >>> replay.dives
    ()

The ZH-L16C-GF model, which is more conservative, and gradient factor of
the model can be configured with :func:`~divetengu.create` function::

    >>> log = divetengu.create(model='zh-l16c-gf', gf=0.2)
    >>> log.replayer.tissues.model      # doctest:+ELLIPSIS
    <divetengu.model.ZH_L16C_GF object at ...>
    >>> log.replayer.tissues.model.gf
    0.2

"""

from .dive import Dive, Trip, Cylinder, DiveComputer, Sample, Event, \
    GasMix, WeightSystem
from .divelog import DiveLog
from .deco import Replayer, TissueModel
from .conveyor import Conveyor
from .model import ZH_L16B_GF, ZH_L16C_GF, MODELS
from .error import DiveLogError, ConfigError

__version__ = '0.1.0'


def create(trip_threshold=None, surface_depth=None, deco_window=None,
        time_delta=None, model=None, gf=None, autogroup=False):
    """
    Create dive log.

    Usage

    >>> import divetengu
    >>> log = divetengu.create(trip_threshold=86400)
    >>> log.trip_threshold
    86400

    :param trip_threshold: Maximum time between start of two dives grouped
        into the same trip [s].
    :param surface_depth: Depth below which diver is at the surface [mm].
    :param deco_window: Surface interval after which previous dives do
        not affect tissue loading [s].
    :param time_delta: Time between decompression replay segments [s].
    :param model: Name of tissue model, `zh-l16b-gf` (default) or
        `zh-l16c-gf`.
    :param gf: Gradient factor used to calculate tissue tolerance.
    :param autogroup: Group dives into trips automatically if true.
    """
    for name, value in (('trip_threshold', trip_threshold),
            ('surface_depth', surface_depth), ('deco_window', deco_window)):
        if value is not None and value <= 0:
            raise ConfigError('{} has to be positive, got {}'.format(
                name, value
            ))
    if model is not None and model not in MODELS:
        raise ConfigError('Unknown tissue model {}'.format(model))
    if gf is not None and not 0 < gf <= 1.5:
        raise ConfigError('Gradient factor has to be within (0, 1.5]')

    log = DiveLog()
    if trip_threshold:
        log.trip_threshold = trip_threshold
    if surface_depth:
        log.surface_depth = surface_depth
    if deco_window:
        log.replayer.window = deco_window
    if time_delta is not None:
        log.replayer.conveyor = Conveyor(time_delta)
    if model is not None or gf is not None:
        cls = MODELS[model or 'zh-l16b-gf']
        tm = cls() if gf is None else cls(gf)
        log.replayer.tissues = TissueModel(tm)
    log.autogroup_enabled = autogroup
    return log


__all__ = [
    'create', 'DiveLog', 'Dive', 'Trip', 'Cylinder', 'DiveComputer',
    'Sample', 'Event', 'GasMix', 'WeightSystem', 'Replayer', 'TissueModel',
    'ZH_L16B_GF', 'ZH_L16C_GF', 'DiveLogError', 'ConfigError',
]

# vim: sw=4:et:ai

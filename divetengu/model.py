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
Tissue Model
------------
DiveTengu replays dive history into a tissue model to find tissue loading
before a dive. The default tissue model is Buhlmann ZH-L16 decompression
model with gradient factors by Erik Baker (ZH-L16-GF).

The model describes human body as 16 tissue compartments. For each inert
gas (nitrogen, helium) a compartment has half-life time and Buhlmann
coefficients A and B, see :class:`Compartment`.

Dive log replay feeds segments of constant depth into the model, so inert
gas pressure in a tissue compartment is calculated with Haldane equation

    .. math::

        P = P_{alv} + (P_{i} - P_{alv}) * e^{-k * t}

where :math:`P_{alv} = F_{gas} * (P_{abs} - P_{wvp})` is pressure of
inspired inert gas and :math:`k = ln(2) / T_{hl}` is gas decay constant.
For example, dive at 30m for 20 minutes on EAN32, then 1 hour at the
surface on air::

    >>> from divetengu.dive import GasMix, AIR
    >>> model = ZH_L16B_GF()
    >>> ean32 = GasMix(320, 0)
    >>> data = model.init(1)
    >>> data = model.load(4, 20, ean32, data)
    >>> round(data.tissues[0][0], 6)
    2.55632
    >>> data = model.load(1, 60, AIR, data)
    >>> round(data.tissues[0][0], 6)
    0.741847

Ascent ceiling of a tissue compartment is calculated with Buhlmann
equation extended with gradient factor

    .. math::

        P_l = (P - A * gf) / (gf / B + 1.0 - gf)

where A and B coefficients of nitrogen and helium are weighted by their
pressures in the compartment. The maximum of the ceilings is tissue
tolerance - the shallowest absolute pressure a diver can ascend to.

When partial pressure of oxygen is measured, i.e. for closed circuit
rebreather dives, the inert gas fractions of a gas mix are scaled, so
inert gases fill the pressure remaining after oxygen.

References
----------
* Baker, Erik. *Understanding M-values*.
* Powell, Mark. *Deco for Divers*, United Kingdom, 2010.
"""

from collections import namedtuple
import math
import logging

from . import const

logger = logging.getLogger(__name__)

Data = namedtuple('Data', 'tissues')
Data.__doc__ = """
Tissue state of ZH-L16-GF model.

:var tissues: Tissues gas loading. Tuple of pair numbers - each pair holds
    value of inert gas pressure (N2, He) in a tissue compartment [bar].
"""

Compartment = namedtuple(
    'Compartment', 'n2_half_life n2_a n2_b he_half_life he_a he_b'
)
Compartment.__doc__ = """
Tissue compartment parameters.

:var n2_half_life: Nitrogen half-life time [min].
:var n2_a: Nitrogen Buhlmann coefficient A.
:var n2_b: Nitrogen Buhlmann coefficient B.
:var he_half_life: Helium half-life time [min].
:var he_a: Helium Buhlmann coefficient A.
:var he_b: Helium Buhlmann coefficient B.
"""


def exposure(p_i, p_alv, k, time):
    """
    Calculate inert gas pressure in a tissue compartment after exposure
    at constant depth.

    :param p_i: Initial inert gas pressure in the compartment [bar].
    :param p_alv: Pressure of inspired inert gas [bar].
    :param k: Gas decay constant of the compartment.
    :param time: Time of exposure [min].
    """
    assert time > 0
    return p_alv + (p_i - p_alv) * math.exp(-k * time)


def ceiling(gf, p_n2, p_he, compartment):
    """
    Calculate ascent ceiling of a tissue compartment [bar].

    :param gf: Gradient factor value.
    :param p_n2: Nitrogen pressure in the compartment [bar].
    :param p_he: Helium pressure in the compartment [bar].
    :param compartment: Tissue compartment parameters.
    """
    p = p_n2 + p_he
    a = (compartment.n2_a * p_n2 + compartment.he_a * p_he) / p
    b = (compartment.n2_b * p_n2 + compartment.he_b * p_he) / p
    return (p - a * gf) / (gf / b + 1 - gf)


def inert_fractions(abs_p, gas, po2=0):
    """
    Calculate nitrogen and helium fractions of breathed gas.

    If partial pressure of oxygen is measured, then inert gas fractions
    are scaled to fill pressure remaining after oxygen.

    :param abs_p: Absolute pressure of current depth [bar].
    :param gas: Gas mix configuration (fractions in permille).
    :param po2: Measured partial pressure of oxygen [bar], zero if not
        measured.
    """
    o2 = (gas.o2 or const.O2_IN_AIR) / 1000
    he = gas.he / 1000
    n2 = max(1 - o2 - he, 0)
    if po2 and n2 + he > 0:
        inert = max(abs_p - po2, 0) / abs_p
        scale = inert / (n2 + he)
        n2 *= scale
        he *= scale
    return n2, he



class ZH_L16_GF(object):
    """
    Base class for Buhlmann ZH-L16 tissue model with gradient factor.

    :var gf: Gradient factor used to calculate ascent ceiling.
    :var water_vapour_pressure: Water vapour pressure in lungs [bar].
    :var k_const: Pairs of nitrogen and helium gas decay constants, one
        pair for each tissue compartment.
    """
    COMPARTMENTS = ()
    START_P_N2 = 0.7902 # N2 fraction of air at the surface

    def __init__(self, gf=0.3):
        """
        Create instance of the model.

        :param gf: Gradient factor used to calculate ascent ceiling.
        """
        super().__init__()
        assert 0 < gf <= 1.5
        self.gf = gf
        self.water_vapour_pressure = const.WATER_VAPOUR_PRESSURE_DEFAULT
        self.k_const = tuple(
            (const.LOG_2 / c.n2_half_life, const.LOG_2 / c.he_half_life)
            for c in self.COMPARTMENTS
        )
        if __debug__:
            logger.debug('{} with gf {}'.format(type(self).__name__, gf))


    def init(self, surface_pressure):
        """
        Create tissue state of a diver saturated at the surface.

        :param surface_pressure: Surface pressure [bar].
        """
        p_n2 = self.START_P_N2 * (surface_pressure - self.water_vapour_pressure)
        return Data(tuple((p_n2, 0.0) for c in self.COMPARTMENTS))


    def load(self, abs_p, time, gas, data, po2=0):
        """
        Calculate tissue state after exposure at constant depth.

        :param abs_p: Absolute pressure of current depth [bar].
        :param time: Time of exposure [min].
        :param gas: Gas mix configuration.
        :param data: Tissue state.
        :param po2: Measured partial pressure of oxygen [bar].
        """
        f_n2, f_he = inert_fractions(abs_p, gas, po2)
        p = abs_p - self.water_vapour_pressure
        n2_alv = f_n2 * p
        he_alv = f_he * p
        tissues = tuple(
            (exposure(p_n2, n2_alv, k_n2, time),
                exposure(p_he, he_alv, k_he, time))
            for (p_n2, p_he), (k_n2, k_he) in zip(data.tissues, self.k_const)
        )
        return Data(tissues)


    def ceiling_limit(self, data, gf=None):
        """
        Calculate pressure of ascent ceiling of tissue state.

        The pressure is the shallowest depth a diver can reach without
        decompression sickness. If pressure limit is 3 bar, then diver
        should not go shallower than 20m.

        :param data: Tissue state.
        :param gf: Gradient factor value, `gf` attribute by default.
        """
        if gf is None:
            gf = self.gf
        assert 0 < gf <= 1.5
        return max(
            ceiling(gf, p_n2, p_he, c)
            for (p_n2, p_he), c in zip(data.tissues, self.COMPARTMENTS)
        )



class ZH_L16B_GF(ZH_L16_GF):
    """
    ZH-L16B-GF tissue model (coefficients of gfdeco.f by Baker).
    """
    COMPARTMENTS = (
        Compartment(5.0, 1.1696, 0.5578, 1.88, 1.6189, 0.4770),
        Compartment(8.0, 1.0000, 0.6514, 3.02, 1.3830, 0.5747),
        Compartment(12.5, 0.8618, 0.7222, 4.72, 1.1919, 0.6527),
        Compartment(18.5, 0.7562, 0.7825, 6.99, 1.0458, 0.7223),
        Compartment(27.0, 0.6667, 0.8126, 10.21, 0.9220, 0.7582),
        Compartment(38.3, 0.5600, 0.8434, 14.48, 0.8205, 0.7957),
        Compartment(54.3, 0.4947, 0.8693, 20.53, 0.7305, 0.8279),
        Compartment(77.0, 0.4500, 0.8910, 29.11, 0.6502, 0.8553),
        Compartment(109.0, 0.4187, 0.9092, 41.20, 0.5950, 0.8757),
        Compartment(146.0, 0.3798, 0.9222, 55.19, 0.5545, 0.8903),
        Compartment(187.0, 0.3497, 0.9319, 70.69, 0.5333, 0.8997),
        Compartment(239.0, 0.3223, 0.9403, 90.34, 0.5189, 0.9073),
        Compartment(305.0, 0.2850, 0.9477, 115.29, 0.5181, 0.9122),
        Compartment(390.0, 0.2737, 0.9544, 147.42, 0.5176, 0.9171),
        Compartment(498.0, 0.2523, 0.9602, 188.24, 0.5172, 0.9217),
        Compartment(635.0, 0.2327, 0.9653, 240.03, 0.5119, 0.9267),
    )



class ZH_L16C_GF(ZH_L16_GF):
    """
    ZH-L16C-GF tissue model (coefficients of OSTC firmware).

    The model is more conservative than ZH-L16B-GF.
    """
    COMPARTMENTS = (
        Compartment(4.0, 1.2599, 0.5050, 1.51, 1.7424, 0.4245),
        Compartment(8.0, 1.0000, 0.6514, 3.02, 1.3830, 0.5747),
        Compartment(12.5, 0.8618, 0.7222, 4.72, 1.1919, 0.6527),
        Compartment(18.5, 0.7562, 0.7825, 6.99, 1.0458, 0.7223),
        Compartment(27.0, 0.6200, 0.8126, 10.21, 0.9220, 0.7582),
        Compartment(38.3, 0.5043, 0.8434, 14.48, 0.8205, 0.7957),
        Compartment(54.3, 0.4410, 0.8693, 20.53, 0.7305, 0.8279),
        Compartment(77.0, 0.4000, 0.8910, 29.11, 0.6502, 0.8553),
        Compartment(109.0, 0.3750, 0.9092, 41.20, 0.5950, 0.8757),
        Compartment(146.0, 0.3500, 0.9222, 55.19, 0.5545, 0.8903),
        Compartment(187.0, 0.3295, 0.9319, 70.69, 0.5333, 0.8997),
        Compartment(239.0, 0.3065, 0.9403, 90.34, 0.5189, 0.9073),
        Compartment(305.0, 0.2835, 0.9477, 115.29, 0.5181, 0.9122),
        Compartment(390.0, 0.2610, 0.9544, 147.42, 0.5176, 0.9171),
        Compartment(498.0, 0.2480, 0.9602, 188.24, 0.5172, 0.9217),
        Compartment(635.0, 0.2327, 0.9653, 240.03, 0.5119, 0.9267),
    )


MODELS = {
    'zh-l16b-gf': ZH_L16B_GF,
    'zh-l16c-gf': ZH_L16C_GF,
}


# vim: sw=4:et:ai

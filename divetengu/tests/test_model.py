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
Tissue model tests.
"""

from divetengu.dive import GasMix, AIR
from divetengu.model import exposure, ceiling, inert_fractions, \
    ZH_L16B_GF, ZH_L16C_GF, Data
from divetengu import const

import unittest
from unittest import mock

EAN32 = GasMix(320, 0)


class ExposureTestCase(unittest.TestCase):
    """
    Tissue compartment exposure at constant depth tests.
    """
    def test_half_life(self):
        """
        Test tissue compartment is half saturated after half-life time
        """
        p_alv = 0.68 * (4 - 0.0627)
        v = exposure(1, p_alv, const.LOG_2 / 5, 5)
        self.assertAlmostEqual((p_alv + 1) / 2, v, 6)


    def test_air(self):
        """
        Test tissue compartment loading at 30m on air
        """
        p_alv = 0.79 * (4 - 0.0627)
        v = exposure(3, p_alv, const.LOG_2 / 5, 1)
        self.assertAlmostEqual(3.0143, v, 4)


    def test_offgassing(self):
        """
        Test tissue compartment unloading at the surface
        """
        v = exposure(3, 0.75, const.LOG_2 / 5, 10)
        self.assertAlmostEqual(0.75 + 2.25 / 4, v, 6)


    def test_no_time(self):
        """
        Test exposure without time
        """
        self.assertRaises(AssertionError, exposure, 1, 3, 0.1, 0)



class InertFractionsTestCase(unittest.TestCase):
    """
    Inert gas fractions tests.
    """
    def test_air(self):
        """
        Test inert gas fractions of air
        """
        n2, he = inert_fractions(1, AIR)
        self.assertAlmostEqual(0.791, n2)
        self.assertEqual(0, he)


    def test_unknown_o2(self):
        """
        Test inert gas fractions of gas mix with unknown O2 fraction
        """
        n2, he = inert_fractions(1, GasMix())
        self.assertAlmostEqual(0.791, n2)


    def test_trimix(self):
        """
        Test inert gas fractions of trimix
        """
        n2, he = inert_fractions(4, GasMix(180, 450))
        self.assertAlmostEqual(0.37, n2)
        self.assertAlmostEqual(0.45, he)


    def test_measured_po2(self):
        """
        Test inert gas fractions with measured pO2
        """
        n2, he = inert_fractions(2, AIR, 1.0)
        self.assertAlmostEqual(0.5, n2)
        self.assertEqual(0, he)

        n2, he = inert_fractions(2, GasMix(100, 500), 0.8)
        self.assertAlmostEqual(0.6 * 0.4 / 0.9, n2)
        self.assertAlmostEqual(0.6 * 0.5 / 0.9, he)



class CeilingTestCase(unittest.TestCase):
    """
    Tissue compartment ascent ceiling tests.
    """
    def setUp(self):
        self.compartment = ZH_L16B_GF.COMPARTMENTS[0]


    def test_ceiling_n2_30(self):
        """
        Test 30% gradient factor ceiling for N2
        """
        v = ceiling(0.3, 3.0, 0, self.compartment)
        self.assertAlmostEqual(2.140137, v, 6)


    def test_ceiling_tx1845_100(self):
        """
        Test 100% gradient factor ceiling for trimix
        """
        v = ceiling(1.0, 2.2, 0.8, self.compartment)
        self.assertAlmostEqual(0.917308, v, 6)



class ZH_L16_GFTestCase(unittest.TestCase):
    """
    Buhlmann ZH-L16 tissue model with gradient factor tests.
    """
    def test_model_init(self):
        """
        Test tissue state of a diver saturated at the surface
        """
        m = ZH_L16B_GF()
        data = m.init(1.013)
        self.assertEqual(16, len(data.tissues))
        for p_n2, p_he in data.tissues:
            self.assertAlmostEqual(0.75092706, p_n2)
            self.assertEqual(0, p_he)


    def test_tissues_load(self):
        """
        Test loading of all tissue compartments with inert gas
        """
        m = ZH_L16B_GF()
        data = Data(tuple([(0.79, 0.0)] * 16))
        result = m.load(4, 1, EAN32, data)

        tissues = result.tissues
        self.assertEqual(16, len(tissues))
        self.assertTrue(all(v[0] > 0.79 for v in tissues), tissues)
        self.assertTrue(all(v[1] == 0 for v in tissues), tissues)


    def test_tissues_load_trimix(self):
        """
        Test helium loading is faster than nitrogen loading
        """
        m = ZH_L16B_GF()
        data = m.load(4, 5, GasMix(210, 350), m.init(1.013))
        p_n2, p_he = data.tissues[0]
        self.assertGreater(p_he, 0)
        self.assertLess(p_he, 0.35 * (4 - 0.0627))


    def test_tissues_unload(self):
        """
        Test unloading of tissue compartments at the surface
        """
        m = ZH_L16C_GF()
        data = m.load(4, 30, AIR, m.init(1.013))
        result = m.load(1.013, 60, AIR, data)
        self.assertTrue(all(
            v1[0] < v0[0] for v0, v1 in zip(data.tissues, result.tissues)
        ))


    @mock.patch('divetengu.model.ceiling')
    def test_ceiling_limit(self, f):
        """
        Test tissue tolerance is maximum of compartment ceilings
        """
        m = ZH_L16B_GF(gf=0.1)
        data = Data(
            ((1.5, 0.0), (2.5, 0.), (2.0, 0.0), (2.9, 0.0), (2.6, 0.1)),
        )
        f.side_effect = (1.0, 2.0, 1.5, 2.4, 2.1)

        v = m.ceiling_limit(data)
        self.assertEqual(2.4, v)
        self.assertEqual(5, f.call_count)
        self.assertEqual(
            mock.call(0.1, 2.6, 0.1, m.COMPARTMENTS[4]), f.call_args
        )


    @mock.patch('divetengu.model.ceiling')
    def test_ceiling_limit_gf(self, f):
        """
        Test tissue tolerance with gradient factor
        """
        m = ZH_L16B_GF()
        data = Data(((1.5, 0.0),))
        f.return_value = 1.2

        self.assertEqual(1.2, m.ceiling_limit(data, gf=0.8))
        f.assert_called_once_with(0.8, 1.5, 0.0, m.COMPARTMENTS[0])


    def test_models(self):
        """
        Test ZH-L16B-GF and ZH-L16C-GF tissue model parameters
        """
        b = ZH_L16B_GF()
        c = ZH_L16C_GF(gf=0.5)
        self.assertEqual(0.3, b.gf)
        self.assertEqual(0.5, c.gf)
        self.assertEqual(16, len(c.COMPARTMENTS))
        self.assertEqual(16, len(c.k_const))
        self.assertAlmostEqual(const.LOG_2 / 4, c.k_const[0][0])
        self.assertAlmostEqual(const.LOG_2 / 5, b.k_const[0][0])
        self.assertEqual(b.COMPARTMENTS[1:4], c.COMPARTMENTS[1:4])


# vim: sw=4:et:ai

#!/usr/bin/env python3

import unittest

from libcalg.basic_types import LARGEST_s32_PRIME, ZZ, Modulus, ModulusMismatch, gcd, lcm

class TestGCD(unittest.TestCase):

    def test_gcd(self):
        self.assertEqual(gcd(13, 4), 1)
        self.assertEqual(gcd(84, 144), 12)
        self.assertEqual(gcd(426426, 5184), 6)
        self.assertEqual(gcd(134, 426), 2)
        self.assertEqual(gcd(0, 71), 71)
        self.assertEqual(gcd(23, 0), 23)
        self.assertEqual(gcd(1, -2), gcd(1, 2))
        self.assertEqual(gcd(-1, -2), gcd(1, 2))

    def test_lcm(self):
        self.assertEqual(lcm(4, 6), 12)
        self.assertEqual(lcm(7, 3), 21)
        self.assertEqual(lcm(0, 5), 0)
        self.assertEqual(lcm(1, 1), 1)

class TestModulus(unittest.TestCase):

    def test_equality(self):
        self.assertEqual(Modulus(5), Modulus(5))
        self.assertEqual(Modulus(), ZZ)
        self.assertNotEqual(Modulus(5), Modulus(7))
        self.assertNotEqual(ZZ, Modulus(5))
        self.assertEqual(len({Modulus(5), Modulus(5), ZZ}), 2)

    def test_str(self):
        self.assertEqual(str(ZZ), "Z")
        self.assertEqual(str(Modulus(426)), "Z/426Z")
        self.assertEqual(repr(Modulus(426)), "Modulus(426)")
        self.assertEqual(repr(ZZ), "Modulus(None)")

    def test_invalid(self):
        for q in (0, -3, 2.5, True, "5"):
            with self.assertRaises(ValueError):
                Modulus(q)
        self.assertEqual(Modulus(LARGEST_s32_PRIME).q, LARGEST_s32_PRIME)

    def test_is_zero(self):
        self.assertTrue(ZZ.is_zero(0))
        self.assertFalse(ZZ.is_zero(5))
        self.assertTrue(Modulus(5).is_zero(10))
        self.assertTrue(Modulus(5).is_zero(-5))
        self.assertFalse(Modulus(5).is_zero(4))

    def test_reduce(self):
        self.assertEqual(Modulus(5).reduce(7), 2)
        self.assertEqual(Modulus(5).reduce(-3), -3)
        self.assertEqual(Modulus(5).reduce(-7), -2)
        self.assertEqual(Modulus(5).reduce(-10), 0)
        self.assertEqual(ZZ.reduce(-7), -7)

    def test_mismatch(self):
        e = ModulusMismatch(ZZ, Modulus(426))
        self.assertIsInstance(e, ArithmeticError)
        self.assertEqual(e.modulus_a, ZZ)
        self.assertEqual(e.modulus_b, Modulus(426))
        self.assertIn("Z/426Z", str(e))
        self.assertNotEqual(e, ModulusMismatch(Modulus(426), ZZ))

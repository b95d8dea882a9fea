import unittest

from ptmpy.structure import composition
from ptmpy.structure.composition import Composition


class TestAtomChain(unittest.TestCase):
    def test_parse(self):
        parsed = composition.parse_atom_chain("C(2)H(3)NO")
        self.assertEqual(parsed, Composition("C2H3NO"))
        self.assertEqual(parsed.mass, Composition("C2H3NO").mass)
        self.assertEqual(len(composition.parse_atom_chain("")), 0)

    def test_parse_isotopes(self):
        parsed = composition.parse_atom_chain("13C(6)15N(2)")
        self.assertEqual(parsed["C[13]"], 6)
        self.assertEqual(parsed["N[15]"], 2)
        self.assertEqual(parsed["C"], 0)

    def test_parse_malformed(self):
        for chain in ["C(x)", "c2", "C(", "C(-1)"]:
            self.assertRaises(
                composition.ChemicalCompositionError, composition.parse_atom_chain, chain)

    def test_format(self):
        self.assertEqual(composition.format_atom_chain(Composition("C2H3NO")), "C(2)H(3)NO")
        self.assertEqual(composition.format_atom_chain(Composition("HPO3")), "HO(3)P")
        self.assertEqual(composition.format_atom_chain(Composition()), "")
        chain = "13C(6)H(2)15N(2)"
        self.assertEqual(
            composition.format_atom_chain(composition.parse_atom_chain(chain)), "13C(6)H(2)15N(2)")

    def test_is_same_composition(self):
        self.assertTrue(composition.is_same_composition(Composition("O"), Composition("O")))
        self.assertTrue(composition.is_same_composition({"O": 1, "N": 0}, Composition("O")))
        self.assertFalse(composition.is_same_composition(Composition("O"), Composition("O2")))
        self.assertFalse(composition.is_same_composition(Composition("O"), None))
        self.assertTrue(composition.is_same_composition(Composition(), None))
        self.assertTrue(composition.is_same_composition({"O": 0}, None))
        self.assertTrue(composition.is_empty_composition(Composition()))
        self.assertTrue(composition.is_empty_composition({"C": 0}))
        self.assertFalse(composition.is_empty_composition(Composition("C")))


if __name__ == '__main__':
    unittest.main()

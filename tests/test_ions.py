import pickle
import unittest

from ptmpy.structure.composition import parse_atom_chain
from ptmpy.structure.modification import NeutralLoss, ReporterIon, CvTerm


class TestNeutralLoss(unittest.TestCase):
    def test_mass(self):
        loss = NeutralLoss("H(3)O(4)P", label="H3PO4")
        self.assertEqual(loss.mass, parse_atom_chain("H(3)O(4)P").mass)
        self.assertEqual(loss.name, "H3PO4")
        self.assertFalse(loss.fixed)

    def test_equality(self):
        self.assertEqual(NeutralLoss("CH(4)OS"), NeutralLoss("CH(4)OS"))
        self.assertNotEqual(NeutralLoss("CH(4)OS"), NeutralLoss("H(2)O"))
        self.assertNotEqual(NeutralLoss("CH(4)OS"), "CH(4)OS")

    def test_record(self):
        loss = NeutralLoss("CH(4)OS", label="64", fixed=True)
        record = loss.to_dict()
        self.assertEqual(record, {"name": "64", "composition": "CH(4)OS", "fixed": True})
        self.assertEqual(NeutralLoss.from_dict(record), loss)


class TestReporterIon(unittest.TestCase):
    def test_mass(self):
        ion = ReporterIon("C(7)H(11)NO", label="ACE_K_126")
        self.assertAlmostEqual(ion.mass, 125.084, 3)
        self.assertEqual(ReporterIon.from_dict(ion.to_dict()), ion)


class TestCvTerm(unittest.TestCase):
    def test_equality(self):
        term = CvTerm("UNIMOD", "UNIMOD:35", "Oxidation", "15.994915")
        self.assertEqual(term, CvTerm("UNIMOD", "UNIMOD:35", "Oxidation", "15.994915"))
        self.assertNotEqual(term, CvTerm("UNIMOD", "UNIMOD:21", "Phospho"))
        self.assertNotEqual(term, "UNIMOD:35")
        self.assertEqual(hash(term), hash(CvTerm("UNIMOD", "UNIMOD:35", "Oxidized")))

    def test_pickle(self):
        term = CvTerm("UNIMOD", "UNIMOD:35", "Oxidation")
        self.assertEqual(pickle.loads(pickle.dumps(term)), term)
        self.assertEqual(CvTerm.from_dict(term.to_dict()), term)


if __name__ == '__main__':
    unittest.main()

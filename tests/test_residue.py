import pickle
import unittest

from ptmpy.structure import residue


class AminoAcidResidueTests(unittest.TestCase):
    def test_residue_creation(self):
        leucine = residue.AminoAcidResidue(symbol='L')
        isoleucine = residue.AminoAcidResidue(name='Ile')
        self.assertEqual(leucine.composition, isoleucine.composition)
        self.assertIs(leucine, residue.AminoAcidResidue("Leu"))
        self.assertEqual(leucine.long_name, "Leucine")

    def test_unknown(self):
        self.assertRaises(residue.UnknownAminoAcidException, residue.AminoAcidResidue, "1")

    def test_degeneracy(self):
        xle = residue.AminoAcidResidue("J")
        leucine = residue.AminoAcidResidue(symbol='L')
        self.assertTrue(xle.is_degenerate)
        self.assertFalse(leucine.is_degenerate)
        self.assertTrue(leucine in residue.degeneracy_index[xle.name])

    def test_expand(self):
        xle = residue.AminoAcidResidue("J")
        self.assertEqual(
            xle.expand(),
            frozenset([residue.AminoAcidResidue("L"), residue.AminoAcidResidue("I")]))
        self.assertEqual(residue.AminoAcidResidue("S").expand(), frozenset([residue.AminoAcidResidue("S")]))
        self.assertEqual(len(residue.AminoAcidResidue("X").expand()), 20)

    def test_get_all_residues(self):
        self.assertEqual(len(residue.get_all_residues()), 20)
        everything = residue.get_all_residues(standard_only=False)
        self.assertIn(residue.AminoAcidResidue("J"), everything)
        self.assertNotIn(residue.AminoAcidResidue("X"), everything)

    def test_pickle(self):
        serine = residue.AminoAcidResidue("S")
        self.assertIs(pickle.loads(pickle.dumps(serine)), serine)


if __name__ == '__main__':
    unittest.main()

import unittest

from ptmpy.structure.modification import (
    AminoAcidPattern, SequenceMatchingType, ModificationStringParseError)


class TestAminoAcidPattern(unittest.TestCase):
    def test_parse(self):
        pattern = AminoAcidPattern.from_string("[ST]P")
        self.assertEqual(len(pattern), 2)
        self.assertEqual(pattern.length(), 2)
        self.assertEqual(pattern.amino_acids_at_target, ["S", "T"])
        self.assertEqual(str(pattern), "[ST]P")

    def test_from_residues(self):
        pattern = AminoAcidPattern.from_residues(["S", "T", "Y"])
        self.assertEqual(str(pattern), "[STY]")
        self.assertEqual(len(AminoAcidPattern.from_residues([])), 0)

    def test_empty(self):
        pattern = AminoAcidPattern()
        self.assertEqual(len(pattern), 0)
        self.assertEqual(pattern.amino_acids_at_target, [])
        self.assertEqual(str(pattern), "")
        self.assertEqual(len(AminoAcidPattern.from_string("")), 0)

    def test_empty_position(self):
        pattern = AminoAcidPattern.from_string("N[]")
        self.assertEqual(str(pattern), "NX")
        self.assertEqual(pattern.residue_targets, [["N"], ["X"]])
        self.assertTrue(pattern.is_same_as(AminoAcidPattern.from_string("NX")))
        self.assertEqual(pattern, AminoAcidPattern.from_string("NX"))
        self.assertEqual(hash(pattern), hash(AminoAcidPattern.from_string("NX")))
        self.assertTrue(AminoAcidPattern([[]]).is_same_as(AminoAcidPattern.from_string("X")))

    def test_malformed(self):
        self.assertRaises(ModificationStringParseError, AminoAcidPattern.from_string, "[ST")
        self.assertRaises(ModificationStringParseError, AminoAcidPattern.from_string, "ST]")
        self.assertRaises(ModificationStringParseError, AminoAcidPattern.from_string, "[S1]")

    def test_standard_search_pattern(self):
        pattern = AminoAcidPattern.from_string("NX[ST]")
        self.assertEqual(str(pattern.standard_search_pattern()), "N")
        pattern = AminoAcidPattern.from_string("P[ST]", target=1)
        self.assertEqual(str(pattern.standard_search_pattern()), "[ST]")
        self.assertEqual(len(AminoAcidPattern().standard_search_pattern()), 0)

    def test_is_same_as_string_matching(self):
        pattern = AminoAcidPattern.from_string("[ST]P")
        self.assertTrue(pattern.is_same_as(AminoAcidPattern.from_string("[TS]P")))
        self.assertFalse(pattern.is_same_as(AminoAcidPattern.from_string("[ST]")))
        self.assertFalse(pattern.is_same_as(AminoAcidPattern.from_string("[ST]P", target=1)))
        self.assertFalse(pattern.is_same_as(None))
        self.assertFalse(AminoAcidPattern().is_same_as(None))

    def test_is_same_as_amino_acid_matching(self):
        xle = AminoAcidPattern.from_string("J")
        both = AminoAcidPattern.from_string("[IL]")
        self.assertFalse(xle.is_same_as(both, SequenceMatchingType.string))
        self.assertTrue(xle.is_same_as(both, SequenceMatchingType.amino_acid))
        self.assertTrue(xle.is_same_as(both, "Amino Acids"))

    def test_is_same_as_indistinguishable(self):
        leucine = AminoAcidPattern.from_string("L")
        isoleucine = AminoAcidPattern.from_string("I")
        self.assertFalse(leucine.is_same_as(isoleucine, SequenceMatchingType.amino_acid))
        self.assertTrue(leucine.is_same_as(
            isoleucine, SequenceMatchingType.indistinguishable_amino_acids))

    def test_equality(self):
        pattern = AminoAcidPattern.from_string("[ST]")
        self.assertEqual(pattern, AminoAcidPattern.from_string("[TS]"))
        self.assertEqual(hash(pattern), hash(AminoAcidPattern.from_string("[TS]")))
        self.assertEqual(pattern, "[ST]")
        self.assertNotEqual(pattern, AminoAcidPattern.from_string("S"))

    def test_clone(self):
        pattern = AminoAcidPattern.from_string("[ST]P")
        dup = pattern.clone()
        dup.residue_targets[0].append("Y")
        self.assertEqual(str(pattern), "[ST]P")
        self.assertEqual(str(dup), "[STY]P")


if __name__ == '__main__':
    unittest.main()

import unittest

import torch

from quadnet import QUADRANT_LABELS, DimensionMismatch, InvalidConfiguration, LabelCodec, UnknownLabel, decode, encode


class TestLabelCodec(unittest.TestCase):
    """Tests for one-hot encoding over the quadrant labels."""

    def test_encode_one_hot(self):
        self.assertEqual(encode("blue").tolist(), [1.0, 0.0, 0.0, 0.0])
        self.assertEqual(encode("red").tolist(), [0.0, 1.0, 0.0, 0.0])
        self.assertEqual(encode("green").tolist(), [0.0, 0.0, 1.0, 0.0])
        self.assertEqual(encode("purple").tolist(), [0.0, 0.0, 0.0, 1.0])

    def test_round_trip(self):
        for label in QUADRANT_LABELS:
            self.assertEqual(decode(encode(label)), label)

    def test_unknown_label(self):
        for bad in ("yellow", "Blue", "", None, 0):
            with self.assertRaises(UnknownLabel):
                encode(bad)

    def test_unknown_label_is_key_error(self):
        with self.assertRaises(KeyError) as ctx:
            encode("orange")
        self.assertIn("orange", str(ctx.exception))

    def test_decode_argmax(self):
        self.assertEqual(decode([0.1, 0.2, 0.9, 0.3]), "green")
        self.assertEqual(decode(torch.tensor([0.2, 0.1, 0.1, 0.7])), "purple")

    def test_decode_tie_takes_first(self):
        self.assertEqual(decode([0.5, 0.5, 0.1, 0.1]), "blue")
        self.assertEqual(decode([0.1, 0.8, 0.8, 0.8]), "red")
        self.assertEqual(decode([0.5, 0.5, 0.5, 0.5]), "blue")

    def test_decode_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            decode([0.1, 0.9])

    def test_custom_label_space(self):
        codec = LabelCodec(["cat", "dog"])
        self.assertEqual(len(codec), 2)
        self.assertEqual(list(codec), ["cat", "dog"])
        self.assertEqual(codec.index("dog"), 1)
        self.assertEqual(codec.encode("cat").tolist(), [1.0, 0.0])
        self.assertEqual(codec.decode([0.2, 0.7]), "dog")
        with self.assertRaises(UnknownLabel):
            codec.encode("blue")

    def test_invalid_label_space(self):
        for bad in ([], ["a", "a"], ["a", 1]):
            with self.assertRaises(InvalidConfiguration):
                LabelCodec(bad)

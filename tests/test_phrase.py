import unittest

from polish_numeral.phrase import assemble


class TestAssemble(unittest.TestCase):
    def test_reverses_and_joins(self):
        self.assertEqual(assemble(["trzy", "dwadzieścia", "sto"]), "sto dwadzieścia trzy")

    def test_single_token(self):
        self.assertEqual(assemble(["zero"]), "zero")

    def test_leaves_input_untouched(self):
        tokens = ["tysiące", "dwa"]
        assemble(tokens)
        self.assertEqual(tokens, ["tysiące", "dwa"])


if __name__ == "__main__":
    unittest.main()

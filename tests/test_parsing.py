import random
import unittest

from wordring.core.constants import Orientation
from wordring.core.exceptions import MalformedLevelError
from wordring.core.models import PlacedWord
from wordring.data.normalization import normalize_word
from wordring.data.parsing import (
    format_letter_bank,
    format_placements,
    parse_letter_bank,
    parse_placements,
)


class LetterBankTests(unittest.TestCase):
    def test_trims_and_uppercases(self) -> None:
        self.assertEqual(parse_letter_bank(" c, a ,t,R"), ["C", "A", "T", "R"])

    def test_keeps_repeated_letters(self) -> None:
        self.assertEqual(parse_letter_bank("L,O,O,P"), ["L", "O", "O", "P"])

    def test_empty_token_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError):
            parse_letter_bank("C,,T")

    def test_multi_character_token_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError):
            parse_letter_bank("C,AT,R")

    def test_blank_bank_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError):
            parse_letter_bank("   ")

    def test_format_round_trip(self) -> None:
        letters = ["S", "T", "A", "R"]
        self.assertEqual(parse_letter_bank(format_letter_bank(letters)), letters)


class PlacementTests(unittest.TestCase):
    def test_parses_example_level(self) -> None:
        words = parse_placements("0,0,CAT,H|0,0,CAR,V|1,0,AT,V")
        self.assertEqual([w.word for w in words], ["CAT", "CAR", "AT"])
        self.assertEqual(words[0].orientation, Orientation.HORIZONTAL)
        self.assertEqual(words[1].orientation, Orientation.VERTICAL)
        self.assertEqual((words[2].x, words[2].y), (1, 0))
        self.assertFalse(any(w.found for w in words))

    def test_words_and_codes_are_case_insensitive(self) -> None:
        words = parse_placements("2,3,cat,h|0,1,At,v")
        self.assertEqual(words[0].word, "CAT")
        self.assertEqual(words[0].orientation, Orientation.HORIZONTAL)
        self.assertEqual(words[1].orientation, Orientation.VERTICAL)

    def test_missing_orientation_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError):
            parse_placements("0,0,CAT")

    def test_extra_field_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError):
            parse_placements("0,0,CAT,H,X")

    def test_unknown_orientation_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError) as ctx:
            parse_placements("0,0,CAT,D")
        self.assertIn("D", str(ctx.exception))

    def test_negative_coordinate_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError):
            parse_placements("-1,0,CAT,H")

    def test_non_integer_coordinate_rejected(self) -> None:
        for raw in ("a,0,CAT,H", "0,1.5,CAT,H", "0,,CAT,H"):
            with self.subTest(raw=raw):
                with self.assertRaises(MalformedLevelError):
                    parse_placements(raw)

    def test_empty_word_rejected(self) -> None:
        with self.assertRaises(MalformedLevelError):
            parse_placements("0,0, ,H")

    def test_coordinates_follow_orientation(self) -> None:
        across, down = parse_placements("1,2,ABC,H|4,0,XY,V")
        self.assertEqual([(c.x, c.y) for c in across.coordinates], [(1, 2), (2, 2), (3, 2)])
        self.assertEqual([(c.x, c.y) for c in down.coordinates], [(4, 0), (4, 1)])

    def test_reserialized_placements_parse_to_equal_set(self) -> None:
        rng = random.Random(7)
        alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        for _ in range(50):
            words = [
                PlacedWord(
                    word="".join(rng.choice(alphabet) for _ in range(rng.randint(1, 7))),
                    x=rng.randint(0, 20),
                    y=rng.randint(0, 20),
                    orientation=rng.choice(list(Orientation)),
                )
                for _ in range(rng.randint(1, 6))
            ]
            reparsed = parse_placements(format_placements(words))
            self.assertEqual(reparsed, words)


class NormalizationTests(unittest.TestCase):
    def test_normalize_word(self) -> None:
        self.assertEqual(normalize_word(" cat "), "CAT")
        self.assertEqual(normalize_word(""), "")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

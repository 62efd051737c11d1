import random
import unittest

from wordring.core.constants import Bounds, Orientation
from wordring.core.exceptions import InvariantViolation, MalformedLevelError
from wordring.core.models import Coordinate, PlacedWord
from wordring.engine.grid import LevelGrid, build_grid, compute_bounds


EXAMPLE_LETTERS = "C,A,T,R"
EXAMPLE_WORDS = "0,0,CAT,H|0,0,CAR,V|1,0,AT,V"


class BuildGridTests(unittest.TestCase):
    def test_intersections_collect_every_word(self) -> None:
        grid = LevelGrid.from_text(EXAMPLE_LETTERS, EXAMPLE_WORDS)
        origin = grid.cell(0, 0)
        assert origin is not None
        self.assertEqual(origin.letter, "C")
        self.assertEqual(sorted(w.word for w in origin.words), ["CAR", "CAT"])
        self.assertTrue(origin.is_intersection)

        shared_a = grid.cell(1, 0)
        assert shared_a is not None
        self.assertEqual(sorted(w.word for w in shared_a.words), ["AT", "CAT"])

        lone = grid.cell(0, 2)
        assert lone is not None
        self.assertEqual(lone.letter, "R")
        self.assertFalse(lone.is_intersection)
        self.assertEqual(len(grid.cells), 6)

    def test_cells_start_hidden(self) -> None:
        grid = LevelGrid.from_text(EXAMPLE_LETTERS, EXAMPLE_WORDS)
        self.assertFalse(any(cell.revealed for cell in grid.cells.values()))

    def test_conflicting_letters_raise(self) -> None:
        words = [
            PlacedWord("BRAIN", 0, 0, Orientation.HORIZONTAL),
            PlacedWord("RAIN", 2, 0, Orientation.VERTICAL),
        ]
        with self.assertLogs("wordring.engine.grid", level="ERROR"):
            with self.assertRaises(InvariantViolation):
                build_grid(words)

    def test_build_is_independent_of_word_order(self) -> None:
        words = LevelGrid.from_text(EXAMPLE_LETTERS, EXAMPLE_WORDS).words
        forward = build_grid(words)
        backward = build_grid(list(reversed(words)))
        self.assertEqual(set(forward), set(backward))
        for coordinate, cell in forward.items():
            self.assertEqual(cell.letter, backward[coordinate].letter)
            self.assertEqual(
                sorted(w.word for w in cell.words),
                sorted(w.word for w in backward[coordinate].words),
            )

    def test_random_non_conflicting_sets_agree_on_letters(self) -> None:
        rng = random.Random(1234)
        alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        for _ in range(100):
            # Lay words over a fixed solution board so overlaps always agree.
            board = {
                Coordinate(x, y): rng.choice(alphabet) for x in range(8) for y in range(8)
            }
            words = []
            for _ in range(rng.randint(1, 6)):
                orientation = rng.choice(list(Orientation))
                length = rng.randint(1, 5)
                x = rng.randint(0, 7 - (length - 1 if orientation == Orientation.HORIZONTAL else 0))
                y = rng.randint(0, 7 - (length - 1 if orientation == Orientation.VERTICAL else 0))
                probe = PlacedWord("?" * length, x, y, orientation)
                text = "".join(board[c] for c in probe.coordinates)
                words.append(PlacedWord(text, x, y, orientation))

            cells = build_grid(words)
            for placed in words:
                for coordinate, letter in placed.letters():
                    self.assertEqual(cells[coordinate].letter, letter)
                    self.assertTrue(any(w is placed for w in cells[coordinate].words))


class BoundsTests(unittest.TestCase):
    def test_example_bounds(self) -> None:
        grid = LevelGrid.from_text(EXAMPLE_LETTERS, EXAMPLE_WORDS)
        self.assertEqual(grid.bounds, Bounds(width=3, height=3))

    def test_bounds_account_for_anchor_offsets(self) -> None:
        words = [
            PlacedWord("HELLO", 2, 1, Orientation.HORIZONTAL),
            PlacedWord("OK", 6, 1, Orientation.VERTICAL),
        ]
        self.assertEqual(compute_bounds(words), Bounds(width=7, height=3))


class WordBookkeepingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LevelGrid.from_text(EXAMPLE_LETTERS, EXAMPLE_WORDS)

    def test_check_word_is_case_insensitive(self) -> None:
        placed = self.grid.check_word("cat")
        assert placed is not None
        self.assertEqual(placed.word, "CAT")

    def test_check_word_skips_found_words(self) -> None:
        self.grid.mark_found("CAT")
        self.assertIsNone(self.grid.check_word("CAT"))
        self.assertTrue(self.grid.is_found("cat"))

    def test_check_word_unknown(self) -> None:
        self.assertIsNone(self.grid.check_word("XYZ"))

    def test_mark_found_is_idempotent(self) -> None:
        self.grid.mark_found("CAT")
        count = self.grid.found_count
        complete = self.grid.is_complete()
        self.grid.mark_found("cat")
        self.assertEqual(self.grid.found_count, count)
        self.assertEqual(self.grid.is_complete(), complete)

    def test_mark_found_ignores_unknown_word(self) -> None:
        self.grid.mark_found("DOG")
        self.assertEqual(self.grid.found_count, 0)
        self.assertFalse(any(w.found for w in self.grid.words))

    def test_complete_only_when_every_word_found(self) -> None:
        for word in ("CAT", "AT"):
            self.grid.mark_found(word)
            self.assertFalse(self.grid.is_complete())
        self.grid.mark_found("CAR")
        self.assertTrue(self.grid.is_complete())
        self.assertEqual((self.grid.found_count, self.grid.total_count), (3, 3))

    def test_mark_placed_targets_the_exact_placement(self) -> None:
        grid = LevelGrid.from_text("C,A,T", "0,0,CAT,H|0,2,CAT,H")
        first, second = grid.words
        self.assertIs(grid.check_word("CAT"), first)
        grid.mark_placed(first)
        self.assertIs(grid.check_word("CAT"), second)
        grid.mark_placed(second)
        self.assertIsNone(grid.check_word("CAT"))
        self.assertEqual(grid.found_count, 2)
        self.assertTrue(grid.is_complete())

    def test_reveal_returns_letters_in_order(self) -> None:
        placed = self.grid.check_word("CAR")
        assert placed is not None
        steps = self.grid.reveal(placed)
        self.assertEqual(
            steps,
            [(Coordinate(0, 0), "C"), (Coordinate(0, 1), "A"), (Coordinate(0, 2), "R")],
        )
        self.assertTrue(self.grid.cell(0, 1).revealed)
        self.assertFalse(self.grid.cell(1, 0).revealed)
        self.assertFalse(self.grid.is_all_revealed())

    def test_letter_at(self) -> None:
        self.assertEqual(self.grid.letter_at(2, 0), "T")
        self.assertEqual(self.grid.letter_at(1, 1), "T")
        self.assertIsNone(self.grid.letter_at(2, 2))

    def test_malformed_level_is_not_built(self) -> None:
        with self.assertRaises(MalformedLevelError):
            LevelGrid.from_text(EXAMPLE_LETTERS, "0,0,CAT")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

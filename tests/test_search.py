import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

from main import build_parser, main
from wordsearch.core.constants import Axis, DEFAULT_MIN_LETTERS
from wordsearch.core.exceptions import LoadError
from wordsearch.core.models import Match
from wordsearch.data.lexicon import Lexicon
from wordsearch.engine.grid import LetterGrid
from wordsearch.engine.search import SearchConfig, WordSearch


PUZZLE = "3 4\nC A T S\nO Q X R\nW M N E\n"
WORDS = "axe\ncat\ncats\ncow\nzebra\n"


class WordSearchTests(unittest.TestCase):
    def test_injected_inputs_skip_loading(self) -> None:
        config = SearchConfig(dictionary_path="unused", puzzle_path="unused", min_length=3)
        search = WordSearch(
            config,
            lexicon=Lexicon.build(["cat", "cow", "axe"]),
            grid=LetterGrid.from_strings(["cats", "oqxr", "wmne"]),
        )

        result = search.run()

        self.assertEqual([m.word for m in result.matches], ["axe", "cat", "cow"])
        self.assertEqual(result.min_length, 3)
        self.assertGreaterEqual(result.elapsed_seconds, 0.0)

    def test_memory_tracking_reports_peak(self) -> None:
        config = SearchConfig(dictionary_path="unused", puzzle_path="unused", min_length=3, track_memory=True)
        search = WordSearch(config, lexicon=Lexicon.build(["cat"]), grid=LetterGrid.from_strings(["cat"]))

        result = search.run()

        self.assertIsNotNone(result.peak_memory_kb)
        self.assertGreaterEqual(result.peak_memory_kb, 0)

    def test_memory_not_tracked_by_default(self) -> None:
        config = SearchConfig(dictionary_path="unused", puzzle_path="unused", min_length=3)
        search = WordSearch(config, lexicon=Lexicon.build(["cat"]), grid=LetterGrid.from_strings(["cat"]))
        self.assertIsNone(search.run().peak_memory_kb)

    def test_default_min_length(self) -> None:
        config = SearchConfig(dictionary_path="d", puzzle_path="p")
        self.assertEqual(config.min_length, DEFAULT_MIN_LETTERS)

    def test_loads_from_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            puzzle = Path(tmpdir) / "puzzle.txt"
            puzzle.write_text(PUZZLE, encoding="utf-8")
            words = Path(tmpdir) / "words.txt"
            words.write_text(WORDS, encoding="utf-8")

            result = WordSearch(SearchConfig(dictionary_path=words, puzzle_path=puzzle, min_length=4)).run()

        self.assertEqual(result.matches, [Match("cats", (0, 0), (0, 3), Axis.HORIZONTAL)])

    def test_load_error_propagates(self) -> None:
        config = SearchConfig(dictionary_path="missing-words.txt", puzzle_path="missing-puzzle.txt")
        with self.assertRaises(LoadError):
            WordSearch(config, grid=MagicMock()).run()


class CliTests(unittest.TestCase):
    def test_cli_prints_sorted_report(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            puzzle = Path(tmpdir) / "puzzle.txt"
            puzzle.write_text(PUZZLE, encoding="utf-8")
            words = Path(tmpdir) / "words.txt"
            words.write_text(WORDS, encoding="utf-8")
            stdout = io.StringIO()

            with contextlib.redirect_stdout(stdout):
                status = main([str(words), str(puzzle), "3", "--workers", "2"])

        self.assertEqual(status, 0)
        lines = stdout.getvalue().splitlines()
        self.assertIn("Found 4 words with 3 letters or more", lines)
        start = lines.index("Found 4 words with 3 letters or more")
        self.assertEqual(
            lines[start + 1:start + 5],
            [
                "[B, 1 ] -> [D, 3 ] : AXE",
                "[A, 1 ] -> [C, 1 ] : CAT",
                "[A, 1 ] -> [D, 1 ] : CATS",
                "[A, 1 ] -> [A, 3 ] : COW",
            ],
        )
        self.assertTrue(lines[-1].startswith("Time taken:"))

    def test_cli_reports_missing_puzzle(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text(WORDS, encoding="utf-8")
            stderr = io.StringIO()

            with contextlib.redirect_stderr(stderr):
                status = main([str(words), str(Path(tmpdir) / "missing.txt")])

        self.assertEqual(status, 1)
        self.assertIn("error:", stderr.getvalue())

    def test_cli_prints_memory_when_requested(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            puzzle = Path(tmpdir) / "puzzle.txt"
            puzzle.write_text(PUZZLE, encoding="utf-8")
            words = Path(tmpdir) / "words.txt"
            words.write_text(WORDS, encoding="utf-8")
            stdout = io.StringIO()

            with contextlib.redirect_stdout(stdout):
                status = main([str(words), str(puzzle), "3", "--memory"])

        self.assertEqual(status, 0)
        self.assertTrue(stdout.getvalue().splitlines()[-1].startswith("Memory used: "))

    def test_cli_accepts_lowercase_log_level(self) -> None:
        args = build_parser().parse_args(["words.txt", "puzzle.txt", "--log-level", "debug"])
        self.assertEqual(args.log_level, "DEBUG")

    def test_cli_rejects_unknown_log_level(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                build_parser().parse_args(["words.txt", "puzzle.txt", "--log-level", "verbose"])

    def test_cli_rejects_negative_min_letters(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["words.txt", "puzzle.txt", "-1"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

"""
End-to-end tests for the command-line driver.
"""

import pytest
from sudoku_solver.cli import main, load_puzzles
from sudoku_solver.utils import SAMPLES, format_grid


SAMPLE_TEXT = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


class TestDefaultRun:
    """Test the no-argument run on the embedded sample."""
    
    def test_output(self, capsys):
        """Test original grid followed by the numbered solution."""
        assert main([]) == 0
        
        out = capsys.readouterr().out
        expected = (
            "The original grid:\n"
            + format_grid(SAMPLES[0])
            + "\n\nSolution number 1 :\n"
            + format_grid(SOLVED)
            + "\n"
        )
        assert out == expected
    
    def test_pretty(self, capsys):
        """Test boxed layout option."""
        assert main(['--pretty']) == 0
        
        out = capsys.readouterr().out
        assert '+-------+-------+-------+' in out
        assert '| 5 3 4 | 6 7 8 | 9 1 2 |' in out


class TestPuzzleOptions:
    """Test puzzle sources and limits."""
    
    def test_puzzle_string(self, capsys):
        """Test puzzle given on the command line."""
        assert main(['--puzzle', SAMPLE_TEXT]) == 0
        
        out = capsys.readouterr().out
        assert "Solution number 1 :" in out
        assert "Solution number 2 :" not in out
    
    def test_limit(self, capsys):
        """Test limit bounds an ambiguous puzzle."""
        assert main(['--puzzle', '0' * 81, '--limit', '2']) == 0
        
        out = capsys.readouterr().out
        assert "Solution number 2 :" in out
        assert "Solution number 3 :" not in out
    
    def test_no_solution(self, capsys):
        """Test unsolvable puzzle is reported, not failed."""
        puzzle = "012345678" + "0" * 18 + "9" + "0" * 53
        
        assert main(['--puzzle', puzzle]) == 0
        assert "No solution found." in capsys.readouterr().out
    
    def test_file(self, tmp_path, capsys):
        """Test one puzzle per line with comments."""
        path = tmp_path / "puzzles.txt"
        path.write_text("# sample\n" + SAMPLE_TEXT + "\n\n" + "0" * 81 + "\n")
        
        assert load_puzzles(str(path)) == [SAMPLE_TEXT, "0" * 81]
        assert main(['--file', str(path), '--limit', '1']) == 0
        
        out = capsys.readouterr().out
        assert "Puzzle 1" in out
        assert "Puzzle 2" in out
        assert out.count("Solution number 1 :") == 2


class TestErrors:
    """Test error reporting."""
    
    def test_malformed_puzzle(self, capsys):
        """Test short puzzle string exits with code 2."""
        assert main(['--puzzle', '123']) == 2
        assert "error:" in capsys.readouterr().err
    
    def test_inconsistent_puzzle(self, capsys):
        """Test clashing givens exit with code 2."""
        assert main(['--puzzle', '55' + '0' * 79]) == 2
        assert "Inconsistent grid" in capsys.readouterr().err
    
    def test_missing_file(self, tmp_path, capsys):
        """Test unreadable puzzle file."""
        assert main(['--file', str(tmp_path / "missing.txt")]) == 2
        assert "error:" in capsys.readouterr().err
    
    def test_bad_limit(self):
        """Test non-positive limit is a usage error."""
        with pytest.raises(SystemExit) as info:
            main(['--limit', '0'])
        assert info.value.code == 2
    
    def test_unknown_sample(self):
        """Test sample index outside the embedded set."""
        with pytest.raises(SystemExit):
            main(['--sample', str(len(SAMPLES))])

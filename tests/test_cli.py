import os
import sys

import pytest

# Add the repository root to path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from huffman_cli import main


def test_encode_source_text(capsys):
	assert main(["encode", "-t", "aab"]) == 0
	assert capsys.readouterr().out == "110\n"


def test_encode_message(capsys):
	assert main(["encode", "-t", "aab", "--message", "ba#"]) == 0
	assert capsys.readouterr().out == "01\n"


def test_decode(capsys):
	assert main(["decode", "-t", "aab", "110"]) == 0
	assert capsys.readouterr().out == "aab\n"


def test_source_file(tmp_path, capsys):
	src = tmp_path / "source.txt"
	src.write_text("aabbc", encoding="utf-8")
	assert main(["encode", "-s", str(src), "--message", "cab"]) == 0
	assert capsys.readouterr().out == "10110\n"


def test_table(capsys):
	assert main(["table", "-t", "aabbc"]) == 0
	out = capsys.readouterr().out
	lines = out.splitlines()
	assert lines[1].split() == ["'b'", "2", "0"]
	assert "Weighted path length: 8 bits" in out
	assert "Average code length: 1.6000" in out


def test_table_single_symbol(capsys):
	assert main(["table", "-t", "zzz"]) == 0
	assert "(empty)" in capsys.readouterr().out


def test_empty_alphabet_error(capsys):
	assert main(["encode", "-t", "###"]) == 1
	assert "ERROR" in capsys.readouterr().err


def test_degenerate_decode_error(capsys):
	assert main(["decode", "-t", "aaaa", "01"]) == 1
	assert "single-leaf" in capsys.readouterr().err


def test_strict_flags(capsys):
	assert main(["encode", "-t", "ab", "--message", "a#", "--strict-encode"]) == 1
	assert main(["decode", "-t", "ab", "0x", "--strict-decode"]) == 1
	err = capsys.readouterr().err
	assert "'#'" in err
	assert "'x'" in err


def test_bad_alphabet(capsys):
	assert main(["encode", "-t", "ab", "--alphabet", "aa"]) == 1
	assert "duplicated" in capsys.readouterr().err


def test_verbose_flag(capsys):
	assert main(["-v", "encode", "-t", "ab", "--message", "a#"]) == 0
	assert capsys.readouterr().out == "0\n"


def test_source_required():
	with pytest.raises(SystemExit):
		main(["encode"])

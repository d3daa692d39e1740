import pytest

from presentfit.solver import main, read_input, solve, solve_pt1, solve_pt2

SAMPLE = "0:\n###\n###\n###\n\n3x3: 1\n3x4: 1\n3x3: 0\n"


def test_solve_pt1_counts_passing_trees(capsys):
    assert solve_pt1(SAMPLE) == 2
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Tree FAIL", "Tree PASS", "Tree PASS"]


def test_printed_passes_match_count(capsys):
    text = "0:\n#..\n...\n...\n\n1:\n###\n###\n###\n\n3x3: 0 1\n3x3: 9 0\n4x4: 2 1\n"
    result = solve_pt1(text)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines.count("Tree PASS") == result


def test_solve_pt2_is_zero():
    assert solve_pt2(SAMPLE) == 0


def test_solve_combines_parts(capsys):
    part_1, part_2 = solve(SAMPLE)
    capsys.readouterr()
    assert part_1 == solve_pt1(SAMPLE)
    assert part_2 == solve_pt2(SAMPLE)


def test_no_trees_gives_zero():
    assert solve_pt1("0:\n###\n###\n###\n\n") == 0


def test_missing_present_section_raises():
    with pytest.raises(ValueError):
        solve_pt1("3x3: 1\n")


def test_read_input_round_trip(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert read_input(path) == SAMPLE
    assert read_input(str(path)) == SAMPLE


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(tmp_path / "absent.txt")


def test_main_prints_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    expected = solve_pt1(SAMPLE)
    capsys.readouterr()
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert f"Part 1: {expected}" in lines
    assert "Part 2: 0" in lines
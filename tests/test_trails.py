import io
import random
import sys

import pytest

from contestsolver.trails import MOD, count_routes, count_routes_memo, main


def test_single_trail_in_range():
    assert count_routes(3, 1, 10, [5], []) == 1
    assert count_routes_memo(3, 1, 10, [5], []) == 1


def test_nothing_in_range():
    assert count_routes(3, 100, 200, [5], [6]) == 0
    assert count_routes_memo(3, 100, 200, [5], [6]) == 0


def test_empty_range():
    assert count_routes(1, 10, 5, [1, 2], [3]) == 0
    assert count_routes_memo(1, 10, 5, [1, 2], [3]) == 0


def test_one_trail_each_side():
    # [3], [4], [3, 4] and [4, 3]
    assert count_routes(2, 0, 100, [3], [4]) == 4
    assert count_routes_memo(2, 0, 100, [3], [4]) == 4


def test_solvers_agree_on_random_inputs():
    rng = random.Random(42)
    for _ in range(200):
        east = [rng.randint(1, 6) for _ in range(rng.randint(0, 4))]
        west = [rng.randint(1, 6) for _ in range(rng.randint(0, 4))]
        x = rng.randint(0, 3)
        low = rng.randint(0, 15)
        high = low + rng.randint(0, 20)
        assert count_routes(x, low, high, east, west) == count_routes_memo(
            x, low, high, east, west
        )


def test_widening_range_never_decreases_count():
    rng = random.Random(7)
    for _ in range(100):
        east = [rng.randint(1, 5) for _ in range(rng.randint(1, 4))]
        west = [rng.randint(1, 5) for _ in range(rng.randint(1, 4))]
        x = rng.randint(0, 2)
        low = rng.randint(0, 10)
        high = low + rng.randint(0, 10)
        narrow = count_routes_memo(x, low, high, east, west)
        wide = count_routes_memo(x, max(0, low - 3), high + 5, east, west)
        assert narrow <= wide < MOD


def test_main_methods_match(monkeypatch, capsys):
    data = "2\n1 1 2 0 100\n3\n4\n1 0 3 1 10\n5\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(data))
    assert main([]) == 0
    memo_out = capsys.readouterr().out.split()
    monkeypatch.setattr(sys, "stdin", io.StringIO(data))
    assert main(["--method", "bfs"]) == 0
    bfs_out = capsys.readouterr().out.split()
    assert memo_out == bfs_out == ["4", "1"]


def test_main_truncated_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n2 1 0 0 5\n1\n"))
    with pytest.raises(ValueError):
        main([])
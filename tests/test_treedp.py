import io
import sys

import pytest

from contestsolver.treedp import TreeDP, main, max_selection


def test_single_node_taken():
    assert max_selection([5], [0]) == 5


def test_single_negative_node_skipped():
    assert max_selection([-5], [0]) == 0


def test_chain_of_two_prefers_child():
    assert max_selection([1, 2], [0, 1]) == 2


def test_root_taken_when_better():
    assert TreeDP([10, 2], [0, 1]).solve() == 10


def test_child_forced_when_skipping_root():
    # Root is worse than a forced child, so the child is taken despite being negative.
    assert max_selection([-100, -3], [0, 1]) == -3


def test_long_chain_does_not_overflow_stack():
    n = 5001
    parents = [0] + list(range(1, n))
    assert max_selection([1] * n, parents) == 2501


def test_shuffled_labels_give_same_answer():
    values = [3, 1, 4, 1, 5]
    parents = [0, 1, 1, 2, 2]
    relabel = [4, 2, 0, 1, 3]  # old index -> new index
    new_values = [0] * 5
    new_parents = [0] * 5
    for old, new in enumerate(relabel):
        new_values[new] = values[old]
        new_parents[new] = 0 if parents[old] == 0 else relabel[parents[old] - 1] + 1
    assert max_selection(values, parents) == max_selection(new_values, new_parents)


def test_missing_root_rejected():
    with pytest.raises(ValueError):
        TreeDP([1, 2], [2, 1])


def test_bad_parent_rejected():
    with pytest.raises(ValueError):
        TreeDP([1, 2], [0, 7])


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        TreeDP([1, 2], [0])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n2\n1 2\n0 1\n1\n5\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["2", "5"]
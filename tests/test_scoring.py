from proximity_sort.config import ScoringMode
from proximity_sort.scoring import get_scorer, leading_matches, score


def test_score_rewards_shared_prefix():
    ref = [b"bar", b"main.txt"]
    assert score([b"bar", b"main.txt"], ref) == 2
    assert score([b"bar", b"test.txt"], ref) == 0
    assert score([b"test.txt"], ref) == -1
    assert score([b"misc", b"test.txt"], ref) == -2


def test_score_penalises_depth_after_divergence():
    ref = [b"a", b"b", b"c"]
    assert score([b"a", b"x", b"y", b"z"], ref) == -2
    assert score([b"a", b"b", b"c", b"d"], ref) == 2


def test_score_identical_equals_reference_length():
    ref = [b"foobar", b"controller", b"admin.rb"]
    assert score(list(ref), ref) == len(ref)


def test_score_unrelated_candidate_is_minus_length():
    assert score([b"x", b"y", b"z"], [b"a", b"b"]) == -3


def test_score_empty_inputs():
    assert score([], []) == 0
    assert score([], [b"a"]) == 0
    assert score([b"a", b"b"], []) == -2


def test_score_is_deterministic():
    cand, ref = [b"a", b"q"], [b"a", b"b"]
    assert score(cand, ref) == score(cand, ref)
    assert cand == [b"a", b"q"]
    assert ref == [b"a", b"b"]


def test_leading_matches_counts_prefix_only():
    ref = [b"a", b"b", b"c"]
    assert leading_matches([b"a", b"b", b"x", b"c"], ref) == 2
    assert leading_matches([b"x", b"b", b"c"], ref) == 0
    assert leading_matches([], ref) == 0


def test_get_scorer_by_mode():
    assert get_scorer(ScoringMode.PROXIMITY) is score
    assert get_scorer("prefix") is leading_matches

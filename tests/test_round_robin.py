"""Tests for the 1v1 circle-method schedule."""

from collections import Counter, defaultdict

import pytest

from league.models import Competitor
from league.round_robin import generate_round_robin


def make_competitors(n):
    return [Competitor(id=f"p{i}", name=f"Player {i}") for i in range(n)]


def pair_counts(matches):
    return Counter(
        frozenset((m.home.competitor_ids[0], m.away.competitor_ids[0])) for m in matches
    )


class TestSingleRound:

    @pytest.mark.parametrize("n", range(2, 11))
    def test_match_count(self, n):
        matches = generate_round_robin(make_competitors(n), double_round=False)
        assert len(matches) == n * (n - 1) // 2

    @pytest.mark.parametrize("n", range(2, 11))
    def test_round_count(self, n):
        """Even rosters need n-1 rounds, odd rosters n (one bye per round)."""
        matches = generate_round_robin(make_competitors(n), double_round=False)
        rounds = {m.round for m in matches}
        expected = n - 1 if n % 2 == 0 else n
        assert rounds == set(range(1, expected + 1))

    @pytest.mark.parametrize("n", range(2, 11))
    def test_every_pair_meets_once(self, n):
        competitors = make_competitors(n)
        counts = pair_counts(generate_round_robin(competitors, double_round=False))
        assert len(counts) == n * (n - 1) // 2
        assert set(counts.values()) == {1}

    @pytest.mark.parametrize("n", [5, 6, 7])
    def test_nobody_plays_twice_in_a_round(self, n):
        by_round = defaultdict(list)
        for m in generate_round_robin(make_competitors(n), double_round=False):
            by_round[m.round] += m.home.competitor_ids + m.away.competitor_ids
        for ids in by_round.values():
            assert len(ids) == len(set(ids))

    def test_four_competitors_example(self):
        competitors = [Competitor(id=x, name=x) for x in "ABCD"]
        matches = generate_round_robin(competitors, double_round=False)
        assert len(matches) == 6
        assert {m.round for m in matches} == {1, 2, 3}
        assert set(pair_counts(matches)) == {
            frozenset(p) for p in ["AB", "AC", "AD", "BC", "BD", "CD"]
        }

    def test_home_alternates_by_round(self):
        """Natural order on odd-numbered rounds, swapped on even-numbered ones."""
        competitors = [Competitor(id=x, name=x) for x in "ABCD"]
        matches = generate_round_robin(competitors, double_round=False)
        assert [
            (m.round, m.home.competitor_ids[0], m.away.competitor_ids[0]) for m in matches
        ] == [
            (1, "A", "D"), (1, "B", "C"),
            (2, "C", "A"), (2, "B", "D"),
            (3, "A", "B"), (3, "C", "D"),
        ]

    def test_bye_never_scheduled(self):
        competitors = make_competitors(5)
        ids = {c.id for c in competitors}
        for m in generate_round_robin(competitors, double_round=False):
            assert m.home.competitor_ids[0] in ids
            assert m.away.competitor_ids[0] in ids

    def test_fresh_matches_are_unscored(self):
        for m in generate_round_robin(make_competitors(4), double_round=False):
            assert m.home.score is None and m.away.score is None
            assert not m.is_completed
            assert not m.home.is_ghost and not m.away.is_ghost


class TestDoubleRound:

    @pytest.mark.parametrize("n", range(2, 10))
    def test_doubles_matches_and_rounds(self, n):
        competitors = make_competitors(n)
        single = generate_round_robin(competitors, double_round=False)
        double = generate_round_robin(competitors, double_round=True)
        assert len(double) == 2 * len(single)
        assert len({m.round for m in double}) == 2 * len({m.round for m in single})

    @pytest.mark.parametrize("n", range(2, 10))
    def test_home_and_away_reversed(self, n):
        """Each pair plays once at home and once away."""
        matches = generate_round_robin(make_competitors(n), double_round=True)
        directed = Counter(
            (m.home.competitor_ids[0], m.away.competitor_ids[0]) for m in matches
        )
        assert set(directed.values()) == {1}
        for home, away in directed:
            assert (away, home) in directed

    def test_two_competitors(self):
        competitors = make_competitors(2)
        assert len(generate_round_robin(competitors, double_round=False)) == 1
        matches = generate_round_robin(competitors, double_round=True)
        assert len(matches) == 2
        assert matches[0].home.competitor_ids == matches[1].away.competitor_ids


class TestDegenerate:

    @pytest.mark.parametrize("n", [0, 1])
    def test_too_few_competitors(self, n):
        assert generate_round_robin(make_competitors(n), double_round=False) == []
        assert generate_round_robin(make_competitors(n), double_round=True) == []

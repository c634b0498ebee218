"""Shared test helpers and fixtures."""

import pytest

from ballot.models import Placement
from ballot.register import BallotRegister


def make_register(candidates: list[str], votes: list[tuple[str, str]] = ()) -> BallotRegister:
    """Build a BallotRegister from candidate names and (voter, candidate) votes.

    Args:
        candidates: Candidate names, in registration order
        votes: (voter, candidate) pairs, cast in order

    Returns:
        BallotRegister with all candidates registered and all votes cast.
    """
    register = BallotRegister()
    for name in candidates:
        register.register_candidate(name)
    for voter, candidate in votes:
        register.cast_vote(voter, candidate)
    return register


def standing_names(standings: list[Placement]) -> list[str]:
    """Extract candidate names from standings, in order."""
    return [p.name for p in standings]


@pytest.fixture
def empty_register():
    return BallotRegister()


@pytest.fixture
def three_way():
    """Candidates A, B, C; A leads with 2 votes, B and C have 1 each."""
    return make_register(
        ["A", "B", "C"],
        [("V1", "A"), ("V2", "B"), ("V3", "C"), ("V4", "A")],
    )


@pytest.fixture
def tied_pair():
    """Candidates A, B with one vote each."""
    return make_register(["A", "B"], [("V1", "A"), ("V2", "B")])

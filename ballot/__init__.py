"""Ballot register: candidate registration, one vote per voter, tallies."""

from .errors import (
    AlreadyVoted,
    CandidateAlreadyExists,
    CandidateNotFound,
    NotAuthorized,
    NoVoteRecorded,
    RegisterError,
)
from .models import Candidate, Placement
from .register import BallotRegister

__all__ = [
    "AlreadyVoted",
    "BallotRegister",
    "Candidate",
    "CandidateAlreadyExists",
    "CandidateNotFound",
    "NoVoteRecorded",
    "NotAuthorized",
    "Placement",
    "RegisterError",
]

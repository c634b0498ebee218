"""In-memory register of candidates, votes and voters."""

import logging
from typing import Any

from ballot.errors import (
    AlreadyVoted,
    CandidateAlreadyExists,
    CandidateNotFound,
    NoVoteRecorded,
)
from ballot.models import Candidate, Placement

logger = logging.getLogger(__name__)


class BallotRegister:
    """Register of candidates and the voters who have voted for them.

    Candidates are appended in registration order and never removed; each
    voter may vote exactly once. The register does not record which candidate
    a voter chose, only that they have voted.

    Calls are synchronous and unsynchronized: callers sharing a register
    between threads must serialize register_candidate and cast_vote
    themselves.

    Example:
        >>> register = BallotRegister()
        >>> register.register_candidate("A")
        >>> register.register_candidate("B")
        >>> register.cast_vote("V1", "B")
        >>> register.get_votes("B")
        1
        >>> register.get_winner()
        'B'
    """

    def __init__(self) -> None:
        # dict insertion order is registration order
        self._candidates: dict[str, Candidate] = {}
        self._voters: set[str] = set()

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, name: object) -> bool:
        return name in self._candidates

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(candidates={self.num_candidates}, "
            f"voters={self.num_voters})"
        )

    @property
    def candidates(self) -> list[str]:
        """Candidate names in registration order."""
        return list(self._candidates)

    @property
    def num_candidates(self) -> int:
        return len(self._candidates)

    @property
    def num_voters(self) -> int:
        return len(self._voters)

    @property
    def total_votes(self) -> int:
        return sum(c.votes for c in self._candidates.values())

    def register_candidate(self, name: str) -> None:
        """Add a candidate with no votes at the end of the register.

        Raises:
            CandidateAlreadyExists: If a candidate with this name is registered
        """
        if name in self._candidates:
            logger.info("Rejected registration of %r: already registered", name)
            raise CandidateAlreadyExists(name)
        self._candidates[name] = Candidate(name=name)
        logger.debug("Registered candidate %r", name)

    def cast_vote(self, voter: str, candidate: str) -> None:
        """Record one vote by voter for candidate.

        The voter check comes first, so a repeat voter is rejected even when
        naming an unregistered candidate. A rejected call changes nothing.

        Raises:
            AlreadyVoted: If this voter has already voted
            CandidateNotFound: If the candidate is not registered
        """
        if voter in self._voters:
            logger.info("Rejected vote by %r: already voted", voter)
            raise AlreadyVoted(voter)
        entry = self._candidates.get(candidate)
        if entry is None:
            logger.info("Rejected vote by %r: candidate %r not found", voter, candidate)
            raise CandidateNotFound(candidate)
        entry.votes += 1
        self._voters.add(voter)
        logger.debug("Recorded vote by %r for %r", voter, candidate)

    def has_voted(self, voter: str) -> bool:
        return voter in self._voters

    def get_votes(self, candidate: str) -> int:
        """Get the current vote count for a candidate.

        Raises:
            CandidateNotFound: If the candidate is not registered
        """
        try:
            return self._candidates[candidate].votes
        except KeyError:
            raise CandidateNotFound(candidate) from None

    def get_winner(self) -> str:
        """Get the name of the candidate with the most votes.

        Ties go to the earliest-registered candidate, so a register where
        nobody has voted yet returns its first candidate.

        Raises:
            NoVoteRecorded: If no candidates are registered
        """
        if not self._candidates:
            raise NoVoteRecorded()
        # max() keeps the first of equal maxima
        winner = max(self._candidates.values(), key=lambda c: c.votes)
        return winner.name

    def tallies(self) -> dict[str, int]:
        """Return a copy of name -> vote count, in registration order."""
        return {name: c.votes for name, c in self._candidates.items()}

    def standings(self) -> list[Placement]:
        """Rank candidates by votes, highest first."""
        return Placement.build_ranking(list(self._candidates.values()))

    def standing(self, candidate: str) -> Placement:
        """Get a single candidate's placement in the standings.

        Raises:
            CandidateNotFound: If the candidate is not registered
        """
        if candidate not in self._candidates:
            raise CandidateNotFound(candidate)
        return next(p for p in self.standings() if p.name == candidate)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "candidates": [c.to_dict() for c in self._candidates.values()],
            "num_voters": self.num_voters,
            "total_votes": self.total_votes,
            "winner": self.get_winner() if self._candidates else None,
            "standings": [p.to_dict() for p in self.standings()],
        }

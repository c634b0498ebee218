"""Core data models for candidates and standings."""

from dataclasses import dataclass
from typing import Any, Self


@dataclass
class Candidate:
    """A candidate entry in a ballot register.

    Attributes:
        name: Candidate identifier, unique within a register
        votes: Number of accepted votes for this candidate
    """
    name: str
    votes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "votes": self.votes}


@dataclass
class Placement:
    """A candidate's placement in the standings.

    Attributes:
        name: Candidate identifier
        votes: Vote count at the time the standings were built
        rank: 1-indexed placement (tied candidates share the same rank)
        tied: Whether this candidate is tied with others at this rank
    """
    name: str
    votes: int
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "votes": self.votes,
            "rank": self.rank,
            "tied": self.tied,
        }

    @classmethod
    def build_ranking(cls, candidates: list[Candidate]) -> list[Self]:
        """Build a list of Placements from candidates in registration order.

        Candidates are ordered by votes (highest first). Candidates with equal
        votes keep their registration order, share a rank and are flagged as
        tied; the following rank skips past them.

        Example:
            >>> ranking = Placement.build_ranking([
            ...     Candidate("A", 1), Candidate("B", 3), Candidate("C", 1),
            ... ])
            >>> [(p.name, p.rank, p.tied) for p in ranking]
            [('B', 1, False), ('A', 2, True), ('C', 2, True)]
        """
        # Group by vote count, preserving registration order within a group
        vote_groups: dict[int, list[str]] = {}
        for candidate in candidates:
            vote_groups.setdefault(candidate.votes, []).append(candidate.name)

        placements = []
        rank = 1
        for votes in sorted(vote_groups.keys(), reverse=True):
            group = vote_groups[votes]
            tied = len(group) > 1
            for name in group:
                placements.append(cls(name=name, votes=votes, rank=rank, tied=tied))
            rank += len(group)

        return placements

"""Authorization checks layered on top of a ballot register."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from ballot.errors import NotAuthorized
from ballot.register import BallotRegister

logger = logging.getLogger(__name__)


class VoterAuthorizer(ABC):
    """Abstract base class for deciding who may vote.

    Implementations plug into AuthorizedRegister, which raises NotAuthorized
    for any voter they reject. The register itself never consults one.
    """

    @abstractmethod
    def is_authorized(self, voter: str) -> bool:
        """Check whether the voter may cast a vote.

        Args:
            voter: Voter identifier as passed to cast_vote

        Returns:
            True if the voter may vote, False otherwise
        """
        pass


class AllowListAuthorizer(VoterAuthorizer):
    """Authorizes exactly the voters on a fixed list."""

    def __init__(self, voters: Iterable[str]):
        self.voters = frozenset(voters)

    def is_authorized(self, voter: str) -> bool:
        return voter in self.voters


class AuthorizedRegister:
    """A BallotRegister whose votes are filtered through a VoterAuthorizer.

    Authorization is checked before the register's own checks, so an
    unauthorized voter gets NotAuthorized whether or not they have voted or
    name a registered candidate. Registration and queries go straight to the
wrapped register, which stays available as the register attribute for the
reporting calls not mirrored here.
    """

    def __init__(self, register: BallotRegister, authorizer: VoterAuthorizer):
        self.register = register
        self.authorizer = authorizer

    def cast_vote(self, voter: str, candidate: str) -> None:
        """Record a vote if the authorizer accepts the voter.

        Raises:
            NotAuthorized: If the authorizer rejects the voter
            AlreadyVoted: If this voter has already voted
            CandidateNotFound: If the candidate is not registered
        """
        if not self.authorizer.is_authorized(voter):
            logger.info("Rejected vote by %r: not authorized", voter)
            raise NotAuthorized(voter)
        self.register.cast_vote(voter, candidate)

    def register_candidate(self, name: str) -> None:
        self.register.register_candidate(name)

    def get_votes(self, candidate: str) -> int:
        return self.register.get_votes(candidate)

    def get_winner(self) -> str:
        return self.register.get_winner()

    def has_voted(self, voter: str) -> bool:
        return self.register.has_voted(voter)

    def __len__(self) -> int:
        return len(self.register)

    def __contains__(self, name: object) -> bool:
        return name in self.register

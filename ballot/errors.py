"""Failures raised by the ballot register."""


class RegisterError(Exception):
    """Base class for every precondition a register call can violate."""
    pass


class CandidateAlreadyExists(RegisterError):
    """Raised when registering a name that is already in the register."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Candidate {name!r} is already registered")


class CandidateNotFound(RegisterError):
    """Raised when looking up or voting for an unregistered candidate."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Candidate {name!r} is not registered")


class NotAuthorized(RegisterError):
    """Raised by integrator-supplied authorization checks.

    The register itself never raises this; see ballot.guard.
    """

    def __init__(self, voter: str):
        self.voter = voter
        super().__init__(f"Voter {voter!r} is not authorized to vote")


class AlreadyVoted(RegisterError):
    """Raised when a voter who has already voted tries to vote again."""

    def __init__(self, voter: str):
        self.voter = voter
        super().__init__(f"Voter {voter!r} has already voted")


class NoVoteRecorded(RegisterError):
    """Raised when asking for a winner of a register with no candidates."""

    def __init__(self):
        super().__init__("No candidates are registered, so there is no winner")

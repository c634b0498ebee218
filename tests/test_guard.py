"""Tests for authorization checks on top of a register."""

import pytest
from tests.conftest import make_register

from ballot.errors import AlreadyVoted, CandidateNotFound, NotAuthorized
from ballot.guard import AllowListAuthorizer, AuthorizedRegister, VoterAuthorizer


class TestAllowListAuthorizer:
    def test_listed_voter(self):
        assert AllowListAuthorizer(["V1", "V2"]).is_authorized("V1")

    def test_unlisted_voter(self):
        assert not AllowListAuthorizer(["V1", "V2"]).is_authorized("V3")

    def test_accepts_any_iterable(self):
        authorizer = AllowListAuthorizer(v for v in ["V1"])
        assert authorizer.is_authorized("V1")


class TestAuthorizedRegister:
    def setup_method(self):
        self.inner = make_register(["A", "B"])
        self.register = AuthorizedRegister(self.inner, AllowListAuthorizer(["V1", "V2"]))

    def test_authorized_vote(self):
        self.register.cast_vote("V1", "A")
        assert self.register.get_votes("A") == 1
        assert self.inner.has_voted("V1")

    def test_unauthorized_vote(self):
        with pytest.raises(NotAuthorized) as exc_info:
            self.register.cast_vote("Mallory", "A")
        assert exc_info.value.voter == "Mallory"
        assert self.inner.tallies() == {"A": 0, "B": 0}
        assert not self.inner.has_voted("Mallory")

    def test_unauthorized_checked_first(self):
        with pytest.raises(NotAuthorized):
            self.register.cast_vote("Mallory", "Nobody")

    def test_register_checks_still_apply(self):
        self.register.cast_vote("V1", "A")
        with pytest.raises(AlreadyVoted):
            self.register.cast_vote("V1", "B")
        with pytest.raises(CandidateNotFound):
            self.register.cast_vote("V2", "Nobody")

    def test_register_candidate_and_winner(self):
        self.register.register_candidate("C")
        self.register.cast_vote("V2", "C")
        assert "C" in self.register
        assert len(self.register) == 3
        assert self.register.get_winner() == "C"

    def test_custom_authorizer(self):
        class EvenVoters(VoterAuthorizer):
            def is_authorized(self, voter):
                return int(voter[1:]) % 2 == 0

        register = AuthorizedRegister(make_register(["A"]), EvenVoters())
        register.cast_vote("V2", "A")
        with pytest.raises(NotAuthorized):
            register.cast_vote("V3", "A")
        assert register.get_votes("A") == 1

    def test_authorizer_is_abstract(self):
        with pytest.raises(TypeError):
            VoterAuthorizer()

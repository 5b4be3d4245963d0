"""
Unit tests for nonce generation and matching.
"""

import pytest

from huissier.domain.services import NonceChallenge, build_challenge_message


class TestNonceChallenge:
    def test_generate_is_decimal_string_in_range(self):
        challenge = NonceChallenge()

        for _ in range(200):
            nonce = challenge.generate()
            assert nonce.isdigit()
            assert 0 <= int(nonce) < 1_000_000

    def test_generate_respects_upper_bound(self):
        challenge = NonceChallenge(upper_bound=3)

        seen = {challenge.generate() for _ in range(200)}

        assert seen <= {"0", "1", "2"}

    def test_upper_bound_must_leave_room_for_rotation(self):
        with pytest.raises(ValueError):
            NonceChallenge(upper_bound=1)

    def test_matches_exact_value_only(self):
        assert NonceChallenge.matches("123456", "123456")
        assert not NonceChallenge.matches("123456", "123457")
        assert not NonceChallenge.matches("123456", " 123456")
        assert not NonceChallenge.matches("123456", "")

    def test_matches_rejects_non_string(self):
        assert not NonceChallenge.matches("42", 42)


def test_challenge_message_is_exact():
    assert (
        build_challenge_message("987654")
        == "Sign this message to authenticate with our application: 987654"
    )

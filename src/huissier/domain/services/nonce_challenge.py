"""
Nonce challenge - generation and matching of per-user challenge values.
"""

import hmac
import secrets

CHALLENGE_PREFIX = "Sign this message to authenticate with our application: "
DEFAULT_NONCE_UPPER_BOUND = 1_000_000


def build_challenge_message(nonce: str) -> str:
    """Return the exact text the wallet is expected to have signed."""
    return f"{CHALLENGE_PREFIX}{nonce}"


class NonceChallenge:
    """
    Issues numeric nonces and checks supplied ones.

    Nonces are drawn uniformly from [0, upper_bound) with the secrets
    module and rendered as plain decimal strings.
    """

    def __init__(self, upper_bound: int = DEFAULT_NONCE_UPPER_BOUND):
        if upper_bound < 2:
            raise ValueError("upper_bound must be at least 2")
        self.upper_bound = upper_bound

    def generate(self) -> str:
        return str(secrets.randbelow(self.upper_bound))

    @staticmethod
    def matches(stored: str, supplied: str) -> bool:
        """Exact comparison, no normalization."""
        if not isinstance(supplied, str):
            return False
        return hmac.compare_digest(stored.encode("utf-8"), supplied.encode("utf-8"))

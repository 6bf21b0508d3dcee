"""
Password generator for walkpwd.

Draws characters uniformly from a pool built from the enabled character
classes using the secrets module. Generation is non-strict: a password is
not guaranteed to contain a character from every enabled class.
"""

import logging
import secrets
import string
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 12

NUMBERS = string.digits
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
SYMBOLS = string.punctuation

# Characters that are easily confused with one another
SIMILAR_CHARACTERS = frozenset("iI1loO0\"'`|")


class GenerationError(Exception):
    """The requested policy cannot produce a password."""

    pass


@dataclass
class PasswordPolicy:
    """Character-class policy for generated passwords."""

    length: int = DEFAULT_LENGTH
    numbers: bool = True
    lowercase: bool = True
    uppercase: bool = True
    symbols: bool = False
    exclude_similar: bool = True

    def build_pool(self) -> str:
        """
        Build the character pool for this policy.

        Returns:
            Every allowed character, in a stable order.
        """
        pool = ""
        if self.numbers:
            pool += NUMBERS
        if self.lowercase:
            pool += LOWERCASE
        if self.uppercase:
            pool += UPPERCASE
        if self.symbols:
            pool += SYMBOLS

        if self.exclude_similar:
            pool = "".join(c for c in pool if c not in SIMILAR_CHARACTERS)

        return pool


class PasswordGenerator:
    """Generates random passwords under a PasswordPolicy."""

    def __init__(self, policy: PasswordPolicy | None = None):
        self.policy = policy or PasswordPolicy()

    def generate(self) -> str:
        """
        Generate one password.

        Raises:
            GenerationError: If the length is below 1 or the pool is empty.
        """
        if self.policy.length < 1:
            raise GenerationError("The length of passwords cannot be 0.")

        pool = self.policy.build_pool()
        if not pool:
            raise GenerationError("No character classes are enabled.")

        logger.debug(
            f"Generating password of length {self.policy.length} from {len(pool)} characters"
        )
        return "".join(secrets.choice(pool) for _ in range(self.policy.length))


def generate_password(length: int | None = None, use_symbols: bool = False) -> str:
    """
    Generate a password with digits and mixed-case letters.

    Args:
        length: Password length. Defaults to 12.
        use_symbols: Also draw from punctuation symbols.

    Returns:
        The generated password.

    Raises:
        GenerationError: If the length is below 1.
    """
    policy = PasswordPolicy(
        length=DEFAULT_LENGTH if length is None else length,
        symbols=use_symbols,
    )
    return PasswordGenerator(policy).generate()

"""Short code generation utilities."""

import random
import string
import time
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    CODE_LENGTH = 6

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize short code generator.

        Args:
            rng: Optional random source (seeded from the clock if not given)
        """
        self.rng = rng or random.Random(time.time_ns())

    def generate(self) -> str:
        """Generate a random short code.

        Each of the six characters is drawn independently and uniformly from
        the base62 alphabet. Codes are not checked against the store, so a
        collision overwrites the earlier mapping.

        Returns:
            Random short code
        """
        return ''.join(self.rng.choices(self.BASE62_CHARS, k=self.CODE_LENGTH))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code has valid format (alphanumeric).

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)

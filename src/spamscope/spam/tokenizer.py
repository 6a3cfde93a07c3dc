# =============================================================================
# Email Tokenizer for Spam Classification
# =============================================================================
# Converts raw email text into the normalized words the word table is keyed
# on.
#
# Classification and feedback MUST normalize identically, otherwise a word
# learned from feedback would never be found again at lookup time. So there
# is exactly one normalization rule:
#   - split on whitespace
#   - drop every character that is not an ASCII letter or digit
#   - lowercase what's left
#   - discard tokens that end up empty
#
# "Don't!" -> "dont", "$100" -> "100", "--" -> (dropped)
# =============================================================================

import re
from collections.abc import Iterator
from dataclasses import dataclass

# Anything that isn't an ASCII letter or digit is stripped from a token
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")

# Runs of ASCII letters/digits, used to locate words inside raw text
_ALNUM_RUN = re.compile(r"[A-Za-z0-9]+")


def normalize_token(token: str) -> str:
    """
    Normalize a single token.

    Idempotent: normalizing an already-normalized token returns it unchanged.

    Args:
        token: Raw token (may contain punctuation, mixed case).

    Returns:
        The normalized token, possibly empty.
    """
    return _NON_ALNUM.sub("", token).lower()


@dataclass(frozen=True)
class TokenSpan:
    """
    A word located inside raw text.

    Attributes:
        start: Offset of the first character.
        end: Offset one past the last character.
        word: The normalized word.
    """
    start: int
    end: int
    word: str


class Tokenizer:
    """
    Converts email content into tokens for spam classification.

    Usage:
        >>> tokenizer = Tokenizer()
        >>> tokenizer.tokenize("FREE money!!! Click now")
        ['free', 'money', 'click', 'now']
    """

    def tokenize(self, text: str) -> list[str]:
        """
        Tokenize email text.

        Duplicates are kept: a word that appears twice is scored (and
        learned) twice.

        Args:
            text: Raw email text.

        Returns:
            List of normalized, non-empty tokens in text order.
        """
        tokens = []
        for raw in text.split():
            token = normalize_token(raw)
            if token:
                tokens.append(token)
        return tokens

    def normalize(self, tokens: list[str]) -> list[str]:
        """Re-normalize a token list, dropping tokens that end up empty."""
        return [t for t in (normalize_token(raw) for raw in tokens) if t]

    def spans(self, text: str) -> Iterator[TokenSpan]:
        """
        Locate every run of letters/digits in ``text``.

        Used for highlighting: unlike ``tokenize`` this splits on any
        non-alphanumeric character so offsets line up with visible words.
        """
        for match in _ALNUM_RUN.finditer(text):
            yield TokenSpan(match.start(), match.end(), match.group().lower())

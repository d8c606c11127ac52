"""
Random string generators

[Generators]
- generate_random_string: policy driven (StringOptions)
- generate_password / generate_username: preset policies
- generate_random_text: pronounceable consonant/vowel text
- short_url_generator: short url keys without early repeats
"""
import random
from typing import List, Optional

from pydantic import BaseModel, Field

# look-alike characters (I, l) are left out
UPPERCASE = "ABCDEFGHJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijkmnopqrstuvwxyz"
DIGITS = "0123456789"
NON_ALPHANUMERIC = "!@$?_-"

CHARACTER_CLASSES = (UPPERCASE, LOWERCASE, DIGITS, NON_ALPHANUMERIC)
ALL_CHARACTERS = "".join(CHARACTER_CLASSES)

CONSONANTS = "bcdfghjklmnprstvxzBDFGHJKLMNPRSTVXZ"
VOWELS = "aeiouyAEIOUY"

SHORT_URL_GROUPS = (
    "abcdefghijkmnopqrstuvwxyz",
    "ABCDFEGHJKLMNPQRSTUVWXYZ-",
    "1234567890",
)

_random = random.SystemRandom()


class StringOptions(BaseModel):
    """Random string policy"""

    required_length: int = Field(16, ge=0, description="minimum length")
    required_unique_chars: int = Field(4, ge=0, le=len(ALL_CHARACTERS),
                                       description="minimum distinct characters")
    require_digit: bool = True
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_non_alphanumeric: bool = True
    # accepted for compatibility, symbols are controlled by require_non_alphanumeric
    require_non_letter_or_digit: bool = True

    model_config = {"frozen": True}


PASSWORD_OPTIONS = StringOptions(
    required_length=16,
    required_unique_chars=8,
    require_non_alphanumeric=False,
    require_non_letter_or_digit=False,
)

USERNAME_OPTIONS = StringOptions(
    required_length=16,
    required_unique_chars=4,
    require_non_alphanumeric=False,
    require_non_letter_or_digit=False,
)


def _insert_random(chars: List[str], pool: str, rng: random.Random):
    chars.insert(rng.randint(0, len(chars)), rng.choice(pool))


def generate_random_string(options: Optional[StringOptions] = None,
                           rng: Optional[random.Random] = None) -> str:
    """
    Random string following a policy

    One character of every required class is placed first, the rest is
    padded from one randomly chosen required class until the length and the
    unique character count are both met. With no class required every
    class is eligible.
    """
    options = options or StringOptions()
    rng = rng or _random

    required = [
        pool for pool, flag in (
            (UPPERCASE, options.require_uppercase),
            (LOWERCASE, options.require_lowercase),
            (DIGITS, options.require_digit),
            (NON_ALPHANUMERIC, options.require_non_alphanumeric),
        ) if flag
    ]

    chars: List[str] = []
    for pool in required:
        _insert_random(chars, pool, rng)

    classes = required or list(CHARACTER_CLASSES)
    pool = rng.choice(classes)
    # the chosen class alone may be too small for the unique count
    for wider in ("".join(classes), ALL_CHARACTERS):
        if len(set(chars) | set(pool)) >= options.required_unique_chars:
            break
        pool = wider

    while len(chars) < options.required_length or len(set(chars)) < options.required_unique_chars:
        _insert_random(chars, pool, rng)

    return "".join(chars)


def generate_password(options: Optional[StringOptions] = None,
                      rng: Optional[random.Random] = None) -> str:
    return generate_random_string(options or PASSWORD_OPTIONS, rng)


def generate_username(options: Optional[StringOptions] = None,
                      rng: Optional[random.Random] = None) -> str:
    return generate_random_string(options or USERNAME_OPTIONS, rng)


def generate_random_text(length: int, rng: Optional[random.Random] = None) -> str:
    """Alternating consonant / vowel text of the given length"""
    rng = rng or _random
    text = []
    while len(text) < length:
        text.append(rng.choice(CONSONANTS))
        if len(text) < length:
            text.append(rng.choice(VOWELS))
    return "".join(text)


def short_url_generator(length: int = 6, rng: Optional[random.Random] = None) -> str:
    """
    Short url key

    Groups are visited in random order without repeats until all have been
    used; inside a group no character repeats until the group is exhausted.
    """
    rng = rng or _random

    groups = [list(group) for group in SHORT_URL_GROUPS]
    chars_left = [len(group) for group in groups]
    groups_order = list(range(len(groups)))
    last_group_idx = len(groups_order) - 1

    result = []
    for _ in range(length):
        order_idx = 0 if last_group_idx == 0 else rng.randint(0, last_group_idx)
        group_idx = groups_order[order_idx]
        group = groups[group_idx]

        last_char_idx = chars_left[group_idx] - 1
        char_idx = 0 if last_char_idx == 0 else rng.randint(0, last_char_idx)
        result.append(group[char_idx])

        if last_char_idx == 0:
            # group used up, start over
            chars_left[group_idx] = len(group)
        else:
            group[last_char_idx], group[char_idx] = group[char_idx], group[last_char_idx]
            chars_left[group_idx] -= 1

        if last_group_idx == 0:
            last_group_idx = len(groups_order) - 1
        else:
            groups_order[last_group_idx], groups_order[order_idx] = (
                groups_order[order_idx], groups_order[last_group_idx])
            last_group_idx -= 1

    return "".join(result)


def search_phrase_valid(search_phrase: Optional[str], length: int = 50) -> bool:
    """Non-blank search phrase of at most length characters"""
    return bool(search_phrase and search_phrase.strip()) and len(search_phrase) <= length

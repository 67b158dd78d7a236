"""
Content hasher for rule identifiers

Identifiers are derived from the canonical rule text only, so the same
style definition yields the same identifier on every machine and in every
process. The hash is 32-bit MurmurHash2 (seed 1) over the UTF-8 bytes of
the tagged canonical input, written in lowercase base 36:

    <prefix><base36 hash>-<category suffix>

Example:
    >>> identifier_hash(RuleCategory.KEYFRAMES,
    ...     "from{background-color:red;}to{background-color:blue;}")
    'xbopttm-B'
"""

from ..models.rules import RuleCategory


MURMUR_MULTIPLIER = 0x5BD1E995
MURMUR_SEED = 1
MASK_32 = 0xFFFFFFFF

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Prepended to every canonical input before hashing
HASH_TAG = "<>"


def murmur2(data: bytes, seed: int = MURMUR_SEED) -> int:
    """
    32-bit MurmurHash2 of a byte string.

    Args:
        data: Bytes to hash
        seed: Hash seed

    Returns:
        Unsigned 32-bit hash value
    """
    length = len(data)
    h = (seed ^ length) & MASK_32

    index = 0
    while length - index >= 4:
        k = int.from_bytes(data[index:index + 4], "little")
        k = (k * MURMUR_MULTIPLIER) & MASK_32
        k ^= k >> 24
        k = (k * MURMUR_MULTIPLIER) & MASK_32
        h = (h * MURMUR_MULTIPLIER) & MASK_32
        h ^= k
        index += 4

    # Tail bytes fall through from the highest to the lowest
    remaining = length - index
    if remaining == 3:
        h ^= data[index + 2] << 16
    if remaining >= 2:
        h ^= data[index + 1] << 8
    if remaining >= 1:
        h ^= data[index]
        h = (h * MURMUR_MULTIPLIER) & MASK_32

    h ^= h >> 13
    h = (h * MURMUR_MULTIPLIER) & MASK_32
    h ^= h >> 15
    return h


def base36_encode(number: int) -> str:
    """Encode a non-negative integer in lowercase base 36"""
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def hash_create(text: str) -> str:
    """Base-36 MurmurHash2 of a string's UTF-8 encoding"""
    return base36_encode(murmur2(text.encode("utf-8")))


def identifier_hash(category: RuleCategory, canonical_input: str, prefix: str = "x") -> str:
    """
    Build the identifier for a rule from its canonical input.

    Args:
        category: Rule category; its suffix ends the identifier
        canonical_input: Fully resolved, deterministically ordered rule text
        prefix: Leading letters keeping the identifier a valid CSS name

    Returns:
        Identifier such as "x1id2van-B"
    """
    return f"{prefix}{hash_create(HASH_TAG + canonical_input)}-{category.suffix}"

"""Symbol sets for canonical n-grams.

The canonical alphabet is the 26 lowercase ASCII letters plus three markers
produced by canonicalization: ``Y`` (y following a vowel or consonant),
``W`` (w following a, e or o) and ``Q`` (the pair "qu").
"""

LETTERS: str = "abcdefghijklmnopqrstuvwxyz"

# Ordered by frequency in English
VOWELS: frozenset[str] = frozenset("eoaiuYW")
CONSONANTS: frozenset[str] = frozenset("tnhsrldymwgcfbpkvjxzqQ")

ALPHABET: frozenset[str] = VOWELS | CONSONANTS

# Preceding symbols that fold a following "y" / "w"
Y_FOLD_TRIGGERS: frozenset[str] = frozenset("aeou") | (CONSONANTS & frozenset(LETTERS))
W_FOLD_TRIGGERS: frozenset[str] = frozenset("aeo")

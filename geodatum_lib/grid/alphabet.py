# -*- coding: utf-8 -*-
"""Letter alphabets used by the lettered grid references.

MGRS and the British National Grid both label 100 km squares with letters
taken from the Latin alphabet with some letters removed. Each table here is
an explicit index <-> letter mapping so that the codecs never do arithmetic
on character codes.
"""

from __future__ import annotations

import string


class GridAlphabet:
    """Ordered sequence of letters with wrapping index arithmetic.

    Args:
        letters: The letters of the alphabet, in order
    """

    def __init__(self, letters: str):
        self.letters = letters
        self._index = {letter: idx for idx, letter in enumerate(letters)}

    def __len__(self) -> int:
        return len(self.letters)

    def __contains__(self, letter: object) -> bool:
        return letter in self._index

    def __repr__(self) -> str:
        return f"GridAlphabet({self.letters!r})"

    def letter(self, index: int) -> str:
        """Return the letter at ``index``, wrapping around the alphabet."""
        return self.letters[index % len(self.letters)]

    def index(self, letter: str) -> int:
        """Return the position of ``letter``.

        Raises:
            ValueError: If the letter is not part of the alphabet
        """
        try:
            return self._index[letter.upper()]
        except KeyError:
            raise ValueError(f"Letter {letter!r} not in {self!r}") from None

    def advance(self, origin: str, steps: int) -> str:
        """Return the letter ``steps`` positions after ``origin``."""
        return self.letter(self.index(origin) + steps)

    def distance(self, origin: str, letter: str) -> int:
        """Number of forward steps from ``origin`` to ``letter``."""
        return (self.index(letter) - self.index(origin)) % len(self.letters)


def _without(*excluded: str) -> str:
    return "".join(c for c in string.ascii_uppercase if c not in excluded)


#: MGRS column letters: 24 letters, ``I`` and ``O`` omitted
MGRS_ALPHABET = GridAlphabet(_without("I", "O"))

#: MGRS row letters: the first 20 column letters, ``A`` through ``V``
MGRS_ROW_ALPHABET = GridAlphabet(MGRS_ALPHABET.letters[:20])

#: British National Grid letters: 25 letters, ``I`` omitted
BRITISH_ALPHABET = GridAlphabet(_without("I"))

#: UTM latitude band letters from 80S northward, ``I`` and ``O`` omitted
UTM_BAND_LETTERS = GridAlphabet("CDEFGHJKLMNPQRSTUVWX")

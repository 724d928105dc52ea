"""
Porter stemmer (classical 1980 algorithm).

Derived from Martin Porter's reference C version:
https://tartarus.org/martin/PorterStemmer/

    Porter, 1980, An algorithm for suffix stripping,
    Program, Vol. 14, No. 3, pp 130-137

The word is copied into a working buffer and reduced in place by six
phases (Step1ab, Step1c, Step2, Step3, Step4, Step5). Two indices drive
every phase:

- k: effective end of the word, everything at or beyond k is garbage
- j: start of the suffix matched by the last successful ends_with()

Examples:
- "caresses" → "caress"
- "ponies" → "poni"
- "relational" → "relat"
- "generalizations" → "gener"
"""

from typing import Dict, List, Tuple

from ..utils import ascii_lower

VOWELS = frozenset("aeiou")

# Words this short are returned as-is
MIN_STEM_LENGTH = 3

# Step2: keyed on the penultimate letter, first matching suffix wins
STEP2_RULES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "a": (("ational", "ate"), ("tional", "tion")),
    "c": (("enci", "ence"), ("anci", "ance")),
    "e": (("izer", "ize"),),
    "l": (("bli", "ble"), ("alli", "al"), ("entli", "ent"), ("eli", "e"), ("ousli", "ous")),
    "o": (("ization", "ize"), ("ation", "ate"), ("ator", "ate")),
    "s": (("alism", "al"), ("iveness", "ive"), ("fulness", "ful"), ("ousness", "ous")),
    "t": (("aliti", "al"), ("iviti", "ive"), ("biliti", "ble")),
    "g": (("logi", "log"),),
}

# Step3: keyed on the last letter
STEP3_RULES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "e": (("icate", "ic"), ("ative", ""), ("alize", "al")),
    "i": (("iciti", "ic"),),
    "l": (("ical", "ic"), ("ful", "")),
    "s": (("ness", ""),),
}

# Step4: keyed on the penultimate letter, matched suffix is removed
STEP4_SUFFIXES: Dict[str, Tuple[str, ...]] = {
    "a": ("al",),
    "c": ("ance", "ence"),
    "e": ("er",),
    "i": ("ic",),
    "l": ("able", "ible"),
    "n": ("ant", "ement", "ment", "ent"),
    "o": ("ion", "ou"),
    "s": ("ism",),
    "t": ("ate", "iti"),
    "u": ("ous",),
    "v": ("ive",),
    "z": ("ize",),
}


class PorterReducer:
    """
    Working state of a single Porter reduction.

    Owns a lowercased copy of the word; never shared between calls.
    """

    def __init__(self, word: str):
        self.buf: List[str] = list(ascii_lower(word))
        self.k = len(self.buf)
        self.j = 0

    # ------------------------------------------------------------------
    # Classification primitives
    # ------------------------------------------------------------------

    def is_consonant(self, i: int) -> bool:
        """
        True if the letter at i is a consonant.

        'y' is a consonant at position 0 and after a vowel, and a vowel
        after a consonant. Runs of 'y' are resolved by walking back to
        the first letter that is not 'y'.
        """
        flips = 0
        while self.buf[i] == "y" and i > 0:
            i -= 1
            flips += 1

        if self.buf[i] == "y":
            consonant = True
        else:
            consonant = self.buf[i] not in VOWELS

        # Each 'y' inverts the classification of the letter before it
        return consonant if flips % 2 == 0 else not consonant

    def has_vowel(self) -> bool:
        """True if [0, j) contains a vowel."""
        return any(not self.is_consonant(i) for i in range(self.j))

    def count(self) -> int:
        """
        Measure m of [0, j): the number of VC sequences.

        With C a run of consonants and V a run of vowels, every word is
        [C](VC){m}[V]:

            tr, ee, tree, y, by          m=0
            trouble, oats, trees, ivy    m=1
            troubles, private, oaten     m=2
        """
        n = 0
        i = 0
        j = self.j

        # Leading consonants
        while True:
            if i >= j:
                return n
            if not self.is_consonant(i):
                break
            i += 1
        i += 1

        while True:
            # Vowel run
            while True:
                if i >= j:
                    return n
                if self.is_consonant(i):
                    break
                i += 1
            i += 1
            n += 1

            # Consonant run
            while True:
                if i >= j:
                    return n
                if not self.is_consonant(i):
                    break
                i += 1
            i += 1

    def double_consonant(self, index: int) -> bool:
        """True if index and index - 1 hold the same consonant."""
        if index < 1 or index > self.k - 1:
            return False
        if self.buf[index] != self.buf[index - 1]:
            return False
        return self.is_consonant(index)

    def cvc(self, index: int) -> bool:
        """
        True if index - 2, index - 1, index is consonant-vowel-consonant
        and the second consonant is not w, x or y.

        Used to restore an 'e' on short words: cav(e), lov(e), hop(e),
        crim(e), but not snow, box, tray.
        """
        if index < 2 or index > self.k - 1:
            return False
        if (
            not self.is_consonant(index)
            or self.is_consonant(index - 1)
            or not self.is_consonant(index - 2)
        ):
            return False
        return self.buf[index] not in "wxy"

    # ------------------------------------------------------------------
    # Buffer & boundary primitives
    # ------------------------------------------------------------------

    def ends_with(self, suffix: str) -> bool:
        """True if [0, k) ends with suffix; moves j to the suffix start."""
        length = len(suffix)
        if length > self.k:
            return False
        if "".join(self.buf[self.k - length:self.k]) != suffix:
            return False
        self.j = self.k - length
        return True

    def replace(self, s: str):
        """Overwrite [j, ...) with s and set k to its end."""
        end = self.j + len(s)
        if end > len(self.buf):
            self.buf.extend([""] * (end - len(self.buf)))
        self.buf[self.j:end] = list(s)
        self.k = end

    def r(self, s: str):
        """replace(s) when the stem before j has m > 0."""
        if self.count() > 0:
            self.replace(s)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def step1ab(self):
        """
        Strip plurals and -ed or -ing.

            caresses  →  caress        feed      →  feed
            ponies    →  poni          agreed    →  agree
            ties      →  ti            disabled  →  disable
            caress    →  caress        matting   →  mat
            cats      →  cat           mating    →  mate
                                       meeting   →  meet
                                       milling   →  mill
                                       messing   →  mess
        """
        if self.k > 0 and self.buf[self.k - 1] == "s":
            if self.ends_with("sses"):
                self.k -= 2
            elif self.ends_with("ies"):
                self.replace("i")
            elif self.k > 1 and self.buf[self.k - 2] != "s":
                self.k -= 1

        if self.ends_with("eed"):
            if self.count() > 0:
                self.k -= 1
        elif (self.ends_with("ed") or self.ends_with("ing")) and self.has_vowel():
            self.k = self.j
            if self.ends_with("at"):
                self.replace("ate")
            elif self.ends_with("bl"):
                self.replace("ble")
            elif self.ends_with("iz"):
                self.replace("ize")
            elif self.double_consonant(self.k - 1):
                self.k -= 1
                if self.buf[self.k - 1] in "lsz":
                    self.k += 1
            elif self.count() == 1 and self.cvc(self.k - 1):
                self.replace("e")

    def step1c(self):
        """Turn a terminal 'y' into 'i' when the stem has another vowel."""
        if self.ends_with("y") and self.has_vowel():
            self.buf[self.k - 1] = "i"

    def step2(self):
        """Map double suffixes to single ones: -ization → -ize, -ational → -ate."""
        if self.k < 2:
            return
        for suffix, replacement in STEP2_RULES.get(self.buf[self.k - 2], ()):
            if self.ends_with(suffix):
                self.r(replacement)
                return

    def step3(self):
        """Handle -ic-, -full, -ness and similar."""
        if self.k < 1:
            return
        for suffix, replacement in STEP3_RULES.get(self.buf[self.k - 1], ()):
            if self.ends_with(suffix):
                self.r(replacement)
                return

    def step4(self):
        """Remove -ant, -ence and friends in the context <c>vcvc<v>."""
        if self.k < 2:
            return
        for suffix in STEP4_SUFFIXES.get(self.buf[self.k - 2], ()):
            if not self.ends_with(suffix):
                continue
            if suffix == "ion" and not (self.j > 0 and self.buf[self.j - 1] in "st"):
                continue
            break
        else:
            return

        if self.count() > 1:
            self.k = self.j

    def step5(self):
        """Remove a final -e if m > 1, and change -ll to -l if m > 1."""
        self.j = self.k
        if self.k > 0 and self.buf[self.k - 1] == "e":
            m = self.count()
            if m > 1 or (m == 1 and not self.cvc(self.k - 2)):
                self.k -= 1

        if (
            self.k > 0
            and self.buf[self.k - 1] == "l"
            and self.double_consonant(self.k - 1)
            and self.count() > 1
        ):
            self.k -= 1

    def result(self) -> str:
        """Live part of the buffer as a new string."""
        return "".join(self.buf[:self.k])


def stem(word: str) -> str:
    """
    Stem a single word using the Porter algorithm.

    Words of three characters or fewer are returned unchanged (case
    included); longer words come back ASCII-lowercased.

    Args:
        word: Single token

    Returns:
        Stemmed word

    Examples:
        >>> stem("caresses")
        'caress'
        >>> stem("hopping")
        'hop'
        >>> stem("sky")
        'sky'
    """
    if len(word) <= MIN_STEM_LENGTH:
        return word

    reducer = PorterReducer(word)
    reducer.step1ab()
    reducer.step1c()
    reducer.step2()
    reducer.step3()
    reducer.step4()
    reducer.step5()

    return reducer.result()

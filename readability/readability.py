import logging
import math
import string
from collections import namedtuple

from cs50 import get_string

logger = logging.getLogger(__name__)

## Grade values that stand for the two open-ended classes
BEFORE_GRADE_1 = 0
GRADE_16_PLUS = 16

SENTENCE_ENDINGS = ['.', '!', '?']


class NoWordsError(ValueError):
    """Raised when the index is asked for on text with no words"""


class TextStats(namedtuple("TextStats", ["letters", "words", "sentences"])):
    """Letter, word and sentence counts for one piece of text"""

    __slots__ = ()

    def index(self):
        """Coleman-Liau index, rounded to the nearest grade"""
        if self.words == 0:
            raise NoWordsError("No words found in text")

        L = (self.letters / self.words) * 100.0
        S = (self.sentences / self.words) * 100.0

        return round_half_away(0.0588 * L - 0.296 * S - 15.8)


class ReadabilityResult(namedtuple("ReadabilityResult", ["stats", "index", "grade"])):

    __slots__ = ()

    def __str__(self):
        if self.grade >= GRADE_16_PLUS:
            return "Grade 16+"
        elif self.grade < 1:
            return "Before Grade 1"
        return f"Grade {self.grade}"


def count(text):
    """Count letters, words and sentences in a single pass over text"""

    letters = words = sentences = 0
    previous = ' '

    for char in text:

        ## Count the number of letters
        if char in string.ascii_letters:
            letters += 1

        ## A word starts wherever a non-space follows a space or the start of text
        if char != ' ' and previous == ' ':
            words += 1

        ## Count the number of sentences
        if char in SENTENCE_ENDINGS:
            sentences += 1

        previous = char

    return TextStats(letters, words, sentences)


def round_half_away(value):
    """Round to the nearest integer, ties away from zero"""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def classify(index):
    if index >= GRADE_16_PLUS:
        return GRADE_16_PLUS
    elif index < 1:
        return BEFORE_GRADE_1
    return index


def analyze(text):
    """Estimate the grade level needed to read text.

    Text without any words has no defined index and is classed as
    Before Grade 1, with ``index`` left as None.
    """
    stats = count(text)

    try:
        index = stats.index()
    except NoWordsError:
        logger.debug("No words in %r, classing as before grade 1", text)
        return ReadabilityResult(stats, None, BEFORE_GRADE_1)

    logger.debug("letters=%d words=%d sentences=%d index=%d",
                 stats.letters, stats.words, stats.sentences, index)
    return ReadabilityResult(stats, index, classify(index))


def main():
    logging.basicConfig()

    text = get_string("Text: ")

    ## get_string gives back None at end of input
    if text is None:
        return

    print(analyze(text))


if __name__ == "__main__":
    main()

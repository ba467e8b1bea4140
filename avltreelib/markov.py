"""Markov chain text generator built on AVLTree.

Reads text, records for every word how often each other word follows it
and generates a random word sequence from those transition
probabilities. Both the word dictionary and each word's successor set
are owning AVLTrees, so closing the table releases everything.
"""

import logging
import random
import re
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional

from .config import MarkovConfig, VisitResult, compare_by
from .errors import InvalidConfigurationError, MarkovError, UnknownWordError
from .tree import AVLTree

logger = logging.getLogger(__name__)

compare_words = compare_by(attrgetter('text'))


class Word:
    """A dictionary entry: the word, its weight and its successors.

    ``count`` starts as the number of occurrences; for a successor it is
    turned into a transition probability once the table is normalized.
    """

    def __init__(self, text: str):
        self.text = text
        self.count = 1.0
        self.next_words: Optional[AVLTree] = None

    @classmethod
    def probe(cls, text: str) -> 'Word':
        """A throwaway key for searching the dictionary."""
        return cls(text)

    def successors(self) -> AVLTree:
        """Owning tree of the words seen right after this one."""
        if self.next_words is None:
            self.next_words = AVLTree(compare_words, dispose_word)
        return self.next_words

    def dispose(self) -> None:
        if self.next_words is not None:
            self.next_words.destroy()
            self.next_words = None

    def __repr__(self) -> str:
        return f"Word({self.text!r}, count={self.count:g})"


def dispose_word(word: Word) -> None:
    word.dispose()


def tokenize(line: str, delimiter: str = " ") -> List[str]:
    """Split a line on any of the delimiter characters.

    Runs of delimiters never produce empty tokens.
    """
    pattern = '[' + re.escape(delimiter) + ']'
    return [token for token in re.split(pattern, line) if token]


class TransitionTable:
    """Word dictionary with per-word successor statistics.

    Example:
        >>> with TransitionTable.from_text(["a b a c"]) as table:
        ...     chain = list(table.generate(MarkovConfig.quick(5, seed=1)))
    """

    def __init__(self):
        self.words = AVLTree(compare_words, dispose_word)

    @classmethod
    def from_text(cls, lines: Iterable[str], delimiter: str = " ") -> 'TransitionTable':
        table = cls()
        table.build(lines, delimiter)
        return table

    def add_transition(self, curr: str, nxt: str) -> None:
        """Record that ``nxt`` followed ``curr`` once."""
        word = self.words.search(Word.probe(curr))
        if word is None:
            word = Word(curr)
            self.words.insert(word)
        else:
            word.count += 1

        successors = word.successors()
        next_word = successors.search(Word.probe(nxt))
        if next_word is None:
            successors.insert(Word(nxt))
        else:
            next_word.count += 1

    def build(self, lines: Iterable[str], delimiter: str = " ") -> None:
        """Fill the table from lines of text and normalize it.

        Words flow across line boundaries. The last word gets a transition
        to itself so every word in the dictionary has a successor.
        """
        curr: Optional[str] = None
        tokens = 0
        for line in lines:
            for token in tokenize(line.rstrip('\n'), delimiter):
                if curr is not None:
                    self.add_transition(curr, token)
                curr = token
                tokens += 1

        if curr is None:
            logger.debug("Empty input, transition table left empty")
            return

        self.add_transition(curr, curr)
        self.normalize()
        logger.debug("Built transition table: %d words from %d tokens",
                     self.words.size(), tokens)

    def normalize(self) -> None:
        """Turn successor counts into probabilities summing to 1 per word."""
        def normalize_word(word: Word) -> None:
            total = word.count

            def scale(next_word: Word) -> None:
                next_word.count /= total

            word.successors().traverse(scale)

        self.words.traverse(normalize_word)

    def lookup(self, text: str) -> Optional[Word]:
        return self.words.search(Word.probe(text))

    def choose_next(self, word: Word, rng: random.Random) -> Word:
        """Pick a successor of word according to the transition probabilities.

        Walks the successors in sorted order accumulating probabilities and
        stops once the running sum reaches a uniform draw from (0, 1].
        """
        draw = 1.0 - rng.random()
        choice: Optional[Word] = None
        cumulative = 0.0

        def pick(candidate: Word) -> VisitResult:
            nonlocal choice, cumulative
            if cumulative < draw:
                choice = candidate
                cumulative += candidate.count
                return VisitResult.CONTINUE
            return VisitResult.STOP

        word.successors().traverse(pick)
        if choice is None:
            raise MarkovError(f"word {word.text!r} has no successors")
        return choice

    def generate(self, config: MarkovConfig, rng: Optional[random.Random] = None) -> Iterator[str]:
        """Yield up to ``config.out_len`` words of a random chain.

        The chain starts at ``config.initial_word``, or at the word stored
        at the root of the dictionary when none is given.

        Raises:
            InvalidConfigurationError: If the config does not validate
            UnknownWordError: If the initial word is not in the text
        """
        errors = config.validate()
        if errors:
            raise InvalidConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

        if not self.words:
            return

        if rng is None:
            rng = random.Random(config.seed)

        key = config.initial_word
        if key is None:
            key = self.words.root_payload().text

        for i in range(config.out_len):
            word = self.lookup(key)
            if word is None:
                if i == 0:
                    logger.warning("Initial word %r not in dictionary", key)
                    raise UnknownWordError(key)
                raise MarkovError(f"successor {key!r} missing from dictionary")
            yield word.text
            key = self.choose_next(word, rng).text

    def format_stats(self) -> str:
        """Render every word followed by its successor probabilities."""
        lines: List[str] = []

        def show_word(word: Word) -> None:
            lines.append(word.text)

            def show_successor(next_word: Word) -> None:
                lines.append(f"    {next_word.text} : {next_word.count:.2f}")

            word.successors().traverse(show_successor)

        self.words.traverse(show_word)
        return "".join(line + "\n" for line in lines)

    def close(self) -> None:
        """Release the dictionary and every successor tree."""
        if not self.words.is_destroyed:
            self.words.destroy()

    def __len__(self) -> int:
        return self.words.size()

    def __enter__(self) -> 'TransitionTable':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def format_chain(words: Iterable[str], config: MarkovConfig) -> str:
    """Join generated words, each followed by the delimiter.

    With ``config.wrap`` a line break is inserted before a word once the
    current line has reached ``config.wrap_width`` characters.
    """
    parts: List[str] = []
    line_len = 0
    for word in words:
        if config.wrap and line_len >= config.wrap_width:
            parts.append("\n")
            line_len = 0
        piece = word + config.delimiter
        parts.append(piece)
        line_len += len(piece)
    parts.append("\n")
    return "".join(parts)

#!/usr/bin/env python3
"""
Markov chain text generation on top of AVLTree.

Builds a transition table from a short passage, prints its statistics
and generates a reproducible, wrapped word chain.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import MarkovConfig
from avltreelib.markov import TransitionTable, format_chain

TEXT = """\
the quick brown fox jumps over the lazy dog
the lazy dog sleeps while the quick fox runs
"""


def main():
    config = MarkovConfig(out_len=40, initial_word="the", wrap=True, seed=2017)

    with TransitionTable.from_text(TEXT.splitlines(), config.delimiter) as table:
        print(f"{len(table)} distinct words\n")
        print(table.format_stats())
        print(format_chain(table.generate(config), config))


if __name__ == "__main__":
    main()

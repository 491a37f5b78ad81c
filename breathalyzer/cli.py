import argparse
import logging
import sys
from pathlib import Path

from breathalyzer.common.config import settings
from breathalyzer.dictionary import load_wordset
from breathalyzer.scoring import SentenceScorer

logger = logging.getLogger(__name__)


def read_sentence(path: Path) -> str:
    with path.open("r", encoding="utf-8") as fh:
        return fh.readline().strip().upper()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="breathalyzer",
        description="Sum the edit distances between each word of a sentence and its closest dictionary word.",
    )
    parser.add_argument("file", type=Path, help="File whose first line is the sentence to score")
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path(settings.dictionary_path),
        help="Word list, one word per line (default: %(default)s)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.scorer_workers,
        help="Threads used to search words in parallel (default: %(default)s)",
    )
    parser.add_argument("--verbose", action="store_true", help="Print the distance of every word")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    try:
        wordset = load_wordset(args.dictionary)
        sentence = read_sentence(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("failed to read input: %s", exc)
        return 1

    scorer = SentenceScorer(wordset, workers=args.workers)
    word_distances = scorer.word_distances(sentence)
    if args.verbose:
        for word, dist in word_distances:
            print(f"{word}\t{dist}")
    print(sum(dist for _, dist in word_distances))
    return 0


if __name__ == "__main__":
    sys.exit(main())

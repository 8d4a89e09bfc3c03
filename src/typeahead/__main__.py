from __future__ import annotations
import argparse, json, logging, sys
from typing import List, Optional

from . import config as CFG
from .compat import Autocomplete
from .engine import PredictionEngine
from .errors import TypeaheadError
from .loader import load_corpus
from .samples import CORPORA
from .suggest import create_from_multiple_sources


def _build_engine(args: argparse.Namespace) -> PredictionEngine:
    if args.roots:
        docs = load_corpus(args.roots)
        if not docs:
            raise FileNotFoundError(f"no non-empty *.txt files under {args.roots}")
        return create_from_multiple_sources(docs)
    engine = PredictionEngine()
    engine.train(args.text if args.text is not None else CORPORA[args.sample])
    return engine


def _emit(label: str, rows: list, as_json: bool) -> None:
    if as_json:
        print(json.dumps({label: [r if isinstance(r, str) else r.to_dict() for r in rows]},
                         ensure_ascii=False, indent=2))
        return
    print(f"[{label}]")
    if not rows:
        print("  (no suggestions)"); return
    for i, r in enumerate(rows, 1):
        if isinstance(r, str):
            print(f"  {i:<2} {r}")
        else:
            extra = f"  ctx={r.context!r}" if hasattr(r, "context") else ""
            print(f"  {i:<2} {r.word:<24} freq={r.frequency:<6} conf={r.confidence:.4f}{extra}")


def _complete(engine: PredictionEngine, prefix: str, k: int, legacy: bool) -> list:
    if legacy:
        return Autocomplete(engine).get_completions(prefix)[:k]
    return engine.get_completions(prefix, max_results=k)


def _next(engine: PredictionEngine, context: str, k: int, legacy: bool) -> list:
    if legacy:
        return Autocomplete(engine).get_next_word(context)[:k]
    return engine.get_next_word(context, max_results=k)


def _repl(engine: PredictionEngine, k: int, legacy: bool, as_json: bool) -> None:
    print("Type text and press Enter (empty line to quit).")
    print("A trailing space asks for next words; otherwise the last word is completed.")
    print("Commands: :phrase <text>, :stats")
    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print(); break
        if not raw.strip():
            break
        cmd = raw.strip()
        if cmd == ":stats":
            print(json.dumps(engine.get_stats().to_dict(), indent=2))
            continue
        if cmd.startswith(":phrase "):
            _emit("phrases", engine.get_next_phrase(cmd[len(":phrase "):])[:k], as_json)
            continue
        if raw.endswith(" "):
            _emit("next", _next(engine, raw, k, legacy), as_json)
        else:
            last = raw.split()[-1]
            _emit("complete", _complete(engine, last, k, legacy), as_json)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="typeahead", description="Typing-prediction CLI (corpus-trained completions and next words)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--roots", nargs="+", help="Folders (or files) to scan for .txt corpora")
    src.add_argument("--text", default=None, help="Train on this literal corpus text")
    src.add_argument("--sample", choices=sorted(CORPORA), help="Train on a bundled sample corpus")

    p.add_argument("--complete", metavar="PREFIX", default=None, help="Complete the word PREFIX")
    p.add_argument("--next", metavar="CONTEXT", default=None, help="Predict the word after CONTEXT")
    p.add_argument("--phrase", metavar="CONTEXT", default=None, help="Predict phrases after CONTEXT")
    p.add_argument("--stats", action="store_true", help="Print corpus statistics")
    p.add_argument("--common", type=int, default=None, metavar="N", help="Print the N most common words")
    p.add_argument("-k", type=int, default=CFG.MAX_COMPLETIONS, help="Max results per query")
    p.add_argument("--legacy", action="store_true", help="Use the string-only API (length tie-break)")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--repl", action="store_true", help="Interactive loop after training")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    try:
        engine = _build_engine(args)

        if args.complete is not None:
            _emit("complete", _complete(engine, args.complete, args.k, args.legacy), args.json)
        if args.next is not None:
            _emit("next", _next(engine, args.next, args.k, args.legacy), args.json)
        if args.phrase is not None:
            _emit("phrases", engine.get_next_phrase(args.phrase, max_results=args.k), args.json)
        if args.common is not None:
            _emit("common", engine.most_common_words(args.common), args.json)
        if args.stats:
            print(json.dumps(engine.get_stats().to_dict(), indent=2))
        if args.repl:
            _repl(engine, args.k, args.legacy, args.json)
        return 0
    except (TypeaheadError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

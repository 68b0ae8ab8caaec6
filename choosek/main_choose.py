import argparse
from itertools import islice
from typing import List, Optional, Sequence
from tqdm.auto import tqdm

from choosek.choose import Choose
from choosek.choose_conf import ChooseConfig

PROGRESS = True
COPY_SOURCE = False
SEPARATOR = " "


def _pbar(iterable, **kwargs):
    return tqdm(iterable, **kwargs)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Print the k-combinations of the given items in lexicographic order.")
    p.add_argument("k", type=int, help="selection size")
    p.add_argument("items", nargs="*", help="ordered source items")
    p.add_argument("--limit", type=int, default=None, help="stop after this many combinations")
    p.add_argument("--sep", default=SEPARATOR, help="separator between items of one combination")
    p.add_argument("--copy", action="store_true", default=COPY_SOURCE, help="copy the items instead of borrowing")
    p.add_argument("--no-progress", dest="progress", action="store_false", default=PROGRESS)
    p.add_argument("--verbose", action="store_true")
    return p


def run(k: int, items: Sequence[str], limit: Optional[int] = None, sep: str = SEPARATOR,
        copy: bool = COPY_SOURCE, progress: bool = PROGRESS, verbose: bool = False) -> List[str]:
    cfg = ChooseConfig(k=k, copy_source=copy, verbose=verbose)
    gen = Choose(list(items), cfg)
    total = gen.total if limit is None else min(gen.total, max(0, limit))
    print(f"[CFG] n={gen.n}  k={gen.k}  total={gen.total}  limit={limit}")

    lines = []
    combos = gen if limit is None else islice(gen, max(0, limit))
    for combo in _pbar(combos, total=total, desc="Choose", unit="comb", disable=not progress):
        line = sep.join(combo)
        print(line)
        lines.append(line)

    print(f"[Choose] printed {len(lines)} of {gen.total} (generated {gen.produced})")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = ChooseConfig(k=args.k)
        cfg.validate()
    except (TypeError, ValueError) as e:
        print(f"[CFG][error] {e}")
        return 2

    run(args.k, args.items, limit=args.limit, sep=args.sep, copy=args.copy,
        progress=args.progress, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

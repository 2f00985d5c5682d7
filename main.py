#!/usr/bin/env python3
"""Compat shim that forwards to :mod:`unbundler.main`.

``python main.py -i bundle.js -o out`` and ``python -m unbundler.main`` share
one code path for option parsing and module output.
"""

from __future__ import annotations

import sys

from unbundler import main as _cli


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``python main.py``.

    Parameters
    ----------
    argv:
        Optional argument vector.  When ``None`` the wrapper forwards the
        current ``sys.argv[1:]`` to :func:`unbundler.main.main`.
    """

    return _cli.main(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover - thin CLI shim
    raise SystemExit(main())

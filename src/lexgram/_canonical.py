"""Digraph folding: recode "qu", "<c>y" and "<c>w" into marker symbols."""

from __future__ import annotations

import ahocorasick

from ._alphabet import W_FOLD_TRIGGERS, Y_FOLD_TRIGGERS


def _build_folds() -> dict[str, str]:
    folds = {"qu": "Q"}
    for c in sorted(Y_FOLD_TRIGGERS):
        folds[c + "y"] = c + "Y"
    for c in sorted(W_FOLD_TRIGGERS):
        folds[c + "w"] = c + "W"
    return folds


# digraph -> replacement. "qu" shrinks to one symbol, the y/w folds keep
# the preceding letter and append the marker.
FOLDS: dict[str, str] = _build_folds()


def _build_automaton() -> ahocorasick.Automaton:
    ac = ahocorasick.Automaton()
    for digraph, replacement in FOLDS.items():
        ac.add_word(digraph, replacement)
    ac.make_automaton()
    return ac


_FOLD_AC = _build_automaton()


def canonicalize(s: str) -> str:
    """Return the canonical symbol string for ``s``.

    Scans left to right; a folded pair is consumed whole, so scanning
    resumes after it and matches never overlap. Only ``s`` itself is
    considered, never any surrounding context.
    """
    if len(s) < 2:
        return s

    parts: list[str] = []
    pos = 0
    # Matches arrive in order of end position; every pattern is two
    # symbols long, so that is also start order.
    for end_inclusive, replacement in _FOLD_AC.iter(s):
        start = end_inclusive - 1
        if start < pos:
            continue
        parts.append(s[pos:start])
        parts.append(replacement)
        pos = end_inclusive + 1

    if pos == 0:
        return s
    parts.append(s[pos:])
    return "".join(parts)

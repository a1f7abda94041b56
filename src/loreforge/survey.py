# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
survey.py — Category-frequency surveys over many seeded trials.

Runs one classifier (or a raw weight vector) across ``trials`` consecutive
salts at a fixed position and tallies which category came up, so a weight
table can be inspected without reading the rules:

    counts = survey('myth', snapshot, trials=1000)
    write_survey_csv('data/myth_survey.csv', survey_rows('myth', counts))

CSV columns: kind, category, count, share
"""

import csv
from pathlib import Path

import numpy as np

from . import config
from .categories import HeroArchetype, MythType, NameStyle, ReligionArchetype
from .classifiers import (classify_hero, classify_myth, classify_name_style,
                          classify_religion)
from .seeding import stream_for, weighted_index
from .snapshot import Biome, SimulationSnapshot

CSV_COLUMNS = ['kind', 'category', 'count', 'share']

# kind → (category enum, classifier(snapshot, stream, biome))
CLASSIFIERS = {
    'myth':       (MythType,
                   lambda snap, stream, biome: classify_myth(snap, stream)),
    'religion':   (ReligionArchetype,
                   lambda snap, stream, biome: classify_religion(snap, stream, biome)),
    'hero':       (HeroArchetype,
                   lambda snap, stream, biome: classify_hero(snap, stream)),
    'name_style': (NameStyle,
                   lambda snap, stream, biome: classify_name_style(
                       snap.personality, snap.civilization.archetype, stream)),
}


def index_counts(weights, trials: int = config.SURVEY_TRIALS, salt_base: int = 0,
                 position=None) -> np.ndarray:
    """How often weighted_index() picks each index over *trials* salts."""
    n = max(1, len(weights))
    picks = [weighted_index(weights, stream_for(position, salt_base + i))
             for i in range(max(0, int(trials)))]
    return np.bincount(np.asarray(picks, dtype=np.int64), minlength=n)


def survey(kind: str, snapshot: SimulationSnapshot = None,
           trials: int = config.SURVEY_TRIALS, salt_base: int = 0,
           position=None, biome: Biome = Biome.NONE) -> dict:
    """Category value → count for *kind* ('myth', 'religion', 'hero', 'name_style').

    Every category of the enum appears in the result, zero counts included.
    *position* defaults to the snapshot's own position.
    """
    if kind not in CLASSIFIERS:
        raise ValueError(f"unknown classifier {kind!r} "
                         f"(expected one of {', '.join(sorted(CLASSIFIERS))})")
    members, classify = CLASSIFIERS[kind]
    snapshot = snapshot or SimulationSnapshot()
    if position is None:
        position = snapshot.position
    order = list(members)
    picks = [order.index(classify(snapshot, stream_for(position, salt_base + i), biome))
             for i in range(max(0, int(trials)))]
    counts = np.bincount(np.asarray(picks, dtype=np.int64), minlength=len(order))
    return {member.value: int(c) for member, c in zip(order, counts)}


def survey_rows(kind: str, counts: dict) -> list:
    total = sum(counts.values())
    return [
        {'kind': kind, 'category': category, 'count': count,
         'share': round(count / total, 4) if total else 0.0}
        for category, count in counts.items()
    ]


def write_survey_csv(path, rows) -> Path:
    """Write survey rows (dicts keyed by CSV_COLUMNS) to *path*; returns the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', newline='', encoding='utf-8') as fh:
        writer = csv.DictWriter(fh, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow({k: row.get(k, '') for k in CSV_COLUMNS})
    return path

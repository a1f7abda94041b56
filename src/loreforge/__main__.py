# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
Entry point for: python -m loreforge

Builds one SimulationSnapshot from the command line, prints one of each
artifact (or --count myths at successive salts), and optionally surveys the
classifiers.

Usage examples
──────────────
    python -m loreforge --x 10 --z 5 --religion 9 --culture 2
    python -m loreforge --stage broken --memory betrayal --count 5
    python -m loreforge --survey 1000 --csv data/survey.csv

Every byte printed goes to logs/lore_<ts>.txt; only artifact lines reach the
terminal unless --verbose is given.
"""

import argparse
import pathlib
import sys
from datetime import datetime

from . import config
from . import generators as gen
from .survey import CLASSIFIERS, survey, survey_rows, write_survey_csv
from .snapshot import (Biome, CivilizationAttributes, CivilizationType,
                       EventCategory, MemoryTag, PersonalityStage,
                       PersonalityTraits, ReligionBelief, SimulationSnapshot)


# ══════════════════════════════════════════════════════════════════════════
# Logging tee
# ══════════════════════════════════════════════════════════════════════════

class _LogTee:
    """Every byte goes to the log file.  Only artifact lines reach the terminal."""

    # Keywords that earn a line a spot on the terminal
    _SHOW = frozenset({
        'CIVILIZATION', 'CITY', 'REGION', 'MONUMENT', 'HERO', 'RELIGION',
        'EVENT', 'MYTH', 'SURVEY', 'Log →', 'Survey CSV',
    })

    passthrough: bool = False   # True → show everything (--verbose)

    def __init__(self, log_fh, real_stdout):
        self._log  = log_fh
        self._real = real_stdout
        self._buf  = ''

    def write(self, text: str) -> None:
        self._log.write(text)
        self._log.flush()
        self._buf += text
        while '\n' in self._buf:
            line, self._buf = self._buf.split('\n', 1)
            if self.passthrough or any(kw in line for kw in self._SHOW):
                self._real.write(line + '\n')
                self._real.flush()

    def flush(self) -> None:
        self._log.flush()

    def fileno(self) -> int:
        return self._real.fileno()


# ══════════════════════════════════════════════════════════════════════════
# Argument parsing
# ══════════════════════════════════════════════════════════════════════════

_ATTRIBUTES = ('wealth', 'technology', 'culture', 'religion', 'trade',
               'military', 'stability')
_TRAITS     = ('aggressiveness', 'defensiveness', 'greed', 'paranoia', 'ambition',
               'desperation', 'hatred', 'pride', 'vengefulness')


def _values(enum_cls) -> list:
    return [m.value for m in enum_cls]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='loreforge',
        description='Deterministic names, event titles and myths from simulation state')

    where = parser.add_argument_group('position / seed')
    where.add_argument('--x', type=float, default=0.0)
    where.add_argument('--y', type=float, default=0.0)
    where.add_argument('--z', type=float, default=0.0)
    where.add_argument('--salt', type=int, default=0,
                       help='Extra integer mixed into the seed (default: 0)')

    civ = parser.add_argument_group('civilization')
    civ.add_argument('--name', type=str, default=None,
                     help='Civilization name (default: generated)')
    civ.add_argument('--biome', choices=_values(Biome), default=Biome.NONE.value)
    civ.add_argument('--civ-type', choices=_values(CivilizationType),
                     default=CivilizationType.MILITARY.value)
    civ.add_argument('--stage', choices=_values(PersonalityStage),
                     default=PersonalityStage.DEVELOPING.value)
    civ.add_argument('--belief', choices=_values(ReligionBelief),
                     default=ReligionBelief.NONE.value)
    civ.add_argument('--memory', choices=_values(MemoryTag), nargs='*', default=[],
                     help='Cultural-memory tags, e.g. --memory triumph betrayal')
    civ.add_argument('--population', type=float, default=1000.0)
    civ.add_argument('--year', type=int, default=0,
                     help='World age in years')
    for attr in _ATTRIBUTES:
        civ.add_argument(f'--{attr}', type=float, default=5.0, metavar='0-10')
    for trait in _TRAITS:
        civ.add_argument(f'--{trait}', type=float, default=5.0, metavar='0-10')

    out = parser.add_argument_group('output')
    out.add_argument('--count', type=int, default=1,
                     help='Number of myths to generate at successive salts (default: 1)')
    out.add_argument('--survey', type=int, default=0, metavar='N',
                     help='Survey every classifier over N salts')
    out.add_argument('--csv', type=str, default=None,
                     help='Write survey rows to this CSV path (needs --survey)')
    out.add_argument('--max-bytes', type=int, default=None,
                     help=f'UTF-8 bound for names (default: {config.MAX_NAME_BYTES})')
    out.add_argument('--max-text-bytes', type=int, default=None,
                     help=f'UTF-8 bound for myth text (default: {config.MAX_TEXT_BYTES})')
    out.add_argument('--log-dir', type=str, default=config.LOG_DIR,
                     help=f'Directory for lore_<ts>.txt logs (default: {config.LOG_DIR})')
    out.add_argument('--verbose', action='store_true',
                     help='Show every line on the terminal, not just artifact lines')
    return parser


def _validate(parser: argparse.ArgumentParser, args) -> None:
    if args.count < 0:
        parser.error('--count must be >= 0')
    if args.survey < 0:
        parser.error('--survey must be >= 0')
    if args.csv and not args.survey:
        parser.error('--csv needs --survey N')
    for flag in ('max_bytes', 'max_text_bytes'):
        value = getattr(args, flag)
        if value is not None and value < 4:
            parser.error(f"--{flag.replace('_', '-')} must be at least 4")


def snapshot_from_args(args) -> SimulationSnapshot:
    position = (args.x, args.y, args.z)
    civ_type = CivilizationType(args.civ_type)
    personality = PersonalityTraits(**{t: getattr(args, t) for t in _TRAITS})
    name = args.name
    if not name:
        name = gen.civilization_name(position, Biome(args.biome), civ_type,
                                     personality, args.salt).text
    civilization = CivilizationAttributes(
        name=name, population=args.population, position=position, archetype=civ_type,
        **{a: getattr(args, a) for a in _ATTRIBUTES})
    memories = tuple(MemoryTag(m) for m in args.memory)
    return SimulationSnapshot(civilization=civilization, personality=personality,
                              stage=PersonalityStage(args.stage), memories=memories,
                              year=args.year)


# ══════════════════════════════════════════════════════════════════════════
# Report
# ══════════════════════════════════════════════════════════════════════════

def _print_artifacts(snap: SimulationSnapshot, args, event_log: list) -> None:
    biome  = Biome(args.biome)
    belief = ReligionBelief(args.belief)
    pos    = snap.position
    civ    = snap.civilization

    hero = gen.hero_name(snap, salt=args.salt, event_log=event_log)
    event = gen.event_name(EventCategory.GOLDEN, 7, [civ.name], pos, args.salt,
                           event_log=event_log)
    artifacts = [
        gen.civilization_name(pos, biome, civ.archetype, snap.personality, args.salt,
                              event_log=event_log),
        gen.city_name(pos, biome, civ.archetype, args.salt, event_log=event_log),
        gen.region_name(pos, biome, args.salt, event_log=event_log),
        hero,
        gen.monument_name(pos, [hero.text], args.salt, event_log=event_log),
        event,
        gen.religion_name(pos, biome, belief, [hero.text], [event.text], args.salt,
                          event_log=event_log),
        gen.contextual_religion_name(snap, biome, belief, args.salt, event_log=event_log),
    ]
    print(f"\n── {civ.name} ── at ({pos[0]:g}, {pos[1]:g}, {pos[2]:g}), salt {args.salt}")
    for art in artifacts:
        print(f"  {art.kind.upper():<13} {art.text}  ({art.category})")
        print(f"      seed={art.seed}")

    for i in range(args.count):
        m = gen.myth(snap, salt=args.salt + i, biome=biome, event_log=event_log)
        s = m.scores
        print(f"\n  MYTH          {m.name}  ({m.myth_type.value})")
        print(f"      {m.content}")
        print(f"      believability={s.believability:.2f}  spread={s.spread:.2f}  "
              f"moral_weight={s.moral_weight:.2f}  cultural_impact={s.cultural_impact:.2f}  "
              f"authenticity={s.authenticity:.2f}")


def _print_survey(snap: SimulationSnapshot, args) -> list:
    rows = []
    print(f"\nSURVEY over {args.survey} salts from {args.salt}")
    for kind in CLASSIFIERS:
        counts = survey(kind, snap, trials=args.survey, salt_base=args.salt,
                        biome=Biome(args.biome))
        kind_rows = survey_rows(kind, counts)
        rows.extend(kind_rows)
        print(f"  SURVEY {kind}")
        for row in kind_rows:
            print(f"      {row['category']:<14} {row['count']:>6}  {row['share']:.3f}")
    return rows


# ══════════════════════════════════════════════════════════════════════════
# Main
# ══════════════════════════════════════════════════════════════════════════

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate(parser, args)

    if (hasattr(sys.stdout, 'reconfigure')
            and (getattr(sys.stdout, 'encoding', None) or '').lower() != 'utf-8'):
        sys.stdout.reconfigure(encoding='utf-8')

    # ── Set up file logging ────────────────────────────────────────────────
    try:
        pathlib.Path(args.log_dir).mkdir(parents=True, exist_ok=True)
        _ts       = datetime.now().strftime('%Y%m%d_%H%M%S')
        _log_path = pathlib.Path(args.log_dir) / f'lore_{_ts}.txt'
        _log_fh   = open(_log_path, 'w', encoding='utf-8')
    except OSError as exc:
        parser.error(f'cannot write log to {args.log_dir!r}: {exc}')

    # CLI overrides last for this run only; omitted flags keep config defaults
    _bounds = (config.MAX_NAME_BYTES, config.MAX_TEXT_BYTES)
    if args.max_bytes is not None:
        config.MAX_NAME_BYTES = args.max_bytes
    if args.max_text_bytes is not None:
        config.MAX_TEXT_BYTES = args.max_text_bytes

    _real = sys.stdout
    _tee  = _LogTee(_log_fh, _real)
    _tee.passthrough = args.verbose
    sys.stdout = _tee
    event_log: list = []
    try:
        print(f"Log → {_log_path}")
        snap = snapshot_from_args(args)
        _print_artifacts(snap, args, event_log)
        if args.survey:
            rows = _print_survey(snap, args)
            if args.csv:
                try:
                    out = write_survey_csv(args.csv, rows)
                except OSError as exc:
                    print(f"ERROR: cannot write survey CSV: {exc}")
                    return 1
                print(f"Survey CSV → {out}  ({len(rows)} rows)")
        print('\nNarrative log:')
        for line in event_log:
            print(f"  {line}")
    finally:
        sys.stdout = _real
        _log_fh.close()
        config.MAX_NAME_BYTES, config.MAX_TEXT_BYTES = _bounds
    return 0


if __name__ == '__main__':
    sys.exit(main())

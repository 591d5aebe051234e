from __future__ import annotations

import argparse
from typing import Iterable, List, Sequence

from leaguetable.domain.entities import PlayerStatistics

from ._common import REQUEST_ERRORS, add_db_argument, dump_json, open_service, report_rejected

_HEADER = f"{'#':>3}  {'Player':<20} {'P':>3} {'W':>3} {'D':>3} {'L':>3} {'GF':>4} {'GA':>4} {'GD':>4} {'Pts':>4}"


def _format_rows(rows: Iterable[PlayerStatistics]) -> str:
    out_lines: List[str] = [_HEADER]
    for pos, r in enumerate(rows, start=1):
        out_lines.append(
            f"{pos:>3}  {r.player_name:<20} {r.matches_played:>3} {r.wins:>3} {r.draws:>3} "
            f"{r.losses:>3} {r.goals_for:>4} {r.goals_against:>4} {r.goal_difference:>+4} "
            f"{r.points:>4}"
        )
    return "\n".join(out_lines)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Print the current league table")
    add_db_argument(p)
    p.add_argument("--json", action="store_true", help="Print the table as a JSON array")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    with open_service(args.db) as svc:
        try:
            rows = svc.standings()
        except REQUEST_ERRORS as exc:
            return report_rejected(exc)

    if args.json:
        print(dump_json(rows))
    elif not rows:
        print("No players registered.")
    else:
        print(_format_rows(rows))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

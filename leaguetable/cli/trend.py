from __future__ import annotations

import argparse
from typing import Mapping, Sequence

from leaguetable.domain.entities import PositionSnapshot

from ._common import REQUEST_ERRORS, add_db_argument, dump_json, open_service, report_rejected


def _format_snapshot(snapshot: PositionSnapshot, names: Mapping[str, str]) -> str:
    ordered = sorted(snapshot.positions.items(), key=lambda kv: kv[1])
    table = ", ".join(f"{pos}. {names.get(pid, pid)}" for pid, pos in ordered)
    return f"Match {snapshot.match_index} ({snapshot.timestamp}): {table}"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Print table positions after every match")
    add_db_argument(p)
    p.add_argument("--json", action="store_true", help="Print the snapshots as a JSON array")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    with open_service(args.db) as svc:
        try:
            snapshots = svc.position_trend()
            names = {p.id: p.name for p in svc.list_players()}
        except REQUEST_ERRORS as exc:
            return report_rejected(exc)

    if args.json:
        print(dump_json(snapshots))
        return 0
    if not snapshots:
        print("No matches recorded.")
        return 0
    for snapshot in snapshots:
        print(_format_snapshot(snapshot, names))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

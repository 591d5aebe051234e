from __future__ import annotations

import argparse
from typing import Sequence

from leaguetable.config.settings import RECENT_MATCHES_LIMIT

from ._common import (
    REQUEST_ERRORS,
    add_db_argument,
    dump_json,
    open_service,
    parse_date,
    report_rejected,
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Record and correct match results")
    add_db_argument(p)
    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="Show the most recent matches")
    ls.add_argument("--limit", type=int, default=RECENT_MATCHES_LIMIT, help="How many to show")
    ls.add_argument("--json", action="store_true", help="Print matches as a JSON array")

    rec = sub.add_parser("record", help="Record a result")
    rec.add_argument("player1_id")
    rec.add_argument("player2_id")
    rec.add_argument("player1_score", type=int)
    rec.add_argument("player2_score", type=int)
    rec.add_argument("--date", type=parse_date, help="ISO-8601 match date (default: now)")

    fix = sub.add_parser("correct", help="Correct any field of a recorded match")
    fix.add_argument("match_id")
    fix.add_argument("--player1", metavar="PLAYER_ID")
    fix.add_argument("--player2", metavar="PLAYER_ID")
    fix.add_argument("--score1", type=int)
    fix.add_argument("--score2", type=int)
    fix.add_argument("--date", type=parse_date)

    reset = sub.add_parser("reset", help="Delete every match (players and teams are kept)")
    reset.add_argument("--yes", action="store_true", help="Confirm the reset")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "reset" and not args.yes:
        print("Refusing to reset without --yes.")
        return 1

    with open_service(args.db) as svc:
        try:
            if args.command == "list":
                matches = svc.recent_matches(args.limit)
                if args.json:
                    print(dump_json(matches))
                elif not matches:
                    print("No matches recorded.")
                else:
                    names = {p.id: p.name for p in svc.list_players()}
                    for m in matches:
                        p1 = names.get(m.player1_id, m.player1_id)
                        p2 = names.get(m.player2_id, m.player2_id)
                        print(
                            f"{m.match_date.isoformat()}  {p1} "
                            f"{m.player1_score}-{m.player2_score} {p2}  [id={m.id}]"
                        )
            elif args.command == "record":
                match = svc.record_match(
                    args.player1_id,
                    args.player2_id,
                    args.player1_score,
                    args.player2_score,
                    match_date=args.date,
                )
                print(f"Recorded match {match.id}")
            elif args.command == "correct":
                match = svc.correct_match(
                    args.match_id,
                    player1_id=args.player1,
                    player2_id=args.player2,
                    player1_score=args.score1,
                    player2_score=args.score2,
                    match_date=args.date,
                )
                print(f"Corrected match {match.id}")
            else:
                removed = svc.reset_league()
                print(f"League reset: {removed} matches deleted")
        except REQUEST_ERRORS as exc:
            return report_rejected(exc)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

from __future__ import annotations

import argparse
from typing import Sequence

from ._common import REQUEST_ERRORS, add_db_argument, dump_json, open_service, report_rejected


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Manage teams")
    add_db_argument(p)
    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List teams")
    ls.add_argument("--json", action="store_true", help="Print teams as a JSON array")

    add = sub.add_parser("add", help="Create a team")
    add.add_argument("name")

    rename = sub.add_parser("rename", help="Rename a team")
    rename.add_argument("team_id")
    rename.add_argument("name")

    delete = sub.add_parser("delete", help="Delete a team; its players are kept without a team")
    delete.add_argument("team_id")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    with open_service(args.db) as svc:
        try:
            if args.command == "list":
                teams = svc.list_teams()
                if args.json:
                    print(dump_json(teams))
                elif not teams:
                    print("No teams.")
                else:
                    for t in teams:
                        print(f"{t.id}  {t.name}")
            elif args.command == "add":
                team = svc.create_team(args.name)
                print(f"Created team {team.name} [id={team.id}]")
            elif args.command == "rename":
                team = svc.rename_team(args.team_id, args.name)
                print(f"Renamed {team.id} to {team.name}")
            else:
                detached = svc.delete_team(args.team_id)
                print(f"Deleted team {args.team_id} ({detached} players left without a team)")
        except REQUEST_ERRORS as exc:
            return report_rejected(exc)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

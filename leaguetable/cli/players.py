from __future__ import annotations

import argparse
from typing import Sequence

from ._common import REQUEST_ERRORS, add_db_argument, dump_json, open_service, report_rejected


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Manage league players")
    add_db_argument(p)
    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="List registered players")
    ls.add_argument("--json", action="store_true", help="Print players as a JSON array")

    add = sub.add_parser("add", help="Register a player")
    add.add_argument("name")
    add.add_argument("--team", metavar="TEAM_ID", help="Team to join")

    rename = sub.add_parser("rename", help="Rename a player")
    rename.add_argument("player_id")
    rename.add_argument("name")

    move = sub.add_parser("move", help="Move a player to another team")
    move.add_argument("player_id")
    g = move.add_mutually_exclusive_group(required=True)
    g.add_argument("--team", metavar="TEAM_ID", help="New team")
    g.add_argument("--no-team", action="store_true", help="Leave the current team")

    delete = sub.add_parser("delete", help="Delete a player and all of their matches")
    delete.add_argument("player_id")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    with open_service(args.db) as svc:
        try:
            if args.command == "list":
                players = svc.list_players()
                if args.json:
                    print(dump_json(players))
                elif not players:
                    print("No players registered.")
                else:
                    for pl in players:
                        print(f"{pl.id}  {pl.name}  team={pl.team_id or '-'}")
            elif args.command == "add":
                player = svc.register_player(args.name, team_id=args.team)
                print(f"Registered {player.name} [id={player.id}]")
            elif args.command == "rename":
                player = svc.update_player(args.player_id, name=args.name)
                print(f"Renamed {player.id} to {player.name}")
            elif args.command == "move":
                player = svc.update_player(
                    args.player_id, team_id=args.team, clear_team=bool(args.no_team)
                )
                print(f"{player.name} now in team {player.team_id or '-'}")
            else:
                removed = svc.delete_player(args.player_id)
                print(f"Deleted {args.player_id} ({removed} matches removed)")
        except REQUEST_ERRORS as exc:
            return report_rejected(exc)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

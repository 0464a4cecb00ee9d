#!/usr/bin/env python
"""Parse a single paste and print it back in normalized form."""
import argparse
import json
import logging
from pathlib import Path
from dotenv import load_dotenv

from pastebook.config import Config
from pastebook.teams import format_team, parse_team_paste

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("path", help="Paste file")
    parser.add_argument("--json", action="store_true", help="Print the parsed team as JSON")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=Config().log_level)

    try:
        paste = Path(args.path).read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}")
        exit(1)

    if not paste.strip():
        print("Error: please provide a team paste")
        exit(1)

    team = parse_team_paste(paste)

    if args.json:
        print(json.dumps(team.to_dict(), indent=2))
    else:
        print(format_team(team))

if __name__ == "__main__":
    main()

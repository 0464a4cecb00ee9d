#!/usr/bin/env python
"""Parse a directory of team pastes into JSONL team records."""
import argparse
import logging
from pathlib import Path
from dotenv import load_dotenv
from tqdm import tqdm

from pastebook.config import Config
from pastebook.records.builder import build_record

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("input", nargs="?", help="Directory of paste files")
    parser.add_argument("--output", help="Output JSONL file")
    parser.add_argument("--strategy", help="Strategy notes to attach to every record")
    args = parser.parse_args()

    load_dotenv()
    cfg = Config()
    logging.basicConfig(level=cfg.log_level)

    input_dir = Path(args.input or cfg.pool.teams_dir)
    output_path = Path(args.output) if args.output else input_dir.with_suffix(".records.jsonl")

    if not input_dir.is_dir():
        print(f"Error: team directory not found: {input_dir}")
        exit(1)

    success = 0
    skipped = 0

    with open(output_path, "w", encoding="utf-8") as f_out:
        for paste_file in tqdm(sorted(input_dir.glob(cfg.pool.pattern)), desc="Parsing"):
            try:
                paste = paste_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logging.warning(f"Skipping {paste_file.name}: {e}")
                skipped += 1
                continue

            try:
                record = build_record(
                    paste,
                    strategy=args.strategy,
                )
            except ValueError as e:
                logging.warning(f"Skipping {paste_file.name}: {e}")
                skipped += 1
                continue

            if record.team_name == cfg.parser.default_team_name:
                record = record.model_copy(update={"team_name": paste_file.stem})
            f_out.write(record.model_dump_json() + "\n")
            success += 1

    print(f"Wrote {success} records to {output_path}, {skipped} skipped")

if __name__ == "__main__":
    main()

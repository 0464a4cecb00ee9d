#!/usr/bin/env python
"""Compute statistics about a pool of team pastes."""
import argparse
import logging
from pathlib import Path
from collections import Counter
from dotenv import load_dotenv

from pastebook.config import Config
from pastebook.teams.loader import TeamPool

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("path", nargs="?", help="Path to team directory")
    parser.add_argument("--format", help="Only count teams detected as this format")
    parser.add_argument("--generation", help="Only count teams detected as this generation")
    args = parser.parse_args()

    load_dotenv()
    cfg = Config()
    logging.basicConfig(level=cfg.log_level)

    try:
        pool = TeamPool.from_directory(Path(args.path or cfg.pool.teams_dir), pattern=cfg.pool.pattern)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        exit(1)

    pool = pool.filter(format=args.format, generation=args.generation)

    name_counts = Counter()
    item_counts = Counter()
    ability_counts = Counter()
    format_counts = Counter()
    generation_counts = Counter()

    for team in pool:
        format_counts[team.format or "Unknown"] += 1
        generation_counts[team.generation or "Unknown"] += 1
        for mon in team.pokemon:
            name_counts[mon.name] += 1
            if mon.item:
                item_counts[mon.item] += 1
            if mon.ability:
                ability_counts[mon.ability] += 1

    print(f"\n=== Team Pool Statistics ===")
    print(f"Total teams: {len(pool)}")

    print(f"\nFormats:")
    for label, count in format_counts.most_common():
        print(f"  {label}: {count}")

    print(f"\nGenerations:")
    for label, count in generation_counts.most_common():
        print(f"  {label}: {count}")

    print(f"\nTop 10 Pokemon:")
    for name, count in name_counts.most_common(10):
        print(f"  {name}: {count}")

    print(f"\nTop 10 Items:")
    for item, count in item_counts.most_common(10):
        print(f"  {item}: {count}")

    print(f"\nTop 10 Abilities:")
    for ability, count in ability_counts.most_common(10):
        print(f"  {ability}: {count}")

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Разбор сохранённого вывода KNP (-tab) в дерево BList.

    python main.py data/sample.knp --json out.jsonl
    knp -tab < input.juman | python main.py
"""
import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from knp_tree.config import load_config
from knp_tree.core.errors import ParseError
from knp_tree.ingestion.loader import KNPFileLoader
from knp_tree.parsers.knp_parser import KNPParser

logger = logging.getLogger(__name__)
console = Console()


def build_summary(sentences) -> Table:
    table = Table(title="📈 KNP parse summary")
    table.add_column("S-ID", style="cyan")
    table.add_column("Bunsetsu", style="green")
    table.add_column("Tags", style="green")
    table.add_column("PAS", style="magenta")
    table.add_column("Rels", style="magenta")

    for blist in sentences:
        tags = blist.tags
        table.add_row(
            blist.sid or "-",
            str(len(blist.bunsetsus)),
            str(len(tags)),
            str(sum(1 for t in tags if t.pas is not None)),
            str(sum(len(t.rels) for t in tags)),
        )
    return table


def main(argv=None) -> int:
    arg_parser = argparse.ArgumentParser(description="Parse KNP -tab output")
    arg_parser.add_argument("input", nargs="?", help="KNP output file (stdin if omitted)")
    arg_parser.add_argument("--config", default=None, help="YAML settings file")
    arg_parser.add_argument("--json", default=None, help="Write parsed sentences as JSON lines")
    arg_parser.add_argument("--skip-invalid", action="store_true", help="Skip sentences that fail to parse")
    arg_parser.add_argument("--debug", action="store_true")
    args = arg_parser.parse_args(argv)

    settings = load_config(Path(args.config) if args.config else None)
    level = logging.DEBUG if args.debug else getattr(logging, str(settings["logging"]["level"]).upper(), logging.INFO)
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = KNPParser(settings["parser"]["breaking_pattern"])
    skip_invalid = args.skip_invalid or bool(settings["parser"].get("skip_invalid"))

    if args.input:
        stream = KNPFileLoader(args.input, parser=parser, skip_invalid=skip_invalid).load_stream()
    else:
        stream = parser.parse_stream(sys.stdin, skip_invalid=skip_invalid)

    sentences = []
    try:
        for blist in tqdm(stream, desc="sentences", unit="sent"):
            sentences.append(blist)
    except ParseError as e:
        console.print(f"[bold red]❌ Parse error: {e}[/]")
        return 1

    if args.json:
        with open(args.json, "w", encoding="utf-8") as out:
            for blist in sentences:
                out.write(blist.model_dump_json() + "\n")
        console.print(f"💾 Saved {len(sentences)} sentences to {args.json}")

    console.print(build_summary(sentences))
    return 0


if __name__ == "__main__":
    sys.exit(main())

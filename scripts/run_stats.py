"""Run configured streaming statistics over a numeric stream."""
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Iterator, TextIO

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import RollstatsConfig, load_config
from rollstats import build_from_config, to_record


logger = logging.getLogger(__name__)


def read_values(stream: TextIO) -> Iterator[float]:
    """Yield floats from whitespace/newline separated text, skipping blanks and '#' comments."""
    for line_no, line in enumerate(stream, start=1):
        line = line.split('#', 1)[0].strip()
        if not line:
            continue
        for token in line.replace(',', ' ').split():
            try:
                yield float(token)
            except ValueError:
                logger.warning(f"Skipping non-numeric token {token!r} on line {line_no}")


def main():
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="rollstats streaming statistics")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file (default: config/config.yaml, else built-in defaults)"
    )
    parser.add_argument(
        "--input",
        type=str,
        help="File with numeric values (default: stdin)"
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        help="Write final accumulator states to this NDJSON file"
    )
    
    args = parser.parse_args()
    
    # Load config
    if args.config:
        config = load_config(args.config)
    else:
        try:
            config = load_config()
        except FileNotFoundError:
            config = RollstatsConfig()
    
    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
        stream=sys.stderr,
    )
    
    stat_configs = config.stream.resolved_statistics()
    stats = {cfg.name: build_from_config(cfg) for cfg in stat_configs}
    logger.info(f"Computing {len(stats)} statistics: {', '.join(stats)}")
    
    source = open(args.input, 'r') if args.input else sys.stdin
    count = 0
    try:
        writer = None
        if config.output_format == "csv":
            writer = csv.writer(sys.stdout)
            writer.writerow(["value", *stats])
        
        for x in read_values(source):
            row = {"value": x}
            for name, stat in stats.items():
                stat.update(x)
                row[name] = stat.get()
            count += 1
            
            if writer is not None:
                writer.writerow(row.values())
            else:
                sys.stdout.write(json.dumps(row, separators=(',', ':')) + '\n')
    finally:
        if source is not sys.stdin:
            source.close()
    
    logger.info(f"Processed {count} values")
    
    if args.snapshot:
        with open(args.snapshot, 'w') as f:
            for name, stat in stats.items():
                f.write(json.dumps({"name": name, **to_record(stat)}, separators=(',', ':')) + '\n')
        logger.info(f"Snapshots written to {args.snapshot}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
import sys

from maumau.config import build_config_from_cli
from maumau.engine.loop import run_many
from maumau.errors import MauMauError
from maumau.io.summaries import format_report

if __name__ == "__main__":
    cfg, args = build_config_from_cli()
    try:
        out = run_many(cfg)
    except MauMauError as e:
        print(f"fatal: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
    print(format_report(out, cfg.ais))

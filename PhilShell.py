# PhilShell.py
import argparse
import logging
import sys
from dataclasses import replace

from pshp.config import load_config
from pshp.core import init_core
from pshp.errors import AllocationError
from pshp.model.schema import EXIT_FAILURE


def _parse_args(argv):
    ap = argparse.ArgumentParser(prog="pshp", description="Phil Shell Pro")
    ap.add_argument("--config", default=None, help="path to shell.json")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return ap.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)

    cfg = load_config(args.config)
    if args.log_level:
        cfg = replace(cfg, log_level=args.log_level.upper())

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.WARNING),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    core = init_core(cfg)
    try:
        return core.loop()
    except AllocationError as e:
        core.report(str(e))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        core.write("\n")
        core.flush()
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())

"""Send one log event to Loggly from the command line."""

import argparse
import dataclasses
import logging
import sys

from loggly_tree.client import ConfigurationError
from loggly_tree.config import load_config
from loggly_tree.tree import LogglyTree

LEVELS = ("debug", "info", "warn", "error")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Post a log event to Loggly")
    parser.add_argument("message", help="text of the event")
    parser.add_argument("--level", choices=LEVELS, default="info")
    parser.add_argument("--token", type=str, default=None)
    parser.add_argument("--endpoint", type=str, default=None)
    parser.add_argument("--tag", type=str, default=None, help="tag or CSV of tags")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)
    args = parse_args(argv)

    overrides = {}
    if args.token is not None:
        overrides["token"] = args.token
    if args.endpoint is not None:
        overrides["endpoint"] = args.endpoint
    if args.tag is not None:
        overrides["tags"] = args.tag

    failures: list[str] = []

    def report(line: str):
        failures.append(line)
        print(line, file=sys.stderr, flush=True)

    try:
        config = dataclasses.replace(load_config(args.config), **overrides)
        tree = LogglyTree.from_config(config, diagnostic=report)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 2

    logger.info("Sending %s event to %s", args.level.upper(), tree.client.url)
    getattr(tree, args.level)("%s", args.message)
    tree.close()

    if failures:
        return 1
    logger.info("Event delivered")
    return 0


if __name__ == "__main__":
    sys.exit(main())

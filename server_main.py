"""Entry point for the local Loggly-compatible receiver."""

import argparse
import logging
import os
import sys

from loggly_tree.receiver import create_app


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    parser = argparse.ArgumentParser(description="Local Loggly inputs receiver")
    parser.add_argument("--host", type=str, default=os.environ.get("RECEIVER_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("RECEIVER_PORT", "8080")))
    parser.add_argument("--token", type=str, default=os.environ.get("RECEIVER_TOKEN"))
    args = parser.parse_args(argv)

    logging.getLogger(__name__).info(
        "Starting receiver on %s:%d (token=%s)", args.host, args.port, args.token or "any",
    )
    app = create_app(token=args.token)
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()

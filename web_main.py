"""Web entry point — starts the Flask app."""

import logging
import os
import sys

from hamlog_adif.config import Config
from hamlog_adif.web import create_app


def main() -> None:
    config = Config(os.environ.get("CONFIG_PATH", "config.yaml"))
    logging.basicConfig(
        level=config["logging"]["level"],
        format="%(asctime)s [ADIFGEN] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    app = create_app(config)
    server = config["server"]
    app.run(host=server["host"], port=server["port"], debug=server["debug"])


if __name__ == "__main__":
    main()

"""Entry point for `python -m app` and the `json-validator` console script."""

import logging
import sys

from pydantic import ValidationError


def main() -> int:
    try:
        from app.main import run
    except ValidationError as e:
        # Settings are read at import time; bad HOST/PORT/WORKERS values fail here
        logging.basicConfig(level=logging.ERROR, stream=sys.stderr)
        logging.getLogger("app").error("Configuration error: %s", e)
        return 1
    return run()


if __name__ == "__main__":
    sys.exit(main())

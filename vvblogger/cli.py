"""Command line entry point: convert a note and write its page."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from .builder import TemplateError, build
from .config import load_config, make_config
from .converter import read

log = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert the note named on the command line into an HTML page."""
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(format="%(message)s", level=logging.INFO)
    try:
        make_config()
        if not args:
            log.error("use the target filename as an argument")
            return 1
        config = load_config()
        build(read(args[0], config), config)
    except (OSError, ValueError, TemplateError) as error:
        log.error("%s", error)
        return 1
    return 0
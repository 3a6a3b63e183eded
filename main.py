# -*- coding: utf-8 -*-
from __future__ import annotations

import sys
from typing import Optional, Sequence

from setdefaultapps.app import SetDefaultAppsApp
from setdefaultapps.config import parse_args
from setdefaultapps.logs import setup_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    if sys.platform != "darwin":
        print("SetDefaultApps is macOS-only.")
        return 1
    config = parse_args(argv)
    setup_logging(config.log_file)
    app = SetDefaultAppsApp(config)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())

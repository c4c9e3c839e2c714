"""``python -m demo_api``: same as ``demo-api serve``."""

import sys

from demo_api.cli import main

if __name__ == "__main__":
    main(["serve", *sys.argv[1:]])

# SPDX-License-Identifier: MIT

from solarwork.cleanup import register_cleanup
from solarwork.initialize import initialize
from solarwork.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()

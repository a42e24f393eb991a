"""main.py

`python main.py` entry point: configure logging, then start the interactive menu.
"""

import logging

from cli import run_cli


def main() -> None:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    run_cli()


if __name__ == '__main__':
    main()

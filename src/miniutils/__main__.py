"""
Allow ``python -m miniutils`` to run the aggregate CLI.
"""

from miniutils.cli.main_cli import main

if __name__ == "__main__":
    main()

"""Entry point module for executing jsonsalvage as a Python module.

This module enables running jsonsalvage via `python -m jsonsalvage`, which
delegates to the CLI main function.
"""

from jsonsalvage.cli import main

if __name__ == "__main__":
    main()

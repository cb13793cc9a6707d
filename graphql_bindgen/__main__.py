"""Run the binding generator: ``python -m graphql_bindgen``."""

import sys

from .codegen.cli_integration import main

if __name__ == "__main__":
    sys.exit(main())

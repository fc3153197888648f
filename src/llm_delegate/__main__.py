"""Allow ``python -m llm_delegate``."""

import sys

from llm_delegate.cli import main

if __name__ == "__main__":
    sys.exit(main())

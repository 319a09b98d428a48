"""Entry point: python -m openapi_models INPUT [OUTPUT]"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

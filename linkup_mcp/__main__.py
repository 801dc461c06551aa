from __future__ import annotations

import sys

from linkup_mcp.cli import main

if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import sys

from activity_digest.export.activity_digest_exporter import main

if __name__ == "__main__":
    sys.exit(main())

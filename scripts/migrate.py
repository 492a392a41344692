#!/usr/bin/env python3
"""
Create the Lingle result store schema
"""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from lingle.database import init_db  # noqa: E402


def main(db_path: str | None = None) -> int:
    try:
        db_manager = init_db(db_path)
    except Exception as e:
        print(f"❌ Migration error: {e}")
        return 1

    print(f"✅ Migrations applied to {db_manager.db_connection.db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))

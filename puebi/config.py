"""Environment-driven defaults for the PUEBI sanitizer CLI.

WHY: Deployments that sanitize bank notification templates usually need a
few extra protected words (their own brand, product names). Pointing the
CLI at a rules file through the environment means scripts and cron jobs
do not have to repeat --rules on every call.

HOW: python-dotenv loads a .env file from the working directory on import;
the values below are read once from os.environ.

RULES:
- The library API (puebi.sanitize) never reads the environment; only the
  CLI uses these defaults.
- PUEBI_RULES_FILE: path to a JSON rules file, empty means none.
- PUEBI_LOG_LEVEL: logging level name for the CLI, default WARNING.
"""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_RULES_FILE = os.getenv("PUEBI_RULES_FILE", "").strip()
DEFAULT_LOG_LEVEL = os.getenv("PUEBI_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Sample notification used by `python -m puebi --demo`.
DEMO_MESSAGE = (
    "Hai Luqman, Anda telah melakukan Transfer Real Time dari rekening "
    "1023613267 sejumlah Rp 12.000. Pastikan transaksi ini benar dilakukan "
    "atau Hubungi Call Center 1500 035."
)

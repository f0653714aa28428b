"""
Esecuzione del trimming su un singolo messaggio.

Legge il corpo email da file (o stdin) e stampa:
  - il testo nuovo (default)
  - la parte rimossa (--elided)
  - il report JSON completo (--explain), validato con TRIM_REPORT_SCHEMA
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from jsonschema import validate

from mailtrim.config import settings
from mailtrim.config.schemas import TRIM_REPORT_SCHEMA
from mailtrim.trimming.pipeline import explain, split

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("run_trim")

# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------
parser = argparse.ArgumentParser(description="Strip quoted history from a plain-text email body.")
parser.add_argument("path", nargs="?", help="Email body file (default: stdin)")
parser.add_argument("--elided", action="store_true", help="Print the removed part instead")
parser.add_argument("--explain", action="store_true", help="Print the JSON trim report")
args = parser.parse_args()

# ---------------------------------------------------------------------------
# Load input
# ---------------------------------------------------------------------------
logger.info("Caricamento input...")

if args.path:
    raw = Path(args.path).read_bytes()
    logger.info("Input file        : %s (%d bytes)", args.path, len(raw))
else:
    raw = sys.stdin.buffer.read()
    logger.info("Input stdin       : %d bytes", len(raw))

# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if args.explain:
    payload = explain(raw).model_dump()
    validate(instance=payload, schema=TRIM_REPORT_SCHEMA["schema"])
    logger.info("Codes             : %s", payload["codes"])
    logger.info("Cut               : %d (rule=%s)", payload["cut"], payload["rule"])
    print(json.dumps(payload, ensure_ascii=False, indent=2))
else:
    kept, elided = split(raw)
    logger.info("Kept / elided     : %d / %d chars", len(kept), len(elided))
    print(elided if args.elided else kept)

logger.info("Trimming completato.")

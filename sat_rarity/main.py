"""sat-rarity — positional rarity classification for sat ranges.

This is the application entry point.  It wires the SatIndex,
RangeQueryHandler, and JSON-RPC endpoint together.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from sat_rarity.api.rpc import create_rpc_router
from sat_rarity.config import settings
from sat_rarity.core.range_query import RangeQueryHandler
from sat_rarity.core.range_table import range_table
from sat_rarity.store.sat_index import InMemorySatIndex

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

logger = logging.getLogger(__name__)

# ── Index ────────────────────────────────────────────────────────────────────

if settings.index_path:
    index = InMemorySatIndex.from_file(settings.index_path)
else:
    logger.warning("SAT_RARITY_INDEX_PATH not set; serving an empty index")
    index = InMemorySatIndex()

if settings.eager_range_tables:
    range_table.warm()

handler = RangeQueryHandler(index)

# ── App ──────────────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    description="Positional rarity classification for sat ranges",
    version="0.1.0",
    debug=settings.debug,
)

# ── Routes ───────────────────────────────────────────────────────────────────

app.include_router(create_rpc_router(handler))


# ── Health ───────────────────────────────────────────────────────────────────

@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "sat_index": index.has_sat_index,
        "outputs": index.output_count,
        "range_tables_built": range_table.is_built,
        "curated_kinds": [kind.value for kind in range_table.kinds],
    }

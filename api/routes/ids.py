"""Id minting and decoding routes."""

from fastapi import APIRouter, Path, Query
from fastapi.concurrency import run_in_threadpool

from generator.layout import MAXIMUM_ID
from generator.resolve import decompose

router = APIRouter(prefix="/api/v1", tags=["ids"])

MAX_BATCH = 1000

# Set by app.py
_generator = None


def init(generator):
    """Initialize with the generator reference."""
    global _generator
    _generator = generator


def _mint(count):
    return [_generator.next_id() for _ in range(count)]


@router.post("/ids")
async def mint():
    """Mint one id and return it with its decoded fields."""
    # next_id may spin for up to a period, keep it off the event loop
    [suid] = await run_in_threadpool(_mint, 1)
    return decompose(_generator.landmark_year, suid).to_dict()


@router.get("/ids")
async def mint_batch(count: int = Query(1, ge=1, le=MAX_BATCH)):
    """Mint ``count`` ids in one serialized batch."""
    ids = await run_in_threadpool(_mint, count)
    return {"count": len(ids), "ids": ids, "ids_str": [str(suid) for suid in ids]}


@router.get("/ids/{suid}")
async def resolve(suid: int = Path(ge=0, le=MAXIMUM_ID)):
    """Decode an id using this service's landmark year."""
    return decompose(_generator.landmark_year, suid).to_dict()

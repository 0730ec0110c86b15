"""What happens to dependent rows when a parent row is deleted.

These run synchronously against the store (inside ``asyncio.to_thread``) so a
multi-step delete can hold one transaction.
"""

import logging

from models.chapter import Beat, Chapter
from models.database import Database
from models.novel import Part

logger = logging.getLogger(__name__)


def delete_part(db: Database, part_id: str) -> int:
    """Remove a part. Its chapters are orphaned, not deleted.

    Chapters keep pointing at the removed part_id; readers treat part_id as
    optional everywhere.
    """
    removed = db.delete(Part.__table__, id=part_id)
    logger.info("Part %s deleted (chapters left in place)", part_id)
    return removed


def delete_chapter(db: Database, chapter_id: str) -> int:
    """Remove a chapter and every beat attached to it in one transaction.

    Returns the number of beats removed.
    """
    with db.transaction():
        db.delete(Chapter.__table__, id=chapter_id)
        beats = db.delete(Beat.__table__, chapter_id=chapter_id)
    logger.info("Chapter %s deleted with %d beat(s)", chapter_id, beats)
    return beats


def delete_beat(db: Database, beat_id: str) -> int:
    removed = db.delete(Beat.__table__, id=beat_id)
    logger.info("Beat %s deleted", beat_id)
    return removed

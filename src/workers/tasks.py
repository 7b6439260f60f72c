import logging

from celery import Task
from sqlalchemy.orm import Session

from config import settings
from models.database import SessionLocal
from services.brand_assignment import assign_brands
from workers.celery_app import celery_app

logger = logging.getLogger(__name__)


class DatabaseTask(Task):
    _db: Session | None = None

    @property
    def db(self) -> Session:
        if self._db is None:
            self._db = SessionLocal()
        return self._db

    def after_return(self, *args, **kwargs):
        if self._db is not None:
            self._db.close()
            self._db = None


@celery_app.task(base=DatabaseTask, bind=True)
def assign_brands_task(self: DatabaseTask, country_code: str, source: str) -> dict:
    logger.info(f"Starting brand assignment task: country={country_code}, source={source}")
    db = self.db if settings.persist_mappings else None

    try:
        summary = assign_brands(country_code, source, db=db)
        if db is not None:
            db.commit()
    except Exception as e:
        logger.error(f"Error in brand assignment for {source}/{country_code}: {e}", exc_info=True)
        if db is not None:
            db.rollback()
        raise

    logger.info(f"Completed brand assignment task: {summary.matched}/{summary.total} products matched")
    return summary.to_dict()

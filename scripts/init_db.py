import logging
from integration.core.config import settings
from integration.db.session import engine
from integration.db.base import Base

logger = logging.getLogger(__name__)

def init():
    Base.metadata.create_all(bind=engine)
    logger.info(f"Schema created for {settings.DATABASE_URL}")

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    init()

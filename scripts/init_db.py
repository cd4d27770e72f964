import logging

from catalog.config import configure_logging, get_settings
from catalog.db.engine import get_engine
from catalog.db.schema import create_schema, drop_schema_quietly

logger = logging.getLogger(__name__)


def main():
    configure_logging(get_settings().LOG_LEVEL)
    engine = get_engine()
    drop_schema_quietly(engine)
    create_schema(engine)
    logger.info("Catalog schema created at %s", engine.url)


if __name__ == "__main__":
    main()

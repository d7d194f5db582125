import importlib

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from shopcart.config import settings
from shopcart.utils.logging import get_logger

log = get_logger("shopcart.db")

DATABASE_URL = settings.DATABASE_URL
_is_sqlite = DATABASE_URL.startswith("sqlite")

engine = create_engine(
    DATABASE_URL,
    future=True,
    echo=False,
    # requests are served from a thread pool
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# largest value an INTEGER column holds (signed 64-bit)
SQL_INT_MAX = 2**63 - 1


if _is_sqlite:

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Every model module must be imported before create_all so metadata is populated.
MODEL_MODULES = [
    "shopcart.models.user",
    "shopcart.models.item",
    "shopcart.models.cart",
    "shopcart.models.cart_line",
    "shopcart.models.order",
]


def init_db(reset: bool = False):
    """
    Initialize DB schema.

    Behavior:
      - If `reset` is passed or RESET_DB is set, drop & recreate tables.
      - Otherwise, leave existing tables in place.
      - If SEED_SAMPLE_DATA is set and the catalog is empty, insert the sample items.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset or settings.RESET_DB:
        log.info("Resetting database (dropping all tables)")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database initialized: %s", sorted(Base.metadata.tables))

    if settings.SEED_SAMPLE_DATA:
        from shopcart.db.seed import seed_sample_items

        s = SessionLocal()
        try:
            created = seed_sample_items(s)
            if created:
                log.info("Seeded %d sample items", created)
        finally:
            s.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

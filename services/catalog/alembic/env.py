from sqlalchemy import create_engine, pool
from alembic import context
from catalog_service.core.config import settings
from catalog_service.db.session import Base
import catalog_service.db.models  # noqa

# Both services may share one database, so each keeps its own version table.
VERSION_TABLE = "alembic_version_catalog"

config = context.config
url = config.get_main_option("sqlalchemy.url") or settings.POSTGRES_DSN
options = dict(target_metadata=Base.metadata, version_table=VERSION_TABLE, compare_type=True)

if context.is_offline_mode():
    context.configure(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"}, **options)
    with context.begin_transaction():
        context.run_migrations()
else:
    with create_engine(url, poolclass=pool.NullPool).connect() as connection:
        context.configure(connection=connection, **options)
        with context.begin_transaction():
            context.run_migrations()

from logging.config import fileConfig
from sqlalchemy import pool, create_engine
from alembic import context

from bloodlink.core.config import settings
from bloodlink.core.database import Base

from bloodlink.models import user, donor_profile, blood_request, event  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def get_url():
    if getattr(settings, "DATABASE_URL", None):
        return settings.DATABASE_URL
    ini_url = config.get_main_option("sqlalchemy.url")
    if not ini_url or ini_url.strip() == "DATABASE_URL":
        raise RuntimeError("DATABASE_URL not found in .env, environment variables, or settings.")

    return ini_url

def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode."""
    url = get_url()
    connectable = create_engine(url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

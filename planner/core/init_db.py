from planner.core.database import engine, Base
import planner.models  # noqa: F401  registers the tables on Base.metadata

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    await engine.dispose()

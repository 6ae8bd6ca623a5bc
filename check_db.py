"""Connectivity check: connect with the configured settings and print row counts per table."""

import asyncio
import sys

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.db.session import build_engine, build_session_maker
from app.models import Exercise, Run, SleepLog, User, WeightLog, Workout

MODELS = [User, Workout, Exercise, Run, SleepLog, WeightLog]


async def check_data() -> int:
    engine = build_engine(get_settings())
    session_maker = build_session_maker(engine)
    print("Attempting to connect to database...")
    try:
        async with session_maker() as session:
            for model in MODELS:
                result = await session.execute(select(func.count()).select_from(model))
                print(f"Table '{model.__tablename__}' row count: {result.scalar()}")
    except SQLAlchemyError as e:
        print(f"Connection failed: {e}")
        return 1
    finally:
        await engine.dispose()
    print("Connection successful.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(check_data()))

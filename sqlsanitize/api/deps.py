# api/deps.py
from sqlsanitize.core.database import mongo_db


async def get_db():
    """Yield a MongoDB database handle for the request."""
    async with mongo_db() as db:             # invoke the context-manager
        yield db

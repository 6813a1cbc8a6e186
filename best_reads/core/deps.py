"""
Dependencies FastAPI compartilhadas pelos endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from best_reads.db.session import get_db, get_engine

# Uma sessão por request
DbSession = Annotated[AsyncSession, Depends(get_db)]

# Engine da aplicação (healthcheck)
DbEngine = Annotated[AsyncEngine, Depends(get_engine)]

"""FastAPI dependencies for dependency injection.

Provides:
- Database session
- Variant service bound to that session
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.config import settings
from catalog.infra.database import get_db_session
from catalog.services.variant_repository import VariantRepository
from catalog.services.variant_service import VariantService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the request."""
    async with get_db_session() as session:
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_variant_service(db: DbSession) -> VariantService:
    """Get the variant service bound to the request session."""
    return VariantService(
        VariantRepository(db),
        placeholder_image=settings.placeholder_image_url,
    )


Service = Annotated[VariantService, Depends(get_variant_service)]

"""Genre service."""

from typing import Any, List, Optional, cast

from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from .crud import genre_crud
from .schemas import GenreCreate, GenreRead

logger = get_logger(__name__)


class GenreService:
    """Service for reading and seeding genres."""

    async def create_genre(self, genre_data: GenreCreate, db: AsyncSession) -> GenreRead:
        created_genre = cast(Any, await genre_crud.create(db=db, object=genre_data))

        logger.info("Genre created", extra={"genre_id": created_genre.id})

        return GenreRead.model_validate(created_genre)

    async def get_genre(self, genre_id: int, db: AsyncSession) -> Optional[GenreRead]:
        genre = await genre_crud.get(db=db, id=genre_id)
        if not genre:
            return None

        return GenreRead(**genre)

    async def get_genres(self, db: AsyncSession) -> List[GenreRead]:
        """Get all genres ordered by name."""
        stmt = await genre_crud.select(sort_columns="name", sort_orders="asc")

        result = await db.execute(stmt)

        return [GenreRead(**row) for row in result.mappings().all()]

    async def count_genres(self, db: AsyncSession) -> int:
        return await genre_crud.count(db=db)

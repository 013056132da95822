"""Author management service."""

from typing import Any, List, Optional, cast

from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from .crud import author_crud
from .schemas import AuthorCreate, AuthorRead, AuthorUpdate

logger = get_logger(__name__)


class AuthorService:
    """Service for managing authors.

    Reads return ``None`` rather than raising when the author does not exist;
    the web layer decides whether that is a 404 or a redirect.
    """

    async def create_author(
        self,
        author_data: AuthorCreate,
        db: AsyncSession,
    ) -> AuthorRead:
        """Persist a new author.

        Args:
            author_data: Validated author data
            db: Database session

        Returns:
            The created author with its assigned id
        """
        created_author = cast(Any, await author_crud.create(db=db, object=author_data))

        logger.info("Author created", extra={"author_id": created_author.id})

        return AuthorRead.model_validate(created_author)

    async def get_author(
        self,
        author_id: int,
        db: AsyncSession,
    ) -> Optional[AuthorRead]:
        """Get a specific author, or ``None`` when absent."""
        author = await author_crud.get(db=db, id=author_id)
        if not author:
            return None

        return AuthorRead(**author)

    async def get_authors(self, db: AsyncSession) -> List[AuthorRead]:
        """Get all authors ordered by family name, then first name."""
        stmt = await author_crud.select(sort_columns=["family_name", "first_name"], sort_orders=["asc", "asc"])

        result = await db.execute(stmt)

        return [AuthorRead(**row) for row in result.mappings().all()]

    async def update_author(
        self,
        author_id: int,
        update_data: AuthorUpdate,
        db: AsyncSession,
    ) -> Optional[AuthorRead]:
        """Replace every mutable field of an author.

        Returns:
            The updated author, or ``None`` if no author has ``author_id``
        """
        if not await author_crud.exists(db=db, id=author_id):
            return None

        await author_crud.update(db=db, object=update_data.model_dump(), id=author_id)

        logger.info("Author updated", extra={"author_id": author_id})

        return await self.get_author(author_id, db)

    async def delete_author(
        self,
        author_id: int,
        db: AsyncSession,
    ) -> bool:
        """Delete an author by id.

        Dependent books are not checked here; callers guard the delete.

        Returns:
            True if an author was deleted
        """
        if not await author_crud.exists(db=db, id=author_id):
            return False

        await author_crud.delete(db=db, id=author_id)

        logger.info("Author deleted", extra={"author_id": author_id})
        return True

    async def count_authors(self, db: AsyncSession) -> int:
        return await author_crud.count(db=db)

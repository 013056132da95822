"""Book instance management service."""

from typing import Any, List, Optional, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...infrastructure.logging import get_logger
from .crud import book_instance_crud
from .models import BookInstance
from .schemas import BookInstanceCreate, BookInstanceRead, BookInstanceUpdate

logger = get_logger(__name__)


class BookInstanceService:
    """Service for managing the lendable copies of books.

    Reads join the copy's book so pages can show its title and link without
    a second round trip.
    """

    async def create_book_instance(
        self,
        book_instance_data: BookInstanceCreate,
        db: AsyncSession,
    ) -> BookInstanceRead:
        """Persist a new book instance.

        Args:
            book_instance_data: Validated book instance data
            db: Database session

        Returns:
            The created instance with its assigned id
        """
        created = cast(Any, await book_instance_crud.create(db=db, object=book_instance_data))

        logger.info("Book instance created", extra={"book_instance_id": created.id, "book_id": created.book_id})

        return BookInstanceRead(
            id=created.id,
            book_id=created.book_id,
            imprint=created.imprint,
            status=created.status,
            due_back=created.due_back,
            created_at=created.created_at,
            updated_at=created.updated_at,
        )

    async def get_book_instance(
        self,
        book_instance_id: int,
        db: AsyncSession,
    ) -> Optional[BookInstanceRead]:
        """Get one instance with its book joined, or ``None`` when absent."""
        stmt = (
            select(BookInstance)
            .options(selectinload(BookInstance.book))
            .where(BookInstance.id == book_instance_id)
            .execution_options(populate_existing=True)
        )

        result = await db.execute(stmt)
        book_instance = result.scalar_one_or_none()

        if book_instance is None:
            return None

        return BookInstanceRead.model_validate(book_instance)

    async def get_book_instances(self, db: AsyncSession) -> List[BookInstanceRead]:
        """Get every instance with its book joined."""
        stmt = select(BookInstance).options(selectinload(BookInstance.book)).order_by(BookInstance.id)

        result = await db.execute(stmt)

        return [BookInstanceRead.model_validate(book_instance) for book_instance in result.scalars().all()]

    async def update_book_instance(
        self,
        book_instance_id: int,
        update_data: BookInstanceUpdate,
        db: AsyncSession,
    ) -> Optional[BookInstanceRead]:
        """Replace book, imprint, status and due date of an instance.

        Returns:
            The updated instance, or ``None`` if no instance has ``book_instance_id``
        """
        if not await book_instance_crud.exists(db=db, id=book_instance_id):
            return None

        await book_instance_crud.update(db=db, object=update_data.model_dump(), id=book_instance_id)

        logger.info("Book instance updated", extra={"book_instance_id": book_instance_id})

        return await self.get_book_instance(book_instance_id, db)

    async def delete_book_instance(
        self,
        book_instance_id: int,
        db: AsyncSession,
    ) -> bool:
        """Delete an instance by id; returns False when there was nothing to delete."""
        if not await book_instance_crud.exists(db=db, id=book_instance_id):
            return False

        await book_instance_crud.delete(db=db, id=book_instance_id)

        logger.info("Book instance deleted", extra={"book_instance_id": book_instance_id})
        return True

    async def count_book_instances(self, db: AsyncSession, status: Optional[str] = None) -> int:
        """Count instances, optionally only those with the given status."""
        if status is None:
            return await book_instance_crud.count(db=db)
        return await book_instance_crud.count(db=db, status=status)

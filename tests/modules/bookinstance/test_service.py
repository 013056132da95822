"""Tests for book instance service."""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from locallibrary.modules.bookinstance.schemas import BookInstanceCreate, BookInstanceUpdate
from locallibrary.modules.bookinstance.services import BookInstanceService


@pytest.fixture
def book_instance_service():
    """Create book instance service instance."""
    return BookInstanceService()


@pytest.mark.asyncio
async def test_create_book_instance(book_instance_service: BookInstanceService, db_session: AsyncSession, test_book: dict):
    """Test creating a copy with an explicit status and due date."""
    book_instance_data = BookInstanceCreate(book_id=str(test_book["id"]), imprint="Gollancz", status="Loaned", due_back="2024-03-01")

    result = await book_instance_service.create_book_instance(book_instance_data=book_instance_data, db=db_session)

    assert result.id is not None
    assert result.book_id == test_book["id"]
    assert result.imprint == "Gollancz"
    assert result.status == "Loaned"
    assert result.due_back == date(2024, 3, 1)
    assert result.url == f"/catalog/bookinstance/{result.id}"


@pytest.mark.asyncio
async def test_create_book_instance_defaults_to_maintenance(
    book_instance_service: BookInstanceService, db_session: AsyncSession, test_book: dict
):
    """Test a blank status is stored as Maintenance."""
    book_instance_data = BookInstanceCreate(book_id=test_book["id"], imprint="DAW", status="")

    result = await book_instance_service.create_book_instance(book_instance_data=book_instance_data, db=db_session)

    assert result.status == "Maintenance"
    assert result.due_back is None


@pytest.mark.asyncio
async def test_create_book_instance_for_missing_book_fails(book_instance_service: BookInstanceService, db_session: AsyncSession):
    """Test a copy cannot reference a book that does not exist."""
    book_instance_data = BookInstanceCreate(book_id=99999, imprint="Nowhere Press")

    with pytest.raises(IntegrityError):
        await book_instance_service.create_book_instance(book_instance_data=book_instance_data, db=db_session)


@pytest.mark.asyncio
async def test_get_book_instance_includes_book(
    book_instance_service: BookInstanceService, db_session: AsyncSession, test_book_instance: dict, test_book: dict
):
    """Test the copy is returned with its book title."""
    result = await book_instance_service.get_book_instance(book_instance_id=test_book_instance["id"], db=db_session)

    assert result.id == test_book_instance["id"]
    assert result.book.id == test_book["id"]
    assert result.book.title == test_book["title"]
    assert result.due_back_formatted == "Jun 15, 2020"
    assert result.due_back_yyyy_mm_dd == "2020-06-15"


@pytest.mark.asyncio
async def test_get_book_instance_not_found(book_instance_service: BookInstanceService, db_session: AsyncSession):
    """Test getting non-existent copy."""
    result = await book_instance_service.get_book_instance(book_instance_id=99999, db=db_session)
    assert result is None


@pytest.mark.asyncio
async def test_get_book_instances(
    book_instance_service: BookInstanceService,
    db_session: AsyncSession,
    test_book_instance: dict,
    test_available_instance: dict,
):
    """Test listing every copy with its book."""
    result = await book_instance_service.get_book_instances(db=db_session)

    assert [book_instance.id for book_instance in result] == [test_book_instance["id"], test_available_instance["id"]]
    assert all(book_instance.book is not None for book_instance in result)


@pytest.mark.asyncio
async def test_update_book_instance(
    book_instance_service: BookInstanceService, db_session: AsyncSession, test_book_instance: dict, test_book_2: dict
):
    """Test replacing every field of a copy."""
    update_data = BookInstanceUpdate(book_id=test_book_2["id"], imprint="Reprint", status="Available", due_back="")

    result = await book_instance_service.update_book_instance(
        book_instance_id=test_book_instance["id"], update_data=update_data, db=db_session
    )

    assert result.id == test_book_instance["id"]
    assert result.book_id == test_book_2["id"]
    assert result.book.title == test_book_2["title"]
    assert result.imprint == "Reprint"
    assert result.status == "Available"
    assert result.due_back is None


@pytest.mark.asyncio
async def test_update_book_instance_not_found(book_instance_service: BookInstanceService, db_session: AsyncSession):
    """Test updating non-existent copy."""
    update_data = BookInstanceUpdate(book_id=1, imprint="Nowhere")

    result = await book_instance_service.update_book_instance(book_instance_id=99999, update_data=update_data, db=db_session)
    assert result is None


@pytest.mark.asyncio
async def test_delete_book_instance(
    book_instance_service: BookInstanceService, db_session: AsyncSession, test_book_instance: dict
):
    """Test deleting a copy."""
    result = await book_instance_service.delete_book_instance(book_instance_id=test_book_instance["id"], db=db_session)
    assert result is True

    deleted = await book_instance_service.get_book_instance(book_instance_id=test_book_instance["id"], db=db_session)
    assert deleted is None


@pytest.mark.asyncio
async def test_delete_book_instance_not_found(book_instance_service: BookInstanceService, db_session: AsyncSession):
    """Test deleting non-existent copy."""
    result = await book_instance_service.delete_book_instance(book_instance_id=99999, db=db_session)
    assert result is False


@pytest.mark.asyncio
async def test_count_book_instances_by_status(
    book_instance_service: BookInstanceService,
    db_session: AsyncSession,
    test_book_instance: dict,
    test_available_instance: dict,
):
    """Test counting all copies and only the available ones."""
    assert await book_instance_service.count_book_instances(db=db_session) == 2
    assert await book_instance_service.count_book_instances(db=db_session, status="Available") == 1

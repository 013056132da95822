"""Tests for author service."""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from locallibrary.modules.author.schemas import AuthorCreate, AuthorUpdate
from locallibrary.modules.author.services import AuthorService


@pytest.fixture
def author_service():
    """Create author service instance."""
    return AuthorService()


@pytest.mark.asyncio
async def test_create_author(author_service: AuthorService, db_session: AsyncSession):
    """Test creating a new author."""
    author_data = AuthorCreate(first_name="Ursula", family_name="LeGuin", date_of_birth="1929-10-21")

    result = await author_service.create_author(author_data=author_data, db=db_session)

    assert result.id is not None
    assert result.first_name == "Ursula"
    assert result.family_name == "LeGuin"
    assert result.date_of_birth == date(1929, 10, 21)
    assert result.date_of_death is None
    assert result.name == "LeGuin, Ursula"
    assert result.url == f"/catalog/author/{result.id}"


@pytest.mark.asyncio
async def test_get_author(author_service: AuthorService, db_session: AsyncSession, test_author: dict):
    """Test getting a specific author."""
    result = await author_service.get_author(author_id=test_author["id"], db=db_session)

    assert result.id == test_author["id"]
    assert result.first_name == test_author["first_name"]
    assert result.family_name == test_author["family_name"]
    assert result.lifespan == "Jun 6, 1973 - "


@pytest.mark.asyncio
async def test_get_author_not_found(author_service: AuthorService, db_session: AsyncSession):
    """Test getting non-existent author."""
    result = await author_service.get_author(author_id=99999, db=db_session)
    assert result is None


@pytest.mark.asyncio
async def test_get_authors_sorted_by_family_name(
    author_service: AuthorService, db_session: AsyncSession, test_author: dict, test_author_2: dict
):
    """Test authors are listed by family name."""
    result = await author_service.get_authors(db=db_session)

    assert [author.family_name for author in result] == ["Asimov", "Rothfuss"]


@pytest.mark.asyncio
async def test_update_author(author_service: AuthorService, db_session: AsyncSession, test_author: dict):
    """Test replacing every field of an author."""
    update_data = AuthorUpdate(first_name="Pat", family_name="Rothfuss", date_of_death="2100-01-01")

    result = await author_service.update_author(author_id=test_author["id"], update_data=update_data, db=db_session)

    assert result.id == test_author["id"]
    assert result.first_name == "Pat"
    assert result.date_of_birth is None
    assert result.date_of_death == date(2100, 1, 1)


@pytest.mark.asyncio
async def test_update_author_not_found(author_service: AuthorService, db_session: AsyncSession):
    """Test updating non-existent author."""
    update_data = AuthorUpdate(first_name="Nobody", family_name="Here")

    result = await author_service.update_author(author_id=99999, update_data=update_data, db=db_session)
    assert result is None


@pytest.mark.asyncio
async def test_delete_author(author_service: AuthorService, db_session: AsyncSession, test_author_2: dict):
    """Test deleting an author."""
    result = await author_service.delete_author(author_id=test_author_2["id"], db=db_session)
    assert result is True

    deleted = await author_service.get_author(author_id=test_author_2["id"], db=db_session)
    assert deleted is None


@pytest.mark.asyncio
async def test_delete_author_not_found(author_service: AuthorService, db_session: AsyncSession):
    """Test deleting non-existent author."""
    result = await author_service.delete_author(author_id=99999, db=db_session)
    assert result is False


@pytest.mark.asyncio
async def test_count_authors(author_service: AuthorService, db_session: AsyncSession, test_author: dict, test_author_2: dict):
    assert await author_service.count_authors(db=db_session) == 2

"""Script to seed the catalog with sample genres, authors, books and copies.

Run against an empty database; the tables are created first if needed.
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from locallibrary.infrastructure.database.session import create_tables, engine, local_session  # noqa: E402
from locallibrary.infrastructure.logging import get_logger  # noqa: E402
from locallibrary.modules.author.schemas import AuthorCreate  # noqa: E402
from locallibrary.modules.author.services import AuthorService  # noqa: E402
from locallibrary.modules.book.schemas import BookCreate  # noqa: E402
from locallibrary.modules.book.services import BookService  # noqa: E402
from locallibrary.modules.bookinstance.schemas import BookInstanceCreate  # noqa: E402
from locallibrary.modules.bookinstance.services import BookInstanceService  # noqa: E402
from locallibrary.modules.genre.schemas import GenreCreate  # noqa: E402
from locallibrary.modules.genre.services import GenreService  # noqa: E402

logger = get_logger(__name__)

GENRES = ["Fantasy", "Science Fiction", "French Poetry"]

AUTHORS = [
    {"first_name": "Patrick", "family_name": "Rothfuss", "date_of_birth": "1973-06-06"},
    {"first_name": "Ben", "family_name": "Bova", "date_of_birth": "1932-11-08"},
    {"first_name": "Isaac", "family_name": "Asimov", "date_of_birth": "1920-01-02", "date_of_death": "1992-04-06"},
    {"first_name": "Bob", "family_name": "Billings"},
    {"first_name": "Jim", "family_name": "Jones", "date_of_birth": "1971-12-16"},
]

# (title, summary, isbn, author index, genre indexes)
BOOKS = [
    (
        "The Name of the Wind (The Kingkiller Chronicle, #1)",
        "I have stolen princesses back from sleeping barrow kings. I burned down the town of Trebon.",
        "9781473211896",
        0,
        [0],
    ),
    (
        "The Wise Man's Fear (The Kingkiller Chronicle, #2)",
        "Picking up the tale of Kvothe Kingkiller once again, we follow him into exile.",
        "9788401352836",
        0,
        [0],
    ),
    (
        "The Slow Regard of Silent Things (Kingkiller Chronicle)",
        "Deep below the University, there is a dark place. Few people know of it.",
        "9780756411336",
        0,
        [0],
    ),
    (
        "Apes and Angels",
        "Humankind headed out to the stars not for conquest, nor exploration, nor even for curiosity.",
        "9780765379528",
        1,
        [1],
    ),
    (
        "Death Wave",
        "In Ben Bova's previous novel New Earth, Jordan Kell led the first human mission beyond the solar system.",
        "9780765379504",
        1,
        [1],
    ),
    ("Test Book 1", "Summary of test book 1", "ISBN111111", 4, [0, 1]),
    ("Test Book 2", "Summary of test book 2", "ISBN222222", 4, []),
]

# (book index, imprint, status, due back)
BOOK_INSTANCES = [
    (0, "London Gollancz, 2014.", "Available", None),
    (1, " Gollancz, 2011.", "Loaned", None),
    (2, " Gollancz, 2015.", None, None),
    (3, "New York Tom Doherty Associates, 2016.", "Available", None),
    (3, "New York Tom Doherty Associates, 2016.", "Available", None),
    (3, "New York Tom Doherty Associates, 2016.", "Available", None),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", "Available", None),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", "Maintenance", None),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", "Loaned", None),
    (0, "Imprint XXX2", None, None),
    (1, "Imprint XXX3", None, None),
]


async def main() -> None:
    """Create the tables and insert the sample records."""
    await create_tables()

    genre_service = GenreService()
    author_service = AuthorService()
    book_service = BookService()
    book_instance_service = BookInstanceService()

    async with local_session() as db:
        genres = [await genre_service.create_genre(GenreCreate(name=name), db) for name in GENRES]
        authors = [await author_service.create_author(AuthorCreate(**data), db) for data in AUTHORS]

        books = []
        for title, summary, isbn, author_index, genre_indexes in BOOKS:
            book_data = BookCreate(
                title=title,
                summary=summary,
                isbn=isbn,
                author_id=authors[author_index].id,
                genre_ids=[genres[index].id for index in genre_indexes],
            )
            books.append(await book_service.create_book(book_data, db))

        for book_index, imprint, status, due_back in BOOK_INSTANCES:
            book_instance_data = BookInstanceCreate(
                book_id=books[book_index].id, imprint=imprint.strip(), status=status, due_back=due_back
            )
            await book_instance_service.create_book_instance(book_instance_data, db)

    logger.info(
        "Sample catalog created",
        extra={"genres": len(genres), "authors": len(authors), "books": len(books), "book_instances": len(BOOK_INSTANCES)},
    )

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())

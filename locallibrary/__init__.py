"""Local Library: a server-rendered catalog of authors, books and book copies."""

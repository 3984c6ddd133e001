"""Shared fixtures for the train system tests."""

from typing import Iterable, List

import pytest

from trains.database import Database
from trains.services import Console, RouteRegistry, SchemaBootstrapper


class ScriptedConsole(Console):
    """Console fed from a fixed list of answers, recording everything shown."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.pauses: List[float] = []
        super().__init__(
            read_line=self._next_answer,
            write=self.output.append,
            pause_seconds=0.25,
            sleep=self.pauses.append,
        )

    def _next_answer(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message!r}")
        return self.answers.pop(0)


@pytest.fixture
def db():
    """Empty in-memory SQLite database."""
    database = Database("sqlite://")
    yield database
    database.close()


@pytest.fixture
def seeded_db(db):
    """In-memory database with the seven tables and the reference rows."""
    SchemaBootstrapper(db, "trains").run()
    return db


@pytest.fixture
def registry(seeded_db):
    return RouteRegistry(seeded_db, timestamp_format="%Y-%m-%d %H:%M")


@pytest.fixture
def scripted_console():
    return ScriptedConsole

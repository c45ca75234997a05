import random

import pytest

from kanaquiz.globals import character_table
from kanaquiz.options import OptionGenerator
from kanaquiz.session import QuizSession


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def table():
    return character_table


@pytest.fixture
def generator(table, rng):
    return OptionGenerator(table, rng)


@pytest.fixture
def session(table, generator, rng):
    return QuizSession(table, generator, rng)

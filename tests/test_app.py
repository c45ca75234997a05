import io
import logging
import random

import pytest

from kanaquiz import app
from kanaquiz.config import settings


@pytest.fixture
def package_logger():
    package_logger = logging.getLogger(settings.PROJECT_NAME)
    yield package_logger
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True


@pytest.fixture
def one_session_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n" * 10 + "no\n"))


def test_create_session_uses_global_table():
    session = app.create_session(random.Random(3))
    assert session.total_questions == settings.QUESTIONS_PER_SESSION
    assert session.generator.option_count == settings.OPTION_COUNT
    assert len(session.table) == 46


def test_main_runs_one_session(
    tmp_path, monkeypatch, capsys, package_logger, one_session_stdin
):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))

    assert app.main() == 0

    out = capsys.readouterr().out
    assert "Quiz Completed! Your final score is" in out
    assert "Do you want to restart the quiz? (yes/no): " in out
    assert out.rstrip().endswith("Thank you for playing!")
    assert (tmp_path / "log" / settings.LOG_FILE).exists()


def test_main_plays_when_log_dir_is_unusable(
    tmp_path, monkeypatch, capsys, package_logger, one_session_stdin
):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    monkeypatch.setattr(settings, "LOG_DIR", str(blocker / "log"))

    assert app.main() == 0

    out = capsys.readouterr().out
    assert "Quiz Completed! Your final score is" in out
    assert out.rstrip().endswith("Thank you for playing!")
    assert [type(h) for h in package_logger.handlers] == [logging.NullHandler]


def test_setup_logging_adds_one_handler(tmp_path, monkeypatch, package_logger):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))

    app.setup_logging()
    app.setup_logging()

    assert len(package_logger.handlers) == 1
    assert not package_logger.propagate

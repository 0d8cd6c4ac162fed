from collections.abc import Generator
from logging import DEBUG, INFO, Logger, getLogger

from pytest import CaptureFixture, MonkeyPatch, fixture, mark, raises

from fromasync import getenv_bool, materialize, setup_logging


@fixture(autouse=True)
def restored_logging() -> Generator[None]:
    loggers: list[Logger] = [getLogger(), getLogger("fromasync"), getLogger("fromasync.tests")]
    saved = [(logger.handlers[:], logger.level, logger.propagate) for logger in loggers]
    yield
    for logger, (handlers, level, propagate) in zip(loggers, saved, strict=True):
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate


def test_getenv_bool_reads_truthy_values(monkeypatch: MonkeyPatch):
    for value in ("true", "TRUE", "1", "t", " True "):
        monkeypatch.setenv("FROMASYNC_TEST_FLAG", value)
        assert getenv_bool("FROMASYNC_TEST_FLAG") is True

    for value in ("false", "0", "no"):
        monkeypatch.setenv("FROMASYNC_TEST_FLAG", value)
        assert getenv_bool("FROMASYNC_TEST_FLAG") is False


def test_getenv_bool_uses_default(monkeypatch: MonkeyPatch):
    monkeypatch.delenv("FROMASYNC_TEST_FLAG", raising=False)

    assert getenv_bool("FROMASYNC_TEST_FLAG") is None
    assert getenv_bool("FROMASYNC_TEST_FLAG", True) is True
    assert getenv_bool("FROMASYNC_TEST_FLAG", False, required=True) is False


def test_getenv_bool_fails_when_required(monkeypatch: MonkeyPatch):
    monkeypatch.delenv("FROMASYNC_TEST_FLAG", raising=False)

    with raises(ValueError):
        getenv_bool("FROMASYNC_TEST_FLAG", required=True)


def test_setup_logging_configures_library_logger():
    setup_logging("fromasync.tests", debug=False, disable_existing_loggers=False)

    assert getLogger("fromasync").level == INFO
    assert getLogger("fromasync.tests").level == INFO
    assert getLogger("fromasync").propagate is False


def test_setup_logging_reads_debug_from_environment(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("FROMASYNC_DEBUG", "1")
    setup_logging(time=False, disable_existing_loggers=False)
    assert getLogger("fromasync").level == DEBUG

    monkeypatch.setenv("FROMASYNC_DEBUG", "0")
    setup_logging(time=False, disable_existing_loggers=False)
    assert getLogger("fromasync").level == INFO


def test_setup_logging_prefers_explicit_debug(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("FROMASYNC_DEBUG", "0")
    setup_logging(debug=True, disable_existing_loggers=False)

    assert getLogger("fromasync").level == DEBUG


@mark.asyncio
async def test_setup_logging_outputs_materialization_records(capsys: CaptureFixture[str]):
    setup_logging(time=False, debug=True, disable_existing_loggers=False)

    await materialize(range(2))

    output: str = capsys.readouterr().out
    assert "[DEBUG] [fromasync.helpers.materializing] Materializing range into list" in output
    assert "[DEBUG] [fromasync.helpers.materializing] Materialized 2 elements into list" in output

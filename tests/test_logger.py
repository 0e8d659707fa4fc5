import pytest
from loguru import logger

from cwc_water.utils.config import Settings, get_project_root
from cwc_water.utils.logger import log_directory, log_level, setup_logging


@pytest.fixture
def reset_logger():
    yield
    logger.remove()


def test_debug_mode_forces_debug_level():
    assert log_level(Settings(logging={"level": "warning"})) == "WARNING"
    assert log_level(Settings(app={"debug": True}, logging={"level": "WARNING"})) == "DEBUG"


def test_relative_directory_resolves_against_project_root(tmp_path):
    assert log_directory(Settings()) == get_project_root() / "logs"
    assert log_directory(Settings(logging={"directory": str(tmp_path)})) == tmp_path


def test_setup_writes_service_and_error_logs(tmp_path, reset_logger):
    config = Settings(app={"name": "water_api"}, logging={"directory": str(tmp_path / "nested" / "logs")})

    log_dir = setup_logging(config)
    logger.info("reservoir refresh")
    logger.error("store unreachable")

    assert log_dir == tmp_path / "nested" / "logs"
    service_log = (log_dir / "water_api.log").read_text()
    errors_log = (log_dir / "errors.log").read_text()
    assert "reservoir refresh" in service_log
    assert "store unreachable" in service_log
    assert "store unreachable" in errors_log
    assert "reservoir refresh" not in errors_log


def test_setup_is_repeatable(tmp_path, reset_logger):
    config = Settings(logging={"directory": str(tmp_path), "level": "WARNING"})
    setup_logging(config)
    setup_logging(config)
    logger.warning("basin discharge above danger mark")

    lines = (tmp_path / "cwc_water.log").read_text().splitlines()
    assert sum("basin discharge above danger mark" in line for line in lines) == 1

import pytest


@pytest.fixture
def silent_logger():
    from pydense import Logger
    return Logger(False)


@pytest.fixture
def file_logger(tmp_path):
    from pydense import Logger
    log = Logger(str(tmp_path / "pydense.log"))
    yield log
    log.close()


@pytest.fixture(autouse=True)
def _ch2tmpdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

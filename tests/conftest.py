import pytest


@pytest.fixture(scope="session", autouse=True)
def session_log_dir(tmp_path_factory):
    """Keep app.log / audit.log under pytest's temp root for the whole session."""
    path = tmp_path_factory.mktemp("logs")
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("RECEIPTS_LOG_DIR", str(path))
        yield path

import pytest


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no EXPRCALC_* variables set."""
    for name in ("EXPRCALC_LOG_LEVEL", "EXPRCALC_HISTORY_FILE", "EXPRCALC_HTML"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path

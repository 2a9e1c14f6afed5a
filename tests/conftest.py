import pytest

pytest_plugins = ["lexpath._pytest_plugin"]


@pytest.fixture
def missing_cwd():
    """A cwd provider that fails the way os.getcwd() does after the directory is removed."""
    calls: list[int] = []

    def provider() -> str:
        calls.append(1)
        raise FileNotFoundError(2, "No such file or directory")

    provider.calls = calls  # type: ignore[attr-defined]
    return provider

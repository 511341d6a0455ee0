import pytest
from PIL import Image


class FakeResponse:
    """Stands in for requests.Response; ``content`` may raise to mimic a broken body."""

    def __init__(self, status_code=200, content=b"", error=None):
        self.status_code = status_code
        self._content = content
        self._error = error
        self.closed = False

    @property
    def content(self):
        if self._error is not None:
            raise self._error
        return self._content

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def png_bytes(tmp_path):
    path = tmp_path / "source.png"
    Image.new("RGB", (4, 2), (255, 255, 255)).save(path)
    return path.read_bytes()

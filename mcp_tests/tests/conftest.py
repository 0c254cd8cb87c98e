import pytest

from core.errors import NotFoundError
from core.models import DirectoryEntry


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


class FakeAccessor:
    """In-memory ContentAccessor that records every call in order.

    dirs:   path -> list of entry names (files) or DirectoryEntry objects
    files:  path -> content
    errors: path -> exception raised for any call on that path
    """

    def __init__(self, *, dirs=None, files=None, errors=None) -> None:
        self.dirs = dict(dirs or {})
        self.files = dict(files or {})
        self.errors = dict(errors or {})
        self.calls = []

    async def list_directory(self, owner, repo, path):
        self.calls.append(("list", owner, repo, path))
        if path in self.errors:
            raise self.errors[path]
        if path not in self.dirs:
            raise NotFoundError(f"Path not found: {path}")
        return [
            item if isinstance(item, DirectoryEntry) else DirectoryEntry(
                name=item,
                path=f"{path}/{item}",
                kind="file",
                url=f"https://github.com/{owner}/{repo}/blob/main/{path}/{item}",
            )
            for item in self.dirs[path]
        ]

    async def read_file(self, owner, repo, path):
        self.calls.append(("read", owner, repo, path))
        if path in self.errors:
            raise self.errors[path]
        if path not in self.files:
            raise NotFoundError(f"Path not found: {path}")
        return self.files[path]

    def paths(self, op):
        return [c[3] for c in self.calls if c[0] == op]


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_accessor_factory():
    return FakeAccessor

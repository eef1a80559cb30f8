# tests/fakes.py
from pymongo.errors import ServerSelectionTimeoutError

REFUSED = "localhost:27017: [Errno 111] Connection refused"


def _refuse(*args, **kwargs):
    raise ServerSelectionTimeoutError(REFUSED)


class UnreachableCollection:
    """Every collection method fails the way pymongo does with no server."""

    def __getattr__(self, name):
        return _refuse


class UnreachableDatabase:
    def __getitem__(self, name):
        return UnreachableCollection()

    def command(self, *args, **kwargs):
        _refuse()


class UnreachableClient:
    def __init__(self) -> None:
        self.closed = False

    @property
    def admin(self) -> UnreachableDatabase:
        return UnreachableDatabase()

    def __getitem__(self, name):
        return UnreachableDatabase()

    def close(self) -> None:
        self.closed = True

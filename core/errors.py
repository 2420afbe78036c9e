class MemberStoreError(Exception):
    """Base class for every persistence failure raised by the member store."""


class StoreOpenError(MemberStoreError):
    """The database file could not be opened or its schema created."""


class FetchError(MemberStoreError):
    """A read query failed."""


class SaveError(MemberStoreError):
    """An insert, update or delete failed."""

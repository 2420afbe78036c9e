from pathlib import Path
from typing import Callable, Dict, Optional, Union

from loguru import logger
from PySide6 import QtCore

from services.member_service import MemberStore
from workers.delete_worker import DeleteAllMembersWorker, DeleteMemberWorker
from workers.save_worker import CreateMemberWorker, UpdateMemberWorker
from workers.search_worker import GetMemberWorker, ListMembersWorker, MaxIdWorker

ErrorCallback = Optional[Callable[[str], None]]


def log_error(message: str) -> None:
    """Error callback used when the caller does not pass one."""
    logger.error(f"Member operation failed: {message}")


class MemberProvider:
    """
    Callback-style access to the member store.

    Each call wraps one store operation in a worker, connects `completion` to
    its finished signal and `on_error` (or log_error) to its error signal, and
    hands it to the thread pool. Exactly one of the two callbacks fires per call.

    Started workers are held until their callback has run, so callers may
    ignore the returned worker.

    Creates are serialized by the database itself. Reads, updates and deletes
    carry no ordering guarantee relative to each other; concurrent updates of
    the same member resolve as last write wins.
    """

    def __init__(self, store: Optional[MemberStore] = None,
                 db_file: Optional[Union[str, Path]] = None,
                 pool: Optional[QtCore.QThreadPool] = None):
        self.store = store or MemberStore(db_file)
        self.pool = pool or QtCore.QThreadPool()
        self._active: Dict[int, QtCore.QRunnable] = {}

    def _start(self, worker: QtCore.QRunnable, completion: Callable, on_error: ErrorCallback) -> QtCore.QRunnable:
        key = id(worker)
        self._active[key] = worker

        worker.signals.finished.connect(completion)
        worker.signals.error.connect(on_error or log_error)
        # Connected last so the caller's callback runs before the worker is released
        worker.signals.finished.connect(lambda _result: self._active.pop(key, None))
        worker.signals.error.connect(lambda _message: self._active.pop(key, None))

        self.pool.start(worker)
        return worker

    @property
    def pending(self) -> int:
        """Number of started workers whose callbacks have not fired yet."""
        return len(self._active)

    def get_all_members(self, completion: Callable, on_error: ErrorCallback = None) -> QtCore.QRunnable:
        return self._start(ListMembersWorker(self.store), completion, on_error)

    def get_member(self, member_id: int, completion: Callable, on_error: ErrorCallback = None) -> QtCore.QRunnable:
        return self._start(GetMemberWorker(self.store, member_id), completion, on_error)

    def get_max_id(self, completion: Callable, on_error: ErrorCallback = None) -> QtCore.QRunnable:
        return self._start(MaxIdWorker(self.store), completion, on_error)

    def create_member(self, name: str, email: str, profession: str, about: str, image: bytes,
                      completion: Callable, on_error: ErrorCallback = None) -> QtCore.QRunnable:
        worker = CreateMemberWorker(self.store, name, email, profession, about, image)
        return self._start(worker, completion, on_error)

    def update_member(self, member_id: int, name: str, email: str, profession: str, about: str,
                      image: bytes, completion: Callable, on_error: ErrorCallback = None) -> QtCore.QRunnable:
        worker = UpdateMemberWorker(self.store, member_id, name, email, profession, about, image)
        return self._start(worker, completion, on_error)

    def delete_member(self, member_id: int, completion: Callable, on_error: ErrorCallback = None) -> QtCore.QRunnable:
        return self._start(DeleteMemberWorker(self.store, member_id), completion, on_error)

    def delete_all_members(self, completion: Callable, on_error: ErrorCallback = None) -> QtCore.QRunnable:
        return self._start(DeleteAllMembersWorker(self.store), completion, on_error)

    def wait_for_done(self, msecs: int = -1) -> bool:
        """Blocks until every dispatched worker has finished (or msecs elapse)."""
        return self.pool.waitForDone(msecs)

from PySide6 import QtCore

from services.member_service import MemberStore
from workers.signals import WorkerSignals


class DeleteMemberWorker(QtCore.QRunnable):
    """
    Background worker that deletes one member.
    Emits True if a row was removed.
    """
    def __init__(self, store: MemberStore, member_id: int):
        super().__init__()
        self.store = store
        self.member_id = member_id
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            self.signals.finished.emit(self.store.delete(self.member_id))
        except Exception as e:
            self.signals.error.emit(str(e))


class DeleteAllMembersWorker(QtCore.QRunnable):
    """
    Background worker that clears the members table in one batch.
    Emits the number of deleted rows.
    """
    def __init__(self, store: MemberStore):
        super().__init__()
        self.store = store
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            self.signals.finished.emit(self.store.delete_all())
        except Exception as e:
            self.signals.error.emit(str(e))

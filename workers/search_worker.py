from PySide6 import QtCore

from services.member_service import MemberStore
from workers.signals import WorkerSignals


class ListMembersWorker(QtCore.QRunnable):
    """
    Background worker that fetches every stored member.
    Emits a list of Member objects (empty if there are none).
    """
    def __init__(self, store: MemberStore):
        super().__init__()
        self.store = store
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            members = self.store.list_all()
            self.signals.finished.emit(members)
        except Exception as e:
            self.signals.error.emit(str(e))


class GetMemberWorker(QtCore.QRunnable):
    """
    Background worker that fetches one member by id.
    Emits the Member, or None when no member has that id.
    """
    def __init__(self, store: MemberStore, member_id: int):
        super().__init__()
        self.store = store
        self.member_id = member_id
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            member = self.store.get(self.member_id)
            self.signals.finished.emit(member)
        except Exception as e:
            self.signals.error.emit(str(e))


class MaxIdWorker(QtCore.QRunnable):
    """Background worker that reports the highest stored id (0 when empty)."""
    def __init__(self, store: MemberStore):
        super().__init__()
        self.store = store
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            self.signals.finished.emit(self.store.max_id())
        except Exception as e:
            self.signals.error.emit(str(e))

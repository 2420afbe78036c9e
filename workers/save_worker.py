from PySide6 import QtCore

from services.member_service import MemberStore
from workers.signals import WorkerSignals


class CreateMemberWorker(QtCore.QRunnable):
    """
    Background worker that inserts a new member.
    Emits the created Member, including its assigned id.
    """
    def __init__(self, store: MemberStore, name: str, email: str, profession: str, about: str, image: bytes):
        super().__init__()
        self.store = store
        self.name = name
        self.email = email
        self.profession = profession
        self.about = about
        self.image = image
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        """
        Executes the insert.
        """
        try:
            member = self.store.create(self.name, self.email, self.profession, self.about, self.image)
            self.signals.finished.emit(member)
        except Exception as e:
            self.signals.error.emit(str(e))


class UpdateMemberWorker(QtCore.QRunnable):
    """
    Background worker that overwrites an existing member's fields.
    Emits True if the member was updated, False if the id was not found.
    """
    def __init__(self, store: MemberStore, member_id: int, name: str, email: str,
                 profession: str, about: str, image: bytes):
        super().__init__()
        self.store = store
        self.member_id = member_id
        self.name = name
        self.email = email
        self.profession = profession
        self.about = about
        self.image = image
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            updated = self.store.update(
                self.member_id, self.name, self.email, self.profession, self.about, self.image
            )
            self.signals.finished.emit(updated)
        except Exception as e:
            self.signals.error.emit(str(e))

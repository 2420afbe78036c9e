from PySide6 import QtCore


class WorkerSignals(QtCore.QObject):
    """
    Defines the signals available from a running member worker.

    Attributes:
        finished (object): Emitted with the operation's result when it is done.
        error (str): Emitted with an error message if the operation fails.
    """
    finished = QtCore.Signal(object)
    error = QtCore.Signal(str)

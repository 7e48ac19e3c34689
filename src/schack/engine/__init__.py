"""Rules-engine boundary — the interface and its python-chess adapter."""

from schack.engine.interfaces import BoardSnapshot, RulesEngine
from schack.engine.python_chess import PythonChessEngine

__all__ = ["BoardSnapshot", "PythonChessEngine", "RulesEngine"]

from kss.model.diagnostic import Diagnostic, Severity
from kss.model.node import NodeLike, SceneNode

__all__ = ["Diagnostic", "NodeLike", "SceneNode", "Severity"]

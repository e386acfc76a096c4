"""Scene node model: the read-only view matching needs, plus a concrete tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Collection, Iterator, Mapping, Optional, Protocol, Sequence


class NodeLike(Protocol):
    """What selector matching reads from a scene node."""

    @property
    def parent(self) -> Optional["NodeLike"]: ...

    @property
    def children(self) -> Sequence["NodeLike"]: ...

    @property
    def tag(self) -> str: ...

    @property
    def id(self) -> str: ...

    @property
    def classes(self) -> Collection[str]: ...

    @property
    def attributes(self) -> Mapping[str, Any]: ...

    @property
    def states(self) -> Collection[str]: ...


@dataclass(eq=False)
class SceneNode:
    """A node in a spatial scene graph.

    Nodes compare by identity. ``states`` holds the names of active
    pseudo-classes such as ``hover`` or ``active``.
    """

    tag: str = "node"
    id: str = ""
    classes: set[str] = field(default_factory=set)
    attributes: dict[str, str] = field(default_factory=dict)
    states: set[str] = field(default_factory=set)
    children: list[SceneNode] = field(default_factory=list)
    parent: SceneNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    def append_child(self, child: SceneNode) -> SceneNode:
        """Attach *child* as the last child of this node and return it."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def traverse(self) -> Iterator[SceneNode]:
        """Yield this node and all descendants, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, node_id: str) -> SceneNode | None:
        """Return the first node in this subtree whose id is *node_id*."""
        for node in self.traverse():
            if node.id == node_id:
                return node
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SceneNode:
        """Build a tree from a JSON-style description.

        ``classes`` may be a list or a space separated string; ``children``
        is a list of nested descriptions.
        """
        classes = data.get("classes", [])
        if isinstance(classes, str):
            classes = classes.split()
        node = cls(
            tag=str(data.get("tag", "node")),
            id=str(data.get("id", "")),
            classes=set(classes),
            attributes={str(k): str(v) for k, v in data.get("attributes", {}).items()},
            states=set(data.get("states", [])),
        )
        for child in data.get("children", []):
            node.append_child(cls.from_dict(child))
        return node

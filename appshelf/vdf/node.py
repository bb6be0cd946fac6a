# node.py
# Tree model for decoded binary VDF data

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Union


@dataclass
class Branch:
    """Ordered mapping of string keys to child nodes.

    Indexing never raises: a missing key yields a fresh empty Branch, so
    lookups can be chained (``details["common"]["name"]``) without checks.
    Use ``get()`` when a missing key must be told apart from a branch.
    """

    children: Dict[str, "Node"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "Node":
        child = self.children.get(key)
        if child is None:
            return Branch()
        return child

    def __setitem__(self, key: str, node: "Node") -> None:
        self.children[key] = node

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def items(self):
        return self.children.items()

    def get(self, key: str) -> Optional["Node"]:
        """Return the child under ``key``, or None if there is no such key."""
        return self.children.get(key)

    def get_string(self, key: str) -> Optional[str]:
        """Return the leaf value under ``key``.

        Returns None both when the key is missing and when it holds a
        branch; callers that care about the difference should use get().
        """
        child = self[key]
        if isinstance(child, Leaf):
            return child.value
        return None

    def find(self, path: str) -> Optional["Node"]:
        """Follow a ``/`` separated key path, returning None if any part is missing."""
        node: Optional[Node] = self
        for part in path.strip("/").split("/"):
            if not part:
                continue
            if node is None:
                return None
            node = node.get(part)
        return node

    def to_python(self) -> dict:
        """Convert the tree to nested dicts of strings."""
        # Iterative so that deeply nested trees don't hit the recursion limit
        result: dict = {}
        pending = [(self, result)]
        while pending:
            branch, target = pending.pop()
            for key, child in branch.children.items():
                if isinstance(child, Leaf):
                    target[key] = child.value
                else:
                    target[key] = {}
                    pending.append((child, target[key]))
        return result


@dataclass(frozen=True)
class Leaf:
    """Terminal string value."""

    value: str

    def __getitem__(self, key: str) -> Branch:
        return Branch()

    def get(self, key: str) -> None:
        return None

    def get_string(self, key: str) -> None:
        return None

    def find(self, path: str) -> Optional["Node"]:
        if path.strip("/"):
            return None
        return self

    def to_python(self) -> str:
        return self.value


Node = Union[Branch, Leaf]

# Application id -> root node of that application's tree
Document = Dict[int, Branch]

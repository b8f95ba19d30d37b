"""
Hierarchical descriptions of runtime objects.

A Descriptor is a read-only projection used for introspection and
printing: the registry, providers, platforms and every I/O instance can
describe themselves as a tree.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TextIO


@dataclass
class Descriptor:
    """Node of a description tree."""
    category: str = ""
    name: str = ""
    id: str = ""
    type: str = ""
    description: str = ""
    quantity: Optional[int] = None
    children: List["Descriptor"] = field(default_factory=list)

    def add(self, child: Optional["Descriptor"]) -> "Descriptor":
        """Append a child descriptor and return self."""
        if child is not None:
            self.children.append(child)
        return self

    @property
    def size(self) -> int:
        return len(self.children)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {
            "category": self.category,
            "name": self.name,
            "id": self.id,
            "type": self.type,
        }
        if self.description:
            data["description"] = self.description
        if self.quantity is not None:
            data["quantity"] = self.quantity
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    def _label(self) -> str:
        label = self.category or "?"
        if self.quantity is not None:
            label += f" ({self.quantity})"
        label += f": {self.name}" if self.name else ""
        if self.id:
            label += f" [{self.id}]"
        if self.type:
            label += f" <{self.type}>"
        return label

    def lines(self, prefix: str = "", last: bool = True, root: bool = True) -> List[str]:
        """Render the tree as a list of text lines."""
        if root:
            output = [self._label()]
            child_prefix = ""
        else:
            output = [prefix + ("└── " if last else "├── ") + self._label()]
            child_prefix = prefix + ("    " if last else "│   ")

        for index, child in enumerate(self.children):
            output.extend(child.lines(child_prefix, index == len(self.children) - 1, root=False))
        return output

    def print(self, stream: Optional[TextIO] = None) -> None:
        """Print the tree to a stream (stdout by default)."""
        stream = stream or sys.stdout
        for line in self.lines():
            stream.write(line + "\n")

    def __str__(self) -> str:
        return "\n".join(self.lines())

"""
Merge flat, dotted descriptor names into one nested value.

Names are split on ``.``:

* ``filter.status`` sets a value at ``filter -> status``
* ``tags.`` (trailing dot) appends a value to the sequence at ``tags``
* ``items.0.name`` descends into the first element of the sequence at ``items``

A scalar met on the way down is replaced by a mapping, so a parent declared
as ``object`` is refined by its dotted children. Any other clash between a
scalar, a sequence and a mapping on the same path raises
``MergeAmbiguityError``.
"""

from typing import Any, Dict, Iterable, List, Tuple, Union

from service_docs.exceptions import MergeAmbiguityError

Node = Union[Dict[str, Any], List[Any]]


class DescriptorAssembler:
    """Builds a nested mapping from ``(name, value)`` pairs in order"""

    def assemble(self, entries: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
        tree: Dict[str, Any] = {}
        for name, value in entries:
            if name.endswith("."):
                self.push(tree, name[:-1], value)
            else:
                self.set(tree, name, value)
        return tree

    def set(self, tree: Dict[str, Any], path: str, value: Any) -> None:
        parent, key = self._parent(tree, path)
        if isinstance(parent, list):
            index = self._index(parent, key, path)
            if index == len(parent):
                parent.append(value)
                return
            current = parent[index]
        else:
            current = parent.get(key)
            if key not in parent:
                parent[key] = value
                return

        if isinstance(current, list):
            raise MergeAmbiguityError(path, "scalar assigned to a sequence")
        if isinstance(current, dict):
            raise MergeAmbiguityError(path, "scalar assigned to a nested mapping")

        if isinstance(parent, list):
            parent[index] = value
        else:
            parent[key] = value

    def push(self, tree: Dict[str, Any], path: str, value: Any) -> None:
        parent, key = self._parent(tree, path)
        if isinstance(parent, list):
            index = self._index(parent, key, path)
            if index == len(parent):
                parent.append([])
            current = parent[index]
        else:
            current = parent.setdefault(key, [])

        if not isinstance(current, list):
            kind = "nested mapping" if isinstance(current, dict) else "scalar"
            raise MergeAmbiguityError(path + ".", f"append to a {kind}")
        current.append(value)

    def _parent(self, tree: Dict[str, Any], path: str) -> Tuple[Node, str]:
        segments = path.split(".")
        node: Node = tree
        for depth, segment in enumerate(segments[:-1]):
            walked = ".".join(segments[: depth + 1])
            node = self._descend(node, segment, segments[depth + 1], walked)
        return node, segments[-1]

    def _descend(self, node: Node, segment: str, following: str, walked: str) -> Node:
        # An index segment below means the new container is a sequence
        fresh: Node = [] if following.isdigit() else {}
        if isinstance(node, list):
            index = self._index(node, segment, walked)
            if index == len(node):
                node.append(fresh)
            child = node[index]
            if isinstance(child, (dict, list)):
                return child
            node[index] = fresh
            return fresh

        child = node.get(segment)
        if not isinstance(child, (dict, list)):
            child = node[segment] = fresh
        return child

    @staticmethod
    def _index(node: List[Any], segment: str, walked: str) -> int:
        if not segment.isdigit():
            raise MergeAmbiguityError(walked, "non-index key inside a sequence")
        index = int(segment)
        if index > len(node):
            raise MergeAmbiguityError(walked, f"index {index} out of range")
        return index


def assemble(entries: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    return DescriptorAssembler().assemble(entries)

"""
Unbalanced binary search tree with duplicate-tolerant insertion.

Equal values are routed into the left subtree, so a tree built from any
sequence keeps every value it was given. Removal of an inner node detaches
its whole subtree and re-inserts the remaining values one by one instead of
splicing in a successor. Size and height are recomputed from a traversal on
every call rather than cached.
"""

import weakref
from enum import Enum
from typing import TypeVar, Generic, Iterable, Iterator, List, Optional

T = TypeVar('T')


class PassType(Enum):
    PRE_ORDER = "pre_order"
    POST_ORDER = "post_order"
    HYBRID_ORDER = "hybrid_order"
    FLOORS_ORDER = "floors_order"


class StringFormat(Enum):
    SINGLE_LINE = "single_line"
    INDENTED = "indented"


def _equivalent(a, b) -> bool:
    """Match by ordering alone, so values only need ``<`` to be found."""
    return not (a < b or b < a)


class BinaryTree(Generic[T]):
    class Node:
        def __init__(self, value: T, parent: Optional['BinaryTree.Node'] = None) -> None:
            self.value: T = value
            self._left: Optional['BinaryTree.Node'] = None
            self._right: Optional['BinaryTree.Node'] = None
            self._parent: Optional[weakref.ref] = None
            if parent is not None:
                self._parent = weakref.ref(parent)

        @property
        def left(self) -> Optional['BinaryTree.Node']:
            return self._left

        @property
        def right(self) -> Optional['BinaryTree.Node']:
            return self._right

        @property
        def parent(self) -> Optional['BinaryTree.Node']:
            if self._parent is None:
                return None
            return self._parent()

        def is_leaf(self) -> bool:
            return self.left is None and self.right is None

        def is_root(self) -> bool:
            return self.parent is None

        def depth(self) -> int:
            depth = 0
            node = self.parent
            while node is not None:
                depth += 1
                node = node.parent
            return depth

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[BinaryTree.Node] = None
        if values is not None:
            self.extend(values)

    def insert(self, *values: T) -> None:
        for value in values:
            if value is None:
                raise ValueError("cannot insert None into tree")
        for value in values:
            self._insert(value)

    def extend(self, values: Iterable[T]) -> None:
        self.insert(*list(values))

    def _insert(self, value: T) -> None:
        if self._root is None:
            self._root = BinaryTree.Node(value)
            return

        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node._right = BinaryTree.Node(value, node)
                    return
                node = node.right
            else:
                if node.left is None:
                    node._left = BinaryTree.Node(value, node)
                    return
                node = node.left

    def remove(self, value: T, order: PassType = PassType.FLOORS_ORDER) -> int:
        """Remove the first node equal to ``value`` found in ``order``.

        A non-root leaf is unlinked directly. Any other node takes its whole
        subtree with it; the values below it, enumerated in ``order``, are
        then inserted again from the root. Returns the number of removed
        nodes (0 or 1).
        """
        node = self.find(value, order)
        if node is None:
            return 0
        self._remove_node(node, order)
        return 1

    def remove_all(self, value: T, order: PassType = PassType.FLOORS_ORDER) -> int:
        removed = 0
        node = self.find(value, order)
        while node is not None:
            self._remove_node(node, order)
            removed += 1
            node = self.find(value, order)
        return removed

    def _remove_node(self, node: Node, order: PassType) -> None:
        if node.is_leaf() and node is not self._root:
            self._detach(node)
            return

        survivors = [n.value for n in self._walk(node, order) if n is not node]
        if node is self._root:
            self._root = None
        else:
            self._detach(node)
        for value in survivors:
            self._insert(value)

    def _detach(self, node: Node) -> None:
        parent = node.parent
        assert parent is not None
        if parent.left is node:
            parent._left = None
        if parent.right is node:
            parent._right = None
        node._parent = None

    def clear(self) -> None:
        self._root = None

    def find(self, value: T, order: PassType = PassType.HYBRID_ORDER) -> Optional[Node]:
        for node in self._walk(self._root, order):
            if _equivalent(node.value, value):
                return node
        return None

    def find_all(self, value: T, order: PassType = PassType.HYBRID_ORDER) -> List[Node]:
        return [node for node in self._walk(self._root, order) if _equivalent(node.value, value)]

    def find_by_floor_index(self, index: int) -> Optional[Node]:
        nodes = self._walk(self._root, PassType.FLOORS_ORDER)
        if 0 <= index < len(nodes):
            return nodes[index]
        return None

    def contains(self, value: T) -> bool:
        return any(_equivalent(item, value) for item in self.in_order())

    def traverse(self, order: PassType = PassType.PRE_ORDER, start_index: int = 0) -> List[T]:
        start = self._node_at(start_index) if self._root is not None else None
        return [node.value for node in self._walk(start, order)]

    def nodes(self, order: PassType = PassType.HYBRID_ORDER) -> List[Node]:
        return self._walk(self._root, order)

    def pre_order(self) -> List[T]:
        return self.traverse(PassType.PRE_ORDER)

    def post_order(self) -> List[T]:
        return self.traverse(PassType.POST_ORDER)

    def in_order(self) -> List[T]:
        return self.traverse(PassType.HYBRID_ORDER)

    def floors_order(self) -> List[T]:
        return self.traverse(PassType.FLOORS_ORDER)

    def floors(self) -> List[List[T]]:
        return [[node.value for node in floor] for floor in self._floors(self._root)]

    def _walk(self, start: Optional[Node], order: PassType) -> List[Node]:
        if order is PassType.PRE_ORDER:
            return self._pre_order(start)
        if order is PassType.POST_ORDER:
            return self._post_order(start)
        if order is PassType.HYBRID_ORDER:
            return self._hybrid_order(start)
        if order is PassType.FLOORS_ORDER:
            return [node for floor in self._floors(start) for node in floor]
        raise ValueError(f"unknown pass order: {order!r}")

    def _pre_order(self, start: Optional[Node]) -> List[Node]:
        result: List[BinaryTree.Node] = []
        if start is None:
            return result
        stack: List[BinaryTree.Node] = [start]
        while stack:
            node = stack.pop()
            result.append(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def _post_order(self, start: Optional[Node]) -> List[Node]:
        result: List[BinaryTree.Node] = []
        if start is None:
            return result
        stack: List[BinaryTree.Node] = [start]
        while stack:
            node = stack.pop()
            result.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def _hybrid_order(self, start: Optional[Node]) -> List[Node]:
        result: List[BinaryTree.Node] = []
        stack: List[BinaryTree.Node] = []
        node = start
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node)
            node = node.right
        return result

    def _floors(self, start: Optional[Node]) -> List[List[Node]]:
        floors: List[List[BinaryTree.Node]] = []
        floor = [start] if start is not None else []
        while floor:
            floors.append(floor)
            below: List[BinaryTree.Node] = []
            for node in floor:
                if node.left is not None:
                    below.append(node.left)
                if node.right is not None:
                    below.append(node.right)
            floor = below
        return floors

    def size(self) -> int:
        return len(self._hybrid_order(self._root))

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return len(self._floors(self._root))

    def min(self) -> T:
        values = self.in_order()
        if not values:
            raise ValueError("min from empty tree")
        smallest = values[0]
        for value in values[1:]:
            if value < smallest:
                smallest = value
        return smallest

    def max(self) -> T:
        values = self.in_order()
        if not values:
            raise ValueError("max from empty tree")
        largest = values[0]
        for value in values[1:]:
            if value > largest:
                largest = value
        return largest

    def copy(self) -> 'BinaryTree[T]':
        """Clone by pre-order reinsertion, which reproduces the exact shape."""
        return BinaryTree(self.pre_order())

    def _node_at(self, index: int) -> Node:
        if not isinstance(index, int):
            raise TypeError("index must be an integer")
        node = self.find_by_floor_index(index)
        if node is None:
            raise IndexError("index out of range")
        return node

    def to_string(self, fmt: StringFormat = StringFormat.SINGLE_LINE) -> str:
        if not isinstance(fmt, StringFormat):
            raise ValueError(f"unknown string format: {fmt!r}")
        floors = self._floors(self._root)
        text = ""
        for depth in range(len(floors) - 1, -1, -1):
            tokens = []
            for node in floors[depth]:
                parent = node.parent
                if depth == 0 or parent is None:
                    tokens.append(f"{node.value}:Root ")
                elif parent.left is node:
                    tokens.append(f"{node.value}:{parent.value}L ")
                else:
                    tokens.append(f"{node.value}:{parent.value}R ")
            text = "".join(tokens) + text
            if fmt is StringFormat.INDENTED and depth != 0:
                text = "\n" + text
        return text.strip(" ")

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: T) -> None:
        """Overwrite the value in place. Ordering is not re-checked."""
        self._node_at(index).value = value

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinaryTree({self.in_order()})"

    def __str__(self) -> str:
        return self.to_string(StringFormat.INDENTED)

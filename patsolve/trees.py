"""Puzzles about binary trees, search trees and family trees."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass


@dataclass
class _AvlNode:
    key: int
    left: _AvlNode | None = None
    right: _AvlNode | None = None
    height: int = 1


def _height(node: _AvlNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: _AvlNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _AvlNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _AvlNode) -> _AvlNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _AvlNode) -> _AvlNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


class AvlTree:
    """A self-balancing binary search tree; equal keys go to the right."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _AvlNode | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key`` and rebalance the tree."""
        self._root = self._insert(self._root, key)
        self._size += 1

    def _insert(self, node: _AvlNode | None, key: int) -> _AvlNode:
        if node is None:
            return _AvlNode(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        else:
            node.right = self._insert(node.right, key)
        _update(node)
        balance = _balance(node)
        if balance == 2:
            assert node.left is not None
            if _balance(node.left) != 1:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance == -2:
            assert node.right is not None
            if _balance(node.right) != -1:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    @property
    def root_key(self) -> int:
        """The key held at the root."""
        if self._root is None:
            raise ValueError("the tree is empty")
        return self._root.key

    @property
    def height(self) -> int:
        """Number of levels in the tree."""
        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        stack: list[_AvlNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right


def avl_root(keys: Iterable[int]) -> int:
    """Insert the keys one by one into an AVL tree and return the root key."""
    return AvlTree(keys).root_key


def complete_bst_level_order(keys: Iterable[int]) -> list[int]:
    """Arrange the keys as a complete binary search tree and list it level by level."""
    values = sorted(keys)
    result = [0] * len(values)
    supply = iter(values)

    def fill(index: int) -> None:
        if index >= len(result):
            return
        fill(2 * index + 1)
        result[index] = next(supply)
        fill(2 * index + 2)

    fill(0)
    return result


def postorder_from_stack_ops(operations: Iterable[str]) -> list[int]:
    """Rebuild a tree from ``Push k``/``Pop`` operations and return its postorder.

    The pushes give the preorder and the pops the inorder of the tree.
    """
    preorder: list[int] = []
    inorder: list[int] = []
    stack: list[int] = []
    for operation in operations:
        parts = operation.split()
        if len(parts) == 2 and parts[0] == "Push":
            key = int(parts[1])
            preorder.append(key)
            stack.append(key)
        elif parts == ["Pop"]:
            if not stack:
                raise ValueError("Pop on an empty stack")
            inorder.append(stack.pop())
        else:
            raise ValueError(f"unknown operation: {operation!r}")
    if stack:
        raise ValueError("every pushed node must be popped")
    position = {key: index for index, key in enumerate(inorder)}
    if len(position) != len(inorder):
        raise ValueError("node keys must be unique")

    result: list[int] = []

    def walk(pre_start: int, in_start: int, count: int) -> None:
        if count <= 0:
            return
        root = preorder[pre_start]
        split = position[root]
        left_count = split - in_start
        walk(pre_start + 1, in_start, left_count)
        walk(pre_start + 1 + left_count, split + 1, count - left_count - 1)
        result.append(root)

    walk(0, 0, len(preorder))
    return result


def highest_supplier_price(
    parents: Sequence[int], root_price: float, percentage: float
) -> tuple[float, int]:
    """Return the highest retail price in a supply chain and how many sell at it.

    ``parents[i]`` is the supplier of member ``i``; -1 marks the root supplier.
    Each level raises the price by ``percentage`` per cent.
    """
    children: defaultdict[int, list[int]] = defaultdict(list)
    root = None
    for member, parent in enumerate(parents):
        if parent == -1:
            root = member
        elif 0 <= parent < len(parents):
            children[parent].append(member)
        else:
            raise ValueError(f"unknown supplier {parent}")
    if root is None:
        raise ValueError("the supply chain has no root")
    factor = percentage / 100 + 1
    highest = root_price
    count = 1
    queue = deque([(root, root_price)])
    while queue:
        member, price = queue.popleft()
        for child in children[member]:
            child_price = price * factor
            if child_price > highest:
                highest, count = child_price, 1
            elif child_price == highest:
                count += 1
            queue.append((child, child_price))
    return highest, count


def largest_generation(children: Mapping[int, Iterable[int]]) -> tuple[int, int]:
    """Return the size and level of the largest generation below member 1.

    The root is at level 1; among equal generations the earliest wins.
    """
    best_population, best_level = 0, 0
    level_members = [1]
    level = 1
    while level_members:
        if len(level_members) > best_population:
            best_population, best_level = len(level_members), level
        level_members = [
            child for member in level_members for child in children.get(member, ())
        ]
        level += 1
    return best_population, best_level


def fill_bst_level_order(
    children: Sequence[tuple[int, int]], keys: Iterable[int]
) -> list[int]:
    """Put the keys into a fixed tree shape so it becomes a search tree.

    ``children[i]`` gives the left and right child of node ``i`` (negative for
    none); node 0 is the root. Returns the keys in level order.
    """
    values = sorted(keys)
    if len(values) != len(children):
        raise ValueError("need exactly one key per node")
    if not values:
        return []
    assigned: dict[int, int] = {}
    supply = iter(values)

    def fill(index: int) -> None:
        if index < 0:
            return
        left, right = children[index]
        fill(left)
        assigned[index] = next(supply)
        fill(right)

    fill(0)
    result = []
    queue = deque([0])
    while queue:
        index = queue.popleft()
        result.append(assigned[index])
        queue.extend(child for child in children[index] if child > 0)
    return result


def invert_tree(
    children: Sequence[tuple[int | None, int | None]],
) -> tuple[list[int], list[int]]:
    """Mirror a binary tree and return its level order and inorder.

    ``children[i]`` gives the left and right child of node ``i``, ``None``
    for none; the root is the node that is nobody's child.
    """
    inverted = [(right, left) for left, right in children]
    used = {child for pair in children for child in pair if child is not None}
    roots = [node for node in range(len(children)) if node not in used]
    if len(roots) != 1:
        raise ValueError("the nodes do not form a single tree")
    root = roots[0]

    level_order = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        level_order.append(node)
        queue.extend(child for child in inverted[node] if child is not None)

    in_order: list[int] = []
    stack: list[int] = []
    current: int | None = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = inverted[current][0]
        current = stack.pop()
        in_order.append(current)
        current = inverted[current][1]
    return level_order, in_order
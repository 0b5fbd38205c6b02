# dsa

Small, dependency-free data structures:

- `dsa.heap.Heap`: a binary heap ordered by item keys. It is a min-heap or a max-heap depending on `CompareType`.
- `dsa.queue.Queue`: a first-in, first-out queue.
- `dsa.stack.Stack`: a last-in, first-out stack.
- `dsa.binary_tree.Tree`: an unbalanced binary search tree with in-order, pre-order and post-order traversal.

The heap, the queue and the stack each guard their state with a lock, so threads can share them. The tree has no lock.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Keyed items

The heap and the tree order their items by an integer key.

- Items in a heap need a `key` attribute. This is the `dsa.element.Keyed` protocol.
- Items in a tree need a `key` attribute that can be read and written. This is the `dsa.element.MutableKeyed` protocol.

Both protocols are runtime-checkable, so `isinstance(obj, Keyed)` works.

```python
from dataclasses import dataclass

@dataclass
class Item:
    key: int
```

## Heap

```python
from dsa.heap import CompareType, Heap

h = Heap(CompareType.MAX_HEAP)
h.heapify([Item(17), Item(2), Item(15), Item(23)])
h.peek()        # Item(key=23)
h.pop()         # Item(key=23)
len(h)          # 3
str(h)          # "[17] -> [2] -> [15]"
```

`Heap()` with no argument is a min-heap. Any compare type other than `CompareType.MAX_HEAP` also gives a min-heap. `heapify` pushes each item in turn and keeps the items already in the heap. `str()` lists the keys in the heap's internal array order. On an empty heap, `peek()` and `pop()` return `None` and `str()` gives `"[]"`.

## Queue and Stack

```python
from dsa.queue import Queue
from dsa.stack import Stack

q = Queue()
q.enqueue(1)
q.enqueue("b")
str(q)          # "[1] -> [b]"
q.dequeue()     # 1

s = Stack()
s.push(1)
s.push("b")
str(s)          # "[b] -> [1]"
s.pop()         # "b"
```

Both hold values of any type. A queue lists its items from front to back, and a stack lists them from top to bottom. On an empty queue or stack, `dequeue()`, `pop()` and `peek()` return `None` and `str()` gives `"[]"`. `is_empty()` reports whether any items remain, and `len()` gives their count.

## Binary search tree

```python
from dsa.binary_tree import TraverseAlgorithm, Tree

t = Tree()
for k in (8, 3, 10, 1, 6):
    t.insert(Item(k))

t.traverse(TraverseAlgorithm.IN_ORDER)   # "[1] [3] [6] [8] [10] "
t.search(6)                              # the Node holding key 6, or None
t.remove(3)
t.traverse(TraverseAlgorithm.PRE_ORDER)  # "[8] [6] [1] [10] "
```

The tree allows duplicate keys. An item whose key equals a node's key goes into that node's right subtree. `search` returns the first matching `Node`. The node exposes `item`, `key`, `parent`, `left` and `right`. `remove` deletes the first node found with the key and does nothing if the key is absent. A removed node that has a right subtree is replaced by its in-order successor.

`traverse` accepts `IN_ORDER`, `PRE_ORDER` and `POST_ORDER`. It returns each key as `"[k] "`. For any other value it returns the string `"unknown traversal algorithm"` and does not raise.

## What it does not do

The tree does no rebalancing, so sorted input makes it a linked list. The package has no command-line interface and does not persist anything. Every structure lives in memory only.
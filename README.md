# labstructs

Plain containers for Python 3.10 and later. They have no dependencies.

## What is in it

### `labstructs.indexed_list`

`SinglyLinkedList` is a singly linked list that keeps track of its length.

- You can build it empty, or from an iterable: `SinglyLinkedList([1, 2, 3])`.
- `push_front(value)` and `push_back(value)` add a value at the head or the tail.
- `pop_front()` and `pop_back()` remove a value and return it.
- `at(index)` returns the value at a position.
- `insert(index, value)` puts `value` at that position. `index` may equal the length.
- `erase(index)` removes the value at a position and returns it.
- `empty()` tells you whether the list holds nothing.
- The list supports `len()`, `in` and iteration.
- `str()` shows the list as `1 -> 2 -> nullptr`.
- A bad index raises `IndexError("Index out of range")`.
- Popping from an empty list raises `IndexError("List is empty")`.

### `labstructs.containers`

| Class | Operations | Notes |
| --- | --- | --- |
| `LinkedList` | `add_front`, `add_back`, `remove_front`, `remove_back`, `peek_front`, `peek_back`, `is_empty` | iterable; `str()` gives `10 -> 20 -> nullptr` |
| `DoublyLinkedList` | same as `LinkedList` | iterable in both directions with `reversed()`; `str()` gives `100 <-> 200 <-> nullptr` |
| `ArrayQueue(capacity=100)` | `enqueue`, `dequeue`, `peek`, `is_empty`, `is_full` | circular buffer with a fixed capacity; supports `len()` |
| `LinkedListQueue` | `enqueue`, `dequeue`, `peek`, `is_empty`, `is_full` | unbounded; `is_full()` is always `False` |
| `PriorityQueue` | `enqueue`, `dequeue`, `peek`, `is_empty`, `is_full` | the largest value comes out first; unbounded; supports `len()` |
| `ArrayStack(capacity=100)` | `push`, `pop`, `peek`, `is_empty`, `is_full` | fixed capacity; supports `len()` |
| `LinkedListStack` | `push`, `pop`, `peek`, `is_empty`, `is_full` | unbounded; `is_full()` is always `False` |

The removing operations return the value they remove: `remove_*`, `dequeue` and `pop`.

Errors:

- Reading from or removing from an empty container raises `EmptyError`. The message is "Empty list", "Queue empty" or "Stack empty".
- Adding to a full `ArrayQueue` or `ArrayStack` raises `FullError`.
- A negative capacity raises `ValueError`.

`demo_lines()` runs each container through a short example and returns the lines that the demo prints.

### `labstructs.counter_threads`

- `SharedCounter` is an integer counter guarded by a lock. `add(amount)` returns the new total, and `value` reads the current total.
- `run_threads(count=3, counter=None)` starts threads numbered 1 to `count`. Each thread adds its own number to the counter. The function returns lines such as `"Thread 2: counter = 3"`, in the order the threads finished.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Use

```python
from labstructs.indexed_list import SinglyLinkedList
from labstructs.containers import PriorityQueue, ArrayStack, EmptyError

items = SinglyLinkedList([1, 2, 3])
items.insert(1, 10)
print(items)            # 1 -> 10 -> 2 -> 3 -> nullptr
print(items.at(1), len(items), 3 in items)   # 10 4 True

pq = PriorityQueue()
for n in (5, 2, 9):
    pq.enqueue(n)
print(pq.peek())        # 9

stack = ArrayStack(capacity=2)
stack.push(50)
stack.pop()
try:
    stack.pop()
except EmptyError as exc:
    print(exc)          # Stack empty
```

## Commands

```
labstructs-demo      # prints a short tour of every container
labstructs-threads   # three threads add 1, 2 and 3 to a shared counter
```

Neither command takes options.

## What it does not do

- Only `SharedCounter` uses a lock. None of the containers is safe to use from several threads at once.
- Nothing is saved to disk.

## Tests

```
pytest
```
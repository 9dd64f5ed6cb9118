# hellodemo

A small collection of classic algorithms and networking demos.

- `hellodemo.sorts`: `insertion_sort`, `quick_sort` (median-of-three, Hoare
  partitioning, insertion sort for short ranges), `merge_sort` (insertion-sorted
  runs of 24 merged bottom-up) and `heap_sort`. All sort a list in place.
  `insertion_sort`, `quick_sort` and `merge_sort` take an optional
  `less(a, b)` predicate, true when `a` must come before `b`; `heap_sort`
  always sorts ascending. `insertion_sort(arr, start, end, less)` sorts only
  `arr[start:end + 1]`.
- `hellodemo.queue.Queue`: a double-ended queue on a ring buffer that doubles
  its capacity when full. It has `push_back`, `push_front`, `pop_front`,
  `pop_back`, `front`, `back`, `is_empty`, `capacity`, `len()` and iteration
  from front to back. Popping or peeking into an empty queue raises
  `IndexError`. `Queue.with_capacity(n)` makes an empty queue with room for
  `n` items.
- `hellodemo.search`: `bfs(start, end)` and `dfs(start, end)` return a list of
  node numbers from `start` to `end` over a fixed 12-node graph (`GRAPH`,
  nodes 0 to 11), or `[]` if no path is found. A start node outside the graph
  raises `IndexError`. `dfs` numbers each node's neighbours while walking its
  matrix row from the last column to the first.
- `hellodemo.utils`: `is_sorted(values)` checks non-decreasing order;
  `is_sorted_strict(original, candidate)` checks that `candidate` is exactly
  `original` in ascending order.
- `hellodemo.run`: `benchmark(values)` times the built-in sort and the three
  in-place sorts on copies of `values` and returns one `SortTiming`
  (name, milliseconds, correct) per sort; `run(size)` does this on `size`
  random integers (1,000,000 by default) and prints the results.
- `hellodemo.cs`: `server(host, port)` accepts TCP connections forever, prints
  the first 1024 bytes of each and answers with a fixed
  `HTTP/1.1 200 OK ... Hello, World!` reply; `client(host, port)` sends one
  request and prints and returns the reply.
- `hellodemo.redis_client`: `run_demo(host, port)` sets the key
  `"the phone rang"` on a Redis server, reads it back, prints and returns it.

## Installation

```
pip install .
```

## Library use

```python
from hellodemo.sorts import quick_sort, heap_sort, merge_sort
from hellodemo.queue import Queue
from hellodemo.search import bfs, dfs

data = [5, 3, 9, 1]
quick_sort(data)                            # data is now [1, 3, 5, 9]
merge_sort(data, lambda a, b: a > b)        # data is now [9, 5, 3, 1]

q = Queue([1, 2, 3])
q.push_front(0)
q.pop_back()                                # 3
list(q)                                     # [0, 1, 2]

bfs(0, 11)                                  # a path with the fewest hops
dfs(0, 11)                                  # the first path depth-first search reaches
```

## Command line

```
hellodemo go        # benchmark the sorting algorithms on 1,000,000 integers
hellodemo server    # listen on 0.0.0.0:8080
hellodemo client    # send one request to 127.0.0.1:8080
hellodemo app       # set and get a key on a Redis server at 127.0.0.1:6379
```

Any other command prints `Unknown command: <name>`; running with no command
exits with a usage message.

## What it does not do

The server does not parse HTTP: it reads one chunk of up to 1024 bytes from
each connection and always sends the same reply. The graph search uses edge
presence only; edge weights and the `HEURISTICS` table are not used by any
search.
# rpp

A small library of building blocks with deterministic, well-defined behaviour.
It has no runtime dependencies beyond the standard library.

## Modules

- `rpp.hashing` – the 64-bit `squirrel5` mixing hash and helpers built on it:
  `hash_combine`, `hash_char`, `hash_f32`, `hash_value` (integers, floats hashed as
  doubles, one-character strings), `hash_nonzero`, `hash_values` and `hash_literal`.
- `rpp.rng` – `Stream`, a random stream whose state advances by hashing. Seed it
  with an integer for reproducible output, or leave the seed out to seed from the
  thread id and the clock. Offers `unit`, `unit_f32`, `coin_flip`, `integer`,
  `range` (half-open) and in-place `shuffle`.
- `rpp.heap` – `Heap`, a binary min-heap with `push`, `pop`, `top`, `clear`, `clone`.
- `rpp.stack` – `Stack` with `push`, `pop`, `top`, `clear`, `clone`.
- `rpp.vec` – `Vec`, a growable vector that tracks capacity (doubling from 8), and
  `Slice`, a read-only window with `sub`, `front` and `back`.
- `rpp.text` – ASCII helpers (`to_uppercase`, `to_lowercase`, `is_whitespace`),
  `hash_string`, and parsers that return `(value, rest)` or `None`: `parse_i64`,
  `parse_f32`, `parse_string`, `parse_enum`; plus `enum_name`.
- `rpp.hashmap` – `Map`, an open-addressing Robin Hood hash map with power-of-two
  capacity (starting at 32, kept at most 3/4 full) and backward-shift deletion.
  Keys may be integers, floats, strings, bytes or tuples of those. `try_get`
  returns `None` for a missing key; `get`, `erase` and `map[key]` raise `KeyError`.
- `rpp.rc` – `Rc` and `Arc` reference-counted handles with `dup`, `take`, `clear`,
  `references` and `value`; `Arc` updates its count under a lock.
- `rpp.tuples` – `Tuple`, a fixed-length group with `get`, `invoke` and `clone`.
- `rpp.storage` – `Storage`, a slot for a value of a given type that is built with
  `construct` and dropped with `destruct`.
- `rpp.sync` – `Atomic`, `Flag`, `Mutex` (also a context manager), `Cond`, and
  `sleep`, `this_id`, `perf_counter`, `perf_frequency`, `hardware_threads`.
- `rpp.tasks` – `Task`, a coroutine wrapper that runs as soon as it is created;
  `Suspend` and `Continue` awaitables; a task awaiting an unfinished task is resumed
  when that task completes. `Event` is a manual-reset event with `Event.wait_any`.
- `rpp.fileio` – `read`, `write`, `last_write_time` (100-nanosecond ticks since
  1601-01-01 UTC) and `before`. Failures raise `OSError`.
- `rpp.net` – `Address` (IPv4 host and port) and `Udp`, a non-blocking UDP socket
  whose `recv` returns `(data, sender)` or `None` when nothing is waiting.

Containers format themselves as `Heap[1, 2]`, `Stack[1, 2]`, `Vec[1, 2]`,
`Slice[1, 2]`, `Map[{1 : 2}, {3 : 4}]`, `Tuple{1, 2}`, `Rc[2]{5}`, `Arc{null}` and
`Storage<int>`.

## Install

    pip install .

## Examples

    from rpp.hashmap import Map
    from rpp.heap import Heap
    from rpp.rng import Stream

    m = Map((1, 2), (3, 4))
    assert m.get(3) == 4

    h = Heap(5, 1, 3)
    assert h.top() == 1

    rng = Stream(0)
    n = rng.range(1, 10)
    assert 1 <= n < 10

Tasks run until their first suspension when created:

    from rpp.tasks import Task, Suspend

    async def job():
        await Suspend()
        return 1

    task = Task(job())
    assert not task.done()
    task.resume()
    assert task.block() == 1

## Limits

- There is no command-line program; the package is a library only.
- Tasks are not driven by a scheduler or thread pool: a suspended task runs again
  only when `resume` is called on it or a task it awaits completes. There is no
  asynchronous file I/O or timer; `rpp.fileio` reads and writes synchronously.
- `Event` works between threads of one process and is not tied to any
  operating-system handle.
- `rpp.net` covers IPv4 UDP only.

## Tests

    pip install .[test]
    pytest
# xlbase

Building blocks for threaded programs and simple logging. Nothing outside the
Python standard library is needed.

## Threading

- `xlbase.blocking_queue.BlockingQueue`: an unbounded, thread-safe FIFO queue.
  `put(item)` appends and wakes one waiting consumer. `take()` blocks until an
  item is there, then removes and returns the oldest one. `len(queue)` gives
  the number of queued items.
- `xlbase.countdown.CountDown(count)`: a latch. `down()` decrements the count
  and wakes every waiter when it reaches zero. `wait(timeout=None)` blocks
  until the count is zero or below, and returns `False` if the timeout ran
  out. `count()` returns the current count.
- `xlbase.thread_pool.ThreadPool(name="xlThreadPool")`: a fixed set of worker
  threads.
  - `start(thread_num)` launches the workers and raises `RuntimeError` if the
    pool is already running.
  - `post(task)` queues a callable. A falsy task is skipped when a worker
    takes it.
  - `stop()` lets the workers finish every task posted so far, then joins
    them.
  - A task that raises is reported through the `logging` module, and the
    worker carries on.
  - `running` tells whether the pool has been started and not yet stopped.
  - Used as a context manager, the pool calls `stop()` on exit. It does not
    start itself on entry.
- `xlbase.atomic.AtomicInteger(value=0, bits=None)`: an integer guarded by a
  lock. It has `set`, `get`, `get_and_add`, `add_and_get`,
  `increment_and_get` and `decrement_and_get`. With `bits` given, values wrap
  like a signed integer of that width.
- `xlbase.current_thread.current_tid()`: the operating-system id of the
  calling thread.

## Logging

- `xlbase.log_stream`:
  - `FixedBuffer(size=4096)` is a byte buffer of fixed capacity. Data that
    does not fit strictly within the space left is dropped whole. It has
    `append`, `reset`, `avail()`, `len()` and `bytes()`.
  - `LogStream` collects values with `<<` into a 4096-byte `FixedBuffer`.
    Booleans are written as `1`/`0`, integers in decimal, floats as `%.12g`,
    `None` as `(nullptr)`, and `str`, `bytes` and `Fmt` as they are. Any
    other type raises `TypeError`. Numbers are skipped when 32 bytes or fewer
    are left. `getvalue()` returns the collected text.
  - `Fmt(fmt, num)` renders one number with a printf-style format. It raises
    `TypeError` for a non-number and `ValueError` if the result is 32
    characters or longer.
- `xlbase.logger`:
  - `LogLevel` runs `TRACE`, `DEBUG`, `INFO`, `WARN`, `ERROR`, `FAIL`,
    `SYSERR`.
  - `set_log_level(level)` and `get_log_level()` manage a process-wide
    threshold, which defaults to `INFO`. The threshold filters only `TRACE`,
    `DEBUG` and `INFO` messages; `WARN` and above are always written.
  - `log(level, *args, out=None)` writes one line to `out` (standard output
    by default). It returns the line, or `None` if the message was dropped.
    The call site comes from the caller's frame. A line looks like
    `YYYYMMDD-HH:MM:SS.uuuuuu <tid> <LEVEL> <message> - <file>:<line> <func>()`.
  - `Logger(level, src_file, line, func, out=None)` is the same thing done by
    hand. Collect values in `logger.stream`, then call `finish()` or leave a
    `with` block. The line is written once. `write(data)` frames and writes
    arbitrary text.
- `xlbase.append_file.AppendFile(file_name, mode="a")`: a file opened in binary
  append mode with a 64 KiB buffer.
  - `append(data)` accepts `bytes` or `str`; `str` is written as UTF-8.
    Appending after `close()` raises `ValueError`.
  - It also has `flush()`, `close()` and `closed`, and works as a context
    manager.
- `xlbase.log_file`:
  - `log_file_name(base_name=None)` builds
    `<base>.<YYYYmmdd-HHMMSS>.<host>.<pid>.log`. The base defaults to the
    executable's full path.
  - `LogFile(base_name=None)` opens such a file for appending. It has
    `append`, `flush`, `close` and `name`, and works as a context manager.
    Once closed, `append` does nothing.

## Other helpers

- `xlbase.timestamp`:
  - `now()` returns microseconds since the epoch.
  - `format_time(show_micro=True, when=None)` renders local time as
    `YYYYMMDD-HH:MM:SS[.uuuuuu]`.
  - `user_format(fmt, when=None)` applies a `strftime` format to local time.
- `xlbase.process_info`:
  - `host_name()` returns the host name, or `unkownhost` if it cannot be read.
  - `pid()` returns the process id.
  - `exe_full_path()`, `exe_path()` and `exe_name()` give the executable's
    path, directory (with trailing slash) and file name. They read
    `/proc/self/exe`, so elsewhere they return empty strings.
- `xlbase.string_helper`:
  - `to_upper(text)` upper-cases ASCII letters only.
  - `format_string(fmt, *args)` applies `%`-formatting and truncates the
    result to 1022 characters.
- `xlbase.observer`:
  - `Observer` is abstract; subclasses implement `update()`.
    `observe(subject)` registers with a subject.
  - `Observable` holds observers through weak references. `register`
    adds one, and `notify()` calls `update()` on the live observers and drops
    the dead ones. `len()` counts registrations, including dead ones that
    have not yet been pruned.
- `xlbase.stock_factory`:
  - `StockFactory.get_stock(key)` returns the one live `Stock` for a key,
    creating it when none is held.
  - Entries are forgotten once nobody holds the stock. `keys()` lists the
    keys currently held, sorted.

## What it does not do

- There is no command-line program.
- Log lines from `xlbase.logger` go only to a text stream. They are not
  routed into `LogFile`, and there is no background or asynchronous writer.
- Log files are not rotated.

## Install

```
pip install .
```

## Example

```python
from xlbase.thread_pool import ThreadPool
from xlbase.countdown import CountDown
from xlbase.logger import LogLevel, set_log_level, log

set_log_level(LogLevel.TRACE)
done = CountDown(3)

with ThreadPool() as pool:
    pool.start(2)
    for _ in range(3):
        pool.post(done.down)
    done.wait(5.0)

log(LogLevel.INFO, "all tasks finished: ", 3)
```

## Tests

```
pip install .[test]
pytest
```
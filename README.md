# nexusprover

Building blocks for a prover node:

- `nexusprover.task`: `Task`, a frozen dataclass with `task_id`, `program_id` and `public_inputs`. Any byte sequence given as `public_inputs` is stored as `bytes`. `str(task)` gives `Task ID: ..., Program ID: ..., Public Inputs: [..]`, and the inputs are shown as a list of integers.
- `nexusprover.task_cache`: `TaskCache(capacity, expiration)`, a bounded cache of recent task IDs. Several asyncio tasks can share one. Entries older than `expiration` seconds are dropped. When the cache is full, `insert` evicts the oldest entry, and inserting an ID that is already present does nothing. `contains` and `insert` are coroutines.
- `nexusprover.system`: machine facts and measurements.
  - `num_cores()` gives the number of logical cores (at least 1).
  - `cpu_stats()` gives `(cores, MHz)`.
  - `flops_per_cycle_per_core()` returns 4 on x86-64 and 1 elsewhere.
  - `estimate_peak_gflops(num_provers)`.
  - `measure_gflops()` runs a floating-point benchmark once and caches the result.
  - `get_memory_info()` gives the process and total memory in thousandths of a MiB (see `bytes_to_mb`).
  - `total_memory_gb()` and `process_memory_gb()`.
- `nexusprover.fib`: the Fibonacci program.
  - `fib(n, init_a, init_b)` uses 32-bit wrapping arithmetic.
  - `read_inputs(lines)` parses up to three lines. The first line is required and the other two default to 1.
  - `main()` is the command.
- `nexusprover.version_checker`: looks up the latest release of the client through the GitHub releases API and reports the result as `VersionEvent` objects on an `asyncio.Queue`.
- `nexusprover.dashboard`: builds the dashboard text. It covers the title line (`title_text`), uptime (`uptime_text`), compact timestamps (`format_compact_timestamp`), cleaned HTTP error messages (`clean_http_error_message`), version extraction from update messages (`extract_version_from_message`) and the splash-screen lines (`splash_lines`, `LOGO_NAME`).

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The Fibonacci program

`nexusprover-fib` reads up to three lines from standard input:

1. The number of steps `n`. This line is required.
2. The first starting value. It defaults to 1.
3. The second starting value. It defaults to 1.

A starting value that is missing or cannot be parsed also becomes 1. The command prints the resulting value.

```
printf '9\n1\n1\n' | nexusprover-fib
```

If the first line is missing or is not an unsigned 32-bit integer, the command prints the error to standard error and exits with status 1.

## Tasks and the task cache

```python
import asyncio
from nexusprover.task import Task
from nexusprover.task_cache import TaskCache

async def demo():
    cache = TaskCache(capacity=1000, expiration=600.0)
    task = Task(task_id="t-1", program_id="fib_input_initial", public_inputs=b"\x09\x00\x00\x00")
    await cache.insert(task.task_id)
    print(await cache.contains("t-1"))  # True
    print(task)  # Task ID: t-1, Program ID: fib_input_initial, Public Inputs: [9, 0, 0, 0]

asyncio.run(demo())
```

## Checking for new releases

`version_checker_task(checker, events, shutdown)` checks once straight away and then runs until `shutdown` (an `asyncio.Event`) is set. It polls `shutdown` every 60 seconds and checks again once `VERSION_CHECK_INTERVAL` (24 hours) has passed. Use `version_checker_task_with_interval(checker, events, shutdown, check_interval)` to choose the interval in seconds.

The events put on `events`:

- The first check puts one event:
  - "🚀 New version ... available!" with `EventType.SUCCESS` and `LogLevel.INFO` when the release is newer.
  - "✅ Version ... is up to date" with `EventType.REFRESH` and `LogLevel.DEBUG` when it is not.
- A later check announces an update only the first time it becomes available.
- Any failed check puts "Failed to check for updates: ..." with `EventType.ERROR` and `LogLevel.DEBUG`.

`checker` is any `VersionCheckable`, meaning a `current_version` attribute plus an async `check_latest_version()` that returns a `GitHubRelease`. `VersionChecker("0.9.7")` is the ready-made one that queries the API, and `start_version_checker_task(current_version, events, shutdown)` runs the task with it. Versions are compared as semantic versions, and a leading `v` is accepted (`parse_version`). A version that cannot be parsed never counts as newer.

## What this package does not do

- It does not talk to a task orchestrator. There is no user or node registration, no task fetching and no proof submission.
- It does not generate proofs.
- It does not draw a terminal user interface. `nexusprover.dashboard` only produces the text such a screen would show.
- Apart from `nexusprover-fib` there is no command-line program.
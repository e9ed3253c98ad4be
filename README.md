# emblib

Building blocks for embedded-style control code, written in plain Python
with no dependencies beyond the standard library.

## What is in the package

| Module | Contents |
| --- | --- |
| `emblib.algorithm` | `clamp`, `median_of_three`, `find`, `binary_find`, `fill`, `count`, `equal`, `min_element`, `max_element`, `minmax_element` |
| `emblib.circular_buffer` | `CircularBuffer`: a ring buffer that overwrites its oldest element when full |
| `emblib.boundedqueue` | `BoundedQueue`: a FIFO queue that refuses pushes once full |
| `emblib.boundedstack` | `BoundedStack`: a LIFO stack that refuses pushes once full |
| `emblib.static_vector` | `StaticVector`: a list-like container with a fixed capacity |
| `emblib.static_string` | `StaticString`: a string holding at most `capacity - 1` characters |
| `emblib.bitset` | `Bitset`: a fixed number of bits, built from an integer or from 16-bit words |
| `emblib.chrono` | `Nanoseconds`, `Microseconds`, `Milliseconds`, `Seconds`, `duration_cast`, `SteadyClock`, `Watchdog` |
| `emblib.mathutil` | constants (`PI`, `TWO_PI`, `SQRT_3`, `FLT_MAX`, ...), `sgn`, `to_rad`, `to_deg`, `ispow2`, `rem_2pi`, `rem_pi`, `Range`, `Integrator`, `SignedPerUnit`, `UnsignedPerUnit` |
| `emblib.units` | `NamedUnit` and the units `Rpm`, `Eradps`, `Erad`, `Edeg`, `Mrad`, `Mdeg` |
| `emblib.filters` | `MovingAverageFilter`, `MedianFilter`, `ExpFilter`, `ExpMedianFilter`, `RampFilter` |
| `emblib.controller` | `ControllerLogic`, `PController`, `BackcalcPIController`, `ClampingPIController` |
| `emblib.motorcontrol` | `Phase3`, `MotorSpeed`, `MotorAngle`, Park and Clarke transforms, `calculate_sinpwm`, `calculate_svpwm`, `compensate_deadtime_v1`, `compensate_deadtime_v2` |
| `emblib.scheduler` | `BasicScheduler`, `TaskExecStatus` |
| `emblib.fsm` | `AbstractState`, `AbstractObject` |
| `emblib.eeprom` | `EepromDriver`, `EepromStorage`, `MemoryStatus`, `MemoryAccessError`, `StorageErrors` |
| `emblib.profiler` | `DurationLogger`, `ClockDurationLogger`, `AsyncDurationLogger` |
| `emblib.testrunner` | `UnitTestRunner` |

Containers raise `IndexError` when you pop or read from an empty container
or push onto a full one (except `CircularBuffer.push_back`, which
overwrites). The search functions in `emblib.algorithm` return an index,
and `len(seq)` when nothing is found.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Containers

```python
from emblib.circular_buffer import CircularBuffer

buf = CircularBuffer(4)
for value in range(1, 7):
    buf.push_back(value)      # the oldest values are overwritten once full
assert buf.front() == 3 and buf.back() == 6
assert len(buf) == 4
```

### Filters

```python
from emblib.filters import ExpFilter, MedianFilter

med = MedianFilter(5)          # window size must be odd
for sample in (-10, 10, 100, 100, 5):
    med.push(sample)
print(med.output())            # 10

smooth = ExpFilter(sampling_period=0.5, time_constant=1.0)
smooth.push(8.0)
print(smooth.output())         # 4.0
```

`MovingAverageFilter(window_size, value_type=float)` truncates its average
toward zero when `value_type` is an integer type. `RampFilter` moves its
output toward the last pushed reference by one step per `update()`.

### A PI controller

```python
from emblib.controller import ClampingPIController, ControllerLogic

pi = ClampingPIController(ControllerLogic.DIRECT, kp=1.0, ki=10.0, ts=0.001,
                          lower_limit=-1.0, upper_limit=1.0)
pi.push(ref=0.5, meas=0.2)
print(pi.output(), pi.integral())
```

`ControllerLogic.DIRECT` uses `ref - meas` as the error,
`ControllerLogic.INVERSE` uses `meas - ref`.

### Time, scheduling and a custom clock

`SteadyClock` reports zero until you install a time source with
`SteadyClock.init`; `SteadyClock.deinit` restores that default.
`BasicScheduler` raises `RuntimeError` if the clock has not been initialized.

```python
from emblib.chrono import Milliseconds, SteadyClock
from emblib.scheduler import BasicScheduler, TaskExecStatus

ticks = 0
SteadyClock.init(lambda: Milliseconds(ticks))

scheduler = BasicScheduler()
scheduler.add_task(lambda index: TaskExecStatus.SUCCESS, Milliseconds(10))
ticks = 10
scheduler.run()                # the task is due and is called with index 0
```

A scheduler holds at most eight periodic tasks; a task that returns
`TaskExecStatus.FAIL` is retried on the next `run()`. One delayed task can be
added with `add_delayed_task`. A `Watchdog(timeout)` reports `good()` until
more than `timeout` has passed since its last `reset()`; a negative timeout
never expires.

### State machines

`AbstractObject(state_factory, states, init_state)` builds one state object
per identifier. `change_state(state)` calls `finalize` on the current state,
switches, then calls `initiate` on the new one. Each state's
`time_since_enter()` is measured on `SteadyClock`.

### Redundant EEPROM storage

Implement `EepromDriver` for your device and hand it to `EepromStorage`.
The CRC function defaults to `zlib.crc32`.

```python
from emblib.eeprom import EepromDriver, EepromStorage

class RamDriver(EepromDriver):
    def __init__(self):
        self.pages = [bytearray(64) for _ in range(8)]

    def read(self, page, offset, length, timeout):
        return bytes(self.pages[page][offset:offset + length])

    def write(self, page, offset, data, timeout):
        self.pages[page][offset:offset + len(data)] = data

    def page_bytes(self):
        return 64

    def page_count(self):
        return 8

storage = EepromStorage(RamDriver())
storage.write_struct(0, "<IfHi?", (42, 3.5, 12, -100, True))
print(storage.read_struct(0, "<IfHi?"))   # (42, 3.5, 12, -100, True)
```

Every page is written twice, to page `n` and to page
`n + available_page_count`, each copy followed by its little-endian CRC-32.
`read` checks both copies, rewrites a damaged or outdated one from the other,
and raises `MemoryAccessError` with `MemoryStatus.DATA_CORRUPTED` when
neither copy is valid. The counters in `storage.errors` record what happened.
Out-of-range pages or lengths raise `MemoryAccessError` with
`INVALID_ADDRESS` or `INVALID_DATA_SIZE`.

### Profiling

```python
import time
from emblib.chrono import Nanoseconds
from emblib.profiler import DurationLogger

DurationLogger.init(lambda: Nanoseconds(time.perf_counter_ns()))
with DurationLogger("work"):
    sum(range(10_000))         # prints "work: <n> us"
```

`ClockDurationLogger` reports clock cycles from a down-counting timer, and
`AsyncDurationLogger` stores durations in one of ten channels for
`AsyncDurationLogger.report()` to print later.

### Testing on target

`UnitTestRunner(write)` counts assertions made through `assert_equal` and
`assert_true`. `run_test(func, name)` writes a `[ PASSED ]`, `[ FAILED ]` or
`[  SKIP  ]` line, and `print_result()` writes the totals followed by `OK`
or `FAIL`.

## What the package does not do

- It talks to no hardware. There is no EEPROM driver and no timer source:
  you supply an `EepromDriver` and the time functions given to
  `SteadyClock.init` and the profilers.
- It has no singleton or monostate helper classes.
- It installs no command-line program; it is used as a library.
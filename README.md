# swipekit

A small library of building blocks for swipe-keyboard input handling and
the support code around it. It has no dependencies outside the standard
library.

## Modules

- `swipekit.swipe`: `SwipePoint` holds one touch sample. Its
  `compare_with(prev, time_ms)` method computes distance, velocity and angle
  (in degrees) from the previous sample and returns them as a `SwipeDelta`
  `(velocity, distance, time_ms)`. A non-positive time counts as 1 ms.
  `key_labels(shift, alt)` returns the character key labels for a keyboard
  mode.
- `swipekit.timer`: `global_time_ms()`, a millisecond `Timer` and a
  `CountdownTimer`. Both timers accept a custom clock function.
- `swipekit.average`: `Average`, `LimitedAverage` (mean of the most recent
  values), `WeightedAverage` (decaying sum) and
  `RecentAverageTotalPerSecond`. The averages return -1 when nothing has
  been added.
- `swipekit.nullable`: `Nullable` and `NullableBool`, values that may be
  unset. `NullableBool` has compare-and-set methods `set_if_unset` and
  `unset_if_eq`.
- `swipekit.textutils`: `trim`, `to_lower` (ASCII only),
  `format_with_commas`, `next_power_of_2`, `append_datetime_to_filename`
  and `read_file`.
- `swipekit.datetimes`: `DateTime` with second and microsecond fields.
  `DateTime.from_string` parses `2013-04-19T01:05:20.250` style strings as
  UTC. `as_gmt_str` and `as_local_str` format in a `TimeFormat` style
  (`DEFAULT`, `COMPACT`, `FILENAME`).
- `swipekit.printfbuf`: `PrintfBuffer`, a `%`-format text accumulator with
  HTML or plain-text headings, lists, lines and error highlighting. The
  context managers `ScopedTable` and `ScopedTableRow` build tables, with
  `TableAlignment` for cell alignment.
- `swipekit.threadname`: `register_thread(name)` and
  `current_thread_name()`.
- `swipekit.tokens`: `tokenize(text, separator)`, which drops empty tokens.
- `swipekit.endian`: `endian_swap16`, `endian_swap32`, `read_le_int16`,
  `read_le_int32`, `write_big_endian` and `write_little_endian`.
- `swipekit.reader`: the abstract `Reader`, `BufferReader`,
  `StringReader` and `buffer_hash`.
- `swipekit.files`: `file_type`, `make_dir_with_checks`, `delete_file`,
  `file_exists`, `file_size` and `read_whole_file`. `FileReader` and
  `FileWriter` handle length-prefixed strings and little-endian integers.
  `read_vocab` loads `word count` lines into `Vocab` entries with their
  relative frequencies.
- `swipekit.sync`: a scoped `Lock` that records how long it was held, a
  `ReadWriteMutex` and a `Condition` with predicate and timeout waits.
- `swipekit.queues`: `MpscQueue` and `CountedQueue`.
- `swipekit.static_array`: the fixed-capacity containers `StaticArray`,
  `AppendOnlyArray` and `StaticDeque`.
- `swipekit.stats`: `Stat` and `StatCount`, the shared `Stats.instance()`
  registry, and the shortcuts `stat_value(msg, value)` and
  `stat_count(msg, value)`.

## Installing

```
pip install .
```

## Example

```python
from swipekit.swipe import SwipePoint
from swipekit.average import Average

prev = SwipePoint(x=0, y=0)
cur = SwipePoint(x=3, y=4)
velocity, distance, elapsed = cur.compare_with(prev, 10)
# distance == 5, velocity == 0.5, cur.angle == 53

avg = Average()
avg.add(velocity)
print(avg.average())
```

## What it does not do

swipekit draws nothing and reads no touch input. It does not recognise
swipes as words. It has no worker-thread class and no logging output: the
statistics are kept in memory and read back through `Stats`, and nothing
writes them to a console or a log file.

## Running the tests

```
pip install ".[test]"
pytest
```
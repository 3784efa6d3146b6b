# catenakit

Pure-Python building blocks that model the support code of a LoRaWAN sensor
node. It includes:

- a cooperative polling engine
- flag-filtered logging
- calendar and GPS time helpers
- a compact 24-bit float encoding
- bootloader app-info blocks
- status-LED blink patterns
- periodic timers
- a debounced pulse totalizer
- an interactive line collector
- the text codecs used for FRAM fields

Hardware access is supplied by you as plain callables, so everything runs and
tests on a host. Those callables are:

- a pin writer
- a millisecond clock that wraps at 32 bits
- an input reader
- a byte stream

## Installation

```
pip install catenakit
```

For the test suite:

```
pip install "catenakit[test]"
pytest
```

## Modules

- `catenakit.polling`: `Pollable`, an abstract base with `poll()`, and
  `PollingEngine`, which polls registered objects in registration order
  (`register`, `poll`, `len`).
- `catenakit.log`: `DebugFlags` (an `IntFlag`) and `Log` with `is_enabled`,
  `printf`, `cond` and `set_flags`. `printf` formats a `%`-style message,
  truncates it to 126 characters and writes it to the given stream, or to
  standard output when none is given. A shared instance is available as
  `catenakit.log.log`.
- `catenakit.date`: `days_since_proleptic_zero`, `is_leap_year`,
  `is_valid_gps_time`, `is_valid_common_time`, `gps_from_common`,
  `common_from_gps`, `is_valid_year_month_day`,
  `is_valid_hour_minute_second` and `day_in_year`.
- `catenakit.sflt24`: `f2sflt24` encodes a float into the 24-bit
  sign/exponent/mantissa format, returning an int in `0..0xFFFFFF`.
- `catenakit.appinfo`: the application information block.
  - `AppInfo` is a dataclass with `to_bytes`, `total_size`,
    `public_key_address`, `hash_address` and `signature_address`.
  - `parse_app_info` decodes a block and raises `ValueError` on short data
    or a bad magic number.
- `catenakit.led`: `LedPattern` and `StatusLed`.
  - `StatusLed` takes a pin writer and a clock.
  - Its methods are `begin`, `poll` and `set`.
- `catenakit.timer`: `Timer`, which counts interval expirations.
  - Its methods are `begin`, `end`, `set_interval`, `retrigger`, `poll`,
    `is_ready`, `read_ticks`, `peek_ticks` and `remaining`.
  - When polled late it catches up and records the missed ticks in
    `overrun`.
- `catenakit.totalizer`: `Totalizer`, a debounced falling-edge counter.
  - Its methods are `begin`, `poll`, `delta_count_and_time` and
    `set_reference`.
  - The debounce time defaults to 50 ms.
- `catenakit.linecollector`: `ReadStatus`, `Columnator` and
  `StreamLineCollector`.
  - `StreamLineCollector` collects one line at a time with echo.
  - It handles backspace/delete, `^U` to cancel and `^R` to retype.
  - CR, LF and CR LF each end a line.
  - Overlong lines complete with `ReadStatus.OVERRUN`.
- `catenakit.framparse`: `parse_field` turns hex text (optionally split by
  `-`) into exactly `size` bytes.
  - The bytes are right-justified.
  - They are byte-reversed for number fields.
- `catenakit.framformat`: `format_field` turns field bytes into lower-case
  hex text.

## Examples

```python
from catenakit.polling import PollingEngine
from catenakit.timer import Timer

now = 0
engine = PollingEngine()
timer = Timer(clock=lambda: now, engine=engine)
timer.begin(1000)

now = 2500
engine.poll()
print(timer.read_ticks())  # 2
```

```python
from catenakit.framparse import parse_field
from catenakit.framformat import format_field

data = parse_field("01-23-45-67-89-ab-cd-ef", 8, True)
print(format_field(data, True))  # 01-23-45-67-89-ab-cd-ef
```

## What it does not do

- It does not talk to hardware. There are no I2C, GPIO, watchdog or radio
  drivers; you supply the pin, clock, input and stream callables yourself.
- It does not provide FRAM storage. Only the text codecs for field values
  (`parse_field`, `format_field`) are here: no object store, no cursor and
  no on-media layout.
- It does not provide an interactive command processor. `StreamLineCollector`
  gathers lines, but nothing dispatches them as commands.
- It installs no command-line program.
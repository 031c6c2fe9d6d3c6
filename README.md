# dinner

Sets a dining-philosophers table from command-line arguments and starts one
thread per philosopher. There is one fork between each pair of neighbours,
and every fork carries its own lock.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same entry point can be run as `python -m dinner.cli`.

Example:

```
philo 4 800 200 200
```

Each philosopher thread takes the table's control lock and prints one line:

```
<milliseconds since start> <philosopher id> is sleeping
```

then ends. The program waits for every thread and exits with status 0.
The clock only counts whole seconds (`dinner.timing.get_time_ms` always
returns a multiple of 1000), so the elapsed time shown is a multiple of
1000, usually `0`.

If a thread cannot be started or joined, the reason is printed to standard
output and the exit status is still 0.

## Argument rules

- Four or five arguments are required.
- No argument may be empty.
- `number_of_philosophers` must be between 1 and 200.
- `time_to_die`, `time_to_eat` and `time_to_sleep` must be between 60 and
  800.
- The optional meal count has the same 60–800 bound. If it is left out, it
  defaults to 1.
- Whitespace before and after a number is ignored, and one leading `+` or
  `-` is read as a sign. Values beyond the 32-bit signed range count as out
  of range.

Invalid arguments make the program write `philo: <reason>` to standard
error and exit with status 1. For a value that is not a number, two lines
are written: `philo: non-numeric arguments not allowed`, then the line
naming the field, for example
`philo: invalid value for time_to_eat: expected 60-800 ms`.

## What it does not do

Philosophers do not take forks, eat, think or die, and nothing watches the
time limits: `time_to_die`, `time_to_eat`, `time_to_sleep` and the meal
count are validated and stored on the `Table`, but the running threads do
not use them. Each thread prints its single "is sleeping" line and stops.

## Library use

- `dinner.parser.parse_args(args)` checks a list of argument strings
  (without the program name) and returns a frozen `Settings` dataclass. It
  raises `ArgumentError`, whose `kinds` lists every `PhiloErrno` reported
  and whose `kind` is the last of them; `str(err)` gives the
  `philo: ...` lines.
- `dinner.parser.parse_int(text, minimum, maximum)` parses one padded
  integer; it raises `ArgumentError` for non-numeric text and `ValueError`
  for a number out of range. `atol`, `skip_chars` and `error_message` are
  the helpers behind it.
- `dinner.table.init(args)` parses the arguments and returns a `Table`
  built by `Table.from_settings(settings)`: a list of `Fork` objects and a
  list of `Philosopher` objects, where philosopher `n` uses forks
  `(n, n - 1)` and philosopher 0 uses forks `(0, count - 1)`.
- `dinner.simulation.start_simulation(table)` records the start time,
  starts one thread per philosopher running `dinner.routine.philo_routine`,
  and joins them all. It raises `SimulationError` if a thread cannot be
  started or joined.
- `dinner.routine.format_action(philo, text, now)` returns the log line for
  a given time; `print_action(philo, text)` prints it for the current time.
- `dinner.cli.main(argv=None)` runs the whole program and returns the exit
  status.

## Running the tests

```
pip install .[test]
pytest
```
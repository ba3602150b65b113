# pypipex

`pypipex` runs the equivalent of the shell construct

```sh
< infile cmd1 | cmd2 > outfile
```

without going through a shell. It opens the input file and starts the first
command with that file as its standard input. The first command's output is
piped into the second command. The second command's output goes to the output
file. The output file is created if it does not exist and truncated if it
does. A newly created file gets mode `0600`.

## Installation

```sh
pip install .
```

## Command line

```sh
pypipex infile "cmd1 args" "cmd2 args" outfile
```

The command takes exactly four arguments. With any other number it prints a
usage line to standard error and exits with status 1.

How the commands are interpreted:

- Each command string is split on spaces only. Empty pieces are dropped and
  quotes are not interpreted.
- A command name that contains a `/` is used as given if it is executable.
  Otherwise `Command <name> not found` is printed to standard output.
- Any other name is looked up in the directories listed in `PATH`, in order.
  If `PATH` is not set, the name refers to a file in the working directory.
- An empty command string prints `Command 1 null` or `Command 2 null`.
- Both commands run with an empty environment.

If the input file cannot be opened or the first command cannot be started,
the error is reported on standard error. The second command still runs, with
empty input. If the output file cannot be opened or the second command cannot
be started, the error is reported on standard error and the exit status is 1.

The exit status is the exit status of the second command. It is 1 if the
second command could not be run or was killed by a signal.

Example:

```sh
pypipex input.txt "grep error" "wc -l" count.txt
```

## Library use

The pipeline is also available as a function:

```python
import os

from pypipex.path import search_dirs
from pypipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", search_dirs(os.environ))
```

`run_pipeline` returns the exit status described above. It reports setup
errors on standard error and does not raise them. Internally these errors are
represented by `pypipex.pipeline.PipexError`.

## Helper modules

- `pypipex.path`
  - `get_env(name, envp)` reads a variable from a mapping or from a sequence of
    `KEY=VALUE` entries.
  - `search_dirs(envp)` returns the directories in `PATH`, or `None` when
    `PATH` is not set.
  - `find_command(path, cmd)` resolves a command to the file to execute.
- `pypipex.strings`
  - String helpers with C-library semantics over `str`: `split`, `strchr`,
    `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strjoin`, `strlcpy`, `strlcat`,
    `strmapi`, `striteri`, `strtrim` and `substr`.
- `pypipex.chars`
  - Character classes: `isalpha`, `isdigit`, `isalnum`, `isascii` and
    `isprint`.
  - Case mapping: `tolower` and `toupper`.
  - `atoi`, which parses like C and wraps to 32 bits.
  - `itoa`, which accepts 32-bit values only.
- `pypipex.memory`
  - Helpers for `bytearray` buffers: `bzero`, `calloc`, `memchr`, `memcmp`,
    `memcpy`, `memmove` and `memset`.
- `pypipex.printf`
  - `render(fmt, *args)` returns formatted text for the conversions
    `%c %s %p %d %i %u %x %X %%`.
  - `print_formatted(fmt, *args, stream=None)` writes that text and returns
    its length.
- `pypipex.output`
  - `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
    which is standard output by default.

## Tests

```sh
pip install ".[test]"
pytest
```
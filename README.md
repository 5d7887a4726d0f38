# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file and the second writes to an output file, much as the shell line

```
< infile cmd1 | cmd2 > outfile
```

would do.

## Installation

```
pip install .
```

## Usage

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

- Exactly four arguments are required. With any other number a usage line is
  printed on stderr and the exit status is 1.
- `infile` is opened for reading and `outfile` is created or truncated with
  mode `0644`. Both are opened before any error is reported, so `outfile` is
  created even when `infile` cannot be read. If either cannot be opened, the
  error is printed on stderr and the exit status is 1.
- Each command string is split on spaces; empty words are dropped and quotes
  are not interpreted.
- Each command name is looked up as `<dir>/<name>` in the directories of the
  `PATH` environment variable, in order, and the first executable match is
  used. Names containing `/` are still joined to each directory.
- A command that is not found is reported on stderr (`pipex: Path error:
  command not found: <name>`) and its stage is skipped: if the first command
  is missing the second reads from an empty input, if the second is missing
  the first command's output is discarded.
- The exit status is that of the second command, or 127 when the second
  command was not found.

## Library use

```python
from pipex.cli import PipelineError, run_pipeline
from pipex.command import CommandNotFoundError, find_command_path, parse_command

argv = parse_command("ls -l")                                # ["ls", "-l"]
path = find_command_path(argv, {"PATH": "/usr/bin:/bin"})   # e.g. "/usr/bin/ls"

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt",
                      {"PATH": "/usr/bin:/bin"})
```

`pipex.command`

- `get_path(env)` returns `env["PATH"]` or `None`.
- `parse_command(text)` splits a command string on spaces.
- `find_command_path(argv, env)` returns the executable path for `argv[0]`,
  or raises `CommandNotFoundError` (a `LookupError`) when there is none or
  `argv` is empty.

`pipex.cli`

- `open_infile(path)` and `open_outfile(path)` open the binary file objects
  used by the pipeline, raising `PipelineError` (an `OSError`) on failure.
- `run_pipeline(infile, first, second, outfile, env=None)` runs the pipeline
  and returns the exit status described above. `env` defaults to the current
  environment and is passed to both commands. It raises `PipelineError` when a
  file cannot be opened or a command cannot be started; a command that is not
  found does not raise.
- `main(argv=None)` is the `pipex` command.

`pipex.textutil` holds small string helpers:

- `atoi(text)` parses a leading decimal integer after whitespace and one sign;
  a value past the signed 64-bit range gives -1 (positive) or 0 (negative).
- `itoa(number)` renders a 32-bit integer, raising `OverflowError` outside
  that range.
- `split(text, sep)` splits on a one-character separator, dropping empty
  words; `None` or empty text gives `[]`.
- `strncmp(first, second, count)` returns the difference of the first
  differing code points within `count` characters, or 0.
- `strnstr(haystack, needle, length)` returns the rest of `haystack` from the
  first match of `needle` within `length` characters, or `None`.
- `strtrim(text, charset)` strips characters of `charset` from both ends.
- `substr(text, start, length)` returns up to `length` characters from
  `start`.

`pipex.formatting` provides `sprintf(fmt, *args)` and
`printf(fmt, *args, file=None)` for the conversions `%c %s %p %d %i %u %x %X`
and `%%`. Integers wrap to 32 bits, `%s` of `None` gives `(null)`, `%p` of
`None` or 0 gives `0x0`, unknown conversions produce nothing, and a trailing
lone `%` ends the output. `printf` writes to stdout by default and returns the
number of characters written.

## Limits

Only two commands are supported, with no here-document mode, no quoting and
no shell expansion of any kind.

## Tests

```
pip install .[test]
pytest
```
# pipex

`pipex` runs a chain of commands the way a shell pipeline does. The first
command reads its standard input from a file or from a here-document. The
last command writes its output to a file.

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Usage

Two commands are installed.

### `pipex`

```
pipex infile "cmd1 args" "cmd2 args" ... "cmdN args" outfile
```

This behaves like the shell line

```
< infile cmd1 args | cmd2 args | ... | cmdN args > outfile
```

The output file is created if it is missing. If it already exists, it is
truncated.

#### Here-document

```
pipex here_doc LIMITER "cmd1 args" "cmd2 args" ... outfile
```

`pipex` reads lines from standard input until a line reading `LIMITER`
appears, or until input ends. It writes those lines to a file named
`heredoc_tmp` in the current directory, and the first command reads that
file. The output is appended to `outfile`, as with
`cmd1 << LIMITER | cmd2 >> outfile`. At least two commands are required in
this form.

`heredoc_tmp` is deleted when `pipex` finishes. `pipex` also deletes a
`heredoc_tmp` left in the current directory when it runs without a
here-document.

### `pipex-basic`

```
pipex-basic infile "cmd1 args" "cmd2 args" outfile
```

This command takes exactly two commands and always truncates `outfile`.

If either command gets the wrong number of arguments, it prints a usage line
to standard error and exits with status 1.

## How commands are found

Each command argument is split on spaces, and empty pieces are dropped. The
first word is the program to run.

- If the word starts with `.` or `/`, or the environment is empty, it is
  used as a path exactly as written.
- Otherwise `pipex` searches every directory listed in `PATH`. When more
  than one directory holds an executable of that name, the last one wins.
  If a later directory holds a file of that name that is not executable,
  the earlier match is dropped.

Each command runs with the environment `pipex` was started with.

## Errors and exit status

The following are reported on standard error and end the run with status 1
before any command starts:

- an empty command, or one made only of spaces;
- an input file that is missing or unreadable;
- an output file that exists but cannot be written.

A command that cannot be found or started is reported on standard error. The
other commands still run, and the next command in the chain gets empty
input. A command that fails this way counts as exit status 1.

Otherwise `pipex` exits with the status of the last command. A command
killed by a signal gives 128 plus the signal number.

## What it does not do

Command arguments are split on single spaces only. There is no quoting, no
escaping, no variable expansion and no globbing. An argument cannot contain
a space, and a command cannot use shell syntax.

## Library use

The pieces the commands are built from can be imported directly:

- `pipex.pipeline.Pipeline(commands, infile, outfile, env=None, append=False)`
  holds a list of argument lists. Its `.run()` method runs the pipeline and
  returns the last command's exit status.
- `pipex.pipeline.write_heredoc(limiter, stream, path)` copies lines from a
  text stream into a file, stopping at the limiter. It returns the number of
  lines written.
- `pipex.pipeline.exit_status(returncode)` turns a subprocess return code
  into a shell-style status.
- `pipex.parsing.parse_commands(args)` turns command strings into argument
  lists. `pipex.parsing.check_access(infile, outfile, heredoc=False)` checks
  the files at either end.
- `pipex.resolve.resolve_command(cmd, env)` finds the executable for a
  command name. It uses `path_entries`, `search_path` and `check_explicit`
  from the same module.
- `pipex.errors.PipexError` is raised for every failure above. It carries a
  `message` and an `exit_code`. `pipex.errors.remove_heredoc(path)` deletes
  the here-document file.
- `pipex.linereader.LineReader(stream, buffer_size=4)` and
  `pipex.linereader.read_lines(stream, buffer_size=4)` read a text or binary
  stream line by line, keeping the newline. They pull a fixed number of
  units from the stream at a time.
- `pipex.textops` holds small string helpers: `split_words`, `atoi`,
  `atoll`, `itoa`, `trim`, `substr`, `find_within`, `compare_prefix`,
  `find_char`, `rfind_char` and `is_space`.
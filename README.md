# cursus

Two small command-line tools and the string helpers they use.

## push-swap

`push-swap` takes distinct integers, one per argument, and prints the
instructions that sort them, one per line. It works on two stacks `a` and
`b` with the operations `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`,
`rra`, `rrb` and `rrr`.

```
push-swap 3 2 1
push-swap 4 67 3 87 23 -5
```

Each argument must be a plain integer with an optional leading minus sign
that fits in a signed 32-bit range and is shorter than 12 characters. An
empty argument is ignored. Anything else — a space or a plus sign inside an
argument, a non-digit, a value out of range, or a repeated value — prints
`Error` on standard error and exits with status 1. With no arguments, or
with input that is already in ascending order, nothing is printed.

Up to five numbers are sorted with fixed move sequences (`sort_small`,
`sort_three`, `sort_four`, `sort_five`); larger inputs are sorted with a
binary radix sort over each number's rank (`sort_big`).

From Python:

```python
from cursus.sorting import push_swap

moves = push_swap([3, 2, 1])   # ['sa', 'rra']
```

Other pieces:

- `cursus.stack.PushSwap(values, indices=None)` — the two-stack machine.
  Every operation method (`sa()`, `pb()`, `rra()`, ...) changes `a`/`b` and
  appends its name to `operations`; `values_a()`, `indices_a()` and
  `is_sorted()` inspect stack `a`. Entries are `cursus.stack.Element`
  records with a `value` and an `index` (rank).
- `cursus.sorting.assign_indices(values)` returns each value's rank,
  `maximum_bits(n)` the number of bits needed for `n`.
- `cursus.args` checks arguments: `parse_args(args)`, `parse_int(text)` and
  `check_min_max(text)`, raising `ArgumentError` (a `ValueError`).

## pipex

`pipex` behaves like the shell line `< infile cmd1 | cmd2 > outfile`:

```
pipex infile "grep foo" "wc -l" outfile
```

- Commands are split on spaces (no quoting) and looked up on the `PATH` of
  the environment; an unknown command is reported as
  `command not found: <cmd>` on standard error and contributes no output.
- A missing input file is reported as `no such file or directory: <file>`;
  the first command then reads the inherited standard input.
- The output file is created or truncated with mode 0644.
- The exit status is that of the second command. With a wrong number of
  arguments it prints `invalid number of arguments` and exits with 0.

From Python, `cursus.pipex.run_pipeline(infile, cmd1, cmd2, outfile, env)`
runs the same pipeline and returns the second command's status;
`get_path(cmd, env)` resolves a command on `PATH`, `get_env_path(env)`
returns the `PATH` value, and `check_input_file(path)` reports a missing
input file.

Only two commands are supported; there is no here-document mode and no
chaining of more than one pipe.

## String helpers

`cursus.libft` provides `atoi`, `itoa`, `split`, `strjoin`, `strncmp`,
`strnstr`, `strtrim`, `substr`, `strlcpy` and `strlcat`, keeping the edge
cases of the classic routines of the same names:

- `atoi` skips leading whitespace, accepts one sign, and gives up with `-1`
  (or `0` for negative numbers) past ten digits.
- `split(text, sep)` drops empty words.
- `strlcpy(src, size)` returns `(copy, len(src))`;
  `strlcat(dst, src, size)` returns `(result, intended_length)`.

## Tests

```
pip install -e ".[test]"
pytest
```
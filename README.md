# bgshell

`bgshell` starts a login shell on a fresh pseudo-terminal and passes data
between it and your own terminal until the shell exits. Alongside the
command it offers the pieces a small terminal front end needs.

## Installing

```
pip install .
```

## Running

```
bgshell
bgshell --lines 30 --columns 100
bgshell -- /bin/bash -i
```

With no command, `bgshell` runs `/bin/sh -l`. The window size is taken
from your terminal (40 lines by 80 columns when there is none) unless
`--lines` or `--columns` is given. Before starting the shell, `PATH` is
prefixed with `<current directory>/app/native` and `LD_LIBRARY_PATH` with
`<current directory>/app/native/lib:/usr/lib/qt4/lib`. Your terminal is put
in raw mode while the shell runs. The exit status is the shell's, `128 + n`
when it was killed by signal `n`, and 127 when the program cannot be
started.

## Modules

- `bgshell.app`: the command (`main`), plus `build_environment(cwd, environ)`
  which returns the adjusted environment, and `spawn_shell(pty_pair,
  program, args)` which runs a program on the slave side of a `PtyPair`
  with it as controlling terminal and returns the `subprocess.Popen`.
- `bgshell.ptypair`: `PtyPair`, a context manager that opens a
  master/slave pseudo-terminal pair (`master_fd`, `slave_fd`, `tty_name`),
  sets its window size (`set_win_size`) and echo mode (`set_echo`), reads
  and writes its attributes (`get_attributes`, `set_attributes`), closes
  the slave alone (`close_slave`) and makes the slave the controlling
  terminal of a new session (`set_controlling_tty`). Failures raise
  `PtyError`, a subclass of `OSError`.
- `bgshell.colors`: colour spaces (`ColorSpace`), `CharacterColor` for the
  default, system, 256-colour and RGB spaces, palette entries
  (`ColorEntry`, `Color`), `color256`, terminal cells (`Character`) and the
  built-in schemes: `color_table(ColorScheme.GREEN_ON_BLACK)` and so on.
  An unknown scheme raises `ValueError`.
- `bgshell.keys`: the soft-key row (`SoftKey`: Ctrl+, Tab, arrows, Esc) and
  trackpad motion turned into terminal bytes (`key_sequence`,
  `trackpad_sequence`). `SoftKeyboard` keeps a sticky Ctrl state, under
  which left and right send lower-case final bytes, and writes through a
  callable you supply.
- `bgshell.settings`: `Settings` (font size, default 22, and an HTTP proxy
  switch) loaded from and saved to an INI file; `font_size_choices()`
  gives 18 to 50 in steps of 4.
- `bgshell.sshproxy`: keeps `<data_dir>/.ssh/config` in step with an HTTP
  proxy. `apply_proxy_settings` adds a `corkscrew` `ProxyCommand` to the
  `Host *` block (writing credentials to a private `myauth` file when a
  user is given) or removes every `ProxyCommand` when the proxy is off.
  `add_proxy`, `remove_proxy` and `proxy_command` work on lists of lines.

## Examples

```python
import os
from bgshell.ptypair import PtyPair
from bgshell.keys import SoftKey, SoftKeyboard

with PtyPair() as pty:
    pty.set_win_size(40, 80)
    keyboard = SoftKeyboard(lambda data: os.write(pty.master_fd, data))
    keyboard.press(SoftKey.UP)     # writes and returns b"\x1b[A"
    keyboard.toggle_ctrl()
    keyboard.press(SoftKey.LEFT)   # writes and returns b"\x1b[d"
```

```python
from bgshell.sshproxy import ProxyDetails, apply_proxy_settings

apply_proxy_settings("data", ProxyDetails(host="proxy.example.com", port=8080), enabled=True)
```

## What it does not do

`bgshell` does not emulate a terminal screen. It does not interpret escape
sequences, keep a character grid or scrollback, or draw anything: the
shell's output is written as-is to your own terminal, which does the
rendering. The colour and key modules supply data for a front end that
draws its own screen; no such screen is part of this package. It also does
not query the system for proxy details: the caller passes them in.

## Tests

```
pip install .[test]
pytest
```
# vmdos

`vmdos` models a tiny x86 text-mode hobby kernel as plain Python objects.
Nothing runs on real hardware: the screen is a list of 16-bit VGA cells, the
timer is a counter, and the keyboard is a queue of scancodes.

## What is in the package

- `vmdos.screen` – `Screen`, an 80×25 grid of VGA cells with `putc_at`,
  `write`, `write_at`, `right_at`, `box`, `write_hex`, `write_dec`,
  `row_text`, and `vga_entry(c, fg, bg)` to build a raw cell value.
- `vmdos.terminal` – `TextConsole`, a simple early-boot console writing with
  one packed colour byte and tracking a cursor position.
- `vmdos.theme` – the `Theme` dataclass and `theme_get()`.
- `vmdos.descriptors` – `encode_gdt_entry`, `encode_idt_entry`,
  `GlobalDescriptorTable`, `default_gdt()` (null / kernel code / kernel data)
  and the 256-gate `InterruptDescriptorTable`; `pack()` returns the table bytes.
- `vmdos.vfs` – `Vfs`, a flat namespace of `VNode`s where newer entries shadow
  older ones; `mount_initrd` adds `/hello.txt`, `ramfs_add` adds an in-memory
  file (at most 32 per file system). Reading a missing file raises
  `FileNotFoundError`.
- `vmdos.pit` – `Pit`, a tick counter with `init(hz)`, `tick()` and
  `sleep(ticks)`, plus `pit_divisor(hz)`.
- `vmdos.toast` – `Toaster`, one notification at a time on row 23, erased by
  `tick()` once expired.
- `vmdos.anim` – `Animator` with a spinner and an `HH:MM:SS` clock
  (`format_clock`) on row 24.
- `vmdos.layout` – `Layout`, drawing the three-panel chrome or the fullscreen
  shell frame.
- `vmdos.interrupts` – `InterruptTable` dispatching `Registers` to handlers,
  with `exception_name(n)` for the 32 CPU exception vectors.
- `vmdos.keyboard` – `Key`, `translate`, `scancode_to_ascii` and `Keyboard`,
  fed with scancodes via `feed(...)`, with `readline(max_len)` line editing.
- `vmdos.commands` – the kernel shell's command table (`default_commands()`):
  `help`, `clear`, `echo`, `panel`, `progress`, `ls`, `cat`, `toast`,
  `status`.
- `vmdos.shell` – `Shell`, which prints into the shell panel, scrolls it,
  toggles fullscreen on an empty line and runs commands via `execute(line)`.
- `vmdos.kernel` – `Kernel`, which owns every subsystem; `boot()` brings them
  up, reads `/hello.txt` as the first program, draws the UI and runs the shell.
- `vmdos.usershell` – `UserShell`, a separate line shell over text streams
  with `help`, `time`, `echo` and `clear`, and `user_init_start(shell)`.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
vmdos "help" "status"
```

Each argument is one line typed into the kernel shell; with no arguments the
lines are read from standard input. The lines are turned into scancodes, the
kernel boots, the shell runs them until input runs out, and the final 80×25
screen is printed.

## Using it as a library

```python
from vmdos.screen import Screen
from vmdos.vfs import Vfs, mount_initrd, ramfs_add

screen = Screen()
screen.box(0, 0, 20, 5, 0x0F, 0x00, " Demo ")
print(screen.row_text(0))

vfs = Vfs()
mount_initrd(vfs, print)
print(vfs.read("/hello.txt", 63, 0))   # b'Hello from initrd!\n'

ramfs_add(vfs, "/notes.txt", b"some bytes")
print(vfs.read("/notes.txt", 4, 5))    # b'byte'
```

`Shell.execute(line)` runs one line directly and returns the command's exit
status (or `None` when no command ran), so sessions can be scripted without
the keyboard.

## What it does not do

- The keyboard maps only digits, lower-case letters, Enter and Backspace to
  characters. Spaces, upper case and punctuation typed through `vmdos` or
  `Keyboard.feed` are dropped, so multi-word commands such as `echo a b` can
  only be given through `Shell.execute`.
- There is no real timer: ticks advance only when `Pit.tick()` or
  `Pit.sleep()` is called, so the clock and spinner move only during
  `progress` or explicit ticking.
- The user shell is not reachable from the kernel shell and has no command of
  its own; it is used as a library over any pair of text streams.
- No files are written anywhere; the file system lives only in memory.
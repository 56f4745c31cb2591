# portable-dialogs

Dialogs from Python without a GUI toolkit. The package asks the desktop's
own helper program to draw each dialog: `osascript` on macOS, and `zenity`,
`matedialog`, `qarma` or `kdialog` on other Unix desktops. The helper runs
as a child process, so your program keeps running while the dialog is open.

No third-party libraries are needed.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Usage

```python
from portable_dialogs import settings
from portable_dialogs.dialogs import Message, Notify, OpenFile, SaveFile, SelectFolder
from portable_dialogs.options import Button, Choice, Icon, Opt
from portable_dialogs.paths import home, separator

if not settings.available():
    raise SystemExit("No dialog helper found on this system.")

settings.verbose(True)  # print every helper command to stderr

Notify("Build finished", "All targets are up to date.", Icon.INFO)

box = Message("Save changes?", "The document has unsaved changes.",
              Choice.YES_NO_CANCEL, Icon.WARNING)
if box.result() is Button.YES:
    target = SaveFile("Save as", home() + separator() + "notes.txt",
                      ["Text Files (.txt .text)", "*.txt *.text"],
                      Opt.FORCE_OVERWRITE).result()

files = OpenFile("Open files", home(),
                 ["Text Files (.txt .text)", "*.txt *.text", "All Files", "*"],
                 Opt.MULTISELECT).result()
folder = SelectFolder("Pick a folder", home()).result()
```

* `Message.result()` returns a `Button` (`OK`, `CANCEL`, `YES`, `NO`,
  `ABORT`, `RETRY` or `IGNORE`).
* `OpenFile.result()` returns a list of paths; `SaveFile.result()` and
  `SelectFolder.result()` return one path, or `""` if nothing was chosen.
* Filters are a flat list of pairs: a description followed by a
  space-separated list of patterns. The default is `("All Files", "*")`.
* `Opt` flags: `MULTISELECT` (open several files), `FORCE_OVERWRITE` (save
  without an overwrite prompt), `FORCE_PATH`. Passing a `bool` as the options
  of `OpenFile` or `SaveFile` still works but raises a `DeprecationWarning`.

Every dialog offers `ready(timeout)`, which returns `True` once the user has
answered (waiting up to `timeout` milliseconds, 20 by default), and `kill()`,
which closes the dialog early. Dialogs are also context managers that wait
for the helper to finish on exit.

```python
box = Message("Upgrade?", "Upgrading in 10 seconds.", Choice.OK_CANCEL, Icon.WARNING)
for _ in range(10):
    if box.ready(1000):
        break
upgrade = box.result() is Button.OK if box.ready() else box.kill()
```

### Settings

* `settings.available()` tells whether dialogs can be shown: always `True`
  on macOS and Windows, otherwise `True` when one of the helpers was found.
* `settings.verbose(True)` logs each helper command to stderr. The
  `PFD_VERBOSE` environment variable turns it on at start-up unless it is
  empty, `0`, `no` or `false`.
* `settings.rescan()` looks for installed helpers again.

When both zenity and kdialog are installed, `XDG_SESSION_DESKTOP` decides:
`gnome` prefers zenity, `KDE` prefers kdialog.

Each dialog class takes a keyword-only `settings=` argument holding a
`settings.Settings` instance, to use a particular helper instead of the
detected one. The command lines themselves can be built without running
anything through `commands.file_dialog_command`, `commands.notify_command`
and `commands.message_command`, and helper output can be read back with
`commands.parse_button`, `commands.parse_path` and `commands.parse_paths`.
`executor.Executor` runs a command in the background and collects its
standard output and exit code.

## Demos

```
portable-dialogs-demo
```

shows a notification, a message box, a folder picker, a file opener and a
file saver in turn, printing what was chosen. It exits with status 1 if no
dialog helper is available.

```
portable-dialogs-kill-demo
```

shows an OK/Cancel box and closes it after ten seconds if nobody answers,
then prints whether it would upgrade.

## Limitations

Dialogs are only ever drawn by an external helper program. There are no
native Windows dialogs: on Windows no helper is found, so message boxes
report `Button.CANCEL` and file dialogs return nothing. On a Unix desktop
without any of the helpers, `settings.available()` is `False`.
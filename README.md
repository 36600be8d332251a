# ideapad-applet

Read and change the settings that the Linux `ideapad-laptop` driver exposes
for Lenovo IdeaPad laptops under `/sys/bus/platform/devices/VPC2004:*/`:

| Parameter           | Kind          | Meaning                              |
|---------------------|---------------|--------------------------------------|
| `camera_power`      | on/off        | Power of the camera module           |
| `conservation_mode` | on/off        | Limit the maximum battery charge     |
| `fan_mode`          | number        | Fan mode (the applet offers 0–4)     |
| `fn_lock`           | on/off        | Fn-lock mode                         |
| `usb_charging`      | on/off        | Always-on USB charging               |

The package has three modules:

- `ideapad_applet.sysfs` reads the current values. To change a value it starts
  the privileged writer with `pkexec`.
- `ideapad_applet.writer` is that writer. It is installed as the
  `ideapad_applet_writer` command.
- `ideapad_applet.applet` holds the state of the applet popup. It turns
  messages into updates and lists the controls the popup should show.

## Installation

```
pip install .
```

Install the test dependencies with `pip install .[test]`.

## Reading values

```python
from ideapad_applet import sysfs

print(sysfs.get_conservation_mode())   # True / False
print(sysfs.get_fan_mode())            # an integer 0..255
```

`sysfs.find_device_dir()` returns the first matching device directory, and
`sysfs.param_path(name)` returns the path of one attribute in it.

`IdeapadError` is raised when no ideapad device directory is found, or when a
file holds a value that cannot be parsed. On/off files must hold `0` or `1`.
A missing or unreadable attribute file raises the usual `OSError`.

## Changing values

Only root can write the driver's files. The setters in `ideapad_applet.sysfs`
run `pkexec <dir>/ideapad_applet_writer set <parameter> <value>`. Here `<dir>`
is the directory of the running program (`sys.argv[0]`). You will be asked to
authenticate.

```python
from ideapad_applet import sysfs

sysfs.set_conservation_mode(True)
sysfs.set_fan_mode(2)
```

If the writer exits with a non-zero status, or is killed by a signal,
`IdeapadError` is raised. `set_fan_mode` raises `ValueError` for a value
outside 0..255.

You can also run the writer yourself as root:

```
ideapad_applet_writer set conservation_mode true
ideapad_applet_writer set fan_mode 2
```

On/off values take `true`, `false`, `1` or `0`, in any letter case. The
`fan_mode` value must be a whole number from 0 to 255. The command prints a
usage line and exits with status 1 when its arguments are not
`set <parameter> <value>`. It prints `Error: ...` and exits with status 1 for
an unknown parameter, a bad value, a missing device or a failed write.

## The applet state

`ideapad_applet.applet.Applet` reads every setting when it is created. A
setting that cannot be read is stored as `None`. You may pass a `backend`
object with the same `get_*` and `set_*` functions as `ideapad_applet.sysfs`.
By default it uses that module.

Pass `Message(action, value)` values to `Applet.update`. The actions come from
the `Action` enum:

- `TOGGLE_POPUP` opens the popup with a new window id, or closes it if it is
  open.
- `CLOSE_REQUESTED` closes the popup if `value` is its window id. Build this
  message with `Applet.on_close_requested(window_id)`.
- `CAMERA_POWER`, `CONSERVATION_MODE`, `FAN_MODE`, `FN_LOCK` and
  `USB_CHARGING` read that setting again.
- `SET_CAMERA_POWER`, `SET_CONSERVATION_MODE`, `SET_FAN_MODE`, `SET_FN_LOCK`
  and `SET_USB_CHARGING` write `value` and then read the setting again. If the
  write fails, the error is printed to standard error.

Two of these actions behave in a particular way:

- `SET_CONSERVATION_MODE` always stores the requested value, whether or not
  the write succeeded.
- `SET_USB_CHARGING` writes through the fn-lock setter. It then reads back
  `usb_charging`.

`Applet.controls(window_id)` returns a list of `Control` rows for the open
popup. It returns an empty list for any other window id. There is one row for
each setting that could be read:

- `fan_mode` is a `"slider"` from 0 to 4.
- The others are `"toggle"` rows.

`Control.message(value)` builds the message that sets the control's value.

## What this package does not do

It draws nothing. There is no panel icon, popup window or event loop. The
`applet` module only keeps the state and the list of controls that a desktop
panel applet would show. No command starts an applet.
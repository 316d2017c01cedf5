# fractol

`fractol` is the core of a small fractal explorer. It is plain Python with
no third-party dependencies.

## What is in it

- `fractol.complexmath`: `map_range` rescales a value from one range to
  another, for example a pixel column onto the complex plane.
  `sum_complex` and `square_complex` are the two steps of the
  Mandelbrot/Julia iteration. The module also defines the window size
  (`WIDTH`, `HEIGHT`) and a few colour constants.
- `fractol.fractal`: `Fractal` holds the view settings. These are the
  escape value (4.0), the iteration count (42), the pan offsets and the zoom.
  - `Fractal.handle_key` pans the view by 0.25 with the arrow keys (`Key`).
    For any key other than escape, it writes the key code and then calls the
    `on_render` hook. Escape calls `close`, which runs the `on_close` hook.
  - `parse_arguments` takes the arguments without the program name. It
    accepts `mandelbrot` alone, or `julia` followed by two values. For
    anything else it raises `UsageError`.
- `fractol.context`: `Mlx` is a headless window context.
  - It holds images, the instances placed in the window and a depth-sorted
    render queue.
  - `loop` runs frames until `close_window` is called. Each frame runs the
    loop hooks and records the visible draw calls in `last_frame`.
  - Hooks can be registered for keys, mouse buttons, scrolling, the cursor,
    closing and resizing. Events are delivered by calling `press_key`,
    `click_mouse`, `scroll`, `move_cursor`, `request_close` and
    `set_window_size`.
  - `set_setting` with a `Setting` changes options for windows created
    afterwards. `set_instance_depth` moves an instance to another depth.
  - `Mlx` can be used as a context manager; leaving the block calls
    `terminate`.
- `fractol.images`: `Image` is an RGBA buffer with `put_pixel` and
  nearest-neighbour `resize`. The module also has `Texture`,
  `texture_to_image`, `draw_pixel`, `fnv_hash` and `rgba_to_mono`.
- `fractol.renderqueue`: `RenderQueue` and `DrawCall` order the instances
  to be drawn.
- `fractol.xpm42`: `read_xpm42` reads the XPM42 text image format from a
  stream and `load_xpm42` reads it from a file. Both return an `Xpm`.
- `fractol.errors`: `ErrorCode`, `MlxError` and `strerror`.
- Utilities:
  - `fractol.strings`: string functions such as `split`, `strtrim`, `atoi`
    and `strncmp`.
  - `fractol.memory`: buffer functions such as `memset`, `memmove`,
    `memcmp` and `calloc`.
  - `fractol.chars`: ASCII character classification and case conversion.
  - `fractol.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, plus
    a printf-style formatter, `format_string` and `print_formatted`.
  - `fractol.linkedlist`: a singly linked list, `LinkedList`.

## Mapping pixels to the complex plane

```python
from fractol.complexmath import map_range, square_complex, sum_complex

# Pixel 400 of an 800-pixel-wide window, mapped onto [-2, 2].
x = map_range(400, -2.0, 2.0, 0, 800)

c = complex(x, 0.5)
z = 0j
z = sum_complex(square_complex(z), c)
```

## Drawing without a display

```python
from fractol.context import Mlx

with Mlx(400, 400, "fractol", False) as mlx:
    image = mlx.new_image(200, 200)
    image.put_pixel(10, 10, 0xFF0000FF)   # 0xRRGGBBAA
    mlx.image_to_window(image, 100, 100)

    mlx.loop_hook(lambda param: param.close_window(), mlx)
    mlx.loop()
    mlx.delete_image(image)
```

## Handling keys

```python
from fractol.context import Mlx
from fractol.fractal import Key, parse_arguments

fractal = parse_arguments(["mandelbrot"])
mlx = Mlx(800, 800, fractal.name, False)
mlx.key_hook(lambda data, f: f.handle_key(data.key), fractal)
mlx.press_key(Key.LEFT)      # fractal.x_mov is now -0.25
```

## Errors

- Images with a zero dimension, or one larger than 32767, raise
  `fractol.errors.MlxError` with `ErrorCode.INVDIM`.
- The XPM42 reader raises `MlxError` for the following:
  - `INVEXT` when the file name does not contain `.xpm42`;
  - `INVFILE` when the file cannot be opened;
  - `INVXPM` for malformed content. No partial image is returned.
- `strerror(code)` gives the description of an error code.
- Other misuse raises the usual Python exceptions: `ValueError`,
  `IndexError` or `TypeError`.

## What it does not do

- The package does not compute or colour the Mandelbrot or Julia sets
  itself. `Fractal.handle_key` only calls whatever `on_render` hook you
  supply.
- It opens no real window and shows nothing on screen. `Mlx` keeps all
  state in memory.
- It has no command-line program. `parse_arguments` checks an argument
  list, but nothing runs the explorer.
- It does not load PNG files.
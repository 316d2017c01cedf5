import pytest

from fractol.context import Mlx, Setting, set_instance_depth, set_setting
from fractol.errors import ErrorCode, MlxError
from fractol.fractal import Key

WIDTH = 400
HEIGHT = 400
NAME = "MLX42"


def _reset_settings():
    set_setting(Setting.STRETCH_IMAGE, False)
    set_setting(Setting.FULLSCREEN, False)
    set_setting(Setting.MAXIMIZED, False)
    set_setting(Setting.DECORATED, True)
    set_setting(Setting.HEADLESS, False)


@pytest.fixture
def mlx():
    set_setting(Setting.HEADLESS, True)
    window = Mlx(WIDTH, HEIGHT, NAME, False)
    yield window
    window.terminate()
    _reset_settings()


def test_basic_window(mlx):
    assert (mlx.width, mlx.height, mlx.title) == (WIDTH, HEIGHT, NAME)
    assert mlx.visible is False
    assert mlx.resizable is False


def test_settings_apply_to_new_window():
    set_setting(Setting.STRETCH_IMAGE, True)
    set_setting(Setting.MAXIMIZED, True)
    set_setting(Setting.DECORATED, True)
    set_setting(Setting.FULLSCREEN, True)
    set_setting(Setting.HEADLESS, True)
    try:
        window = Mlx(400, 400, NAME, False)
        assert window.maximized is True
        assert window.fullscreen is True
        assert window.decorated is True
        assert window.visible is False
        window.terminate()
        assert window.terminated is True
    finally:
        _reset_settings()


def test_invalid_setting_raises():
    with pytest.raises(ValueError):
        set_setting(5, True)


def test_invalid_window_arguments():
    with pytest.raises(ValueError):
        Mlx(0, 10, NAME)
    with pytest.raises(ValueError):
        Mlx(10, -1, NAME)
    with pytest.raises(TypeError):
        Mlx(10, 10, None)


def test_single_image(mlx):
    img = mlx.new_image(WIDTH // 2, HEIGHT // 2)
    assert img in mlx.images
    val = mlx.image_to_window(img, WIDTH // 4, HEIGHT // 4)
    assert val >= 0
    assert len(mlx.render_queue) == 1
    mlx.delete_image(img)
    assert len(mlx.render_queue) == 0
    assert img not in mlx.images


def test_multiple_images(mlx):
    img1 = mlx.new_image(WIDTH // 2, HEIGHT // 2)
    img2 = mlx.new_image(WIDTH, HEIGHT)
    val1 = mlx.image_to_window(img1, WIDTH // 4, HEIGHT // 4)
    val2 = mlx.image_to_window(img2, 0, 0)
    assert val1 >= 0 and val2 >= 0
    assert img1.instances[0].z == 0
    assert img2.instances[0].z == 1
    mlx.delete_image(img1)
    assert len(mlx.render_queue) == 1
    mlx.delete_image(img2)
    assert len(mlx.render_queue) == 0
    assert mlx.images == []


def test_repeated_instances_get_increasing_indices(mlx):
    img = mlx.new_image(10, 10)
    assert [mlx.image_to_window(img, i, i) for i in range(3)] == [0, 1, 2]
    mlx.delete_image(img)
    assert len(mlx.render_queue) == 0


def test_new_image_invalid_dimensions(mlx):
    with pytest.raises(MlxError) as info:
        mlx.new_image(0, 10)
    assert info.value.code == ErrorCode.INVDIM


def test_loop_torture(mlx):
    img = mlx.new_image(WIDTH // 2, HEIGHT // 2)
    img.pixels[:] = b"\xff" * len(img.pixels)
    assert mlx.image_to_window(img, WIDTH // 4, HEIGHT // 4) >= 0

    state = {"count": 0}

    def draw(param):
        if state["count"] >= 420:
            param.close_window()
        state["count"] += 1

    assert mlx.loop_hook(draw, mlx) is True
    mlx.loop()
    assert state["count"] == 421
    assert mlx.frames_rendered == 421
    assert [call.image for call in mlx.last_frame] == [img]
    mlx.delete_image(img)
    assert mlx.images == []


def test_loop_hooks_stop_after_close(mlx):
    calls = []
    mlx.loop_hook(lambda m: (calls.append("a"), m.close_window()), mlx)
    mlx.loop_hook(lambda m: calls.append("b"), mlx)
    mlx.loop()
    assert calls == ["a"]
    assert mlx.frames_rendered == 1


def test_loop_hook_requires_callable(mlx):
    with pytest.raises(TypeError):
        mlx.loop_hook(None, None)


def test_projection_matrix(mlx):
    img = mlx.new_image(4, 4)
    mlx.image_to_window(img, 0, 0)
    mlx.image_to_window(img, 1, 1)
    mlx.loop_hook(lambda m: m.close_window(), mlx)
    mlx.loop()
    assert mlx.projection[0] == pytest.approx(2 / WIDTH)
    assert mlx.projection[5] == pytest.approx(-2 / HEIGHT)
    assert mlx.projection[10] == pytest.approx(-0.5)
    assert mlx.projection[12:16] == [-1.0, 1.0, 0.0, 1.0]


def test_instance_depth_reorders_frame(mlx):
    first = mlx.new_image(2, 2)
    second = mlx.new_image(2, 2)
    mlx.image_to_window(first, 0, 0)
    mlx.image_to_window(second, 0, 0)
    set_instance_depth(first.instances[0], 10)
    mlx.loop_hook(lambda m: m.close_window(), mlx)
    mlx.loop()
    assert [call.image for call in mlx.last_frame] == [second, first]
    assert [call.z for call in mlx.last_frame] == [1, 10]


def test_disabled_instances_are_not_drawn(mlx):
    shown = mlx.new_image(2, 2)
    hidden = mlx.new_image(2, 2)
    mlx.image_to_window(shown, 0, 0)
    mlx.image_to_window(hidden, 0, 0)
    hidden.instances[0].enabled = False
    mlx.loop_hook(lambda m: m.close_window(), mlx)
    mlx.loop()
    assert [call.image for call in mlx.last_frame] == [shown]


def test_key_hook_receives_key_data(mlx):
    received = []
    mlx.key_hook(lambda data, param: received.append((data, param)), "param")
    mlx.press_key(Key.ESCAPE, 1, 9, 0)
    data, param = received[0]
    assert (data.key, data.action, data.scancode, data.modifiers) == (256, 1, 9, 0)
    assert param == "param"


def test_press_key_without_hook_changes_nothing(mlx):
    mlx.press_key(Key.LEFT)
    assert mlx.should_close is False


def test_mouse_scroll_cursor_and_close_hooks(mlx):
    events = []
    mlx.mouse_hook(lambda b, a, m, p: events.append(("mouse", b, a, m, p)), 1)
    mlx.scroll_hook(lambda x, y, p: events.append(("scroll", x, y, p)), 2)
    mlx.cursor_hook(lambda x, y, p: events.append(("cursor", x, y, p)), 3)
    mlx.close_hook(lambda p: p.close_window(), mlx)
    mlx.click_mouse(0, 1, 2)
    mlx.scroll(0.0, -1.5)
    mlx.move_cursor(10.5, 20.0)
    mlx.request_close()
    assert events == [
        ("mouse", 0, 1, 2, 1),
        ("scroll", 0.0, -1.5, 2),
        ("cursor", 10.5, 20.0, 3),
    ]
    assert mlx.should_close is True


def test_set_window_size_calls_resize_hook(mlx):
    sizes = []
    mlx.resize_hook(lambda w, h, p: sizes.append((w, h, p)), "p")
    mlx.set_window_size(640, 480)
    assert (mlx.width, mlx.height) == (640, 480)
    assert sizes == [(640, 480, "p")]


def test_context_manager_terminates():
    set_setting(Setting.HEADLESS, True)
    try:
        with Mlx(50, 50, NAME) as window:
            img = window.new_image(5, 5)
            window.image_to_window(img, 0, 0)
        assert window.terminated is True
        assert window.images == []
        assert len(window.render_queue) == 0
    finally:
        _reset_settings()